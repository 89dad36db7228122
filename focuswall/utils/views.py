# focuswall/utils/views.py
"""
Derived views over loaded goal and task collections.

All functions are pure: they filter what they are given, keep collection
order, and never touch storage.
"""
from datetime import date
from typing import Iterable, List, Optional, Sequence, Union

from focuswall.schemas.goal import Goal, GoalWithCounts
from focuswall.schemas.task import Task
from focuswall.utils.dates import now_local

TOP3_CAPACITY = 3

Item = Union[Goal, Task]


def is_active(item: Item) -> bool:
    return not item.completed and not item.archived


def active_goals(goals: Iterable[Goal]) -> List[Goal]:
    return [g for g in goals if is_active(g)]


def active_tasks(tasks: Iterable[Task]) -> List[Task]:
    return [t for t in tasks if is_active(t)]


def top3_tasks(tasks: Iterable[Task]) -> List[Task]:
    return [t for t in active_tasks(tasks) if t.is_top3][:TOP3_CAPACITY]


def other_tasks(tasks: Iterable[Task]) -> List[Task]:
    return [t for t in active_tasks(tasks) if not t.is_top3]


def tasks_for_goal(goal_id: str, tasks: Iterable[Task]) -> List[Task]:
    return [t for t in tasks if t.goal_id == goal_id]


def active_tasks_for_goal(goal_id: str, tasks: Iterable[Task]) -> List[Task]:
    return active_tasks(tasks_for_goal(goal_id, tasks))


def completed_goals(goals: Iterable[Goal]) -> List[Goal]:
    """Completed but not yet archived, as listed on the progress dashboard."""
    return [g for g in goals if g.completed and not g.archived]


def archived_goals(goals: Iterable[Goal]) -> List[Goal]:
    return [g for g in goals if g.archived]


def completed_tasks(tasks: Iterable[Task]) -> List[Task]:
    return [t for t in tasks if t.completed and not t.archived]


def archived_tasks(tasks: Iterable[Task]) -> List[Task]:
    return [t for t in tasks if t.archived]


def goal_for_task(task: Task, goals: Sequence[Goal]) -> Optional[Goal]:
    # A stale goal_id is treated as no goal
    if not task.goal_id:
        return None
    return next((g for g in goals if g.id == task.goal_id), None)


def is_overdue(goal: Goal, today: Optional[date] = None) -> bool:
    if goal.deadline is None:
        return False
    today = today or now_local().date()
    return goal.deadline < today


def goals_with_counts(
    goals: Iterable[Goal],
    tasks: Sequence[Task],
    today: Optional[date] = None,
) -> List[GoalWithCounts]:
    today = today or now_local().date()
    return [
        GoalWithCounts(
            **goal.model_dump(),
            active_task_count=len(active_tasks_for_goal(goal.id, tasks)),
            total_task_count=len(tasks_for_goal(goal.id, tasks)),
            is_overdue=is_overdue(goal, today),
        )
        for goal in goals
    ]
