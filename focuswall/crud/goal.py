# focuswall/crud/goal.py
"""
Goal store operations.

Goals own their tasks only loosely (``Task.goal_id``). Operations that
cascade write the goals blob first and the tasks blob second; the two writes
are not atomic, so every cascade is safe to re-run and finishes whatever a
previous call left undone.
"""
import logging
from datetime import datetime
from typing import List, Optional

from focuswall.core.config import settings
from focuswall.core.errors import ActiveTasksRemainError
from focuswall.core.storage import BlobStorage
from focuswall.crud.collection import find_index, new_id, read_collection, require_text, write_collection
from focuswall.crud.task import archive_task_record, read_tasks, write_tasks
from focuswall.schemas.goal import Goal, GoalCreate, GoalUpdate
from focuswall.utils.dates import now_local
from focuswall.utils.schema_upgrade import upcast_goal
from focuswall.utils.views import active_tasks_for_goal

logger = logging.getLogger(__name__)


async def read_goals(store: BlobStorage) -> List[Goal]:
    """Strict read used before every write."""
    return await read_collection(settings.GOALS_KEY, Goal, upcast_goal, store)


async def write_goals(goals: List[Goal], store: BlobStorage) -> None:
    await write_collection(settings.GOALS_KEY, goals, store)


async def get_goals(store: BlobStorage) -> List[Goal]:
    return await read_collection(settings.GOALS_KEY, Goal, upcast_goal, store, degrade=True)


async def get_goal_by_id(goal_id: str, store: BlobStorage) -> Goal:
    goals = await read_goals(store)
    return goals[find_index(goals, goal_id, "Goal")]


async def create_goal(goal_in: GoalCreate, store: BlobStorage, now: Optional[datetime] = None) -> Goal:
    name = require_text(goal_in.name, "goal name")
    goals = await read_goals(store)
    new_goal = Goal(
        **goal_in.model_dump(exclude={"name"}),
        name=name,
        id=new_id(goals),
        created_at=now or now_local(),
    )
    goals.append(new_goal)
    await write_goals(goals, store)
    logger.info(f"Created goal {new_goal.id}")
    return new_goal


async def update_goal(
    goal_id: str,
    goal_in: GoalUpdate,
    store: BlobStorage,
    now: Optional[datetime] = None,
) -> Goal:
    goals = await read_goals(store)
    index = find_index(goals, goal_id, "Goal")
    goal = goals[index]
    changes = goal_in.model_dump(exclude_unset=True)

    if "name" in changes:
        changes["name"] = require_text(changes["name"], "goal name")

    if changes.get("completed") is None:
        changes.pop("completed", None)
    elif changes["completed"]:
        if not goal.completed:
            remaining = active_tasks_for_goal(goal_id, await read_tasks(store))
            if remaining:
                raise ActiveTasksRemainError(goal_id, len(remaining))
        changes["completed_at"] = goal.completed_at if goal.completed else (now or now_local())
    else:
        changes["completed_at"] = None

    goals[index] = goal.model_copy(update=changes)
    await write_goals(goals, store)
    return goals[index]


async def set_goal_completed(
    goal_id: str,
    completed: bool,
    store: BlobStorage,
    now: Optional[datetime] = None,
) -> Goal:
    goal = await update_goal(goal_id, GoalUpdate(completed=completed), store, now=now)
    logger.info(f"Goal {goal_id} marked {'completed' if completed else 'not completed'}")
    return goal


async def archive_goal(
    goal_id: str,
    store: BlobStorage,
    cascade: bool = True,
    now: Optional[datetime] = None,
) -> Goal:
    now = now or now_local()
    goals = await read_goals(store)
    index = find_index(goals, goal_id, "Goal")

    # Step 1: the goal itself
    if not goals[index].archived:
        goals[index] = goals[index].model_copy(update={"archived": True, "archived_at": now})
        await write_goals(goals, store)
        logger.info(f"Archived goal {goal_id}")

    # Step 2: tasks referencing the goal, also on re-entry
    if cascade:
        tasks = await read_tasks(store)
        archived_count = 0
        for i, task in enumerate(tasks):
            if task.goal_id == goal_id and not task.archived:
                tasks[i] = archive_task_record(task, now)
                archived_count += 1
        if archived_count:
            await write_tasks(tasks, store)
            logger.info(f"Archived {archived_count} task(s) of goal {goal_id}")

    return goals[index]


async def restore_goal(goal_id: str, store: BlobStorage) -> Goal:
    goals = await read_goals(store)
    index = find_index(goals, goal_id, "Goal")
    goals[index] = goals[index].model_copy(update={
        "completed": False,
        "completed_at": None,
        "archived": False,
        "archived_at": None,
    })
    await write_goals(goals, store)
    logger.info(f"Restored goal {goal_id}")
    return goals[index]


async def permanently_delete_goal(goal_id: str, store: BlobStorage) -> None:
    goals = await read_goals(store)
    find_index(goals, goal_id, "Goal")
    await write_goals([g for g in goals if g.id != goal_id], store)

    tasks = await read_tasks(store)
    remaining = [t for t in tasks if t.goal_id != goal_id]
    if len(remaining) != len(tasks):
        await write_tasks(remaining, store)
    logger.info(f"Permanently deleted goal {goal_id} and {len(tasks) - len(remaining)} task(s)")
