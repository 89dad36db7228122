# focuswall/utils/analytics.py
import math
from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Optional, Sequence

from focuswall.schemas.goal import Goal
from focuswall.schemas.progress import DailyCompletion
from focuswall.schemas.task import Task
from focuswall.utils import views
from focuswall.utils.dates import last_n_days, local_date, now_local
from focuswall.utils.messages import get_random_motivational_message

HISTORY_DAYS = 7


# ────────────────────────────────────────────────────────────────────────────────
# HELPERS – COMMON
# ────────────────────────────────────────────────────────────────────────────────
def completion_day(item) -> Optional[date]:
    """Local calendar day an item was completed on, None when it isn't completed."""
    if not item.completed or item.completed_at is None:
        return None
    return local_date(item.completed_at)


def _today(today: Optional[date]) -> date:
    return today or now_local().date()


# ────────────────────────────────────────────────────────────────────────────────
# COUNTS
# ────────────────────────────────────────────────────────────────────────────────
def count_completed_on(tasks: Iterable[Task], day: date) -> int:
    return sum(1 for t in tasks if completion_day(t) == day)


def count_completed_today(tasks: Iterable[Task], today: Optional[date] = None) -> int:
    return count_completed_on(tasks, _today(today))


def count_completed_this_week(tasks: Iterable[Task], today: Optional[date] = None) -> int:
    """Completions in the trailing 7-day window that ends today."""
    today = _today(today)
    window_start = today - timedelta(days=HISTORY_DAYS - 1)
    count = 0
    for task in tasks:
        day = completion_day(task)
        if day is not None and window_start <= day <= today:
            count += 1
    return count


def completion_rate(items: Sequence[Any]) -> int:
    """Completed share of ``items`` as a whole percent (half rounds up), 0 when empty."""
    if not items:
        return 0
    completed = sum(1 for item in items if item.completed)
    return math.floor(completed * 100 / len(items) + 0.5)


def daily_completions(
    tasks: Sequence[Task],
    today: Optional[date] = None,
    days: int = HISTORY_DAYS,
) -> List[DailyCompletion]:
    """Completions per local calendar day for the last ``days`` days, oldest first."""
    return [
        DailyCompletion(day=day, count=count_completed_on(tasks, day))
        for day in last_n_days(days, _today(today))
    ]


# ────────────────────────────────────────────────────────────────────────────────
# PAGE VIEWS
# ────────────────────────────────────────────────────────────────────────────────
def build_focus_wall(
    goals: Sequence[Goal],
    tasks: Sequence[Task],
    today: Optional[date] = None,
) -> Dict[str, Any]:
    today = _today(today)
    return {
        "active_goals":    views.goals_with_counts(views.active_goals(goals), tasks, today),
        "top3_tasks":      views.top3_tasks(tasks),
        "other_tasks":     views.other_tasks(tasks),
        "completed_today": count_completed_today(tasks, today),
    }


def build_progress_summary(
    goals: Sequence[Goal],
    tasks: Sequence[Task],
    today: Optional[date] = None,
    include_messages: bool = True,
) -> Dict[str, Any]:
    today = _today(today)
    result = {
        "completed_today":      count_completed_today(tasks, today),
        "completed_this_week":  count_completed_this_week(tasks, today),
        "task_completion_rate": completion_rate(tasks),
        "goal_completion_rate": completion_rate(goals),
        "daily_completions":    daily_completions(tasks, today),
        "completed_goals":      views.completed_goals(goals),
        "archived_goals":       views.archived_goals(goals),
        "completed_tasks":      views.completed_tasks(tasks),
        "archived_tasks":       views.archived_tasks(tasks),
    }
    if include_messages:
        result["welcome_message"] = get_random_motivational_message("welcome")
        result["completion_message"] = get_random_motivational_message("completion")
    return result
