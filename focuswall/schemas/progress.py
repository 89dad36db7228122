# focuswall/schemas/progress.py
from typing import List, Optional
from pydantic import BaseModel
from datetime import date

from focuswall.schemas.goal import Goal, GoalWithCounts
from focuswall.schemas.task import Task

class DailyCompletion(BaseModel):
    day: date
    count: int

class FocusWallResponse(BaseModel):
    active_goals: List[GoalWithCounts]
    top3_tasks: List[Task]
    other_tasks: List[Task]
    completed_today: int

class ProgressSummaryResponse(BaseModel):
    completed_today: int
    completed_this_week: int
    task_completion_rate: int
    goal_completion_rate: int
    daily_completions: List[DailyCompletion]
    completed_goals: List[Goal]
    archived_goals: List[Goal]
    completed_tasks: List[Task]
    archived_tasks: List[Task]
    welcome_message: Optional[str] = None
    completion_message: Optional[str] = None

class ArchiveSweepResponse(BaseModel):
    auto_archive_days: int
    archived_goals: int
    archived_tasks: int
