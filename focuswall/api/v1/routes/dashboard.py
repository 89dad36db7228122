# focuswall/api/v1/routes/dashboard.py
from fastapi import APIRouter, Depends, Query

from focuswall.api.deps import get_store
from focuswall.core.storage import BlobStorage
from focuswall.crud.goal import get_goals
from focuswall.crud.task import get_tasks
from focuswall.schemas.progress import ArchiveSweepResponse, FocusWallResponse, ProgressSummaryResponse
from focuswall.utils.analytics import build_focus_wall, build_progress_summary
from focuswall.utils.archiving import auto_archive_items

router = APIRouter(tags=["dashboard"])

@router.get("/focus-wall", response_model=FocusWallResponse)
async def get_focus_wall(store: BlobStorage = Depends(get_store)):
    """
    Returns what the focus wall shows:
    - active goals with their active/total task counts and overdue flag
    - Today's Top 3 and the remaining active tasks
    - number of tasks completed today
    """
    goals = await get_goals(store)
    tasks = await get_tasks(store)
    return build_focus_wall(goals, tasks)

@router.get("/dashboard/progress", response_model=ProgressSummaryResponse)
async def get_progress_dashboard(
    include_messages: bool = Query(True, description="Add random motivational messages"),
    store: BlobStorage = Depends(get_store),
):
    """
    Retrospective view:
    - completed today / this week, task and goal completion rates
    - completions per day for the last 7 days, oldest first
    - completed and archived goals and tasks, restorable from here
    """
    goals = await get_goals(store)
    tasks = await get_tasks(store)
    return build_progress_summary(goals, tasks, include_messages=include_messages)

@router.post("/archive/sweep", response_model=ArchiveSweepResponse)
async def run_archive_sweep(store: BlobStorage = Depends(get_store)):
    return await auto_archive_items(store)
