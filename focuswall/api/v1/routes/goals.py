# focuswall/api/v1/routes/goals.py
from fastapi import APIRouter, Depends, Query, status
from typing import List

from focuswall.api.deps import get_store
from focuswall.core.storage import BlobStorage
from focuswall.crud.goal import (
    archive_goal,
    create_goal,
    get_goal_by_id,
    get_goals,
    permanently_delete_goal,
    restore_goal,
    set_goal_completed,
    update_goal,
)
from focuswall.crud.task import get_tasks
from focuswall.schemas.goal import Goal, GoalCreate, GoalUpdate, GoalWithCounts
from focuswall.utils.views import goals_with_counts

router = APIRouter(prefix="/goals", tags=["goals"])

@router.get("", response_model=List[GoalWithCounts])
async def read_goals(store: BlobStorage = Depends(get_store)):
    goals = await get_goals(store)
    tasks = await get_tasks(store)
    return goals_with_counts(goals, tasks)

@router.post("", response_model=Goal, status_code=status.HTTP_201_CREATED)
async def create_goal_endpoint(goal_in: GoalCreate, store: BlobStorage = Depends(get_store)):
    return await create_goal(goal_in, store)

@router.get("/{goal_id}", response_model=GoalWithCounts)
async def read_goal(goal_id: str, store: BlobStorage = Depends(get_store)):
    """Single goal with its active and total task counts (edit-goal page)."""
    goal = await get_goal_by_id(goal_id, store)
    tasks = await get_tasks(store)
    return goals_with_counts([goal], tasks)[0]

@router.patch("/{goal_id}", response_model=Goal)
async def update_goal_endpoint(goal_id: str, goal_in: GoalUpdate, store: BlobStorage = Depends(get_store)):
    return await update_goal(goal_id, goal_in, store)

@router.post("/{goal_id}/complete", response_model=Goal)
async def complete_goal(goal_id: str, store: BlobStorage = Depends(get_store)):
    return await set_goal_completed(goal_id, True, store)

@router.post("/{goal_id}/uncomplete", response_model=Goal)
async def uncomplete_goal(goal_id: str, store: BlobStorage = Depends(get_store)):
    return await set_goal_completed(goal_id, False, store)

@router.post("/{goal_id}/archive", response_model=Goal)
async def archive_goal_endpoint(
    goal_id: str,
    cascade: bool = Query(True, description="Also archive the goal's tasks"),
    store: BlobStorage = Depends(get_store),
):
    return await archive_goal(goal_id, store, cascade=cascade)

@router.post("/{goal_id}/restore", response_model=Goal)
async def restore_goal_endpoint(goal_id: str, store: BlobStorage = Depends(get_store)):
    return await restore_goal(goal_id, store)

@router.delete("/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_goal_endpoint(goal_id: str, store: BlobStorage = Depends(get_store)):
    """Permanently delete a goal and every task attached to it. This cannot be undone."""
    await permanently_delete_goal(goal_id, store)
    return None
