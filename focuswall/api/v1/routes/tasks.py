# focuswall/api/v1/routes/tasks.py
from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional

from focuswall.api.deps import get_store
from focuswall.core.storage import BlobStorage
from focuswall.crud.task import (
    archive_task,
    create_task,
    demote_task_from_top3,
    get_task_by_id,
    get_tasks,
    permanently_delete_task,
    promote_task_to_top3,
    restore_task,
    set_task_completed,
    update_task,
)
from focuswall.schemas.task import Task, TaskCreate, TaskUpdate
from focuswall.utils.views import tasks_for_goal

router = APIRouter(prefix="/tasks", tags=["tasks"])

@router.get("", response_model=List[Task])
async def read_tasks(
    goal_id: Optional[str] = Query(None, description="Only tasks attached to this goal"),
    store: BlobStorage = Depends(get_store),
):
    tasks = await get_tasks(store)
    if goal_id is not None:
        return tasks_for_goal(goal_id, tasks)
    return tasks

@router.post("", response_model=Task, status_code=status.HTTP_201_CREATED)
async def create_task_endpoint(task_in: TaskCreate, store: BlobStorage = Depends(get_store)):
    return await create_task(task_in, store)

@router.get("/{task_id}", response_model=Task)
async def read_task(task_id: str, store: BlobStorage = Depends(get_store)):
    return await get_task_by_id(task_id, store)

@router.patch("/{task_id}", response_model=Task)
async def update_task_endpoint(task_id: str, task_in: TaskUpdate, store: BlobStorage = Depends(get_store)):
    return await update_task(task_id, task_in, store)

@router.post("/{task_id}/complete", response_model=Task)
async def complete_task(task_id: str, store: BlobStorage = Depends(get_store)):
    return await set_task_completed(task_id, True, store)

@router.post("/{task_id}/uncomplete", response_model=Task)
async def uncomplete_task(task_id: str, store: BlobStorage = Depends(get_store)):
    return await set_task_completed(task_id, False, store)

@router.post("/{task_id}/top3", response_model=Task)
async def pin_task(task_id: str, store: BlobStorage = Depends(get_store)):
    """Move a task into Today's Top 3 (refused with 409 when it is full)."""
    return await promote_task_to_top3(task_id, store)

@router.delete("/{task_id}/top3", response_model=Task)
async def unpin_task(task_id: str, store: BlobStorage = Depends(get_store)):
    return await demote_task_from_top3(task_id, store)

@router.post("/{task_id}/archive", response_model=Task)
async def archive_task_endpoint(task_id: str, store: BlobStorage = Depends(get_store)):
    return await archive_task(task_id, store)

@router.post("/{task_id}/restore", response_model=Task)
async def restore_task_endpoint(task_id: str, store: BlobStorage = Depends(get_store)):
    return await restore_task(task_id, store)

@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task_endpoint(task_id: str, store: BlobStorage = Depends(get_store)):
    await permanently_delete_task(task_id, store)
    return None
