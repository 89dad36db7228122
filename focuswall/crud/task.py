# focuswall/crud/task.py
import logging
from datetime import datetime
from typing import List, Optional

from focuswall.core.config import settings
from focuswall.core.errors import CapacityExceededError, ValidationRejectedError
from focuswall.core.storage import BlobStorage
from focuswall.crud.collection import find_index, new_id, read_collection, require_text, write_collection
from focuswall.schemas.task import Task, TaskCreate, TaskUpdate
from focuswall.utils.dates import now_local
from focuswall.utils.schema_upgrade import upcast_task
from focuswall.utils.views import TOP3_CAPACITY, is_active

logger = logging.getLogger(__name__)


async def read_tasks(store: BlobStorage) -> List[Task]:
    """Strict read used before every write."""
    return await read_collection(settings.TASKS_KEY, Task, upcast_task, store)


async def write_tasks(tasks: List[Task], store: BlobStorage) -> None:
    await write_collection(settings.TASKS_KEY, tasks, store)


async def get_tasks(store: BlobStorage) -> List[Task]:
    return await read_collection(settings.TASKS_KEY, Task, upcast_task, store, degrade=True)


async def get_task_by_id(task_id: str, store: BlobStorage) -> Task:
    tasks = await read_tasks(store)
    return tasks[find_index(tasks, task_id, "Task")]


async def create_task(task_in: TaskCreate, store: BlobStorage, now: Optional[datetime] = None) -> Task:
    title = require_text(task_in.title, "task title")
    tasks = await read_tasks(store)
    new_task = Task(
        **task_in.model_dump(exclude={"title"}),
        title=title,
        id=new_id(tasks),
        created_at=now or now_local(),
    )
    tasks.append(new_task)
    await write_tasks(tasks, store)
    logger.info(f"Created task {new_task.id} ({new_task.priority.value})")
    return new_task


def _check_top3_capacity(task: Task, tasks: List[Task]) -> None:
    if not is_active(task):
        raise ValidationRejectedError("Only active tasks can be added to Today's Top 3")
    pinned = [t for t in tasks if t.is_top3 and is_active(t) and t.id != task.id]
    if len(pinned) >= TOP3_CAPACITY:
        raise CapacityExceededError(TOP3_CAPACITY)


def apply_task_update(task: Task, changes: dict, tasks: List[Task], now: datetime) -> Task:
    """Merge ``changes`` into ``task`` while keeping the Top 3 and completion rules."""
    # An explicit null means "leave as is" for the non-nullable fields
    for field in ("priority", "status", "is_top3", "completed"):
        if field in changes and changes[field] is None:
            del changes[field]

    if "title" in changes:
        changes["title"] = require_text(changes["title"], "task title")

    if "completed" in changes:
        if changes["completed"]:
            changes["completed_at"] = task.completed_at if task.completed else now
            # A completed task can't stay pinned
            changes["is_top3"] = False
        else:
            changes["completed_at"] = None

    if changes.get("is_top3") and not task.is_top3:
        _check_top3_capacity(task.model_copy(update=changes), tasks)

    return task.model_copy(update=changes)


async def update_task(
    task_id: str,
    task_in: TaskUpdate,
    store: BlobStorage,
    now: Optional[datetime] = None,
) -> Task:
    tasks = await read_tasks(store)
    index = find_index(tasks, task_id, "Task")
    changes = task_in.model_dump(exclude_unset=True)
    tasks[index] = apply_task_update(tasks[index], changes, tasks, now or now_local())
    await write_tasks(tasks, store)
    return tasks[index]


async def set_task_completed(
    task_id: str,
    completed: bool,
    store: BlobStorage,
    now: Optional[datetime] = None,
) -> Task:
    task = await update_task(task_id, TaskUpdate(completed=completed), store, now=now)
    logger.info(f"Task {task_id} marked {'completed' if completed else 'not completed'}")
    return task


async def promote_task_to_top3(task_id: str, store: BlobStorage) -> Task:
    return await update_task(task_id, TaskUpdate(is_top3=True), store)


async def demote_task_from_top3(task_id: str, store: BlobStorage) -> Task:
    return await update_task(task_id, TaskUpdate(is_top3=False), store)


def archive_task_record(task: Task, now: datetime) -> Task:
    if task.archived:
        # Keep the original archived_at on re-entry
        return task
    return task.model_copy(update={"archived": True, "archived_at": now, "is_top3": False})


async def archive_task(task_id: str, store: BlobStorage, now: Optional[datetime] = None) -> Task:
    tasks = await read_tasks(store)
    index = find_index(tasks, task_id, "Task")
    if tasks[index].archived:
        return tasks[index]
    tasks[index] = archive_task_record(tasks[index], now or now_local())
    await write_tasks(tasks, store)
    logger.info(f"Archived task {task_id}")
    return tasks[index]


async def restore_task(task_id: str, store: BlobStorage) -> Task:
    tasks = await read_tasks(store)
    index = find_index(tasks, task_id, "Task")
    tasks[index] = tasks[index].model_copy(update={
        "completed": False,
        "completed_at": None,
        "archived": False,
        "archived_at": None,
        "is_top3": False,
    })
    await write_tasks(tasks, store)
    logger.info(f"Restored task {task_id}")
    return tasks[index]


async def permanently_delete_task(task_id: str, store: BlobStorage) -> None:
    tasks = await read_tasks(store)
    find_index(tasks, task_id, "Task")
    await write_tasks([t for t in tasks if t.id != task_id], store)
    logger.info(f"Permanently deleted task {task_id}")
