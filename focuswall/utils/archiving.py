# focuswall/utils/archiving.py
import logging
from datetime import datetime, timedelta
from typing import Optional

from focuswall.core.storage import BlobStorage
from focuswall.crud.goal import read_goals, write_goals
from focuswall.crud.settings import get_settings
from focuswall.crud.task import archive_task_record, read_tasks, write_tasks
from focuswall.schemas.progress import ArchiveSweepResponse
from focuswall.utils.dates import now_local, to_local

logger = logging.getLogger(__name__)


def is_due_for_archive(item, cutoff: datetime) -> bool:
    return (
        item.completed
        and not item.archived
        and item.completed_at is not None
        and to_local(item.completed_at) < cutoff
    )


async def auto_archive_items(store: BlobStorage, now: Optional[datetime] = None) -> ArchiveSweepResponse:
    """
    Archive every completed goal and task whose completion is older than the
    configured ``auto_archive_days``.

    One pass, run when a session starts; goals are archived without touching
    their tasks.
    """
    now = now or now_local()
    app_settings = await get_settings(store)
    cutoff = to_local(now) - timedelta(days=app_settings.auto_archive_days)

    goals = await read_goals(store)
    archived_goals = 0
    for i, goal in enumerate(goals):
        if is_due_for_archive(goal, cutoff):
            goals[i] = goal.model_copy(update={"archived": True, "archived_at": now})
            archived_goals += 1
    if archived_goals:
        await write_goals(goals, store)

    tasks = await read_tasks(store)
    archived_tasks = 0
    for i, task in enumerate(tasks):
        if is_due_for_archive(task, cutoff):
            tasks[i] = archive_task_record(task, now)
            archived_tasks += 1
    if archived_tasks:
        await write_tasks(tasks, store)

    if archived_goals or archived_tasks:
        logger.info(
            f"Auto-archived {archived_goals} goal(s) and {archived_tasks} task(s) "
            f"completed more than {app_settings.auto_archive_days} days ago"
        )

    return ArchiveSweepResponse(
        auto_archive_days=app_settings.auto_archive_days,
        archived_goals=archived_goals,
        archived_tasks=archived_tasks,
    )
