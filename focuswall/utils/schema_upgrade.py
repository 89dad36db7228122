# focuswall/utils/schema_upgrade.py
"""
Upcasting of raw persisted records to the current schema.

Every record read from storage passes through here before it is validated
into a model. Records written before lifecycle tracking existed have no
``schema_version`` and are treated as version 1.

    v1 -> v2   completed/completed_at/archived/archived_at back-filled
               (tasks also get is_top3 and status when missing)

Records with a newer version than this code knows are refused.
"""
import logging
from typing import Any, Callable, Dict

from focuswall.core.errors import StorageUnavailableError
from focuswall.schemas.common import CURRENT_SCHEMA_VERSION

logger = logging.getLogger(__name__)

Record = Dict[str, Any]

LEGACY_SCHEMA_VERSION = 1


def _fill_lifecycle(record: Record) -> Record:
    record.setdefault("completed", False)
    record.setdefault("completed_at", None)
    record.setdefault("archived", False)
    record.setdefault("archived_at", None)
    # Old clients may have written explicit nulls instead of omitting the key
    if record["completed"] is None:
        record["completed"] = False
    if record["archived"] is None:
        record["archived"] = False
    return record


def _goal_v1_to_v2(record: Record) -> Record:
    return _fill_lifecycle(record)


def _task_v1_to_v2(record: Record) -> Record:
    record = _fill_lifecycle(record)
    if record.get("is_top3") is None:
        record["is_top3"] = False
    if record.get("status") is None:
        record["status"] = "active"
    return record


GOAL_UPCASTS: Dict[int, Callable[[Record], Record]] = {
    1: _goal_v1_to_v2,
}

TASK_UPCASTS: Dict[int, Callable[[Record], Record]] = {
    1: _task_v1_to_v2,
}


def _upcast(record: Record, steps: Dict[int, Callable[[Record], Record]], kind: str) -> Record:
    upgraded = dict(record)
    version = upgraded.get("schema_version") or LEGACY_SCHEMA_VERSION

    if version > CURRENT_SCHEMA_VERSION:
        logger.error(
            f"{kind} {upgraded.get('id')} has schema_version {version}, "
            f"newer than {CURRENT_SCHEMA_VERSION}"
        )
        raise StorageUnavailableError(
            f"{kind} records were written by a newer version of Focus Wall"
        )

    while version < CURRENT_SCHEMA_VERSION:
        upgraded = steps[version](upgraded)
        version += 1

    upgraded["schema_version"] = CURRENT_SCHEMA_VERSION
    return upgraded


def upcast_goal(record: Record) -> Record:
    return _upcast(record, GOAL_UPCASTS, "Goal")


def upcast_task(record: Record) -> Record:
    upgraded = _upcast(record, TASK_UPCASTS, "Task")
    # Older clients left the pin on completed and archived tasks
    if upgraded.get("completed") or upgraded.get("archived"):
        upgraded["is_top3"] = False
    return upgraded


def upcast_settings(record: Record, default_days: int) -> Record:
    upgraded = dict(record)
    if upgraded.get("auto_archive_days") is None:
        upgraded["auto_archive_days"] = default_days
    return upgraded
