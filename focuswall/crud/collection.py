# focuswall/crud/collection.py
"""
Helpers shared by the goal and task store.

Each collection lives in one blob as a JSON array. Reads for display degrade
to an empty list when storage is unusable; reads that precede a write never
degrade, so a failed read can't be written back as an empty collection.
"""
import json
import logging
import uuid
from typing import Any, Callable, Dict, List, Optional, Sequence, Type, TypeVar
from pydantic import BaseModel, ValidationError

from focuswall.core.errors import NotFoundError, StorageUnavailableError, ValidationRejectedError
from focuswall.core.storage import BlobStorage
from focuswall.schemas.common import MAX_TITLE_LENGTH

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


async def _load(
    key: str,
    model: Type[M],
    upcast: Callable[[Dict[str, Any]], Dict[str, Any]],
    store: BlobStorage,
) -> List[M]:
    raw = await store.get(key)
    if not raw:
        return []
    try:
        records = json.loads(raw)
        if not isinstance(records, list):
            raise ValueError(f"expected a JSON array, got {type(records).__name__}")
        return [model.model_validate(upcast(record)) for record in records]
    except (TypeError, ValueError, ValidationError) as e:
        # TypeError covers array entries that are not objects
        logger.error(f"Stored {key} is malformed: {str(e)}")
        raise StorageUnavailableError(f"Stored {key} could not be read") from e


async def read_collection(
    key: str,
    model: Type[M],
    upcast: Callable[[Dict[str, Any]], Dict[str, Any]],
    store: BlobStorage,
    degrade: bool = False,
) -> List[M]:
    try:
        return await _load(key, model, upcast, store)
    except StorageUnavailableError as e:
        if not degrade:
            raise
        logger.warning(f"⚠️ Reading {key} failed ({e.detail}); showing an empty collection")
        return []


async def write_collection(key: str, records: Sequence[BaseModel], store: BlobStorage) -> None:
    payload = json.dumps([record.model_dump(mode="json") for record in records])
    await store.set(key, payload)


def find_index(records: Sequence[Any], item_id: str, kind: str) -> int:
    for index, record in enumerate(records):
        if record.id == item_id:
            return index
    raise NotFoundError(kind, item_id)


def new_id(records: Sequence[Any]) -> str:
    existing = {record.id for record in records}
    while True:
        candidate = str(uuid.uuid4())
        if candidate not in existing:
            return candidate


def require_text(value: Optional[str], label: str) -> str:
    """Reject blank or overlong names/titles the way the entry forms do."""
    value = (value or "").strip()
    if not value:
        raise ValidationRejectedError(f"Please enter a {label}")
    if len(value) > MAX_TITLE_LENGTH:
        raise ValidationRejectedError(
            f"The {label} must be at most {MAX_TITLE_LENGTH} characters"
        )
    return value
