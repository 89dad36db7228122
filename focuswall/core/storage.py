# focuswall/core/storage.py
"""
Keyed text-blob persistence used by the domain store.

The store never touches the database directly: it is handed a ``BlobStorage``
so the same code runs against the SQLAlchemy table in the app and against a
plain dict in tests.
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from focuswall.core.errors import StorageUnavailableError
from focuswall.crud.storage import get_blob_by_key, put_blob

logger = logging.getLogger(__name__)


class BlobStorage(ABC):
    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Return the stored text for ``key`` or None when nothing was written yet."""

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Replace the text stored under ``key``."""


class SQLBlobStorage(BlobStorage):
    """Blobs kept in the ``storage_blobs`` table; every write commits on its own."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, key: str) -> Optional[str]:
        try:
            blob = await get_blob_by_key(key, self.db)
        except SQLAlchemyError as e:
            logger.error(f"Failed to read blob {key}: {str(e)}")
            raise StorageUnavailableError("Storage is not available") from e
        return blob.value if blob else None

    async def set(self, key: str, value: str) -> None:
        try:
            await put_blob(key, value, self.db)
        except SQLAlchemyError as e:
            logger.error(f"Failed to write blob {key}: {str(e)}")
            await self.db.rollback()
            raise StorageUnavailableError("Storage is not available") from e


class MemoryBlobStorage(BlobStorage):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.blobs: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self.blobs.get(key)

    async def set(self, key: str, value: str) -> None:
        self.blobs[key] = value
