# focuswall/api/deps.py
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from focuswall.core.database import get_async_session
from focuswall.core.storage import BlobStorage, SQLBlobStorage


async def get_store(db: AsyncSession = Depends(get_async_session)) -> BlobStorage:
    """
    Storage handed to the domain store for one request. Tests override this
    dependency with an in-memory storage.
    """
    return SQLBlobStorage(db)
