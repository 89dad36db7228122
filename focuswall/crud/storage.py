# focuswall/crud/storage.py
from datetime import datetime
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from focuswall.models.blob import StorageBlob

async def get_blob_by_key(key: str, db: AsyncSession) -> Optional[StorageBlob]:
    result = await db.execute(select(StorageBlob).where(StorageBlob.key == key))
    return result.scalar_one_or_none()

async def put_blob(key: str, value: str, db: AsyncSession) -> StorageBlob:
    blob = await get_blob_by_key(key, db)
    if blob is None:
        blob = StorageBlob(key=key, value=value)
    else:
        blob.value = value
    blob.updated_at = datetime.now()
    db.add(blob)
    await db.commit()
    await db.refresh(blob)
    return blob
