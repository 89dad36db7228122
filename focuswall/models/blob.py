# focuswall/models/blob.py
from sqlalchemy import Column, String, Text, DateTime
from focuswall.core.database import Base

class StorageBlob(Base):
    __tablename__ = "storage_blobs"

    # One row per persisted collection (goals, tasks, settings)
    key = Column(String(length=100), primary_key=True)
    # Whole collection serialized as JSON text
    value = Column(Text, nullable=False)

    updated_at = Column(DateTime, default=None)

    def __repr__(self):
        return f"<StorageBlob key={self.key} size={len(self.value or '')}>"
