"""Pytest fixtures for Focus Wall tests."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from focuswall.api.deps import get_store
from focuswall.core.errors import StorageUnavailableError
from focuswall.core.storage import BlobStorage, MemoryBlobStorage
from focuswall.main import app


def local(year: int, month: int, day: int, hour: int = 12, minute: int = 0) -> datetime:
    """Aware datetime in the local time zone."""
    return datetime(year, month, day, hour, minute).astimezone()


class BrokenStorage(BlobStorage):
    async def get(self, key):
        raise StorageUnavailableError("Storage is not available")

    async def set(self, key, value):
        raise StorageUnavailableError("Storage is not available")


@pytest.fixture
def store() -> MemoryBlobStorage:
    return MemoryBlobStorage()


@pytest.fixture
def client(store: MemoryBlobStorage):
    """API client whose requests all share the in-memory ``store``."""
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client():
    app.dependency_overrides[get_store] = lambda: BrokenStorage()
    yield TestClient(app)
    app.dependency_overrides.clear()
