"""SQLAlchemy-backed blob storage on a temporary SQLite file."""

from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from focuswall.core.database import Base
from focuswall.core.errors import StorageUnavailableError
from focuswall.core.storage import SQLBlobStorage
from focuswall.crud.goal import archive_goal, create_goal, get_goals
from focuswall.crud.settings import get_settings
from focuswall.crud.storage import get_blob_by_key
from focuswall.crud.task import create_task, get_tasks
from focuswall.schemas.goal import GoalCreate
from focuswall.schemas.task import TaskCreate


async def make_session_factory(tmp_path: Path, create_tables: bool = True):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'focus_wall.db'}")
    if create_tables:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    return engine, async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)


@pytest.mark.asyncio
async def test_blob_set_and_get(tmp_path: Path) -> None:
    engine, session_factory = await make_session_factory(tmp_path)
    try:
        async with session_factory() as session:
            store = SQLBlobStorage(session)
            assert await store.get("focus_wall_goals") is None
            await store.set("focus_wall_goals", "[]")
            await store.set("focus_wall_goals", '[{"id": "x"}]')

        async with session_factory() as session:
            blob = await get_blob_by_key("focus_wall_goals", session)
            assert blob.value == '[{"id": "x"}]'
            assert blob.updated_at is not None
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_store_survives_new_sessions(tmp_path: Path) -> None:
    engine, session_factory = await make_session_factory(tmp_path)
    try:
        async with session_factory() as session:
            store = SQLBlobStorage(session)
            goal = await create_goal(GoalCreate(name="Learn Spanish"), store)
            await create_task(TaskCreate(title="Lesson 1", goal_id=goal.id), store)
            await archive_goal(goal.id, store, cascade=True)

        async with session_factory() as session:
            store = SQLBlobStorage(session)
            goals = await get_goals(store)
            tasks = await get_tasks(store)
            assert [g.name for g in goals] == ["Learn Spanish"]
            assert goals[0].archived is True
            assert tasks[0].archived is True
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_database_errors_become_storage_unavailable(tmp_path: Path) -> None:
    engine, session_factory = await make_session_factory(tmp_path, create_tables=False)
    try:
        async with session_factory() as session:
            store = SQLBlobStorage(session)
            with pytest.raises(StorageUnavailableError):
                await store.get("focus_wall_goals")

            assert await get_goals(store) == []
            assert await get_tasks(store) == []
            assert (await get_settings(store)).auto_archive_days == 90
            with pytest.raises(StorageUnavailableError):
                await create_goal(GoalCreate(name="Learn Spanish"), store)
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_failed_write_rolls_back_session(tmp_path: Path) -> None:
    engine, session_factory = await make_session_factory(tmp_path, create_tables=False)
    try:
        async with session_factory() as session:
            store = SQLBlobStorage(session)
            with pytest.raises(StorageUnavailableError):
                await store.set("focus_wall_goals", "[]")

            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)

            # The same session is usable again once the table exists
            await store.set("focus_wall_goals", "[]")
            assert await store.get("focus_wall_goals") == "[]"
    finally:
        await engine.dispose()
