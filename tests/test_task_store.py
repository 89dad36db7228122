"""Task lifecycle and Today's Top 3 rules."""

import pytest

from focuswall.core.errors import CapacityExceededError, NotFoundError, ValidationRejectedError
from focuswall.crud.goal import archive_goal, create_goal, get_goal_by_id
from focuswall.crud.task import (
    archive_task,
    create_task,
    demote_task_from_top3,
    get_task_by_id,
    get_tasks,
    permanently_delete_task,
    promote_task_to_top3,
    restore_task,
    set_task_completed,
    update_task,
)
from focuswall.schemas.goal import GoalCreate
from focuswall.schemas.task import Priority, TaskCreate, TaskUpdate
from focuswall.utils.views import top3_tasks

from conftest import local


async def make_tasks(store, count: int):
    return [await create_task(TaskCreate(title=f"Task {i}"), store) for i in range(count)]


@pytest.mark.asyncio
async def test_create_task_defaults(store) -> None:
    task = await create_task(TaskCreate(title="Lesson 1", priority="High", notes="  "), store)

    assert task.is_top3 is False
    assert task.status == "active"
    assert task.priority == Priority.high
    assert task.notes is None
    assert task.completed is False and task.archived is False


@pytest.mark.asyncio
async def test_create_task_rejects_blank_title(store) -> None:
    with pytest.raises(ValidationRejectedError):
        await create_task(TaskCreate(title=""), store)


@pytest.mark.asyncio
async def test_fourth_promotion_is_rejected_and_set_unchanged(store) -> None:
    tasks = await make_tasks(store, 4)
    for task in tasks[:3]:
        await promote_task_to_top3(task.id, store)

    with pytest.raises(CapacityExceededError):
        await promote_task_to_top3(tasks[3].id, store)

    pinned = [t.id for t in await get_tasks(store) if t.is_top3]
    assert pinned == [t.id for t in tasks[:3]]


@pytest.mark.asyncio
async def test_update_task_with_is_top3_goes_through_capacity_check(store) -> None:
    tasks = await make_tasks(store, 4)
    for task in tasks[:3]:
        await update_task(task.id, TaskUpdate(is_top3=True), store)

    with pytest.raises(CapacityExceededError):
        await update_task(tasks[3].id, TaskUpdate(is_top3=True), store)
    assert (await get_task_by_id(tasks[3].id, store)).is_top3 is False


@pytest.mark.asyncio
async def test_repromoting_pinned_task_is_noop(store) -> None:
    tasks = await make_tasks(store, 3)
    for task in tasks:
        await promote_task_to_top3(task.id, store)

    again = await promote_task_to_top3(tasks[0].id, store)

    assert again.is_top3 is True
    assert len(top3_tasks(await get_tasks(store))) == 3


@pytest.mark.asyncio
async def test_demote_frees_a_slot(store) -> None:
    tasks = await make_tasks(store, 4)
    for task in tasks[:3]:
        await promote_task_to_top3(task.id, store)

    await demote_task_from_top3(tasks[0].id, store)
    promoted = await promote_task_to_top3(tasks[3].id, store)

    assert promoted.is_top3 is True


@pytest.mark.asyncio
async def test_completing_task_clears_top3(store) -> None:
    task = (await make_tasks(store, 1))[0]
    await promote_task_to_top3(task.id, store)

    done = await set_task_completed(task.id, True, store)

    assert done.completed is True
    assert done.completed_at is not None
    assert done.is_top3 is False


@pytest.mark.asyncio
async def test_completing_via_update_wins_over_pin_in_same_call(store) -> None:
    task = (await make_tasks(store, 1))[0]

    done = await update_task(task.id, TaskUpdate(completed=True, is_top3=True), store)

    assert done.completed is True
    assert done.is_top3 is False


@pytest.mark.asyncio
async def test_completed_task_cannot_be_pinned(store) -> None:
    task = (await make_tasks(store, 1))[0]
    await set_task_completed(task.id, True, store)

    with pytest.raises(ValidationRejectedError):
        await promote_task_to_top3(task.id, store)


@pytest.mark.asyncio
async def test_recompleting_keeps_first_completed_at(store) -> None:
    task = (await make_tasks(store, 1))[0]
    first = local(2026, 10, 10)
    await set_task_completed(task.id, True, store, now=first)

    again = await set_task_completed(task.id, True, store, now=local(2026, 10, 12))

    assert again.completed_at == first


@pytest.mark.asyncio
async def test_uncomplete_task_clears_completed_at(store) -> None:
    task = (await make_tasks(store, 1))[0]
    await set_task_completed(task.id, True, store)

    reopened = await set_task_completed(task.id, False, store)

    assert reopened.completed is False
    assert reopened.completed_at is None


@pytest.mark.asyncio
async def test_archive_task_unpins_and_keeps_timestamp(store) -> None:
    task = (await make_tasks(store, 1))[0]
    await promote_task_to_top3(task.id, store)
    first = local(2026, 10, 1)

    archived = await archive_task(task.id, store, now=first)
    again = await archive_task(task.id, store, now=local(2026, 10, 5))

    assert archived.archived is True
    assert archived.is_top3 is False
    assert again.archived_at == first


@pytest.mark.asyncio
async def test_restore_task_clears_lifecycle(store) -> None:
    task = (await make_tasks(store, 1))[0]
    await set_task_completed(task.id, True, store)
    await archive_task(task.id, store)

    restored = await restore_task(task.id, store)

    assert restored.completed is False
    assert restored.completed_at is None
    assert restored.archived is False
    assert restored.archived_at is None


@pytest.mark.asyncio
async def test_permanently_delete_task(store) -> None:
    keep, gone = await make_tasks(store, 2)

    await permanently_delete_task(gone.id, store)

    assert [t.id for t in await get_tasks(store)] == [keep.id]
    with pytest.raises(NotFoundError):
        await permanently_delete_task(gone.id, store)


@pytest.mark.asyncio
async def test_update_task_can_unassign_goal(store) -> None:
    goal = await create_goal(GoalCreate(name="Learn Spanish"), store)
    task = await create_task(TaskCreate(title="Lesson 1", goal_id=goal.id), store)

    updated = await update_task(task.id, TaskUpdate(goal_id=None), store)

    assert updated.goal_id is None
    assert updated.title == "Lesson 1"


@pytest.mark.asyncio
async def test_update_missing_task_is_not_found(store) -> None:
    with pytest.raises(NotFoundError):
        await update_task("missing", TaskUpdate(title="x"), store)


@pytest.mark.asyncio
async def test_learn_spanish_walkthrough(store) -> None:
    goal = await create_goal(GoalCreate(name="Learn Spanish"), store)
    assert goal.completed is False and goal.archived is False

    lesson = await create_task(TaskCreate(title="Lesson 1", goal_id=goal.id, priority="High"), store)
    assert lesson.is_top3 is False

    others = await make_tasks(store, 3)
    for task in [lesson, *others[:2]]:
        await promote_task_to_top3(task.id, store)
    with pytest.raises(CapacityExceededError):
        await promote_task_to_top3(others[2].id, store)

    done = await set_task_completed(lesson.id, True, store)
    assert done.is_top3 is False

    await archive_goal(goal.id, store, cascade=True)
    assert (await get_task_by_id(lesson.id, store)).archived is True
    assert (await get_goal_by_id(goal.id, store)).archived is True
