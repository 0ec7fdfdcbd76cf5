"""Unit tests for the in-memory repositories."""

from datetime import timedelta
from uuid import uuid4

import pytest

from thredge.domain.model import Thread
from thredge.domain.value import ThreadId
from thredge.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryEntryRepository,
    InMemoryThreadRepository,
)
from tests.factories import BASE_TIME, THREAD_ID, make_entry, names


def make_thread(title: str, minutes: int = 0, **fields) -> Thread:
    at = BASE_TIME + timedelta(minutes=minutes)
    return Thread(
        id=ThreadId(uuid4()),
        title=title,
        created_at=at,
        updated_at=at,
        last_activity_at=at,
        **fields,
    )


class TestInMemoryThreadRepository:
    @pytest.mark.asyncio
    async def test_find_all_orders_pinned_then_activity(self):
        # Arrange
        repo = InMemoryThreadRepository()
        await repo.save(make_thread("old", minutes=0))
        await repo.save(make_thread("new", minutes=10))
        await repo.save(make_thread("pinned", minutes=-10, pinned=True))
        await repo.save(make_thread("hidden", minutes=20, hidden=True))

        # Act
        threads = await repo.find_all()

        # Assert
        assert [t.title for t in threads] == ["pinned", "new", "old"]
        assert await repo.count() == 3
        assert await repo.count(include_hidden=True) == 4

    @pytest.mark.asyncio
    async def test_hidden_thread_needs_include_hidden(self):
        repo = InMemoryThreadRepository()
        thread = await repo.save(make_thread("hidden", hidden=True))

        assert await repo.find_by_id(thread.id) is None
        assert await repo.find_by_id(thread.id, include_hidden=True) == thread

    @pytest.mark.asyncio
    async def test_touch_updates_last_activity(self):
        repo = InMemoryThreadRepository()
        thread = await repo.save(make_thread("t"))
        later = BASE_TIME + timedelta(hours=1)

        await repo.touch(thread.id, later)

        assert (await repo.find_by_id(thread.id)).last_activity_at == later


class TestInMemoryEntryRepository:
    @pytest.mark.asyncio
    async def test_max_order_index_includes_hidden_siblings(self):
        # Arrange
        repo = InMemoryEntryRepository()
        root = make_entry("root", order_index=1000)
        await repo.save(root)
        await repo.save(make_entry("c1", parent=root, order_index=1000))
        hidden = make_entry("c2", parent=root, order_index=2000)
        await repo.save(hidden.model_copy(update={"hidden": True}))

        # Act / Assert
        assert await repo.max_order_index(THREAD_ID, root.id) == 2000
        assert await repo.max_order_index(THREAD_ID, None) == 1000
        assert await repo.max_order_index(ThreadId(uuid4()), None) is None

    @pytest.mark.asyncio
    async def test_find_by_thread_filters_hidden(self):
        repo = InMemoryEntryRepository()
        visible = await repo.save(make_entry("visible"))
        hidden = await repo.save(make_entry("hidden").model_copy(update={"hidden": True}))

        assert await repo.find_by_thread(THREAD_ID) == [visible]
        assert len(await repo.find_by_thread(THREAD_ID, include_hidden=True)) == 2
        assert await repo.find_by_id(hidden.id) is None

    @pytest.mark.asyncio
    async def test_repositories_share_database(self):
        database = InMemoryDatabase()
        entry = make_entry("shared")

        await InMemoryEntryRepository(database).save_all([entry])

        assert await InMemoryEntryRepository(database).find_by_id(entry.id) == entry

    @pytest.mark.asyncio
    async def test_find_hidden_is_oldest_first_across_threads(self):
        # Arrange
        repo = InMemoryEntryRepository()
        other_thread = ThreadId(uuid4())
        await repo.save(make_entry("visible", minutes=0))
        await repo.save(make_entry("late", minutes=30).model_copy(update={"hidden": True}))
        await repo.save(
            make_entry("early", minutes=10, thread_id=other_thread).model_copy(
                update={"hidden": True}
            )
        )
        await repo.save(make_entry("middle", minutes=20).model_copy(update={"hidden": True}))

        # Act
        page = await repo.find_hidden()

        # Assert
        assert names(page) == ["early", "middle", "late"]
        assert names(await repo.find_hidden(limit=1, offset=1)) == ["middle"]
        assert await repo.count_hidden() == 3
