"""Unit tests for ThreadService."""

from uuid import uuid4

import pytest

from thredge.domain.error import DepthLimitExceededError, NotFoundError, ValidationError
from thredge.domain.repository import EntryRepository, ThreadRepository
from thredge.domain.service import ThreadService
from thredge.config import TreeSettings
from thredge.domain.value import EntryId, ThreadId
from thredge.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryEntryRepository,
    InMemoryThreadRepository,
)
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateThread:
    """Tests for create_thread method."""

    @pytest.mark.asyncio
    async def test_title_is_first_line_of_body(self, unit_env):
        """The title should be derived from the first non-blank line."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread_repo = await unit_env.get(ThreadRepository)

        # Act
        thread = await thread_service.create_thread("\n  Reading list  \nbooks for 2025")

        # Assert
        assert thread.title == "Reading list"
        assert thread.body == "\n  Reading list  \nbooks for 2025"
        assert not thread.hidden
        assert await thread_repo.find_by_id(thread.id) == thread

    @pytest.mark.asyncio
    async def test_long_title_is_truncated(self, unit_env):
        thread_service = await unit_env.get(ThreadService)

        thread = await thread_service.create_thread("x" * 500)

        assert len(thread.title) == 200

    @pytest.mark.asyncio
    async def test_blank_body_is_rejected(self, unit_env):
        thread_service = await unit_env.get(ThreadService)

        with pytest.raises(ValidationError):
            await thread_service.create_thread("   \n ")


class TestGetThread:
    """Tests for get_thread method."""

    @pytest.mark.asyncio
    async def test_entries_are_linearized_with_depths(self, unit_env):
        """Entries should come back in render order with their depths."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread = await thread_service.create_thread("Topic")
        first = await thread_service.add_entry(thread.id, "first")
        second = await thread_service.add_entry(thread.id, "second")
        reply = await thread_service.add_entry(thread.id, "reply", parent_entry_id=first.id)

        # Act
        result = await thread_service.get_thread(thread.id)

        # Assert
        assert [e.body for e in result.entries] == ["first", "reply", "second"]
        assert result.depths == {first.id: 1, reply.id: 2, second.id: 1}

    @pytest.mark.asyncio
    async def test_replies_of_hidden_entry_render_as_roots(self, unit_env):
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        entry_repo = await unit_env.get(EntryRepository)
        thread = await thread_service.create_thread("Topic")
        parent = await thread_service.add_entry(thread.id, "parent")
        reply = await thread_service.add_entry(thread.id, "reply", parent_entry_id=parent.id)
        await entry_repo.save(parent.model_copy(update={"hidden": True}))

        # Act
        result = await thread_service.get_thread(thread.id)

        # Assert
        assert [e.body for e in result.entries] == ["reply"]
        assert result.depths == {reply.id: 1}

    @pytest.mark.asyncio
    async def test_hidden_thread_is_not_found(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        thread = await thread_service.create_thread("Topic")
        await thread_service.hide_thread(thread.id)

        with pytest.raises(NotFoundError):
            await thread_service.get_thread(thread.id)

        result = await thread_service.get_thread(thread.id, include_hidden=True)
        assert result.thread.hidden


class TestListThreads:
    """Tests for list_threads method."""

    @pytest.mark.asyncio
    async def test_pinned_then_most_recently_active(self, unit_env):
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        old = await thread_service.create_thread("old")
        pinned = await thread_service.create_thread("pinned")
        new = await thread_service.create_thread("new")
        await thread_service.update_thread(pinned.id, pinned=True)
        await thread_service.add_entry(old.id, "bump")
        hidden = await thread_service.create_thread("hidden")
        await thread_service.hide_thread(hidden.id)

        # Act
        threads, total = await thread_service.list_threads()

        # Assert
        assert [t.title for t in threads] == ["pinned", "old", "new"]
        assert total == 3
        assert new.id in {t.id for t in threads}

    @pytest.mark.asyncio
    async def test_pagination(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        for i in range(5):
            await thread_service.create_thread(f"thread {i}")

        threads, total = await thread_service.list_threads(limit=2, offset=4)

        assert len(threads) == 1
        assert total == 5


class TestUpdateThread:
    """Tests for update_thread method."""

    @pytest.mark.asyncio
    async def test_new_body_rederives_title(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        thread = await thread_service.create_thread("Before")

        updated = await thread_service.update_thread(thread.id, body="After\nmore", title="ignored")

        assert updated.title == "After"
        assert updated.body == "After\nmore"

    @pytest.mark.asyncio
    async def test_title_only(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        thread = await thread_service.create_thread("Before")

        updated = await thread_service.update_thread(thread.id, title="Renamed")

        assert updated.title == "Renamed"
        assert updated.body == "Before"

    @pytest.mark.asyncio
    async def test_blank_title_is_rejected(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        thread = await thread_service.create_thread("Before")

        with pytest.raises(ValidationError):
            await thread_service.update_thread(thread.id, title="  ")

    @pytest.mark.asyncio
    async def test_unknown_thread(self, unit_env):
        thread_service = await unit_env.get(ThreadService)

        with pytest.raises(NotFoundError):
            await thread_service.update_thread(ThreadId(uuid4()), title="x")


class TestVisibility:
    """Tests for hide_thread and restore_thread."""

    @pytest.mark.asyncio
    async def test_hide_then_restore(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        thread = await thread_service.create_thread("Topic")

        hidden = await thread_service.hide_thread(thread.id)
        restored = await thread_service.restore_thread(thread.id)

        assert hidden.hidden
        assert not restored.hidden

    @pytest.mark.asyncio
    async def test_hiding_twice_is_not_found(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        thread = await thread_service.create_thread("Topic")
        await thread_service.hide_thread(thread.id)

        with pytest.raises(NotFoundError):
            await thread_service.hide_thread(thread.id)

    @pytest.mark.asyncio
    async def test_restoring_visible_thread_is_not_found(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        thread = await thread_service.create_thread("Topic")

        with pytest.raises(NotFoundError):
            await thread_service.restore_thread(thread.id)


class TestAddEntry:
    """Tests for add_entry method."""

    @pytest.mark.asyncio
    async def test_entries_are_appended_after_siblings(self, unit_env):
        """Each new sibling should get the next order step."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread = await thread_service.create_thread("Topic")

        # Act
        first = await thread_service.add_entry(thread.id, "first")
        second = await thread_service.add_entry(thread.id, "second")
        reply = await thread_service.add_entry(thread.id, "reply", parent_entry_id=first.id)

        # Assert
        assert first.order_index == 1000
        assert second.order_index == 2000
        assert reply.order_index == 1000
        assert reply.parent_entry_id == first.id

    @pytest.mark.asyncio
    async def test_adding_entry_bumps_thread_activity(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        thread = await thread_service.create_thread("Topic")

        await thread_service.add_entry(thread.id, "first")

        result = await thread_service.get_thread(thread.id)
        assert result.thread.last_activity_at >= thread.last_activity_at

    @pytest.mark.asyncio
    async def test_reply_below_max_depth_is_rejected(self, unit_env):
        """Replying to an entry at depth 3 should fail."""
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        thread = await thread_service.create_thread("Topic")
        level1 = await thread_service.add_entry(thread.id, "1")
        level2 = await thread_service.add_entry(thread.id, "2", parent_entry_id=level1.id)
        level3 = await thread_service.add_entry(thread.id, "3", parent_entry_id=level2.id)

        # Act / Assert
        with pytest.raises(DepthLimitExceededError) as exc_info:
            await thread_service.add_entry(thread.id, "4", parent_entry_id=level3.id)
        assert exc_info.value.resulting_depth == 4

    @pytest.mark.asyncio
    async def test_hidden_ancestors_count_towards_depth(self, unit_env):
        # Arrange
        thread_service = await unit_env.get(ThreadService)
        entry_repo = await unit_env.get(EntryRepository)
        thread = await thread_service.create_thread("Topic")
        level1 = await thread_service.add_entry(thread.id, "1")
        level2 = await thread_service.add_entry(thread.id, "2", parent_entry_id=level1.id)
        level3 = await thread_service.add_entry(thread.id, "3", parent_entry_id=level2.id)
        await entry_repo.save(level1.model_copy(update={"hidden": True}))

        # Act / Assert
        with pytest.raises(DepthLimitExceededError):
            await thread_service.add_entry(thread.id, "4", parent_entry_id=level3.id)

    @pytest.mark.asyncio
    async def test_parent_from_another_thread_is_rejected(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        thread = await thread_service.create_thread("Topic")
        other = await thread_service.create_thread("Other")
        foreign = await thread_service.add_entry(other.id, "foreign")

        with pytest.raises(ValidationError):
            await thread_service.add_entry(thread.id, "reply", parent_entry_id=foreign.id)

    @pytest.mark.asyncio
    async def test_unknown_parent_is_rejected(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        thread = await thread_service.create_thread("Topic")

        with pytest.raises(ValidationError):
            await thread_service.add_entry(
                thread.id, "reply", parent_entry_id=EntryId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_hidden_thread_rejects_entries(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        thread = await thread_service.create_thread("Topic")
        await thread_service.hide_thread(thread.id)

        with pytest.raises(NotFoundError):
            await thread_service.add_entry(thread.id, "late")

    @pytest.mark.asyncio
    async def test_blank_body_is_rejected(self, unit_env):
        thread_service = await unit_env.get(ThreadService)
        thread = await thread_service.create_thread("Topic")

        with pytest.raises(ValidationError):
            await thread_service.add_entry(thread.id, " ")


class LockRecordingThreadRepository(InMemoryThreadRepository):
    """Records row locks and the entries stored at the time of each one."""

    def __init__(self, database: InMemoryDatabase) -> None:
        super().__init__(database)
        self.locks: list[tuple[ThreadId, int]] = []

    async def lock_for_update(self, thread_id: ThreadId):
        self.locks.append((thread_id, len(self._db.entries)))
        return await super().lock_for_update(thread_id)


class TestAddEntryLocking:
    """add_entry must hold the thread lock while it reads the tree."""

    @pytest.fixture
    def service(self):
        database = InMemoryDatabase()
        thread_repo = LockRecordingThreadRepository(database)
        return ThreadService(
            thread_repository=thread_repo,
            entry_repository=InMemoryEntryRepository(database),
            tree_settings=TreeSettings(),
        )

    @pytest.mark.asyncio
    async def test_root_entry_locks_thread_before_insert(self, service):
        thread = await service.create_thread("Topic")

        await service.add_entry(thread.id, "first")

        # Locked once, while the entry was not yet stored
        assert service.thread_repository.locks == [(thread.id, 0)]

    @pytest.mark.asyncio
    async def test_reply_locks_thread_before_insert(self, service):
        thread = await service.create_thread("Topic")
        parent = await service.add_entry(thread.id, "parent")

        await service.add_entry(thread.id, "reply", parent_entry_id=parent.id)

        assert service.thread_repository.locks == [(thread.id, 0), (thread.id, 1)]

    @pytest.mark.asyncio
    async def test_rejected_entry_does_not_lock(self, service):
        thread = await service.create_thread("Topic")

        with pytest.raises(ValidationError):
            await service.add_entry(thread.id, "  ")

        assert service.thread_repository.locks == []
