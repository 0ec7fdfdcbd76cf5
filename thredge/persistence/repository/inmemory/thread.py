"""In-memory thread repository for testing."""

from datetime import datetime
from typing import Optional

from thredge.domain.model.thread import Thread
from thredge.domain.repository.thread import ThreadRepository
from thredge.domain.value import ThreadId

from .database import InMemoryDatabase


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_id(
        self, thread_id: ThreadId, include_hidden: bool = False
    ) -> Optional[Thread]:
        thread = self._db.threads.get(thread_id)
        if thread is None or (thread.hidden and not include_hidden):
            return None
        return thread

    async def find_all(
        self,
        include_hidden: bool = False,
        limit: int = 30,
        offset: int = 0,
    ) -> list[Thread]:
        threads = [t for t in self._db.threads.values() if include_hidden or not t.hidden]

        # Pinned first, then most recently active
        threads.sort(key=lambda t: (t.pinned, t.last_activity_at, t.created_at), reverse=True)

        return threads[offset : offset + limit]

    async def count(self, include_hidden: bool = False) -> int:
        return sum(1 for t in self._db.threads.values() if include_hidden or not t.hidden)

    async def lock_for_update(self, thread_id: ThreadId) -> Optional[Thread]:
        # Single event loop, nothing to lock
        return self._db.threads.get(thread_id)

    async def save(self, thread: Thread) -> Thread:
        self._db.threads[thread.id] = thread
        return thread

    async def touch(self, thread_id: ThreadId, at: datetime) -> None:
        thread = self._db.threads.get(thread_id)
        if thread is not None:
            self._db.threads[thread_id] = thread.model_copy(update={"last_activity_at": at})
