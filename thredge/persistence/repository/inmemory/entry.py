"""In-memory entry repository for testing."""

from typing import Optional, Sequence

from thredge.domain.model.entry import Entry
from thredge.domain.repository.entry import EntryRepository
from thredge.domain.value import EntryId, ThreadId

from .database import InMemoryDatabase


class InMemoryEntryRepository(EntryRepository):
    """In-memory implementation of EntryRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_id(
        self, entry_id: EntryId, include_hidden: bool = False
    ) -> Optional[Entry]:
        entry = self._db.entries.get(entry_id)
        if entry is None or (entry.hidden and not include_hidden):
            return None
        return entry

    async def find_by_thread(
        self, thread_id: ThreadId, include_hidden: bool = False
    ) -> list[Entry]:
        entries = [e for e in self._db.entries.values() if e.thread_id == thread_id]
        if not include_hidden:
            entries = [e for e in entries if not e.hidden]
        entries.sort(key=lambda e: (e.order_index, e.created_at))
        return entries

    async def find_hidden(self, limit: int = 30, offset: int = 0) -> list[Entry]:
        entries = [e for e in self._db.entries.values() if e.hidden]
        entries.sort(key=lambda e: (e.created_at, str(e.id)))
        return entries[offset : offset + limit]

    async def count_hidden(self) -> int:
        return sum(1 for e in self._db.entries.values() if e.hidden)

    async def max_order_index(
        self, thread_id: ThreadId, parent_entry_id: Optional[EntryId]
    ) -> Optional[int]:
        return max(
            (
                e.order_index
                for e in self._db.entries.values()
                if e.thread_id == thread_id and e.parent_entry_id == parent_entry_id
            ),
            default=None,
        )

    async def save(self, entry: Entry) -> Entry:
        self._db.entries[entry.id] = entry
        return entry

    async def save_all(self, entries: Sequence[Entry]) -> list[Entry]:
        for entry in entries:
            self._db.entries[entry.id] = entry
        return list(entries)
