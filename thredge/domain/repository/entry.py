"""Entry repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from thredge.domain.model.entry import Entry
from thredge.domain.value import EntryId, ThreadId


class EntryRepository(ABC):
    """Repository for Entry entities.

    Entries are never deleted; hiding one sets its hidden flag.
    """

    @abstractmethod
    async def find_by_id(
        self, entry_id: EntryId, include_hidden: bool = False
    ) -> Optional[Entry]:
        """Find an entry by ID.

        Args:
            entry_id: The entry's unique identifier
            include_hidden: Whether a hidden entry counts as found

        Returns:
            The entry if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_thread(
        self, thread_id: ThreadId, include_hidden: bool = False
    ) -> List[Entry]:
        """Find all entries of a thread as a flat list.

        The order is unspecified; build a reply tree to get render order.

        Args:
            thread_id: The thread ID
            include_hidden: Whether to include hidden entries

        Returns:
            Entries of the thread
        """
        pass

    @abstractmethod
    async def find_hidden(self, limit: int = 30, offset: int = 0) -> List[Entry]:
        """List hidden entries across all threads, oldest first.

        Args:
            limit: Maximum number of entries to return
            offset: Number of entries to skip

        Returns:
            Page of hidden entries ordered by created_at
        """
        pass

    @abstractmethod
    async def count_hidden(self) -> int:
        pass

    @abstractmethod
    async def max_order_index(
        self, thread_id: ThreadId, parent_entry_id: Optional[EntryId]
    ) -> Optional[int]:
        """Highest order_index among the children of parent_entry_id.

        Hidden entries count too, so a new entry never reuses the slot of
        one that might be restored later.

        Args:
            thread_id: The thread ID
            parent_entry_id: Parent entry, or None for top-level entries

        Returns:
            The highest order_index, or None if there are no such entries
        """
        pass

    @abstractmethod
    async def save(self, entry: Entry) -> Entry:
        """Save an entry (create or update)."""
        pass

    @abstractmethod
    async def save_all(self, entries: Sequence[Entry]) -> List[Entry]:
        """Save several entries in the current transaction.

        Args:
            entries: Entries to create or update

        Returns:
            The saved entries, in the same order
        """
        pass
