"""Thread repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from thredge.domain.model.thread import Thread
from thredge.domain.value import ThreadId


class ThreadRepository(ABC):
    """Repository for the Thread aggregate.

    Defines the contract for thread persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(
        self, thread_id: ThreadId, include_hidden: bool = False
    ) -> Optional[Thread]:
        """Find a thread by ID.

        Args:
            thread_id: The thread's unique identifier
            include_hidden: Whether a hidden thread counts as found

        Returns:
            The thread if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        include_hidden: bool = False,
        limit: int = 30,
        offset: int = 0,
    ) -> List[Thread]:
        """List threads, pinned first, then most recently active.

        Args:
            include_hidden: Whether to include hidden threads
            limit: Maximum number of threads to return
            offset: Number of threads to skip

        Returns:
            Page of threads
        """
        pass

    @abstractmethod
    async def count(self, include_hidden: bool = False) -> int:
        pass

    @abstractmethod
    async def lock_for_update(self, thread_id: ThreadId) -> Optional[Thread]:
        """Load a thread and lock its row until the transaction ends.

        Serializes concurrent moves and inserts within one thread so each is
        validated against the tree the previous one committed.

        Args:
            thread_id: The thread to lock

        Returns:
            The thread, hidden or not, or None if it does not exist
        """
        pass

    @abstractmethod
    async def save(self, thread: Thread) -> Thread:
        """Save a thread (create or update).

        Args:
            thread: The thread to save

        Returns:
            The saved thread
        """
        pass

    @abstractmethod
    async def touch(self, thread_id: ThreadId, at: datetime) -> None:
        """Set last_activity_at on a thread.

        Args:
            thread_id: The thread that saw activity
            at: Time of the activity
        """
        pass
