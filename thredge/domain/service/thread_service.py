"""Thread domain service."""

from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

import logfire

from thredge.config import TreeSettings
from thredge.domain.error import (
    CycleDetectedError,
    DepthLimitExceededError,
    NotFoundError,
    ValidationError,
)
from thredge.domain.model import Entry, Thread, derive_title
from thredge.domain.repository import EntryRepository, ThreadRepository
from thredge.domain.tree import ReplyTree
from thredge.domain.value import EntryId, ThreadId

from .base import Service


@dataclass
class ThreadTree:
    """A thread with its visible entries in render order."""

    thread: Thread
    entries: list[Entry]
    depths: dict[EntryId, int]


class ThreadService(Service):
    """Domain service for threads and for adding entries to them."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        entry_repository: EntryRepository,
        tree_settings: TreeSettings,
    ) -> None:
        """Initialize thread service.

        Args:
            thread_repository: Thread repository
            entry_repository: Entry repository
            tree_settings: Nesting limit and sibling order step
        """
        self.thread_repository = thread_repository
        self.entry_repository = entry_repository
        self.tree_settings = tree_settings

    async def _require(self, thread_id: ThreadId, include_hidden: bool = False) -> Thread:
        thread = await self.thread_repository.find_by_id(thread_id, include_hidden)
        if not thread:
            logfire.warn("Thread not found", thread_id=str(thread_id))
            raise NotFoundError("Thread", str(thread_id))
        return thread

    async def create_thread(self, body: str) -> Thread:
        """Create a thread titled after the first line of its body.

        Raises:
            ValidationError: If the body is blank
        """
        with logfire.span("thread_service.create_thread", body_length=len(body)):
            if not body.strip():
                raise ValidationError("Thread body is required.")

            now = datetime.now()
            thread = Thread(
                id=ThreadId(uuid4()),
                title=derive_title(body),
                body=body,
                created_at=now,
                updated_at=now,
                last_activity_at=now,
            )
            saved = await self.thread_repository.save(thread)
            logfire.info("Thread created", thread_id=str(saved.id), title=saved.title)
            return saved

    async def get_thread(
        self, thread_id: ThreadId, include_hidden: bool = False
    ) -> ThreadTree:
        """Get a thread with its visible entries linearized.

        Raises:
            NotFoundError: If the thread does not exist or is hidden
        """
        with logfire.span(
            "thread_service.get_thread",
            thread_id=str(thread_id),
            include_hidden=include_hidden,
        ):
            thread = await self._require(thread_id, include_hidden)
            entries = await self.entry_repository.find_by_thread(thread_id)
            tree = ReplyTree(entries, max_depth=self.tree_settings.max_depth)
            ordered = tree.linearize()
            logfire.info(
                "Thread retrieved", thread_id=str(thread_id), entry_count=len(ordered)
            )
            return ThreadTree(thread=thread, entries=ordered, depths=tree.depth_map())

    async def list_threads(
        self, include_hidden: bool = False, limit: int = 30, offset: int = 0
    ) -> tuple[list[Thread], int]:
        """List threads, pinned first, then by latest activity.

        Returns:
            Page of threads and the total number of threads
        """
        with logfire.span(
            "thread_service.list_threads",
            include_hidden=include_hidden,
            limit=limit,
            offset=offset,
        ):
            threads = await self.thread_repository.find_all(include_hidden, limit, offset)
            total = await self.thread_repository.count(include_hidden)
            logfire.info("Threads listed", count=len(threads), total=total)
            return threads, total

    async def update_thread(
        self,
        thread_id: ThreadId,
        body: str | None = None,
        title: str | None = None,
        pinned: bool | None = None,
    ) -> Thread:
        """Update a thread's body, title or pin.

        A new body re-derives the title; an explicit title is only used
        when no body is given.

        Raises:
            NotFoundError: If the thread does not exist or is hidden
            ValidationError: If body or title is blank
        """
        with logfire.span(
            "thread_service.update_thread",
            thread_id=str(thread_id),
            has_body=body is not None,
            has_title=title is not None,
            pinned=pinned,
        ):
            thread = await self._require(thread_id)
            now = datetime.now()
            update: dict = {"updated_at": now, "last_activity_at": now}

            if body is not None:
                if not body.strip():
                    raise ValidationError("Thread body is required.")
                update["body"] = body
                update["title"] = derive_title(body)
            elif title is not None:
                if not title.strip():
                    raise ValidationError("Thread title is required.")
                update["title"] = derive_title(title)
            if pinned is not None:
                update["pinned"] = pinned

            saved = await self.thread_repository.save(thread.model_copy(update=update))
            logfire.info("Thread updated", thread_id=str(thread_id), title=saved.title)
            return saved

    async def set_hidden(self, thread_id: ThreadId, hidden: bool) -> Thread:
        """Hide a visible thread or restore a hidden one.

        Raises:
            NotFoundError: If the thread does not exist, or is already in
                the requested state
        """
        with logfire.span(
            "thread_service.set_hidden", thread_id=str(thread_id), hidden=hidden
        ):
            thread = await self._require(thread_id, include_hidden=True)
            if thread.hidden == hidden:
                logfire.warn(
                    "Thread already in requested state",
                    thread_id=str(thread_id),
                    hidden=hidden,
                )
                raise NotFoundError("Thread", str(thread_id))

            saved = await self.thread_repository.save(
                thread.model_copy(update={"hidden": hidden, "updated_at": datetime.now()})
            )
            logfire.info("Thread visibility changed", thread_id=str(thread_id), hidden=hidden)
            return saved

    async def hide_thread(self, thread_id: ThreadId) -> Thread:
        return await self.set_hidden(thread_id, True)

    async def restore_thread(self, thread_id: ThreadId) -> Thread:
        return await self.set_hidden(thread_id, False)

    async def add_entry(
        self,
        thread_id: ThreadId,
        body: str,
        parent_entry_id: EntryId | None = None,
    ) -> Entry:
        """Append an entry to a thread, optionally as a reply.

        The new entry goes last among its siblings. The thread row is
        locked before the parent chain and sibling indexes are read, like
        move_entry does. The parent's depth is computed over every stored
        entry of the thread, hidden ones included, since a hidden ancestor
        still counts once restored.

        Raises:
            NotFoundError: If the thread does not exist or is hidden
            ValidationError: If the body is blank or the parent is not an
                entry of this thread
            DepthLimitExceededError: If the parent is already at max depth
            CycleDetectedError: If the parent's chain is corrupted
        """
        with logfire.span(
            "thread_service.add_entry",
            thread_id=str(thread_id),
            parent_entry_id=str(parent_entry_id) if parent_entry_id else None,
        ):
            await self._require(thread_id)
            if not body.strip():
                raise ValidationError("Entry body is required.")

            # Serializes with moves and other inserts on this thread
            await self.thread_repository.lock_for_update(thread_id)

            if parent_entry_id is not None:
                entries = await self.entry_repository.find_by_thread(
                    thread_id, include_hidden=True
                )
                tree = ReplyTree(entries, max_depth=self.tree_settings.max_depth)
                if parent_entry_id not in tree.index:
                    logfire.error(
                        "Parent entry not found in thread",
                        thread_id=str(thread_id),
                        parent_entry_id=str(parent_entry_id),
                    )
                    raise ValidationError("Parent entry not found.")
                try:
                    parent_depth = tree.ancestry.depth_of(parent_entry_id)
                except CycleDetectedError:
                    logfire.error(
                        "Invalid reply chain",
                        thread_id=str(thread_id),
                        parent_entry_id=str(parent_entry_id),
                    )
                    raise
                if parent_depth >= self.tree_settings.max_depth:
                    logfire.warn(
                        "Reply depth limit reached",
                        thread_id=str(thread_id),
                        parent_entry_id=str(parent_entry_id),
                        parent_depth=parent_depth,
                    )
                    raise DepthLimitExceededError(
                        str(parent_entry_id), parent_depth + 1, self.tree_settings.max_depth
                    )

            highest = await self.entry_repository.max_order_index(thread_id, parent_entry_id)
            now = datetime.now()
            entry = Entry(
                id=EntryId(uuid4()),
                thread_id=thread_id,
                body=body,
                parent_entry_id=parent_entry_id,
                order_index=(highest or 0) + self.tree_settings.order_step,
                created_at=now,
                updated_at=now,
            )
            saved = await self.entry_repository.save(entry)
            await self.thread_repository.touch(thread_id, now)
            logfire.info(
                "Entry added",
                thread_id=str(thread_id),
                entry_id=str(saved.id),
                order_index=saved.order_index,
            )
            return saved
