"""Entry domain service."""

from datetime import datetime

import logfire

from thredge.config import TreeSettings
from thredge.domain.error import NotFoundError, TreeError, ValidationError
from thredge.domain.model import Entry
from thredge.domain.repository import EntryRepository, ThreadRepository
from thredge.domain.tree import ReplyTree
from thredge.domain.value import EntryId, MoveProposal, TargetedMove

from .base import Service


def _describe(proposal: MoveProposal) -> dict:
    if isinstance(proposal, TargetedMove):
        return {
            "target_entry_id": str(proposal.target_entry_id),
            "position": proposal.position.value,
        }
    return {"direction": proposal.direction.value}


class EntryService(Service):
    """Domain service for editing, hiding and moving entries."""

    def __init__(
        self,
        entry_repository: EntryRepository,
        thread_repository: ThreadRepository,
        tree_settings: TreeSettings,
    ) -> None:
        """Initialize entry service.

        Args:
            entry_repository: Entry repository
            thread_repository: Thread repository
            tree_settings: Nesting limit and sibling order step
        """
        self.entry_repository = entry_repository
        self.thread_repository = thread_repository
        self.tree_settings = tree_settings

    async def _require(self, entry_id: EntryId, include_hidden: bool = False) -> Entry:
        entry = await self.entry_repository.find_by_id(entry_id, include_hidden)
        if not entry:
            logfire.warn("Entry not found", entry_id=str(entry_id))
            raise NotFoundError("Entry", str(entry_id))
        return entry

    async def get_entry(self, entry_id: EntryId) -> Entry:
        with logfire.span("entry_service.get_entry", entry_id=str(entry_id)):
            return await self._require(entry_id)

    async def list_hidden(self, limit: int = 30, offset: int = 0) -> tuple[list[Entry], int]:
        """List hidden entries of every thread, oldest first.

        Returns:
            Page of hidden entries and the total number of hidden entries
        """
        with logfire.span("entry_service.list_hidden", limit=limit, offset=offset):
            entries = await self.entry_repository.find_hidden(limit, offset)
            total = await self.entry_repository.count_hidden()
            logfire.info("Hidden entries listed", count=len(entries), total=total)
            return entries, total

    async def update_entry(self, entry_id: EntryId, body: str) -> Entry:
        """Replace the body of a visible entry.

        Raises:
            NotFoundError: If the entry does not exist or is hidden
            ValidationError: If the body is blank
        """
        with logfire.span(
            "entry_service.update_entry", entry_id=str(entry_id), body_length=len(body)
        ):
            if not body.strip():
                raise ValidationError("Entry body is required.")
            entry = await self._require(entry_id)
            now = datetime.now()
            saved = await self.entry_repository.save(
                entry.model_copy(update={"body": body, "updated_at": now})
            )
            await self.thread_repository.touch(entry.thread_id, now)
            logfire.info("Entry updated", entry_id=str(entry_id))
            return saved

    async def set_hidden(self, entry_id: EntryId, hidden: bool) -> Entry:
        """Hide a visible entry or restore a hidden one.

        Replies of a hidden entry stay as they are; while it is hidden they
        render as top-level entries.

        Raises:
            NotFoundError: If the entry does not exist, or is already in
                the requested state
        """
        with logfire.span(
            "entry_service.set_hidden", entry_id=str(entry_id), hidden=hidden
        ):
            entry = await self._require(entry_id, include_hidden=True)
            if entry.hidden == hidden:
                logfire.warn(
                    "Entry already in requested state", entry_id=str(entry_id), hidden=hidden
                )
                raise NotFoundError("Entry", str(entry_id))

            now = datetime.now()
            saved = await self.entry_repository.save(
                entry.model_copy(update={"hidden": hidden, "updated_at": now})
            )
            await self.thread_repository.touch(entry.thread_id, now)
            logfire.info("Entry visibility changed", entry_id=str(entry_id), hidden=hidden)
            return saved

    async def hide_entry(self, entry_id: EntryId) -> Entry:
        return await self.set_hidden(entry_id, True)

    async def restore_entry(self, entry_id: EntryId) -> Entry:
        return await self.set_hidden(entry_id, False)

    async def move_entry(self, entry_id: EntryId, proposal: MoveProposal) -> Entry:
        """Move an entry one step or onto a drop target.

        The thread row is locked first, so the move is validated against
        the entries as of the last committed change, never against what
        the client saw. Slots come from the visible entries; the depth
        bound also counts hidden entries, so restoring one later can never
        produce a chain deeper than the limit. The moved entry and any
        renumbered siblings are written in the caller's transaction.

        Args:
            entry_id: Entry to move
            proposal: DirectionalMove or TargetedMove

        Returns:
            The entry after the move (unchanged for a no-op move)

        Raises:
            NotFoundError: If the entry or its thread does not exist
            TargetNotFoundError: If the drop target is gone or hidden
            SelfContainmentError: If the entry would land inside itself
            DepthLimitExceededError: If the moved subtree would get too deep
            EntryLockedError: If a reply with replies is moved one step
            CycleDetectedError: If the thread's reply chain is corrupted
        """
        with logfire.span(
            "entry_service.move_entry", entry_id=str(entry_id), **_describe(proposal)
        ):
            entry = await self._require(entry_id)
            thread = await self.thread_repository.lock_for_update(entry.thread_id)
            if not thread:
                logfire.error(
                    "Thread of entry not found",
                    entry_id=str(entry_id),
                    thread_id=str(entry.thread_id),
                )
                raise NotFoundError("Thread", str(entry.thread_id))

            stored = await self.entry_repository.find_by_thread(
                thread.id, include_hidden=True
            )
            tree = ReplyTree(
                [e for e in stored if not e.hidden],
                max_depth=self.tree_settings.max_depth,
                order_step=self.tree_settings.order_step,
                hidden_entries=[e for e in stored if e.hidden],
            )
            try:
                placement = tree.apply_move(entry_id, proposal)
            except TreeError as e:
                logfire.warn(
                    "Move rejected",
                    entry_id=str(entry_id),
                    error=type(e).__name__,
                    reason=str(e),
                )
                raise

            current = tree.index.get(entry_id) or entry
            if not placement.changed:
                logfire.info("Move is a no-op", entry_id=str(entry_id))
                return current

            now = datetime.now()
            changed = [
                current.model_copy(
                    update={
                        "parent_entry_id": placement.parent_entry_id,
                        "order_index": placement.order_index,
                        "updated_at": now,
                    }
                )
            ]
            for sibling_id, order_index in placement.renumbered.items():
                sibling = tree.index.get(sibling_id)
                if sibling is not None:
                    changed.append(
                        sibling.model_copy(
                            update={"order_index": order_index, "updated_at": now}
                        )
                    )

            saved = await self.entry_repository.save_all(changed)
            await self.thread_repository.touch(thread.id, now)
            logfire.info(
                "Entry moved",
                entry_id=str(entry_id),
                parent_entry_id=(
                    str(placement.parent_entry_id) if placement.parent_entry_id else None
                ),
                order_index=placement.order_index,
                renumbered=len(placement.renumbered),
            )
            return saved[0]
