"""Drag and drop state machine.

Pointer events drive a DragSession through
IDLE -> DRAGGING -> (HOVERING)* -> FINALIZING -> IDLE. Sessions are
values: every transition returns a new session and never mutates the old
one. While a drop is outstanding its entry stays pending, but other
entries may be dragged.
"""

from enum import Enum
from typing import Optional

from pydantic import Field

from thredge.domain.error import ValidationError
from thredge.domain.tree.reply_tree import ReplyTree
from thredge.domain.value import DropPosition, EntryId, TargetedMove
from thredge.domain.value.common import ValueObject


class DragPhase(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"
    HOVERING = "hovering"
    FINALIZING = "finalizing"


class DragSession(ValueObject):
    """Current drag gesture plus the drops still waiting on the server."""

    phase: DragPhase = DragPhase.IDLE
    entry_id: Optional[EntryId] = None
    target_id: Optional[EntryId] = None
    position: Optional[DropPosition] = None
    pending_entry_ids: frozenset[EntryId] = Field(default_factory=frozenset)

    def begin(self, entry_id: EntryId) -> "DragSession":
        """Pointer down on an entry."""
        if self.phase not in (DragPhase.IDLE, DragPhase.FINALIZING):
            raise ValidationError(f"Cannot start a drag while {self.phase.value}")
        if entry_id in self.pending_entry_ids:
            raise ValidationError(f"Entry {entry_id} has a move in flight")
        return DragSession(
            phase=DragPhase.DRAGGING,
            entry_id=entry_id,
            pending_entry_ids=self.pending_entry_ids,
        )

    def hover(
        self, tree: ReplyTree, target_id: EntryId, position: DropPosition
    ) -> "DragSession":
        """Pointer over a drop zone; highlights it only if the drop is legal."""
        self._require_active()
        proposal = TargetedMove(target_entry_id=target_id, position=position)
        if not tree.is_move_legal(self.entry_id, proposal):
            return self._dragging()
        return self.model_copy(
            update={
                "phase": DragPhase.HOVERING,
                "target_id": target_id,
                "position": position,
            }
        )

    def leave(self) -> "DragSession":
        """Pointer left the highlighted drop zone."""
        self._require_active()
        return self._dragging()

    def release(self) -> tuple["DragSession", Optional[TargetedMove]]:
        """Pointer up.

        Returns:
            The next session and the move to send, or None when the
            pointer was released outside any legal drop zone
        """
        self._require_active()
        if self.phase == DragPhase.DRAGGING:
            return DragSession(pending_entry_ids=self.pending_entry_ids), None

        move = TargetedMove(target_entry_id=self.target_id, position=self.position)
        session = DragSession(
            phase=DragPhase.FINALIZING,
            entry_id=self.entry_id,
            target_id=self.target_id,
            position=self.position,
            pending_entry_ids=self.pending_entry_ids | {self.entry_id},
        )
        return session, move

    def cancel(self) -> "DragSession":
        self._require_active()
        return DragSession(pending_entry_ids=self.pending_entry_ids)

    def settle(self, entry_id: EntryId) -> "DragSession":
        """The server answered the drop of entry_id, successfully or not."""
        pending = self.pending_entry_ids - {entry_id}
        if self.phase == DragPhase.FINALIZING and self.entry_id == entry_id:
            return DragSession(pending_entry_ids=pending)
        return self.model_copy(update={"pending_entry_ids": pending})

    def _require_active(self) -> None:
        if self.phase not in (DragPhase.DRAGGING, DragPhase.HOVERING):
            raise ValidationError(f"No drag in progress ({self.phase.value})")

    def _dragging(self) -> "DragSession":
        return self.model_copy(
            update={"phase": DragPhase.DRAGGING, "target_id": None, "position": None}
        )
