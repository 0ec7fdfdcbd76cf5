"""Domain value objects for Thredge.

Value objects are immutable and defined by their values, not identity.
They describe proposed moves in the reply tree and their outcome.
"""

from enum import Enum

from pydantic import Field

from thredge.domain.value.common import ValueObject
from thredge.domain.value.identifiers import EntryId


class MoveDirection(str, Enum):
    """Direction of a one-step move through the rendered sequence."""

    UP = "UP"
    DOWN = "DOWN"


class DropPosition(str, Enum):
    """Where a dragged entry lands relative to a drop target."""

    BEFORE = "BEFORE"
    AFTER = "AFTER"
    CHILD = "CHILD"


class DirectionalMove(ValueObject):
    """Move an entry one slot up or down in the rendered sequence."""

    direction: MoveDirection


class TargetedMove(ValueObject):
    """Drop an entry before, after, or as the first child of a target."""

    target_entry_id: EntryId
    position: DropPosition


MoveProposal = DirectionalMove | TargetedMove


class Placement(ValueObject):
    """Outcome of position assignment for a moved entry.

    parent_entry_id and order_index are the new values for the moved entry.
    renumbered holds the new order_index of every other sibling that had to
    be renumbered to make room. changed is False when the move is a no-op.
    """

    entry_id: EntryId
    parent_entry_id: EntryId | None
    order_index: int
    renumbered: dict[EntryId, int] = Field(default_factory=dict)
    changed: bool = True
