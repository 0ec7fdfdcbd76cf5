"""Domain value objects for Thredge."""

from thredge.domain.value.identifiers import EntryId, ThreadId
from thredge.domain.value.types import (
    DirectionalMove,
    DropPosition,
    MoveDirection,
    MoveProposal,
    Placement,
    TargetedMove,
)

__all__ = [
    # Identifiers
    "ThreadId",
    "EntryId",
    # Types
    "MoveDirection",
    "DropPosition",
    "DirectionalMove",
    "TargetedMove",
    "MoveProposal",
    "Placement",
]
