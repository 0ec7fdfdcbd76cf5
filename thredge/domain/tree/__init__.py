"""Reply tree engine.

Pure functions over a flat list of one thread's entries. Each call builds
a fresh tree snapshot, so callers simply pass the latest fetched list.
"""

from typing import Iterable

from thredge.domain.model import Entry
from thredge.domain.tree.ancestry import AncestryResolver
from thredge.domain.tree.constants import MAX_DEPTH, ORDER_STEP
from thredge.domain.tree.drag import DragPhase, DragSession
from thredge.domain.tree.positions import PositionAssigner
from thredge.domain.tree.reply_tree import ReplyTree
from thredge.domain.tree.store import TreeIndex, build, sibling_key
from thredge.domain.tree.validator import MovePlan, MoveValidator
from thredge.domain.value import DropPosition, EntryId, MoveProposal, Placement


def linearize(entries: Iterable[Entry]) -> list[Entry]:
    """Entries in render order."""
    return ReplyTree(entries).linearize()


def depth_map(entries: Iterable[Entry]) -> dict[EntryId, int]:
    """Depth of every entry; corrupted chains degrade to depth 1."""
    return ReplyTree(entries).depth_map()


def is_move_legal(
    entries: Iterable[Entry],
    entry_id: EntryId,
    proposal: MoveProposal,
    max_depth: int = MAX_DEPTH,
) -> bool:
    return ReplyTree(entries, max_depth=max_depth).is_move_legal(entry_id, proposal)


def apply_move(
    entries: Iterable[Entry],
    entry_id: EntryId,
    proposal: MoveProposal,
    max_depth: int = MAX_DEPTH,
    order_step: int = ORDER_STEP,
) -> Placement:
    """Optimistic projection of a move: the entry's new parent and order index.

    The server repeats this against fresh data before writing anything.

    Raises:
        DomainError: If the move is not allowed
    """
    tree = ReplyTree(entries, max_depth=max_depth, order_step=order_step)
    return tree.apply_move(entry_id, proposal)


def drop_positions(
    entries: Iterable[Entry],
    entry_id: EntryId,
    target_id: EntryId,
    max_depth: int = MAX_DEPTH,
) -> list[DropPosition]:
    return ReplyTree(entries, max_depth=max_depth).drop_positions(entry_id, target_id)


__all__ = [
    "MAX_DEPTH",
    "ORDER_STEP",
    "AncestryResolver",
    "DragPhase",
    "DragSession",
    "MovePlan",
    "MoveValidator",
    "PositionAssigner",
    "ReplyTree",
    "TreeIndex",
    "build",
    "sibling_key",
    "linearize",
    "depth_map",
    "is_move_legal",
    "apply_move",
    "drop_positions",
]
