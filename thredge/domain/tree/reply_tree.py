"""Reply tree snapshot.

Bundles the index, ancestry resolver, validator and position assigner
built over one fetched entry list.
"""

from itertools import chain
from typing import Iterable

import logfire

from thredge.domain.error import CycleDetectedError, DomainError
from thredge.domain.model import Entry
from thredge.domain.tree.ancestry import AncestryResolver
from thredge.domain.tree.constants import MAX_DEPTH, ORDER_STEP
from thredge.domain.tree.linearizer import linearize
from thredge.domain.tree.positions import PositionAssigner
from thredge.domain.tree.store import build
from thredge.domain.tree.validator import MovePlan, MoveValidator
from thredge.domain.value import (
    DropPosition,
    EntryId,
    MoveProposal,
    Placement,
    TargetedMove,
)


class ReplyTree:
    """Immutable view of one thread's reply tree.

    Rebuild a ReplyTree after every fetch; nothing here is updated in
    place.

    entries are the visible entries, used for render order and slots.
    hidden_entries, when given, only take part in the depth bound and the
    self-containment check.
    """

    def __init__(
        self,
        entries: Iterable[Entry],
        max_depth: int = MAX_DEPTH,
        order_step: int = ORDER_STEP,
        hidden_entries: Iterable[Entry] = (),
    ) -> None:
        entries = list(entries)
        hidden_entries = list(hidden_entries)
        self.index = build(entries)
        self.ancestry = AncestryResolver(self.index)
        if hidden_entries:
            self.depth_ancestry = AncestryResolver(build(chain(hidden_entries, entries)))
        else:
            self.depth_ancestry = self.ancestry
        self.validator = MoveValidator(
            self.index, self.ancestry, max_depth, depth_resolver=self.depth_ancestry
        )
        self.positions = PositionAssigner(order_step)
        self.max_depth = max_depth

    def linearize(self) -> list[Entry]:
        return linearize(self.index)

    def depth_map(self) -> dict[EntryId, int]:
        """Depth of every entry.

        Entries on a corrupted parent chain are shown as roots (depth 1)
        instead of failing the whole view.
        """
        depths: dict[EntryId, int] = {}
        broken: list[str] = []
        for entry in self.index.entries:
            try:
                depths[entry.id] = self.ancestry.depth_of(entry.id)
            except CycleDetectedError:
                depths[entry.id] = 1
                broken.append(str(entry.id))
        if broken:
            logfire.warn(
                "Invalid reply chain, entries rendered as roots",
                count=len(broken),
                entry_ids=broken,
            )
        return depths

    def plan_move(self, entry_id: EntryId, proposal: MoveProposal) -> MovePlan:
        return self.validator.plan(entry_id, proposal)

    def place(self, plan: MovePlan) -> Placement:
        if plan.noop:
            return self.positions.unchanged(plan.entry)
        return self.positions.assign(plan.entry, plan.parent_id, plan.siblings, plan.insert_at)

    def apply_move(self, entry_id: EntryId, proposal: MoveProposal) -> Placement:
        """Validate a move and compute where the entry ends up.

        Raises:
            DomainError: Any tree or lookup error raised by validation
        """
        return self.place(self.plan_move(entry_id, proposal))

    def is_move_legal(self, entry_id: EntryId, proposal: MoveProposal) -> bool:
        """Whether the move is accepted and actually changes something."""
        try:
            placement = self.apply_move(entry_id, proposal)
        except DomainError:
            return False
        return placement.changed

    def drop_positions(self, entry_id: EntryId, target_id: EntryId) -> list[DropPosition]:
        """Drop positions to offer while hovering entry_id over target_id."""
        if target_id not in self.index or entry_id not in self.index:
            return []
        try:
            target_depth = self.depth_ancestry.depth_of(target_id)
        except CycleDetectedError:
            return []

        offered = [DropPosition.BEFORE, DropPosition.AFTER]
        if target_depth < self.max_depth:
            offered.append(DropPosition.CHILD)
        return [
            position
            for position in offered
            if self.is_move_legal(
                entry_id, TargetedMove(target_entry_id=target_id, position=position)
            )
        ]
