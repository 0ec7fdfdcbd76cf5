"""Move validator.

Decides whether a proposed move keeps the reply tree acyclic and within
the nesting limit, and if so where the entry lands: its new parent and
its slot among the new siblings.
"""

from dataclasses import dataclass

from thredge.domain.error import (
    DepthLimitExceededError,
    EntryLockedError,
    NotFoundError,
    SelfContainmentError,
    TargetNotFoundError,
)
from thredge.domain.model import Entry
from thredge.domain.tree.ancestry import AncestryResolver
from thredge.domain.tree.constants import MAX_DEPTH
from thredge.domain.tree.linearizer import linearize
from thredge.domain.tree.store import TreeIndex
from thredge.domain.value import (
    DirectionalMove,
    DropPosition,
    EntryId,
    MoveDirection,
    MoveProposal,
    TargetedMove,
)


@dataclass(frozen=True)
class MovePlan:
    """Validated destination of a move.

    siblings is the ordered destination group with the moved entry
    removed; insert_at indexes into it. A plan with noop set leaves the
    entry where it is.
    """

    entry: Entry
    parent_id: EntryId | None
    siblings: tuple[Entry, ...]
    insert_at: int
    noop: bool = False


class MoveValidator:
    """Validate moves against one tree snapshot.

    Placement uses the visible tree. The depth bound and self-containment
    are checked with depth_resolver, which covers hidden entries too when
    given: a hidden ancestor or descendant counts again once restored.
    """

    def __init__(
        self,
        index: TreeIndex,
        resolver: AncestryResolver,
        max_depth: int = MAX_DEPTH,
        depth_resolver: AncestryResolver | None = None,
    ) -> None:
        self.index = index
        self.resolver = resolver
        self.depth_resolver = depth_resolver or resolver
        self.max_depth = max_depth

    def plan(self, entry_id: EntryId, proposal: MoveProposal) -> MovePlan:
        """Validate a proposal and work out where the entry lands.

        Raises:
            NotFoundError: If the moving entry is not in the tree
            TargetNotFoundError: If a drop target is not in the tree
            SelfContainmentError: If the entry would land inside itself
            DepthLimitExceededError: If the subtree would get too deep
            EntryLockedError: If a reply with replies is moved one step
            CycleDetectedError: If the tree data is corrupted
        """
        if isinstance(proposal, TargetedMove):
            return self.plan_targeted(entry_id, proposal)
        return self.plan_directional(entry_id, proposal)

    def _require(self, entry_id: EntryId) -> Entry:
        entry = self.index.get(entry_id)
        if entry is None:
            raise NotFoundError("Entry", str(entry_id))
        return entry

    def _parent_depth(self, parent_id: EntryId | None) -> int:
        return 0 if parent_id is None else self.depth_resolver.depth_of(parent_id)

    def _check_depth(self, entry_id: EntryId, parent_id: EntryId | None) -> None:
        height = self.depth_resolver.subtree_height(entry_id)
        resulting = self._parent_depth(parent_id) + height
        if resulting > self.max_depth:
            raise DepthLimitExceededError(str(entry_id), resulting, self.max_depth)

    def _without(self, parent_id: EntryId | None, entry_id: EntryId) -> tuple[Entry, ...]:
        return tuple(e for e in self.index.group(parent_id) if e.id != entry_id)

    def _slot_of(self, group: tuple[Entry, ...], entry_id: EntryId) -> int:
        for position, candidate in enumerate(group):
            if candidate.id == entry_id:
                return position
        return len(group)

    def _stay(self, entry: Entry) -> MovePlan:
        parent_id = self.index.parent_id(entry.id)
        group = self.index.group(parent_id)
        return MovePlan(
            entry=entry,
            parent_id=parent_id,
            siblings=self._without(parent_id, entry.id),
            insert_at=self._slot_of(group, entry.id),
            noop=True,
        )

    def plan_directional(self, entry_id: EntryId, move: DirectionalMove) -> MovePlan:
        """One step UP or DOWN in render order."""
        entry = self._require(entry_id)
        up = move.direction == MoveDirection.UP
        parent_id = self.index.parent_id(entry_id)

        if parent_id is not None:
            if self.index.children(entry_id):
                raise EntryLockedError(str(entry_id))
            return self._plan_reply_step(entry, parent_id, up)

        roots = self.index.roots
        if (up and roots[0].id == entry_id) or (not up and roots[-1].id == entry_id):
            return self._stay(entry)

        sequence = linearize(self.index)
        position = next(i for i, e in enumerate(sequence) if e.id == entry_id)
        neighbour_at = position - 1 if up else position + 1
        if neighbour_at < 0 or neighbour_at >= len(sequence):
            return self._stay(entry)
        neighbour = sequence[neighbour_at]

        if self.depth_resolver.is_ancestor(entry_id, neighbour.id):
            raise SelfContainmentError(str(entry_id), str(neighbour.id))
        new_parent = self.resolver.root_of(neighbour.id)
        self._check_depth(entry_id, new_parent)

        siblings = self._without(new_parent, entry_id)
        if neighbour.id != new_parent and self.index.parent_id(neighbour.id) == new_parent:
            slot = self._slot_of(siblings, neighbour.id)
            insert_at = slot if up else slot + 1
        else:
            insert_at = 0 if up else len(siblings)
        return MovePlan(entry=entry, parent_id=new_parent, siblings=siblings, insert_at=insert_at)

    def _plan_reply_step(self, entry: Entry, parent_id: EntryId, up: bool) -> MovePlan:
        group = self.index.children(parent_id)
        position = self._slot_of(group, entry.id)
        siblings = self._without(parent_id, entry.id)

        if up and position > 0:
            return MovePlan(
                entry=entry, parent_id=parent_id, siblings=siblings, insert_at=position - 1
            )
        if not up and position < len(group) - 1:
            return MovePlan(
                entry=entry, parent_id=parent_id, siblings=siblings, insert_at=position + 1
            )

        if up:
            # Leaves the thread of replies: lands before the top-level entry it hung under
            anchor = self.resolver.root_of(parent_id)
            new_parent = None
            self._check_depth(entry.id, new_parent)
            roots = self._without(None, entry.id)
            return MovePlan(
                entry=entry,
                parent_id=new_parent,
                siblings=roots,
                insert_at=self._slot_of(roots, anchor),
            )

        new_parent = self.index.parent_id(parent_id)
        self._check_depth(entry.id, new_parent)
        siblings = self._without(new_parent, entry.id)
        return MovePlan(
            entry=entry,
            parent_id=new_parent,
            siblings=siblings,
            insert_at=self._slot_of(siblings, parent_id) + 1,
        )

    def plan_targeted(self, entry_id: EntryId, move: TargetedMove) -> MovePlan:
        """Drop BEFORE, AFTER or as first CHILD of a target entry."""
        entry = self._require(entry_id)
        target_id = move.target_entry_id
        if target_id not in self.index:
            raise TargetNotFoundError(str(target_id))
        if target_id == entry_id or self.depth_resolver.is_ancestor(entry_id, target_id):
            raise SelfContainmentError(str(entry_id), str(target_id))

        if move.position == DropPosition.CHILD:
            new_parent: EntryId | None = target_id
        else:
            new_parent = self.index.parent_id(target_id)
        # No lock on replies that have replies here, unlike step moves.
        # The whole subtree travels and only the depth bound applies.
        self._check_depth(entry_id, new_parent)

        siblings = self._without(new_parent, entry_id)
        if move.position == DropPosition.CHILD:
            insert_at = 0
        elif move.position == DropPosition.BEFORE:
            insert_at = self._slot_of(siblings, target_id)
        else:
            insert_at = self._slot_of(siblings, target_id) + 1
        return MovePlan(entry=entry, parent_id=new_parent, siblings=siblings, insert_at=insert_at)
