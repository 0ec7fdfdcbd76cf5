"""Position assigner.

Computes the order_index that puts a moved entry at a given slot among its
new siblings. Only the moved entry's parent pointer changes on a move;
its replies keep pointing at it, so the subtree travels with it.
"""

from typing import Sequence

from thredge.domain.model import Entry
from thredge.domain.tree.constants import ORDER_STEP
from thredge.domain.value import EntryId, Placement


class PositionAssigner:
    """Assign sibling order indexes with midpoint insertion."""

    def __init__(self, order_step: int = ORDER_STEP) -> None:
        self.order_step = order_step

    def unchanged(self, entry: Entry) -> Placement:
        """Placement for a move that leaves the entry where it is."""
        return Placement(
            entry_id=entry.id,
            parent_entry_id=entry.parent_entry_id,
            order_index=entry.order_index,
            changed=False,
        )

    def assign(
        self,
        entry: Entry,
        parent_id: EntryId | None,
        siblings: Sequence[Entry],
        insert_at: int,
    ) -> Placement:
        """Place entry at insert_at among siblings.

        Args:
            entry: The moved entry
            parent_id: New parent (None for the root group)
            siblings: New sibling group in order, without the moved entry
            insert_at: Slot to insert at, clamped to the group bounds

        Returns:
            Placement with the new parent and order index, plus any
            siblings renumbered when the neighbouring indexes left no gap
        """
        group = list(siblings)
        at = max(0, min(insert_at, len(group)))
        left = group[at - 1] if at > 0 else None
        right = group[at] if at < len(group) else None
        renumbered: dict[EntryId, int] = {}

        if left is None and right is None:
            order_index = self.order_step
        elif left is None:
            order_index = right.order_index - self.order_step
        elif right is None:
            order_index = left.order_index + self.order_step
        elif right.order_index - left.order_index > 1:
            order_index = left.order_index + (right.order_index - left.order_index) // 2
        else:
            # No room between the neighbours: spread the whole group out again
            group.insert(at, entry)
            order_index = entry.order_index
            for position, sibling in enumerate(group):
                value = (position + 1) * self.order_step
                if sibling.id == entry.id:
                    order_index = value
                elif sibling.order_index != value:
                    renumbered[sibling.id] = value

        changed = (
            parent_id != entry.parent_entry_id
            or order_index != entry.order_index
            or bool(renumbered)
        )
        return Placement(
            entry_id=entry.id,
            parent_entry_id=parent_id,
            order_index=order_index,
            renumbered=renumbered,
            changed=changed,
        )
