"""Tree store.

Indexes a flat list of one thread's entries by id and by parent. The index
is rebuilt from scratch on every fetch and never mutated afterwards.
"""

from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable

from thredge.domain.model import Entry
from thredge.domain.value import EntryId


def sibling_key(entry: Entry) -> tuple[int, datetime, str]:
    """Sort key that totally orders entries sharing a parent."""
    return (entry.order_index, entry.created_at, str(entry.id))


@dataclass(frozen=True)
class TreeIndex:
    """Read-only indexes over one thread's entries.

    Roots are entries whose parent is unset or refers to an id that is not
    in the index, so a hidden or missing ancestor never breaks rendering.
    """

    entries: tuple[Entry, ...]
    entry_by_id: dict[EntryId, Entry]
    roots: tuple[Entry, ...]
    children_by_parent: dict[EntryId, tuple[Entry, ...]]

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self.entry_by_id

    def get(self, entry_id: EntryId) -> Entry | None:
        return self.entry_by_id.get(entry_id)

    def children(self, entry_id: EntryId) -> tuple[Entry, ...]:
        return self.children_by_parent.get(entry_id, ())

    def parent_id(self, entry_id: EntryId) -> EntryId | None:
        """Parent id if the parent is present in the index, else None."""
        entry = self.entry_by_id.get(entry_id)
        if entry is None or entry.parent_entry_id not in self.entry_by_id:
            return None
        return entry.parent_entry_id

    def group(self, parent_id: EntryId | None) -> tuple[Entry, ...]:
        """Ordered sibling group under parent_id (None for the root group)."""
        if parent_id is None:
            return self.roots
        return self.children(parent_id)


def build(entries: Iterable[Entry]) -> TreeIndex:
    """Build a TreeIndex from a flat entry list.

    Pure function of its input. A repeated id keeps its first position and
    its last value.

    Args:
        entries: Entries of a single thread, in any order

    Returns:
        Tree index with sibling groups sorted by sibling_key
    """
    entry_by_id: dict[EntryId, Entry] = {}
    for entry in entries:
        entry_by_id[entry.id] = entry

    grouped: dict[EntryId, list[Entry]] = defaultdict(list)
    roots: list[Entry] = []
    for entry in entry_by_id.values():
        parent_id = entry.parent_entry_id
        if parent_id is not None and parent_id in entry_by_id:
            grouped[parent_id].append(entry)
        else:
            roots.append(entry)

    return TreeIndex(
        entries=tuple(entry_by_id.values()),
        entry_by_id=entry_by_id,
        roots=tuple(sorted(roots, key=sibling_key)),
        children_by_parent={
            parent_id: tuple(sorted(children, key=sibling_key))
            for parent_id, children in grouped.items()
        },
    )
