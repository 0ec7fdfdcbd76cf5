"""Linearizer.

Flattens a TreeIndex into the single sequence used for rendering and for
resolving UP/DOWN moves.
"""

import logfire

from thredge.domain.model import Entry
from thredge.domain.tree.store import TreeIndex
from thredge.domain.value import EntryId


def linearize(index: TreeIndex) -> list[Entry]:
    """Pre-order walk of the forest with siblings in sibling_key order.

    Entries that cannot be reached from a root (a broken or cyclic parent
    chain) are appended afterwards, each through its own walk, so every
    entry appears exactly once.

    Args:
        index: Tree index snapshot

    Returns:
        Entries in render order
    """
    ordered: list[Entry] = []
    visited: set[EntryId] = set()

    def walk(start: Entry) -> None:
        stack = [start]
        while stack:
            current = stack.pop()
            if current.id in visited:
                continue
            visited.add(current.id)
            ordered.append(current)
            stack.extend(reversed(index.children(current.id)))

    for root in index.roots:
        walk(root)

    reachable = len(ordered)
    for entry in index.entries:
        if entry.id not in visited:
            walk(entry)

    if len(ordered) > reachable:
        logfire.warn(
            "Entries unreachable from any root were appended",
            count=len(ordered) - reachable,
            entry_ids=[str(entry.id) for entry in ordered[reachable:]],
        )

    return ordered
