"""Ancestry resolver.

Answers depth, height and ancestor questions over a TreeIndex. Results are
memoized per resolver; build a new resolver whenever the index is rebuilt.
"""

from thredge.domain.error import CycleDetectedError, NotFoundError
from thredge.domain.model import Entry
from thredge.domain.tree.store import TreeIndex
from thredge.domain.value import EntryId


class AncestryResolver:
    """Depth and ancestry queries over one tree snapshot.

    Every upward walk is bounded by the number of entries in the index; a
    walk that revisits an id or runs past that bound raises
    CycleDetectedError instead of looping.
    """

    def __init__(self, index: TreeIndex) -> None:
        self.index = index
        self._depths: dict[EntryId, int] = {}
        self._heights: dict[EntryId, int] = {}

    def _require(self, entry_id: EntryId) -> Entry:
        entry = self.index.get(entry_id)
        if entry is None:
            raise NotFoundError("Entry", str(entry_id))
        return entry

    def ancestors(self, entry_id: EntryId) -> list[EntryId]:
        """Ancestor ids of an entry, nearest first.

        Raises:
            NotFoundError: If the entry is not in the index
            CycleDetectedError: If the parent chain does not reach a root
        """
        self._require(entry_id)
        chain: list[EntryId] = []
        seen = {entry_id}
        current = self.index.parent_id(entry_id)
        while current is not None:
            if current in seen or len(chain) >= len(self.index):
                raise CycleDetectedError(str(entry_id))
            seen.add(current)
            chain.append(current)
            current = self.index.parent_id(current)
        return chain

    def depth_of(self, entry_id: EntryId) -> int:
        """Depth of an entry: 1 for a root, 1 + parent depth otherwise."""
        cached = self._depths.get(entry_id)
        if cached is not None:
            return cached
        depth = 1 + len(self.ancestors(entry_id))
        self._depths[entry_id] = depth
        return depth

    def subtree_height(self, entry_id: EntryId) -> int:
        """Longest chain below an entry, counting the entry itself.

        Iterative post-order walk so corrupted deep chains cannot exhaust
        the interpreter stack.
        """
        self._require(entry_id)
        if entry_id in self._heights:
            return self._heights[entry_id]

        in_progress: set[EntryId] = set()
        stack: list[tuple[EntryId, bool]] = [(entry_id, False)]
        while stack:
            current, expanded = stack.pop()
            children = self.index.children(current)
            if expanded:
                in_progress.discard(current)
                self._heights[current] = 1 + max(
                    (self._heights[child.id] for child in children), default=0
                )
                continue
            if current in self._heights:
                continue
            in_progress.add(current)
            stack.append((current, True))
            for child in children:
                if child.id in in_progress:
                    raise CycleDetectedError(str(child.id))
                if child.id not in self._heights:
                    stack.append((child.id, False))
        return self._heights[entry_id]

    def is_ancestor(self, candidate_id: EntryId, entry_id: EntryId) -> bool:
        """Whether walking up from entry_id reaches candidate_id."""
        return candidate_id in self.ancestors(entry_id)

    def root_of(self, entry_id: EntryId) -> EntryId:
        """Topmost resolvable ancestor of an entry (the entry itself for roots)."""
        chain = self.ancestors(entry_id)
        return chain[-1] if chain else entry_id

    def descendants(self, entry_id: EntryId) -> list[EntryId]:
        """All entries below an entry, breadth first."""
        self._require(entry_id)
        found: list[EntryId] = []
        seen = {entry_id}
        queue = [child.id for child in self.index.children(entry_id)]
        while queue:
            current = queue.pop(0)
            if current in seen:
                raise CycleDetectedError(str(entry_id))
            seen.add(current)
            found.append(current)
            queue.extend(child.id for child in self.index.children(current))
        return found
