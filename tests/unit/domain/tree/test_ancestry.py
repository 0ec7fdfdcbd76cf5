"""Unit tests for the ancestry resolver."""

import pytest

from thredge.domain.error import CycleDetectedError, NotFoundError
from thredge.domain.tree import AncestryResolver, build
from tests.factories import entry_id, make_entry


@pytest.fixture
def chain():
    """root -> child -> grandchild, plus a second leaf under root."""
    root = make_entry("root", order_index=1000)
    child = make_entry("child", parent=root, order_index=1000)
    leaf = make_entry("leaf", parent=root, order_index=2000)
    grandchild = make_entry("grandchild", parent=child, order_index=1000)
    return [root, child, leaf, grandchild]


@pytest.fixture
def resolver(chain):
    return AncestryResolver(build(chain))


class TestDepth:
    """Tests for depth_of()."""

    def test_root_has_depth_one(self, resolver):
        assert resolver.depth_of(entry_id("root")) == 1

    def test_depth_is_parent_depth_plus_one(self, chain, resolver):
        """Every entry with a parent should be one level below it."""
        for entry in chain:
            if entry.parent_entry_id is None:
                assert resolver.depth_of(entry.id) == 1
            else:
                assert resolver.depth_of(entry.id) == (
                    resolver.depth_of(entry.parent_entry_id) + 1
                )

    def test_two_entry_cycle_is_detected(self):
        """A.parent=B and B.parent=A must raise, not loop."""
        a = make_entry("a", parent=entry_id("b"))
        b = make_entry("b", parent=entry_id("a"))
        resolver = AncestryResolver(build([a, b]))

        with pytest.raises(CycleDetectedError):
            resolver.depth_of(a.id)

    def test_self_parent_is_detected(self):
        loop = make_entry("loop", parent=entry_id("loop"))
        resolver = AncestryResolver(build([loop]))

        with pytest.raises(CycleDetectedError):
            resolver.depth_of(loop.id)

    def test_unknown_entry_raises_not_found(self, resolver):
        with pytest.raises(NotFoundError):
            resolver.depth_of(entry_id("ghost"))


class TestSubtreeHeight:
    """Tests for subtree_height()."""

    def test_leaf_height_is_one(self, resolver):
        assert resolver.subtree_height(entry_id("leaf")) == 1
        assert resolver.subtree_height(entry_id("grandchild")) == 1

    def test_height_counts_longest_chain(self, resolver):
        assert resolver.subtree_height(entry_id("child")) == 2
        assert resolver.subtree_height(entry_id("root")) == 3

    def test_height_is_one_only_without_children(self, chain, resolver):
        index = resolver.index
        for entry in chain:
            height = resolver.subtree_height(entry.id)
            assert height >= 1
            assert (height == 1) == (not index.children(entry.id))

    def test_cycle_below_entry_is_detected(self):
        a = make_entry("a", parent=entry_id("b"))
        b = make_entry("b", parent=entry_id("a"))
        resolver = AncestryResolver(build([a, b]))

        with pytest.raises(CycleDetectedError):
            resolver.subtree_height(a.id)

    def test_deep_chain_does_not_hit_recursion_limit(self):
        """Heights are computed iteratively, even for corrupted deep data."""
        entries = [make_entry("n0")]
        for i in range(1, 3000):
            entries.append(make_entry(f"n{i}", parent=entries[-1]))
        resolver = AncestryResolver(build(entries))

        assert resolver.subtree_height(entry_id("n0")) == 3000


class TestRelations:
    """Tests for is_ancestor(), root_of() and descendants()."""

    def test_is_ancestor(self, resolver):
        assert resolver.is_ancestor(entry_id("root"), entry_id("grandchild"))
        assert resolver.is_ancestor(entry_id("child"), entry_id("grandchild"))
        assert not resolver.is_ancestor(entry_id("leaf"), entry_id("grandchild"))
        assert not resolver.is_ancestor(entry_id("grandchild"), entry_id("grandchild"))

    def test_root_of(self, resolver):
        assert resolver.root_of(entry_id("grandchild")) == entry_id("root")
        assert resolver.root_of(entry_id("root")) == entry_id("root")

    def test_ancestors_are_nearest_first(self, resolver):
        assert resolver.ancestors(entry_id("grandchild")) == [
            entry_id("child"),
            entry_id("root"),
        ]

    def test_descendants(self, resolver):
        assert set(resolver.descendants(entry_id("root"))) == {
            entry_id("child"),
            entry_id("leaf"),
            entry_id("grandchild"),
        }
        assert resolver.descendants(entry_id("leaf")) == []
