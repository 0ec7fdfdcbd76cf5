"""Unit tests for the linearizer."""

from thredge.domain.tree import build
from thredge.domain.tree.linearizer import linearize
from tests.factories import entry_id, make_entry, names


def test_pre_order_with_sorted_siblings():
    """Each entry is followed by its replies before its next sibling."""
    r1 = make_entry("r1", order_index=1000)
    r2 = make_entry("r2", order_index=2000)
    c2 = make_entry("c2", parent=r1, order_index=2000)
    c1 = make_entry("c1", parent=r1, order_index=1000)
    g1 = make_entry("g1", parent=c1, order_index=1000)

    ordered = linearize(build([r2, g1, c2, r1, c1]))

    assert names(ordered) == ["r1", "c1", "g1", "c2", "r2"]


def test_orphans_are_rendered_as_roots():
    root = make_entry("root", order_index=1000)
    orphan = make_entry("orphan", parent=entry_id("hidden"), order_index=2000)
    reply = make_entry("reply", parent=orphan)

    ordered = linearize(build([reply, root, orphan]))

    assert names(ordered) == ["root", "orphan", "reply"]


def test_entries_on_a_cycle_are_still_emitted_once():
    """Entries unreachable from any root are appended, each exactly once."""
    root = make_entry("root")
    a = make_entry("a", parent=entry_id("b"))
    b = make_entry("b", parent=entry_id("a"))
    c = make_entry("c", parent=a)

    ordered = linearize(build([root, a, b, c]))

    assert ordered[0].body == "root"
    assert sorted(names(ordered)) == ["a", "b", "c", "root"]
    assert len({e.id for e in ordered}) == len(ordered)


def test_linearize_is_repeatable():
    entries = [
        make_entry("r1", order_index=1000),
        make_entry("r2", order_index=1000, minutes=1),
        make_entry("c1", parent=entry_id("r2")),
    ]

    assert linearize(build(entries)) == linearize(build(entries))


def test_empty_list():
    assert linearize(build([])) == []
