"""Unit tests for the drag and drop state machine."""

import pytest

from thredge.domain.error import ValidationError
from thredge.domain.tree import DragPhase, DragSession, ReplyTree
from thredge.domain.value import DropPosition
from tests.factories import entry_id, make_entry


@pytest.fixture
def tree():
    r1 = make_entry("r1", order_index=1000)
    c1 = make_entry("c1", parent=r1, order_index=1000)
    r2 = make_entry("r2", order_index=2000)
    r3 = make_entry("r3", order_index=3000)
    return ReplyTree([r1, c1, r2, r3])


def test_full_drop_cycle(tree):
    """idle -> dragging -> hovering -> finalizing -> idle."""
    session = DragSession()

    session = session.begin(entry_id("r3"))
    assert session.phase == DragPhase.DRAGGING

    session = session.hover(tree, entry_id("r1"), DropPosition.CHILD)
    assert session.phase == DragPhase.HOVERING
    assert session.target_id == entry_id("r1")

    session, move = session.release()
    assert session.phase == DragPhase.FINALIZING
    assert move is not None
    assert move.target_entry_id == entry_id("r1")
    assert move.position == DropPosition.CHILD
    assert entry_id("r3") in session.pending_entry_ids

    session = session.settle(entry_id("r3"))
    assert session.phase == DragPhase.IDLE
    assert session.pending_entry_ids == frozenset()


def test_illegal_hover_is_not_highlighted(tree):
    session = DragSession().begin(entry_id("r1"))

    session = session.hover(tree, entry_id("c1"), DropPosition.AFTER)

    assert session.phase == DragPhase.DRAGGING
    assert session.target_id is None


def test_leaving_target_returns_to_dragging(tree):
    session = (
        DragSession()
        .begin(entry_id("r3"))
        .hover(tree, entry_id("r1"), DropPosition.BEFORE)
        .leave()
    )

    assert session.phase == DragPhase.DRAGGING
    assert session.position is None


def test_release_outside_target_cancels(tree):
    session, move = DragSession().begin(entry_id("r3")).release()

    assert move is None
    assert session.phase == DragPhase.IDLE


def test_other_entries_can_be_dragged_while_a_drop_is_pending(tree):
    session = DragSession().begin(entry_id("r3"))
    session, _ = session.hover(tree, entry_id("r1"), DropPosition.CHILD).release()

    session = session.begin(entry_id("r2"))

    assert session.phase == DragPhase.DRAGGING
    assert session.entry_id == entry_id("r2")
    assert entry_id("r3") in session.pending_entry_ids

    # The answer for r3 arrives mid-drag and must not end the r2 gesture
    session = session.settle(entry_id("r3"))
    assert session.phase == DragPhase.DRAGGING
    assert session.pending_entry_ids == frozenset()


def test_pending_entry_cannot_be_dragged_again(tree):
    session = DragSession().begin(entry_id("r3"))
    session, _ = session.hover(tree, entry_id("r1"), DropPosition.CHILD).release()

    with pytest.raises(ValidationError):
        session.begin(entry_id("r3"))


def test_transitions_do_not_mutate_session(tree):
    idle = DragSession()
    dragging = idle.begin(entry_id("r3"))

    assert idle.phase == DragPhase.IDLE
    assert dragging is not idle


def test_hover_without_drag_is_rejected(tree):
    with pytest.raises(ValidationError):
        DragSession().hover(tree, entry_id("r1"), DropPosition.CHILD)


def test_cannot_begin_twice():
    session = DragSession().begin(entry_id("r3"))

    with pytest.raises(ValidationError):
        session.begin(entry_id("r2"))
