"""Unit tests for the position assigner."""

from thredge.domain.tree import PositionAssigner
from tests.factories import entry_id, make_entry


def siblings(*order_indexes: int):
    return [make_entry(f"s{i}", order_index=value) for i, value in enumerate(order_indexes)]


class TestAssign:
    """Tests for PositionAssigner.assign()."""

    def setup_method(self):
        self.assigner = PositionAssigner(order_step=1000)
        self.moving = make_entry("moving", order_index=7000)

    def test_empty_group_gets_one_step(self):
        placement = self.assigner.assign(self.moving, entry_id("p"), [], 0)

        assert placement.order_index == 1000
        assert placement.parent_entry_id == entry_id("p")
        assert placement.renumbered == {}
        assert placement.changed

    def test_first_slot_goes_one_step_below_right_neighbour(self):
        placement = self.assigner.assign(self.moving, None, siblings(1000, 2000), 0)

        assert placement.order_index == 0

    def test_last_slot_goes_one_step_above_left_neighbour(self):
        placement = self.assigner.assign(self.moving, None, siblings(1000, 2000), 2)

        assert placement.order_index == 3000

    def test_middle_slot_takes_midpoint(self):
        placement = self.assigner.assign(self.moving, None, siblings(1000, 2000), 1)

        assert placement.order_index == 1500
        assert placement.renumbered == {}

    def test_adjacent_indexes_renumber_the_group(self):
        """No integer fits between 1000 and 1001, so the group is respaced."""
        group = siblings(1000, 1001)

        placement = self.assigner.assign(self.moving, None, group, 1)

        assert placement.order_index == 2000
        # s0 already sits at 1000 and is left alone
        assert placement.renumbered == {group[1].id: 3000}

    def test_equal_indexes_renumber_the_group(self):
        group = siblings(500, 500, 500)

        placement = self.assigner.assign(self.moving, None, group, 2)

        assert placement.order_index == 3000
        assert placement.renumbered == {
            group[0].id: 1000,
            group[1].id: 2000,
            group[2].id: 4000,
        }

    def test_out_of_range_slot_is_clamped(self):
        placement = self.assigner.assign(self.moving, None, siblings(1000), 99)

        assert placement.order_index == 2000

    def test_same_parent_and_index_is_unchanged(self):
        moving = make_entry("moving", order_index=1500)

        placement = self.assigner.assign(moving, None, siblings(1000, 2000), 1)

        assert not placement.changed

    def test_custom_step(self):
        placement = PositionAssigner(order_step=10).assign(self.moving, None, siblings(10), 1)

        assert placement.order_index == 20


def test_unchanged_placement_keeps_entry_values():
    entry = make_entry("stay", parent=entry_id("p"), order_index=4000)

    placement = PositionAssigner().unchanged(entry)

    assert placement.parent_entry_id == entry_id("p")
    assert placement.order_index == 4000
    assert not placement.changed
