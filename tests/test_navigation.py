"""Tests for cyclic block navigation."""

from __future__ import annotations

import pytest

from diffview.diff_engine import Direction, NavigationController


class TestNavigationController:
    """Tests for NavigationController."""

    def test_starts_at_zero(self):
        assert NavigationController(3).current_index == 0

    def test_next_wraps(self):
        nav = NavigationController(3)
        assert [nav.next() for _ in range(4)] == [1, 2, 0, 1]

    def test_previous_wraps(self):
        nav = NavigationController(3)
        assert [nav.previous() for _ in range(4)] == [2, 1, 0, 2]

    @pytest.mark.parametrize("count", [1, 2, 5])
    @pytest.mark.parametrize("direction", ["next", "previous"])
    def test_full_cycle_returns_to_start(self, count, direction):
        nav = NavigationController(count)
        nav.navigate("next")
        start = nav.current_index
        for _ in range(count):
            nav.navigate(direction)
        assert nav.current_index == start

    def test_empty_is_a_no_op(self):
        nav = NavigationController(0)
        assert nav.navigate("next") == 0
        assert nav.navigate("previous") == 0
        assert nav.current_index == 0

    def test_single_block_stays(self):
        nav = NavigationController(1)
        assert nav.navigate("next") == 0
        assert nav.navigate("previous") == 0

    def test_set_block_count_clamps(self):
        nav = NavigationController(5)
        nav.previous()
        assert nav.current_index == 4
        assert nav.set_block_count(2) == 1
        assert nav.set_block_count(0) == 0

    def test_set_block_count_keeps_index_in_range(self):
        nav = NavigationController(5)
        nav.next()
        assert nav.set_block_count(10) == 1

    def test_direction_values(self):
        assert Direction("next") is Direction.NEXT
        assert Direction("previous") is Direction.PREVIOUS
        assert Direction("prev") is Direction.PREVIOUS
        assert NavigationController(3).navigate(Direction.PREVIOUS) == 2

    def test_unknown_direction(self):
        with pytest.raises(ValueError):
            NavigationController(3).navigate("sideways")
