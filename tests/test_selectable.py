"""Tests for the selectable list."""

import pytest

from eradicate.selectable import SelectableList


class TestConstruction:
    def test_empty_has_no_selection(self):
        items = SelectableList()
        assert items.items == []
        assert items.current_index() is None
        assert items.current() is None

    def test_with_items_selects_first(self):
        items = SelectableList.with_items(["a", "b", "c"])
        assert items.current_index() == 0
        assert items.current() == "a"

    def test_with_no_items_selects_nothing(self):
        assert SelectableList.with_items([]).current_index() is None

    def test_with_items_copies_input(self):
        source = ["a", "b"]
        items = SelectableList.with_items(source)
        source.append("c")
        assert len(items) == 2

    def test_iterates_in_order(self):
        assert list(SelectableList.with_items([3, 1, 2])) == [3, 1, 2]


class TestNavigation:
    def test_next_wraps_from_last_to_first(self):
        items = SelectableList.with_items(["a", "b", "c"])
        items.move_next()
        items.move_next()
        assert items.current_index() == 2
        items.move_next()
        assert items.current_index() == 0

    def test_previous_wraps_from_first_to_last(self):
        items = SelectableList.with_items(["a", "b", "c"])
        items.move_previous()
        assert items.current_index() == 2

    @pytest.mark.parametrize("size", [1, 2, 5, 8])
    def test_next_len_times_returns_to_start(self, size):
        items = SelectableList.with_items(list(range(size)))
        items.move_next()
        start = items.current_index()
        for _ in range(size):
            items.move_next()
        assert items.current_index() == start

    @pytest.mark.parametrize("size", [1, 2, 5])
    def test_previous_undoes_next_at_every_step(self, size):
        items = SelectableList.with_items(list(range(size)))
        for _ in range(size * 2):
            before = items.current_index()
            items.move_next()
            items.move_previous()
            assert items.current_index() == before
            items.move_next()

    def test_moves_on_empty_are_noops(self):
        items = SelectableList()
        items.move_next()
        items.move_previous()
        assert items.current_index() is None

    def test_move_without_selection_selects_first(self):
        items = SelectableList.with_items(["a", "b", "c"])
        items.clear_selection()
        items.move_previous()
        assert items.current_index() == 0
        items.clear_selection()
        items.move_next()
        assert items.current_index() == 0

    def test_clear_selection(self):
        items = SelectableList.with_items(["a"])
        items.clear_selection()
        assert items.current_index() is None
        assert items.current() is None
