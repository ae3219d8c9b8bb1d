"""Tests for rendering AppState with Rich."""

from rich.console import Console

from eradicate.state import AppState
from eradicate.tui import Screen, Theme
from eradicate.tui.view import _calculate_visible_range, entry_line, search_line
from eradicate.types import Entry


def _state_with(paths, marked=None):
    entries = [Entry(p, is_file=not p.endswith("/")) for p in paths]
    for i in marked or []:
        entries[i].toggle_delete()
    state = AppState(search_fn=lambda pattern, case: entries)
    state.enter_edit_mode()
    for ch in "*":
        state.push_char(ch)
    state.commit_search()
    return state


def _text(renderable, width=100):
    console = Console(record=True, width=width, force_terminal=False)
    console.print(renderable)
    return console.export_text()


class TestVisibleRange:
    def test_empty(self):
        assert _calculate_visible_range(0, 0, 5, 0) == (0, 0)

    def test_scrolls_down_to_cursor(self):
        assert _calculate_visible_range(7, 10, 5, 0) == (3, 8)

    def test_scrolls_up_to_cursor(self):
        assert _calculate_visible_range(1, 10, 5, 4) == (1, 6)

    def test_keeps_offset_when_visible(self):
        assert _calculate_visible_range(4, 10, 5, 2) == (2, 7)


class TestLines:
    def test_search_line_empty_pattern(self):
        assert "Empty pattern" in _text(search_line(AppState()))

    def test_search_line_shows_pattern_and_case(self):
        state = _state_with(["a"])
        state.toggle_case_sensitivity()
        text = _text(search_line(state))
        assert "Searching: *" in text
        assert "case sensitive: OFF" in text

    def test_entry_line_marks(self):
        theme = Theme()
        marked = _text(entry_line(Entry("a.txt", True), False, theme))
        kept = _text(entry_line(Entry("dir", False, marked_for_delete=False), True, theme))
        assert "File" in marked and theme.marked_icon in marked
        assert "Dir" in kept and theme.kept_icon in kept
        assert theme.cursor_icon in kept

    def test_entry_line_escapes_markup_in_paths(self):
        text = _text(entry_line(Entry("[bold]x", True), False))
        assert "[bold]x" in text


class TestScreen:
    def test_browsing_screen(self):
        state = _state_with(["a.txt", "b.txt", "build/"], marked=[1])
        text = _text(Screen().render(state, height=30))
        assert "[i]nsert mode" in text
        assert "Entries to eradicate: 2" in text
        assert "a.txt" in text and "b.txt" in text and "build/" in text

    def test_editing_screen_shows_cursor(self):
        state = AppState()
        state.enter_edit_mode()
        state.push_char("*")
        theme = Theme()
        text = _text(Screen(theme).render(state))
        assert "[Enter] set the pattern" in text
        assert "*" + theme.input_cursor in text

    def test_status_message(self):
        text = _text(Screen().render(AppState(), status="Could not delete x: nope"))
        assert "Could not delete x: nope" in text

    def test_empty_list(self):
        assert "No entries" in _text(Screen().render(AppState()))

    def test_long_list_scrolls_with_selection(self):
        state = _state_with([f"file{i:02}" for i in range(30)])
        screen = Screen(Theme(max_visible_items=5, min_visible_items=5))
        for _ in range(12):
            state.move_next()

        text = _text(screen.render(state, height=20))

        assert "file12" in text
        assert "file00" not in text
        assert "more above" in text
        assert "more below" in text

    def test_theme_from_config_ignores_unknown_keys(self):
        theme = Theme.from_config({"marked_color": "magenta", "nonsense": 1})
        assert theme.marked_color == "magenta"
        assert theme.kept_color == Theme().kept_color
