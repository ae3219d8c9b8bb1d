"""Render AppState as Rich renderables.

Rendering only reads the state. The one piece of view state kept here is the
scroll offset, so the selected entry stays inside the visible window.
"""

from __future__ import annotations

from rich.console import Group
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from ..state import AppState
from ..types import Entry, Mode
from .theme import DEFAULT_THEME, Theme


def _calculate_visible_range(
    cursor: int, total: int, max_visible: int, scroll_offset: int
) -> tuple[int, int]:
    """Return (scroll_offset, visible_end) keeping cursor in view."""
    if total == 0:
        return 0, 0
    cursor = max(0, min(cursor, total - 1))
    if cursor < scroll_offset:
        scroll_offset = cursor
    elif cursor >= scroll_offset + max_visible:
        scroll_offset = cursor - max_visible + 1
    scroll_offset = max(0, min(scroll_offset, total - 1))
    return scroll_offset, min(scroll_offset + max_visible, total)


def _key(label: str) -> str:
    return f"[bold]\\[{label}][/bold]"


def help_line(state: AppState, theme: Theme = DEFAULT_THEME) -> str:
    """Key hints for the current mode."""
    if state.mode is Mode.EDITING:
        return f"{_key('Enter')} set the pattern, {_key('Esc')} exit insert mode"
    return (
        f"{_key('i')}nsert mode, {_key('g')} toggle case sensitive matches, "
        f"{_key('q')}uit"
    )


def list_help_line(state: AppState, theme: Theme = DEFAULT_THEME) -> str:
    hint = f"{_key('Enter')} toggle entry deletion, {_key('d')}elete marked entries"
    if state.mode is Mode.EDITING:
        return f"[{theme.dim_color}]{hint}[/{theme.dim_color}]"
    return hint


def search_line(state: AppState, theme: Theme = DEFAULT_THEME) -> str:
    """Describe the active pattern and case sensitivity."""
    case_text = "ON" if state.case_sensitive else "OFF"
    color = theme.status_color
    if not state.pattern:
        return (
            f"[{color} italic]Empty pattern, try inserting a new one[/{color} italic]"
            f" [{color}](case sensitive: [bold]{case_text}[/bold])[/{color}]"
        )
    return (
        f"[{color}]Searching: [bold]{escape(state.pattern)}[/bold], "
        f"case sensitive: [bold]{case_text}[/bold][/{color}]"
    )


def input_panel(state: AppState, theme: Theme = DEFAULT_THEME) -> Panel:
    """The pattern input box, with a cursor while editing."""
    text = escape(state.input_buffer)
    if state.mode is Mode.EDITING:
        text += theme.input_cursor
        border = theme.active_border_color
    else:
        border = theme.border_color
    return Panel(Text.from_markup(text), title="Pattern", title_align="left", border_style=border)


def entry_line(entry: Entry, is_selected: bool, theme: Theme = DEFAULT_THEME) -> str:
    if entry.marked_for_delete:
        mark = f"[{theme.marked_color}]{escape(theme.marked_icon)}[/{theme.marked_color}]"
    else:
        mark = f"[{theme.kept_color}]{escape(theme.kept_icon)}[/{theme.kept_color}]"

    kind = f"[{theme.kind_color}]{entry.kind:<4}[/{theme.kind_color}]"
    path = escape(entry.path)
    if is_selected:
        prefix = f"[{theme.selected_color}]{theme.cursor_icon}[/{theme.selected_color}]"
        path = f"[{theme.selected_color}]{path}[/{theme.selected_color}]"
    else:
        prefix = " "
        path = f"[{theme.path_color}]{path}[/{theme.path_color}]"
    return f"{prefix} {kind} {mark} {path}"


class Screen:
    """Renders the whole interface for one AppState."""

    def __init__(self, theme: Theme | None = None):
        self.theme = theme or DEFAULT_THEME
        self.scroll_offset = 0

    def _max_visible(self, height: int) -> int:
        calculated = height - self.theme.panel_padding
        return max(self.theme.min_visible_items, min(self.theme.max_visible_items, calculated))

    def entries_panel(self, state: AppState, height: int) -> Panel:
        theme = self.theme
        items = state.entries.items
        selected = state.entries.current_index()
        max_visible = self._max_visible(height)

        self.scroll_offset, visible_end = _calculate_visible_range(
            selected if selected is not None else self.scroll_offset,
            len(items),
            max_visible,
            self.scroll_offset,
        )

        lines: list[str] = []
        if self.scroll_offset > 0:
            lines.append(
                f"[{theme.dim_color}]  {theme.scroll_up_icon} "
                f"{self.scroll_offset} more above[/{theme.dim_color}]"
            )
        for index in range(self.scroll_offset, visible_end):
            lines.append(entry_line(items[index], index == selected, theme))
        below = len(items) - visible_end
        if below > 0:
            lines.append(
                f"[{theme.dim_color}]  {theme.scroll_down_icon} "
                f"{below} more below[/{theme.dim_color}]"
            )
        if not items:
            lines.append(f"[{theme.dim_color}]No entries[/{theme.dim_color}]")

        title = (
            f"Entries to eradicate: "
            f"[bold {theme.marked_color}]{state.marked_count}[/bold {theme.marked_color}]"
        )
        return Panel(
            Text.from_markup("\n".join(lines)),
            title=title,
            title_align="left",
            border_style=theme.border_color,
        )

    def render(self, state: AppState, status: str = "", height: int = 24) -> Group:
        """Build the full screen.

        Args:
            state: State to display.
            status: Message from the last failed operation, or empty.
            height: Terminal height in lines, used to size the list window.
        """
        theme = self.theme
        parts = [
            Text.from_markup(help_line(state, theme)),
            Text.from_markup(search_line(state, theme)),
            input_panel(state, theme),
            Text.from_markup(list_help_line(state, theme)),
            self.entries_panel(state, height),
        ]
        if status:
            parts.append(
                Text.from_markup(f"[{theme.error_color}]{escape(status)}[/{theme.error_color}]")
            )
        return Group(*parts)
