"""Configurable theme for the eradicate TUI.

The Theme dataclass holds every visual token (colors, icons, layout) used by
the renderer. Colors use Rich markup names such as "green" or "bold cyan".
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any


@dataclass
class Theme:
    """Visual theme for the entry list and header.

    Attributes:
        selected_color: Highlight for the selected row.
        marked_color: Mark indicator for entries that will be deleted.
        kept_color: Mark indicator for entries that will be kept.
        kind_color: File/Dir label.
        path_color: Entry path text.
        status_color: "Searching: ..." line.
        error_color: Status message after a failed search or delete.
        dim_color: Secondary text and inactive help.
        border_color: Panel borders.
        active_border_color: Input box border while editing.

        cursor_icon: Character shown next to the selected row.
        marked_icon: Indicator for entries marked for deletion.
        kept_icon: Indicator for entries that will be kept.
        input_cursor: Character drawn at the end of the pattern while editing.
        scroll_up_icon: Shown when rows are hidden above.
        scroll_down_icon: Shown when rows are hidden below.

        min_visible_items: Minimum rows to show before scrolling.
        max_visible_items: Maximum rows to show.
        panel_padding: Lines reserved for header, borders and footer.
    """

    # Colors
    selected_color: str = "bold cyan"
    marked_color: str = "red"
    kept_color: str = "grey50"
    kind_color: str = "green"
    path_color: str = "cyan"
    status_color: str = "magenta"
    error_color: str = "bold red"
    dim_color: str = "dim"
    border_color: str = "cyan"
    active_border_color: str = "yellow"

    # Icons
    cursor_icon: str = "›"
    marked_icon: str = "o <> o"
    kept_icon: str = "- <> -"
    input_cursor: str = "█"
    scroll_up_icon: str = "↑"
    scroll_down_icon: str = "↓"

    # Layout
    min_visible_items: int = 3
    max_visible_items: int = 40
    panel_padding: int = 12

    @classmethod
    def from_config(cls, overrides: dict[str, Any]) -> Theme:
        """Build a theme from config overrides, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in overrides.items() if k in known})


# Default theme used when none is specified
DEFAULT_THEME = Theme()
