"""Keyboard input helpers for the eradicate TUI.

Small predicates over readchar key strings, so the dispatch tables read as
intent rather than escape sequences.
"""

from __future__ import annotations

import readchar


def is_enter(key: str) -> bool:
    """Check if key is Enter/Return."""
    return key in (readchar.key.ENTER, "\r", "\n")


def is_escape(key: str) -> bool:
    """Check if key is Escape (handles terminal variations)."""
    return key in (readchar.key.ESC, "\x1b", "\x1b\x1b")


def is_interrupt(key: str) -> bool:
    return key in (readchar.key.CTRL_C, "\x03")


def is_up(key: str) -> bool:
    """Check if key is up arrow or vim 'k'."""
    return key == "k" or key == readchar.key.UP


def is_down(key: str) -> bool:
    """Check if key is down arrow or vim 'j'."""
    return key == "j" or key == readchar.key.DOWN


def is_backspace(key: str) -> bool:
    """Check if key is backspace (handles terminal variations)."""
    return key in (readchar.key.BACKSPACE, "\x7f", "\b")


def is_space(key: str) -> bool:
    return key == " "


def is_select(key: str) -> bool:
    """Check if key toggles the selected entry (Enter or Space)."""
    return is_enter(key) or is_space(key)


def is_text(key: str) -> bool:
    """Check if key is a single printable character."""
    return len(key) == 1 and key.isprintable()
