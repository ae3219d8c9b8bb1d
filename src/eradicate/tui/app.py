"""Interactive loop using Rich.Live and readchar.

Each key press is mapped to one AppState transition through a per-mode
dispatch table, then the screen is rebuilt from the state.

Keyboard controls:
    Browsing:
        - i: Edit the pattern
        - Down/j, Up/k: Move the selection
        - Enter/Space: Toggle the selected entry's deletion mark
        - g: Toggle case sensitive matching
        - d: Delete every marked entry
        - q or Ctrl+C: Quit
    Editing:
        - Printable characters: Append to the pattern
        - Backspace: Remove the last character
        - Enter: Search for the pattern
        - Esc: Back to browsing, keeping the text
        - Ctrl+C: Quit
"""

from __future__ import annotations

import logging
from typing import Callable

import readchar
from rich.console import Console
from rich.live import Live

from ..errors import EradicateError
from ..state import AppState
from ..types import Mode
from .keys import (
    is_backspace,
    is_down,
    is_enter,
    is_escape,
    is_interrupt,
    is_select,
    is_text,
    is_up,
)
from .theme import Theme
from .view import Screen

logger = logging.getLogger(__name__)

Binding = tuple[Callable[[str], bool], Callable[[str], None]]


class EradicateApp:
    """Key dispatcher and render loop around an AppState.

    Args:
        state: State to drive; the app never replaces it.
        console: Rich Console for output (auto-created if not provided).
        theme: Visual theme for the screen.
        refresh_per_second: Live refresh rate; has no effect on the state.
    """

    def __init__(
        self,
        state: AppState,
        console: Console | None = None,
        theme: Theme | None = None,
        refresh_per_second: int = 10,
    ):
        self.state = state
        self.console = console or Console(highlight=False)
        self.screen = Screen(theme)
        self.refresh_per_second = refresh_per_second
        self.status = ""
        self.should_exit = False

        self._bindings: dict[Mode, list[Binding]] = {
            Mode.BROWSING: [
                (is_interrupt, self._quit),
                (lambda k: k == "q", self._quit),
                (lambda k: k == "i", lambda _: state.enter_edit_mode()),
                (is_down, lambda _: state.move_next()),
                (is_up, lambda _: state.move_previous()),
                (is_select, lambda _: state.toggle_mark()),
                (lambda k: k == "g", lambda _: state.toggle_case_sensitivity()),
                (lambda k: k == "d", lambda _: self._commit_delete()),
            ],
            Mode.EDITING: [
                (is_interrupt, self._quit),
                (is_enter, lambda _: self._commit_search()),
                (is_escape, lambda _: state.cancel_edit()),
                (is_backspace, lambda _: state.pop_char()),
                (is_text, state.push_char),
            ],
        }

    def _quit(self, key: str) -> None:
        self.should_exit = True

    def _commit_search(self) -> None:
        try:
            self.state.commit_search()
        except EradicateError as e:
            logger.warning("Search failed: %s", e)
            self.status = str(e)

    def _commit_delete(self) -> None:
        try:
            deleted = self.state.commit_delete()
        except EradicateError as e:
            self.status = str(e)
            return
        if deleted:
            self.status = f"Deleted {len(deleted)} entr{'y' if len(deleted) == 1 else 'ies'}"

    def submit_pattern(self, pattern: str) -> None:
        """Search for pattern as if it had been typed and committed."""
        self.state.enter_edit_mode()
        self.state.input_buffer = pattern
        self._commit_search()

    def handle_key(self, key: str) -> None:
        """Apply the transition bound to key in the current mode."""
        self.status = ""
        for matches, action in self._bindings[self.state.mode]:
            if matches(key):
                action(key)
                return

    def render(self):
        return self.screen.render(self.state, self.status, self.console.height)

    def run(self) -> None:
        """Display the interface and block until the user quits."""
        with Live(
            self.render(),
            console=self.console,
            refresh_per_second=self.refresh_per_second,
            screen=True,
        ) as live:
            while not self.should_exit:
                try:
                    key = readchar.readkey()
                except (KeyboardInterrupt, EOFError):
                    break
                self.handle_key(key)
                live.update(self.render())
