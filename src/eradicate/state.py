"""Application state machine.

AppState owns the interaction mode, the pattern being typed, the list of
matched entries and the case-sensitivity option. The TUI calls its methods
in response to key presses and reads its attributes to render.

Transition methods are no-ops when called from the wrong mode; only
``commit_search`` and ``commit_delete`` can raise.
"""

from __future__ import annotations

import logging
import os
import shutil
from typing import Callable

from .errors import DeleteError
from .search import search
from .selectable import SelectableList
from .types import Entry, Mode

logger = logging.getLogger(__name__)

SearchFn = Callable[[str, bool], list[Entry]]


class AppState:
    """State of one interactive session.

    Attributes:
        mode: Current interaction mode.
        input_buffer: Pattern text being edited; kept across mode switches.
        pattern: Last pattern that was searched successfully.
        case_sensitive: Whether searches match names case-sensitively.
        entries: Entries from the last search, with the current selection.
    """

    def __init__(self, case_sensitive: bool = True, search_fn: SearchFn = search):
        self.mode = Mode.BROWSING
        self.input_buffer = ""
        self.pattern = ""
        self.case_sensitive = case_sensitive
        self.entries: SelectableList[Entry] = SelectableList()
        self._search = search_fn

    @property
    def marked_count(self) -> int:
        return sum(1 for entry in self.entries if entry.marked_for_delete)

    # ── Editing ──────────────────────────────────────────────────────────

    def enter_edit_mode(self) -> None:
        if self.mode is Mode.BROWSING:
            self.mode = Mode.EDITING

    def push_char(self, ch: str) -> None:
        if self.mode is Mode.EDITING:
            self.input_buffer += ch

    def pop_char(self) -> None:
        if self.mode is Mode.EDITING:
            self.input_buffer = self.input_buffer[:-1]

    def cancel_edit(self) -> None:
        if self.mode is Mode.EDITING:
            self.mode = Mode.BROWSING

    def commit_search(self) -> None:
        """Search for the buffered pattern and replace the entry list.

        The mode returns to browsing whether or not the search succeeds.
        On failure the previous entries and pattern are left untouched.

        Raises:
            InvalidPatternError: If the buffered pattern is malformed.
        """
        if self.mode is not Mode.EDITING:
            return
        self.mode = Mode.BROWSING
        pattern = self.input_buffer
        results = self._search(pattern, self.case_sensitive)
        self.pattern = pattern
        self.entries = SelectableList.with_items(results)
        logger.info("Pattern %r matched %d entries", pattern, len(results))

    # ── Browsing ─────────────────────────────────────────────────────────

    def move_next(self) -> None:
        if self.mode is Mode.BROWSING:
            self.entries.move_next()

    def move_previous(self) -> None:
        if self.mode is Mode.BROWSING:
            self.entries.move_previous()

    def toggle_mark(self) -> None:
        """Flip the deletion mark of the selected entry, if any."""
        if self.mode is not Mode.BROWSING:
            return
        entry = self.entries.current()
        if entry is not None:
            entry.toggle_delete()

    def toggle_case_sensitivity(self) -> None:
        if self.mode is Mode.BROWSING:
            self.case_sensitive = not self.case_sensitive

    def commit_delete(self) -> list[str]:
        """Delete every marked entry from disk.

        Files and symlinks are removed with ``os.remove`` and directories with
        ``shutil.rmtree``, in list order. Entries inside a directory removed
        earlier in the same batch are already gone and count as deleted. The
        first failure stops the batch and leaves the entry list exactly as it
        was; deletions that already happened are not rolled back. On success
        the list is replaced by the unmarked entries.

        Returns:
            Paths that were deleted.

        Raises:
            DeleteError: If a deletion fails.
        """
        if self.mode is not Mode.BROWSING:
            return []

        to_delete = [e for e in self.entries if e.marked_for_delete]
        survivors = [e for e in self.entries if not e.marked_for_delete]

        deleted: list[str] = []
        removed_dirs: list[str] = []
        for entry in to_delete:
            if any(entry.path.startswith(prefix) for prefix in removed_dirs):
                logger.debug("Already removed with its directory: %s", entry.path)
                deleted.append(entry.path)
                continue
            try:
                if entry.is_file or os.path.islink(entry.path):
                    os.remove(entry.path)
                else:
                    shutil.rmtree(entry.path)
                    removed_dirs.append(os.path.join(entry.path, ""))
            except OSError as e:
                logger.warning("Delete of %s failed after %d deletions: %s", entry.path, len(deleted), e)
                raise DeleteError(entry.path, e) from e
            logger.info("Deleted %s %s", entry.kind.lower(), entry.path)
            deleted.append(entry.path)

        self.entries = SelectableList.with_items(survivors)
        return deleted
