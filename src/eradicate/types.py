"""Type definitions for eradicate.

Shared enums and dataclasses used by the state machine, the search engine
and the TUI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Mode(str, Enum):
    """Interaction mode of the application."""

    BROWSING = "browsing"
    EDITING = "editing"

    def __str__(self) -> str:
        return self.value


@dataclass
class Entry:
    """A matched filesystem path and its deletion mark.

    ``is_file`` is resolved once when the entry is created and never
    re-probed, so it can go stale if the filesystem changes afterwards.

    Attributes:
        path: Path as produced by the matcher (relative patterns give relative paths).
        is_file: Whether the path was a regular file when probed.
        marked_for_delete: Whether commit-delete will remove this path.
    """

    path: str
    is_file: bool
    marked_for_delete: bool = True

    def toggle_delete(self) -> None:
        """Flip the deletion mark."""
        self.marked_for_delete = not self.marked_for_delete

    @property
    def kind(self) -> str:
        return "File" if self.is_file else "Dir"
