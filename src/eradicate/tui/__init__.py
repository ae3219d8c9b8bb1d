"""Rich.Live-based terminal interface for eradicate.

Example:
    from eradicate.state import AppState
    from eradicate.tui import EradicateApp

    EradicateApp(AppState()).run()
"""

from .app import EradicateApp
from .theme import DEFAULT_THEME, Theme
from .view import Screen

__all__ = [
    "EradicateApp",
    "Screen",
    "Theme",
    "DEFAULT_THEME",
]
