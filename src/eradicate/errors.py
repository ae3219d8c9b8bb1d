"""Errors raised by eradicate operations shared by the CLI and TUI."""

from __future__ import annotations


class EradicateError(RuntimeError):
    """Base error for eradicate operations."""


class InvalidPatternError(EradicateError):
    """Raised when a glob pattern cannot be compiled."""

    def __init__(self, pattern: str, position: int, reason: str):
        self.pattern = pattern
        self.position = position
        self.reason = reason
        super().__init__(f"Invalid pattern {pattern!r} at position {position}: {reason}")


class DeleteError(EradicateError):
    """Raised when removing a marked entry from disk fails."""

    def __init__(self, path: str, cause: OSError):
        self.path = path
        self.cause = cause
        detail = cause.strerror or str(cause)
        super().__init__(f"Could not delete {path}: {detail}")


class ConfigError(EradicateError):
    """Raised when an explicitly requested config file cannot be used."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Config error in {path}: {reason}")
