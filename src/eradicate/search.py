"""Expand glob patterns against the filesystem into Entries.

Matching walks the tree one pattern component at a time. Directory children
are visited in sorted name order, so results are depth-first and stable for
a given on-disk state. Unreadable directories and paths whose ``stat`` fails
(broken symlinks, permission denied) are skipped without raising.
"""

from __future__ import annotations

import logging
import os
import stat
from typing import Iterator

from .pattern import CompiledPattern, Component, compile_pattern
from .types import Entry

logger = logging.getLogger(__name__)


def _join(base: str, name: str) -> str:
    return os.path.join(base, name) if base else name


def _list_dir(base: str) -> list[os.DirEntry[str]]:
    """List a directory sorted by name, or nothing if it cannot be read."""
    try:
        with os.scandir(base or os.curdir) as it:
            return sorted(it, key=lambda e: e.name)
    except OSError as e:
        logger.debug("Skipping unreadable directory %s: %s", base or os.curdir, e)
        return []


def _child_dirs(base: str) -> Iterator[str]:
    """Yield subdirectories of base, not following symlinks."""
    for child in _list_dir(base):
        try:
            is_dir = child.is_dir(follow_symlinks=False)
        except OSError:
            continue
        if is_dir:
            yield _join(base, child.name)


def _descendants(base: str) -> Iterator[str]:
    """Yield every path below base in pre-order, not following symlinks."""
    for child in _list_dir(base):
        path = _join(base, child.name)
        yield path
        try:
            is_dir = child.is_dir(follow_symlinks=False)
        except OSError:
            continue
        if is_dir:
            yield from _descendants(path)


def _expand(base: str, components: tuple[Component, ...], index: int) -> Iterator[str]:
    if index == len(components):
        if base:
            yield base
        return

    component = components[index]
    last = index == len(components) - 1

    if component.is_recursive:
        if last:
            yield from _descendants(base)
            return
        # zero directories, then one more level of the same ``**``
        yield from _expand(base, components, index + 1)
        for child in _child_dirs(base):
            yield from _expand(child, components, index)
        return

    if component.is_literal:
        path = _join(base, component.text)
        if os.path.lexists(path):
            yield from _expand(path, components, index + 1)
        return

    for child in _list_dir(base):
        if component.matches(child.name):
            yield from _expand(_join(base, child.name), components, index + 1)


def expand(compiled: CompiledPattern) -> Iterator[str]:
    """Yield each path matching a compiled pattern once, in traversal order."""
    if not compiled.components:
        return
    seen: set[str] = set()
    for path in _expand(compiled.root, compiled.components, 0):
        if path not in seen:
            seen.add(path)
            yield path


def _probe(path: str) -> Entry | None:
    """Classify a path as file or directory, or None if stat fails."""
    try:
        st = os.stat(path)
    except OSError as e:
        logger.debug("Dropping %s: %s", path, e)
        return None
    return Entry(path=path, is_file=stat.S_ISREG(st.st_mode))


def search(pattern: str, case_sensitive: bool = True) -> list[Entry]:
    """Find every path matching pattern.

    Args:
        pattern: Shell-style glob pattern, relative to the working directory
            unless absolute.
        case_sensitive: Whether names must match the pattern's case.

    Returns:
        Fresh Entries, all marked for deletion, in traversal order.

    Raises:
        InvalidPatternError: If the pattern is malformed.
    """
    compiled = compile_pattern(pattern, case_sensitive=case_sensitive)
    entries = [entry for entry in map(_probe, expand(compiled)) if entry is not None]
    logger.debug(
        "Pattern %r (case %s) matched %d entries",
        pattern,
        "sensitive" if case_sensitive else "insensitive",
        len(entries),
    )
    return entries
