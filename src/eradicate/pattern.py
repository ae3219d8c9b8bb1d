"""Glob pattern compilation.

A pattern is split on ``/`` into components. Each component is either the
recursive wildcard ``**`` or a name pattern built from:

- ``*``: any run of characters (including a leading dot)
- ``?``: exactly one character
- ``[abc]``, ``[a-z]``, ``[!abc]``: character classes; a ``]`` right after
  ``[`` or ``[!`` is a literal member

Anything else is literal. Malformed components raise InvalidPatternError.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from .errors import InvalidPatternError

RECURSIVE = "**"

# Never listed by os.scandir, so they can only be matched by name.
_SPECIAL_DIRS = (os.curdir, os.pardir)

_SEPARATORS = ("/", os.sep) if os.sep != "/" else ("/",)


@dataclass(frozen=True)
class Component:
    """One compiled path component of a glob pattern."""

    text: str
    regex: re.Pattern[str] | None = None

    @property
    def is_recursive(self) -> bool:
        return self.text == RECURSIVE

    @property
    def is_literal(self) -> bool:
        """True when the component can be looked up by name instead of listed."""
        return self.regex is None and not self.is_recursive

    def matches(self, name: str) -> bool:
        if self.regex is None:
            return name == self.text
        return self.regex.fullmatch(name) is not None


@dataclass(frozen=True)
class CompiledPattern:
    """A glob pattern split into a root and compiled components."""

    source: str
    root: str
    components: tuple[Component, ...]


def _split(pattern: str) -> tuple[str, list[tuple[int, str]]]:
    """Split a pattern into its root and (offset, component) pairs.

    Empty components from repeated separators are dropped.
    """
    drive, rest = os.path.splitdrive(pattern)
    root = drive
    offset = len(drive)
    if rest[:1] in _SEPARATORS:
        root += os.sep
        rest = rest[1:]
        offset += 1

    parts: list[tuple[int, str]] = []
    start = 0
    for i, ch in enumerate(rest + "/"):
        if ch in _SEPARATORS:
            if i > start:
                parts.append((offset + start, rest[start:i]))
            start = i + 1
    return root, parts


def _class_end(text: str, start: int) -> int | None:
    """Return the index of the ``]`` closing the class opened at ``start``."""
    i = start + 1
    if i < len(text) and text[i] == "!":
        i += 1
    if i < len(text) and text[i] == "]":
        i += 1
    end = text.find("]", i)
    return end if end != -1 else None


def _translate_class(pattern: str, body: str, position: int) -> str:
    negated = body.startswith("!")
    if negated:
        body = body[1:]

    members: list[str] = []
    i = 0
    while i < len(body):
        if i + 2 < len(body) and body[i + 1] == "-":
            low, high = body[i], body[i + 2]
            if low > high:
                raise InvalidPatternError(pattern, position, "invalid range pattern")
            members.append(f"{re.escape(low)}-{re.escape(high)}")
            i += 3
        else:
            members.append(re.escape(body[i]))
            i += 1

    return f"[{'^' if negated else ''}{''.join(members)}]"


def _translate(pattern: str, component: str, offset: int) -> str:
    parts: list[str] = []
    i = 0
    while i < len(component):
        ch = component[i]
        if ch == "*":
            parts.append(".*")
            i += 1
        elif ch == "?":
            parts.append(".")
            i += 1
        elif ch == "[":
            end = _class_end(component, i)
            if end is None:
                raise InvalidPatternError(pattern, offset + i, "invalid range pattern")
            parts.append(_translate_class(pattern, component[i + 1 : end], offset + i))
            i = end + 1
        else:
            parts.append(re.escape(ch))
            i += 1
    return "".join(parts)


def _check_wildcards(pattern: str, component: str, offset: int) -> None:
    star = component.find("***")
    if star != -1:
        raise InvalidPatternError(
            pattern, offset + star, "wildcards are either regular `*` or recursive `**`"
        )
    double = component.find(RECURSIVE)
    if double != -1 and component != RECURSIVE:
        raise InvalidPatternError(
            pattern, offset + double, "recursive wildcards must form a single path component"
        )


def compile_pattern(pattern: str, case_sensitive: bool = True) -> CompiledPattern:
    """Compile a glob pattern.

    Args:
        pattern: Shell-style glob pattern.
        case_sensitive: When False, every component (literal ones included)
            matches names case-insensitively. ``.`` and ``..`` always stay
            literal.

    Returns:
        CompiledPattern ready to be expanded against the filesystem.

    Raises:
        InvalidPatternError: For an unclosed ``[``, a reversed range,
            ``***`` or a ``**`` that is not a whole component.
    """
    root, parts = _split(pattern)
    flags = re.DOTALL if case_sensitive else re.DOTALL | re.IGNORECASE

    components: list[Component] = []
    for offset, text in parts:
        _check_wildcards(pattern, text, offset)
        if text == RECURSIVE or text in _SPECIAL_DIRS:
            components.append(Component(text))
            continue
        regex = _translate(pattern, text, offset)
        if case_sensitive and not any(ch in text for ch in "*?["):
            components.append(Component(text))
        else:
            components.append(Component(text, re.compile(regex, flags)))

    return CompiledPattern(source=pattern, root=root, components=tuple(components))
