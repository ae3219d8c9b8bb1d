"""Ordered list with a single optional selection and wraparound cursor."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class SelectableList(Generic[T]):
    """List of items with at most one selected index.

    The selection is either ``None`` or a valid index into ``items``.
    Every operation is total: moving the cursor over an empty list is a no-op.
    """

    def __init__(self) -> None:
        self.items: list[T] = []
        self.selected: int | None = None

    @classmethod
    def with_items(cls, items: list[T]) -> SelectableList[T]:
        """Build a list selecting the first item, or nothing when empty."""
        selectable: SelectableList[T] = cls()
        selectable.items = list(items)
        selectable.selected = 0 if selectable.items else None
        return selectable

    def current_index(self) -> int | None:
        return self.selected

    def current(self) -> T | None:
        if self.selected is None:
            return None
        return self.items[self.selected]

    def move_next(self) -> None:
        """Select the next item, wrapping from last to first."""
        if not self.items:
            return
        if self.selected is None:
            self.selected = 0
        else:
            self.selected = (self.selected + 1) % len(self.items)

    def move_previous(self) -> None:
        """Select the previous item, wrapping from first to last."""
        if not self.items:
            return
        if self.selected is None:
            self.selected = 0
        else:
            self.selected = (self.selected - 1) % len(self.items)

    def clear_selection(self) -> None:
        self.selected = None

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)
