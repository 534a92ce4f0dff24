"""A growable integer array and a helper that lays values out as rows."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from algobox.searching import linear_search


class DynamicArray:
    """An array supporting positional insert, remove, update and search."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def insert(self, value: int, position: int) -> None:
        """Insert ``value`` at ``position``, shifting later values right."""
        if not 0 <= position <= len(self._items):
            raise IndexError("index out of bound")
        self._items.insert(position, value)

    def remove(self, position: int) -> int:
        """Remove and return the value at ``position``."""
        if not self._items:
            raise IndexError("array empty")
        if not 0 <= position < len(self._items):
            raise IndexError("index out of bound")
        return self._items.pop(position)

    def update(self, position: int, value: int) -> int:
        """Replace the value at ``position`` and return the old one."""
        if not 0 <= position < len(self._items):
            raise IndexError("index out of bound")
        old = self._items[position]
        self._items[position] = value
        return old

    def search(self, target: int) -> int:
        """Position of the first ``target``, or -1 if it is absent."""
        return linear_search(self._items, target)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"DynamicArray({self._items!r})"


def to_rows(values: Iterable[int], columns: int) -> list[list[int]]:
    """Lay ``values`` out in rows of ``columns``, padding the last row with zeros."""
    if columns <= 0:
        raise ValueError("columns must be positive")
    items = list(values)
    rows = [items[start : start + columns] for start in range(0, len(items), columns)]
    if rows and len(rows[-1]) < columns:
        rows[-1].extend([0] * (columns - len(rows[-1])))
    return rows