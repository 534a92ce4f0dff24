"""Stacks backed by a bounded array and by a linked chain of nodes."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional, Tuple


class StackEmptyError(IndexError):
    """Raised when reading from or changing an empty stack."""


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that is at capacity."""


class ArrayStack:
    """A stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if len(self._items) >= self._capacity:
            raise StackFullError("stack full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise StackEmptyError("stack empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise StackEmptyError("stack empty")
        return self._items[-1]

    def change(self, position: int, value: Any) -> None:
        """Replace the value at ``position``, counted from the bottom."""
        if not self._items:
            raise StackEmptyError("stack empty")
        if not 0 <= position < len(self._items):
            raise IndexError("pos invalid")
        self._items[position] = value

    def __iter__(self) -> Iterator[Any]:
        """Values from bottom to top."""
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack({self._items!r}, capacity={self._capacity})"


_Link = Optional[Tuple[Any, "_Link"]]


class LinkedStack:
    """An unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: _Link = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._top = (value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise StackEmptyError("list empty")
        value, self._top = self._top
        self._size -= 1
        return value

    def __iter__(self) -> Iterator[Any]:
        """Values from top to bottom."""
        node = self._top
        while node is not None:
            value, node = node
            yield value

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"