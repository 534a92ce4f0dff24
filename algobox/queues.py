"""Bounded linear, circular and double-ended queues, and a priority queue."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterator
from typing import Any


class QueueEmptyError(IndexError):
    """Raised when taking a value from an empty queue."""


class QueueFullError(OverflowError):
    """Raised when a queue has no room for another value."""


def _check_capacity(capacity: int) -> None:
    if capacity <= 0:
        raise ValueError("capacity must be positive")


class LinearQueue:
    """A FIFO queue whose slots are only reused once it has drained empty."""

    def __init__(self, capacity: int = 10) -> None:
        _check_capacity(capacity)
        self._capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        if self._front >= len(self._slots):
            self._slots.clear()
            self._front = 0
        elif len(self._slots) == self._capacity:
            raise QueueFullError("queue full")
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._front >= len(self._slots):
            raise QueueEmptyError("queue empty")
        value = self._slots[self._front]
        self._front += 1
        return value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._front :])

    def __len__(self) -> int:
        return len(self._slots) - self._front


class CircularQueue:
    """A FIFO queue in a fixed ring of ``capacity`` slots."""

    def __init__(self, capacity: int = 5) -> None:
        _check_capacity(capacity)
        self._slots: list[Any] = [None] * capacity
        self._head = 0
        self._size = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        if self._size == len(self._slots):
            raise QueueFullError("queue full")
        self._slots[(self._head + self._size) % len(self._slots)] = value
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if not self._size:
            raise QueueEmptyError("queue empty")
        value = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % len(self._slots)
        self._size -= 1
        return value

    def __iter__(self) -> Iterator[Any]:
        for offset in range(self._size):
            yield self._slots[(self._head + offset) % len(self._slots)]

    def __len__(self) -> int:
        return self._size


class BoundedDeque:
    """A double-ended queue in a fixed array that does not wrap around.

    The first value goes into the first slot, so the front only has room
    again after values are deleted from it.
    """

    def __init__(self, capacity: int = 5) -> None:
        _check_capacity(capacity)
        self._slots: list[Any] = [None] * capacity
        self._front = -1
        self._rear = -1

    def _is_empty(self) -> bool:
        return self._front == -1

    def _is_full(self) -> bool:
        return self._front == 0 and self._rear == len(self._slots) - 1

    def _start(self, value: Any) -> None:
        self._front = self._rear = 0
        self._slots[0] = value

    def _reset(self) -> None:
        self._front = self._rear = -1

    def insert_front(self, value: Any) -> None:
        """Add ``value`` before the front."""
        if self._is_full():
            raise QueueFullError("queue full")
        if self._is_empty():
            self._start(value)
        elif self._front == 0:
            raise QueueFullError("no front space")
        else:
            self._front -= 1
            self._slots[self._front] = value

    def insert_rear(self, value: Any) -> None:
        """Add ``value`` after the rear."""
        if self._is_full():
            raise QueueFullError("queue full")
        if self._is_empty():
            self._start(value)
        elif self._rear == len(self._slots) - 1:
            raise QueueFullError("no rear space")
        else:
            self._rear += 1
            self._slots[self._rear] = value

    def delete_front(self) -> Any:
        """Remove and return the front value."""
        if self._is_empty():
            raise QueueEmptyError("queue empty")
        value = self._slots[self._front]
        if self._front == self._rear:
            self._reset()
        else:
            self._front += 1
        return value

    def delete_rear(self) -> Any:
        """Remove and return the rear value."""
        if self._is_empty():
            raise QueueEmptyError("queue empty")
        value = self._slots[self._rear]
        if self._front == self._rear:
            self._reset()
        else:
            self._rear -= 1
        return value

    def __iter__(self) -> Iterator[Any]:
        if self._is_empty():
            return iter(())
        return iter(self._slots[self._front : self._rear + 1])

    def __len__(self) -> int:
        return 0 if self._is_empty() else self._rear - self._front + 1


class PriorityQueue:
    """A queue served lowest priority number first, ties in arrival order."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, Any]] = []

    def add(self, value: Any, priority: int) -> None:
        """Add ``value`` behind every entry of equal or lower priority number."""
        position = bisect_right(self._entries, priority, key=lambda entry: entry[0])
        self._entries.insert(position, (priority, value))

    def poll(self) -> tuple[Any, int]:
        """Remove and return ``(value, priority)`` of the first entry."""
        if not self._entries:
            raise QueueEmptyError("queue empty")
        priority, value = self._entries.pop(0)
        return value, priority

    def __iter__(self) -> Iterator[Any]:
        return (value for _, value in self._entries)

    def __len__(self) -> int:
        return len(self._entries)