"""Simple search routines over sequences and text."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(items: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``items``, or -1 if absent."""
    begin, end = 0, len(items) - 1
    while begin <= end:
        mid = (begin + end) // 2
        if items[mid] == target:
            return mid
        if target < items[mid]:
            end = mid - 1
        else:
            begin = mid + 1
    return -1


def linear_search(items: Sequence[int], target: int) -> int:
    """Index of the first occurrence of ``target`` in ``items``, or -1."""
    return next(
        (index for index, item in enumerate(items) if item == target), -1
    )


def find_pattern(pattern: str, text: str) -> list[int]:
    """Every index at which ``pattern`` occurs in ``text``, overlaps included."""
    if len(pattern) > len(text):
        return []
    return [
        index
        for index in range(len(text) - len(pattern) + 1)
        if text.startswith(pattern, index)
    ]