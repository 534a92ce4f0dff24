"""Classic comparison and counting sorts, each returning a new list."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence


def bubble_sort(items: Iterable[int]) -> list[int]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    result = list(items)
    for last in reversed(range(len(result))):
        for j in range(last):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def counting_sort(items: Iterable[int]) -> list[int]:
    """Stable sort of non-negative integers by tallying each value."""
    values = list(items)
    if not values:
        return []
    if min(values) < 0:
        raise ValueError("counting sort needs non-negative integers")
    counts = [0] * (max(values) + 1)
    for value in values:
        counts[value] += 1
    positions = [0] * len(counts)
    running = 0
    for value, count in enumerate(counts):
        running += count
        positions[value] = running
    result = [0] * len(values)
    for value in reversed(values):
        positions[value] -= 1
        result[positions[value]] = value
    return result


def insertion_sort(items: Iterable[int]) -> list[int]:
    """Sort by inserting each value into the sorted prefix before it."""
    result = list(items)
    for i in range(1, len(result)):
        value = result[i]
        j = i
        while j > 0 and value < result[j - 1]:
            result[j] = result[j - 1]
            j -= 1
        result[j] = value
    return result


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[int]) -> list[int]:
    """Sort by splitting in half, sorting each half and merging them."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) + 1) // 2
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def _partition(items: MutableSequence[int], begin: int, end: int) -> int:
    """Move the value at ``begin`` to its final place and return that index."""
    left, right = begin - 1, end + 1
    pivot = begin
    while left < right:
        if pivot == left:
            right -= 1
            while items[right] > items[pivot]:
                right -= 1
            if left == right:
                return pivot
            if items[right] < items[pivot]:
                items[pivot], items[right] = items[right], items[pivot]
                pivot = right
        else:
            left += 1
            while items[left] < items[pivot]:
                left += 1
            if left == right:
                return pivot
            if items[left] > items[pivot]:
                items[pivot], items[left] = items[left], items[pivot]
                pivot = left
    return pivot


def quick_sort(items: Iterable[int]) -> list[int]:
    """Sort by partitioning around the first value of each range."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        begin, end = pending.pop()
        if begin < end:
            pivot = _partition(result, begin, end)
            pending.append((begin, pivot - 1))
            pending.append((pivot + 1, end))
    return result


def selection_sort(items: Iterable[int]) -> list[int]:
    """Sort by repeatedly moving the smallest remaining value forward."""
    result = list(items)
    for i in range(len(result)):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        if smallest != i:
            result[i], result[smallest] = result[smallest], result[i]
    return result