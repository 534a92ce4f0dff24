"""Memoised dynamic-programming classics: sums, word construction, grids, Fibonacci."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def _positive(numbers: Iterable[int]) -> tuple[int, ...]:
    values = tuple(numbers)
    if any(value <= 0 for value in values):
        raise ValueError("numbers must be positive")
    return values


def _prefix_steps(
    target: str, start: int, words: tuple[str, ...]
) -> Iterator[tuple[str, int]]:
    """Words that begin ``target`` at ``start``, with the index after each."""
    for word in words:
        if word and target.startswith(word, start):
            yield word, start + len(word)


def all_construct(target: str, words: Iterable[str]) -> list[list[str]]:
    """Every way to build ``target`` by joining ``words`` (each may be reused).

    Each combination lists its words from the end of ``target`` back to its start.
    """
    vocabulary = tuple(words)
    ways: list[list[tuple[str, ...]]] = [[] for _ in range(len(target) + 1)]
    ways[len(target)] = [()]
    for start in reversed(range(len(target))):
        ways[start] = [
            (*combo, word)
            for word, after in _prefix_steps(target, start, vocabulary)
            for combo in ways[after]
        ]
    return [list(combo) for combo in ways[0]]


def best_sum(target: int, numbers: Iterable[int]) -> list[int] | None:
    """Shortest list of ``numbers`` (with reuse) adding up to ``target``, or None."""
    values = _positive(numbers)
    if target < 0:
        return None
    best: list[tuple[int, ...] | None] = [()]
    for remaining in range(1, target + 1):
        shortest: tuple[int, ...] | None = None
        for num in values:
            if remaining - num < 0:
                continue
            combo = best[remaining - num]
            if combo is None:
                continue
            candidate = (*combo, num)
            if shortest is None or len(candidate) < len(shortest):
                shortest = candidate
        best.append(shortest)
    result = best[target]
    return None if result is None else list(result)


def can_construct(target: str, words: Iterable[str]) -> bool:
    """Whether ``target`` can be built by joining ``words`` (each may be reused)."""
    vocabulary = tuple(words)
    possible = [False] * (len(target) + 1)
    possible[len(target)] = True
    for start in reversed(range(len(target))):
        possible[start] = any(
            possible[after] for _, after in _prefix_steps(target, start, vocabulary)
        )
    return possible[0]


def can_sum(target: int, numbers: Iterable[int]) -> bool:
    """Whether some multiset of ``numbers`` adds up to ``target``."""
    values = _positive(numbers)
    if target < 0:
        return False
    reachable = [True]
    for remaining in range(1, target + 1):
        reachable.append(
            any(remaining - num >= 0 and reachable[remaining - num] for num in values)
        )
    return reachable[target]


def count_construct(target: str, words: Iterable[str]) -> int:
    """Number of ways to build ``target`` by joining ``words``."""
    vocabulary = tuple(words)
    counts = [0] * (len(target) + 1)
    counts[len(target)] = 1
    for start in reversed(range(len(target))):
        counts[start] = sum(
            counts[after] for _, after in _prefix_steps(target, start, vocabulary)
        )
    return counts[0]


def grid_traveller(rows: int, columns: int) -> int:
    """Paths from the top-left to the bottom-right moving only down or right.

    A grid with a single row or column (or fewer) counts as one path.
    """
    if rows <= 1 or columns <= 1:
        return 1
    previous = [1] * (columns + 1)
    for _ in range(2, rows + 1):
        current = [1, 1]
        for column in range(2, columns + 1):
            current.append(current[-1] + previous[column])
        previous = current
    return previous[columns]


def how_sum(target: int, numbers: Iterable[int]) -> list[int] | None:
    """Some list of ``numbers`` (with reuse) adding up to ``target``, or None."""
    values = _positive(numbers)
    if target < 0:
        return None
    found: list[tuple[int, ...] | None] = [()]
    for remaining in range(1, target + 1):
        found.append(
            next(
                (
                    (*found[remaining - num], num)
                    for num in values
                    if remaining - num >= 0 and found[remaining - num] is not None
                ),
                None,
            )
        )
    result = found[target]
    return None if result is None else list(result)


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number, counting the first two as 1."""
    if n <= 2:
        return 1
    previous, current = 1, 1
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current