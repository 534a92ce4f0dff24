"""Solutions to grid, point and subsequence problems from an online judge."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations, pairwise


def check_straight_line(coordinates: Sequence[Sequence[int]]) -> bool:
    """Whether all ``(x, y)`` points lie on one straight line."""
    points = [tuple(point) for point in coordinates]
    if len(points) < 2:
        raise ValueError("at least two points are needed")
    if len(points) == 2:
        return True
    (x0, y0), (x1, y1) = points[0], points[1]
    dx, dy = x0 - x1, y0 - y1
    return all(
        dx * (prev_y - cur_y) == dy * (prev_x - cur_x)
        for (prev_x, prev_y), (cur_x, cur_y) in zip(points[1:], points[2:])
    )


def shift_grid(grid: Sequence[Sequence[int]], k: int) -> list[list[int]]:
    """Shift every value of ``grid`` ``k`` places forward in row-major order."""
    rows = len(grid)
    if not rows or not grid[0]:
        raise ValueError("grid must not be empty")
    if k < 0:
        raise ValueError("k must not be negative")
    columns = len(grid[0])
    result = [[0] * columns for _ in range(rows)]
    for i, row in enumerate(grid):
        for j, value in enumerate(row):
            result[(i + (j + k) // columns) % rows][(j + k) % columns] = value
    return result


def nearest_valid_point(x: int, y: int, points: Sequence[Sequence[int]]) -> int:
    """Index of the closest point sharing ``x`` or ``y``, or -1 if none does."""
    best_distance: int | None = None
    best_index = -1
    for index, (px, py) in enumerate(points):
        if x == px or y == py:
            distance = abs(x - px) + abs(y - py)
            if best_distance is None or distance < best_distance:
                best_distance = distance
                best_index = index
    return best_index


def largest_local(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Maximum of every 3 by 3 window of a square grid (never below zero)."""
    size = len(grid)
    if size < 2:
        raise ValueError("grid must be at least 2 by 2")
    return [
        [
            max(0, *(grid[i][j] for i in range(r, r + 3) for j in range(c, c + 3)))
            for c in range(size - 2)
        ]
        for r in range(size - 2)
    ]


def delete_greatest_value(grid: Sequence[Sequence[int]]) -> int:
    """Sum of the largest values removed column by column from sorted rows."""
    if not grid:
        raise ValueError("grid must not be empty")
    rows = [sorted(row) for row in grid]
    return sum(max(0, *column) for column in zip(*rows))


def find_subsequences(nums: Sequence[int]) -> list[list[int]]:
    """All distinct non-decreasing subsequences of length two or more, sorted."""
    found = {
        combo
        for length in range(2, len(nums) + 1)
        for combo in combinations(nums, length)
        if all(a <= b for a, b in pairwise(combo))
    }
    return [list(combo) for combo in sorted(found)]


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, the first larger value after it in ``nums2``."""
    positions = {value: index for index, value in enumerate(nums2)}
    result = []
    for value in nums1:
        if value not in positions:
            raise ValueError(f"{value!r} does not occur in nums2")
        later = nums2[positions[value] + 1 :]
        result.append(next((other for other in later if other > value), -1))
    return result