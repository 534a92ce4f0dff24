import pytest
from hypothesis import given, strategies as st

from algobox.leetcode_grids import (
    check_straight_line,
    delete_greatest_value,
    find_subsequences,
    largest_local,
    nearest_valid_point,
    next_greater_element,
    shift_grid,
)


def _grids(low=1, high=4):
    return st.tuples(st.integers(low, high), st.integers(low, high)).flatmap(
        lambda shape: st.lists(
            st.lists(st.integers(-50, 50), min_size=shape[1], max_size=shape[1]),
            min_size=shape[0],
            max_size=shape[0],
        )
    )


square_grids = st.integers(3, 6).flatmap(
    lambda n: st.lists(
        st.lists(st.integers(0, 50), min_size=n, max_size=n), min_size=n, max_size=n
    )
)


def test_straight_line_source_example():
    assert check_straight_line([[1, 2], [2, 3], [3, 4], [4, 5], [5, 6], [6, 7]])


@given(st.integers(-10, 10), st.integers(-10, 10), st.integers(3, 8))
def test_points_on_a_line_are_straight(slope, intercept, count):
    points = [[x, slope * x + intercept] for x in range(count)]
    assert check_straight_line(points)


@given(st.integers(-10, 10), st.integers(-10, 10))
def test_point_off_the_line_is_detected(slope, intercept):
    points = [[0, intercept], [1, slope + intercept], [2, 2 * slope + intercept + 1]]
    assert not check_straight_line(points)


def test_two_points_are_always_straight():
    assert check_straight_line([[0, 0], [5, -3]])


def test_straight_line_needs_two_points():
    with pytest.raises(ValueError):
        check_straight_line([[1, 1]])


@given(_grids(), st.integers(0, 30))
def test_shift_grid_round_trip(grid, k):
    total = len(grid) * len(grid[0])
    shifted = shift_grid(grid, k)
    assert shift_grid(shifted, total - k % total) == grid


@given(_grids(), st.integers(0, 30))
def test_shift_grid_rotates_row_major_order(grid, k):
    flat = [value for row in grid for value in row]
    shifted = [value for row in shift_grid(grid, k) for value in row]
    steps = k % len(flat)
    assert shifted == flat[len(flat) - steps :] + flat[: len(flat) - steps]


def test_shift_grid_rejects_bad_input():
    with pytest.raises(ValueError):
        shift_grid([], 1)
    with pytest.raises(ValueError):
        shift_grid([[1, 2]], -1)


def test_nearest_valid_point_prefers_first_on_tie():
    assert nearest_valid_point(1, 2, [[1, 4], [2, 5], [1, 4]]) == 0


def test_nearest_valid_point_none_valid():
    assert nearest_valid_point(3, 4, [[2, 3]]) == -1


@given(
    st.integers(-5, 5),
    st.integers(-5, 5),
    st.lists(st.lists(st.integers(-5, 5), min_size=2, max_size=2), max_size=10),
)
def test_nearest_valid_point_invariants(x, y, points):
    result = nearest_valid_point(x, y, points)
    valid = [i for i, (px, py) in enumerate(points) if px == x or py == y]

    def distance(i):
        return abs(x - points[i][0]) + abs(y - points[i][1])

    if not valid:
        assert result == -1
    else:
        assert result in valid
        assert all(distance(result) <= distance(i) for i in valid)
        assert all(distance(result) < distance(i) for i in valid if i < result)


def test_largest_local_example():
    grid = [[9, 9, 8, 1], [5, 6, 2, 6], [8, 2, 6, 4], [6, 2, 2, 2]]
    assert largest_local(grid) == [[9, 9], [8, 6]]


@given(square_grids)
def test_largest_local_window_maxima(grid):
    result = largest_local(grid)
    assert len(result) == len(grid) - 2
    for r, row in enumerate(result):
        assert len(row) == len(grid) - 2
        for c, value in enumerate(row):
            window = [grid[i][j] for i in range(r, r + 3) for j in range(c, c + 3)]
            assert value in window
            assert all(value >= cell for cell in window)


def test_largest_local_rejects_tiny_grid():
    with pytest.raises(ValueError):
        largest_local([[1]])


@given(st.lists(st.integers(0, 50), min_size=1, max_size=8))
def test_delete_greatest_single_row_sums_it(row):
    assert delete_greatest_value([row]) == sum(row)


@given(st.lists(st.integers(0, 50), min_size=1, max_size=8))
def test_delete_greatest_single_column_takes_max(column):
    assert delete_greatest_value([[value] for value in column]) == max(column)


def test_delete_greatest_does_not_mutate():
    grid = [[3, 1, 2], [9, 7, 8]]
    snapshot = [row[:] for row in grid]
    delete_greatest_value(grid)
    assert grid == snapshot


def test_delete_greatest_rejects_empty():
    with pytest.raises(ValueError):
        delete_greatest_value([])


@given(st.integers(0, 8))
def test_find_subsequences_count_for_increasing_input(n):
    assert len(find_subsequences(list(range(n)))) == 2**n - n - 1


@given(st.lists(st.integers(-3, 3), max_size=8))
def test_find_subsequences_invariants(nums):
    result = find_subsequences(nums)
    assert result == sorted(result)
    assert len({tuple(seq) for seq in result}) == len(result)
    for seq in result:
        assert len(seq) >= 2
        assert all(a <= b for a, b in zip(seq, seq[1:]))
        remaining = iter(nums)
        assert all(value in remaining for value in seq)


def test_next_greater_source_example():
    nums1 = [1, 2, 4, 6]
    assert next_greater_element(nums1, list(range(1, 10))) == [v + 1 for v in nums1]


@given(st.lists(st.integers(0, 40), unique=True, min_size=1, max_size=12), st.data())
def test_next_greater_invariants(nums2, data):
    nums1 = data.draw(st.lists(st.sampled_from(nums2), unique=True))
    result = next_greater_element(nums1, nums2)
    assert len(result) == len(nums1)
    for value, found in zip(nums1, result):
        after = nums2[nums2.index(value) + 1 :]
        if found == -1:
            assert all(other <= value for other in after)
        else:
            position = after.index(found)
            assert found > value
            assert all(other <= value for other in after[:position])


def test_next_greater_missing_value():
    with pytest.raises(ValueError):
        next_greater_element([5], [1, 2, 3])