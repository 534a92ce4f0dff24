import pytest
from hypothesis import given, strategies as st

from algobox.greedy import (
    Activity,
    Item,
    KnapsackResult,
    fill_fractional_knapsack,
    fill_knapsack,
    select_activities,
    sequence_jobs,
)

SOURCE_ITEMS = [(4, 5), (1, 4), (3, 5), (6, 7), (8, 5)]

items_st = st.lists(
    st.tuples(st.integers(0, 50), st.integers(1, 30)), min_size=0, max_size=8
)
capacity_st = st.integers(0, 100)


@given(items_st, capacity_st)
def test_knapsack_accounting(items, capacity):
    result = fill_knapsack(items, capacity)
    weights = sum(item.weight for item, _ in result.picked)
    assert result.total_value == sum(item.value for item, _ in result.picked)
    assert weights <= capacity
    assert result.remaining_capacity == capacity - weights
    assert all(fraction == 1 for _, fraction in result.picked)
    assert all(item in [Item(*t) for t in items] for item, _ in result.picked)


@given(items_st, capacity_st)
def test_knapsack_picks_in_ratio_order(items, capacity):
    picked = [item for item, _ in fill_knapsack(items, capacity).picked]
    assert all(
        a.value * b.weight >= b.value * a.weight for a, b in zip(picked, picked[1:])
    )


def test_knapsack_accepts_item_objects():
    result = fill_knapsack([Item(4, 5)], 5)
    assert result == KnapsackResult(((Item(4, 5), 1),), 0, 4)


@given(items_st, capacity_st)
def test_fractional_fills_as_much_as_possible(items, capacity):
    result = fill_fractional_knapsack(items, capacity)
    taken = sum(fraction * item.weight for item, fraction in result.picked)
    assert taken == pytest.approx(min(capacity, sum(w for _, w in items)))
    assert all(0 < fraction <= 1 for _, fraction in result.picked)
    assert result.total_value >= fill_knapsack(items, capacity).total_value - 1e-9


def test_fractional_source_example_uses_all_capacity():
    result = fill_fractional_knapsack(SOURCE_ITEMS, 20)
    assert result.remaining_capacity == 0
    taken = sum(fraction * item.weight for item, fraction in result.picked)
    assert taken == pytest.approx(20)


def test_fractional_negative_capacity_rejected():
    with pytest.raises(ValueError):
        fill_fractional_knapsack(SOURCE_ITEMS, -1)


def test_select_activities_source_example():
    names = "ABCDEF"
    starts = [1, 3, 0, 5, 8, 5]
    finishes = [2, 4, 6, 7, 9, 9]
    activities = [Activity(n, s, f) for n, s, f in zip(names, starts, finishes)]
    chosen = select_activities(activities)
    assert [a.name for a in chosen] == ["A", "B", "D", "E"]


activities_st = st.lists(
    st.tuples(st.integers(0, 20), st.integers(0, 10)), max_size=10
).map(
    lambda pairs: [
        Activity(str(index), start, start + length)
        for index, (start, length) in enumerate(pairs)
    ]
)


@given(activities_st)
def test_selected_activities_do_not_overlap(activities):
    chosen = select_activities(activities)
    assert all(b.start >= a.finish for a, b in zip(chosen, chosen[1:]))
    assert bool(chosen) == bool(activities)
    assert not chosen or chosen[0].finish == min(a.finish for a in activities)


def test_sequence_jobs_source_example():
    jobs = [(35, 3), (30, 4), (25, 4), (20, 2), (15, 3), (12, 1), (5, 2)]
    scheduled = sequence_jobs(jobs)
    assert [job.profit for job in scheduled] == [20, 25, 35, 30]


jobs_st = st.lists(st.tuples(st.integers(1, 50), st.integers(1, 6)), max_size=12)


@given(jobs_st)
def test_sequence_jobs_invariants(jobs):
    scheduled = sequence_jobs(jobs)
    slots = [job.slot for job in scheduled]
    assert slots == sorted(set(slots))
    assert all(0 <= job.slot < job.deadline for job in scheduled)
    assert len(scheduled) <= len(jobs)
    remaining = list(jobs)
    for job in scheduled:
        remaining.remove((job.profit, job.deadline))
    assert len(remaining) == len(jobs) - len(scheduled)