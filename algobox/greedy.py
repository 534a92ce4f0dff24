"""Greedy algorithms: knapsacks, activity selection and job sequencing."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import cmp_to_key
from operator import attrgetter


@dataclass(frozen=True)
class Item:
    """Something to pack, with a value and a weight."""

    value: float
    weight: float


@dataclass(frozen=True)
class KnapsackResult:
    """Items packed with the fraction taken of each, plus what is left."""

    picked: tuple[tuple[Item, float], ...]
    remaining_capacity: float
    total_value: float


@dataclass(frozen=True)
class Activity:
    """An activity occupying the interval from ``start`` to ``finish``."""

    name: str
    start: int
    finish: int


@dataclass(frozen=True)
class ScheduledJob:
    """A job placed in a time slot before its deadline."""

    slot: int
    profit: int
    deadline: int


def _as_item(item: Item | tuple[float, float]) -> Item:
    return item if isinstance(item, Item) else Item(*item)


def _compare_ratio(left: Item, right: Item) -> int:
    lhs = left.value * right.weight
    rhs = right.value * left.weight
    if lhs > rhs:
        return -1
    if lhs < rhs:
        return 1
    return 0


def _by_ratio(items: Iterable[Item | tuple[float, float]]) -> list[Item]:
    """Items by value per unit of weight, best first."""
    return sorted(map(_as_item, items), key=cmp_to_key(_compare_ratio))


def fill_knapsack(
    items: Iterable[Item | tuple[float, float]], capacity: float
) -> KnapsackResult:
    """Pack whole items greedily by value per weight while they fit."""
    picked: list[tuple[Item, float]] = []
    total = 0
    for item in _by_ratio(items):
        if capacity > 0 and item.weight <= capacity:
            picked.append((item, 1))
            capacity -= item.weight
            total += item.value
    return KnapsackResult(tuple(picked), capacity, total)


def fill_fractional_knapsack(
    items: Iterable[Item | tuple[float, float]], capacity: float
) -> KnapsackResult:
    """Pack items by value per weight, taking a fraction of the last one."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    picked: list[tuple[Item, float]] = []
    total: float = 0
    for item in _by_ratio(items):
        if capacity == 0:
            break
        if item.weight <= capacity:
            picked.append((item, 1))
            capacity -= item.weight
            total += item.value
        else:
            fraction = capacity / item.weight
            picked.append((item, fraction))
            total += fraction * item.value
            capacity = 0
    return KnapsackResult(tuple(picked), capacity, total)


def select_activities(activities: Iterable[Activity]) -> list[Activity]:
    """Largest set of non-overlapping activities, chosen by earliest finish."""
    selected: list[Activity] = []
    end = 0
    for activity in sorted(activities, key=attrgetter("finish")):
        if not selected or activity.start >= end:
            selected.append(activity)
            end = activity.finish
    return selected


def sequence_jobs(jobs: Iterable[tuple[int, int]]) -> list[ScheduledJob]:
    """Schedule ``(profit, deadline)`` jobs, most profitable first, by slot."""
    occupied: set[int] = set()
    scheduled: list[ScheduledJob] = []
    for profit, deadline in sorted(jobs, key=lambda job: job[0], reverse=True):
        slot = next(
            (s for s in range(deadline - 1, -1, -1) if s not in occupied), None
        )
        if slot is not None:
            occupied.add(slot)
            scheduled.append(ScheduledJob(slot, profit, deadline))
    return sorted(scheduled, key=attrgetter("slot"))