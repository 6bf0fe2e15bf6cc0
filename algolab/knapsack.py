"""Knapsack problems: the greedy fractional version and two exact 0/1 solvers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """Something that may go into the sack, with its profit and positive weight."""

    profit: int
    weight: int

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError(f"item weight must be positive, got {self.weight}")

    @property
    def ratio(self) -> float:
        """Profit per unit of weight."""
        return self.profit / self.weight


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError("capacity must not be negative")


def _by_ratio(items: Iterable[Item]) -> list[Item]:
    # sorted() is stable, so items with equal ratios keep their input order.
    return sorted(items, key=lambda item: item.ratio, reverse=True)


def fractional_knapsack(items: Iterable[Item], capacity: int) -> float:
    """Return the largest profit when any fraction of an item may be taken.

    Items are taken whole in falling order of profit per weight; the first one
    that does not fit is taken in part and fills the sack.
    """
    _check_capacity(capacity)
    profit = 0.0
    remaining = capacity
    for item in _by_ratio(items):
        if remaining == 0:
            break
        if remaining < item.weight:
            profit += remaining * item.ratio
            break
        profit += item.profit
        remaining -= item.weight
    return profit


def _bound(ordered: Sequence[Item], level: int, profit: int, weight: int, capacity: int) -> float:
    """Upper bound on the profit reachable from a node, filling the rest greedily."""
    if weight >= capacity:
        return 0.0
    total_weight = weight
    bound = float(profit)
    index = level + 1
    while index < len(ordered) and total_weight + ordered[index].weight <= capacity:
        total_weight += ordered[index].weight
        bound += ordered[index].profit
        index += 1
    if index < len(ordered):
        bound += (capacity - total_weight) * ordered[index].ratio
    return bound


def knapsack_branch_and_bound(items: Iterable[Item], capacity: int) -> int:
    """Return the largest profit of whole items that fit, by breadth-first branch and bound."""
    _check_capacity(capacity)
    ordered = _by_ratio(items)
    last = len(ordered) - 1
    best = 0
    queue: deque[tuple[int, int, int]] = deque()
    if _bound(ordered, -1, 0, 0, capacity) > best or True:
        queue.append((-1, 0, 0))
    while queue:
        level, profit, weight = queue.popleft()
        if level == last:
            continue
        level += 1
        item = ordered[level]

        taken_profit = profit + item.profit
        taken_weight = weight + item.weight
        if taken_weight <= capacity and taken_profit > best:
            best = taken_profit
        if _bound(ordered, level, taken_profit, taken_weight, capacity) > best:
            queue.append((level, taken_profit, taken_weight))

        if _bound(ordered, level, profit, weight, capacity) > best:
            queue.append((level, profit, weight))
    return best


def knapsack_backtracking(items: Iterable[Item], capacity: int) -> int:
    """Return the largest profit of whole items that fit, by trying every choice."""
    _check_capacity(capacity)
    pool = list(items)

    def search(index: int, profit: int, weight: int) -> int:
        if index == len(pool):
            return profit
        item = pool[index]
        best = search(index + 1, profit, weight)
        if weight + item.weight <= capacity:
            best = max(best, search(index + 1, profit + item.profit, weight + item.weight))
        return best

    return search(0, 0, 0)