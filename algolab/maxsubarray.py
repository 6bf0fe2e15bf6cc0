"""Maximum contiguous sub-array by divide and conquer."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class SubArray:
    """Inclusive index range of a sub-array and the sum of its elements."""

    low: int
    high: int
    total: int


def _crossing(items: Sequence[int], low: int, mid: int, high: int) -> SubArray:
    left_sum, left_index, running = -math.inf, mid, 0
    for i in range(mid, low - 1, -1):
        running += items[i]
        if running > left_sum:
            left_sum, left_index = running, i

    right_sum, right_index, running = -math.inf, mid + 1, 0
    for j in range(mid + 1, high + 1):
        running += items[j]
        if running > right_sum:
            right_sum, right_index = running, j

    return SubArray(left_index, right_index, left_sum + right_sum)


def _search(items: Sequence[int], low: int, high: int) -> SubArray:
    if low == high:
        return SubArray(low, high, items[low])
    mid = (low + high) // 2
    left = _search(items, low, mid)
    middle = _crossing(items, low, mid, high)
    right = _search(items, mid + 1, high)
    if left.total >= right.total and left.total >= middle.total:
        return left
    if right.total >= left.total and right.total >= middle.total:
        return right
    return middle


def max_subarray(values: Iterable[int]) -> SubArray:
    """Return the contiguous sub-array with the largest sum.

    Ties go to the left half, then the right half, then the one crossing the middle.
    """
    items = list(values)
    if not items:
        raise ValueError("max_subarray() needs at least one value")
    return _search(items, 0, len(items) - 1)