"""Comparison sorts and a harness that times merge sort against quick sort."""

from __future__ import annotations

import argparse
import csv
import heapq
import random
import sys
import time
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Any

CSV_HEADER = ("InputSize", "TimeTakenMerge", "TimeTakeQuick")


class PartitionScheme(Enum):
    """How quick sort splits a range around its pivot."""

    FIRST_ELEMENT = "first"
    """Pivot is the first element; it is swapped into its final place."""
    HOARE = "hoare"
    """Hoare's scheme with the first element as pivot."""
    LOMUTO = "lomuto"
    """Lomuto's scheme with the last element as pivot."""


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list with the values in ascending order, by insertion sort."""
    items = list(values)
    for j in range(1, len(items)):
        key = items[j]
        i = j - 1
        while i >= 0 and items[i] > key:
            items[i + 1] = items[i]
            i -= 1
        items[i + 1] = key
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list with the values in ascending order, by selection sort."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list with the values in ascending order, by a stable merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return list(heapq.merge(merge_sort(items[:mid]), merge_sort(items[mid:])))


def _partition_first(items: list[Any], low: int, high: int) -> int:
    pivot = items[low]
    i, j = low, high
    while i < j:
        while items[i] <= pivot and i <= high - 1:
            i += 1
        while items[j] > pivot and j >= low + 1:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def _partition_hoare(items: list[Any], low: int, high: int) -> int:
    pivot = items[low]
    i, j = low - 1, high + 1
    while True:
        j -= 1
        while items[j] > pivot:
            j -= 1
        i += 1
        while items[i] < pivot:
            i += 1
        if i >= j:
            return j
        items[i], items[j] = items[j], items[i]


def _partition_lomuto(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    i = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1


def quick_sort(
    values: Iterable[Any],
    scheme: PartitionScheme | str = PartitionScheme.FIRST_ELEMENT,
) -> list[Any]:
    """Return a new list with the values in ascending order, by quick sort.

    Ranges still to be sorted are kept on an explicit stack, so already
    ordered input does not exhaust the interpreter's recursion limit.
    """
    scheme = PartitionScheme(scheme)
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        if scheme is PartitionScheme.HOARE:
            split = _partition_hoare(items, low, high)
            pending.append((low, split))
            pending.append((split + 1, high))
        else:
            partition = (
                _partition_first if scheme is PartitionScheme.FIRST_ELEMENT else _partition_lomuto
            )
            split = partition(items, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return items


def time_sorts(values: Iterable[Any], sizes: Iterable[int]) -> Iterator[tuple[int, float, float]]:
    """Yield (size, merge seconds, quick seconds) for each prefix size of the values."""
    items = list(values)
    for size in sizes:
        if not 0 <= size <= len(items):
            raise ValueError(f"size {size} is outside 0..{len(items)}")
        prefix = items[:size]

        start = time.perf_counter()
        merge_sort(prefix)
        merge_seconds = time.perf_counter() - start

        start = time.perf_counter()
        quick_sort(prefix, PartitionScheme.FIRST_ELEMENT)
        quick_seconds = time.perf_counter() - start

        yield size, merge_seconds, quick_seconds


def main(argv: list[str] | None = None) -> int:
    """Time merge sort and quick sort on growing prefixes of random data, writing a CSV."""
    parser = argparse.ArgumentParser(
        prog="algolab-sorting",
        description="Time merge sort and quick sort on random integers.",
    )
    parser.add_argument("--count", type=int, default=100_000, help="number of random values")
    parser.add_argument("--step", type=int, default=100, help="increase of input size per row")
    parser.add_argument("--output", default="merge_quick_sort_times.csv", help="CSV file to write")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    if args.count <= 0:
        parser.error("--count must be positive")
    if args.step <= 0:
        parser.error("--step must be positive")

    rng = random.Random(args.seed)
    values = [rng.randrange(args.count) for _ in range(args.count)]
    sizes = range(args.step, args.count + 1, args.step)

    try:
        handle = open(args.output, "w", newline="", encoding="utf-8")
    except OSError as exc:
        print(f"Error opening {args.output}: {exc}", file=sys.stderr)
        return 1
    with handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for size, merge_seconds, quick_seconds in time_sorts(values, sizes):
            print(f"{size},{merge_seconds},{quick_seconds}")
            writer.writerow((size, merge_seconds, quick_seconds))
    print(f"merge sort times saved to {args.output}", flush=True)
    return 0