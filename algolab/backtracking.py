"""Backtracking searches: the n-queens problem and subsets with a given sum."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def _place(row: int, n: int, queens: list[int], columns: set[int],
           rising: set[int], falling: set[int]) -> Iterator[tuple[str, ...]]:
    if row == n:
        yield tuple("".join("Q" if c == col else "." for c in range(n)) for col in queens)
        return
    for column in range(n):
        d1, d2 = row - column, row + column
        if column in columns or d1 in rising or d2 in falling:
            continue
        queens.append(column)
        columns.add(column)
        rising.add(d1)
        falling.add(d2)
        yield from _place(row + 1, n, queens, columns, rising, falling)
        queens.pop()
        columns.discard(column)
        rising.discard(d1)
        falling.discard(d2)


def n_queens(n: int) -> list[tuple[str, ...]]:
    """Return every placement of n non-attacking queens on an n x n board.

    Each board is a tuple of rows written with "Q" and ".", in the order found
    by trying columns from left to right row by row.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    return list(_place(0, n, [], set(), set(), set()))


def _subsets(items: list[int], index: int, target: int, chosen: list[int],
             total: int) -> Iterator[tuple[int, ...]]:
    if total == target:
        yield tuple(chosen)
        return
    if total > target or index >= len(items):
        return
    chosen.append(items[index])
    yield from _subsets(items, index + 1, target, chosen, total + items[index])
    chosen.pop()
    yield from _subsets(items, index + 1, target, chosen, total)


def subsets_with_sum(values: Iterable[int], target: int) -> list[tuple[int, ...]]:
    """Return the subsets whose elements add up to target, keeping input order.

    A branch stops once its sum reaches or passes the target, so values are
    expected to be non-negative. Subsets that include an element come before
    those that leave it out.
    """
    return list(_subsets(list(values), 0, target, [], 0))