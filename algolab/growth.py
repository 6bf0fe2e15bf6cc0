"""A table of common growth-rate functions evaluated over a range of n."""

from __future__ import annotations

import argparse
import math
from collections.abc import Callable
from typing import NamedTuple

NUMBER_WIDTH = 6


def factorial(n: float) -> float:
    """Return n * (n - 1) * ... down to the first factor not above 1; 1 for n <= 1.

    Works for fractional n by stepping down in whole units.
    """
    if math.isinf(n) and n > 0:
        return math.inf
    result = 1.0
    while n > 1:
        result *= n
        n -= 1
    return result


def _log(x: float) -> float:
    if math.isnan(x) or x < 0:
        return math.nan
    if x == 0:
        return -math.inf
    return math.log(x)


def _log2(x: float) -> float:
    if math.isnan(x) or x < 0:
        return math.nan
    if x == 0:
        return -math.inf
    return math.log2(x)


def _sqrt(x: float) -> float:
    if x < 0:
        return math.nan
    return math.sqrt(x)


def _pow(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.inf
    except ValueError:
        return math.nan


class _Column(NamedTuple):
    label: str
    header_width: int
    value_width: int
    compute: Callable[[int], float]


_COLUMNS = (
    _Column("log(i)", 10, 10, lambda n: _log2(n)),
    _Column("ln(i)", 10, 10, lambda n: _log(n)),
    _Column("n^3", 10, 10, lambda n: _pow(n, 3)),
    _Column("log^2(i)", 10, 10, lambda n: _pow(_log2(n), 2)),
    _Column("ln(ln(n))", 10, 10, lambda n: _log(_log(n))),
    _Column("2^log(i)", 10, 10, lambda n: _pow(2, _log2(n))),
    _Column("log(log(n))", 10, 10, lambda n: _log2(_log2(n))),
    _Column("(logn)^logn", 12, 10, lambda n: _pow(_log2(n), _log2(n))),
    _Column("nlog(n)", 10, 10, lambda n: n * _log2(n)),
    _Column("n^log(logn)", 12, 12, lambda n: _pow(n, _log2(_log2(n)))),
    _Column("sqrt(logn)", 10, 10, lambda n: _sqrt(_log2(n))),
    _Column("log(n!)", 10, 12, lambda n: _log2(factorial(n))),
    _Column("log(n)!", 10, 10, lambda n: factorial(_log2(n))),
    _Column("sqrt(2)^logn", 10, 10, lambda n: _pow(math.sqrt(2), _log2(n))),
)


def growth_row(n: int) -> dict[str, float]:
    """Return each growth function's value at n, keyed by column label in table order."""
    return {column.label: float(column.compute(n)) for column in _COLUMNS}


def growth_table(start: int, stop: int) -> list[tuple[int, dict[str, float]]]:
    """Return (n, row) pairs for n from start up to but not including stop."""
    return [(n, growth_row(n)) for n in range(start, stop)]


def _format(value: float) -> str:
    return format(value, "g")


def render_table(start: int = 0, stop: int = 100) -> str:
    """Return the table as left-aligned text columns, title and header first."""
    header = "n".ljust(NUMBER_WIDTH - 0) + "".join(
        column.label.ljust(column.header_width) for column in _COLUMNS
    )
    lines = ["Tabular plot", header]
    for n, row in growth_table(start, stop):
        cells = "".join(
            _format(row[column.label]).ljust(column.value_width) for column in _COLUMNS
        )
        lines.append(str(n).ljust(NUMBER_WIDTH) + cells)
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Print the growth-rate table."""
    parser = argparse.ArgumentParser(
        prog="algolab-growth", description="Print a table of growth-rate functions."
    )
    parser.add_argument("--start", type=int, default=0, help="first n")
    parser.add_argument("--stop", type=int, default=100, help="n to stop before")
    args = parser.parse_args(argv)
    print(render_table(args.start, args.stop))
    return 0