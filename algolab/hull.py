"""Convex hulls of integer points: brute force, Graham scan, quickhull and monotone chain."""

from __future__ import annotations

import re
import time
import warnings
from collections.abc import Iterable, Iterator, Sequence
from functools import cmp_to_key
from itertools import chain, combinations
from typing import NamedTuple


class Point(NamedTuple):
    """A point with integer coordinates."""

    x: int
    y: int


def _as_points(points: Iterable[Sequence[int]]) -> list[Point]:
    return [Point(*p) for p in points]


def orientation(p: Sequence[int], q: Sequence[int], r: Sequence[int]) -> int:
    """Return 0 if p, q, r are collinear, 1 if they turn clockwise, -1 if counter-clockwise."""
    px, py = p
    qx, qy = q
    rx, ry = r
    value = (qy - py) * (rx - qx) - (qx - px) * (ry - qy)
    if value == 0:
        return 0
    return 1 if value > 0 else -1


def _dist2(a: Point, b: Point) -> int:
    return (a.x - b.x) ** 2 + (a.y - b.y) ** 2


def _ccw_key(origin: Point):
    """Sort key: counter-clockwise around origin, nearer first when collinear."""

    def compare(a: Point, b: Point) -> int:
        turn = orientation(origin, a, b)
        if turn == 0:
            da, db = _dist2(origin, a), _dist2(origin, b)
            return (da > db) - (da < db)
        return turn

    return cmp_to_key(compare)


def _lowest(point: Point) -> tuple[int, int]:
    return point.y, point.x


def _one_sided(a: Point, b: Point, others: Iterable[Point]) -> bool:
    sides = set()
    for other in others:
        turn = orientation(a, b, other)
        if turn:
            sides.add(turn)
            if len(sides) == 2:
                return False
    return True


def brute_force_hull(points: Iterable[Sequence[int]]) -> list[Point]:
    """Return the hull by testing every pair of points as an edge.

    The result runs counter-clockwise from the lowest point, drops points that
    lie between two others on a straight run, and repeats the first point at the end.
    """
    pts = _as_points(points)
    on_hull: set[Point] = set()
    for i, j in combinations(range(len(pts)), 2):
        a, b = pts[i], pts[j]
        others = (p for k, p in enumerate(pts) if k != i and k != j)
        if _one_sided(a, b, others):
            on_hull.update((a, b))
    if not on_hull:
        raise ValueError("a hull needs at least two points")

    ordered = sorted(on_hull)
    start = min(ordered, key=_lowest)
    ordered.sort(key=_ccw_key(start))

    result = [ordered[0]]
    for point in ordered[1:]:
        while len(result) > 1 and orientation(result[-2], result[-1], point) == 0:
            result.pop()
        result.append(point)
    result.append(result[0])
    return result


def graham_scan(points: Iterable[Sequence[int]]) -> list[Point]:
    """Return the hull counter-clockwise from the lowest point; empty for fewer than 3 points."""
    pts = _as_points(points)
    if len(pts) < 3:
        return []
    lowest = min(range(len(pts)), key=lambda i: _lowest(pts[i]))
    pts[0], pts[lowest] = pts[lowest], pts[0]
    pivot = pts[0]
    rest = sorted(pts[1:], key=_ccw_key(pivot))

    hull = [pivot, *rest[:2]]
    for point in rest[2:]:
        while len(hull) > 1 and orientation(hull[-2], hull[-1], point) != -1:
            hull.pop()
        hull.append(point)
    return hull


def _line_distance(p1: Point, p2: Point, p: Point) -> int:
    return abs((p.y - p1.y) * (p2.x - p1.x) - (p.x - p1.x) * (p2.y - p1.y))


def _find_hull(points: list[Point], p1: Point, p2: Point) -> Iterator[Point]:
    best, farthest = 0, None
    for point in points:
        distance = _line_distance(p1, p2, point)
        if distance > best:
            best, farthest = distance, point
    if farthest is None:
        yield p1
        return
    outside_first = [p for p in points if orientation(p1, farthest, p) == -1]
    outside_second = [p for p in points if orientation(farthest, p2, p) == -1]
    yield from _find_hull(outside_first, p1, farthest)
    yield from _find_hull(outside_second, farthest, p2)


def quick_hull(points: Iterable[Sequence[int]]) -> list[Point]:
    """Return the hull by divide and conquer, counter-clockwise from the leftmost point.

    Fewer than three points are returned unchanged.
    """
    pts = _as_points(points)
    if len(pts) < 3:
        return pts
    left = min(range(len(pts)), key=lambda i: pts[i].x)
    right = max(range(len(pts)), key=lambda i: (pts[i].x, -i))
    p1, p2 = pts[left], pts[right]

    above = [p for p in pts if orientation(p1, p2, p) == -1]
    below = [p for p in pts if orientation(p1, p2, p) == 1]
    hull = [*_find_hull(above, p1, p2), *_find_hull(below, p2, p1)]

    pivot = hull[0]
    return [pivot, *sorted(hull[1:], key=_ccw_key(pivot))]


def hull_edges(points: Iterable[Sequence[int]]) -> list[tuple[Point, Point]]:
    """Return every pair of points with all other points on one side of the line through them.

    Points equal to either end of the pair are ignored when testing it.
    """
    pts = _as_points(points)
    edges = []
    for a, b in combinations(pts, 2):
        others = (p for p in pts if p != a and p != b)
        if _one_sided(a, b, others):
            edges.append((a, b))
    return edges


def _cross(a: Point, b: Point, c: Point) -> int:
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def monotone_chain(points: Iterable[Sequence[int]]) -> list[Point]:
    """Return the hull from a sweep over points sorted by x, lower chain then upper.

    Raises ValueError for fewer than three points.
    """
    pts = _as_points(points)
    if len(pts) < 3:
        raise ValueError("convex hull is not possible with fewer than three points")
    ordered = sorted(pts, key=lambda p: p.x)
    hull: list[Point] = []
    for point in chain(ordered, reversed(ordered[:-1])):
        while len(hull) >= 2 and _cross(hull[-2], hull[-1], point) <= 0:
            hull.pop()
        hull.append(point)
    return hull[:-1]


_FIRST_INT = re.compile(r"\s*([+-]?\d+)")
_SEPARATOR_AND_INT = re.compile(r"\s*\S\s*([+-]?\d+)")


def _parse_point(line: str) -> Point | None:
    first = _FIRST_INT.match(line)
    if first is None:
        return None
    second = _SEPARATOR_AND_INT.match(line, first.end())
    if second is None:
        return None
    return Point(int(first[1]), int(second[1]))


def read_points(lines: Iterable[str]) -> list[Point]:
    """Parse lines of the form "x,y" into points.

    Any single non-blank character may separate the numbers. Lines that do not
    parse are skipped with a UserWarning.
    """
    points = []
    for number, line in enumerate(lines, start=1):
        point = _parse_point(line)
        if point is None:
            warnings.warn(f"Incorrect formatting on line {number}: {line!r}", UserWarning, stacklevel=2)
            continue
        points.append(point)
    return points


def _timed(function, points: list[Point]) -> float:
    start = time.perf_counter()
    function(points)
    return time.perf_counter() - start


def benchmark_hulls(
    points: Iterable[Sequence[int]], max_size: int = 100
) -> Iterator[tuple[int, float, float, float]]:
    """Yield (size, brute force, Graham scan, quickhull) seconds for prefixes of 4..max_size points."""
    pts = _as_points(points)
    for size in range(4, min(max_size, len(pts)) + 1):
        subset = pts[:size]
        yield (
            size,
            _timed(brute_force_hull, subset),
            _timed(graham_scan, subset),
            _timed(quick_hull, subset),
        )