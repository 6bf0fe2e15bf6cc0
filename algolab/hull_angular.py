"""Convex hulls built around points sorted by polar angle from the lowest point."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from algolab.hull import Point


def _as_points(points: Iterable[Sequence[int]]) -> list[Point]:
    return [Point(*p) for p in points]


def _cross(a: Point, b: Point, c: Point) -> int:
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def sort_by_angle(points: Iterable[Sequence[int]]) -> list[Point]:
    """Return the points ordered by angle around the lowest point, nearer first on ties.

    The lowest point is the one with the smallest y, then the smallest x.
    """
    pts = _as_points(points)
    if not pts:
        return []
    anchor = min(pts, key=lambda p: (p.y, p.x))

    def key(p: Point) -> tuple[float, int]:
        dx, dy = p.x - anchor.x, p.y - anchor.y
        return math.atan2(dy, dx), dx * dx + dy * dy

    return sorted(pts, key=key)


def _one_sided(a: Point, b: Point, others: Iterable[Point]) -> bool:
    positive = negative = False
    for other in others:
        turn = _cross(a, b, other)
        positive = positive or turn > 0
        negative = negative or turn < 0
        if positive and negative:
            return False
    return True


def brute_force_hull_by_angle(points: Iterable[Sequence[int]]) -> list[Point]:
    """Return hull points found by testing pairs as edges, sorted by angle.

    Points are first sorted by angle; for each point only the first later point
    that forms an edge with it is taken.
    """
    pts = sort_by_angle(points)
    result: list[Point] = []
    for i, first in enumerate(pts[:-1]):
        for j in range(i + 1, len(pts)):
            second = pts[j]
            others = (p for k, p in enumerate(pts) if k != i and k != j)
            if _one_sided(first, second, others):
                found_first = first in result
                found_second = second in result
                if not found_first:
                    result.append(first)
                if not found_second:
                    result.append(second)
                break
    return sort_by_angle(result)


def graham_scan_by_angle(points: Iterable[Sequence[int]]) -> list[Point]:
    """Return the hull by Graham scan over angle-sorted points, sorted by angle.

    Collinear points on the boundary are kept. Raises ValueError for fewer than three points.
    """
    pts = sort_by_angle(points)
    if len(pts) < 3:
        raise ValueError("Graham scan needs at least three points")
    stack = pts[:3]
    for point in pts[3:]:
        while len(stack) > 2 and _cross(stack[-2], stack[-1], point) < 0:
            stack.pop()
        stack.append(point)
    return sort_by_angle(reversed(stack))


def merge_hulls(left: Sequence[Sequence[int]], right: Sequence[Sequence[int]]) -> list[Point]:
    """Join a hull lying to the left with one lying to the right along their tangents.

    Raises ValueError if either hull is empty or the tangent search does not settle.
    """
    lhull, rhull = _as_points(left), _as_points(right)
    if not lhull or not rhull:
        raise ValueError("both hulls must hold at least one point")
    nl, nr = len(lhull), len(rhull)
    budget = 4 * (nl + nr) ** 2 + 4

    def spend() -> None:
        nonlocal budget
        budget -= 1
        if budget < 0:
            raise ValueError("hull tangents did not converge; the hulls may not be convex")

    left_most = max(range(nl), key=lambda i: (lhull[i].x, -i))
    right_most = min(range(nr), key=lambda i: (rhull[i].x, i))

    upper_left, upper_right = left_most, right_most
    changed = True
    while changed:
        changed = False
        while _cross(rhull[upper_right], lhull[upper_left], lhull[(upper_left + 1) % nl]) < 0:
            upper_left = (upper_left + 1) % nl
            changed = True
            spend()
        while _cross(lhull[upper_left], rhull[upper_right], rhull[(upper_right - 1) % nr]) > 0:
            upper_right = (upper_right - 1) % nr
            changed = True
            spend()

    lower_left, lower_right = left_most, right_most
    changed = True
    while changed:
        changed = False
        while _cross(lhull[lower_left], rhull[lower_right], rhull[(lower_right + 1) % nr]) < 0:
            lower_right = (lower_right + 1) % nr
            changed = True
            spend()
        while _cross(rhull[lower_right], lhull[lower_left], lhull[(lower_left - 1) % nl]) > 0:
            lower_left = (lower_left - 1) % nl
            changed = True
            spend()

    joined: list[Point] = []
    i = upper_left
    while True:
        joined.append(lhull[i])
        i = (i + 1) % nl
        if i == lower_left:
            break
    joined.append(lhull[lower_left])
    i = lower_right
    while True:
        joined.append(rhull[i])
        i = (i + 1) % nr
        if i == upper_right:
            break
    joined.append(rhull[upper_right])

    cleaned: list[Point] = []
    for point in joined:
        while len(cleaned) >= 2 and _cross(cleaned[-2], cleaned[-1], point) <= 0:
            cleaned.pop()
        cleaned.append(point)
    return cleaned


def _divide(points: list[Point]) -> list[Point]:
    if len(points) <= 3:
        return list(points)
    mid = len(points) // 2
    return merge_hulls(_divide(points[:mid]), _divide(points[mid:]))


def divide_and_conquer_hull(points: Iterable[Sequence[int]]) -> list[Point]:
    """Return the hull by sorting on x then y, splitting in halves and merging.

    Three or fewer points are returned in sorted order as they are.
    """
    return _divide(sorted(_as_points(points)))