import pytest

from algolab.hull import Point
from algolab.hull_angular import (
    brute_force_hull_by_angle,
    divide_and_conquer_hull,
    graham_scan_by_angle,
    merge_hulls,
    sort_by_angle,
)

SQUARE_WITH_CENTRE = [(2, 2), (1, 1), (0, 2), (2, 0), (0, 0)]
CORNERS = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]

SOURCE_POINTS = [
    (0, 0), (1, 0), (2, 2), (1, 1), (0, 2),
    (3, 3), (2, 1), (1, 2), (2, 0), (3, 0),
]


def _cross(a, b, c):
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def _is_strictly_convex_ccw(polygon):
    n = len(polygon)
    return all(
        _cross(polygon[i], polygon[(i + 1) % n], polygon[(i + 2) % n]) > 0 for i in range(n)
    )


def test_sort_by_angle_orders_around_lowest_point():
    assert sort_by_angle(SQUARE_WITH_CENTRE) == [
        Point(0, 0), Point(2, 0), Point(1, 1), Point(2, 2), Point(0, 2)
    ]


def test_sort_by_angle_empty():
    assert sort_by_angle([]) == []


def test_sort_by_angle_is_permutation():
    result = sort_by_angle(SOURCE_POINTS)
    assert sorted(result) == sorted(Point(*p) for p in SOURCE_POINTS)
    assert result[0] == Point(0, 0)


def test_brute_force_excludes_interior_point():
    assert brute_force_hull_by_angle(SQUARE_WITH_CENTRE) == CORNERS


def test_brute_force_result_is_subset_and_sorted():
    result = brute_force_hull_by_angle(SOURCE_POINTS)
    assert set(result) <= {Point(*p) for p in SOURCE_POINTS}
    assert len(set(result)) == len(result)
    assert sort_by_angle(result) == result
    assert Point(1, 1) not in result


def test_graham_scan_excludes_interior_point():
    assert graham_scan_by_angle(SQUARE_WITH_CENTRE) == CORNERS


def test_graham_scan_keeps_corners_of_source_example():
    result = graham_scan_by_angle(SOURCE_POINTS)
    for corner in [(0, 0), (3, 0), (3, 3), (0, 2)]:
        assert Point(*corner) in result
    assert Point(1, 1) not in result
    assert sort_by_angle(result) == result


def test_graham_scan_needs_three_points():
    with pytest.raises(ValueError):
        graham_scan_by_angle([(0, 0), (1, 1)])


def test_divide_and_conquer_small_input_is_sorted_copy():
    assert divide_and_conquer_hull([(2, 0), (0, 0), (1, 5)]) == [
        Point(0, 0), Point(1, 5), Point(2, 0)
    ]


def test_divide_and_conquer_square_is_convex():
    result = divide_and_conquer_hull([(1, 1), (0, 0), (1, 0), (0, 1)])
    assert set(result) == {Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)}
    assert len(result) == 4
    assert _is_strictly_convex_ccw(result)


def test_merge_hulls_of_two_segments():
    result = merge_hulls([(0, 0), (0, 1)], [(1, 0), (1, 1)])
    assert set(result) == {Point(0, 0), Point(0, 1), Point(1, 0), Point(1, 1)}
    assert _is_strictly_convex_ccw(result)


def test_merge_hulls_rejects_empty():
    with pytest.raises(ValueError):
        merge_hulls([], [(1, 0)])