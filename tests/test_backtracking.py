from itertools import combinations

import pytest

from algolab.backtracking import n_queens, subsets_with_sum


def _queen_positions(board):
    return [row.index("Q") for row in board]


def test_four_queens():
    assert n_queens(4) == [
        (".Q..", "...Q", "Q...", "..Q."),
        ("..Q.", "Q...", "...Q", ".Q.."),
    ]


def test_three_queens_has_no_solution():
    assert n_queens(3) == []


def test_eight_queens_count():
    assert len(n_queens(8)) == 92


@pytest.mark.parametrize("n", [1, 4, 5, 6])
def test_queens_never_attack(n):
    solutions = n_queens(n)
    assert solutions
    for board in solutions:
        assert len(board) == n
        assert all(row.count("Q") == 1 and len(row) == n for row in board)
        cols = _queen_positions(board)
        assert sorted(cols) == list(range(n))
        assert len({r - c for r, c in enumerate(cols)}) == n
        assert len({r + c for r, c in enumerate(cols)}) == n
    assert len(set(solutions)) == len(solutions)


def test_queens_negative_size():
    with pytest.raises(ValueError):
        n_queens(-1)


def test_subsets_worked_example():
    assert subsets_with_sum([5, 10, 12, 13, 15, 18], 30) == [
        (5, 10, 15),
        (5, 12, 13),
        (12, 18),
    ]


def test_subsets_target_zero_gives_empty_subset():
    assert subsets_with_sum([1, 2, 3], 0) == [()]


def test_subsets_source_example_invariants():
    values = [5 * k for k in range(1, 21)]
    result = subsets_with_sum(values, 150)
    assert result
    assert all(sum(s) == 150 for s in result)
    assert all(list(s) == sorted(s) for s in result)
    assert len(set(result)) == len(result)


def test_subsets_match_all_combinations():
    values = [2, 4, 6, 10, 3, 7]
    result = subsets_with_sum(values, 13)
    expected = {
        combo
        for size in range(len(values) + 1)
        for combo in combinations(values, size)
        if sum(combo) == 13
    }
    assert set(result) == expected
    assert len(result) == len(expected)


def test_subsets_none_found():
    assert subsets_with_sum([4, 6, 8], 5) == []