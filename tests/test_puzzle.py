import pytest

from algolab.puzzle import (
    GOAL,
    Move,
    Solution,
    find_blank,
    format_solution,
    is_goal,
    manhattan_distance,
    solve,
)

EXAMPLE = [
    [1, 2, 3, 4],
    [5, 6, 7, 0],
    [9, 10, 11, 8],
    [13, 14, 15, 12],
]

SCRAMBLED = [
    [1, 2, 3, 4],
    [5, 7, 0, 8],
    [9, 6, 10, 12],
    [13, 14, 11, 15],
]


def _differs_by_one_slide(before, after):
    changed = [
        (b, a)
        for row_b, row_a in zip(before, after)
        for b, a in zip(row_b, row_a)
        if b != a
    ]
    return len(changed) == 2 and any(0 in pair for pair in changed)


def test_manhattan_distance_of_goal_is_zero():
    assert manhattan_distance(GOAL) == 0


def test_manhattan_distance_of_example():
    assert manhattan_distance(EXAMPLE) == 2


def test_is_goal():
    assert is_goal(GOAL) is True
    assert is_goal(EXAMPLE) is False


def test_find_blank():
    assert find_blank(GOAL) == (3, 3)
    assert find_blank(EXAMPLE) == (1, 3)


def test_solve_example():
    solution = solve(EXAMPLE)
    assert solution.moves == (Move.DOWN, Move.DOWN)
    assert solution.boards[-1] == GOAL
    assert len(solution) == 2


def test_solve_goal_needs_no_moves():
    solution = solve(GOAL)
    assert solution.moves == ()
    assert solution.boards == (GOAL,)


def test_solve_scrambled_board_reaches_goal():
    solution = solve(SCRAMBLED)
    assert solution.boards[0] == tuple(tuple(row) for row in SCRAMBLED)
    assert solution.boards[-1] == GOAL
    assert len(solution.boards) == len(solution.moves) + 1
    assert len(solution) >= manhattan_distance(SCRAMBLED)
    assert len(solution) % 2 == 1
    assert all(
        _differs_by_one_slide(a, b) for a, b in zip(solution.boards, solution.boards[1:])
    )


def test_solve_unsolvable_board_raises():
    board = [list(row) for row in GOAL]
    board[3][1], board[3][2] = board[3][2], board[3][1]
    with pytest.raises(ValueError):
        solve(board)


def test_malformed_boards_raise():
    with pytest.raises(ValueError):
        manhattan_distance([[1, 2, 3], [4, 5, 6], [7, 8, 0]])
    with pytest.raises(ValueError):
        is_goal([[1, 1, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 0]])


def test_move_labels():
    solution = solve(EXAMPLE)
    assert [move.label for move in solution.moves] == ["Down", "Down"]
    assert [move.label for move in Move] == ["Up", "Down", "Left", "Right"]


def test_format_solution_of_example():
    text = format_solution(EXAMPLE, solve(EXAMPLE))
    assert text.startswith("Path to solution:\n(Start)\n1\t2\t3\t4\t\n")
    assert text.count("(Down)\n") == 2
    assert text.count("------------------") == 3
    assert text.endswith("Total moves: 2\n")


def test_format_solution_of_goal():
    text = format_solution(GOAL, solve(GOAL))
    assert "13\t14\t15\t0\t\n------------------\n" in text
    assert text.endswith("Total moves: 0\n")


def test_format_solution_rejects_move_off_board():
    bogus = Solution(moves=(Move.DOWN,), boards=(GOAL,))
    with pytest.raises(ValueError):
        format_solution(GOAL, bogus)