"""The 15 puzzle: Manhattan-distance heuristic and a best-first branch and bound solver."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from itertools import chain, count

SIZE = 4
GOAL = ((1, 2, 3, 4), (5, 6, 7, 8), (9, 10, 11, 12), (13, 14, 15, 0))

Board = tuple[tuple[int, ...], ...]
_Flat = tuple[int, ...]


class Move(Enum):
    """Direction in which the blank moves, as a (row, column) step."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def label(self) -> str:
        """The direction's display name, such as "Up"."""
        return self.name.capitalize()


@dataclass(frozen=True)
class Solution:
    """The moves that solve a board and every board along the way, start included."""

    moves: tuple[Move, ...]
    boards: tuple[Board, ...]

    def __len__(self) -> int:
        return len(self.moves)


def _normalize(board: Sequence[Sequence[int]]) -> Board:
    rows = tuple(tuple(int(v) for v in row) for row in board)
    if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
        raise ValueError(f"board must be {SIZE}x{SIZE}")
    if sorted(chain.from_iterable(rows)) != list(range(SIZE * SIZE)):
        raise ValueError(f"board must hold each of 0..{SIZE * SIZE - 1} exactly once")
    return rows


def _flatten(board: Board) -> _Flat:
    return tuple(chain.from_iterable(board))


def _unflatten(cells: _Flat) -> Board:
    return tuple(cells[i : i + SIZE] for i in range(0, len(cells), SIZE))


def _heuristic(cells: _Flat) -> int:
    distance = 0
    for index, value in enumerate(cells):
        if value:
            row, col = divmod(index, SIZE)
            goal_row, goal_col = divmod(value - 1, SIZE)
            distance += abs(row - goal_row) + abs(col - goal_col)
    return distance


def manhattan_distance(board: Sequence[Sequence[int]]) -> int:
    """Return the sum of each tile's row and column distance from its goal place."""
    return _heuristic(_flatten(_normalize(board)))


def is_goal(board: Sequence[Sequence[int]]) -> bool:
    """Return whether the board is the solved arrangement."""
    return _normalize(board) == GOAL


def find_blank(board: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Return the (row, column) of the blank tile."""
    return divmod(_flatten(_normalize(board)).index(0), SIZE)


def _solvable(cells: _Flat) -> bool:
    tiles = [v for v in cells if v]
    inversions = sum(1 for i, a in enumerate(tiles) for b in tiles[i + 1 :] if a > b)
    blank_row = cells.index(0) // SIZE
    return (inversions + blank_row) % 2 == 1


def _step(cells: _Flat, move: Move) -> _Flat | None:
    blank = cells.index(0)
    row, col = divmod(blank, SIZE)
    d_row, d_col = move.value
    row, col = row + d_row, col + d_col
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        return None
    target = row * SIZE + col
    swapped = list(cells)
    swapped[blank], swapped[target] = swapped[target], swapped[blank]
    return tuple(swapped)


def solve(board: Sequence[Sequence[int]]) -> Solution:
    """Solve the board by best-first search on moves made plus Manhattan distance.

    Raises ValueError for a malformed board or one that cannot reach the goal.
    """
    start = _flatten(_normalize(board))
    if not _solvable(start):
        raise ValueError("No solution found.")

    came_from: dict[_Flat, tuple[_Flat, Move] | None] = {start: None}
    order = count()
    queue = [(_heuristic(start), next(order), 0, start)]
    while queue:
        _, _, level, state = heapq.heappop(queue)
        if _heuristic(state) == 0:
            return _rebuild(came_from, state)
        for move in Move:
            following = _step(state, move)
            if following is None or following in came_from:
                continue
            came_from[following] = (state, move)
            heapq.heappush(
                queue, (_heuristic(following) + level + 1, next(order), level + 1, following)
            )
    raise ValueError("No solution found.")


def _rebuild(came_from: dict[_Flat, tuple[_Flat, Move] | None], state: _Flat) -> Solution:
    moves: list[Move] = []
    states = [state]
    link = came_from[state]
    while link is not None:
        previous, move = link
        moves.append(move)
        states.append(previous)
        link = came_from[previous]
    moves.reverse()
    states.reverse()
    return Solution(tuple(moves), tuple(_unflatten(s) for s in states))


def _matrix_lines(board: Board) -> list[str]:
    return ["".join(f"{value}\t" for value in row) for row in board] + ["-" * 18]


def format_solution(board: Sequence[Sequence[int]], solution: Solution) -> str:
    """Return the board and each board after every move of the solution, as text."""
    current = _normalize(board)
    lines = ["Path to solution:", "(Start)", *_matrix_lines(current)]
    for move in solution.moves:
        following = _step(_flatten(current), move)
        if following is None:
            raise ValueError(f"move {move.label} leaves the board")
        current = _unflatten(following)
        lines.append(f"({move.label})")
        lines.extend(_matrix_lines(current))
    lines.append(f"Total moves: {len(solution.moves)}")
    return "\n".join(lines) + "\n"