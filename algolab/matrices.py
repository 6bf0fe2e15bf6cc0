"""Matrix products: the schoolbook method, Strassen's method and optimal chain ordering."""

from __future__ import annotations

import random
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

Matrix = list[list[float]]

LEAF_SIZE = 64
"""Square matrices of at most this size are multiplied the schoolbook way by strassen()."""


def _shape(matrix: Sequence[Sequence[float]]) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return rows, cols


def _square_size(matrix: Sequence[Sequence[float]]) -> int:
    rows, cols = _shape(matrix)
    if rows != cols:
        raise ValueError(f"matrix must be square, got {rows}x{cols}")
    return rows


def multiply(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return the product a x b by the schoolbook method."""
    a_rows, a_cols = _shape(a)
    b_rows, b_cols = _shape(b)
    if a_cols != b_rows:
        raise ValueError(f"cannot multiply {a_rows}x{a_cols} by {b_rows}x{b_cols}")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def _add(a: Matrix, b: Matrix) -> Matrix:
    return [[x + y for x, y in zip(r, s)] for r, s in zip(a, b)]


def _sub(a: Matrix, b: Matrix) -> Matrix:
    return [[x - y for x, y in zip(r, s)] for r, s in zip(a, b)]


def _pad(matrix: Matrix) -> Matrix:
    size = len(matrix) + 1
    return [list(row) + [0] for row in matrix] + [[0] * size]


def _strassen(a: Matrix, b: Matrix) -> Matrix:
    n = len(a)
    if n <= LEAF_SIZE:
        return multiply(a, b)
    if n % 2:
        product = _strassen(_pad(a), _pad(b))
        return [row[:n] for row in product[:n]]

    mid = n // 2
    a11 = [row[:mid] for row in a[:mid]]
    a12 = [row[mid:] for row in a[:mid]]
    a21 = [row[:mid] for row in a[mid:]]
    a22 = [row[mid:] for row in a[mid:]]
    b11 = [row[:mid] for row in b[:mid]]
    b12 = [row[mid:] for row in b[:mid]]
    b21 = [row[:mid] for row in b[mid:]]
    b22 = [row[mid:] for row in b[mid:]]

    m1 = _strassen(a11, _sub(b12, b22))
    m2 = _strassen(_add(a11, a12), b22)
    m3 = _strassen(_add(a21, a22), b11)
    m4 = _strassen(a22, _sub(b21, b11))
    m5 = _strassen(_add(a11, a22), _add(b11, b22))
    m6 = _strassen(_sub(a12, a22), _add(b21, b22))
    m7 = _strassen(_sub(a11, a21), _add(b11, b12))

    c11 = _add(_sub(_add(m5, m4), m2), m6)
    c12 = _add(m1, m2)
    c21 = _add(m3, m4)
    c22 = _sub(_sub(_add(m5, m1), m3), m7)

    top = [left + right for left, right in zip(c11, c12)]
    bottom = [left + right for left, right in zip(c21, c22)]
    return top + bottom


def strassen(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return the product of two square matrices of equal size by Strassen's method.

    Blocks of at most LEAF_SIZE rows are multiplied the schoolbook way; odd sizes
    above that are padded with a zero row and column and trimmed afterwards.
    """
    n = _square_size(a)
    if _square_size(b) != n:
        raise ValueError("both matrices must have the same size")
    return _strassen([list(row) for row in a], [list(row) for row in b])


def strassen_2x2(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return the product of two 2x2 matrices with Strassen's seven multiplications."""
    if _shape(a) != (2, 2) or _shape(b) != (2, 2):
        raise ValueError("both matrices must be 2x2")
    (a11, a12), (a21, a22) = a
    (b11, b12), (b21, b22) = b

    p1 = a11 * (b12 - b22)
    p2 = (a11 + a12) * b22
    p3 = (a21 + a22) * b11
    p4 = a22 * (b21 - b11)
    p5 = (a11 + a22) * (b11 + b22)
    p6 = (a12 - a22) * (b21 + b22)
    p7 = (a11 - a21) * (b11 + b12)

    return [
        [p5 + p4 - p2 + p6, p1 + p2],
        [p3 + p4, p5 + p1 - p3 - p7],
    ]


@dataclass(frozen=True)
class ChainOrder:
    """Cheapest way to multiply a chain of matrices.

    Matrix i (counted from 0) has dims[i] rows and dims[i + 1] columns.
    costs[(i, j)] is the fewest scalar multiplications for matrices i..j, and
    splits[(i, j)] the matrix after which that product is split.
    """

    dims: tuple[int, ...]
    costs: Mapping[tuple[int, int], int]
    splits: Mapping[tuple[int, int], int]

    @property
    def count(self) -> int:
        """Number of matrices in the chain."""
        return len(self.dims) - 1

    @property
    def cost(self) -> int:
        """Fewest scalar multiplications for the whole chain."""
        return self.costs[(0, self.count - 1)]

    def parenthesize(self, prefix: str = "A") -> str:
        """Return the optimal bracketing, naming matrices prefix1, prefix2, ..."""

        def build(i: int, j: int) -> str:
            if i == j:
                return f"{prefix}{i + 1}"
            k = self.splits[(i, j)]
            return f"({build(i, k)}{build(k + 1, j)})"

        return build(0, self.count - 1)


def matrix_chain_order(dims: Sequence[int]) -> ChainOrder:
    """Find the cheapest bracketing of a matrix chain by dynamic programming.

    On equal costs the earliest split wins.
    """
    p = tuple(int(d) for d in dims)
    if len(p) < 2:
        raise ValueError("a chain needs at least two dimensions")
    if any(d < 0 for d in p):
        raise ValueError("dimensions must not be negative")
    n = len(p) - 1
    costs: dict[tuple[int, int], int] = {(i, i): 0 for i in range(n)}
    splits: dict[tuple[int, int], int] = {}
    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            best = None
            for k in range(i, j):
                q = costs[(i, k)] + costs[(k + 1, j)] + p[i] * p[k + 1] * p[j + 1]
                if best is None or q < best:
                    best = q
                    splits[(i, j)] = k
            costs[(i, j)] = best
    return ChainOrder(p, costs, splits)


def multiply_chain(matrices: Sequence[Sequence[Sequence[float]]], order: ChainOrder) -> Matrix:
    """Multiply the matrices in the bracketing given by order."""
    if len(matrices) != order.count:
        raise ValueError(f"expected {order.count} matrices, got {len(matrices)}")

    def product(i: int, j: int) -> Matrix:
        if i == j:
            return [list(row) for row in matrices[i]]
        k = order.splits[(i, j)]
        return multiply(product(i, k), product(k + 1, j))

    return product(0, order.count - 1)


def random_dimensions(count: int, rng: random.Random | None = None) -> list[int]:
    """Return count + 1 chain dimensions, each a power of two from 2 to 64."""
    if count < 1:
        raise ValueError("a chain needs at least one matrix")
    rng = rng or random.Random()
    return [2 ** rng.randint(1, 6) for _ in range(count + 1)]


def random_matrix(rows: int, cols: int, rng: random.Random | None = None) -> Matrix:
    """Return a rows x cols matrix of random integers from 0 to 99."""
    if rows < 0 or cols < 0:
        raise ValueError("matrix size must not be negative")
    rng = rng or random.Random()
    return [[rng.randrange(100) for _ in range(cols)] for _ in range(rows)]