"""Maximum flow by the Ford-Fulkerson method over a capacity matrix."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Sequence

_Residual = list[list[float]]
_Parents = list[int | None]


def _bfs_path(residual: _Residual, source: int, sink: int) -> _Parents | None:
    n = len(residual)
    parent: _Parents = [None] * n
    seen = [False] * n
    seen[source] = True
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v in range(n):
            if not seen[v] and residual[u][v] > 0:
                seen[v] = True
                parent[v] = u
                if v == sink:
                    return parent
                queue.append(v)
    return None


def _dfs_path(residual: _Residual, source: int, sink: int) -> _Parents | None:
    n = len(residual)
    parent: _Parents = [None] * n
    seen = [False] * n
    seen[source] = True
    stack = [(source, iter(range(n)))]
    while stack:
        u, candidates = stack[-1]
        for v in candidates:
            if not seen[v] and residual[u][v] > 0:
                seen[v] = True
                parent[v] = u
                if v == sink:
                    return parent
                stack.append((v, iter(range(n))))
                break
        else:
            stack.pop()
    return None


_SEARCHES: dict[str, Callable[[_Residual, int, int], _Parents | None]] = {
    "bfs": _bfs_path,
    "dfs": _dfs_path,
}


def _ford_fulkerson(residual: _Residual, source: int, sink: int, search: str) -> float:
    try:
        find_path = _SEARCHES[search]
    except KeyError:
        raise ValueError(f"search must be 'bfs' or 'dfs', got {search!r}") from None
    n = len(residual)
    for vertex, what in ((source, "source"), (sink, "sink")):
        if not 0 <= vertex < n:
            raise ValueError(f"{what} {vertex} is outside 0..{n - 1}")
    if source == sink:
        raise ValueError("source and sink must differ")

    total = 0
    while (parent := find_path(residual, source, sink)) is not None:
        path = []
        v = sink
        while v != source:
            u = parent[v]
            path.append((u, v))
            v = u
        flow = min(residual[u][v] for u, v in path)
        for u, v in path:
            residual[u][v] -= flow
            residual[v][u] += flow
        total += flow
    return total


class FlowNetwork:
    """A directed network of edge capacities between vertices 0..n-1."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self._capacity: _Residual = [[0] * vertex_count for _ in range(vertex_count)]

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the network."""
        return len(self._capacity)

    def add_edge(self, u: int, v: int, capacity: float) -> None:
        """Set the capacity of the edge from u to v, replacing any earlier one."""
        n = len(self._capacity)
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) has a vertex outside 0..{n - 1}")
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity[u][v] = capacity

    def max_flow(self, source: int, sink: int, search: str = "bfs") -> float:
        """Return the maximum flow from source to sink; the network is left unchanged.

        Augmenting paths are found breadth-first ("bfs") or depth-first ("dfs").
        """
        residual = [list(row) for row in self._capacity]
        return _ford_fulkerson(residual, source, sink, search)


def max_flow(
    capacity: Sequence[Sequence[float]], source: int, sink: int, search: str = "bfs"
) -> float:
    """Return the maximum flow through a square capacity matrix from source to sink."""
    n = len(capacity)
    if any(len(row) != n for row in capacity):
        raise ValueError("capacity matrix must be square")
    if any(c < 0 for row in capacity for c in row):
        raise ValueError("capacities must not be negative")
    residual = [list(row) for row in capacity]
    return _ford_fulkerson(residual, source, sink, search)