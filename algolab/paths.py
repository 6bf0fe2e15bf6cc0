"""Single-source shortest paths by Bellman-Ford and Dijkstra."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

Edge = tuple[int, int, float]


class NegativeCycleError(ValueError):
    """The graph holds a cycle of negative total weight reachable from the source."""

    def __init__(self, cycle: list[int]) -> None:
        self.cycle = cycle
        route = " -> ".join(str(v) for v in [*cycle, cycle[0]]) if cycle else ""
        super().__init__(f"Graph contains a negative-weight cycle: {route}")


@dataclass(frozen=True)
class ShortestPaths:
    """Distances from a source (math.inf where unreachable) and the tree of last hops."""

    source: int
    distances: tuple[float, ...]
    parents: tuple[int | None, ...]

    def path(self, target: int) -> list[int]:
        """Return the vertices on a shortest path from the source to target."""
        if not 0 <= target < len(self.distances):
            raise IndexError(f"vertex {target} is outside 0..{len(self.distances) - 1}")
        if math.isinf(self.distances[target]):
            raise ValueError(f"vertex {target} is not reachable from {self.source}")
        route = [target]
        while route[-1] != self.source:
            parent = self.parents[route[-1]]
            if parent is None:
                raise ValueError(f"vertex {target} is not reachable from {self.source}")
            route.append(parent)
        route.reverse()
        return route


def _check_vertex(vertex: int, vertex_count: int, what: str) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(f"{what} {vertex} is outside 0..{vertex_count - 1}")


def _check_edges(vertex_count: int, edges: Iterable[Sequence[float]]) -> list[Edge]:
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    checked = []
    for u, v, w in edges:
        _check_vertex(u, vertex_count, "edge vertex")
        _check_vertex(v, vertex_count, "edge vertex")
        checked.append((u, v, w))
    return checked


def _trace_cycle(parents: list[int | None], vertex: int, vertex_count: int) -> list[int]:
    for _ in range(vertex_count):
        step = parents[vertex]
        if step is None:
            break
        vertex = step
    cycle = [vertex]
    current = parents[vertex]
    while current is not None and current != vertex:
        cycle.append(current)
        current = parents[current]
    cycle.reverse()
    return cycle


def bellman_ford(vertex_count: int, edges: Iterable[Sequence[float]], source: int) -> ShortestPaths:
    """Return shortest paths over directed (u, v, weight) edges; weights may be negative.

    Raises NegativeCycleError when a negative cycle is reachable from the source.
    """
    edge_list = _check_edges(vertex_count, edges)
    _check_vertex(source, vertex_count, "source")
    dist: list[float] = [math.inf] * vertex_count
    parents: list[int | None] = [None] * vertex_count
    dist[source] = 0

    for _ in range(vertex_count - 1):
        changed = False
        for u, v, w in edge_list:
            if dist[u] != math.inf and dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                parents[v] = u
                changed = True
        if not changed:
            break

    last_relaxed = None
    for u, v, w in edge_list:
        if dist[u] != math.inf and dist[u] + w < dist[v]:
            dist[v] = dist[u] + w
            parents[v] = u
            last_relaxed = v
    if last_relaxed is not None:
        raise NegativeCycleError(_trace_cycle(parents, last_relaxed, vertex_count))

    return ShortestPaths(source, tuple(dist), tuple(parents))


def _dijkstra(adjacency: list[list[tuple[int, float]]], source: int) -> ShortestPaths:
    n = len(adjacency)
    dist: list[float] = [math.inf] * n
    parents: list[int | None] = [None] * n
    done = [False] * n
    dist[source] = 0
    queue: list[tuple[float, int]] = [(0, source)]
    while queue:
        _, u = heapq.heappop(queue)
        if done[u]:
            continue
        done[u] = True
        for v, w in adjacency[u]:
            if not done[v] and dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                parents[v] = u
                heapq.heappush(queue, (dist[v], v))
    return ShortestPaths(source, tuple(dist), tuple(parents))


def dijkstra(matrix: Sequence[Sequence[float | None]], source: int) -> ShortestPaths:
    """Return shortest paths over an adjacency matrix of non-negative weights.

    An entry of 0, None or math.inf means there is no edge.
    """
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    _check_vertex(source, n, "source")
    adjacency: list[list[tuple[int, float]]] = []
    for row in matrix:
        neighbours = []
        for v, w in enumerate(row):
            if w is None or w == 0 or math.isinf(w):
                continue
            if w < 0:
                raise ValueError("Dijkstra's algorithm needs non-negative weights")
            neighbours.append((v, w))
        adjacency.append(neighbours)
    return _dijkstra(adjacency, source)


def shortest_paths(vertex_count: int, edges: Iterable[Sequence[float]], source: int) -> ShortestPaths:
    """Return shortest paths over directed edges, by Bellman-Ford if any weight is negative.

    When an edge is given twice between the same vertices, the later one counts.
    """
    edge_list = _check_edges(vertex_count, edges)
    _check_vertex(source, vertex_count, "source")
    weights: dict[tuple[int, int], float] = {}
    for u, v, w in edge_list:
        weights[(u, v)] = w
    unique = [(u, v, w) for (u, v), w in weights.items()]
    if any(w < 0 for _, _, w in unique):
        return bellman_ford(vertex_count, unique, source)
    adjacency: list[list[tuple[int, float]]] = [[] for _ in range(vertex_count)]
    for u, v, w in unique:
        adjacency[u].append((v, w))
    return _dijkstra(adjacency, source)