"""Approximate vertex covers that take both ends of a chosen edge."""

from __future__ import annotations

from collections.abc import Iterable


def _adjacency(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[set[int]]:
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    neighbours: list[set[int]] = [set() for _ in range(vertex_count)]
    for u, v in edges:
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise ValueError(f"edge ({u}, {v}) has a vertex outside 0..{vertex_count - 1}")
        neighbours[u].add(v)
        neighbours[v].add(u)
    return neighbours


def approx_vertex_cover(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return a cover at most twice the optimum, in ascending vertex order.

    Each vertex not yet covered is paired with its lowest-numbered uncovered
    neighbour, and both are added.
    """
    neighbours = _adjacency(vertex_count, edges)
    covered = [False] * vertex_count
    for u in range(vertex_count):
        if covered[u]:
            continue
        partner = next((v for v in sorted(neighbours[u]) if not covered[v]), None)
        if partner is not None:
            covered[u] = covered[partner] = True
    return [vertex for vertex, chosen in enumerate(covered) if chosen]


def first_edge_cover(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return the vertices of edges picked greedily, in the order they were added.

    Vertex u is paired with the first higher-numbered neighbour when neither is
    already in the cover.
    """
    neighbours = _adjacency(vertex_count, edges)
    taken = [False] * vertex_count
    cover: list[int] = []
    for u in range(vertex_count):
        if taken[u]:
            continue
        partner = next((v for v in sorted(neighbours[u]) if v > u and not taken[v]), None)
        if partner is not None:
            cover.extend((u, partner))
            taken[u] = taken[partner] = True
    return cover