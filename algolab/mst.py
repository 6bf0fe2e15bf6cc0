"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge between two vertices."""

    src: int
    dest: int
    weight: float


def _edges(vertex_count: int, edges: Iterable[Edge | Sequence[float]]) -> list[Edge]:
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    result = []
    for item in edges:
        edge = item if isinstance(item, Edge) else Edge(*item)
        for vertex in (edge.src, edge.dest):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"edge vertex {vertex} is outside 0..{vertex_count - 1}")
        result.append(edge)
    return result


class DisjointSet:
    """Union-find over the integers 0..size-1 with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, item: int) -> int:
        """Return the representative of the set holding item."""
        if not 0 <= item < len(self._parent):
            raise IndexError(f"item {item} is outside 0..{len(self._parent) - 1}")
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: int, b: int) -> bool:
        """Join the sets holding a and b; return False if they were already one set."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self._rank[root_a] < self._rank[root_b]:
            self._parent[root_a] = root_b
        elif self._rank[root_a] > self._rank[root_b]:
            self._parent[root_b] = root_a
        else:
            self._parent[root_b] = root_a
            self._rank[root_a] += 1
        return True


def kruskal(vertex_count: int, edges: Iterable[Edge | Sequence[float]]) -> list[Edge]:
    """Return the edges of a minimum spanning forest in the order they were chosen.

    Edges are taken in ascending weight, equal weights in input order; an edge
    joining two vertices already connected is skipped.
    """
    edge_list = _edges(vertex_count, edges)
    sets = DisjointSet(vertex_count)
    chosen: list[Edge] = []
    for edge in sorted(edge_list, key=lambda e: e.weight):
        if len(chosen) >= vertex_count - 1:
            break
        if sets.union(edge.src, edge.dest):
            chosen.append(edge)
    return chosen


def prim(vertex_count: int, edges: Iterable[Edge | Sequence[float]]) -> list[Edge]:
    """Return a minimum spanning tree grown from vertex 0.

    The result holds one Edge(parent, vertex, weight) for each vertex 1..n-1,
    in vertex order. Raises ValueError if the graph is not connected.
    """
    edge_list = _edges(vertex_count, edges)
    if vertex_count == 0:
        return []
    adjacency: list[list[tuple[int, float]]] = [[] for _ in range(vertex_count)]
    for edge in edge_list:
        adjacency[edge.src].append((edge.dest, edge.weight))
        adjacency[edge.dest].append((edge.src, edge.weight))

    key: list[float] = [math.inf] * vertex_count
    parent: list[int | None] = [None] * vertex_count
    in_tree = [False] * vertex_count
    key[0] = 0
    for _ in range(vertex_count):
        u = min((v for v in range(vertex_count) if not in_tree[v]), key=key.__getitem__)
        if math.isinf(key[u]):
            raise ValueError("graph is not connected")
        in_tree[u] = True
        for v, weight in adjacency[u]:
            if not in_tree[v] and weight < key[v]:
                key[v] = weight
                parent[v] = u
    return [Edge(parent[v], v, key[v]) for v in range(1, vertex_count)]