"""Graph traversal and brute-force travelling salesman."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from itertools import permutations

__all__ = ["Graph", "travelling_salesman"]


class Graph:
    """A directed graph over vertices ``0 .. vertices-1`` with adjacency lists."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("vertex count must be non-negative")
        self.vertices = vertices
        self._adjacent: list[list[int]] = [[] for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise ValueError(f"vertex {vertex} out of range")

    def add_edge(self, v: int, w: int) -> None:
        """Add an edge from ``v`` to ``w``."""
        self._check(v)
        self._check(w)
        self._adjacent[v].append(w)

    def bfs(self, start: int) -> list[int]:
        """Vertices in breadth-first order from ``start``."""
        self._check(start)
        visited = {start}
        order: list[int] = []
        pending = deque([start])
        while pending:
            vertex = pending.popleft()
            order.append(vertex)
            for neighbour in self._adjacent[vertex]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    pending.append(neighbour)
        return order


def travelling_salesman(graph: Sequence[Sequence[int]], start: int) -> int:
    """Cost of the cheapest tour that leaves ``start``, visits every vertex and returns."""
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("graph must be a square cost matrix")
    if not 0 <= start < size:
        raise ValueError(f"start vertex {start} out of range")
    others = [vertex for vertex in range(size) if vertex != start]

    def tour_cost(order: tuple[int, ...]) -> int:
        path = (start, *order, start)
        return sum(graph[a][b] for a, b in zip(path, path[1:]))

    return min(tour_cost(order) for order in permutations(others))