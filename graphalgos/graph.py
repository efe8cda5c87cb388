"""Undirected weighted graph stored as adjacency lists."""

from __future__ import annotations

from collections import deque
from typing import NamedTuple


class Neighbor(NamedTuple):
    """An adjacency entry: the vertex reached and the edge weight."""

    vertex: int
    weight: int


class Graph:
    """An undirected graph on vertices ``0..n-1`` with integer edge weights.

    Each adjacency list is ordered with the most recently added edge first.
    """

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self._adj: list[deque[Neighbor]] = [deque() for _ in range(num_vertices)]

    def _in_range(self, vertex: int) -> bool:
        return 0 <= vertex < len(self._adj)

    def _check(self, *vertices: int) -> None:
        if not all(self._in_range(v) for v in vertices):
            raise IndexError("Invalid vertex index")

    def add_edge(self, src: int, dest: int, weight: int = 1) -> None:
        """Add an undirected edge; an existing edge is left unchanged."""
        self._check(src, dest)
        if not self.has_edge(src, dest):
            self._adj[src].appendleft(Neighbor(dest, weight))
            self._adj[dest].appendleft(Neighbor(src, weight))

    def remove_edge(self, src: int, dest: int) -> None:
        """Remove the edge between ``src`` and ``dest`` if there is one."""
        self._check(src, dest)
        for owner, target in ((src, dest), (dest, src)):
            entries = self._adj[owner]
            for entry in entries:
                if entry.vertex == target:
                    entries.remove(entry)
                    break

    def has_edge(self, src: int, dest: int) -> bool:
        """Whether an edge joins ``src`` and ``dest``; False when out of range."""
        if not (self._in_range(src) and self._in_range(dest)):
            return False
        return any(n.vertex == dest for n in self._adj[src])

    def edge_weight(self, src: int, dest: int) -> int:
        """Weight of the edge, or 0 if there is none or a vertex is invalid."""
        if not (self._in_range(src) and self._in_range(dest)):
            return 0
        return next((n.weight for n in self._adj[src] if n.vertex == dest), 0)

    def neighbors(self, vertex: int) -> tuple[Neighbor, ...]:
        """The adjacency list of ``vertex``, most recent edge first."""
        self._check(vertex)
        return tuple(self._adj[vertex])

    def num_vertices(self) -> int:
        return len(self._adj)

    def edge_count(self) -> int:
        """Number of undirected edges."""
        return sum(len(entries) for entries in self._adj) // 2

    def render(self) -> str:
        """The adjacency lists as text, one line per vertex."""
        lines = []
        for index, entries in enumerate(self._adj):
            parts = "".join(f" -> ({n.vertex}, {n.weight})" for n in entries)
            lines.append(f"Vertex {index}:{parts}\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()