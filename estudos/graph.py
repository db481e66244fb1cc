"""Directed weighted graph with depth-first path search."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class Edge(Generic[T]):
    """A directed, weighted connection to another vertex."""

    to: Vertex[T]
    weight: int


@dataclass(eq=False)
class Vertex(Generic[T]):
    """A graph vertex and its outgoing edges."""

    value: T
    edges: list[Edge[T]] = field(default_factory=list)


class Graph(Generic[T]):
    """Directed graph stored as adjacency lists."""

    def __init__(self) -> None:
        self.vertices: list[Vertex[T]] = []

    def add_vertex(self, value: T) -> Vertex[T]:
        """Create a vertex holding ``value`` and return it."""
        vertex = Vertex(value)
        self.vertices.append(vertex)
        return vertex

    def add_edge(self, source: Vertex[T], target: Vertex[T], weight: int) -> None:
        """Add a directed edge from ``source`` to ``target``."""
        source.edges.append(Edge(target, weight))

    def _contains(self, vertex: Vertex[T]) -> bool:
        return any(v is vertex for v in self.vertices)

    def dfs(self, start: Vertex[T], target: Vertex[T]) -> list[Vertex[T]]:
        """Return a path from ``start`` to a vertex whose value equals the
        target's, found depth first; an empty list when none exists."""
        if not self._contains(start):
            raise ValueError("start vertex is not part of the graph")
        seen: set[int] = set()
        path: list[Vertex[T]] = []

        def walk(current: Vertex[T]) -> bool:
            if id(current) in seen:
                return False
            if current.value == target.value:
                path.append(current)
                return True
            seen.add(id(current))
            path.append(current)
            for edge in current.edges:
                if not self._contains(edge.to):
                    raise ValueError("edge leads to a vertex outside the graph")
                if walk(edge.to):
                    return True
            path.pop()
            return False

        walk(start)
        return path