"""Depth-first maze solver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Point:
    """A position in the maze: column ``x``, row ``y``."""

    x: int
    y: int


_DIRECTIONS = ((0, -1), (1, 0), (0, 1), (-1, 0))  # up, right, down, left


def solve_maze(maze: Sequence[str], wall: str, start: Point, end: Point) -> list[Point]:
    """Return a path of points from ``start`` to ``end``; empty if none.

    Neighbours are tried in the order up, right, down, left.
    """
    width = len(maze[0]) if maze else 0
    height = len(maze)
    seen: set[Point] = set()
    path: list[Point] = []

    def walk(current: Point) -> bool:
        if not (0 <= current.x < width and 0 <= current.y < height):
            return False
        if maze[current.y][current.x] == wall:
            return False
        if current == end:
            path.append(end)
            return True
        if current in seen:
            return False
        seen.add(current)
        path.append(current)
        for dx, dy in _DIRECTIONS:
            if walk(Point(current.x + dx, current.y + dy)):
                return True
        path.pop()
        return False

    walk(start)
    return path