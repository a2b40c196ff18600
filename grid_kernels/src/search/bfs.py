"""Breadth-first search over an occupancy grid."""

from __future__ import annotations

from collections import deque
from typing import Optional

import numpy as np

from ..core.grid import OccupancyGrid, Position

UNVISITED = -1


def _expand(grid: OccupancyGrid, dist: np.ndarray, queue: deque, pos: Position) -> None:
    step = dist[pos] + 1
    for nxt in grid.neighbors(pos):
        if dist[nxt] == UNVISITED and grid.is_free(nxt):
            dist[nxt] = step
            queue.append(nxt)


def shortest_path_length(
    grid: OccupancyGrid, start: Position, goal: Position
) -> Optional[int]:
    """Return the number of moves on the shortest path, or ``None``.

    Moves are the four axis-aligned steps with unit cost. The search stops as
    soon as ``goal`` is dequeued. ``start`` and ``goal`` must already be
    validated as free, in-bounds cells.
    """
    dist = np.full(grid.shape(), UNVISITED, dtype=np.int64)
    dist[start] = 0
    queue: deque[Position] = deque([start])

    while queue:
        pos = queue.popleft()
        if pos == goal:
            return int(dist[pos])
        _expand(grid, dist, queue, pos)
    return None


def distance_map(grid: OccupancyGrid, start: Position) -> np.ndarray:
    """Return the BFS distance from ``start`` to every cell.

    Walls and unreachable cells hold ``-1``.
    """
    dist = np.full(grid.shape(), UNVISITED, dtype=np.int64)
    if not grid.is_free(start):
        return dist
    dist[start] = 0
    queue: deque[Position] = deque([start])
    while queue:
        _expand(grid, dist, queue, queue.popleft())
    return dist


__all__ = ["UNVISITED", "shortest_path_length", "distance_map"]
