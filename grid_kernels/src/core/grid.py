"""Occupancy grid used by the shortest-path solver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Sequence, Tuple

import numpy as np

FREE = 0
WALL = 1

Position = Tuple[int, int]

# down, up, right, left
MOVES: Tuple[Position, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass
class OccupancyGrid:
    """2D matrix of ``FREE``/``WALL`` cells backed by a ``numpy`` array."""

    data: np.ndarray

    def __post_init__(self) -> None:
        self.data = np.asarray(self.data, dtype=np.int8)
        if self.data.ndim != 2:
            raise ValueError("Occupancy grid must be two dimensional")

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]], clamp: bool = False) -> "OccupancyGrid":
        """Build a grid from nested rows.

        Rows must all share the width of the first row unless ``clamp`` is
        set, in which case longer rows are truncated and shorter rows are
        padded with walls.
        """
        if not rows:
            raise ValueError("Grid cannot be empty")
        width = len(rows[0])
        cells: List[List[int]] = []
        for row in rows:
            if len(row) != width and not clamp:
                raise ValueError("All rows must have the same length")
            clipped = [WALL if v else FREE for v in row[:width]]
            clipped.extend([WALL] * (width - len(clipped)))
            cells.append(clipped)
        return cls(np.array(cells, dtype=np.int8).reshape(len(rows), width))

    def shape(self) -> Tuple[int, int]:
        """Return the grid shape as (height, width)."""
        h, w = self.data.shape
        return int(h), int(w)

    def in_bounds(self, pos: Position) -> bool:
        h, w = self.shape()
        return 0 <= pos[0] < h and 0 <= pos[1] < w

    def is_free(self, pos: Position) -> bool:
        """Return ``True`` if ``pos`` is inside the grid and not a wall."""
        return self.in_bounds(pos) and self.data[pos[0], pos[1]] == FREE

    def get(self, row: int, col: int, default: Any | None = None) -> Any:
        """Return the cell value at ``row``, ``col`` or ``default`` if out of bounds."""
        if not self.in_bounds((row, col)):
            return default
        return int(self.data[row, col])

    def neighbors(self, pos: Position) -> Iterator[Position]:
        """Yield the in-bounds 4-connected neighbours of ``pos`` in a fixed order."""
        r, c = pos
        for dr, dc in MOVES:
            nxt = (r + dr, c + dc)
            if self.in_bounds(nxt):
                yield nxt

    def to_list(self) -> List[List[int]]:
        """Return the grid as nested lists of ints."""
        return self.data.astype(int).tolist()

    def visualize(self) -> None:
        """Pretty-print the grid, ``#`` for walls and ``.`` for free cells."""
        for row in self.data:
            print("".join("#" if v else "." for v in row))


__all__ = ["FREE", "WALL", "MOVES", "Position", "OccupancyGrid"]
