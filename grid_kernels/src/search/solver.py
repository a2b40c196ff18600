"""Validate-then-search entry point used by the worker."""

from __future__ import annotations

from typing import Optional

from ..protocol.messages import GridRequest
from ..protocol.validation import validate_request
from .bfs import shortest_path_length


def solve(request: GridRequest, ragged_policy: str = "reject") -> Optional[int]:
    """Return the shortest path length for ``request`` or ``None`` if unreachable.

    Raises :class:`~grid_kernels.src.protocol.errors.ValidationError` when the
    request cannot be searched at all.
    """
    grid = validate_request(request.grid, request.start, request.goal, ragged_policy)
    return shortest_path_length(grid, request.start, request.goal)


__all__ = ["solve"]
