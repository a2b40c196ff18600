"""Request validation performed before any search."""

from __future__ import annotations

from typing import Sequence

from ..core.grid import OccupancyGrid, Position
from .errors import ValidationCategory, ValidationError

RAGGED_POLICIES = ("reject", "clamp")


def validate_request(
    rows: Sequence[Sequence[int]],
    start: Position,
    goal: Position,
    ragged_policy: str = "reject",
) -> OccupancyGrid:
    """Return the occupancy grid for a searchable request.

    Checks run in a fixed order and the first failure raises
    :class:`ValidationError`. Under the ``clamp`` policy the width is taken
    from the first row.
    """
    if ragged_policy not in RAGGED_POLICIES:
        raise ValueError(f"Unknown ragged policy: {ragged_policy}")

    if not rows:
        raise ValidationError(ValidationCategory.EMPTY_GRID, "Grid is empty")

    h, w = len(rows), len(rows[0])
    if w == 0:
        raise ValidationError(ValidationCategory.ZERO_WIDTH, "Grid has zero width")

    if ragged_policy == "reject":
        for i, row in enumerate(rows):
            if len(row) != w:
                raise ValidationError(
                    ValidationCategory.RAGGED_GRID,
                    f"Row {i} has length {len(row)}, expected {w}",
                )

    if start[0] >= h or start[1] >= w:
        raise ValidationError(
            ValidationCategory.START_OUT_OF_BOUNDS,
            f"Start position ({start[0]}, {start[1]}) is out of bounds ({h}x{w})",
        )
    if goal[0] >= h or goal[1] >= w:
        raise ValidationError(
            ValidationCategory.GOAL_OUT_OF_BOUNDS,
            f"Goal position ({goal[0]}, {goal[1]}) is out of bounds ({h}x{w})",
        )

    grid = OccupancyGrid.from_rows(rows, clamp=ragged_policy == "clamp")
    if not grid.is_free(start):
        raise ValidationError(ValidationCategory.START_IS_WALL, "Start position is a wall")
    if not grid.is_free(goal):
        raise ValidationError(ValidationCategory.GOAL_IS_WALL, "Goal position is a wall")
    return grid


__all__ = ["RAGGED_POLICIES", "validate_request"]
