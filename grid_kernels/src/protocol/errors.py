"""Error taxonomy for the grid solver worker."""

from __future__ import annotations

from enum import Enum


class SolverError(Exception):
    """Base class for all worker failures."""


class InputReadError(SolverError, OSError):
    """Standard input could not be fully read."""


class ParseError(SolverError, ValueError):
    """Request text is not valid JSON or does not match the request schema."""


class SerializationError(SolverError):
    """Response could not be encoded."""


class ValidationCategory(str, Enum):
    EMPTY_GRID = "empty_grid"
    ZERO_WIDTH = "zero_width"
    RAGGED_GRID = "ragged_grid"
    START_OUT_OF_BOUNDS = "start_out_of_bounds"
    GOAL_OUT_OF_BOUNDS = "goal_out_of_bounds"
    START_IS_WALL = "start_is_wall"
    GOAL_IS_WALL = "goal_is_wall"


class ValidationError(SolverError):
    """Well-formed request that cannot be searched.

    Reported as a normal response without a length, not as a process error.
    """

    def __init__(self, category: ValidationCategory, message: str) -> None:
        super().__init__(message)
        self.category = category
        self.message = message


__all__ = [
    "SolverError",
    "InputReadError",
    "ParseError",
    "SerializationError",
    "ValidationCategory",
    "ValidationError",
]
