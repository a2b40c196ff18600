"""Core grid data structures."""

from .grid import FREE, WALL, OccupancyGrid, Position

__all__ = ["FREE", "WALL", "OccupancyGrid", "Position"]
