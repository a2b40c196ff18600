"""Grid search routines."""

from .bfs import UNVISITED, distance_map, shortest_path_length
from .solver import solve

__all__ = ["UNVISITED", "distance_map", "shortest_path_length", "solve"]
