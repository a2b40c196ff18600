from __future__ import annotations

"""Render a grid solver request and its BFS distance map.

Usage::

    python -m tools.grid_visualizer request.json --output maze.png

The request file uses the same JSON shape the ``solve_grid`` worker reads
from stdin.
"""

import argparse
from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np

from grid_kernels.src.core.grid import OccupancyGrid, Position
from grid_kernels.src.protocol import GridRequest, parse_request, validate_request
from grid_kernels.src.search.bfs import UNVISITED, distance_map
from grid_kernels.src.utils import config_loader


# ---------------------------------------------------------------------------
# Data loading helpers
# ---------------------------------------------------------------------------

def load_request(path: str | Path) -> GridRequest:
    """Read and parse a request JSON file."""
    return parse_request(Path(path).read_text(encoding="utf-8"))


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _mark_endpoints(ax, start: Position, goal: Position) -> None:
    ax.scatter([start[1]], [start[0]], c="tab:green", marker="o", s=80, label="start")
    ax.scatter([goal[1]], [goal[0]], c="tab:red", marker="*", s=120, label="goal")


def _show_walls(ax, grid: OccupancyGrid, title: str) -> None:
    ax.imshow(grid.data, cmap="Greys", interpolation="none", vmin=0, vmax=1)
    ax.set_title(title)
    ax.axis("off")


def _show_distances(ax, dist: np.ndarray, title: str) -> None:
    masked = np.ma.masked_equal(dist, UNVISITED)
    ax.imshow(masked, cmap="viridis", interpolation="none")
    ax.set_title(title)
    ax.axis("off")


def render_request(
    request: GridRequest,
    out_file: str | None = None,
    show: bool = True,
):
    """Draw the walls and BFS distances for ``request`` and return the figure."""
    grid = validate_request(
        request.grid, request.start, request.goal, config_loader.RAGGED_POLICY
    )
    dist = distance_map(grid, request.start)
    reached = int(dist[request.goal])
    length: Optional[int] = reached if reached != UNVISITED else None

    fig, axes = plt.subplots(1, 2, figsize=(8, 4))
    _show_walls(axes[0], grid, "grid")
    _mark_endpoints(axes[0], request.start, request.goal)
    _show_distances(axes[1], dist, f"distance (length={length})")
    _mark_endpoints(axes[1], request.start, request.goal)

    fig.tight_layout()
    if out_file:
        out = Path(out_file)
        out.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(out)
        print(f"saved grid to {out}")
    if show:
        plt.show()
    return fig


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def main() -> None:
    parser = argparse.ArgumentParser(description="Render a grid solver request")
    parser.add_argument("request", help="request JSON file")
    parser.add_argument("--output", help="save PDF/PNG instead of showing interactively")
    args = parser.parse_args()

    render_request(load_request(args.request), out_file=args.output, show=not args.output)


if __name__ == "__main__":
    main()
