import numpy as np

from grid_kernels.src.core.grid import OccupancyGrid
from grid_kernels.src.protocol import GridRequest, ValidationCategory, ValidationError
from grid_kernels.src.search import UNVISITED, distance_map, shortest_path_length, solve


def test_detour_around_wall_row():
    grid = OccupancyGrid.from_rows([[0, 0, 0], [1, 1, 0], [0, 0, 0]])
    assert shortest_path_length(grid, (0, 0), (2, 0)) == 6


def test_diagonal_only_is_unreachable():
    grid = OccupancyGrid.from_rows([[0, 1], [1, 0]])
    assert shortest_path_length(grid, (0, 0), (1, 1)) is None


def test_start_equals_goal():
    grid = OccupancyGrid.from_rows([[0, 0], [0, 0]])
    assert shortest_path_length(grid, (1, 1), (1, 1)) == 0


def test_open_grid_is_manhattan_distance():
    grid = OccupancyGrid.from_rows([[0] * 5 for _ in range(4)])
    assert shortest_path_length(grid, (0, 0), (3, 4)) == 7
    assert shortest_path_length(grid, (3, 4), (0, 0)) == 7


def test_single_cell_grid():
    grid = OccupancyGrid.from_rows([[0]])
    assert shortest_path_length(grid, (0, 0), (0, 0)) == 0


def test_returns_python_int():
    grid = OccupancyGrid.from_rows([[0, 0]])
    assert type(shortest_path_length(grid, (0, 0), (0, 1))) is int


def test_serpentine_maze():
    rows = [
        [0, 0, 0, 0],
        [1, 1, 1, 0],
        [0, 0, 0, 0],
        [0, 1, 1, 1],
        [0, 0, 0, 0],
    ]
    grid = OccupancyGrid.from_rows(rows)
    assert shortest_path_length(grid, (0, 0), (4, 3)) == 13


def test_distance_map():
    grid = OccupancyGrid.from_rows([[0, 0, 0], [1, 1, 0], [0, 0, 0]])
    dist = distance_map(grid, (0, 0))
    expected = np.array([[0, 1, 2], [-1, -1, 3], [6, 5, 4]])
    assert np.array_equal(dist, expected)


def test_distance_map_from_wall_is_all_unvisited():
    grid = OccupancyGrid.from_rows([[1, 0]])
    assert (distance_map(grid, (0, 0)) == UNVISITED).all()


def test_solve_validates_before_search():
    req = GridRequest(grid=[[1, 0]], start=(0, 0), goal=(0, 1))
    try:
        solve(req)
    except ValidationError as exc:
        assert exc.category is ValidationCategory.START_IS_WALL
    else:
        raise AssertionError("expected ValidationError")


def test_solve_with_clamped_ragged_grid():
    req = GridRequest(grid=[[0, 0, 0], [0], [0, 0, 0]], start=(0, 0), goal=(2, 0))
    assert solve(req, ragged_policy="clamp") == 2
