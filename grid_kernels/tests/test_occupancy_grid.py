import numpy as np
import pytest

from grid_kernels.src.core.grid import FREE, WALL, OccupancyGrid


def test_from_rows_shape_and_cells():
    grid = OccupancyGrid.from_rows([[0, 1, 0], [0, 0, 0]])
    assert grid.shape() == (2, 3)
    assert grid.get(0, 1) == WALL
    assert grid.get(1, 1) == FREE
    assert grid.get(5, 5, default="x") == "x"
    assert grid.data.dtype == np.int8


def test_nonzero_values_are_walls():
    grid = OccupancyGrid.from_rows([[0, 7]])
    assert grid.to_list() == [[0, 1]]


def test_ragged_rows_rejected_without_clamp():
    with pytest.raises(ValueError):
        OccupancyGrid.from_rows([[0, 0], [0]])


def test_ragged_rows_clamped_to_first_row():
    grid = OccupancyGrid.from_rows([[0, 0], [0], [0, 0, 0]], clamp=True)
    assert grid.to_list() == [[0, 0], [0, 1], [0, 0]]


def test_empty_rows_rejected():
    with pytest.raises(ValueError):
        OccupancyGrid.from_rows([])


def test_neighbors_in_bounds_and_ordered():
    grid = OccupancyGrid.from_rows([[0, 0], [0, 0]])
    assert list(grid.neighbors((0, 0))) == [(1, 0), (0, 1)]
    assert list(grid.neighbors((1, 1))) == [(0, 1), (1, 0)]


def test_is_free():
    grid = OccupancyGrid.from_rows([[0, 1]])
    assert grid.is_free((0, 0))
    assert not grid.is_free((0, 1))
    assert not grid.is_free((1, 0))
    assert not grid.is_free((-1, 0))


def test_visualize(capsys):
    OccupancyGrid.from_rows([[0, 1], [1, 0]]).visualize()
    assert capsys.readouterr().out == ".#\n#.\n"
