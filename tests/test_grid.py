import pytest

from kinemodel.grid import Grid, GridPlane
from kinemodel.units import from_mm


def test_defaults():
    grid = Grid()
    assert grid.grid_size == from_mm(1)
    assert grid.grid_bounds == from_mm(100)
    assert grid.enabled
    assert grid.mode is GridPlane.XY


def test_limits():
    assert Grid.MINIMUM_GRID_SIZE == 1
    assert Grid.MAXIMUM_GRID_SIZE == from_mm(10)


@pytest.mark.parametrize("size", [-5, 0])
def test_size_clamped_to_minimum(size):
    assert Grid(size, 100).grid_size == Grid.MINIMUM_GRID_SIZE


def test_size_clamped_to_maximum():
    assert Grid(Grid.MAXIMUM_GRID_SIZE * 5, 100).grid_size == Grid.MAXIMUM_GRID_SIZE


def test_set_grid_size_clamps_and_rebuilds():
    grid = Grid(10, 30)
    grid.set_grid_size(10_000)
    assert grid.grid_size == Grid.MAXIMUM_GRID_SIZE
    assert set(grid.vertex_buffers) == set(GridPlane)


def test_increase_stops_at_maximum():
    grid = Grid(from_mm(1), 1000)
    grid.increase()
    assert grid.grid_size == from_mm(10)
    grid.increase()
    assert grid.grid_size == Grid.MAXIMUM_GRID_SIZE


def test_decrease_stops_at_minimum():
    grid = Grid(from_mm(1), 1000)
    grid.decrease()
    assert grid.grid_size == Grid.MINIMUM_GRID_SIZE
    grid.decrease()
    assert grid.grid_size == Grid.MINIMUM_GRID_SIZE


def test_increase_then_decrease_round_trip():
    grid = Grid(from_mm(1), 1000)
    grid.increase()
    grid.decrease()
    assert grid.grid_size == from_mm(1)


def test_enable_disable():
    grid = Grid()
    grid.disable()
    assert not grid.enabled
    grid.enable()
    assert grid.enabled


def test_set_mode():
    grid = Grid()
    grid.set_mode(GridPlane.XZ)
    assert grid.mode is GridPlane.XZ
    grid.set_mode(1)
    assert grid.mode is GridPlane.YZ
    with pytest.raises(ValueError):
        grid.set_mode(7)


def test_line_counts():
    grid = Grid(10, 30)
    grid.initialize_vertex_buffers()
    steps = len(range(0, 30, 10))
    assert grid.number_of_lines == 4 * steps
    for plane in GridPlane:
        assert len(grid.vertex_buffers[plane]) == 2 * grid.number_of_lines


@pytest.mark.parametrize("plane, axis", [(GridPlane.XY, 2), (GridPlane.YZ, 0), (GridPlane.XZ, 1)])
def test_vertices_lie_in_plane(plane, axis):
    vertices = Grid(10, 30).line_vertices(plane)
    assert vertices
    assert all(vertex[axis] == 0.0 for vertex in vertices)
    assert all(max(abs(c) for c in vertex) == 30.0 for vertex in vertices)


def test_first_xy_line():
    vertices = Grid(10, 30).line_vertices(GridPlane.XY)
    assert vertices[0] == (0.0, -30.0, 0.0)
    assert vertices[1] == (0.0, 30.0, 0.0)


def test_first_yz_and_xz_vertices():
    grid = Grid(10, 30)
    assert grid.line_vertices(GridPlane.YZ)[0] == (0.0, 0.0, -30.0)
    assert grid.line_vertices(GridPlane.XZ)[4] == (-30.0, 0.0, 0.0)


def test_no_lines_without_bounds():
    grid = Grid(10, 0)
    grid.initialize_vertex_buffers()
    assert grid.number_of_lines == 0
    assert grid.line_vertices(GridPlane.XY) == []