"""A square reference grid drawn on one of the three axis planes."""

from __future__ import annotations

from enum import IntEnum

from kinemodel.units import ONE_TENTH_MILLIMETER, from_mm

Vertex = tuple[float, float, float]


class GridPlane(IntEnum):
    """The axis plane the grid lies in."""

    XY = 0
    YZ = 1
    XZ = 2


class Grid:
    """Grid lines spaced ``grid_size`` apart out to ``grid_bounds`` in each direction."""

    MINIMUM_GRID_SIZE = ONE_TENTH_MILLIMETER
    MAXIMUM_GRID_SIZE = from_mm(10)

    def __init__(self, grid_size: int = from_mm(1), grid_bounds: int = from_mm(100)):
        self.grid_size = grid_size
        self.grid_bounds = grid_bounds
        self._enabled = True
        self.mode = GridPlane.XY
        self.vertex_buffers: dict[GridPlane, list[Vertex]] = {}
        self.number_of_lines = 0
        self.validate_grid_size()

    @property
    def enabled(self) -> bool:
        return self._enabled

    def set_grid_size(self, grid_size: int) -> None:
        self.grid_size = grid_size
        self.validate_grid_size()
        self.initialize_vertex_buffers()

    def set_mode(self, mode) -> None:
        self.mode = GridPlane(mode)

    def validate_grid_size(self) -> None:
        """Clamp the spacing to the allowed range."""
        self.grid_size = max(self.MINIMUM_GRID_SIZE, min(self.grid_size, self.MAXIMUM_GRID_SIZE))

    def enable(self) -> None:
        self._enabled = True

    def disable(self) -> None:
        self._enabled = False

    def decrease(self) -> None:
        """Make the spacing ten times finer, down to the minimum."""
        self.grid_size = max(self.grid_size // 10, self.MINIMUM_GRID_SIZE)
        self.initialize_vertex_buffers()

    def increase(self) -> None:
        """Make the spacing ten times coarser, up to the maximum."""
        self.grid_size = min(self.grid_size * 10, self.MAXIMUM_GRID_SIZE)
        self.initialize_vertex_buffers()

    def initialize_vertex_buffers(self) -> None:
        """Recompute the line end points for every plane."""
        self.vertex_buffers = {plane: self.line_vertices(plane) for plane in GridPlane}
        self.number_of_lines = 4 * len(range(0, self.grid_bounds, self.grid_size))

    def line_vertices(self, plane) -> list[Vertex]:
        """End points of the grid lines on ``plane``, two per line."""
        plane = GridPlane(plane)
        b = float(self.grid_bounds)
        vertices: list[Vertex] = []
        for step in range(0, self.grid_bounds, self.grid_size):
            i = float(step)
            # (u, v) pairs in the plane's own axes.
            pairs = [
                (i, -b), (i, b), (-i, -b), (-i, b),
                (-b, i), (b, i), (-b, -i), (b, -i),
            ]
            for u, v in pairs:
                if plane is GridPlane.XY:
                    vertices.append((u, v, 0.0))
                elif plane is GridPlane.YZ:
                    vertices.append((0.0, u, v))
                else:
                    vertices.append((u, 0.0, v))
        return vertices