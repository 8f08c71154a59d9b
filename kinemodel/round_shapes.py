"""Cones and cylinders standing upright on the y axis."""

from __future__ import annotations

import math

from kinemodel.names import AnimationTarget, FunctionName, Selector
from kinemodel.shapes import Shape
from kinemodel.units import degrees_to_radians
from kinemodel.vectors import Vec3

MAX_POINTS_CIRCLE = 50
MAX_LAYERS_CIRCLE = 50

_STEP = degrees_to_radians(360.0 / MAX_POINTS_CIRCLE)


def _cone_indices() -> tuple[int, ...]:
    points = MAX_POINTS_CIRCLE
    indices: list[int] = []
    for i in range(points - 1):
        indices += [0, i + 1, i + 2]
    indices += [0, points, 1]
    for layer in range(MAX_LAYERS_CIRCLE):
        low = layer * points
        high = (layer + 1) * points
        for j in range(points - 1):
            indices += [low + j + 1, low + j + 2, high + j + 2]
            indices += [low + j + 1, high + j + 1, high + j + 2]
        indices += [low + points, low + 1, high + 1]
        indices += [low + points, high + points, high + 1]
    return tuple(indices)


def _cylinder_indices() -> tuple[int, ...]:
    points = MAX_POINTS_CIRCLE
    last = 2 * points
    indices: list[int] = []
    for i in range(points - 1):
        k = 2 * i
        indices += [0, k + 2, k + 4]
        indices += [1, k + 3, k + 5]
        indices += [k + 2, k + 4, k + 3]
        indices += [k + 4, k + 5, k + 3]
    indices += [0, last, 2]
    indices += [1, last + 1, 3]
    indices += [last, 2, last + 1]
    indices += [2, 3, last + 1]
    return tuple(indices)


_CONE_INDICES = _cone_indices()
_CYLINDER_INDICES = _cylinder_indices()


class _RoundShape(Shape):
    """A shape with a height along y and a radius in the xz plane."""

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        height: float = 1.0,
        radius: float = 1.0,
    ):
        super().__init__(x, y, z)
        self.height = height
        self.radius = radius

    def _grow(self, other: Vec3) -> None:
        self.height += other.y
        self.radius += other.x
        self.initialize_vertex_buffers()

    def _apply_round(self, function, argument) -> None:
        function = FunctionName(function)
        if function is FunctionName.HEIGHT:
            self.height = float(argument)
        elif function is FunctionName.RADIUS:
            self.radius = float(argument)
        else:
            Shape.apply(self, function, argument)
            return
        self.initialize_vertex_buffers()

    def _round_target(self, selector) -> AnimationTarget | None:
        selector = Selector(selector)
        if selector is Selector.HEIGHT:
            return AnimationTarget(self, "height", self, selector)
        if selector is Selector.RADIUS:
            return AnimationTarget(self, "radius", self, selector)
        return Shape.animation_target(self, selector)


class Cone(_RoundShape):
    """A cone centred on its position with its apex pointing up."""

    CLASS_NAME = "Cone"

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        height: float = 1.0,
        radius: float = 1.0,
    ):
        super().__init__(x, y, z, height, radius)
        self.indices = list(_CONE_INDICES)
        self.initialize_vertex_buffers()

    def add_size(self, other: Vec3) -> None:
        """Grow the radius by the x amount and the height by the y amount."""
        self._grow(other)

    def set_sequence_identifier(self, sequence_number: int) -> None:
        self.identifier = f"cone{sequence_number}"

    def apply(self, function, argument) -> None:
        """Set the height or radius, or defer to the shape's own functions."""
        self._apply_round(function, argument)

    def animation_target(self, selector) -> AnimationTarget | None:
        """Return the animatable value named by the selector."""
        return self._round_target(selector)

    def initialize_vertex_buffers(self) -> None:
        """Recompute the base centre, the base circle and the stacked layers."""
        bottom = -self.height / 2.0
        ring = [
            (math.cos(i * _STEP), math.sin(i * _STEP))
            for i in range(1, MAX_POINTS_CIRCLE + 1)
        ]
        side_normals = [
            (self.height * c, self.radius, self.height * s) for c, s in ring
        ]
        vertices = [(0.0, bottom, 0.0)]
        normals = [(0.0, -1.0, 0.0)]
        vertices += [(self.radius * c, bottom, self.radius * s) for c, s in ring]
        normals += side_normals
        for layer in range(1, MAX_LAYERS_CIRCLE + 1):
            layer_radius = self.radius * (
                (MAX_LAYERS_CIRCLE - layer) / MAX_LAYERS_CIRCLE
            )
            layer_height = bottom + (layer * self.height) / MAX_LAYERS_CIRCLE
            vertices += [
                (layer_radius * c, layer_height, layer_radius * s) for c, s in ring
            ]
            normals += side_normals
        self.vertices = vertices
        self.normals = [component for normal in normals for component in normal]


class Cylinder(_RoundShape):
    """A cylinder centred on its position with its axis along y."""

    CLASS_NAME = "Cylinder"

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        height: float = 1.0,
        radius: float = 1.0,
    ):
        super().__init__(x, y, z, height, radius)
        self.indices = list(_CYLINDER_INDICES)
        self.initialize_vertex_buffers()

    def add_size(self, other: Vec3) -> None:
        """Grow the radius by the x amount and the height by the y amount."""
        self._grow(other)

    def set_sequence_identifier(self, sequence_number: int) -> None:
        self.identifier = f"cylinder{sequence_number}"

    def apply(self, function, argument) -> None:
        """Set the height or radius, or defer to the shape's own functions."""
        self._apply_round(function, argument)

    def animation_target(self, selector) -> AnimationTarget | None:
        """Return the animatable value named by the selector."""
        return self._round_target(selector)

    def initialize_vertex_buffers(self) -> None:
        """Recompute the two cap centres and pairs of bottom and top rim points."""
        bottom = -self.height / 2.0
        top = self.height / 2.0
        vertices = [(0.0, bottom, 0.0), (0.0, top, 0.0)]
        normals = [(0.0, -1.0, 0.0), (0.0, 1.0, 0.0)]
        for i in range(MAX_POINTS_CIRCLE):
            rcos = self.radius * math.cos(i * _STEP)
            rsin = self.radius * math.sin(i * _STEP)
            vertices.append((rcos, bottom, rsin))
            normals.append((rcos, -self.radius, rsin))
            vertices.append((rcos, top, rsin))
            normals.append((rcos, self.radius, rsin))
        self.vertices = vertices
        self.normals = [component for normal in normals for component in normal]