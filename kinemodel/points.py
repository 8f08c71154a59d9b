"""Points and groups of points lying in a plane."""

from __future__ import annotations

from enum import IntEnum

from kinemodel.names import AnimationTarget, Selector
from kinemodel.vectors import Vec3


class Point:
    """A named position in space."""

    CLASS_NAME = "Point"

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._position = Vec3(x, y, z)
        self.identifier = ""
        self.reference_count = 0

    @property
    def position(self) -> Vec3:
        return self._position

    @position.setter
    def position(self, value: Vec3) -> None:
        # Updated in place so animation targets stay attached.
        self._position.assign(value)

    def add_position(self, other: Vec3) -> None:
        self.position = self._position + other

    def animation_target(self, selector) -> AnimationTarget | None:
        """The value driven by ``selector``, or None if the point has no such value."""
        attribute = {Selector.X: "x", Selector.Y: "y", Selector.Z: "z"}.get(Selector(selector))
        if attribute is None:
            return None
        return AnimationTarget(self._position, attribute, self, selector)

    def __repr__(self):
        return f"{type(self).__name__}({self.identifier!r}, {self._position})"


class PlaneType(IntEnum):
    """The plane in which a group of points lies."""

    XY = 0
    XZ = 1
    YZ = 2


class PlanePoints(Point):
    """A point that also holds an ordered list of points in one plane."""

    CLASS_NAME = "PlanePoints"

    def __init__(self, type=PlaneType.XY, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        super().__init__(x, y, z)
        self.type = type
        self.children: list[Point] = []

    @property
    def type(self) -> PlaneType:
        return self._type

    @type.setter
    def type(self, value) -> None:
        self._type = PlaneType(value)

    def add_child(self, point: Point) -> None:
        if point is None:
            raise TypeError("a child point is required")
        point.reference_count += 1
        self.children.append(point)

    def __len__(self) -> int:
        return len(self.children)