"""Translations, rotations and scalings that can be attached to shapes."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import IntEnum

from kinemodel.names import AnimationTarget, Selector
from kinemodel.units import degrees_to_radians
from kinemodel.vectors import Vec3

Matrix = tuple[tuple[float, float, float, float], ...]

_IDENTITY: Matrix = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


class TransformationKind(IntEnum):
    """The kind of a transformation."""

    NONE = 0
    TRANSLATE = 1
    ROTATE = 2
    SCALE = 3


class Transformation(ABC):
    """A named transformation driven by three components.

    ``matrix`` is a row-major 4x4 matrix kept in step with the components
    by ``update_matrix``.
    """

    CLASS_NAME = "Transformation"

    def __init__(self, kind: TransformationKind, x: float, y: float, z: float):
        self.kind = TransformationKind(kind)
        self.reference_count = 0
        self.identifier = ""
        self._components = Vec3(x, y, z)
        self.matrix: Matrix = _IDENTITY

    @property
    def components(self) -> Vec3:
        return self._components

    @components.setter
    def components(self, value: Vec3) -> None:
        # Updated in place so animation targets stay attached.
        self._components.assign(value)
        self.update_matrix()

    def add_position(self, other: Vec3) -> None:
        self.components = self._components + other

    def update_matrix(self) -> None:
        """Recompute the matrix from the current values."""
        self.matrix = self._compute_matrix()

    @abstractmethod
    def _compute_matrix(self) -> Matrix:
        """The matrix for the current values."""

    def animation_target(self, selector) -> AnimationTarget | None:
        """The value driven by ``selector``, or None if there is no such value."""
        attribute = {Selector.X: "x", Selector.Y: "y", Selector.Z: "z"}.get(Selector(selector))
        if attribute is None:
            return None
        return AnimationTarget(self._components, attribute, self, selector)

    def __repr__(self):
        return f"{type(self).__name__}({self.identifier!r}, {self._components})"


class Translate(Transformation):
    """A translation by the components."""

    CLASS_NAME = "Translate"

    def __init__(self, x: float, y: float, z: float):
        super().__init__(TransformationKind.TRANSLATE, x, y, z)
        self.update_matrix()

    def _compute_matrix(self) -> Matrix:
        x, y, z = self.components
        return (
            (1.0, 0.0, 0.0, x),
            (0.0, 1.0, 0.0, y),
            (0.0, 0.0, 1.0, z),
            (0.0, 0.0, 0.0, 1.0),
        )


class Rotate(Transformation):
    """A rotation by ``angle`` degrees about the axis given by the components."""

    CLASS_NAME = "Rotate"

    def __init__(self, angle: float, x: float, y: float, z: float):
        super().__init__(TransformationKind.ROTATE, x, y, z)
        self.angle = angle
        self.update_matrix()

    def add_angle(self, angle: float) -> None:
        self.angle += angle
        self.update_matrix()

    def _compute_matrix(self) -> Matrix:
        length = self.components.length()
        if length == 0.0:
            return _IDENTITY
        x, y, z = self.components.scaled(1.0 / length)
        radians = degrees_to_radians(self.angle)
        c = math.cos(radians)
        s = math.sin(radians)
        t = 1.0 - c
        return (
            (t * x * x + c, t * x * y - s * z, t * x * z + s * y, 0.0),
            (t * x * y + s * z, t * y * y + c, t * y * z - s * x, 0.0),
            (t * x * z - s * y, t * y * z + s * x, t * z * z + c, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )

    def animation_target(self, selector) -> AnimationTarget | None:
        if Selector(selector) is Selector.ANGLE:
            return AnimationTarget(self, "angle", self, selector)
        return super().animation_target(selector)


class Scale(Transformation):
    """A scaling along each axis by the components."""

    CLASS_NAME = "Scale"

    def __init__(self, x: float, y: float, z: float):
        super().__init__(TransformationKind.SCALE, x, y, z)
        self.update_matrix()

    def _compute_matrix(self) -> Matrix:
        x, y, z = self.components
        return (
            (x, 0.0, 0.0, 0.0),
            (0.0, y, 0.0, 0.0),
            (0.0, 0.0, z, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )