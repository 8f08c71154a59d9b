"""Three-component vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Vec3:
    """A mutable three-dimensional vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def copy(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)

    def assign(self, other: Vec3) -> None:
        """Copy the components of ``other`` into this vector in place."""
        self.x, self.y, self.z = other.x, other.y, other.z

    def scaled(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vec3:
        """Return a unit vector in the same direction."""
        length = self.length()
        if length == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return self.scaled(1.0 / length)