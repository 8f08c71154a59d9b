"""Articulated 3D shapes, transformations, keyframe animation and code export."""

__version__ = "0.1.0"

__all__ = [
    "animation",
    "frames",
    "grid",
    "names",
    "points",
    "printing",
    "round_shapes",
    "shapes",
    "stream",
    "transformations",
    "units",
    "vectors",
]