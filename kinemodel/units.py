"""Length and angle unit helpers.

Lengths are stored as integers in tenths of a millimetre.
"""

import math

ONE_TENTH_MILLIMETER = 1
MILLIMETER = 10


def from_mm(value):
    """Convert millimetres to internal units (tenths of a millimetre)."""
    return value * MILLIMETER


def to_mm(value):
    """Convert internal units to millimetres, truncating integer input."""
    if isinstance(value, int):
        return int(value / MILLIMETER)
    return value / MILLIMETER


def degrees_to_radians(value):
    """Convert an angle in degrees to radians."""
    return value * math.pi / 180.0


def radians_to_degrees(value):
    """Convert an angle in radians to degrees."""
    return value * 180.0 / math.pi