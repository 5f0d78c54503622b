# MIT License (see LICENSE)
"""
2D vector value type used by the wire simulation.

The second axis is called ``z`` because the curve lives in a vertical plane:
``x`` runs horizontally from A to B and ``z`` is the height.

Vec2 is immutable and compared by value. Scalar multiplication and the dot
product are two separately named operations (``scale`` and ``dot``); ``*``
is deliberately left undefined between vectors.
"""
from __future__ import annotations
from dataclasses import dataclass
import math

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Used for trajectory buffers and profile samples so that tuple/list
    inputs and Vec2 conversions share one precision.
    """
    return np.array(x, dtype=np.float64)


@dataclass(frozen=True)
class Vec2:
    """
    Immutable 2D vector.

    Attributes:
        x: Horizontal component.
        z: Vertical component.
    """
    x: float
    z: float

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.z + other.z)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.z - other.z)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.z)

    def __truediv__(self, s: float) -> Vec2:
        return Vec2(self.x / s, self.z / s)

    def __str__(self) -> str:
        return f"Vec(x={self.x}, z={self.z})"

    def scale(self, s: float) -> Vec2:
        """Scalar multiplication."""
        return Vec2(self.x * s, self.z * s)

    def dot(self, other: Vec2) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.z * other.z

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.z * self.z)

    def normalize(self) -> Vec2:
        """
        Unit vector in the same direction.

        A zero vector is not guarded against; dividing by its zero norm
        raises ZeroDivisionError.
        """
        return self / self.norm()

    def rotate_left90(self) -> Vec2:
        """Rotate counterclockwise by 90 degrees: (x, z) -> (-z, x)."""
        return Vec2(-self.z, self.x)

    def as_array(self) -> np.ndarray:
        """Return the vector as a float64 array [x, z]."""
        return f64((self.x, self.z))

    @classmethod
    def from_array(cls, v) -> Vec2:
        """Build a Vec2 from any length-2 array-like."""
        if len(v) != 2:
            raise ValueError(f"Expected 2 components, got {len(v)}")
        return cls(float(v[0]), float(v[1]))


ZERO = Vec2(0.0, 0.0)
