# MIT License (see LICENSE)
"""
Wire shapes: the curve the ball slides along.

A wire is described by a height function h(x) over [0, L]. The profile
variants below are plain frozen dataclasses dispatched with isinstance:

- Straight: h(x) = 0
- Cosine:   h(x) = a * (cos(2*pi*n*x / L) - 1), n full periods of depth 2a
- Custom:   any callable x -> h(x)

Shape binds a profile to the endpoint distance L and the tolerance dx and
checks the boundary conditions |h(0)| <= dx and |h(L)| <= dx when it is
created, so every Shape in circulation starts at A and ends at B.
"""
from __future__ import annotations
from dataclasses import dataclass, field
import math
from typing import TYPE_CHECKING, Callable

import numpy as np

from .errors import InvalidShapeError
from .vector import Vec2, f64

if TYPE_CHECKING:
    from .config import SimConfig


# =============================================================================
# Profile Definitions
# =============================================================================

@dataclass(frozen=True)
class Straight:
    """The straight line from A to B."""


@dataclass(frozen=True)
class Cosine:
    """
    Cosine-perturbed wire.

    cos(0) = 1, so the profile starts at A for any n and a, and ends at B
    whenever n is an integer.

    Attributes:
        n: Number of full periods between A and B.
        a: Amplitude in m. The curve dips to a depth of 2a.
    """
    n: int
    a: float


@dataclass(frozen=True)
class Custom:
    """
    Arbitrary height function.

    Attributes:
        fn: Callable mapping x (m) to the height h(x) (m).
        name: Label used in reports.
    """
    fn: Callable[[float], float]
    name: str = "Custom"


# Union type for profile dispatch
Profile = Straight | Cosine | Custom


def height(profile: Profile, x: float, length: float) -> float:
    """Evaluate the profile's height h(x) for endpoint distance `length`."""
    if isinstance(profile, Straight):
        return 0.0
    if isinstance(profile, Cosine):
        return profile.a * (math.cos(2.0 * math.pi * profile.n * x / length) - 1.0)
    if isinstance(profile, Custom):
        return float(profile.fn(x))
    raise TypeError(f"Unknown profile type: {type(profile)}")


def describe(profile: Profile) -> str:
    """Human-readable label of a profile."""
    if isinstance(profile, Straight):
        return "Straight"
    if isinstance(profile, Cosine):
        return f"Cosine(#periods = {profile.n:4d}, amplitude = {profile.a:.4f})"
    if isinstance(profile, Custom):
        return profile.name
    raise TypeError(f"Unknown profile type: {type(profile)}")


def _boundary_error(h: Callable[[float], float], length: float, dx: float) -> InvalidShapeError | None:
    if abs(h(0.0)) > dx:
        return InvalidShapeError("h doesn't start at A")
    if abs(h(length)) > dx:
        return InvalidShapeError("h doesn't end at B")
    return None


def check_shape(profile: Profile, config: "SimConfig") -> InvalidShapeError | None:
    """
    Validate a profile without raising.

    Returns:
        The InvalidShapeError that Shape construction would raise, or None
        if the profile satisfies both boundary conditions.
    """
    def h(x: float) -> float:
        return height(profile, x, config.length)

    return _boundary_error(h, config.length, config.dx)


# =============================================================================
# Shape
# =============================================================================

@dataclass(frozen=True)
class Shape:
    """
    A validated wire between A=(0, 0) and B=(length, 0).

    Attributes:
        profile: The height profile variant.
        length: Endpoint distance L in m.
        dx: Boundary tolerance and central-difference step in m.

    Raises:
        InvalidShapeError: On construction if |h(0)| > dx or |h(L)| > dx.
    """
    profile: Profile
    length: float
    dx: float
    h: Callable[[float], float] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Bind the height function and check the boundary conditions."""
        profile, length = self.profile, self.length
        object.__setattr__(self, "h", lambda x: height(profile, x, length))

        err = _boundary_error(self.h, self.length, self.dx)
        if err is not None:
            raise err

    @classmethod
    def of(cls, profile: Profile, config: "SimConfig") -> Shape:
        """Build a shape using the endpoint distance and tolerance of `config`."""
        return cls(profile, config.length, config.dx)

    def __call__(self, x: float) -> float:
        return self.h(x)

    def __str__(self) -> str:
        return describe(self.profile)

    def evaluate(self, x: float) -> float:
        """Height of the wire at horizontal position x."""
        return self.h(x)

    def normal(self, x: float) -> Vec2:
        """
        Unit normal to the wire at x.

        The secant (dx, h(x + dx/2) - h(x - dx/2)) is normalized and rotated
        left by 90 degrees, so the normal points upwards for a wire running
        from A to B. x is not checked against [0, L]; near the ends the
        secant samples h just outside the validated domain.
        """
        dx = self.dx
        secant = Vec2(dx, self.h(x + 0.5 * dx) - self.h(x - 0.5 * dx))
        return secant.normalize().rotate_left90()

    def tangent(self, x: float) -> Vec2:
        """
        The normal rotated left once more.

        For an upward normal this points back towards A; it is the direction
        the friction force is applied in.
        """
        return self.normal(x).rotate_left90()

    def sample(self, num: int = 201) -> np.ndarray:
        """
        Sample the wire at `num` evenly spaced points over [0, L].

        Returns:
            Array of shape (num, 2) with columns (x, h(x)).
        """
        xs = np.linspace(0.0, self.length, num)
        zs = f64([self.h(float(x)) for x in xs])
        return np.column_stack((xs, zs))
