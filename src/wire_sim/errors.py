# MIT License (see LICENSE)
"""
Exception types raised by the wire simulation.

All errors derive from WireSimError so drivers can isolate failures per
shape with a single except clause. Each concrete error also derives from the
matching builtin (ValueError for bad inputs, RuntimeError for failures that
only show up while integrating).
"""
from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .vector import Vec2


class WireSimError(Exception):
    """Base class for all wire simulation errors."""


class ConfigError(WireSimError, ValueError):
    """A SimConfig field is outside its physical or numerical range."""


class InvalidShapeError(WireSimError, ValueError):
    """The height function does not start at A or does not end at B."""


class BackwardMotionError(WireSimError, RuntimeError):
    """
    The ball's horizontal velocity became negative during integration.

    The simulator assumes strictly forward motion along x; a reversal means
    the shape and parameters push the ball back towards A.

    Attributes:
        time: Simulated time at which the reversal was detected, in s.
        position: Ball position at that step.
        velocity: Ball velocity at that step (velocity.x < 0).
    """

    def __init__(self, time: float, position: "Vec2", velocity: "Vec2"):
        super().__init__(
            f"v.x < 0 at t={time:.6f} s, x={position.x:.6f} m (v.x={velocity.x:.6g} m/s)"
        )
        self.time = time
        self.position = position
        self.velocity = velocity


class StepLimitError(WireSimError, RuntimeError):
    """
    The ball did not reach B within SimConfig.max_steps steps.

    Attributes:
        steps: Number of steps taken.
        time: Simulated time reached, in s.
        position: Ball position when the limit was hit.
    """

    def __init__(self, steps: int, time: float, position: "Vec2"):
        super().__init__(
            f"step limit of {steps} reached at t={time:.6f} s, x={position.x:.6f} m"
        )
        self.steps = steps
        self.time = time
        self.position = position
