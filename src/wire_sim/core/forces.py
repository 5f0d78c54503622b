# MIT License (see LICENSE)
"""
Force model for a ball constrained to a wire.

The net force at horizontal position x is the sum of three parts:

    F_gravity  = (0, -m g)
    F_normal   = -n (F_gravity . n)          n = unit normal of the wire at x
    F_friction = t mu |F_normal|             t = n rotated left by 90 degrees

F_normal is a constraint force: it cancels the component of gravity along
the normal, leaving only the tangential pull. It is not derived from the
ball's velocity, so the curvature (centripetal) term is not included.

Friction keeps a fixed sense along the wire given by the rotation of the
normal. It does not look at the velocity, so unlike Coulomb friction it
does not oppose motion in general. For a wire from A to B it always points
back towards A.
"""
from __future__ import annotations
from dataclasses import dataclass

from ..config import SimConfig
from ..shapes import Shape
from ..vector import Vec2


@dataclass(frozen=True)
class ForceBreakdown:
    """
    The individual contributions to the net force at one point.

    Attributes:
        gravity: Weight of the ball, (0, -m g).
        normal: Constraint reaction along the wire normal.
        friction: Kinetic friction along the wire tangent.
        total: gravity + normal + friction.
    """
    gravity: Vec2
    normal: Vec2
    friction: Vec2
    total: Vec2


def force_components(shape: Shape, x: float, config: SimConfig) -> ForceBreakdown:
    """
    Compute gravity, normal reaction and friction at position x.

    Args:
        shape: The wire.
        x: Horizontal position of the ball in m.
        config: Supplies m, g and mu.
    """
    f_gravity = Vec2(0.0, -config.mass * config.g)
    n = shape.normal(x)
    f_normal = (-n).scale(f_gravity.dot(n))
    f_friction = n.rotate_left90().scale(config.mu).scale(f_normal.norm())
    return ForceBreakdown(
        gravity=f_gravity,
        normal=f_normal,
        friction=f_friction,
        total=f_gravity + f_normal + f_friction,
    )


def force(shape: Shape, x: float, config: SimConfig) -> Vec2:
    """Net force on the ball at horizontal position x."""
    return force_components(shape, x, config).total
