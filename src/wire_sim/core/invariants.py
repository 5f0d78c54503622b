# MIT License (see LICENSE)
"""
Energy bookkeeping for wire runs.

Used as a diagnostic. On a frictionless wire the mechanical energy would be
conserved by the exact dynamics; the force model here drops the centripetal
term and the integrator is first order, so on curved wires the drift in
total energy measures how far the run strays from the ideal motion.
"""
from __future__ import annotations
import numpy as np

from ..config import SimConfig
from .integrators import BallState, Trajectory


def kinetic_energy(state: BallState, config: SimConfig) -> float:
    """
    Kinetic energy of the ball.

    T = 0.5 * m * |v|^2
    """
    v = state.velocity
    return 0.5 * config.mass * v.dot(v)


def potential_energy(state: BallState, config: SimConfig) -> float:
    """
    Gravitational potential energy relative to the line AB.

    V = m * g * z
    """
    return config.mass * config.g * state.position.z


def mechanical_energy(state: BallState, config: SimConfig) -> float:
    """Total mechanical energy T + V in Joules."""
    return kinetic_energy(state, config) + potential_energy(state, config)


def trajectory_energy(trajectory: Trajectory, config: SimConfig) -> np.ndarray:
    """
    Total mechanical energy at every recorded sample.

    Returns:
        Array with one entry per sample, in Joules.
    """
    v2 = trajectory.vx * trajectory.vx + trajectory.vz * trajectory.vz
    return 0.5 * config.mass * v2 + config.mass * config.g * trajectory.z
