# MIT License (see LICENSE)
"""
Physics core of the wire simulation.

This subpackage provides:
    - Force model: gravity, normal reaction and friction along the wire.
    - Integrator: fixed-step Euler loop from A to B.
    - Invariants: energy diagnostics for recorded runs.

Typical usage:
    from wire_sim.core import t_final

    t = t_final(shape, config)
"""
from .forces import ForceBreakdown, force, force_components
from .integrators import (
    BallState,
    RunResult,
    Trajectory,
    euler_step,
    initial_state,
    simulate,
    t_final,
)
from .invariants import (
    kinetic_energy,
    potential_energy,
    mechanical_energy,
    trajectory_energy,
)

__all__ = [
    # Forces
    "ForceBreakdown",
    "force",
    "force_components",
    # Integration
    "BallState",
    "RunResult",
    "Trajectory",
    "euler_step",
    "initial_state",
    "simulate",
    "t_final",
    # Invariants
    "kinetic_energy",
    "potential_energy",
    "mechanical_energy",
    "trajectory_energy",
]
