# MIT License (see LICENSE)
"""
Fixed-step integration of a ball sliding along a wire.

Each step advances the state in this order:

    position <- position + velocity * dt
    a        <- F(shape, position.x) / m
    velocity <- velocity + a * dt
    time     <- time + dt

The position moves with the previous step's velocity, and the force is then
evaluated at the new position. This Euler-Cromer-like ordering is kept as is
so times match the reference results bit for bit.

The run ends as soon as position.x >= L. A negative horizontal velocity is
treated as a fatal configuration error (BackwardMotionError). Without
SimConfig.max_steps there is no iteration cap.
"""
from __future__ import annotations
from dataclasses import dataclass, field
import logging

import numpy as np

from ..config import DEFAULT_CONFIG, SimConfig
from ..errors import BackwardMotionError, ConfigError, StepLimitError
from ..shapes import Shape
from ..vector import Vec2, f64
from .forces import force

logger = logging.getLogger(__name__)


@dataclass
class BallState:
    """
    Mutable state of one integration run.

    Attributes:
        position: Ball position (x, z) in m.
        velocity: Ball velocity (vx, vz) in m/s.
        time: Elapsed simulated time in s.
        steps: Number of steps taken.
    """
    position: Vec2 = Vec2(0.0, 0.0)
    velocity: Vec2 = Vec2(0.0, 0.0)
    time: float = 0.0
    steps: int = 0


@dataclass
class Trajectory:
    """
    Recorded samples of a run, stored as parallel float64 arrays.

    Attributes:
        t: Sample times in s.
        x, z: Positions in m.
        vx, vz: Velocities in m/s.
    """
    t: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=np.float64))
    x: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=np.float64))
    z: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=np.float64))
    vx: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=np.float64))
    vz: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=np.float64))

    @classmethod
    def from_states(cls, states: list[BallState]) -> Trajectory:
        """Pack a list of state snapshots into arrays."""
        return cls(
            t=f64([s.time for s in states]),
            x=f64([s.position.x for s in states]),
            z=f64([s.position.z for s in states]),
            vx=f64([s.velocity.x for s in states]),
            vz=f64([s.velocity.z for s in states]),
        )

    def __len__(self) -> int:
        return len(self.t)


@dataclass(frozen=True)
class RunResult:
    """
    Outcome of a completed run.

    Attributes:
        shape: The wire that was simulated.
        time: Time to reach B in s.
        steps: Number of integration steps.
        final_state: State at the step the ball reached B.
        trajectory: Recorded samples, or None when recording was off.
    """
    shape: Shape
    time: float
    steps: int
    final_state: BallState
    trajectory: Trajectory | None = None


def initial_state(config: SimConfig) -> BallState:
    """Ball at A with the configured initial velocity."""
    return BallState(position=Vec2(0.0, 0.0), velocity=config.v_initial, time=0.0, steps=0)


def euler_step(state: BallState, shape: Shape, config: SimConfig) -> None:
    """
    Advance `state` by one timestep in place.

    Raises:
        BackwardMotionError: If the updated horizontal velocity is negative.
    """
    dt = config.dt
    state.position = state.position + state.velocity.scale(dt)
    a = force(shape, state.position.x, config) / config.mass
    state.velocity = state.velocity + a.scale(dt)
    if state.velocity.x < 0:
        raise BackwardMotionError(state.time, state.position, state.velocity)
    state.time += dt
    state.steps += 1


def simulate(
    shape: Shape,
    config: SimConfig = DEFAULT_CONFIG,
    record_every: int | None = None,
) -> RunResult:
    """
    Integrate the ball from A until it reaches B.

    Args:
        shape: The wire. Must have been built with the same length and dx
               as config.
        config: Physical constants and integration parameters.
        record_every: If set, keep a snapshot every this many steps. The
                      initial and final states are always included.

    Returns:
        RunResult with the elapsed time and step count.

    Raises:
        BackwardMotionError: The ball started moving back towards A.
        StepLimitError: config.max_steps was reached before B.
        ConfigError: The shape was built for a different length or dx.
    """
    if shape.length != config.length or shape.dx != config.dx:
        raise ConfigError(
            f"shape built for length={shape.length}, dx={shape.dx} but config has "
            f"length={config.length}, dx={config.dx}"
        )
    if record_every is not None and record_every <= 0:
        raise ValueError(f"record_every must be positive, got {record_every}")

    state = initial_state(config)
    length = config.length
    max_steps = config.max_steps
    snapshots: list[BallState] | None = None
    if record_every is not None:
        snapshots = [BallState(state.position, state.velocity, state.time, state.steps)]

    logger.debug("simulating %s (dt=%g, mu=%g)", shape, config.dt, config.mu)

    while state.position.x < length:
        if max_steps is not None and state.steps >= max_steps:
            raise StepLimitError(state.steps, state.time, state.position)
        euler_step(state, shape, config)
        if snapshots is not None and state.steps % record_every == 0:
            snapshots.append(BallState(state.position, state.velocity, state.time, state.steps))

    trajectory = None
    if snapshots is not None:
        if snapshots[-1].steps != state.steps:
            snapshots.append(BallState(state.position, state.velocity, state.time, state.steps))
        trajectory = Trajectory.from_states(snapshots)

    logger.debug("%s reached B after %d steps, t=%.6f s", shape, state.steps, state.time)
    return RunResult(
        shape=shape,
        time=state.time,
        steps=state.steps,
        final_state=state,
        trajectory=trajectory,
    )


def t_final(shape: Shape, config: SimConfig = DEFAULT_CONFIG) -> float:
    """Time in seconds the ball needs to slide from A to B along `shape`."""
    return simulate(shape, config).time
