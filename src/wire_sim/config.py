# MIT License (see LICENSE)
"""
Simulation configuration.

SimConfig bundles the physical constants and numerical parameters of one
experiment. It is immutable and passed explicitly to the force model and
the integrator, so several configurations can be compared side by side in
the same process.
"""
from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any

from . import constants
from .errors import ConfigError
from .vector import Vec2


@dataclass(frozen=True)
class SimConfig:
    """
    Physical constants and integration parameters.

    Attributes:
        mass: Ball mass m in kg. Must be > 0.
        mu: Friction coefficient (>= 0).
        length: Distance L between A and B in m. Must be > 0.
        g: Gravitational acceleration in m/s^2.
        v_initial: Initial velocity vI. Tuples are converted to Vec2.
        dx: Negligible distance: boundary tolerance and differentiation step.
        dt: Fixed integration timestep in s.
        max_steps: Optional cap on the number of steps per run. None keeps
                   the uncapped behaviour where a ball that never arrives
                   loops forever.
    """
    mass: float = constants.MASS
    mu: float = constants.MU
    length: float = constants.LENGTH
    g: float = constants.G
    v_initial: Vec2 = field(default_factory=lambda: Vec2(*constants.V_INITIAL))
    dx: float = constants.DX
    dt: float = constants.DT
    max_steps: int | None = None

    def __post_init__(self) -> None:
        """Normalise v_initial to Vec2 and check ranges."""
        if not isinstance(self.v_initial, Vec2):
            object.__setattr__(self, "v_initial", Vec2.from_array(self.v_initial))

        if self.mass <= 0:
            raise ConfigError(f"mass must be positive, got {self.mass}")
        if self.mu < 0:
            raise ConfigError(f"mu must be non-negative, got {self.mu}")
        if self.length <= 0:
            raise ConfigError(f"length must be positive, got {self.length}")
        if self.dx <= 0:
            raise ConfigError(f"dx must be positive, got {self.dx}")
        if self.dt <= 0:
            raise ConfigError(f"dt must be positive, got {self.dt}")
        if self.max_steps is not None and self.max_steps <= 0:
            raise ConfigError(f"max_steps must be positive, got {self.max_steps}")

    def replace(self, **changes: Any) -> SimConfig:
        """Return a copy with the given fields changed (validated again)."""
        return replace(self, **changes)


DEFAULT_CONFIG = SimConfig()
