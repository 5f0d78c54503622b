# MIT License (see LICENSE)
"""
wire_sim - time a ball sliding along a wire from A to B.

A point mass slides under gravity and friction along a fixed 2D curve from
A=(0, 0) to B=(L, 0). The time to reach B is found by fixed-step explicit
integration, which lets different curve shapes be compared numerically.

Main entry points:
    - SimConfig: Physical constants and integration parameters.
    - Shape: A validated wire built from a profile (Straight, Cosine, Custom).
    - force: Net force on the ball at a horizontal position.
    - t_final / simulate: Integrate from A to B.

Submodules:
    - core: Force model, integrator and energy diagnostics.
    - catalog: Standard shape sweeps.
    - batch: Sequential and process-parallel batch runs.
    - io: JSON experiment files and result export.
    - report: Text reporters.

Example:
    from wire_sim import SimConfig, Shape, Cosine, t_final

    config = SimConfig(dt=1e-5)
    shape = Shape.of(Cosine(n=1, a=0.05), config)
    print(t_final(shape, config))
"""
from .config import SimConfig, DEFAULT_CONFIG
from .core import force, force_components, simulate, t_final
from .errors import (
    WireSimError,
    ConfigError,
    InvalidShapeError,
    BackwardMotionError,
    StepLimitError,
)
from .shapes import Shape, Straight, Cosine, Custom, check_shape
from .vector import Vec2

__all__ = [
    # Configuration
    "SimConfig",
    "DEFAULT_CONFIG",
    # Geometry
    "Vec2",
    "Shape",
    "Straight",
    "Cosine",
    "Custom",
    "check_shape",
    # Simulation
    "force",
    "force_components",
    "simulate",
    "t_final",
    # Errors
    "WireSimError",
    "ConfigError",
    "InvalidShapeError",
    "BackwardMotionError",
    "StepLimitError",
]
