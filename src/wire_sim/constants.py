# MIT License (see LICENSE)
"""
Reference physical constants and numerical tolerances.

These are the defaults for SimConfig and reproduce the reference experiment:
a 100 g ball launched horizontally at 1 m/s over a 1 m wire.
All values use SI units.
"""
from __future__ import annotations

# Ball mass in kg.
MASS: float = 0.1

# Friction coefficient, dimensionless. Zero means a frictionless wire.
MU: float = 0.0

# Horizontal distance between A=(0, 0) and B=(L, 0) in m.
LENGTH: float = 1.0

# Gravitational acceleration in m/s^2.
G: float = 9.81

# Initial velocity (vx, vz) in m/s.
V_INITIAL: tuple[float, float] = (1.0, 0.0)

# Negligible distance in m. Tolerance for the boundary conditions h(0) and
# h(L), and the step of the central difference used for the curve normal.
DX: float = 1e-6

# Integration timestep in s.
DT: float = 1e-7
