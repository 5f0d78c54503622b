# examples/custom_shape.py
import math

from wire_sim import SimConfig, Shape, Custom, InvalidShapeError, simulate
from wire_sim.core import trajectory_energy

config = SimConfig(mu=0.05, dt=1e-5)

# Parabolic dip of depth 0.1 m: h(0) = h(L) = 0
depth = 0.1
parabola = Custom(lambda x: 4 * depth * x * (x - config.length), name="Parabola(depth = 0.1)")
shape = Shape.of(parabola, config)

result = simulate(shape, config, record_every=1000)
energy = trajectory_energy(result.trajectory, config)
print(f"t_f({shape}) = {result.time:.6f} s")
print(f"energy: start {energy[0]:.6f} J, end {energy[-1]:.6f} J")

# A wire that does not end at B is rejected up front
try:
    Shape.of(Custom(lambda x: math.sin(x), name="sin"), config)
except InvalidShapeError as exc:
    print("rejected:", exc)
