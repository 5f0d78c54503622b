# examples/straight_line.py
from wire_sim import SimConfig, Shape, Straight, simulate

config = SimConfig(mu=0.0, dt=1e-5)
shape = Shape.of(Straight(), config)

result = simulate(shape, config)

print(f"t_f({shape}) = {result.time:.6f} s")
print("steps:", result.steps)
print("final velocity:", result.final_state.velocity)
