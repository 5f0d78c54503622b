"""
Microbenchmark: integration steps per second vs timestep.
Run:
  python benchmarks/bench_steps.py
"""
import time
from wire_sim.config import SimConfig
from wire_sim.core import simulate
from wire_sim.shapes import Shape, Straight, Cosine

def run(profile, dt: float):
    config = SimConfig(dt=dt)
    shape = Shape.of(profile, config)

    t0 = time.perf_counter()
    result = simulate(shape, config)
    t1 = time.perf_counter()

    wall = t1 - t0
    return result, wall

if __name__ == "__main__":
    for profile in [Straight(), Cosine(1, 0.05)]:
        for dt in [1e-3, 1e-4, 1e-5]:
            result, wall = run(profile, dt)
            print(f"{str(Shape.of(profile, SimConfig())):45s} dt={dt:.0e}  t_f={result.time:.6f} s  "
                  f"steps={result.steps:8d}  wall={wall:7.3f} s  steps/s={result.steps / wall:10.1f}")
        print()
