# examples/cosine_sweep.py
from wire_sim import SimConfig
from wire_sim.batch import run_groups
from wire_sim.catalog import SweepGroup, cosine_periods
from wire_sim.report import TextReporter

if __name__ == "__main__":
    config = SimConfig(dt=1e-5)
    groups = [
        SweepGroup("deep", cosine_periods(range(1, 5), 0.05)),
        SweepGroup("shallow", cosine_periods(range(1, 5), 0.005)),
    ]

    # Every shape is independent, so they can run in separate processes
    results = run_groups(groups, config, parallel=True)
    TextReporter().report_all(config, results)
