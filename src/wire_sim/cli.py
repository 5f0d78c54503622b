# MIT License (see LICENSE)
"""Command-line driver: run shape sweeps and print time-to-B for each shape."""
from __future__ import annotations
import argparse
import logging
import sys
import time
from typing import Sequence

from .batch import GroupRuns, run_groups, run_sequential
from .catalog import SweepGroup, default_sweeps, select_groups
from .config import SimConfig
from .errors import WireSimError
from .io import load_experiment, save_results
from .report import Reporter, TextReporter

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="wire-sim",
        description="Time a ball sliding from A to B along different wire shapes",
    )
    p.add_argument(
        "--config",
        default="",
        help="Optional experiment file (.json). Without it the default sweeps are run.",
    )
    p.add_argument("--mass", type=float, default=None, help="ball mass in kg")
    p.add_argument("--mu", type=float, default=None, help="friction coefficient")
    p.add_argument("--length", type=float, default=None, help="distance between A and B in m")
    p.add_argument("--g", type=float, default=None, help="gravitational acceleration in m/s^2")
    p.add_argument("--vx", type=float, default=None, help="initial horizontal velocity in m/s")
    p.add_argument("--vz", type=float, default=None, help="initial vertical velocity in m/s")
    p.add_argument("--dx", type=float, default=None, help="negligible distance in m")
    p.add_argument("--dt", type=float, default=None, help="timestep in s")
    p.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="abort a shape after this many steps (default: no limit)",
    )
    p.add_argument(
        "--group",
        action="extend",
        nargs="+",
        default=[],
        help="only run the named sweep groups, e.g. --group straight cosine_a0.050",
    )
    p.add_argument("--parallel", action="store_true", help="run shapes in a process pool")
    p.add_argument(
        "--processes",
        type=int,
        default=None,
        help="number of worker processes with --parallel (default: CPU count)",
    )
    p.add_argument(
        "--fail-fast",
        action="store_true",
        help="stop at the first shape that fails instead of reporting it and continuing",
    )
    p.add_argument("--output", default="", help="also write results to this JSON file")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def apply_overrides(config: SimConfig, args: argparse.Namespace) -> SimConfig:
    """Apply the command-line overrides that were given on top of `config`."""
    changes = {}
    for name in ("mass", "mu", "length", "g", "dx", "dt", "max_steps"):
        value = getattr(args, name)
        if value is not None:
            changes[name] = value
    if args.vx is not None or args.vz is not None:
        vx = config.v_initial.x if args.vx is None else args.vx
        vz = config.v_initial.z if args.vz is None else args.vz
        changes["v_initial"] = (vx, vz)
    if not changes:
        return config
    return config.replace(**changes)


def report_sequential(
    reporter: Reporter,
    groups: Sequence[SweepGroup],
    config: SimConfig,
    fail_fast: bool = False,
) -> list[GroupRuns]:
    """
    Run groups one after another, reporting each group as soon as it is done.

    With fail_fast the first error propagates after the groups that already
    finished have been reported.
    """
    reporter.begin(config)
    results = []
    for g in groups:
        runs = GroupRuns(g.name, tuple(run_sequential(g.profiles, config, fail_fast=fail_fast)))
        reporter.group(runs)
        results.append(runs)
    reporter.end()
    return results


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.config:
            experiment = load_experiment(args.config)
            config, groups = experiment.config, experiment.groups
        else:
            config, groups = SimConfig(), default_sweeps()
        config = apply_overrides(config, args)
        if args.group:
            groups = select_groups(groups, args.group)
    except (OSError, ValueError, KeyError) as exc:
        # ConfigError is a ValueError
        logger.error("%s", exc)
        return 2

    reporter = TextReporter(sys.stdout)
    t0 = time.perf_counter()
    try:
        if args.parallel:
            results = run_groups(
                groups,
                config,
                parallel=True,
                processes=args.processes,
                fail_fast=args.fail_fast,
            )
            reporter.report_all(config, results)
        else:
            results = report_sequential(reporter, groups, config, fail_fast=args.fail_fast)
    except WireSimError as exc:
        logger.error("%s", exc)
        return 1
    logger.debug("batch finished in %.2f s wall time", time.perf_counter() - t0)

    if args.output:
        save_results(results, config, args.output)
        logger.info("results written to %s", args.output)

    failed = sum(1 for g in results for r in g.runs if not r.ok)
    if failed:
        logger.warning("%d shape(s) failed", failed)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
