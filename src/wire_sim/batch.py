# MIT License (see LICENSE)
"""Batch and parallel simulation helpers."""
from __future__ import annotations
from dataclasses import dataclass
import logging
from multiprocessing import Pool, cpu_count
from typing import Iterable, Sequence

from .catalog import SweepGroup
from .config import SimConfig
from .core.integrators import simulate
from .errors import WireSimError
from .shapes import Profile, Shape, describe

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShapeRun:
    """
    Outcome of one shape in a batch.

    Exactly one of `time` and `error` is set. Errors are kept as text so the
    record can cross process boundaries.

    Attributes:
        description: Human-readable label of the profile.
        profile: The profile that was simulated.
        time: Time to reach B in s, or None on failure.
        steps: Number of integration steps, or None on failure.
        error: Error message on failure.
        error_type: Name of the exception class on failure.
    """
    description: str
    profile: Profile
    time: float | None = None
    steps: int | None = None
    error: str | None = None
    error_type: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class GroupRuns:
    """Results of one sweep group, in profile order."""
    name: str
    runs: tuple[ShapeRun, ...]


def run_one(profile: Profile, config: SimConfig) -> ShapeRun:
    """
    Build the shape and integrate it. Does not catch errors.

    Raises:
        InvalidShapeError, BackwardMotionError, StepLimitError
    """
    shape = Shape.of(profile, config)
    result = simulate(shape, config)
    return ShapeRun(describe(profile), profile, time=result.time, steps=result.steps)


def _isolated(profile: Profile, config: SimConfig) -> ShapeRun:
    # Turn simulation errors into failed records
    try:
        return run_one(profile, config)
    except WireSimError as exc:
        logger.warning("t_f(%s) failed: %s", describe(profile), exc)
        return ShapeRun(describe(profile), profile, error=str(exc), error_type=type(exc).__name__)


def run_sequential(
    profiles: Iterable[Profile],
    config: SimConfig,
    fail_fast: bool = False,
) -> list[ShapeRun]:
    """
    Simulate each profile in turn.

    Args:
        profiles: Profiles to simulate, in order.
        config: Shared configuration.
        fail_fast: If True, the first error propagates instead of being
                   recorded in the result list.
    """
    if fail_fast:
        return [run_one(p, config) for p in profiles]
    return [_isolated(p, config) for p in profiles]


def _sim_worker(args: tuple[Profile, SimConfig]) -> ShapeRun:
    # Child-process worker for multiprocessing Pool
    profile, config = args
    return _isolated(profile, config)


def run_parallel(
    profiles: Sequence[Profile],
    config: SimConfig,
    processes: int | None = None,
    fail_fast: bool = False,
) -> list[ShapeRun]:
    """
    Simulate profiles in a process pool. Results keep the input order.

    Profiles must be picklable, so Custom profiles wrapping lambdas or
    closures have to go through run_sequential.

    Raises:
        WireSimError: With fail_fast, if any profile failed. All profiles
                      are still simulated before the error is raised.
    """
    args = [(p, config) for p in profiles]
    n_procs = processes or cpu_count()
    logger.info("Running %d simulations on %d processes", len(args), n_procs)

    with Pool(processes=n_procs) as pool:
        runs = pool.map(_sim_worker, args)

    if fail_fast:
        failed = [r for r in runs if not r.ok]
        if failed:
            first = failed[0]
            raise WireSimError(f"t_f({first.description}) failed: {first.error}")
    return runs


def run_groups(
    groups: Sequence[SweepGroup],
    config: SimConfig,
    parallel: bool = False,
    processes: int | None = None,
    fail_fast: bool = False,
) -> list[GroupRuns]:
    """
    Simulate every profile of every group.

    In parallel mode all groups share one pool; results are regrouped
    afterwards in the original order.
    """
    if not parallel:
        return [
            GroupRuns(g.name, tuple(run_sequential(g.profiles, config, fail_fast=fail_fast)))
            for g in groups
        ]

    flat = [p for g in groups for p in g.profiles]
    runs = run_parallel(flat, config, processes=processes, fail_fast=fail_fast)
    out = []
    i = 0
    for g in groups:
        out.append(GroupRuns(g.name, tuple(runs[i:i + len(g.profiles)])))
        i += len(g.profiles)
    return out
