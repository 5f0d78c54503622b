# MIT License (see LICENSE)
"""
Standard shape sweeps.

The default experiment compares the straight line against several cosine
families: varying the number of periods at a deep and a shallow amplitude,
varying the amplitude of a single period, and very high period counts.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable

from .shapes import Cosine, Profile, Straight


@dataclass(frozen=True)
class SweepGroup:
    """
    A named, ordered list of profiles reported as one block.

    Attributes:
        name: Identifier used on the command line and in result files.
        profiles: Profiles in report order.
    """
    name: str
    profiles: tuple[Profile, ...]


def cosine_periods(periods: Iterable[int], a: float) -> tuple[Cosine, ...]:
    """Cosine profiles of fixed amplitude `a` for each period count."""
    return tuple(Cosine(n, a) for n in periods)


def cosine_amplitudes(n: int, amplitudes: Iterable[float]) -> tuple[Cosine, ...]:
    """Cosine profiles with `n` periods for each amplitude."""
    return tuple(Cosine(n, a) for a in amplitudes)


def default_sweeps() -> list[SweepGroup]:
    """The reference experiment, in report order."""
    return [
        SweepGroup("straight", (Straight(),)),
        SweepGroup("cosine_a0.050", cosine_periods(range(1, 10), 0.050)),
        SweepGroup("cosine_a0.005", cosine_periods(range(1, 10), 0.005)),
        SweepGroup("cosine_amplitude", cosine_amplitudes(1, [0.025 * k for k in range(2, 21)])),
        SweepGroup("cosine_high_freq", cosine_periods([1000 * n for n in range(1, 10)], 0.0025)),
    ]


def select_groups(groups: list[SweepGroup], names: Iterable[str]) -> list[SweepGroup]:
    """
    Keep only the groups named in `names`, in their original order.

    Raises:
        KeyError: If a name does not match any group.
    """
    wanted = list(names)
    known = {g.name for g in groups}
    unknown = [n for n in wanted if n not in known]
    if unknown:
        raise KeyError(f"Unknown sweep group(s): {', '.join(unknown)}")
    return [g for g in groups if g.name in wanted]
