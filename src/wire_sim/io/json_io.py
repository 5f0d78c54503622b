# MIT License (see LICENSE)
"""
JSON serialization for experiments and results.

An experiment file holds one configuration and an ordered list of sweep
groups. It is meant to be written by hand, so every field has a default.

JSON Schema Overview:
---------------------
{
  "config": {                      # Optional, defaults match SimConfig
    "mass": float,                 # kg
    "mu": float,                   # friction coefficient
    "length": float,               # m, distance A -> B
    "g": float,                    # m/s^2
    "v_initial": [vx, vz],         # m/s
    "dx": float,                   # m, boundary tolerance / diff step
    "dt": float,                   # s, timestep
    "max_steps": int | null        # optional step cap
  },
  "groups": [
    {
      "name": string,
      "shapes": [
        {"type": "straight"},
        {"type": "cosine", "n": int, "a": float}
      ]
    }
  ]
}

Results are exported as:
{
  "config": {...},
  "groups": [
    {"name": string, "runs": [
      {"shape": {...}, "description": string,
       "time": float | null, "steps": int | null,
       "error": string, "error_type": string}   # error fields only on failure
    ]}
  ]
}
"""
from __future__ import annotations
from dataclasses import dataclass
import json
from typing import TYPE_CHECKING, Any

from ..catalog import SweepGroup
from ..config import SimConfig
from ..shapes import Cosine, Custom, Profile, Straight
from ..vector import Vec2

if TYPE_CHECKING:
    from ..batch import GroupRuns


@dataclass(frozen=True)
class Experiment:
    """A configuration plus the sweep groups to run with it."""
    config: SimConfig
    groups: list[SweepGroup]


# =============================================================================
# Config
# =============================================================================

def config_from_json(d: dict[str, Any]) -> SimConfig:
    """Build a SimConfig, falling back to the defaults for missing fields."""
    defaults = SimConfig()
    max_steps = d.get("max_steps")
    return SimConfig(
        mass=float(d.get("mass", defaults.mass)),
        mu=float(d.get("mu", defaults.mu)),
        length=float(d.get("length", defaults.length)),
        g=float(d.get("g", defaults.g)),
        v_initial=Vec2.from_array(d.get("v_initial", [defaults.v_initial.x, defaults.v_initial.z])),
        dx=float(d.get("dx", defaults.dx)),
        dt=float(d.get("dt", defaults.dt)),
        max_steps=None if max_steps is None else int(max_steps),
    )


def config_to_json(config: SimConfig) -> dict[str, Any]:
    """Serialize every SimConfig field."""
    return {
        "mass": config.mass,
        "mu": config.mu,
        "length": config.length,
        "g": config.g,
        "v_initial": [config.v_initial.x, config.v_initial.z],
        "dx": config.dx,
        "dt": config.dt,
        "max_steps": config.max_steps,
    }


# =============================================================================
# Profiles
# =============================================================================

def profile_from_json(d: dict[str, Any]) -> Profile:
    """
    Parse a single profile definition.

    Raises:
        ValueError: If the type is missing or unknown, or a cosine period
                    count is not a whole number.
    """
    shape_type = d.get("type")
    if shape_type == "straight":
        return Straight()
    if shape_type == "cosine":
        n = float(d["n"])
        if not n.is_integer():
            raise ValueError(f"Cosine period count must be a whole number, got {d['n']!r}")
        return Cosine(n=int(n), a=float(d["a"]))
    raise ValueError(f"Unknown shape type: '{shape_type}'")


def profile_to_json(profile: Profile) -> dict[str, Any]:
    """
    Serialize a profile.

    Raises:
        TypeError: For Custom profiles, whose height function is code.
    """
    if isinstance(profile, Straight):
        return {"type": "straight"}
    if isinstance(profile, Cosine):
        return {"type": "cosine", "n": profile.n, "a": profile.a}
    if isinstance(profile, Custom):
        raise TypeError(f"Cannot serialize custom profile '{profile.name}'")
    raise TypeError(f"Cannot serialize unknown profile type: {type(profile)}")


# =============================================================================
# Experiments
# =============================================================================

def experiment_from_json(data: dict[str, Any]) -> Experiment:
    """Build an Experiment from parsed JSON data."""
    config = config_from_json(data.get("config", {}))
    groups = []
    for i, g in enumerate(data.get("groups", [])):
        name = str(g.get("name", f"group{i + 1}"))
        profiles = tuple(profile_from_json(s) for s in g.get("shapes", []))
        groups.append(SweepGroup(name, profiles))
    return Experiment(config=config, groups=groups)


def experiment_to_json(experiment: Experiment) -> dict[str, Any]:
    """Serialize an Experiment (round-trip compatible)."""
    return {
        "config": config_to_json(experiment.config),
        "groups": [
            {"name": g.name, "shapes": [profile_to_json(p) for p in g.profiles]}
            for g in experiment.groups
        ],
    }


def load_experiment(path: str) -> Experiment:
    """
    Load an experiment file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If a shape definition is invalid.
        ConfigError: If a config value is out of range.
    """
    with open(path, "r", encoding="utf-8") as f:
        return experiment_from_json(json.load(f))


def save_experiment(experiment: Experiment, path: str, indent: int = 2) -> None:
    """Save an experiment to a JSON file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(experiment_to_json(experiment), f, indent=indent)


# =============================================================================
# Results
# =============================================================================

def results_to_json(results: list["GroupRuns"], config: SimConfig) -> dict[str, Any]:
    """Serialize batch results together with the configuration used."""
    groups = []
    for g in results:
        runs = []
        for r in g.runs:
            entry: dict[str, Any] = {
                "shape": profile_to_json(r.profile),
                "description": r.description,
                "time": r.time,
                "steps": r.steps,
            }
            if not r.ok:
                entry["error"] = r.error
                entry["error_type"] = r.error_type
            runs.append(entry)
        groups.append({"name": g.name, "runs": runs})
    return {"config": config_to_json(config), "groups": groups}


def save_results(results: list["GroupRuns"], config: SimConfig, path: str, indent: int = 2) -> None:
    """Write batch results to a JSON file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(results_to_json(results, config), f, indent=indent)
