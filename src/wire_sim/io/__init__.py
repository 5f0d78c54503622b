# MIT License (see LICENSE)
"""
Input/Output utilities for wire experiments.

This subpackage provides:
    - Experiment files: configuration plus sweep groups as JSON.
    - Result export: times and failures of a batch as JSON.

Typical usage:
    from wire_sim.io import load_experiment, save_results

    experiment = load_experiment("sweep.json")
"""
from .json_io import (
    Experiment,
    config_from_json,
    config_to_json,
    experiment_from_json,
    experiment_to_json,
    load_experiment,
    profile_from_json,
    profile_to_json,
    results_to_json,
    save_experiment,
    save_results,
)

__all__ = [
    "Experiment",
    # Loading
    "load_experiment",
    "experiment_from_json",
    "config_from_json",
    "profile_from_json",
    # Saving
    "save_experiment",
    "save_results",
    # Serialization
    "experiment_to_json",
    "config_to_json",
    "profile_to_json",
    "results_to_json",
]
