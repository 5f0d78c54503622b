# MIT License (see LICENSE)
"""
Reporters for batch results.

The simulation core has no output dependency; reporters turn batch results
into text. Example output of TextReporter:

    m = 0.1 kg, L = 1.0 m, mu = 0.0, vI = Vec(x=1.0, z=0.0) m/s, g = 9.81 m/s²

    t_f(Straight) = 1.000000 s
"""
from __future__ import annotations
from abc import ABC, abstractmethod
import sys
from typing import TextIO

from .batch import GroupRuns, ShapeRun
from .config import SimConfig


def format_header(config: SimConfig) -> str:
    """One-line summary of the physical constants."""
    return (
        f"m = {config.mass} kg, L = {config.length} m, mu = {config.mu}, "
        f"vI = {config.v_initial} m/s, g = {config.g} m/s²"
    )


def format_run(run: ShapeRun) -> str:
    """Result line of one shape: its time to B, or why it failed."""
    if run.ok:
        return f"t_f({run.description}) = {run.time:.6f} s"
    return f"t_f({run.description}) failed: {run.error}"


class Reporter(ABC):
    """
    Abstract base class for result reporters.

    Usage:
        reporter.begin(config)
        for group in results:
            reporter.group(group)
        reporter.end()

    Or use the convenience method:
        reporter.report_all(config, results)
    """

    @abstractmethod
    def begin(self, config: SimConfig) -> None:
        """Start a report for runs made with `config`."""
        ...

    @abstractmethod
    def group(self, runs: GroupRuns) -> None:
        """Report one sweep group."""
        ...

    @abstractmethod
    def end(self) -> None:
        """Finish the report."""
        ...

    def report_all(self, config: SimConfig, results: list[GroupRuns]) -> None:
        """Report every group of a batch."""
        self.begin(config)
        for g in results:
            self.group(g)
        self.end()


class TextReporter(Reporter):
    """
    Plain-text reporter: header line, then one line per shape with a blank
    line before each group.
    """

    def __init__(self, output: TextIO | None = None):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
        """
        self.output = output or sys.stdout

    def begin(self, config: SimConfig) -> None:
        self.output.write(format_header(config) + "\n")

    def group(self, runs: GroupRuns) -> None:
        self.output.write("\n")
        for run in runs.runs:
            self.output.write(format_run(run) + "\n")

    def end(self) -> None:
        self.output.flush()


class BufferedReporter(Reporter):
    """Collects report lines in memory, grouped by sweep name."""

    def __init__(self):
        self.header: str | None = None
        self.lines: dict[str, list[str]] = {}

    def begin(self, config: SimConfig) -> None:
        self.header = format_header(config)
        self.lines = {}

    def group(self, runs: GroupRuns) -> None:
        self.lines[runs.name] = [format_run(r) for r in runs.runs]

    def end(self) -> None:
        pass
