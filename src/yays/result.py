"""SortReport dataclass describing one sorting run.

This module provides the result type returned by YamlSorter.apply_all().
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["SortReport"]


@dataclass(frozen=True, slots=True)
class SortReport:
    """Summary of a completed apply_all() run.

    Attributes:
        paths: The path strings applied, in application order.
        targets_sorted: Number of mapping or sequence targets that were sorted,
            summed over all paths.  A node reached twice counts twice.
        targets_skipped: Number of scalar targets skipped because their path
            contained a wildcard.
        computation_time_ms: Wall-clock duration of the run in milliseconds.
    """

    paths: tuple[str, ...]
    targets_sorted: int
    targets_skipped: int
    computation_time_ms: float
