"""Typed result shapes and statistics helpers for the analysis pipeline.

Defines ``TypedDict`` structures for experiment outputs and provides utilities
to compute aggregate statistics across per-run records.
"""
from __future__ import annotations

import statistics
from typing import Any, Dict, List, Optional, TypedDict


class StatsSummary(TypedDict, total=False):
    count: int
    mean: Optional[float]
    median: Optional[float]
    std: Optional[float]
    min: Optional[float]
    max: Optional[float]
    q25: Optional[float]
    q75: Optional[float]
    range: Optional[float]


class RunRecord(TypedDict):
    success: bool
    restarts: int
    state_changes: int
    time: float
    valid: bool
    seed: Optional[int]


class StrategyResultEntry(TypedDict, total=False):
    success_rate: float
    total_runs: int
    successes: int
    failures: int
    all_restarts: StatsSummary
    all_state_changes: StatsSummary
    all_time: StatsSummary
    success_restarts: StatsSummary
    success_state_changes: StatsSummary
    success_time: StatsSummary
    raw_runs: List[RunRecord]


# strategy label -> N -> aggregate
ExperimentResults = Dict[str, Dict[int, StrategyResultEntry]]

METRICS = ["restarts", "state_changes", "time"]


class ProgressPrinter:
    """Minimal, stdout-only progress reporter for long-running loops.

    Parameters
    ----------
    total : int
        Total number of steps/items expected. Values <= 0 are coerced to 1 to
        avoid division by zero when reporting percentages.
    label : str
        Short label printed in front of the progress counters.
    """

    def __init__(self, total: int, label: str):
        self.total = max(1, total)
        self.label = label

    def update(self, index: int, detail: str = "") -> None:
        """Print a single-line progress update to stdout."""
        percent = (index / self.total) * 100
        suffix = f" - {detail}" if detail else ""
        print(f"[{self.label}] {index}/{self.total} ({percent:.0f}%)" + suffix)


def compute_detailed_statistics(values: List[float]) -> StatsSummary:
    """Compute summary statistics for a numeric sequence.

    Returns count, mean, median, population std, min, max, 25th and 75th
    percentiles and range. When ``values`` is empty every numeric field is
    ``None`` and ``count`` is 0 so CSV and plot generation stay uniform.
    """
    if not values:
        return {
            "count": 0,
            "mean": None,
            "median": None,
            "std": None,
            "min": None,
            "max": None,
            "q25": None,
            "q75": None,
            "range": None,
        }

    sorted_vals = sorted(values)
    n = len(values)

    min_val = min(values)
    max_val = max(values)

    return {
        "count": n,
        "mean": statistics.mean(values),
        "median": statistics.median(values),
        "std": statistics.pstdev(values) if n > 1 else 0,
        "min": min_val,
        "max": max_val,
        "q25": sorted_vals[n // 4] if n >= 4 else min_val,
        "q75": sorted_vals[3 * n // 4] if n >= 4 else max_val,
        "range": max_val - min_val,
    }


def compute_grouped_statistics(results_list: List[RunRecord]) -> Dict[str, Any]:
    """Aggregate run records into rates plus ``all_*``/``success_*`` summaries.

    Failed runs are those that hit the restart ceiling; their metrics only
    contribute to the ``all_*`` summaries.
    """
    successes = [r for r in results_list if r["success"]]
    total = len(results_list)

    stats: Dict[str, Any] = {
        "total_runs": total,
        "successes": len(successes),
        "failures": total - len(successes),
        "success_rate": len(successes) / total if total else 0,
    }
    for metric in METRICS:
        stats[f"all_{metric}"] = compute_detailed_statistics([r[metric] for r in results_list])
        stats[f"success_{metric}"] = compute_detailed_statistics([r[metric] for r in successes])
    return stats
