"""CSV export utilities for experiment outputs (aggregates and raw runs).

These helpers write a compact per-(N, strategy) summary as well as the full
per-run raw data for downstream analysis or spreadsheet inspection.
"""
from __future__ import annotations

import csv
import os
from typing import Any, List, Optional

from . import settings
from .stats import ExperimentResults, StatsSummary

SUMMARY_COLUMNS = [
    "n",
    "strategy",
    "total_runs",
    "successes",
    "failures",
    "success_rate",
    "restarts_mean",
    "restarts_median",
    "restarts_std",
    "restarts_max",
    "state_changes_mean",
    "state_changes_median",
    "state_changes_std",
    "time_mean_seconds",
    "time_median_seconds",
    "time_std_seconds",
    "time_max_seconds",
]

RAW_COLUMNS = ["n", "strategy", "run", "seed", "success", "valid", "restarts", "state_changes", "time_seconds"]


def _fmt(summary: StatsSummary, key: str) -> Any:
    value: Optional[float] = summary.get(key) if summary else None
    return "" if value is None else value


def save_results_to_csv(results: ExperimentResults, N_values: List[int], out_dir: str) -> str:
    """Write one summary row per (N, strategy) and return the file path."""
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"results_summary{settings.filename_suffix()}.csv")

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(SUMMARY_COLUMNS)
        for n in N_values:
            for strategy, per_n in results.items():
                entry = per_n.get(n)
                if not entry:
                    continue
                restarts = entry.get("all_restarts", {})
                changes = entry.get("success_state_changes", {})
                times = entry.get("all_time", {})
                writer.writerow([
                    n,
                    strategy,
                    entry.get("total_runs", 0),
                    entry.get("successes", 0),
                    entry.get("failures", 0),
                    entry.get("success_rate", 0.0),
                    _fmt(restarts, "mean"),
                    _fmt(restarts, "median"),
                    _fmt(restarts, "std"),
                    _fmt(restarts, "max"),
                    _fmt(changes, "mean"),
                    _fmt(changes, "median"),
                    _fmt(changes, "std"),
                    _fmt(times, "mean"),
                    _fmt(times, "median"),
                    _fmt(times, "std"),
                    _fmt(times, "max"),
                ])

    print(f"Saved summary CSV: {filename}")
    return filename


def save_raw_data_to_csv(results: ExperimentResults, N_values: List[int], out_dir: str) -> str:
    """Write every individual run and return the file path."""
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"raw_runs{settings.filename_suffix()}.csv")

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(RAW_COLUMNS)
        for n in N_values:
            for strategy, per_n in results.items():
                entry = per_n.get(n)
                if not entry:
                    continue
                for index, run in enumerate(entry.get("raw_runs", [])):
                    writer.writerow([
                        n,
                        strategy,
                        index,
                        "" if run["seed"] is None else run["seed"],
                        run["success"],
                        run["valid"],
                        run["restarts"],
                        run["state_changes"],
                        run["time"],
                    ])

    print(f"Saved raw runs CSV: {filename}")
    return filename
