"""Visualization utilities for analysis outputs.

Overview
--------
Plotting helpers that turn the aggregated ``ExperimentResults`` into PNG
charts. Every function writes its files into ``out_dir`` (created if missing),
prints a ``Saved ...`` line per file and returns the list of written paths.

Chart map
---------
- 01_success_rate_vs_N.png: fraction of solves finished within the restart
  ceiling, per strategy.
- 02_time_vs_N_log_scale.png: mean wall-clock time per solve (log scale).
- 03_restarts_vs_N.png: mean restarts per solve with a ±1σ band.
- 04_state_changes_vs_N.png: mean moves of the successful attempt.
- boxplot_times_N{N}.png: per-strategy time distribution at one N.
- trajectory_N{N}.png: conflict count after each move of a sample solve.
"""
from __future__ import annotations

import os
from typing import Dict, List

import matplotlib.pyplot as plt
import numpy as np

from . import settings
from .stats import ExperimentResults

_MARKERS = ["o", "s", "^", "D"]


def _series(results: ExperimentResults, strategy: str, N_values: List[int], key: str, field: str = "mean") -> List[float]:
    values = []
    for n in N_values:
        summary = results[strategy].get(n, {}).get(key, {})
        value = summary.get(field) if summary else None
        values.append(float(value) if value is not None else 0.0)
    return values


def _save(fname: str, what: str) -> str:
    plt.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close()
    print(f"Saved {what}: {fname}")
    return fname


def plot_comprehensive_analysis(results: ExperimentResults, N_values: List[int], out_dir: str) -> List[str]:
    """Generate the per-N comparison charts (01-04) for all strategies."""
    os.makedirs(out_dir, exist_ok=True)
    suffix = settings.filename_suffix()
    strategies = list(results.keys())
    written: List[str] = []

    plt.figure(figsize=(12, 8))
    for i, strategy in enumerate(strategies):
        rates = [float(results[strategy].get(n, {}).get("success_rate", 0.0)) for n in N_values]
        plt.plot(N_values, rates, marker=_MARKERS[i % len(_MARKERS)], linewidth=2, markersize=8, label=strategy)
    plt.xlabel("N (board size)", fontsize=12)
    plt.ylabel("Success rate", fontsize=12)
    plt.title("Success Rate vs Problem Size\n(solves finished within the restart ceiling)", fontsize=14)
    plt.ylim(-0.05, 1.05)
    plt.legend(fontsize=11)
    plt.grid(True, alpha=0.7)
    plt.xticks(N_values)
    written.append(_save(os.path.join(out_dir, f"01_success_rate_vs_N{suffix}.png"), "success-rate chart"))

    plt.figure(figsize=(12, 8))
    for i, strategy in enumerate(strategies):
        times = [max(t, 1e-6) for t in _series(results, strategy, N_values, "all_time")]
        plt.semilogy(N_values, times, marker=_MARKERS[i % len(_MARKERS)], linewidth=2, markersize=8, label=strategy)
    plt.xlabel("N (board size)", fontsize=12)
    plt.ylabel("Average time [s] (log scale)", fontsize=12)
    plt.title("Execution Time vs Problem Size", fontsize=14)
    plt.legend(fontsize=11)
    plt.grid(True, alpha=0.7)
    plt.xticks(N_values)
    written.append(_save(os.path.join(out_dir, f"02_time_vs_N_log_scale{suffix}.png"), "execution-time chart (log scale)"))

    plt.figure(figsize=(12, 8))
    for i, strategy in enumerate(strategies):
        mean = np.array(_series(results, strategy, N_values, "all_restarts"))
        std = np.array(_series(results, strategy, N_values, "all_restarts", "std"))
        plt.plot(N_values, mean, marker=_MARKERS[i % len(_MARKERS)], linewidth=2, markersize=8, label=strategy)
        plt.fill_between(N_values, np.maximum(mean - std, 0), mean + std, alpha=0.2)
    plt.xlabel("N (board size)", fontsize=12)
    plt.ylabel("Restarts per solve", fontsize=12)
    plt.title("Random Restarts vs Problem Size\n(mean ± 1σ)", fontsize=14)
    plt.legend(fontsize=11)
    plt.grid(True, alpha=0.7)
    plt.xticks(N_values)
    written.append(_save(os.path.join(out_dir, f"03_restarts_vs_N{suffix}.png"), "restarts chart"))

    plt.figure(figsize=(12, 8))
    width = 0.8 / max(1, len(strategies))
    x = np.arange(len(N_values))
    for i, strategy in enumerate(strategies):
        changes = _series(results, strategy, N_values, "success_state_changes")
        plt.bar(x + i * width - 0.4 + width / 2, changes, width=width, label=strategy)
    plt.xlabel("N (board size)", fontsize=12)
    plt.ylabel("State changes in the successful attempt", fontsize=12)
    plt.title("State Changes vs Problem Size", fontsize=14)
    plt.xticks(x, [str(n) for n in N_values])
    plt.legend(fontsize=11)
    plt.grid(True, axis="y", alpha=0.7)
    written.append(_save(os.path.join(out_dir, f"04_state_changes_vs_N{suffix}.png"), "state-changes chart"))

    return written


def plot_statistical_analysis(results: ExperimentResults, N_values: List[int], out_dir: str) -> List[str]:
    """Draw one time boxplot per N comparing the raw runs of each strategy."""
    os.makedirs(out_dir, exist_ok=True)
    suffix = settings.filename_suffix()
    written: List[str] = []

    for n in N_values:
        labels: List[str] = []
        samples: List[List[float]] = []
        for strategy, per_n in results.items():
            runs = per_n.get(n, {}).get("raw_runs", [])
            times = [r["time"] for r in runs if r["success"]]
            if times:
                labels.append(strategy)
                samples.append(times)
        if not samples:
            continue

        plt.figure(figsize=(10, 6))
        plt.boxplot(samples)
        plt.xticks(range(1, len(labels) + 1), labels)
        plt.yscale("log")
        plt.ylabel("Time [s] (log scale)", fontsize=12)
        plt.title(f"Time distribution of successful solves (N={n})", fontsize=14)
        for i, sample in enumerate(samples, start=1):
            plt.annotate(
                f"μ={float(np.mean(sample)):.3g}s",
                (i, float(np.max(sample))),
                textcoords="offset points",
                xytext=(0, 6),
                ha="center",
                fontsize=9,
            )
        plt.grid(True, axis="y", alpha=0.5)
        written.append(_save(os.path.join(out_dir, f"boxplot_times_N{n}{suffix}.png"), "time boxplot"))

    return written


def plot_conflict_trajectories(trajectories: Dict[str, List[int]], n: int, out_dir: str) -> str:
    """Plot the conflict count after each move for one sample solve per strategy."""
    os.makedirs(out_dir, exist_ok=True)
    plt.figure(figsize=(12, 6))
    for i, (strategy, history) in enumerate(trajectories.items()):
        plt.plot(range(len(history)), history, marker=_MARKERS[i % len(_MARKERS)], markersize=3, linewidth=1.5, label=strategy)
    plt.xlabel("Move", fontsize=12)
    plt.ylabel("Conflicting pairs", fontsize=12)
    plt.title(f"Conflict trajectory of the successful attempt (N={n})", fontsize=14)
    plt.legend(fontsize=11)
    plt.grid(True, alpha=0.5)
    fname = os.path.join(out_dir, f"trajectory_N{n}{settings.filename_suffix()}.png")
    return _save(fname, "trajectory chart")


def plot_and_save(results: ExperimentResults, N_values: List[int], out_dir: str) -> List[str]:
    """Convenience wrapper producing the comparison charts and boxplots."""
    written = plot_comprehensive_analysis(results, N_values, out_dir)
    written.extend(plot_statistical_analysis(results, N_values, out_dir))
    return written
