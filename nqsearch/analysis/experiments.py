"""Experiment runners comparing the local-search strategies (sequential and parallel).

For each board size and strategy a batch of independent solves is executed,
each with its own seed, and summarized with ``compute_grouped_statistics``.
Outputs are structured dictionaries suitable for CSV export and plotting.
"""
from __future__ import annotations

import random
from concurrent.futures import ProcessPoolExecutor
from time import perf_counter
from typing import Dict, List, Optional, Tuple

from nqsearch.restart import RestartLimitExceeded, get_strategy, solve
from nqsearch.utils import is_valid_solution

from . import settings
from .stats import (
    ExperimentResults,
    ProgressPrinter,
    RunRecord,
    StrategyResultEntry,
    compute_grouped_statistics,
)

RunParams = Tuple[int, str, Optional[int], Optional[int]]


def _seed_for(run_index: int, base_seed: Optional[int]) -> Optional[int]:
    return None if base_seed is None else base_seed + run_index


def run_single_solve(params: RunParams) -> RunRecord:
    """Worker wrapper running one full solve (picklable for process pools)."""
    n, strategy, seed, max_restarts = params
    rng = random.Random(seed)
    start = perf_counter()
    try:
        board, restarts, state_changes = solve(n, strategy, rng=rng, max_restarts=max_restarts)
    except RestartLimitExceeded as exc:
        return {
            "success": False,
            "restarts": exc.restarts,
            "state_changes": 0,
            "time": perf_counter() - start,
            "valid": False,
            "seed": seed,
        }
    return {
        "success": True,
        "restarts": restarts,
        "state_changes": state_changes,
        "time": perf_counter() - start,
        "valid": is_valid_solution(board.placement),
        "seed": seed,
    }


def summarize_runs(runs: List[RunRecord]) -> StrategyResultEntry:
    """Turn raw run records into the per-N aggregate entry."""
    stats = compute_grouped_statistics(runs)
    return {
        "success_rate": stats["success_rate"],
        "total_runs": stats["total_runs"],
        "successes": stats["successes"],
        "failures": stats["failures"],
        "all_restarts": stats["all_restarts"],
        "all_state_changes": stats["all_state_changes"],
        "all_time": stats["all_time"],
        "success_restarts": stats["success_restarts"],
        "success_state_changes": stats["success_state_changes"],
        "success_time": stats["success_time"],
        "raw_runs": list(runs),
    }


def _check_runs(runs: List[RunRecord], n: int, strategy: str) -> None:
    for idx, run in enumerate(runs):
        if run["success"] and not run["valid"]:
            raise AssertionError(f"Invalid {strategy} solution for N={n}, run {idx} (seed={run['seed']})")


def run_strategy_batch(
    n: int,
    strategy: str,
    runs: int,
    base_seed: Optional[int] = None,
    max_restarts: Optional[int] = None,
) -> List[RunRecord]:
    """Run ``runs`` independent solves of ``strategy`` at size ``n``."""
    label = get_strategy(strategy).value
    return [
        run_single_solve((n, label, _seed_for(i, base_seed), max_restarts))
        for i in range(runs)
    ]


def run_experiments(
    N_values: List[int],
    strategies: List[str],
    runs: int,
    base_seed: Optional[int] = None,
    max_restarts: Optional[int] = None,
    progress_label: Optional[str] = None,
    validate: bool = False,
) -> ExperimentResults:
    """Run every strategy for every N sequentially in this process."""
    labels = [get_strategy(s).value for s in strategies]
    results: ExperimentResults = {label: {} for label in labels}
    progress = ProgressPrinter(len(N_values) * len(labels), progress_label) if progress_label else None

    step = 0
    for n in N_values:
        for label in labels:
            step += 1
            if progress:
                progress.update(step, f"N={n}, {label}")
            batch = run_strategy_batch(n, label, runs, base_seed=base_seed, max_restarts=max_restarts)
            if validate:
                _check_runs(batch, n, label)
            results[label][n] = summarize_runs(batch)

    return results


def run_experiments_parallel(
    N_values: List[int],
    strategies: List[str],
    runs: int,
    base_seed: Optional[int] = None,
    max_restarts: Optional[int] = None,
    workers: Optional[int] = None,
    validate: bool = False,
) -> ExperimentResults:
    """Run the same grid as :func:`run_experiments` across worker processes.

    Each solve is an independent task with its own seed, so the results match
    the sequential runner apart from wall-clock times.
    """
    labels = [get_strategy(s).value for s in strategies]
    tasks: List[RunParams] = [
        (n, label, _seed_for(i, base_seed), max_restarts)
        for n in N_values
        for label in labels
        for i in range(runs)
    ]
    workers = workers or settings.NUM_PROCESSES
    print(f"Dispatching {len(tasks)} solves to {workers} worker processes...")

    with ProcessPoolExecutor(max_workers=workers) as executor:
        records = list(executor.map(run_single_solve, tasks, chunksize=max(1, runs // 4)))

    grouped: Dict[Tuple[int, str], List[RunRecord]] = {}
    for (n, label, _, _), record in zip(tasks, records):
        grouped.setdefault((n, label), []).append(record)

    results: ExperimentResults = {label: {} for label in labels}
    for n in N_values:
        for label in labels:
            batch = grouped[(n, label)]
            if validate:
                _check_runs(batch, n, label)
            results[label][n] = summarize_runs(batch)
    return results


def trace_sample_run(n: int, strategy: str, seed: Optional[int] = None) -> List[int]:
    """Return the conflict trajectory of the successful attempt of one solve."""
    history: List[int] = []
    solve(n, strategy, rng=random.Random(seed), history=history)
    return history
