"""Command-line interface and high-level pipelines for strategy comparisons.

This module wires together configuration loading, execution of the experiment
grid (sequential or across worker processes), CSV export, and chart
generation. It isolates I/O, argument parsing, and progress reporting from the
core search modules so that the rest of the codebase stays easy to test
programmatically.
"""
from __future__ import annotations

import argparse
import random
import tempfile
from pathlib import Path
from time import perf_counter
from typing import Dict, List, Optional, Tuple

from config_manager import ConfigManager
from nqsearch.restart import Strategy, get_strategy, solve
from nqsearch.utils import is_valid_solution, validate_board_size

from . import settings
from .experiments import run_experiments, run_experiments_parallel, trace_sample_run
from .plots import plot_and_save, plot_conflict_trajectories
from .reporting import save_raw_data_to_csv, save_results_to_csv
from .stats import ExperimentResults


# ------------- Utils --------------------------------------------------------

def parse_strategy_filters(strategy_args: Optional[List[str]]) -> Optional[List[str]]:
    """Normalize strategy filter CLI inputs into a list of canonical labels.

    Accepts repeated flags (``-s hill-climbing -s min-conflicts``) and
    comma-separated lists. Returns ``None`` when no filter is provided so the
    configured default set is used.
    """
    if not strategy_args:
        return None
    selected: List[str] = []
    for entry in strategy_args:
        for token in entry.split(","):
            token = token.strip()
            if token:
                selected.append(get_strategy(token).value)
    unique = list(dict.fromkeys(selected))
    return unique or None


def apply_configuration(config_path: str, strategy_filter: Optional[List[str]] = None) -> Tuple[ConfigManager, List[str]]:
    """Load configuration into ``settings`` and return the selected strategies.

    Raises ``ValueError`` for board sizes without a solution or unknown
    strategy names, so that bad configs fail before any work is scheduled.
    """
    config_mgr = ConfigManager(config_path)

    experiment_settings = config_mgr.get_experiment_settings()
    if experiment_settings:
        settings.N_VALUES = [validate_board_size(int(n)) for n in experiment_settings.get("N_values", settings.N_VALUES)]
        if not settings.N_VALUES:
            raise ValueError("N_values must not be empty")
        settings.RUNS_PER_STRATEGY = int(experiment_settings.get("runs_per_strategy", settings.RUNS_PER_STRATEGY))
        settings.BASE_SEED = experiment_settings.get("seed", settings.BASE_SEED)
        settings.OUT_DIR = experiment_settings.get("output_dir", settings.OUT_DIR)

    limit_settings = config_mgr.get_limit_settings()
    if "max_restarts" in limit_settings:
        settings.MAX_RESTARTS = limit_settings["max_restarts"]

    # an explicit CLI filter wins over the configured list
    selected = strategy_filter or [get_strategy(s).value for s in config_mgr.get_strategies()]
    settings.STRATEGIES = selected
    return config_mgr, selected


def _sample_trajectories(strategies: List[str], n: int) -> Dict[str, List[int]]:
    return {s: trace_sample_run(n, s, seed=settings.BASE_SEED) for s in strategies}


def _export(results: ExperimentResults, strategies: List[str], make_plots: bool) -> None:
    save_results_to_csv(results, settings.N_VALUES, settings.OUT_DIR)
    save_raw_data_to_csv(results, settings.N_VALUES, settings.OUT_DIR)
    if make_plots:
        plot_and_save(results, settings.N_VALUES, settings.OUT_DIR)
        plot_conflict_trajectories(_sample_trajectories(strategies, settings.N_VALUES[0]), settings.N_VALUES[0], settings.OUT_DIR)


# ------------- Pipelines ----------------------------------------------------

def main_sequential(strategies: List[str], make_plots: bool = True, validate: bool = False) -> ExperimentResults:
    """Run the experiment grid in this process and export results."""
    print("=" * 60)
    print(f"SEQUENTIAL RUN: N={settings.N_VALUES}, strategies={strategies}, runs={settings.RUNS_PER_STRATEGY}")
    print("=" * 60)
    start = perf_counter()
    results = run_experiments(
        settings.N_VALUES,
        strategies,
        settings.RUNS_PER_STRATEGY,
        base_seed=settings.BASE_SEED,
        max_restarts=settings.MAX_RESTARTS,
        progress_label="Experiments",
        validate=validate,
    )
    _export(results, strategies, make_plots)
    print(f"Total time: {perf_counter() - start:.1f}s")
    return results


def main_parallel(strategies: List[str], make_plots: bool = True, validate: bool = False) -> ExperimentResults:
    """Run the experiment grid across worker processes and export results."""
    print("=" * 60)
    print(f"PARALLEL RUN: N={settings.N_VALUES}, strategies={strategies}, runs={settings.RUNS_PER_STRATEGY}")
    print("=" * 60)
    start = perf_counter()
    results = run_experiments_parallel(
        settings.N_VALUES,
        strategies,
        settings.RUNS_PER_STRATEGY,
        base_seed=settings.BASE_SEED,
        max_restarts=settings.MAX_RESTARTS,
        validate=validate,
    )
    _export(results, strategies, make_plots)
    print(f"Total time: {perf_counter() - start:.1f}s")
    return results


# ------------- Quick regression -------------------------------------------

def run_quick_regression_tests() -> None:
    """Execute a fast, deterministic smoke test for both strategies at N=8.

    Verifies that each strategy returns a valid board under a fixed seed and
    that the experiment pipeline produces non-empty CSV files.
    """
    print("Running quick regression tests (N=8) for all strategies...")

    for strategy in Strategy:
        board, restarts, changes = solve(8, strategy, rng=random.Random(42), max_restarts=1000)
        if not is_valid_solution(board.placement):
            raise AssertionError(f"{strategy.label} returned an invalid solution for N=8: {board.placement}.")
        print(f"  {strategy.label}: solution {board.placement}, restarts={restarts}, state changes={changes}")

    results = run_experiments([8], [s.value for s in Strategy], runs=3, base_seed=42, max_restarts=1000)

    with tempfile.TemporaryDirectory() as tmpdir:
        for path in (
            save_results_to_csv(results, [8], tmpdir),
            save_raw_data_to_csv(results, [8], tmpdir),
        ):
            if not Path(path).exists() or Path(path).stat().st_size == 0:
                raise AssertionError(f"CSV was not generated successfully during quick tests: {path}")

    print("Quick regression tests passed.")


# ------------- CLI wiring --------------------------------------------------

def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the analysis entry point."""
    parser = argparse.ArgumentParser(description="Compare hill climbing and min-conflicts on N-Queens.")
    parser.add_argument(
        "--mode",
        choices=["sequential", "parallel"],
        default="parallel",
        help="Execution mode: sequential or parallel across processes (default).",
    )
    parser.add_argument(
        "--strategy",
        "-s",
        action="append",
        help="Filter strategies: hill-climbing, min-conflicts (comma-separated or multiple flags).",
    )
    parser.add_argument("--config", default="config.json", help="Path to configuration file (default: config.json).")
    parser.add_argument("--quick-test", action="store_true", help="Run quick regression tests (N=8) and exit.")
    parser.add_argument("--no-plots", action="store_true", help="Skip chart generation.")
    parser.add_argument("--validate", action="store_true", help="Fail if any reported solution is invalid.")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point: parse arguments and dispatch to the chosen pipeline."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.quick_test:
        run_quick_regression_tests()
        return

    try:
        strategy_filter = parse_strategy_filters(args.strategy)
        _, selected = apply_configuration(args.config, strategy_filter)
    except FileNotFoundError as exc:
        print(f"Configuration file not found: {exc}")
        raise SystemExit(1) from exc
    except ValueError as exc:
        print(f"Configuration error: {exc}")
        raise SystemExit(1) from exc

    print(f"Selected strategies: {selected}")

    try:
        if args.mode == "sequential":
            main_sequential(selected, make_plots=not args.no_plots, validate=args.validate)
        else:
            main_parallel(selected, make_plots=not args.no_plots, validate=args.validate)
    except KeyboardInterrupt:
        print("\nExecution interrupted by user. Cleaning up workers...")
        raise SystemExit(130) from None


if __name__ == "__main__":
    main()
