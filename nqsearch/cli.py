"""Command-line entry point for solving a single N-Queens instance.

The board size comes from ``--size`` or, when omitted, from an interactive
prompt that keeps asking until it receives 1 or a value of at least 4.
"""
from __future__ import annotations

import argparse
import random
from typing import Callable, Optional

from .render import render_solution
from .restart import RestartLimitExceeded, Strategy, get_strategy, timed_solve
from .utils import validate_board_size


def request_board_size(
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> int:
    """Prompt until the user enters a board size that has a solution."""
    while True:
        raw = input_fn("Please enter the size of board (1 or at least 4): ")
        try:
            n = int(raw.strip())
        except ValueError:
            output_fn(f"'{raw.strip()}' is not a whole number. Please try again.")
            continue
        try:
            return validate_board_size(n)
        except ValueError:
            output_fn(f"The N-Queens problem has no solution for a board of size {n}. Please try again.")


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the solver CLI."""
    parser = argparse.ArgumentParser(description="Solve N-Queens with random-restart local search.")
    parser.add_argument(
        "--strategy",
        "-s",
        choices=[s.value for s in Strategy],
        default=Strategy.MIN_CONFLICTS.value,
        help="Local search strategy (default: min-conflicts).",
    )
    parser.add_argument("--size", "-n", type=int, help="Board size; prompts interactively when omitted.")
    parser.add_argument("--seed", type=int, help="Seed for the random generator (reproducible runs).")
    parser.add_argument("--max-restarts", type=int, help="Give up after this many restarts (default: unlimited).")
    parser.add_argument("--no-grid", action="store_true", help="Only print the linear representation.")
    return parser


def main(argv: Optional[list] = None) -> None:
    """CLI entry point: read the size, solve, and print the solution."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    strategy = get_strategy(args.strategy)

    try:
        n = validate_board_size(args.size) if args.size is not None else request_board_size()
    except ValueError as exc:
        print(f"Input error: {exc}")
        raise SystemExit(1) from exc
    except (EOFError, KeyboardInterrupt):
        print("\nNo board size given.")
        raise SystemExit(130) from None

    rng = random.Random(args.seed)
    try:
        board, restarts, state_changes, elapsed_ms = timed_solve(
            n, strategy, rng=rng, max_restarts=args.max_restarts
        )
    except RestartLimitExceeded as exc:
        print(f"Search failed: {exc}")
        raise SystemExit(1) from exc
    except KeyboardInterrupt:
        print("\nExecution interrupted by user.")
        raise SystemExit(130) from None

    print()
    print(render_solution(n, board, elapsed_ms, restarts, state_changes, strategy.label, show_grid=not args.no_grid))


if __name__ == "__main__":
    main()
