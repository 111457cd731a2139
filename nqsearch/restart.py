"""Random-restart driver around the two local-search strategies.

``solve`` keeps building fresh random boards and handing them to the selected
strategy until one attempt ends with zero conflicts. Failed attempts (a stuck
hill climb or an exhausted min-conflicts budget) are expected and simply
trigger another restart.

Contract (public API)
---------------------
- Input: board size ``n`` (1 or >= 4) and a strategy label.
- Output: ``SolveResult = (board, restarts, state_changes)`` where
  ``state_changes`` counts the moves of the successful attempt only.

Counters are local to each call, so repeated or concurrent calls never share
state. Supply a seeded ``random.Random`` for reproducible runs.
"""

from __future__ import annotations

import enum
import random
from time import perf_counter
from typing import List, Optional, Tuple, Union

from .board import Board
from .hill_climbing import hill_climb
from .min_conflicts import min_conflicts_search
from .outcomes import Outcome, SearchResult
from .utils import validate_board_size

SolveResult = Tuple[Board, int, int]
TimedSolveResult = Tuple[Board, int, int, float]


class Strategy(str, enum.Enum):
    HILL_CLIMBING = "hill-climbing"
    MIN_CONFLICTS = "min-conflicts"

    @property
    def label(self) -> str:
        """Human-readable name used in reports and charts."""
        return {
            Strategy.HILL_CLIMBING: "Hill Climbing",
            Strategy.MIN_CONFLICTS: "Min Conflict CSP",
        }[self]


def get_strategy(name: Union[str, Strategy]) -> Strategy:
    """Return the :class:`Strategy` for ``name`` (enum member or its value)."""
    if isinstance(name, Strategy):
        return name
    key = str(name).strip().lower().replace("_", "-")
    try:
        return Strategy(key)
    except ValueError as exc:
        allowed = ", ".join(s.value for s in Strategy)
        raise ValueError(f"Unknown strategy: {name}. Allowed: {allowed}") from exc


class RestartLimitExceeded(RuntimeError):
    """Raised once ``max_restarts`` restarts have also failed.

    That is ``max_restarts + 1`` failed attempts in total; ``restarts`` holds the
    ceiling that was exceeded.
    """

    def __init__(self, n: int, strategy: Strategy, restarts: int):
        super().__init__(f"{strategy.label} found no solution for N={n} within {restarts} restarts")
        self.n = n
        self.strategy = strategy
        self.restarts = restarts


def run_attempt(
    board: Board,
    strategy: Strategy,
    rng: random.Random,
    history: Optional[List[int]] = None,
) -> SearchResult:
    """Run one attempt of ``strategy`` on ``board``."""
    if strategy is Strategy.HILL_CLIMBING:
        return hill_climb(board, history=history)
    return min_conflicts_search(board, rng, history=history)


def solve(
    n: int,
    strategy: Union[str, Strategy] = Strategy.MIN_CONFLICTS,
    rng: Optional[random.Random] = None,
    max_restarts: Optional[int] = None,
    history: Optional[List[int]] = None,
) -> SolveResult:
    """Solve N-Queens with random restarts.

    Parameters
    ----------
    n : int
        Board dimension; must be 1 or at least 4.
    strategy : str | Strategy
        ``"hill-climbing"`` or ``"min-conflicts"``.
    rng : random.Random | None
        Generator for initial boards and column picks.
    max_restarts : int | None
        Safety ceiling; ``None`` restarts without bound.
    history : list[int] | None
        Receives the conflict trajectory of the successful attempt: the
        initial count followed by the count after each move.

    Returns
    -------
    SolveResult
        ``(board, restarts, state_changes)``.

    Raises
    ------
    ValueError
        If ``n`` has no solution or the strategy is unknown.
    RestartLimitExceeded
        If more than ``max_restarts`` restarts would be needed.
    """
    validate_board_size(n)
    strategy = get_strategy(strategy)
    rng = rng if rng is not None else random.Random()
    track_columns = strategy is Strategy.MIN_CONFLICTS

    restarts = 0
    while True:
        board = Board(n, rng, track_columns=track_columns)
        trace: Optional[List[int]] = [board.total_conflicts] if history is not None else None

        outcome, state_changes = run_attempt(board, strategy, rng, history=trace)
        if outcome is Outcome.SOLVED:
            if history is not None and trace is not None:
                history[:] = trace
            return board, restarts, state_changes

        restarts += 1
        if max_restarts is not None and restarts > max_restarts:
            raise RestartLimitExceeded(n, strategy, max_restarts)


def timed_solve(
    n: int,
    strategy: Union[str, Strategy] = Strategy.MIN_CONFLICTS,
    rng: Optional[random.Random] = None,
    max_restarts: Optional[int] = None,
) -> TimedSolveResult:
    """Like :func:`solve` but also return the elapsed time in milliseconds."""
    start = perf_counter()
    board, restarts, state_changes = solve(n, strategy, rng=rng, max_restarts=max_restarts)
    elapsed_ms = (perf_counter() - start) * 1000.0
    return board, restarts, state_changes, elapsed_ms
