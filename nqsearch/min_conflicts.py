"""Min-conflicts repair search for the N-Queens problem.

Each step picks one conflicting column uniformly at random and moves its queen
to the row attacked from the fewest directions (see
:meth:`~nqsearch.board.Board.cell_conflict_directions`). The search gets a
budget of ``n * n`` steps per attempt; a step that finds no better row still
consumes budget.

Contract (public API)
---------------------
- ``best_row_for_column(board, col)`` returns the replacement row or ``None``.
- ``min_conflicts_search(board, rng, max_steps=None)`` mutates ``board`` in
  place and returns ``(outcome, state_changes)`` with outcome ``SOLVED`` or
  ``EXHAUSTED``.

Determinism
-----------
Column choice is the only random decision and is drawn from the ``rng``
argument, so a seeded ``random.Random`` reproduces a run exactly.
"""

from __future__ import annotations

import random
from typing import List, Optional

from .board import Board
from .outcomes import Outcome, SearchResult


def best_row_for_column(board: Board, col: int) -> Optional[int]:
    """Return the least-attacked row for ``col`` if it beats the current one.

    Rows are scanned ascending and a row is kept only when strictly better
    than the best seen so far, so the earliest minimum wins. A row attacked
    from no direction ends the scan early.
    """
    if not board.track_columns:
        raise ValueError("min-conflicts requires a board built with track_columns=True")

    current_row = board.placement[col]
    min_directions = board.column_conflicts[col]
    selected: Optional[int] = None

    for row in range(board.n):
        if row == current_row:
            continue
        directions = board.cell_conflict_directions(row, col)
        if directions < min_directions:
            min_directions = directions
            selected = row
            if directions == 0:
                break

    return selected


def min_conflicts_search(
    board: Board,
    rng: random.Random,
    max_steps: Optional[int] = None,
    history: Optional[List[int]] = None,
) -> SearchResult:
    """Run min-conflicts on ``board`` until solved or out of steps.

    Parameters
    ----------
    board : Board
        Starting state built with ``track_columns=True``; mutated in place.
    rng : random.Random
        Source for the conflicting-column choice.
    max_steps : int | None
        Step budget; defaults to ``board.n ** 2``.
    history : list[int] | None
        When given, the conflict count after every reassignment is appended.

    Returns
    -------
    SearchResult
        ``(Outcome.SOLVED | Outcome.EXHAUSTED, state_changes)``.
    """
    if board.total_conflicts == 0:
        return Outcome.SOLVED, 0

    steps = board.n * board.n if max_steps is None else max_steps
    state_changes = 0

    while steps > 0:
        col = 0
        if board.conflicting_columns:
            col = rng.choice(board.conflicting_columns)

        row = best_row_for_column(board, col)
        if row is not None:
            board.move(col, row)
            state_changes += 1
            if history is not None:
                history.append(board.total_conflicts)
            if board.total_conflicts == 0:
                return Outcome.SOLVED, state_changes
        steps -= 1

    return Outcome.EXHAUSTED, state_changes
