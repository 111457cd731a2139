"""Steepest-ascent hill climbing for the N-Queens problem.

The search starts from a (usually random) :class:`~nqsearch.board.Board` and at
each step inspects the whole neighbourhood: every column moved to every other
row. It commits the single best strictly-improving move, and stops when the
board is conflict-free or when no neighbour improves on it.

Contract (public API)
---------------------
- ``best_neighbor(board)`` returns ``(col, row, conflicts)`` for the best move
  or ``None`` when the board is a local minimum. The board is left unchanged.
- ``hill_climb(board)`` mutates ``board`` in place and returns
  ``(outcome, state_changes)`` with outcome ``SOLVED`` or ``STUCK``.

Tie-breaking
------------
Candidates are scanned column by column, rows ascending. A candidate replaces
the running best only when it is strictly better, so among equal minima the
lexicographically first ``(col, row)`` wins.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .board import Board
from .outcomes import Outcome, SearchResult

Move = Tuple[int, int, int]


def best_neighbor(board: Board) -> Optional[Move]:
    """Return the best strictly-improving move for ``board`` or ``None``.

    Each candidate is applied, fully recounted and reverted before the next
    one, so every candidate is measured against the unmodified board.
    """
    best: Optional[Move] = None
    best_conflicts = board.total_conflicts
    placement = board.placement

    for col in range(board.n):
        original_row = placement[col]
        for row in range(board.n):
            if row == original_row:
                continue
            placement[col] = row
            candidate_conflicts = board.recompute_conflicts()
            if candidate_conflicts < best_conflicts:
                best_conflicts = candidate_conflicts
                best = (col, row, candidate_conflicts)
        placement[col] = original_row

    board.recompute_conflicts()
    return best


def hill_climb(board: Board, history: Optional[List[int]] = None) -> SearchResult:
    """Run steepest-ascent hill climbing on ``board`` until solved or stuck.

    Parameters
    ----------
    board : Board
        Starting state; mutated in place.
    history : list[int] | None
        When given, the conflict count after every committed move is appended.

    Returns
    -------
    SearchResult
        ``(Outcome.SOLVED | Outcome.STUCK, state_changes)`` where
        ``state_changes`` is the number of committed moves.
    """
    state_changes = 0
    while board.total_conflicts != 0:
        move = best_neighbor(board)
        if move is None:
            return Outcome.STUCK, state_changes

        col, row, _ = move
        board.move(col, row)
        state_changes += 1
        if history is not None:
            history.append(board.total_conflicts)

    return Outcome.SOLVED, state_changes
