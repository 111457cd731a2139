"""Board state for N-Queens local search.

A :class:`Board` owns one placement ``placement[col] = row`` together with the
conflict metrics both searches read:

- ``total_conflicts``: number of attacking queen pairs (ground truth, always a
  full recount of the current placement).
- ``column_conflicts`` / ``conflicting_columns``: per-column direction counts,
  maintained only when the board is created with ``track_columns=True`` since
  hill climbing never reads them and recounts the board thousands of times.

Direction buckets
-----------------
``cell_conflict_directions`` classifies every other queen relative to a cell
into one of six directions and counts the *directions* hit, not the queens.
Three directions lie to the left (NORTHWEST, WEST, SOUTHWEST) and three to the
right (SOUTHEAST, EAST, NORTHEAST); the right-hand names mirror the left-hand
ones so that the same diagonal maps to different flags on each side.
"""

from __future__ import annotations

import enum
import random
from typing import List, Optional, Sequence

from .utils import conflicts


class Direction(enum.IntFlag):
    NORTHWEST = 1
    WEST = 2
    SOUTHWEST = 4
    SOUTHEAST = 8
    EAST = 16
    NORTHEAST = 32


def count_directions(flags: int) -> int:
    """Return the number of direction bits set in ``flags``."""
    flags = int(flags)
    count = 0
    while flags:
        flags &= flags - 1
        count += 1
    return count


class Board:
    """Queen placement with incrementally refreshed conflict metrics.

    Parameters
    ----------
    n : int
        Board dimension; also the number of queens.
    rng : random.Random | None
        Generator used for the random initial placement. A fresh unseeded
        generator is created when omitted.
    placement : Sequence[int] | None
        Explicit starting placement (mainly for tests). Must have length ``n``
        and rows in ``[0, n)``.
    track_columns : bool, default False
        Maintain ``column_conflicts`` and ``conflicting_columns`` on every
        recount (needed by min-conflicts).
    """

    def __init__(
        self,
        n: int,
        rng: Optional[random.Random] = None,
        placement: Optional[Sequence[int]] = None,
        track_columns: bool = False,
    ) -> None:
        self.n = n
        self.track_columns = track_columns
        if placement is None:
            rng = rng if rng is not None else random.Random()
            self.placement: List[int] = [rng.randrange(n) for _ in range(n)]
        else:
            if len(placement) != n:
                raise ValueError(f"Placement has {len(placement)} columns, expected {n}")
            for row in placement:
                if row < 0 or row >= n:
                    raise ValueError(f"Row {row} is outside a board of size {n}")
            self.placement = list(placement)
        self.total_conflicts = 0
        self.column_conflicts: List[int] = [0] * n
        self.conflicting_columns: List[int] = []
        self.recompute_conflicts()

    @property
    def is_solved(self) -> bool:
        return self.total_conflicts == 0

    def recompute_conflicts(self) -> int:
        """Recount every metric from the current placement and return the total."""
        if self.n <= 1:
            self.total_conflicts = 0
        else:
            self.total_conflicts = conflicts(self.placement)

        if self.track_columns:
            self.conflicting_columns = []
            for col in range(self.n):
                self.column_conflicts[col] = self.cell_conflict_directions(self.placement[col], col)
                if self.column_conflicts[col] > 0:
                    self.conflicting_columns.append(col)
        return self.total_conflicts

    def conflict_flags(self, row: int, col: int) -> Direction:
        """Return the set of directions in which a queen at ``(row, col)`` is attacked."""
        flags = Direction(0)
        placement = self.placement

        for i in range(col):
            if row - col == placement[i] - i:
                flags |= Direction.NORTHWEST
            elif placement[i] == row:
                flags |= Direction.WEST
            elif row + col == placement[i] + i:
                flags |= Direction.SOUTHWEST

        for i in range(col + 1, self.n):
            if row - col == placement[i] - i:
                flags |= Direction.SOUTHEAST
            elif placement[i] == row:
                flags |= Direction.EAST
            elif row + col == placement[i] + i:
                flags |= Direction.NORTHEAST

        return flags

    def cell_conflict_directions(self, row: int, col: int) -> int:
        """Number of distinct directions (0-6) attacking a queen at ``(row, col)``.

        The queen currently in ``col`` is ignored, so the cell can be any
        hypothetical row for that column.
        """
        return count_directions(self.conflict_flags(row, col))

    def move(self, col: int, row: int) -> int:
        """Place the queen of ``col`` on ``row`` and return the new total."""
        self.placement[col] = row
        return self.recompute_conflicts()

    def clone(self) -> "Board":
        copy = Board.__new__(Board)
        copy.n = self.n
        copy.track_columns = self.track_columns
        copy.placement = list(self.placement)
        copy.total_conflicts = self.total_conflicts
        copy.column_conflicts = list(self.column_conflicts)
        copy.conflicting_columns = list(self.conflicting_columns)
        return copy

    def __repr__(self) -> str:
        return f"Board(n={self.n}, placement={self.placement}, conflicts={self.total_conflicts})"
