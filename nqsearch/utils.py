"""Conflict counting and validation helpers shared by both local searches.

Representation
--------------
Boards are encoded as a 1D list where ``placement[col] = row``. Each column
holds exactly one queen, so only row and diagonal collisions are possible.
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence


def conflicts(placement: Sequence[int]) -> int:
    """Count conflicting queen pairs in O(N) using row/diagonal tallies.

    Two queens in different columns can share at most one of row, ``row - col``
    diagonal or ``row + col`` diagonal, so summing the pairs of each group
    gives the exact pair count.
    """
    row_count: Counter[int] = Counter()
    diag1: Counter[int] = Counter()
    diag2: Counter[int] = Counter()

    for column, row in enumerate(placement):
        row_count[row] += 1
        diag1[row - column] += 1
        diag2[row + column] += 1

    def _pairs(counter: Counter[int]) -> int:
        total = 0
        for count in counter.values():
            if count > 1:
                total += count * (count - 1) // 2
        return total

    return _pairs(row_count) + _pairs(diag1) + _pairs(diag2)


def conflicts_pairwise(placement: Sequence[int]) -> int:
    """Count conflicting queen pairs in O(N^2) by checking every column pair.

    Reference implementation for validation; prefer ``conflicts`` inside the
    search loops.
    """
    n = len(placement)
    total = 0
    for i in range(n - 1):
        for j in range(i + 1, n):
            if (
                placement[i] == placement[j]
                or i - placement[i] == j - placement[j]
                or i + placement[i] == j + placement[j]
            ):
                total += 1
    return total


def is_valid_solution(placement: Sequence[int]) -> bool:
    """Return True if ``placement`` is a conflict-free N-Queens board.

    Contract
    - Input: sequence of length N where placement[col] = row (0-based)
    - Valid if: all 0 <= row < N and no pair of queens attacks each other
    """
    n = len(placement)
    if n == 0:
        return False
    for row in placement:
        if not isinstance(row, int):
            return False
        if row < 0 or row >= n:
            return False
    return conflicts(placement) == 0


def validate_board_size(n: int) -> int:
    """Return ``n`` unchanged if a solution exists for it, else raise.

    Sizes 2 and 3 have no solution and would make the restart loop spin
    forever, so they are rejected here before any board is built.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"Board size must be an integer, got {n!r}")
    if n < 1:
        raise ValueError(f"Board size must be positive, got {n}")
    if n in (2, 3):
        raise ValueError(f"The N-Queens problem has no solution for a board of size {n}")
    return n
