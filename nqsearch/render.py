"""Text rendering of solved boards and run summaries."""

from __future__ import annotations

from typing import List, Sequence

from .board import Board


def _border(n: int) -> str:
    return "+---" * n + "+"


def render_linear(placement: Sequence[int]) -> str:
    """Return the 1-based row of each column in a framed single-line strip."""
    n = len(placement)
    cells = "".join(f"|{row + 1:>3}" for row in placement) + "|"
    return "\n".join([_border(n), cells, _border(n)])


def render_grid(placement: Sequence[int]) -> str:
    """Return an N x N grid with ``o`` marking each queen."""
    n = len(placement)
    lines: List[str] = []
    for row in range(n):
        lines.append(_border(n))
        lines.append("".join("| o " if placement[col] == row else "|   " for col in range(n)) + "|")
    lines.append(_border(n))
    return "\n".join(lines)


def render_solution(
    n: int,
    board: Board,
    elapsed_ms: float,
    restarts: int,
    state_changes: int,
    strategy_label: str,
    show_grid: bool = True,
) -> str:
    """Format the summary of a successful solve."""
    parts = [
        f"{n}-Queens Solution (with {strategy_label})",
        f"Execution Time: {elapsed_ms:.0f} milliseconds",
        f"Number of Restarts: {restarts}",
        f"Number of State Changes: {state_changes}",
        "",
        "Linear Representation of the Solution: ",
        render_linear(board.placement),
    ]
    if show_grid:
        parts.extend(["", "Grid Representation of the Solution: ", render_grid(board.placement)])
    return "\n".join(parts)
