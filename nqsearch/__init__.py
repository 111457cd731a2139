"""N-Queens solvers based on random-restart local search."""

from .board import Board, Direction
from .hill_climbing import best_neighbor, hill_climb
from .min_conflicts import best_row_for_column, min_conflicts_search
from .outcomes import Outcome
from .restart import RestartLimitExceeded, Strategy, get_strategy, solve, timed_solve
from .utils import conflicts, conflicts_pairwise, is_valid_solution, validate_board_size

__all__ = [
    "Board",
    "Direction",
    "Outcome",
    "Strategy",
    "RestartLimitExceeded",
    "best_neighbor",
    "hill_climb",
    "best_row_for_column",
    "min_conflicts_search",
    "get_strategy",
    "solve",
    "timed_solve",
    "conflicts",
    "conflicts_pairwise",
    "is_valid_solution",
    "validate_board_size",
]
