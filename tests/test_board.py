"""Tests for the board state and its conflict metrics."""

from pathlib import Path
import random
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nqsearch.board import Board, Direction, count_directions
from nqsearch.utils import conflicts, conflicts_pairwise, is_valid_solution, validate_board_size


def _attacked(placement, row, col):
    """Brute-force check: does any other queen share a row or diagonal with (row, col)?"""
    for i, r in enumerate(placement):
        if i == col:
            continue
        if r == row or abs(r - row) == abs(i - col):
            return True
    return False


class ConflictCountTests(unittest.TestCase):

    def test_all_queens_in_one_row(self):
        board = Board(4, placement=[0, 0, 0, 0])
        self.assertEqual(board.total_conflicts, 6)

    def test_known_solution_has_no_conflicts(self):
        board = Board(4, placement=[1, 3, 0, 2])
        self.assertEqual(board.total_conflicts, 0)
        self.assertTrue(board.is_solved)
        self.assertTrue(is_valid_solution(board.placement))

    def test_diagonal_conflicts_are_counted(self):
        # main diagonal: every pair attacks
        board = Board(5, placement=[0, 1, 2, 3, 4])
        self.assertEqual(board.total_conflicts, 10)

    def test_single_queen_board(self):
        board = Board(1, rng=random.Random(0))
        self.assertEqual(board.placement, [0])
        self.assertEqual(board.total_conflicts, 0)

    def test_hashed_and_pairwise_counts_agree(self):
        rng = random.Random(7)
        for _ in range(200):
            n = rng.randint(1, 12)
            placement = [rng.randrange(n) for _ in range(n)]
            self.assertEqual(conflicts(placement), conflicts_pairwise(placement))

    def test_recompute_is_idempotent(self):
        board = Board(10, rng=random.Random(3), track_columns=True)
        first = board.recompute_conflicts()
        columns = list(board.conflicting_columns)
        self.assertEqual(board.recompute_conflicts(), first)
        self.assertEqual(board.conflicting_columns, columns)

    def test_random_placement_stays_in_range(self):
        board = Board(9, rng=random.Random(11))
        self.assertEqual(len(board.placement), 9)
        self.assertTrue(all(0 <= row < 9 for row in board.placement))
        self.assertEqual(board.total_conflicts, conflicts_pairwise(board.placement))

    def test_invalid_explicit_placement(self):
        with self.assertRaises(ValueError):
            Board(4, placement=[0, 1, 2])
        with self.assertRaises(ValueError):
            Board(4, placement=[0, 1, 2, 4])


class DirectionTests(unittest.TestCase):

    def test_clustered_queens_count_as_one_direction(self):
        board = Board(5, placement=[0, 0, 0, 0, 0])
        self.assertEqual(board.conflict_flags(0, 0), Direction.EAST)
        self.assertEqual(board.cell_conflict_directions(0, 0), 1)

    def test_row_neighbours_on_both_sides(self):
        board = Board(4, placement=[0, 0, 0, 0])
        self.assertEqual(board.conflict_flags(0, 1), Direction.WEST | Direction.EAST)
        self.assertEqual(board.cell_conflict_directions(0, 1), 2)

    def test_hypothetical_row_ignores_own_queen(self):
        board = Board(4, placement=[0, 0, 0, 0])
        self.assertEqual(board.conflict_flags(1, 1), Direction.NORTHWEST | Direction.NORTHEAST)

    def test_all_six_directions(self):
        board = Board(7, placement=[0, 3, 4, 3, 4, 3, 0])
        flags = board.conflict_flags(3, 3)
        self.assertEqual(flags, Direction(63))
        self.assertEqual(board.cell_conflict_directions(3, 3), 6)

    def test_count_directions(self):
        self.assertEqual(count_directions(0), 0)
        self.assertEqual(count_directions(Direction.WEST | Direction.NORTHEAST), 2)
        self.assertEqual(count_directions(63), 6)

    def test_zero_directions_exactly_when_unattacked(self):
        rng = random.Random(5)
        for _ in range(100):
            n = rng.randint(4, 10)
            board = Board(n, rng=rng)
            for col in range(n):
                for row in range(n):
                    directions = board.cell_conflict_directions(row, col)
                    self.assertGreaterEqual(directions, 0)
                    self.assertLessEqual(directions, 6)
                    self.assertEqual(directions == 0, not _attacked(board.placement, row, col))

    def test_conflicting_columns_match_column_counts(self):
        board = Board(12, rng=random.Random(9), track_columns=True)
        expected = [c for c in range(12) if board.column_conflicts[c] > 0]
        self.assertEqual(board.conflicting_columns, expected)
        board.move(0, (board.placement[0] + 1) % 12)
        expected = [c for c in range(12) if board.column_conflicts[c] > 0]
        self.assertEqual(board.conflicting_columns, expected)

    def test_solved_board_has_no_conflicting_columns(self):
        board = Board(4, placement=[1, 3, 0, 2], track_columns=True)
        self.assertEqual(board.column_conflicts, [0, 0, 0, 0])
        self.assertEqual(board.conflicting_columns, [])

    def test_untracked_board_skips_column_metrics(self):
        board = Board(4, placement=[0, 0, 0, 0])
        self.assertEqual(board.conflicting_columns, [])


class CloneTests(unittest.TestCase):

    def test_clone_shares_no_mutable_state(self):
        board = Board(6, rng=random.Random(1), track_columns=True)
        copy = board.clone()
        self.assertEqual(copy.placement, board.placement)
        self.assertEqual(copy.total_conflicts, board.total_conflicts)

        copy.move(0, (copy.placement[0] + 1) % 6)
        self.assertNotEqual(copy.placement, board.placement)
        self.assertEqual(board.total_conflicts, conflicts_pairwise(board.placement))
        self.assertIsNot(copy.column_conflicts, board.column_conflicts)
        self.assertIsNot(copy.conflicting_columns, board.conflicting_columns)


class BoardSizeTests(unittest.TestCase):

    def test_accepts_solvable_sizes(self):
        for n in (1, 4, 5, 100):
            self.assertEqual(validate_board_size(n), n)

    def test_rejects_unsolvable_sizes(self):
        for n in (-1, 0, 2, 3):
            with self.assertRaises(ValueError):
                validate_board_size(n)

    def test_rejects_non_integers(self):
        for n in (4.0, "8", True):
            with self.assertRaises(ValueError):
                validate_board_size(n)


if __name__ == "__main__":
    unittest.main()
