"""Tests for the random-restart driver."""

from pathlib import Path
import random
import sys
import unittest
from unittest import mock

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nqsearch.outcomes import Outcome
from nqsearch.restart import RestartLimitExceeded, Strategy, get_strategy, solve, timed_solve
from nqsearch.utils import is_valid_solution

# far above what any seeded run below needs
MAX_RESTARTS = 2000


def _assert_solution(test, placement):
    n = len(placement)
    for i in range(n):
        for j in range(i + 1, n):
            test.assertNotEqual(placement[i], placement[j])
            test.assertNotEqual(abs(placement[i] - placement[j]), abs(i - j))


class SolveTests(unittest.TestCase):

    def test_both_strategies_solve_supported_sizes(self):
        for strategy in Strategy:
            for n in (1, 4, 5, 6, 8, 10):
                with self.subTest(strategy=strategy.value, n=n):
                    board, restarts, changes = solve(n, strategy, rng=random.Random(n), max_restarts=MAX_RESTARTS)
                    self.assertEqual(board.n, n)
                    self.assertEqual(board.total_conflicts, 0)
                    self.assertTrue(is_valid_solution(board.placement))
                    _assert_solution(self, board.placement)
                    self.assertGreaterEqual(restarts, 0)
                    self.assertGreaterEqual(changes, 0)

    def test_single_queen_needs_no_work(self):
        for strategy in Strategy:
            board, restarts, changes = solve(1, strategy, rng=random.Random(0))
            self.assertEqual(board.placement, [0])
            self.assertEqual((restarts, changes), (0, 0))

    def test_min_conflicts_changes_within_budget(self):
        for seed in range(10):
            _, _, changes = solve(8, "min-conflicts", rng=random.Random(seed), max_restarts=MAX_RESTARTS)
            self.assertLessEqual(changes, 64)

    def test_same_seed_same_result(self):
        for strategy in Strategy:
            first = solve(12, strategy, rng=random.Random(2024), max_restarts=MAX_RESTARTS)
            second = solve(12, strategy, rng=random.Random(2024), max_restarts=MAX_RESTARTS)
            self.assertEqual(first[0].placement, second[0].placement)
            self.assertEqual(first[1:], second[1:])

    def test_history_traces_successful_attempt(self):
        history = []
        board, _, changes = solve(10, "hill-climbing", rng=random.Random(6), max_restarts=MAX_RESTARTS, history=history)
        self.assertEqual(len(history), changes + 1)
        self.assertEqual(history[-1], 0)
        self.assertEqual(board.total_conflicts, 0)

    def test_unsolvable_sizes_are_rejected(self):
        for n in (0, 2, 3):
            with self.assertRaises(ValueError):
                solve(n, "min-conflicts", rng=random.Random(0))

    def test_counters_reset_between_attempts(self):
        attempts = [(Outcome.STUCK, 4), (Outcome.EXHAUSTED, 7), (Outcome.SOLVED, 2)]
        with mock.patch("nqsearch.restart.run_attempt", side_effect=attempts) as attempt:
            _, restarts, changes = solve(6, "hill-climbing", rng=random.Random(0))
        self.assertEqual(attempt.call_count, 3)
        self.assertEqual((restarts, changes), (2, 2))

    def test_each_attempt_gets_a_fresh_board(self):
        boards = []

        def fake_attempt(board, strategy, rng, history=None):
            boards.append(board)
            return (Outcome.SOLVED, 0) if len(boards) == 3 else (Outcome.STUCK, 0)

        with mock.patch("nqsearch.restart.run_attempt", side_effect=fake_attempt):
            solve(8, "hill-climbing", rng=random.Random(0))
        self.assertEqual(len({id(b) for b in boards}), 3)

    def test_restart_ceiling(self):
        with mock.patch("nqsearch.restart.run_attempt", return_value=(Outcome.STUCK, 3)) as attempt:
            with self.assertRaises(RestartLimitExceeded) as ctx:
                solve(8, Strategy.HILL_CLIMBING, rng=random.Random(0), max_restarts=5)
        # the first attempt plus five restarts
        self.assertEqual(attempt.call_count, 6)
        self.assertEqual(ctx.exception.restarts, 5)
        self.assertEqual(ctx.exception.n, 8)

    def test_timed_solve(self):
        board, restarts, changes, elapsed_ms = timed_solve(8, "min-conflicts", rng=random.Random(1), max_restarts=MAX_RESTARTS)
        self.assertTrue(is_valid_solution(board.placement))
        self.assertGreaterEqual(elapsed_ms, 0.0)


class StrategyTests(unittest.TestCase):

    def test_lookup_by_name(self):
        self.assertIs(get_strategy("hill-climbing"), Strategy.HILL_CLIMBING)
        self.assertIs(get_strategy("MIN_CONFLICTS"), Strategy.MIN_CONFLICTS)
        self.assertIs(get_strategy(Strategy.MIN_CONFLICTS), Strategy.MIN_CONFLICTS)

    def test_unknown_strategy(self):
        with self.assertRaises(ValueError):
            get_strategy("simulated-annealing")
        with self.assertRaises(ValueError):
            solve(8, "backtracking")

    def test_labels(self):
        self.assertEqual(Strategy.HILL_CLIMBING.label, "Hill Climbing")
        self.assertEqual(Strategy.MIN_CONFLICTS.label, "Min Conflict CSP")


if __name__ == "__main__":
    unittest.main()
