"""Tests for the N-Queens backtracking solver."""

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from queenregions.backtracking import bt_queens_first, solve
from queenregions.utils import is_valid_placement


class SolveTests(unittest.TestCase):

    def test_solvable_sizes_return_valid_placements(self):
        for n in (1, 4, 5, 6, 7, 8, 10):
            with self.subTest(n=n):
                placement = solve(n)
                self.assertIsNotNone(placement)
                self.assertEqual(len(placement), n)
                self.assertEqual(len(set(placement)), n)
                for r1 in range(n):
                    for r2 in range(r1 + 1, n):
                        self.assertNotEqual(abs(r1 - r2), abs(placement[r1] - placement[r2]))
                self.assertTrue(is_valid_placement(placement))

    def test_unsolvable_sizes_return_none(self):
        self.assertIsNone(solve(2))
        self.assertIsNone(solve(3))

    def test_first_solution_in_column_order(self):
        self.assertEqual(solve(1), [0])
        self.assertEqual(solve(4), [1, 3, 0, 2])
        self.assertEqual(solve(5), [0, 2, 4, 1, 3])
        self.assertEqual(solve(8), [0, 4, 7, 5, 2, 6, 1, 3])

    def test_empty_board(self):
        self.assertEqual(solve(0), [])

    def test_repeated_calls_are_identical(self):
        self.assertEqual(solve(6), solve(6))
        self.assertEqual(solve(4), solve(4))

    def test_negative_size_rejected(self):
        with self.assertRaises(ValueError):
            solve(-1)


class InstrumentedSolverTests(unittest.TestCase):

    def test_reports_nodes_and_time(self):
        solution, nodes, elapsed, timed_out = bt_queens_first(8)
        self.assertEqual(solution, solve(8))
        self.assertGreater(nodes, 0)
        self.assertGreaterEqual(elapsed, 0.0)
        self.assertFalse(timed_out)

    def test_failure_still_counts_nodes(self):
        solution, nodes, _, timed_out = bt_queens_first(3)
        self.assertIsNone(solution)
        self.assertGreater(nodes, 0)
        self.assertFalse(timed_out)

    def test_time_limit_expired(self):
        solution, _, _, timed_out = bt_queens_first(28, time_limit=-1.0)
        self.assertIsNone(solution)
        self.assertTrue(timed_out)


if __name__ == "__main__":
    unittest.main()
