"""Tests for region growing, coloring and matrix construction."""

from pathlib import Path
import random
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from queenregions.backtracking import solve
from queenregions.regions import (
    PASTEL_PALETTE,
    build_color_matrix,
    build_solution_matrix,
    color_regions,
    grow_regions,
)
from queenregions.utils import is_connected


class _ScriptedRng:
    """Always picks the first candidate."""

    def randrange(self, stop):
        return 0


class GrowRegionsTests(unittest.TestCase):

    def assert_partition(self, n, placement, regions):
        self.assertEqual(len(regions), n)
        all_cells = [cell for region in regions for cell in region]
        self.assertEqual(len(all_cells), n * n)
        self.assertEqual(set(all_cells), {(r, c) for r in range(n) for c in range(n)})
        queens = {(row, col) for row, col in enumerate(placement)}
        for index, region in enumerate(regions):
            self.assertEqual(region[0], (index, placement[index]))
            self.assertEqual(len(set(region) & queens), 1)
            self.assertTrue(is_connected(region))

    def test_partition_invariants_across_seeds(self):
        for n in (1, 4, 5, 6, 8, 12):
            placement = solve(n)
            for seed in range(5):
                with self.subTest(n=n, seed=seed):
                    regions = grow_regions(n, placement, random.Random(seed))
                    self.assert_partition(n, placement, regions)

    def test_same_seed_same_regions(self):
        placement = solve(8)
        first = grow_regions(8, placement, random.Random(123))
        second = grow_regions(8, placement, random.Random(123))
        self.assertEqual(first, second)

    def test_default_rng_still_partitions(self):
        placement = solve(6)
        self.assert_partition(6, placement, grow_regions(6, placement))

    def test_scripted_rng_is_deterministic(self):
        # First-choice picks: (0, 1) has no upper neighbour, so it claims (1, 1).
        placement = solve(4)
        regions = grow_regions(4, placement, _ScriptedRng())
        self.assert_partition(4, placement, regions)
        self.assertEqual(regions[0][:2], [(0, 1), (1, 1)])

    def test_single_cell_board(self):
        self.assertEqual(grow_regions(1, [0], random.Random(0)), [[(0, 0)]])

    def test_empty_board(self):
        self.assertEqual(grow_regions(0, [], random.Random(0)), [])

    def test_placement_length_mismatch(self):
        with self.assertRaises(ValueError):
            grow_regions(4, [1, 3, 0], random.Random(0))


class ColoringTests(unittest.TestCase):

    def test_colors_follow_palette_order(self):
        regions = [[(0, 0)], [(0, 1)], [(0, 2)]]
        self.assertEqual(color_regions(regions), PASTEL_PALETTE[:3])

    def test_palette_cycles_past_its_length(self):
        regions = [[(0, i)] for i in range(12)]
        colors = color_regions(regions)
        self.assertEqual(colors[10], PASTEL_PALETTE[0])
        self.assertEqual(colors[11], PASTEL_PALETTE[1])

    def test_custom_palette(self):
        self.assertEqual(color_regions([[(0, 0)], [(1, 1)]], ["red"]), ["red", "red"])

    def test_empty_palette_rejected(self):
        with self.assertRaises(ValueError):
            color_regions([[(0, 0)]], [])

    def test_color_matrix_fully_filled(self):
        n = 12
        placement = solve(n)
        regions = grow_regions(n, placement, random.Random(4))
        matrix = build_color_matrix(n, regions, color_regions(regions))
        filled = [color for row in matrix for color in row]
        self.assertEqual(len(filled), n * n)
        self.assertTrue(all(filled))
        self.assertLessEqual(len(set(filled)), min(n, len(PASTEL_PALETTE)))

    def test_color_matrix_rejects_uncovered_board(self):
        with self.assertRaises(AssertionError):
            build_color_matrix(2, [[(0, 0)]], ["red"])


class SolutionMatrixTests(unittest.TestCase):

    def test_marks_exactly_the_queens(self):
        placement = [1, 3, 0, 2]
        matrix = build_solution_matrix(4, placement)
        marked = {(r, c) for r in range(4) for c in range(4) if matrix[r][c] is not None}
        self.assertEqual(marked, {(0, 1), (1, 3), (2, 0), (3, 2)})
        self.assertEqual(matrix[0][1], "Q")

    def test_custom_marker(self):
        self.assertEqual(build_solution_matrix(1, [0], marker="*"), [["*"]])


if __name__ == "__main__":
    unittest.main()
