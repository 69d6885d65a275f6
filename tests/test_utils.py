"""Tests for board helper primitives."""

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from queenregions.utils import (
    conflicts,
    empty_matrix,
    is_connected,
    is_valid_placement,
    neighbors,
    region_index_matrix,
)


class UtilsTests(unittest.TestCase):

    def test_conflicts(self):
        self.assertEqual(conflicts([1, 3, 0, 2]), 0)
        self.assertEqual(conflicts([0, 1, 2, 3]), 6)
        self.assertEqual(conflicts([0, 0]), 1)

    def test_is_valid_placement(self):
        self.assertTrue(is_valid_placement([1, 3, 0, 2]))
        self.assertTrue(is_valid_placement([]))
        self.assertFalse(is_valid_placement([0, 2, 1]))
        self.assertFalse(is_valid_placement([1, 4, 0, 2]))
        self.assertFalse(is_valid_placement([True]))

    def test_neighbors_order_and_bounds(self):
        self.assertEqual(neighbors(1, 1, 3), [(0, 1), (2, 1), (1, 0), (1, 2)])
        self.assertEqual(neighbors(0, 0, 3), [(1, 0), (0, 1)])
        self.assertEqual(neighbors(0, 0, 1), [])

    def test_is_connected(self):
        self.assertTrue(is_connected([(0, 0), (0, 1), (1, 1)]))
        self.assertFalse(is_connected([(0, 0), (1, 1)]))
        self.assertFalse(is_connected([]))

    def test_region_index_matrix(self):
        matrix = region_index_matrix(2, [[(0, 0), (1, 0)], [(0, 1)]])
        self.assertEqual(matrix, [[0, 1], [0, -1]])

    def test_empty_matrix_rows_are_independent(self):
        matrix = empty_matrix(2)
        matrix[0][0] = "x"
        self.assertIsNone(matrix[1][0])


if __name__ == "__main__":
    unittest.main()
