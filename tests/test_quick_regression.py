"""Quick regression tests for the puzzle generation pipeline."""

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from queenregions.analysis import cli


class QuickRegressionTests(unittest.TestCase):
    """Verify that the lightweight regression checks pass."""

    def test_solver_puzzle_and_csv_generation(self):
        """Ensure solving, region growing, and CSV export succeed."""
        cli.run_quick_regression_tests()


if __name__ == "__main__":
    unittest.main()
