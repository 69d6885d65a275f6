"""Queens-and-regions puzzle generation."""

from .backtracking import bt_queens_first, solve
from .puzzle import Puzzle, UnsolvableBoardError, generate_empty_board, generate_puzzle
from .regions import PASTEL_PALETTE, build_color_matrix, build_solution_matrix, color_regions, grow_regions
from .utils import conflicts, is_connected, is_valid_placement, neighbors

__all__ = [
    "bt_queens_first",
    "solve",
    "Puzzle",
    "UnsolvableBoardError",
    "generate_empty_board",
    "generate_puzzle",
    "PASTEL_PALETTE",
    "grow_regions",
    "color_regions",
    "build_color_matrix",
    "build_solution_matrix",
    "conflicts",
    "is_connected",
    "is_valid_placement",
    "neighbors",
]
