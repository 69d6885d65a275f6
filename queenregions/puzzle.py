"""Puzzle generation: solve the board, then grow colored regions around it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from .backtracking import solve
from .regions import (
    PASTEL_PALETTE,
    QUEEN_MARKER,
    build_color_matrix,
    build_solution_matrix,
    color_regions,
    grow_regions,
)
from .utils import Cell, empty_matrix


class UnsolvableBoardError(ValueError):
    """Raised when no N-Queens placement exists for the requested size."""

    def __init__(self, size: int):
        super().__init__(f"Could not solve standard N-Queens for size {size}")
        self.size = size


@dataclass
class Puzzle:
    """A generated queens-and-regions puzzle and its intended solution."""

    size: int
    placement: List[int]
    regions: List[List[Cell]]
    colors: List[str]
    color_matrix: List[List[str]]
    solution_matrix: List[List[Optional[str]]]


def generate_empty_board(size: int) -> List[List[Optional[str]]]:
    """Return an N×N board with every cell empty."""
    return empty_matrix(size)


def generate_puzzle(
    size: int,
    rng: Optional[Any] = None,
    palette: Optional[Sequence[str]] = None,
    marker: str = QUEEN_MARKER,
) -> Puzzle:
    """Generate a solvable puzzle of side ``size``.

    The placement is deterministic; only region shapes depend on ``rng``.
    Pass a seeded ``random.Random`` for reproducible output.

    Raises
    ------
    UnsolvableBoardError
        If ``size`` admits no N-Queens placement (2 and 3).
    """
    placement = solve(size)
    if placement is None:
        raise UnsolvableBoardError(size)
    return build_puzzle(size, placement, rng, palette, marker)


def build_puzzle(
    size: int,
    placement: List[int],
    rng: Optional[Any] = None,
    palette: Optional[Sequence[str]] = None,
    marker: str = QUEEN_MARKER,
) -> Puzzle:
    """Grow and color regions around an already solved ``placement``."""
    regions = grow_regions(size, placement, rng)
    colors = color_regions(regions, palette if palette is not None else PASTEL_PALETTE)
    return Puzzle(
        size=size,
        placement=placement,
        regions=regions,
        colors=colors,
        color_matrix=build_color_matrix(size, regions, colors),
        solution_matrix=build_solution_matrix(size, placement, marker),
    )
