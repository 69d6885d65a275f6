"""Randomized region growing around a queen placement.

Every queen seeds one region. Regions take turns (in row order of their queen)
claiming one unassigned 4-neighbour of a randomly chosen frontier cell, until
the whole board is claimed. Regions whose frontier runs dry simply stop
growing, so region sizes can be very uneven; no balancing is applied.
"""

from __future__ import annotations

import random
from typing import Any, List, Optional, Sequence

from .utils import Cell, empty_matrix, neighbors

# Display colors, assigned by region index and cycled past the tenth region.
PASTEL_PALETTE: List[str] = [
    "#FFB3BA",
    "#BAFFC9",
    "#BAE1FF",
    "#FFFFBA",
    "#FFDFBA",
    "#D7BAFF",
    "#F0E68C",
    "#AFEEEE",
    "#FFC0CB",
    "#E6E6FA",
]

QUEEN_MARKER = "Q"


def grow_regions(size: int, placement: Sequence[int], rng: Optional[Any] = None) -> List[List[Cell]]:
    """Partition the board into one connected region per queen.

    Parameters
    ----------
    size : int
        Board dimension N.
    placement : Sequence[int]
        Valid queen placement, ``placement[row] = col``.
    rng : random.Random | None
        Source of randomness; anything with ``randrange`` works. Defaults to
        the process-wide ``random`` module.

    Returns
    -------
    list[list[Cell]]
        ``regions[i]`` lists the cells of the region seeded by the queen in
        row i, seed first, then in the order they were claimed.
    """
    if len(placement) != size:
        raise ValueError(f"Placement has {len(placement)} rows, expected {size}")
    if rng is None:
        rng = random

    regions: List[List[Cell]] = [[(row, col)] for row, col in enumerate(placement)]
    frontiers: List[List[Cell]] = [list(region) for region in regions]
    assigned = {cell for region in regions for cell in region}
    total = size * size

    while len(assigned) < total:
        grew = False
        for index, frontier in enumerate(frontiers):
            if not frontier:
                continue

            current = frontier[rng.randrange(len(frontier))]
            free = [cell for cell in neighbors(current[0], current[1], size) if cell not in assigned]
            if not free:
                frontier.remove(current)
                continue

            chosen = free[rng.randrange(len(free))]
            regions[index].append(chosen)
            frontier.append(chosen)
            assigned.add(chosen)
            grew = True

        if not grew and not any(frontiers):
            raise AssertionError(
                f"Region growth stalled with {total - len(assigned)} unassigned cells"
            )

    return regions


def color_regions(regions: Sequence[Sequence[Cell]], palette: Sequence[str] = PASTEL_PALETTE) -> List[str]:
    """Return one color per region, cycling through ``palette``."""
    if not palette:
        raise ValueError("Palette must contain at least one color")
    return [palette[index % len(palette)] for index in range(len(regions))]


def build_color_matrix(
    size: int,
    regions: Sequence[Sequence[Cell]],
    colors: Sequence[str],
) -> List[List[str]]:
    """Paint every cell with the color of its owning region."""
    matrix = empty_matrix(size)
    for region, color in zip(regions, colors):
        for row, col in region:
            matrix[row][col] = color
    for row in matrix:
        assert all(color is not None for color in row), "unclaimed cell in color matrix"
    return matrix  # type: ignore[return-value]


def build_solution_matrix(size: int, placement: Sequence[int], marker: str = QUEEN_MARKER) -> List[List[Optional[str]]]:
    """Mark queen cells with ``marker`` and leave every other cell as None."""
    matrix = empty_matrix(size)
    for row, col in enumerate(placement):
        matrix[row][col] = marker
    return matrix
