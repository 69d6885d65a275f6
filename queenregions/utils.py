"""Utility helpers for the queens-and-regions project.

Low-level board primitives shared by the solver, the region partitioner and the
analysis layer.

Representation
--------------
Placements are encoded as a 1D list where ``placement[row] = col``. Cells are
``(row, col)`` tuples, 0-indexed from the top-left corner.
"""

from __future__ import annotations

from collections import Counter, deque
from typing import Iterable, List, Optional, Sequence, Tuple

Cell = Tuple[int, int]


def conflicts(placement: Sequence[int]) -> int:
    """Compute the number of conflicting queen pairs in O(N).

    Rows are unique by representation, so only columns and the two diagonal
    families are counted.
    """
    col_count: Counter[int] = Counter()
    diag1: Counter[int] = Counter()
    diag2: Counter[int] = Counter()

    for row, col in enumerate(placement):
        col_count[col] += 1
        diag1[row - col] += 1
        diag2[row + col] += 1

    def _pairs(counter: Counter[int]) -> int:
        total = 0
        for count in counter.values():
            if count > 1:
                total += count * (count - 1) // 2
        return total

    return _pairs(col_count) + _pairs(diag1) + _pairs(diag2)


def is_valid_placement(placement: Sequence[int]) -> bool:
    """Return True if ``placement`` is a valid N-Queens solution.

    Contract
    - Input: sequence of length N where placement[row] = col (0-based)
    - Valid if: all 0 <= col < N and no pair of queens attacks each other
    - The empty placement is the (trivial) solution for N = 0
    """
    n = len(placement)
    for col in placement:
        if not isinstance(col, int) or isinstance(col, bool):
            return False
        if col < 0 or col >= n:
            return False
    return conflicts(placement) == 0


def neighbors(row: int, col: int, size: int) -> List[Cell]:
    """Return the in-bounds up, down, left and right neighbours of a cell."""
    candidates = [
        (row - 1, col),
        (row + 1, col),
        (row, col - 1),
        (row, col + 1),
    ]
    return [(r, c) for r, c in candidates if 0 <= r < size and 0 <= c < size]


def is_connected(cells: Iterable[Cell]) -> bool:
    """Return True if ``cells`` form one component under 4-adjacency.

    An empty collection is not considered connected.
    """
    remaining = set(cells)
    if not remaining:
        return False
    start = next(iter(remaining))
    queue = deque([start])
    seen = {start}
    while queue:
        r, c = queue.popleft()
        for cell in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if cell in remaining and cell not in seen:
                seen.add(cell)
                queue.append(cell)
    return len(seen) == len(remaining)


def empty_matrix(size: int) -> List[List[Optional[str]]]:
    """Build an N×N matrix filled with ``None``."""
    return [[None] * size for _ in range(size)]


def region_index_matrix(size: int, regions: Sequence[Sequence[Cell]]) -> List[List[int]]:
    """Map every cell to the index of the region that owns it (-1 if none)."""
    matrix = [[-1] * size for _ in range(size)]
    for index, region in enumerate(regions):
        for row, col in region:
            matrix[row][col] = index
    return matrix
