"""Backtracking solver for the N-Queens problem.

This module provides the deterministic placement step of puzzle generation:

- bt_queens_first(size, time_limit=None): a plain left-to-right iterative
    backtracking search that returns the first solution found, together with
    search-effort counters and a timeout flag.
- solve(size): the plain contract used by the puzzle generator; returns the
    placement or ``None`` when the board admits no solution.

Implementation overview
-----------------------
- State representation: a solution is a size-length list ``placement`` where
    ``placement[r] = c`` means a queen on row r, column c; ``-1`` means the
    row is still unassigned.
- Constraint tracking: three boolean tables give O(1) checks for column and
    diagonal availability: ``col_used[c]``, ``diag1_used[r-c+offset]``,
    ``diag2_used[r+c]``, where ``offset = size - 1`` maps negative indices to
    [0..].
- Search strategy: depth-first search implemented iteratively (rows advance,
    columns are scanned left to right, the previous row is undone when a row
    runs out of columns), avoiding Python recursion limits.

Determinism
-----------
Rows are assigned in order 0..N-1 and columns are tried 0..N-1 inside each row,
so the result is the lexicographically first solution and identical on every
call. No randomness is involved.
"""

from __future__ import annotations

from time import perf_counter
from typing import List, Optional, Tuple


def bt_queens_first(size: int, time_limit: Optional[float] = None) -> Tuple[Optional[List[int]], int, float, bool]:
    """Find the first solution via plain iterative backtracking.

    Parameters
    ----------
    size : int
        Board dimension N (N >= 0).
    time_limit : float | None
        Optional wall-clock time limit in seconds.

    Returns
    -------
    (solution, nodes_explored, elapsed_seconds, timed_out)
        - solution: list[int] of length N with ``solution[row] = col``, or
          None when no placement exists (N = 2, 3) or the limit expired.
        - nodes_explored: int, number of candidate placements considered.
        - elapsed_seconds: float, total wall time.
        - timed_out: bool, True only when ``time_limit`` expired before the
          search finished; False when the board simply has no solution.

    Raises
    ------
    ValueError
        If ``size`` is negative.
    """
    if size < 0:
        raise ValueError(f"Board size must be non-negative, got {size}")

    start = perf_counter()
    if size == 0:
        # The empty board is trivially solved by the empty placement.
        return [], 0, perf_counter() - start, False

    placement = [-1] * size
    col_used = [False] * size
    diag1_used = [False] * (2 * size - 1)
    diag2_used = [False] * (2 * size - 1)
    offset = size - 1

    row = 0
    col = 0
    explored = 0

    # Advance row by row, backtracking when no safe column remains.
    while 0 <= row < size:
        if time_limit is not None and (perf_counter() - start) > time_limit:
            return None, explored, perf_counter() - start, True

        placed = False
        while col < size and not placed:
            explored += 1
            diag1_index = row - col + offset
            diag2_index = row + col
            if not col_used[col] and not diag1_used[diag1_index] and not diag2_used[diag2_index]:
                placement[row] = col
                col_used[col] = True
                diag1_used[diag1_index] = True
                diag2_used[diag2_index] = True
                placed = True
                if row == size - 1:
                    return placement.copy(), explored, perf_counter() - start, False
                row += 1
                col = 0
            else:
                col += 1

        if not placed:
            # Exhausted all columns in this row; undo the previous decision.
            row -= 1
            if row >= 0:
                previous_col = placement[row]
                placement[row] = -1
                col_used[previous_col] = False
                diag1_used[row - previous_col + offset] = False
                diag2_used[row + previous_col] = False
                col = previous_col + 1

    return None, explored, perf_counter() - start, False


def solve(size: int) -> Optional[List[int]]:
    """Return the first N-Queens placement for ``size``, or None.

    ``solve(0) == []``, ``solve(1) == [0]``, ``solve(4) == [1, 3, 0, 2]``;
    sizes 2 and 3 return None.
    """
    solution, _, _, _ = bt_queens_first(size)
    return solution
