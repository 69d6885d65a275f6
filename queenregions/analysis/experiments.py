"""Batch experiment runners for puzzle generation (sequential and parallel).

These routines generate repeatable batches of puzzles over a set of board
sizes and collect, per run, the solver effort and the shape of the grown
regions. Per-run seeds are derived from a base seed so a batch can be replayed
exactly. Validation hooks optionally re-check every puzzle invariant.
"""
from __future__ import annotations

import random
from concurrent.futures import ProcessPoolExecutor
from time import perf_counter
from typing import Dict, List, Optional, Sequence, Tuple

from . import settings
from .stats import (
    BatchResults,
    ProgressPrinter,
    PuzzleRecord,
    aggregate_records,
    summarize_regions,
)
from queenregions.backtracking import bt_queens_first
from queenregions.puzzle import Puzzle, build_puzzle
from queenregions.utils import is_connected, is_valid_placement


def validate_puzzle(puzzle: Puzzle) -> None:
    """Assert every structural invariant of a generated puzzle.

    Checks the placement, full and disjoint coverage by the regions, one queen
    per region, 4-connectivity of each region, the color matrix and the
    solution matrix. Raises ``AssertionError`` describing the first violation.
    """
    n = puzzle.size
    if len(puzzle.placement) != n or not is_valid_placement(puzzle.placement):
        raise AssertionError(f"Invalid placement for N={n}: {puzzle.placement}")
    if len(puzzle.regions) != n:
        raise AssertionError(f"Expected {n} regions, got {len(puzzle.regions)}")

    queens = {(row, col) for row, col in enumerate(puzzle.placement)}
    seen = set()
    for index, region in enumerate(puzzle.regions):
        cells = set(region)
        if len(cells) != len(region) or seen & cells:
            raise AssertionError(f"Region {index} overlaps another region")
        seen |= cells
        if len(cells & queens) != 1:
            raise AssertionError(f"Region {index} holds {len(cells & queens)} queens")
        if not is_connected(cells):
            raise AssertionError(f"Region {index} is not 4-connected")
    if len(seen) != n * n:
        raise AssertionError(f"Regions cover {len(seen)} of {n * n} cells")

    filled = [color for row in puzzle.color_matrix for color in row if color is not None]
    if len(puzzle.color_matrix) != n or len(filled) != n * n:
        raise AssertionError("Color matrix is not fully filled")
    if len(set(filled)) > n:
        raise AssertionError("Color matrix uses more colors than regions")

    marked = {
        (row, col)
        for row, cells in enumerate(puzzle.solution_matrix)
        for col, value in enumerate(cells)
        if value is not None
    }
    if marked != queens:
        raise AssertionError("Solution matrix does not match the placement")


def run_single_puzzle(params: Tuple[int, int, Optional[int], Optional[float], bool]) -> PuzzleRecord:
    """Worker wrapper generating one puzzle (for parallel mapping).

    ``params`` is ``(size, run, seed, time_limit, validate)``.
    """
    size, run, seed, time_limit, validate = params
    solution, nodes, solver_time, timed_out = bt_queens_first(size, time_limit=time_limit)
    if solution is None:
        return {
            "size": size,
            "run": run,
            "seed": seed,
            "success": False,
            "timeout": timed_out,
            "solver_nodes": nodes,
            "solver_time": solver_time,
            "partition_time": 0.0,
            "region_sizes": [],
            "largest": 0,
            "smallest": 0,
            "imbalance": 0.0,
        }

    start = perf_counter()
    puzzle = build_puzzle(size, solution, random.Random(seed), settings.PALETTE, settings.QUEEN_MARKER_TEXT)
    partition_time = perf_counter() - start
    if validate:
        validate_puzzle(puzzle)

    summary = summarize_regions(puzzle)
    return {
        "size": size,
        "run": run,
        "seed": seed,
        "success": True,
        "timeout": False,
        "solver_nodes": nodes,
        "solver_time": solver_time,
        "partition_time": partition_time,
        "region_sizes": summary["region_sizes"],
        "largest": summary["largest"],
        "smallest": summary["smallest"],
        "imbalance": summary["imbalance"],
    }


def _build_tasks(
    N_values: Sequence[int],
    runs: int,
    seed: Optional[int],
    time_limit: Optional[float],
    validate: bool,
) -> List[Tuple[int, int, Optional[int], Optional[float], bool]]:
    tasks = []
    for N in N_values:
        for run in range(runs):
            run_seed = None if seed is None else seed + run
            tasks.append((N, run, run_seed, time_limit, validate))
    return tasks


def _group_by_size(N_values: Sequence[int], records: List[PuzzleRecord]) -> BatchResults:
    grouped: Dict[int, List[PuzzleRecord]] = {N: [] for N in N_values}
    for record in records:
        grouped[record["size"]].append(record)
    return {N: aggregate_records(grouped[N]) for N in N_values}


def run_batch(
    N_values: Sequence[int],
    runs: int,
    seed: Optional[int] = None,
    time_limit: Optional[float] = None,
    validate: bool = False,
    progress_label: Optional[str] = None,
) -> BatchResults:
    """Generate ``runs`` puzzles for every N sequentially and aggregate them.

    Unsolvable sizes are recorded as failed runs rather than aborting the batch.
    """
    if runs < 1:
        raise ValueError(f"runs must be >= 1, got {runs}")
    progress = ProgressPrinter(len(N_values), progress_label) if progress_label else None

    records: List[PuzzleRecord] = []
    for index, N in enumerate(N_values, start=1):
        if progress:
            progress.update(index, f"N={N}")
        for task in _build_tasks([N], runs, seed, time_limit, validate):
            records.append(run_single_puzzle(task))
    return _group_by_size(N_values, records)


def run_batch_parallel(
    N_values: Sequence[int],
    runs: int,
    seed: Optional[int] = None,
    time_limit: Optional[float] = None,
    validate: bool = False,
    max_workers: Optional[int] = None,
    progress_label: Optional[str] = None,
) -> BatchResults:
    """Parallel variant of ``run_batch`` using a process pool.

    Produces the same records as the sequential runner for the same seed
    because every run owns its own ``random.Random`` instance.
    """
    if runs < 1:
        raise ValueError(f"runs must be >= 1, got {runs}")
    tasks = _build_tasks(N_values, runs, seed, time_limit, validate)
    progress = ProgressPrinter(len(tasks), progress_label) if progress_label else None

    records: List[PuzzleRecord] = []
    with ProcessPoolExecutor(max_workers=max_workers or settings.NUM_PROCESSES) as executor:
        for index, record in enumerate(executor.map(run_single_puzzle, tasks), start=1):
            records.append(record)
            if progress and index % max(1, runs) == 0:
                progress.update(index, f"N={record['size']}")
    return _group_by_size(N_values, records)
