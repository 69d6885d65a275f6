"""CSV and JSON export utilities for puzzles and batch results.

These helpers materialize a single puzzle cell by cell, per-N aggregate
summaries of a batch, and the full per-run raw data for downstream analysis or
spreadsheet inspection.
"""
from __future__ import annotations

import csv
import json
import os
from typing import List, Sequence

from . import settings
from .stats import BatchResults, PuzzleRecord, records_to_frame
from queenregions.puzzle import Puzzle
from queenregions.utils import region_index_matrix


def save_puzzle_to_csv(puzzle: Puzzle, filename: str) -> str:
    """Write one row per cell: row, col, region, color, queen (0/1)."""
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)
    owners = region_index_matrix(puzzle.size, puzzle.regions)

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["row", "col", "region", "color", "queen"])
        for row in range(puzzle.size):
            for col in range(puzzle.size):
                writer.writerow([
                    row,
                    col,
                    owners[row][col],
                    puzzle.color_matrix[row][col],
                    int(puzzle.solution_matrix[row][col] is not None),
                ])
    return filename


def save_puzzle_to_json(puzzle: Puzzle, filename: str) -> str:
    """Write the puzzle as ``{"size", "placement", "colorMatrix", "solutionMatrix"}``.

    The matrix keys follow the camelCase shape consumed by web front ends.
    """
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)
    payload = {
        "size": puzzle.size,
        "placement": puzzle.placement,
        "colorMatrix": puzzle.color_matrix,
        "solutionMatrix": puzzle.solution_matrix,
    }
    with open(filename, "w") as f:
        json.dump(payload, f, indent=2)
    return filename


def save_batch_to_csv(results: BatchResults, N_values: Sequence[int], out_dir: str) -> str:
    """Write compact per-N aggregate metrics to ``batch_summary<suffix>.csv``."""
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"batch_summary{settings.date_suffix()}.csv")

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow([
            "n",
            "total_runs",
            "successes",
            "success_rate",
            "failures",
            "timeouts",
            "solver_nodes",
            "solver_time_seconds",
            "largest_region_mean",
            "largest_region_max",
            "smallest_region_mean",
            "smallest_region_min",
            "imbalance_mean",
            "imbalance_std",
            "partition_time_mean",
        ])
        for N in N_values:
            entry = results.get(N, {})
            largest = entry.get("largest_region", {})
            smallest = entry.get("smallest_region", {})
            imbalance = entry.get("imbalance", {})
            partition = entry.get("partition_time", {})
            writer.writerow([
                N,
                entry.get("total_runs", 0),
                entry.get("successes", 0),
                entry.get("success_rate", 0.0),
                entry.get("failures", 0),
                entry.get("timeouts", 0),
                entry.get("solver_nodes", 0),
                entry.get("solver_time", 0.0),
                largest.get("mean"),
                largest.get("max"),
                smallest.get("mean"),
                smallest.get("min"),
                imbalance.get("mean"),
                imbalance.get("std"),
                partition.get("mean"),
            ])
    print(f"Batch summary saved to {filename}")
    return filename


def collect_raw_runs(results: BatchResults, N_values: Sequence[int]) -> List[PuzzleRecord]:
    """Concatenate the raw per-run records of every N, in N order."""
    records: List[PuzzleRecord] = []
    for N in N_values:
        records.extend(results.get(N, {}).get("raw_runs", []))
    return records


def save_raw_runs_to_csv(results: BatchResults, N_values: Sequence[int], out_dir: str) -> str:
    """Write every individual run to ``raw_runs<suffix>.csv`` via pandas."""
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"raw_runs{settings.date_suffix()}.csv")
    frame = records_to_frame(collect_raw_runs(results, N_values))
    frame.to_csv(filename, index=False)
    print(f"Raw runs saved to {filename}")
    return filename
