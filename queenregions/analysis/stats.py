"""Typed result shapes and statistics helpers for the analysis pipeline.

Defines ``TypedDict`` structures for batch outputs and provides utilities to
summarize region layouts of generated puzzles and aggregate them across runs.
"""
from __future__ import annotations

import statistics
from typing import Dict, List, Optional, TypedDict

import numpy as np
import pandas as pd

from queenregions.puzzle import Puzzle


class StatsSummary(TypedDict, total=False):
    count: int
    mean: Optional[float]
    median: Optional[float]
    std: Optional[float]
    min: Optional[float]
    max: Optional[float]
    q25: Optional[float]
    q75: Optional[float]
    range: Optional[float]


class RegionSummary(TypedDict):
    region_sizes: List[int]
    largest: int
    smallest: int
    imbalance: float


class PuzzleRecord(TypedDict):
    size: int
    run: int
    seed: Optional[int]
    success: bool
    timeout: bool
    solver_nodes: int
    solver_time: float
    partition_time: float
    region_sizes: List[int]
    largest: int
    smallest: int
    imbalance: float


class BatchEntry(TypedDict, total=False):
    total_runs: int
    successes: int
    failures: int
    timeouts: int
    success_rate: float
    timeout_rate: float
    solver_nodes: int
    solver_time: float
    largest_region: StatsSummary
    smallest_region: StatsSummary
    imbalance: StatsSummary
    partition_time: StatsSummary
    raw_runs: List[PuzzleRecord]


BatchResults = Dict[int, BatchEntry]


class ProgressPrinter:
    """Minimal, stdout-only progress reporter for long-running loops.

    Parameters
    ----------
    total : int
        Total number of steps expected. Values <= 0 are coerced to 1 to avoid
        division by zero when reporting percentages.
    label : str
        Short label printed in front of the progress counters.
    """

    def __init__(self, total: int, label: str):
        self.total = max(1, total)
        self.label = label

    def update(self, index: int, detail: str = "") -> None:
        """Print a single-line progress update to stdout."""
        percent = (index / self.total) * 100
        suffix = f" - {detail}" if detail else ""
        print(f"[{self.label}] {index}/{self.total} ({percent:.0f}%)" + suffix)


def compute_detailed_statistics(values: List[float]) -> StatsSummary:
    """Compute summary statistics for a numeric sequence.

    Returns count, mean, median, population std, min, max, 25th and 75th
    percentiles and range. When ``values`` is empty every numeric field is
    ``None`` and ``count`` is 0 to keep CSV generation consistent.
    """
    if not values:
        return {
            "count": 0,
            "mean": None,
            "median": None,
            "std": None,
            "min": None,
            "max": None,
            "q25": None,
            "q75": None,
            "range": None,
        }

    sorted_vals = sorted(values)
    n = len(values)
    min_val = min(values)
    max_val = max(values)

    return {
        "count": n,
        "mean": statistics.mean(values),
        "median": statistics.median(values),
        "std": statistics.pstdev(values) if n > 1 else 0.0,
        "min": min_val,
        "max": max_val,
        "q25": sorted_vals[n // 4] if n >= 4 else min_val,
        "q75": sorted_vals[3 * n // 4] if n >= 4 else max_val,
        "range": max_val - min_val,
    }


def summarize_regions(puzzle: Puzzle) -> RegionSummary:
    """Describe how evenly a puzzle's board was split between regions.

    ``imbalance`` is the largest region size divided by the ideal size N
    (1.0 means every region holds exactly N cells).
    """
    sizes = np.array([len(region) for region in puzzle.regions], dtype=int)
    if sizes.size == 0:
        return {"region_sizes": [], "largest": 0, "smallest": 0, "imbalance": 0.0}
    return {
        "region_sizes": sizes.tolist(),
        "largest": int(sizes.max()),
        "smallest": int(sizes.min()),
        "imbalance": float(sizes.max() / puzzle.size),
    }


def records_to_frame(records: List[PuzzleRecord]) -> pd.DataFrame:
    """Flatten puzzle records into a DataFrame, one row per record.

    ``region_sizes`` is kept as a space-separated string so the frame can be
    written to CSV without nested values.
    """
    columns = list(PuzzleRecord.__annotations__)
    rows = []
    for record in records:
        row = dict(record)
        row["region_sizes"] = " ".join(str(s) for s in record["region_sizes"])
        rows.append(row)
    return pd.DataFrame(rows, columns=columns)


def region_sizes_frame(records: List[PuzzleRecord]) -> pd.DataFrame:
    """Explode records into one row per region (columns: size, run, region_size)."""
    rows = [
        {"size": record["size"], "run": record["run"], "region_size": region_size}
        for record in records
        if record["success"]
        for region_size in record["region_sizes"]
    ]
    return pd.DataFrame(rows, columns=["size", "run", "region_size"])


def aggregate_records(records: List[PuzzleRecord]) -> BatchEntry:
    """Aggregate all runs for a single board size into a ``BatchEntry``.

    ``failures`` counts runs where the solver proved no placement exists;
    runs cut short by the solver time limit are counted in ``timeouts``.
    """
    successes = [r for r in records if r["success"]]
    timeouts = [r for r in records if r["timeout"]]
    total = len(records)
    entry: BatchEntry = {
        "total_runs": total,
        "successes": len(successes),
        "failures": total - len(successes) - len(timeouts),
        "timeouts": len(timeouts),
        "success_rate": (len(successes) / total) if total else 0.0,
        "timeout_rate": (len(timeouts) / total) if total else 0.0,
        "solver_nodes": records[0]["solver_nodes"] if records else 0,
        "solver_time": records[0]["solver_time"] if records else 0.0,
        "largest_region": compute_detailed_statistics([float(r["largest"]) for r in successes]),
        "smallest_region": compute_detailed_statistics([float(r["smallest"]) for r in successes]),
        "imbalance": compute_detailed_statistics([r["imbalance"] for r in successes]),
        "partition_time": compute_detailed_statistics([r["partition_time"] for r in successes]),
        "raw_runs": records,
    }
    return entry
