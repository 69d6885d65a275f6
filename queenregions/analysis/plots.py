"""Visualization utilities for puzzles and batch results.

Outputs
-------
- ``render_puzzle``: PNG of a single board, each cell filled with its region
    color, thick borders between regions, optional queen glyphs.
- ``plot_region_size_distribution``: ``region_sizes_by_N<suffix>.png``, a
    boxplot of region sizes per board size (how uneven the growth is).
    - X: N (board size). Y: cells per region. The dashed line marks the ideal
      size N at each N.
- ``plot_imbalance_vs_n``: ``imbalance_vs_N<suffix>.png``, mean ± std of the
    largest-region / N ratio per board size.

Notes
-----
- Charts are written with the non-interactive Agg backend so the module works
    on headless machines and inside tests.
- All functions return the path of the file they wrote.
"""
from __future__ import annotations

import os
from typing import List, Sequence

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import seaborn as sns  # noqa: E402
from matplotlib.patches import Rectangle  # noqa: E402

from . import settings  # noqa: E402
from .stats import BatchResults, PuzzleRecord, region_sizes_frame  # noqa: E402
from queenregions.puzzle import Puzzle  # noqa: E402
from queenregions.utils import region_index_matrix  # noqa: E402


def render_puzzle(puzzle: Puzzle, filename: str, show_queens: bool = True, cell_inches: float = 0.6) -> str:
    """Draw ``puzzle`` as a colored grid and save it to ``filename``.

    Row 0 is drawn at the top. Region boundaries use a thicker line than the
    cell grid so the puzzle is readable without relying on color alone.
    """
    n = puzzle.size
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)

    side = max(1.0, n * cell_inches)
    fig, ax = plt.subplots(figsize=(side, side))
    owners = region_index_matrix(n, puzzle.regions)

    for row in range(n):
        for col in range(n):
            ax.add_patch(Rectangle(
                (col, n - row - 1), 1, 1,
                facecolor=puzzle.color_matrix[row][col],
                edgecolor="#999999",
                linewidth=0.5,
            ))
            if show_queens and puzzle.solution_matrix[row][col] is not None:
                ax.text(col + 0.5, n - row - 0.5, "♛", ha="center", va="center", fontsize=max(8, 40 * cell_inches))

    # Region boundaries between horizontally and vertically adjacent cells.
    for row in range(n):
        for col in range(n):
            y = n - row - 1
            if col + 1 < n and owners[row][col] != owners[row][col + 1]:
                ax.plot([col + 1, col + 1], [y, y + 1], color="black", linewidth=2)
            if row + 1 < n and owners[row][col] != owners[row + 1][col]:
                ax.plot([col, col + 1], [y, y], color="black", linewidth=2)
    ax.add_patch(Rectangle((0, 0), n, n, fill=False, edgecolor="black", linewidth=3))

    ax.set_xlim(0, max(n, 1))
    ax.set_ylim(0, max(n, 1))
    ax.set_aspect("equal")
    ax.axis("off")
    fig.savefig(filename, bbox_inches="tight", dpi=150)
    plt.close(fig)
    return filename


def plot_region_size_distribution(records: List[PuzzleRecord], out_dir: str) -> str:
    """Boxplot of region sizes for every board size present in ``records``."""
    os.makedirs(out_dir, exist_ok=True)
    frame = region_sizes_frame(records)
    fname = os.path.join(out_dir, f"region_sizes_by_N{settings.date_suffix()}.png")

    plt.figure(figsize=(12, 8))
    if frame.empty:
        plt.text(0.5, 0.5, "No successful runs", ha="center", va="center")
    else:
        sizes = sorted(frame["size"].unique())
        sns.boxplot(data=frame, x="size", y="region_size", order=sizes, color="#BAE1FF")
        # Boxplot categories sit at x = 0..k-1; the ideal region size equals N.
        plt.plot(range(len(sizes)), sizes, "k--", linewidth=1, label="Ideal (N cells)")
        plt.legend()
    plt.xlabel("Board size N")
    plt.ylabel("Cells per region")
    plt.title("Region size distribution vs N")
    plt.grid(True, alpha=0.3)
    plt.savefig(fname, bbox_inches="tight", dpi=300)
    plt.close()
    print(f"Chart saved to {fname}")
    return fname


def plot_imbalance_vs_n(results: BatchResults, N_values: Sequence[int], out_dir: str) -> str:
    """Line chart of mean ± std imbalance (largest region / N) per board size."""
    os.makedirs(out_dir, exist_ok=True)
    fname = os.path.join(out_dir, f"imbalance_vs_N{settings.date_suffix()}.png")

    xs, means, stds = [], [], []
    for N in N_values:
        summary = results.get(N, {}).get("imbalance", {})
        if summary.get("count"):
            xs.append(N)
            means.append(summary["mean"])
            stds.append(summary["std"] or 0.0)
    means_arr = np.array(means, dtype=float)
    stds_arr = np.array(stds, dtype=float)

    plt.figure(figsize=(12, 8))
    plt.plot(xs, means_arr, "o-", label="Mean largest region / N", linewidth=2, markersize=8)
    if xs:
        plt.fill_between(xs, means_arr - stds_arr, means_arr + stds_arr, alpha=0.2)
    plt.axhline(1.0, color="gray", linestyle="--", linewidth=1, label="Perfect balance")
    plt.xlabel("Board size N")
    plt.ylabel("Imbalance ratio")
    plt.title("Region imbalance vs N")
    plt.legend()
    plt.grid(True, alpha=0.3)
    plt.savefig(fname, bbox_inches="tight", dpi=300)
    plt.close()
    print(f"Chart saved to {fname}")
    return fname
