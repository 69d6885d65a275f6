"""Command-line interface and high-level pipelines for puzzle generation.

This module wires together configuration loading, single-puzzle generation
(with text, CSV/JSON and PNG output) and batch experiments over several board
sizes. It isolates I/O, argument parsing, and progress reporting from the core
algorithmic modules so that the rest of the codebase remains easy to test
programmatically.
"""
from __future__ import annotations

import argparse
import random
import string
import tempfile
from pathlib import Path
from typing import List, Optional

from . import settings
from .experiments import run_batch, run_batch_parallel, validate_puzzle
from .plots import plot_imbalance_vs_n, plot_region_size_distribution, render_puzzle
from .reporting import (
    collect_raw_runs,
    save_batch_to_csv,
    save_puzzle_to_csv,
    save_puzzle_to_json,
    save_raw_runs_to_csv,
)
from config_manager import ConfigManager
from queenregions.backtracking import solve
from queenregions.puzzle import Puzzle, UnsolvableBoardError, generate_puzzle
from queenregions.utils import is_valid_placement, region_index_matrix

REGION_LABELS = string.ascii_uppercase + string.ascii_lowercase


# ------------- Utils --------------------------------------------------------

def apply_configuration(config_path: str) -> ConfigManager:
    """Load configuration and update the global ``settings`` module in-place."""
    config_mgr = ConfigManager(config_path)

    puzzle_settings = config_mgr.get_puzzle_settings()
    if puzzle_settings:
        settings.DEFAULT_SIZE = int(puzzle_settings.get("default_size", settings.DEFAULT_SIZE))
        seed = puzzle_settings.get("seed", settings.SEED)
        settings.SEED = None if seed is None else int(seed)
        settings.QUEEN_MARKER_TEXT = str(puzzle_settings.get("queen_marker", settings.QUEEN_MARKER_TEXT))

    palette = config_mgr.get_palette()
    if palette:
        settings.PALETTE = [str(color) for color in palette]

    experiment_settings = config_mgr.get_experiment_settings()
    if experiment_settings:
        settings.N_VALUES = [int(n) for n in experiment_settings.get("N_values", settings.N_VALUES)]
        settings.RUNS = int(experiment_settings.get("runs", settings.RUNS))
        time_limit = experiment_settings.get("solver_time_limit", settings.SOLVER_TIME_LIMIT)
        settings.SOLVER_TIME_LIMIT = None if time_limit is None else float(time_limit)
        settings.OUT_DIR = experiment_settings.get("output_dir", settings.OUT_DIR)

    if settings.DEFAULT_SIZE < 0:
        raise ValueError(f"default_size must be non-negative, got {settings.DEFAULT_SIZE}")
    if settings.RUNS < 1:
        raise ValueError(f"runs must be >= 1, got {settings.RUNS}")
    return config_mgr


def region_label(index: int, region_count: int) -> str:
    """Label a region by letter, or by zero-padded number past 52 regions."""
    if region_count <= len(REGION_LABELS):
        return REGION_LABELS[index]
    return str(index).zfill(len(str(region_count - 1)))


def format_board(puzzle: Puzzle, show_solution: bool = False, marker: Optional[str] = None) -> str:
    """Render a puzzle as text: one label per region, the queen marker beside queens.

    ``marker`` defaults to ``settings.QUEEN_MARKER_TEXT``.
    """
    if marker is None:
        marker = settings.QUEEN_MARKER_TEXT
    owners = region_index_matrix(puzzle.size, puzzle.regions)
    lines = []
    for row in range(puzzle.size):
        cells = []
        for col in range(puzzle.size):
            label = region_label(owners[row][col], len(puzzle.regions))
            queen = show_solution and puzzle.solution_matrix[row][col] is not None
            mark = marker if queen else " " * len(marker)
            cells.append(label + mark)
        lines.append(" ".join(cells).rstrip())
    return "\n".join(lines)


# ------------- Pipelines ----------------------------------------------------

def generate_single(
    size: int,
    seed: Optional[int] = None,
    show_solution: bool = False,
    render_path: Optional[str] = None,
    export_path: Optional[str] = None,
    validate: bool = False,
) -> Puzzle:
    """Generate one puzzle, print it and write the requested artifacts."""
    rng = random.Random(seed) if seed is not None else None
    puzzle = generate_puzzle(size, rng=rng, palette=settings.PALETTE, marker=settings.QUEEN_MARKER_TEXT)
    if validate:
        validate_puzzle(puzzle)

    print(f"Puzzle N={size} (seed={seed})")
    print(format_board(puzzle, show_solution=show_solution))

    if export_path:
        if export_path.lower().endswith(".json"):
            save_puzzle_to_json(puzzle, export_path)
        else:
            save_puzzle_to_csv(puzzle, export_path)
        print(f"Puzzle exported to {export_path}")
    if render_path:
        render_puzzle(puzzle, render_path, show_queens=show_solution)
        print(f"Puzzle rendered to {render_path}")
    return puzzle


def main_batch(parallel: bool = False, validate: bool = False) -> None:
    """Run the batch experiment over ``settings.N_VALUES`` and save all outputs."""
    N_values = list(settings.N_VALUES)
    runner = run_batch_parallel if parallel else run_batch
    print(f"Batch: N={N_values}, runs={settings.RUNS}, seed={settings.SEED}, parallel={parallel}")

    results = runner(
        N_values,
        settings.RUNS,
        seed=settings.SEED,
        time_limit=settings.SOLVER_TIME_LIMIT,
        validate=validate,
        progress_label="Batch",
    )

    for N in N_values:
        entry = results[N]
        imbalance = entry.get("imbalance", {})
        if entry.get("successes"):
            print(f"  N={N}: {entry['successes']}/{entry['total_runs']} generated, mean imbalance {imbalance['mean']:.2f}")
        elif entry.get("timeouts"):
            print(f"  N={N}: solver timed out after {settings.SOLVER_TIME_LIMIT}s in {entry['timeouts']}/{entry['total_runs']} runs")
        else:
            print(f"  N={N}: unsolvable, no puzzles generated")

    save_batch_to_csv(results, N_values, settings.OUT_DIR)
    save_raw_runs_to_csv(results, N_values, settings.OUT_DIR)
    plot_region_size_distribution(collect_raw_runs(results, N_values), settings.OUT_DIR)
    plot_imbalance_vs_n(results, N_values, settings.OUT_DIR)


def run_quick_regression_tests() -> None:
    """Execute a fast, deterministic smoke test of the whole pipeline.

    Verifies that:
    - The solver returns valid placements for N in 1, 4..8 and None for 2, 3.
    - A seeded N=8 puzzle satisfies every structural invariant.
    - The batch pipeline produces a non-empty summary CSV in a temporary folder.
    """
    print("Running quick regression tests...")

    for N in (1, 4, 5, 6, 7, 8):
        placement = solve(N)
        if placement is None or len(placement) != N or not is_valid_placement(placement):
            raise AssertionError(f"solve({N}) returned an invalid placement: {placement}")
        print(f"  [BT] N={N}: {placement}")
    for N in (2, 3):
        if solve(N) is not None:
            raise AssertionError(f"solve({N}) should report no solution")

    puzzle = generate_puzzle(8, rng=random.Random(42))
    validate_puzzle(puzzle)
    print("  Regions: N=8 puzzle valid")

    results = run_batch([4, 5], runs=3, seed=42, validate=True)
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(save_batch_to_csv(results, [4, 5], tmpdir))
        if not csv_path.exists() or csv_path.stat().st_size == 0:
            raise AssertionError("Batch CSV was not generated successfully during quick tests.")

    print("Quick regression tests passed.")


# ------------- CLI wiring --------------------------------------------------

def build_arg_parser():
    """Construct the argument parser for the CLI entry point."""
    parser = argparse.ArgumentParser(description="Generate queens-and-regions puzzles.")
    parser.add_argument("--size", "-n", type=int, help="Board size N (default from config, else 8).")
    parser.add_argument("--seed", type=int, help="Seed for region growing (default from config, else random).")
    parser.add_argument("--config", help="Path to a JSON configuration file (e.g. config.json).")
    parser.add_argument("--show-solution", action="store_true", help="Mark queen cells in the printed board and rendering.")
    parser.add_argument("--render", metavar="PATH", help="Save a PNG rendering of the puzzle.")
    parser.add_argument("--export", metavar="PATH", help="Export the puzzle as CSV, or JSON when PATH ends in .json.")
    parser.add_argument("--batch", action="store_true", help="Run the batch experiment over the configured N values.")
    parser.add_argument("--parallel", action="store_true", help="Use a process pool in batch mode.")
    parser.add_argument("--validate", action="store_true", help="Re-check every puzzle invariant (extra assertions).")
    parser.add_argument("--quick-test", action="store_true", help="Run quick regression tests and exit.")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point: parse arguments and dispatch to the chosen pipeline."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.quick_test:
        run_quick_regression_tests()
        return

    try:
        if args.config:
            apply_configuration(args.config)
    except FileNotFoundError as exc:
        print(f"Configuration file not found: {exc}")
        raise SystemExit(1) from exc
    except ValueError as exc:
        print(f"Configuration error: {exc}")
        raise SystemExit(1) from exc

    if args.seed is not None:
        settings.SEED = args.seed

    try:
        if args.batch:
            main_batch(parallel=args.parallel, validate=args.validate)
        else:
            size = args.size if args.size is not None else settings.DEFAULT_SIZE
            generate_single(
                size,
                seed=settings.SEED,
                show_solution=args.show_solution,
                render_path=args.render,
                export_path=args.export,
                validate=args.validate,
            )
    except KeyboardInterrupt:
        print("\nExecution interrupted by user.")
        raise SystemExit(130) from None
    except UnsolvableBoardError as exc:
        print(f"Unsolvable board: {exc}")
        raise SystemExit(1) from exc
    except ValueError as exc:
        print(f"Execution error: {exc}")
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
