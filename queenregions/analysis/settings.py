"""Global settings for the puzzle generation and analysis pipeline.

This module centralizes tunable constants used across the orchestration code.
Values can be overridden at runtime via the configuration loader in
`queenregions.analysis.cli.apply_configuration`.
"""
from __future__ import annotations

import multiprocessing
from datetime import datetime
from typing import List, Optional

from queenregions.regions import PASTEL_PALETTE, QUEEN_MARKER

# Board size used when the CLI is invoked without --size
DEFAULT_SIZE: int = 8

# Seed for the region-growing random source (None = fresh entropy every run)
SEED: Optional[int] = None

# Marker written into solution matrices for queen cells
QUEEN_MARKER_TEXT: str = QUEEN_MARKER

# Region colors, cycled when a board has more regions than entries
PALETTE: List[str] = list(PASTEL_PALETTE)

# Board sizes to evaluate in batch mode (2 and 3 are recorded as unsolvable)
N_VALUES: List[int] = [4, 5, 6, 8, 10, 12]

# Number of puzzles generated per board size in batch mode
RUNS: int = 30

# Backtracking time limit in seconds for batch runs (None = no limit)
SOLVER_TIME_LIMIT: Optional[float] = 30.0

# Output directory for CSV, JSON and charts
OUT_DIR: str = "results_queenregions"

# Number of worker processes to use (leave one core for the OS)
NUM_PROCESSES: int = max(1, multiprocessing.cpu_count() - 1)

# When True, batch artifacts get a datestamp suffix (e.g., _20251113-142530)
DATE_IN_FILENAMES: bool = True

# Unique run identifier used for filename stamping; set once at import time.
RUN_ID: str = datetime.now().strftime("%Y%m%d-%H%M%S")


def date_suffix() -> str:
    """Return ``_<RUN_ID>`` when datestamping is enabled, else an empty string."""
    return f"_{RUN_ID}" if DATE_IN_FILENAMES else ""
