"""
Analysis and orchestration package for queens-and-regions puzzles.

This package contains:
- settings: global knobs and defaults
- stats: typed summaries and aggregation helpers
- experiments: batch runners and puzzle validation
- reporting: CSV/JSON exports and raw-data writers
- plots: board rendering and batch charts
- cli: top-level pipeline entry points and argument parser
"""

from . import settings as settings  # re-export for convenience
from .stats import (
    StatsSummary,
    RegionSummary,
    PuzzleRecord,
    BatchEntry,
    BatchResults,
    compute_detailed_statistics,
    summarize_regions,
    ProgressPrinter,
)

__all__ = [
    # types
    "StatsSummary",
    "RegionSummary",
    "PuzzleRecord",
    "BatchEntry",
    "BatchResults",
    # utils
    "compute_detailed_statistics",
    "summarize_regions",
    "ProgressPrinter",
    # settings module
    "settings",
]
