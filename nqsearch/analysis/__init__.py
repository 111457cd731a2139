"""
Analysis and orchestration package for local-search experiments.

This package contains:
- settings: global knobs and defaults
- stats: typed summaries and aggregation helpers
- experiments: batch runners for hill climbing / min-conflicts
- reporting: CSV exports and raw-data writers
- plots: visualization utilities
- cli: top-level pipeline entry points and argument parser
"""

from . import settings as settings  # re-export for convenience
from .stats import (
    StatsSummary,
    RunRecord,
    StrategyResultEntry,
    ExperimentResults,
    compute_detailed_statistics,
    compute_grouped_statistics,
    ProgressPrinter,
)

__all__ = [
    # types
    "StatsSummary",
    "RunRecord",
    "StrategyResultEntry",
    "ExperimentResults",
    # utils
    "compute_detailed_statistics",
    "compute_grouped_statistics",
    "ProgressPrinter",
    # settings module
    "settings",
]
