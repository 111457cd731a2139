"""Global settings for the N-Queens local-search analysis pipeline.

This module centralizes tunable constants used across the orchestration code.
Values can be overridden at runtime via the configuration loader in
`nqsearch.analysis.cli.apply_configuration`.
"""
from __future__ import annotations

import multiprocessing
from datetime import datetime
from typing import List, Optional

# Board sizes to evaluate (ascending) for scalability analysis
N_VALUES: List[int] = [8, 12, 16, 20, 24]

# Independent solves per strategy and N
RUNS_PER_STRATEGY: int = 20

# Strategies to compare
STRATEGIES: List[str] = ["hill-climbing", "min-conflicts"]

# Restart ceiling per solve (None = restart until solved)
MAX_RESTARTS: Optional[int] = 10_000

# Base seed; run i of a batch uses BASE_SEED + i (None = unseeded)
BASE_SEED: Optional[int] = 12345

# Output directory for CSV and charts
OUT_DIR: str = "results_nqsearch"

# Number of worker processes for the parallel mode (leave one core for the OS)
NUM_PROCESSES: int = max(1, multiprocessing.cpu_count() - 1)

# When True, results and charts carry a datestamp suffix (e.g., _20251113-142530)
DATE_IN_FILENAMES: bool = False

# Unique run identifier used for filename stamping; set once at import time.
RUN_ID: str = datetime.now().strftime("%Y%m%d-%H%M%S")

# Optional extra suffix to avoid overwriting outputs between runs
RUN_TAG: Optional[str] = None


def filename_suffix() -> str:
    """Return the suffix appended to every artifact name of this run."""
    parts: List[str] = []
    if RUN_TAG:
        parts.append(RUN_TAG)
    if DATE_IN_FILENAMES:
        parts.append(RUN_ID)
    return ("_" + "_".join(parts)) if parts else ""
