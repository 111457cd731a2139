"""Terminal outcomes shared by the local-search strategies."""

from __future__ import annotations

import enum
from typing import Tuple


class Outcome(str, enum.Enum):
    SOLVED = "solved"
    # hill climbing: no strictly improving neighbour
    STUCK = "stuck"
    # min-conflicts: step budget consumed
    EXHAUSTED = "exhausted"


# (outcome, state_changes)
SearchResult = Tuple[Outcome, int]
