from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np

from .constants import BONUS_TILE, EMPTY
from .gravity import resolve_gravity
from .grid import DisplacementEvent, RoundResult
from .matching import find_matches, matched_positions
from .rng import TileSource
from .rules import ScoringRules

logger = logging.getLogger(__name__)


def cascade_in_place(
    grid: np.ndarray,
    source: TileSource,
    rules: Optional[ScoringRules] = None,
) -> Tuple[int, List[DisplacementEvent]]:
    """Clear, score and refill until the board is stable.

    Mutates `grid` and returns ``(points_gained, drops)``. Each call may spawn
    at most one bonus tile.
    """
    rules = rules or ScoringRules()
    gained = 0
    drops: List[DisplacementEvent] = []
    bonus_placed = False
    passes = 0

    while True:
        groups = find_matches(grid)
        if not groups:
            break
        passes += 1

        cells = matched_positions(groups)
        points = rules.score_for_clear(len(cells))
        gained += points

        # Bonus tiles from earlier passes survive, unless they are all that matched
        to_clear = {(x, y) for x, y in cells if grid[y, x] != BONUS_TILE}
        if not to_clear:
            to_clear = cells
        for x, y in to_clear:
            grid[y, x] = EMPTY

        if not bonus_placed:
            long_run = next((g for g in groups if len(g) >= rules.bonus_run_length), None)
            if long_run is not None:
                mx, my = long_run.middle
                grid[my, mx] = BONUS_TILE
                bonus_placed = True
                logger.debug("Bonus tile placed at (%d, %d) from run of %d", mx, my, len(long_run))

        drops.extend(resolve_gravity(grid, source))
        logger.debug("Cascade pass %d: %d groups, %d cells, +%d", passes, len(groups), len(cells), points)

    return gained, drops


def resolve_cascade(
    grid: np.ndarray,
    score: int,
    source: TileSource,
    rules: Optional[ScoringRules] = None,
) -> RoundResult:
    work = grid.copy()
    gained, drops = cascade_in_place(work, source, rules)
    return RoundResult(grid=work, score=score + gained, drops=drops)
