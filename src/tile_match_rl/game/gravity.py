from __future__ import annotations

from typing import List

import numpy as np

from .constants import EMPTY, HEIGHT, WIDTH
from .grid import DisplacementEvent
from .rng import TileSource


def resolve_gravity(grid: np.ndarray, source: TileSource) -> List[DisplacementEvent]:
    """Compact every column downward and refill the vacated cells in place.

    Surviving tiles keep their relative order. Refill draws are unconstrained,
    so they may create new runs. Within a column, events are ordered bottom-most
    destination first; spawned tiles report row 0 as their origin.
    """
    drops: List[DisplacementEvent] = []
    for x in range(WIDTH):
        write_y = HEIGHT - 1
        for y in range(HEIGHT - 1, -1, -1):
            value = int(grid[y, x])
            if value == EMPTY:
                continue
            if y != write_y:
                grid[write_y, x] = value
                grid[y, x] = EMPTY
                drops.append(DisplacementEvent(x, y, x, write_y, value))
            write_y -= 1

        for y in range(write_y, -1, -1):
            value = source.draw()
            grid[y, x] = value
            drops.append(DisplacementEvent(x, 0, x, y, value))
    return drops
