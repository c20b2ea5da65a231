from __future__ import annotations

import numpy as np

from .constants import HEIGHT, WIDTH
from .grid import RoundResult, empty_grid
from .rng import TileSource


def _completes_run(grid: np.ndarray, x: int, y: int, tile: int) -> bool:
    if x >= 2 and grid[y, x - 1] == tile and grid[y, x - 2] == tile:
        return True
    if y >= 2 and grid[y - 1, x] == tile and grid[y - 2, x] == tile:
        return True
    return False


def generate_board(source: TileSource) -> RoundResult:
    """Fill a fresh board row by row, redrawing any tile that would complete a run of 3."""
    grid = empty_grid()
    for y in range(HEIGHT):
        for x in range(WIDTH):
            tile = source.draw()
            while _completes_run(grid, x, y, tile):
                tile = source.draw()
            grid[y, x] = tile
    return RoundResult(grid=grid, score=0, drops=[])
