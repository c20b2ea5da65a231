"""
Shared fixtures for engine tests.
"""

import numpy as np
import pytest

from tile_match_rl.game.constants import HEIGHT, WIDTH


def make_base_grid() -> np.ndarray:
    """Board with no two equal neighbours anywhere: (x + 2y) % 5 + 1."""
    grid = np.zeros((HEIGHT, WIDTH), dtype=np.uint8)
    for y in range(HEIGHT):
        for x in range(WIDTH):
            grid[y, x] = (x + 2 * y) % 5 + 1
    return grid


@pytest.fixture
def base_grid():
    return make_base_grid()
