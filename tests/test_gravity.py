"""
Tests for column compaction and refill.
"""

import numpy as np
import pytest

from tile_match_rl.game.constants import BONUS_TILE, EMPTY, HEIGHT, TILE_TYPES, WIDTH
from tile_match_rl.game.gravity import resolve_gravity
from tile_match_rl.game.grid import DisplacementEvent, empty_grid
from tile_match_rl.game.rng import RandomTileSource, ScriptedTileSource


class TestResolveGravity:
    """Per-column drop and spawn behaviour."""

    def test_full_board_is_untouched(self, base_grid):
        before = base_grid.copy()
        drops = resolve_gravity(base_grid, ScriptedTileSource([]))
        assert drops == []
        assert np.array_equal(base_grid, before)

    def test_gaps_compact_and_refill(self, base_grid):
        # Column 0 top-down: 1 3 5 2 4 1 3 5 2
        base_grid[3, 0] = EMPTY
        base_grid[6, 0] = EMPTY
        drops = resolve_gravity(base_grid, ScriptedTileSource([4, 2]))

        assert base_grid[:, 0].tolist() == [2, 4, 1, 3, 5, 4, 1, 5, 2]
        assert drops == [
            DisplacementEvent(0, 5, 0, 6, 1),
            DisplacementEvent(0, 4, 0, 5, 4),
            DisplacementEvent(0, 2, 0, 4, 5),
            DisplacementEvent(0, 1, 0, 3, 3),
            DisplacementEvent(0, 0, 0, 2, 1),
            DisplacementEvent(0, 0, 0, 1, 4),
            DisplacementEvent(0, 0, 0, 0, 2),
        ]

    def test_other_columns_unchanged(self, base_grid):
        before = base_grid.copy()
        base_grid[8, 4] = EMPTY
        resolve_gravity(base_grid, ScriptedTileSource([1]))
        assert np.array_equal(np.delete(base_grid, 4, axis=1), np.delete(before, 4, axis=1))

    def test_relative_order_preserved(self):
        grid = empty_grid()
        grid[1, 2] = 3
        grid[4, 2] = BONUS_TILE
        grid[5, 2] = 1
        source = ScriptedTileSource([], fallback=RandomTileSource(seed=0))
        resolve_gravity(grid, source)
        assert grid[6:, 2].tolist() == [3, BONUS_TILE, 1]

    def test_no_empties_after_gravity(self):
        grid = empty_grid()
        grid[2, 3] = 2
        grid[7, 7] = BONUS_TILE
        drops = resolve_gravity(grid, RandomTileSource(seed=5))
        assert (grid != EMPTY).all()
        assert len(drops) == WIDTH * HEIGHT - 2 + 2

    def test_spawned_tiles_are_ordinary(self):
        grid = empty_grid()
        resolve_gravity(grid, RandomTileSource(seed=11))
        assert grid.min() >= 1
        assert grid.max() <= TILE_TYPES

    def test_events_bottom_destination_first_per_column(self):
        grid = empty_grid()
        grid[0, 1] = 3
        drops = resolve_gravity(grid, RandomTileSource(seed=2))
        for x in range(WIDTH):
            rows = [d.to_y for d in drops if d.to_x == x]
            assert rows == sorted(rows, reverse=True)
            assert all(d.from_x == d.to_x == x for d in drops if d.to_x == x)

    def test_event_values_match_grid(self):
        grid = empty_grid()
        grid[0, 0] = 2
        drops = resolve_gravity(grid, RandomTileSource(seed=3))
        for d in drops:
            assert grid[d.to_y, d.to_x] == d.value

    def test_exhausted_script_raises(self):
        grid = empty_grid()
        with pytest.raises(IndexError):
            resolve_gravity(grid, ScriptedTileSource([1, 2]))
