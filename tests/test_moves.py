"""
Tests for swaps through the game facade.
"""

import numpy as np
import pytest

from tile_match_rl.game import BONUS_TILE, GameConfig, MatchThreeGame, ScriptedTileSource
from tile_match_rl.game.matching import find_matches


@pytest.fixture
def triple_grid(base_grid):
    """Swapping (2, 8) with (3, 8) completes 5 5 5 in the bottom row."""
    base_grid[8, 0] = 5
    base_grid[8, 1] = 5
    return base_grid


def scripted_game(values):
    return MatchThreeGame(source=ScriptedTileSource(values))


class TestMoveTile:
    """Swap legality, revert and scoring."""

    def test_creating_triple_scores_three(self, triple_grid):
        game = scripted_game([1, 2, 3])
        result = game.move_tile(2, 8, 3, 8, triple_grid, 10)
        assert result.score == 13
        assert len(result.drops) == 27
        assert result.grid[8, 3] == 4
        assert find_matches(result.grid) == []

    def test_swap_order_does_not_matter(self, triple_grid):
        a = scripted_game([1, 2, 3]).move_tile(2, 8, 3, 8, triple_grid, 0)
        b = scripted_game([1, 2, 3]).move_tile(3, 8, 2, 8, triple_grid, 0)
        assert np.array_equal(a.grid, b.grid)
        assert a.score == b.score

    def test_matchless_swap_is_reverted(self, base_grid):
        game = scripted_game([])
        result = game.move_tile(0, 0, 1, 0, base_grid, 42)
        assert np.array_equal(result.grid, base_grid)
        assert result.score == 42
        assert result.drops == []

    def test_equal_tiles_swap_is_reverted(self, triple_grid):
        # (0, 7) and (0, 8) both hold 5
        assert triple_grid[7, 0] == triple_grid[8, 0]
        result = scripted_game([]).move_tile(0, 7, 0, 8, triple_grid, 5)
        assert np.array_equal(result.grid, triple_grid)
        assert result.score == 5
        assert result.drops == []

    @pytest.mark.parametrize("x2,y2", [(2, 0), (1, 1), (0, 0), (8, 8)])
    def test_non_adjacent_is_noop(self, base_grid, x2, y2):
        result = scripted_game([]).move_tile(0, 0, x2, y2, base_grid, 3)
        assert np.array_equal(result.grid, base_grid)
        assert result.score == 3
        assert result.drops == []

    def test_caller_grid_not_mutated(self, triple_grid):
        before = triple_grid.copy()
        scripted_game([1, 2, 3]).move_tile(2, 8, 3, 8, triple_grid, 0)
        assert np.array_equal(triple_grid, before)

    def test_accepts_nested_lists(self, triple_grid):
        result = scripted_game([1, 2, 3]).move_tile(2, 8, 3, 8, triple_grid.tolist(), 0)
        assert result.score == 3

    def test_run_of_five_spawns_bonus(self, base_grid):
        base_grid[8, 0] = 5
        base_grid[8, 1] = 5
        base_grid[8, 4] = 5
        base_grid[7, 2] = 5
        result = scripted_game([1, 2, 4, 5]).move_tile(2, 7, 2, 8, base_grid, 0)
        assert result.score == 5
        assert result.grid[8, 2] == BONUS_TILE
        assert int((result.grid == BONUS_TILE).sum()) == 1

    def test_out_of_range_raises(self, base_grid):
        game = scripted_game([])
        with pytest.raises(ValueError):
            game.move_tile(8, 0, 9, 0, base_grid, 0)
        with pytest.raises(ValueError):
            game.move_tile(-1, 0, 0, 0, base_grid, 0)

    def test_negative_score_raises(self, base_grid):
        with pytest.raises(ValueError):
            scripted_game([]).move_tile(0, 0, 1, 0, base_grid, -1)


class TestGameFacade:
    """Construction, queries and module-level helpers."""

    def test_seeded_games_agree(self):
        a = MatchThreeGame(GameConfig(random_seed=77)).new_game()
        b = MatchThreeGame(GameConfig(random_seed=77)).new_game()
        assert np.array_equal(a.grid, b.grid)

    def test_reseed(self):
        game = MatchThreeGame(GameConfig(random_seed=1))
        game.reseed(5)
        first = game.new_game().grid
        game.reseed(5)
        assert np.array_equal(game.new_game().grid, first)

    def test_query_matches(self, base_grid):
        base_grid[0, 0:3] = 2
        groups = MatchThreeGame().find_matches(base_grid)
        assert len(groups) == 1
        assert groups[0].tile == 2

    def test_hint_lists_completing_swap(self, triple_grid):
        game = MatchThreeGame()
        assert (2, 8, 3, 8) in game.find_valid_swaps(triple_grid)
        assert game.has_valid_move(triple_grid)

    def test_module_level_operations(self):
        from tile_match_rl.game import activate_bonus_tile, find_matches as query, generate_board, move_tile

        fresh = generate_board()
        assert fresh.score == 0
        assert query(fresh.grid) == []
        same = move_tile(0, 0, 2, 0, fresh.grid, 0)
        assert np.array_equal(same.grid, fresh.grid)
        untouched = activate_bonus_tile(0, 0, fresh.grid, 0)
        assert untouched.score == 0
