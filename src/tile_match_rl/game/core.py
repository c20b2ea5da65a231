from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from . import generator, matching
from .cascade import cascade_in_place
from .constants import BONUS_TILE, EMPTY, HEIGHT, WIDTH
from .gravity import resolve_gravity
from .grid import RoundResult, are_adjacent, as_grid, check_position
from .rng import RandomTileSource, TileSource
from .rules import ScoringRules

logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    random_seed: Optional[int] = None


def _check_score(score: int) -> int:
    score = int(score)
    if score < 0:
        raise ValueError(f"Score must be non-negative, got {score}")
    return score


class MatchThreeGame:
    """Stateless rules engine for the tile-matching board.

    The caller owns the board and score and passes them into every call; the
    game only keeps its tile source and scoring rules. Inputs are copied, so a
    caller's array is never modified.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        source: Optional[TileSource] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.source: TileSource = source or RandomTileSource(self.config.random_seed)

    def reseed(self, seed: Optional[int]) -> None:
        self.source = RandomTileSource(seed)

    def new_game(self) -> RoundResult:
        return generator.generate_board(self.source)

    def move_tile(self, x1: int, y1: int, x2: int, y2: int, grid: Any, score: int) -> RoundResult:
        """Swap two neighbouring tiles and resolve the resulting cascade.

        A swap between non-adjacent cells, or one that creates no match, returns
        the input board and score with no displacements.
        """
        board = as_grid(grid)
        score = _check_score(score)
        check_position(x1, y1)
        check_position(x2, y2)
        if not are_adjacent(x1, y1, x2, y2):
            return RoundResult(grid=board, score=score, drops=[])

        board[y1, x1], board[y2, x2] = board[y2, x2], board[y1, x1]
        if not matching.find_matches(board):
            board[y1, x1], board[y2, x2] = board[y2, x2], board[y1, x1]
            logger.debug("Swap (%d, %d) <-> (%d, %d) made no match, reverted", x1, y1, x2, y2)
            return RoundResult(grid=board, score=score, drops=[])

        gained, drops = cascade_in_place(board, self.source, self.rules)
        return RoundResult(grid=board, score=score + gained, drops=drops)

    def activate_bonus_tile(self, x: int, y: int, grid: Any, score: int) -> RoundResult:
        """Clear the row and column through the bonus tile at (x, y), then cascade."""
        board = as_grid(grid)
        score = _check_score(score)
        check_position(x, y)
        if board[y, x] != BONUS_TILE:
            logger.debug("No bonus tile at (%d, %d)", x, y)
            return RoundResult(grid=board, score=score, drops=[])

        board[y, x] = EMPTY
        cells = {(i, y) for i in range(WIDTH)} | {(x, j) for j in range(HEIGHT)}
        for cx, cy in cells:
            board[cy, cx] = EMPTY
        total = score + self.rules.score_for_bonus(len(cells))

        drops = resolve_gravity(board, self.source)
        gained, cascade_drops = cascade_in_place(board, self.source, self.rules)
        drops.extend(cascade_drops)
        return RoundResult(grid=board, score=total + gained, drops=drops)

    def find_matches(self, grid: Any) -> List[matching.MatchGroup]:
        return matching.find_matches(as_grid(grid))

    def find_valid_swaps(self, grid: Any) -> List[matching.Swap]:
        return matching.find_valid_swaps(as_grid(grid))

    def has_valid_move(self, grid: Any) -> bool:
        return matching.has_valid_move(as_grid(grid))


# Module-level instance for callers that do not need to inject randomness
_default_game: Optional[MatchThreeGame] = None


def get_game() -> MatchThreeGame:
    global _default_game
    if _default_game is None:
        _default_game = MatchThreeGame()
    return _default_game


def generate_board() -> RoundResult:
    return get_game().new_game()


def move_tile(x1: int, y1: int, x2: int, y2: int, grid: Any, score: int) -> RoundResult:
    return get_game().move_tile(x1, y1, x2, y2, grid, score)


def activate_bonus_tile(x: int, y: int, grid: Any, score: int) -> RoundResult:
    return get_game().activate_bonus_tile(x, y, grid, score)


def find_matches(grid: Any) -> List[matching.MatchGroup]:
    return get_game().find_matches(grid)
