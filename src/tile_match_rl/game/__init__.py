"""Game module for Tile Match RL.

Exports the rules engine and supporting types:
- MatchThreeGame: Board generation, swaps, bonus activation and cascades
- RoundResult / DisplacementEvent: Values returned to the caller
- MatchGroup: A run of three or more identical tiles
- ScoringRules: Scoring configuration and helpers
- RandomTileSource / ScriptedTileSource: Injectable tile draws
"""

from .constants import BONUS_TILE, EMPTY, HEIGHT, TILE_TYPES, WIDTH
from .grid import DisplacementEvent, RoundResult, as_grid, format_grid
from .matching import MatchGroup
from .rng import RandomTileSource, ScriptedTileSource, TileSource
from .rules import ScoringRules
from .core import (
    GameConfig,
    MatchThreeGame,
    activate_bonus_tile,
    find_matches,
    generate_board,
    move_tile,
)

__all__ = [
    "BONUS_TILE",
    "EMPTY",
    "HEIGHT",
    "TILE_TYPES",
    "WIDTH",
    "DisplacementEvent",
    "RoundResult",
    "as_grid",
    "format_grid",
    "MatchGroup",
    "RandomTileSource",
    "ScriptedTileSource",
    "TileSource",
    "ScoringRules",
    "GameConfig",
    "MatchThreeGame",
    "activate_bonus_tile",
    "find_matches",
    "generate_board",
    "move_tile",
]
