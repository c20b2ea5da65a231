from __future__ import annotations

# Board geometry
WIDTH = 9
HEIGHT = 9

# Ordinary tiles use codes 1..TILE_TYPES
TILE_TYPES = 5

EMPTY = 0
BONUS_TILE = 100

MIN_MATCH = 3
BONUS_RUN_LENGTH = 5
