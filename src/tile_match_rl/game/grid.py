from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

import numpy as np

from .constants import BONUS_TILE, EMPTY, HEIGHT, TILE_TYPES, WIDTH


Position = Tuple[int, int]  # (x, y)

GRID_DTYPE = np.uint8
VALID_CODES = tuple(range(EMPTY, TILE_TYPES + 1)) + (BONUS_TILE,)


@dataclass(frozen=True)
class DisplacementEvent:
    """One tile relocated by gravity or spawned by refill.

    Spawned tiles use row 0 of their column as a synthetic origin.
    """

    from_x: int
    from_y: int
    to_x: int
    to_y: int
    value: int

    def to_dict(self) -> Dict[str, int]:
        return {
            "from_x": self.from_x,
            "from_y": self.from_y,
            "to_x": self.to_x,
            "to_y": self.to_y,
            "value": self.value,
        }


@dataclass(eq=False)
class RoundResult:
    """Grid, cumulative score and displacement log returned by every operation."""

    grid: np.ndarray
    score: int
    drops: List[DisplacementEvent] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "board": self.grid.tolist(),
            "score": int(self.score),
            "drops": [d.to_dict() for d in self.drops],
        }


def empty_grid() -> np.ndarray:
    return np.zeros((HEIGHT, WIDTH), dtype=GRID_DTYPE)


def as_grid(obj: Any) -> np.ndarray:
    """Validate `obj` as a board and return an owned uint8 copy.

    Accepts nested lists or arrays indexed ``[y][x]``. Raises ValueError on a
    wrong shape or on a cell that is not empty, ordinary or bonus.
    """
    raw = np.array(obj, dtype=np.int64, copy=True)
    if raw.shape != (HEIGHT, WIDTH):
        raise ValueError(f"Grid must have shape {(HEIGHT, WIDTH)}, got {raw.shape}")
    bad = ~np.isin(raw, VALID_CODES)
    if bad.any():
        y, x = (int(v) for v in np.argwhere(bad)[0])
        raise ValueError(f"Invalid tile code {int(raw[y, x])} at ({x}, {y})")
    return raw.astype(GRID_DTYPE)


def is_inside(x: int, y: int) -> bool:
    return 0 <= x < WIDTH and 0 <= y < HEIGHT


def are_adjacent(x1: int, y1: int, x2: int, y2: int) -> bool:
    """True when the two cells share an edge."""
    return abs(x1 - x2) + abs(y1 - y2) == 1


def check_position(x: int, y: int) -> None:
    if not is_inside(x, y):
        raise ValueError(f"Position ({x}, {y}) outside {WIDTH}x{HEIGHT} board")


def bonus_positions(grid: np.ndarray) -> List[Position]:
    ys, xs = np.nonzero(grid == BONUS_TILE)
    return [(int(x), int(y)) for y, x in zip(ys, xs)]


def format_grid(grid: np.ndarray) -> str:
    rows: List[str] = []
    for row in grid:
        cells = []
        for cell in row:
            v = int(cell)
            if v == EMPTY:
                cells.append(".")
            elif v == BONUS_TILE:
                cells.append("*")
            else:
                cells.append(str(v))
        rows.append(" ".join(cells))
    return "\n".join(rows)
