from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Set, Tuple

import numpy as np

from .constants import BONUS_TILE, EMPTY, HEIGHT, MIN_MATCH, WIDTH
from .grid import Position


Swap = Tuple[int, int, int, int]  # (x1, y1, x2, y2)


@dataclass(frozen=True)
class MatchGroup:
    """A maximal straight run of at least MIN_MATCH identical tiles."""

    tile: int
    positions: Tuple[Position, ...]
    horizontal: bool

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.positions)

    @property
    def middle(self) -> Position:
        return self.positions[len(self.positions) // 2]


def _scan_line(grid: np.ndarray, line: Sequence[Position], horizontal: bool) -> List[MatchGroup]:
    groups: List[MatchGroup] = []
    run: List[Position] = []
    run_tile = EMPTY

    def flush() -> None:
        if len(run) >= MIN_MATCH:
            groups.append(MatchGroup(tile=run_tile, positions=tuple(run), horizontal=horizontal))

    for x, y in line:
        tile = int(grid[y, x])
        if run and tile != run_tile:
            flush()
            run = []
        if tile == EMPTY:
            continue
        run_tile = tile
        run.append((x, y))
    flush()
    return groups


def find_matches(grid: np.ndarray) -> List[MatchGroup]:
    """Return every horizontal then every vertical run of length >= MIN_MATCH.

    Rows are scanned left to right, columns top to bottom. Groups from the two
    directions may share positions. The grid is not modified.
    """
    matches: List[MatchGroup] = []
    for y in range(HEIGHT):
        matches.extend(_scan_line(grid, [(x, y) for x in range(WIDTH)], horizontal=True))
    for x in range(WIDTH):
        matches.extend(_scan_line(grid, [(x, y) for y in range(HEIGHT)], horizontal=False))
    return matches


def matched_positions(groups: Sequence[MatchGroup]) -> Set[Position]:
    """Union of all positions; intersections count once."""
    cells: Set[Position] = set()
    for group in groups:
        cells.update(group.positions)
    return cells


def _iter_valid_swaps(grid: np.ndarray) -> Iterator[Swap]:
    work = grid.copy()
    for y in range(HEIGHT):
        for x in range(WIDTH):
            for nx, ny in ((x + 1, y), (x, y + 1)):
                if nx >= WIDTH or ny >= HEIGHT:
                    continue
                work[y, x], work[ny, nx] = work[ny, nx], work[y, x]
                found = bool(find_matches(work))
                work[y, x], work[ny, nx] = work[ny, nx], work[y, x]
                if found:
                    yield (x, y, nx, ny)


def find_valid_swaps(grid: np.ndarray) -> List[Swap]:
    """All adjacent swaps, in row-major order, that would create a match."""
    return list(_iter_valid_swaps(grid))


def has_valid_move(grid: np.ndarray) -> bool:
    if bool(np.any(grid == BONUS_TILE)):
        return True
    return next(_iter_valid_swaps(grid), None) is not None
