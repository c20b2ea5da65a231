"""
Tile sources
============

Every random draw the engine makes goes through a TileSource so that board
generation and refill can be seeded or scripted.
"""

from __future__ import annotations

import random
from typing import Iterable, List, Optional, Protocol

from .constants import TILE_TYPES


class TileSource(Protocol):
    def draw(self) -> int:
        """Return an ordinary tile code in 1..TILE_TYPES."""
        ...


class RandomTileSource:
    """Uniform draws from a private `random.Random`."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def draw(self) -> int:
        return self._rng.randint(1, TILE_TYPES)

    def reseed(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)


class ScriptedTileSource:
    """
    Replays a fixed sequence of tile codes.

    Once the script is exhausted, draws are delegated to `fallback`; without a
    fallback an IndexError is raised so tests notice unplanned draws.
    """

    def __init__(self, values: Iterable[int], fallback: Optional[TileSource] = None) -> None:
        self._values: List[int] = [int(v) for v in values]
        for v in self._values:
            if not 1 <= v <= TILE_TYPES:
                raise ValueError(f"Scripted tile {v} outside 1..{TILE_TYPES}")
        self._index = 0
        self._fallback = fallback

    @property
    def remaining(self) -> int:
        return len(self._values) - self._index

    def draw(self) -> int:
        if self._index < len(self._values):
            value = self._values[self._index]
            self._index += 1
            return value
        if self._fallback is None:
            raise IndexError("Scripted tile source exhausted")
        return self._fallback.draw()
