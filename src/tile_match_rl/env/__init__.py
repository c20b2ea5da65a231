"""Gymnasium environments for Tile Match RL."""

from __future__ import annotations

from gymnasium.envs.registration import register

# Register default tile-matching environment (MultiDiscrete swap/activate actions)
register(
    id="TileMatch-9x9-v0",
    entry_point="tile_match_rl.env.tile_match_env:TileMatchEnv",
)

__all__ = ["TileMatch-9x9-v0"]
