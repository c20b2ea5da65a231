from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from tile_match_rl.game import BONUS_TILE, HEIGHT, WIDTH, GameConfig, MatchThreeGame
from tile_match_rl.game.matching import find_valid_swaps

# Action kinds
SWAP_RIGHT = 0
SWAP_DOWN = 1
ACTIVATE_BONUS = 2
NUM_ACTION_KINDS = 3


def _compute_action_mask(grid: np.ndarray) -> np.ndarray:
    mask = np.zeros((NUM_ACTION_KINDS, HEIGHT, WIDTH), dtype=np.bool_)
    for x1, y1, x2, y2 in find_valid_swaps(grid):
        kind = SWAP_RIGHT if y1 == y2 else SWAP_DOWN
        mask[kind, y1, x1] = True
    mask[ACTIVATE_BONUS] = grid == BONUS_TILE
    return mask


class TileMatchEnv(gym.Env):
    metadata = {"render_modes": []}

    def __init__(self, config: Optional[GameConfig] = None,
                 invalid_action_penalty: float = -1.0,
                 step_penalty: float = 0.0,
                 max_episode_steps: int = 500) -> None:
        super().__init__()
        self.game = MatchThreeGame(config)

        self.invalid_action_penalty = float(invalid_action_penalty)
        self.step_penalty = float(step_penalty)
        self.max_episode_steps = int(max_episode_steps)

        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(low=0, high=BONUS_TILE, shape=(HEIGHT, WIDTH), dtype=np.uint8),
            }
        )

        # Action: (kind, y, x)
        self.action_space = spaces.MultiDiscrete((NUM_ACTION_KINDS, HEIGHT, WIDTH))

        self.grid = np.zeros((HEIGHT, WIDTH), dtype=np.uint8)
        self.score = 0
        self._steps = 0
        self._mask = np.zeros((NUM_ACTION_KINDS, HEIGHT, WIDTH), dtype=np.bool_)

    def _get_obs(self) -> Dict[str, Any]:
        return {"grid": self.grid.copy()}

    def _get_info(self, drops: int = 0) -> Dict[str, Any]:
        return {
            "action_mask": self._mask.copy(),
            "score": self.score,
            "steps": self._steps,
            "drops": drops,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.game.reseed(seed)
        result = self.game.new_game()
        self.grid = result.grid
        self.score = result.score
        self._steps = 0
        self._mask = _compute_action_mask(self.grid)
        return self._get_obs(), self._get_info()

    def step(self, action: np.ndarray | Tuple[int, int, int]):
        kind, y, x = map(int, action)

        if kind == ACTIVATE_BONUS:
            result = self.game.activate_bonus_tile(x, y, self.grid, self.score)
        else:
            nx, ny = (x + 1, y) if kind == SWAP_RIGHT else (x, y + 1)
            if nx < WIDTH and ny < HEIGHT:
                result = self.game.move_tile(x, y, nx, ny, self.grid, self.score)
            else:
                result = None

        reward = self.step_penalty
        if result is None or not result.drops:
            # Nothing moved: out-of-board swap, matchless swap or missing bonus
            reward += self.invalid_action_penalty
            drops = 0
        else:
            reward += float(result.score - self.score)
            self.grid = result.grid
            self.score = result.score
            drops = len(result.drops)
            self._mask = _compute_action_mask(self.grid)

        self._steps += 1
        terminated = not bool(self._mask.any())
        truncated = self._steps >= self.max_episode_steps

        return self._get_obs(), float(reward), terminated, truncated, self._get_info(drops)

    def close(self) -> None:
        pass
