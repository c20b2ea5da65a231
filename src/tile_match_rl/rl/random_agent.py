from __future__ import annotations

import random

import gymnasium as gym
import numpy as np

# Ensure envs are registered
import tile_match_rl.env  # noqa: F401
from tile_match_rl.game import format_grid


def run_random(steps: int = 200, seed: int | None = None) -> float:
    env = gym.make("TileMatch-9x9-v0")
    rng = random.Random(seed)
    obs, info = env.reset(seed=seed)
    total_reward = 0.0
    for _ in range(steps):
        # Prefer valid actions if available
        valid = np.argwhere(info["action_mask"])
        if len(valid):
            action = tuple(int(v) for v in valid[rng.randrange(len(valid))])
        else:
            action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total_reward += float(reward)
        if terminated or truncated:
            print(f"Episode finished with score {info['score']}")
            obs, info = env.reset()
    print(format_grid(obs["grid"]))
    env.close()
    print(f"Random agent total reward: {total_reward:.2f}")
    return total_reward


if __name__ == "__main__":  # pragma: no cover
    run_random()
