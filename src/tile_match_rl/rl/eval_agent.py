from __future__ import annotations

import argparse

import numpy as np

from tile_match_rl.rl.train_ppo import make_env


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--algo", choices=["ppo", "maskable"], default="maskable")
    p.add_argument("--model", type=str, required=True)
    p.add_argument("--episodes", type=int, default=10)
    p.add_argument("--seed", type=int, default=0)
    return p


def main() -> None:
    args = build_parser().parse_args()
    if args.algo == "maskable":
        from sb3_contrib import MaskablePPO as Algo
    else:
        from stable_baselines3 import PPO as Algo

    env = make_env()
    model = Algo.load(args.model, device="auto")

    scores = []
    for ep in range(args.episodes):
        obs, info = env.reset(seed=args.seed + ep)
        done = False
        while not done:
            if args.algo == "maskable":
                action, _ = model.predict(obs, deterministic=True, action_masks=env.get_action_mask())
            else:
                action, _ = model.predict(obs, deterministic=True)
            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
        scores.append(info["score"])
        print(f"Episode {ep + 1}/{args.episodes} score={info['score']} steps={info['steps']}")
    env.close()
    print(f"Mean score over {args.episodes} episodes: {float(np.mean(scores)):.1f}")


if __name__ == "__main__":  # pragma: no cover
    main()
