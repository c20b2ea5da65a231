from __future__ import annotations

import argparse
import os

import gymnasium as gym

# Ensure envs are registered
import tile_match_rl.env  # noqa: F401
from tile_match_rl.env.wrappers import FlattenDiscreteActionWrapper, ResampleInvalidActionWrapper

ENV_ID = "TileMatch-9x9-v0"


def make_env(env_id: str = ENV_ID, seed: int | None = None) -> gym.Env:
    env = gym.make(env_id)
    env = FlattenDiscreteActionWrapper(env)
    # Resample invalid actions for vanilla PPO; also forwards get_action_mask
    env = ResampleInvalidActionWrapper(env)
    if seed is not None:
        env.reset(seed=seed)
    return env


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--algo", choices=["ppo", "maskable"], default="maskable")
    p.add_argument("--timesteps", type=int, default=200_000)
    p.add_argument("--logdir", type=str, default="./logs/ppo")
    p.add_argument("--save_path", type=str, default="./models/ppo_tilematch.zip")
    p.add_argument("--n_envs", type=int, default=4)
    p.add_argument("--seed", type=int, default=None)
    return p


def main() -> None:
    args = build_parser().parse_args()

    from stable_baselines3.common.vec_env import SubprocVecEnv, VecMonitor

    if args.algo == "maskable":
        # sb3-contrib MaskablePPO
        from sb3_contrib import MaskablePPO
        from sb3_contrib.common.wrappers import ActionMasker

        def mask_fn(env):
            return env.get_action_mask()

        def make_env_idx(i: int):
            def thunk():
                seed = None if args.seed is None else args.seed + i
                return ActionMasker(make_env(seed=seed), mask_fn)
            return thunk

        vec_env = VecMonitor(SubprocVecEnv([make_env_idx(i) for i in range(args.n_envs)]))
        model = MaskablePPO(
            policy="MultiInputPolicy",
            env=vec_env,
            verbose=1,
            tensorboard_log=args.logdir,
            seed=args.seed,
        )
    else:
        # Vanilla PPO with resampling wrapper
        from stable_baselines3 import PPO

        def make_env_idx(i: int):
            def thunk():
                seed = None if args.seed is None else args.seed + i
                return make_env(seed=seed)
            return thunk

        vec_env = VecMonitor(SubprocVecEnv([make_env_idx(i) for i in range(args.n_envs)]))
        model = PPO(
            policy="MultiInputPolicy",
            env=vec_env,
            verbose=1,
            tensorboard_log=args.logdir,
            seed=args.seed,
        )

    os.makedirs(os.path.dirname(args.save_path) or ".", exist_ok=True)
    model.learn(total_timesteps=args.timesteps)
    model.save(args.save_path)
    print(f"Saved model to {args.save_path}")


if __name__ == "__main__":  # pragma: no cover
    main()
