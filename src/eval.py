"""
Evaluation script for trained JumpMan agents.
Collects detailed performance metrics and saves to CSV.
"""
import argparse
import csv
import os
import sys

# Add parent directory to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np
from stable_baselines3 import PPO, A2C

from envs.game.jumpman_env import JumpManEnv

FIELDNAMES = [
    "episode", "reward", "deaths", "completions", "won", "score", "lives",
    "coins_collected", "stomps", "jumps", "frames", "level_index",
    "max_x_reached", "reward_mode",
]


def run_episode(model, env, seed=None) -> dict:
    """Run one episode and collect metrics"""
    obs, info = env.reset(seed=seed)
    done = False
    trunc = False
    ep_reward = 0.0
    last_info = {}

    while not (done or trunc):
        action, _ = model.predict(obs, deterministic=True)
        obs, r, done, trunc, info = env.step(action)
        ep_reward += float(r)
        last_info = info

    # Extract metrics from final info
    return {
        "reward": ep_reward,
        "deaths": last_info.get("deaths", 0),
        "completions": last_info.get("completions", 0),
        "won": int(last_info.get("won", False)),
        "score": last_info.get("score", 0),
        "lives": last_info.get("lives", 0),
        "coins_collected": last_info.get("coins_collected", 0),
        "stomps": last_info.get("stomps", 0),
        "jumps": last_info.get("jumps", 0),
        "frames": last_info.get("frames", 0),
        "level_index": last_info.get("level_index", 0),
        "max_x_reached": last_info.get("max_x_reached", 0),
        "reward_mode": last_info.get("reward_mode", "unknown"),
    }


def main():
    parser = argparse.ArgumentParser(
        description="Evaluate trained JumpMan agent"
    )
    parser.add_argument(
        "--model_path",
        type=str,
        required=True,
        help="Path to .zip model (e.g., models/ppo_jumpman_explorer_seed7)"
    )
    parser.add_argument(
        "--reward_mode",
        type=str,
        default="explorer",
        choices=["explorer", "speedrunner"],
        help="Reward mode to evaluate with"
    )
    parser.add_argument(
        "--episodes",
        type=int,
        default=10,
        help="Number of episodes to evaluate"
    )
    parser.add_argument(
        "--levels",
        type=str,
        default=None,
        help="YAML level catalog (defaults to the built-in levels)"
    )
    parser.add_argument(
        "--render",
        type=int,
        default=0,
        help="Render episodes (1) or not (0)"
    )
    parser.add_argument(
        "--csv_out",
        type=str,
        default="logs/eval_metrics.csv",
        help="Path to save evaluation metrics CSV"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Base seed; episode N resets with seed + N - 1"
    )
    args = parser.parse_args()

    if not os.path.exists(args.model_path + ".zip"):
        raise FileNotFoundError(f"Model not found: {args.model_path}.zip")

    os.makedirs(os.path.dirname(args.csv_out) or ".", exist_ok=True)

    # Load model (try PPO first, fall back to A2C)
    print(f"\n📦 Loading model from {args.model_path}.zip")
    try:
        model = PPO.load(args.model_path)
        algo = "PPO"
    except Exception:
        model = A2C.load(args.model_path)
        algo = "A2C"

    print(f"   Algorithm: {algo}")
    print(f"   Reward Mode: {args.reward_mode}")
    print(f"   Episodes: {args.episodes}\n")

    render_mode = "human" if args.render else None
    env = JumpManEnv(reward_mode=args.reward_mode, render_mode=render_mode,
                     levels_path=args.levels)

    rows = []
    print("🎮 Running evaluation episodes...")
    for ep in range(1, args.episodes + 1):
        print(f"   Episode {ep}/{args.episodes}...", end=" ")
        seed = args.seed + ep - 1 if args.seed is not None else None
        metrics = run_episode(model, env, seed=seed)
        metrics["episode"] = ep
        rows.append(metrics)

        if metrics["won"]:
            print(f"🏆 Cleared every level! Reward: {metrics['reward']:.1f}")
        else:
            print(f"💀 Game over on level {metrics['level_index'] + 1}. Reward: {metrics['reward']:.1f}")

    rewards = [r["reward"] for r in rows]
    wins = [r["won"] for r in rows]
    completions = [r["completions"] for r in rows]
    scores = [r["score"] for r in rows]
    coins = [r["coins_collected"] for r in rows]
    stomps = [r["stomps"] for r in rows]

    print(f"\n📊 Summary Statistics ({args.episodes} episodes):")
    print(f"   Mean Reward: {np.mean(rewards):.2f} ± {np.std(rewards):.2f}")
    print(f"   Win Rate: {np.mean(wins)*100:.1f}%")
    print(f"   Mean Levels Cleared: {np.mean(completions):.2f}")
    print(f"   Mean Score: {np.mean(scores):.1f}")
    print(f"   Mean Coins: {np.mean(coins):.1f}")
    print(f"   Mean Stomps: {np.mean(stomps):.1f}")

    with open(args.csv_out, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()
        writer.writerows(rows)

    print(f"\n💾 Saved detailed metrics to: {args.csv_out}\n")

    env.close()


if __name__ == "__main__":
    main()
