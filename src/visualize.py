"""
Visualization script for trained JumpMan agents.
Watch the agent play in real-time with rendering.
"""
import argparse
import os
import sys

# Add parent directory to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from stable_baselines3 import PPO, A2C

from envs.game.jumpman_env import JumpManEnv


def main():
    parser = argparse.ArgumentParser(
        description="Visualize trained JumpMan agent"
    )
    parser.add_argument(
        "--model_path",
        type=str,
        default="models/ppo_jumpman_explorer_seed7",
        help="Path to .zip model"
    )
    parser.add_argument(
        "--reward_mode",
        type=str,
        default="explorer",
        choices=["explorer", "speedrunner"],
        help="Reward mode for environment"
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=60,
        help="Frames per second for rendering"
    )
    parser.add_argument(
        "--stochastic",
        action="store_true",
        help="Use stochastic actions (deterministic=False)"
    )
    parser.add_argument(
        "--episodes",
        type=int,
        default=1,
        help="Number of episodes to run (will show all)"
    )
    parser.add_argument(
        "--levels",
        type=str,
        default=None,
        help="YAML level catalog (defaults to the built-in levels)"
    )
    args = parser.parse_args()

    print(f"\n📦 Loading model from {args.model_path}.zip")
    try:
        model = PPO.load(args.model_path)
        algo = "PPO"
    except Exception:
        model = A2C.load(args.model_path)
        algo = "A2C"

    print(f"   Algorithm: {algo}")
    print(f"   Reward Mode: {args.reward_mode}")
    print(f"   FPS: {args.fps}")
    print(f"   Episodes: {args.episodes}")
    print(f"   Deterministic: {not args.stochastic}\n")

    env = JumpManEnv(
        render_mode="human",
        reward_mode=args.reward_mode,
        levels_path=args.levels,
    )
    env.metadata["render_fps"] = args.fps

    print("🎮 Starting visualization (close window to exit)...\n")

    for ep in range(1, args.episodes + 1):
        obs, info = env.reset()
        done, trunc = False, False
        total_reward = 0.0

        print(f"Episode {ep}/{args.episodes}:")

        while not (done or trunc):
            action, _ = model.predict(obs, deterministic=not args.stochastic)
            obs, reward, done, trunc, info = env.step(action)
            total_reward += reward

        print(f"   Total Reward: {total_reward:.2f}")
        print(f"   Levels Cleared: {info.get('completions', 0)}")
        print(f"   Won: {'✅ Yes' if info.get('won') else '❌ No'}")
        print(f"   Score: {info.get('score', 0)}")
        print(f"   Coins: {info.get('coins_collected', 0)}  Stomps: {info.get('stomps', 0)}")
        print(f"   Frames: {info.get('frames', 0)}\n")

    env.close()


if __name__ == "__main__":
    main()
