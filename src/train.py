"""
Training script for JumpMan DRL agents.
Supports PPO and A2C algorithms with explorer/speedrunner personas.
"""
import argparse
import os
import sys

# Add parent directory to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from stable_baselines3 import PPO, A2C
from stable_baselines3.common.monitor import Monitor
from stable_baselines3.common.logger import configure

from envs.game.jumpman_env import JumpManEnv

ALGOS = {"ppo": PPO, "a2c": A2C}

ALGO_KWARGS = {
    "ppo": dict(
        n_steps=2048,
        batch_size=256,
        gamma=0.999,
        gae_lambda=0.98,
        n_epochs=10,
        learning_rate=3e-4,
        clip_range=0.2,
    ),
    "a2c": dict(
        n_steps=1024,
        gamma=0.999,
        gae_lambda=0.98,
        learning_rate=7e-4,
    ),
}


def make_env(reward_mode="explorer", levels_path=None):
    """Create and wrap the JumpMan environment"""
    env = JumpManEnv(reward_mode=reward_mode, levels_path=levels_path)
    env = Monitor(env)
    return env


def main():
    parser = argparse.ArgumentParser(
        description="Train PPO or A2C agent on JumpMan."
    )
    parser.add_argument(
        "--algo",
        type=str,
        choices=sorted(ALGOS),
        default="ppo",
        help="RL algorithm to use (ppo or a2c)"
    )
    parser.add_argument(
        "--reward_mode",
        type=str,
        choices=["explorer", "speedrunner"],
        default="explorer",
        help="Reward shaping mode (explorer or speedrunner)"
    )
    parser.add_argument(
        "--timesteps",
        type=int,
        default=500_000,
        help="Number of training timesteps"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=7,
        help="Random seed for reproducibility"
    )
    parser.add_argument(
        "--levels",
        type=str,
        default=None,
        help="YAML level catalog (defaults to the built-in levels)"
    )
    parser.add_argument(
        "--logdir",
        type=str,
        default="logs",
        help="TensorBoard log directory"
    )
    parser.add_argument(
        "--modeldir",
        type=str,
        default="models",
        help="Directory to save trained models"
    )
    args = parser.parse_args()

    # Create directories
    os.makedirs(args.logdir, exist_ok=True)
    os.makedirs(args.modeldir, exist_ok=True)

    # Construct clean folder names
    run_name = f"{args.algo}_jumpman_{args.reward_mode}_seed{args.seed}"
    log_path = os.path.join(args.logdir, run_name)
    model_path = os.path.join(args.modeldir, run_name)

    print(f"\n🎮 Training {args.algo.upper()} on JumpMan")
    print(f"   Reward Mode: {args.reward_mode}")
    print(f"   Seed: {args.seed}")
    print(f"   Timesteps: {args.timesteps:,}\n")

    env = make_env(reward_mode=args.reward_mode, levels_path=args.levels)

    model = ALGOS[args.algo](
        policy="MlpPolicy",
        env=env,
        verbose=1,
        tensorboard_log=log_path,
        seed=args.seed,
        **ALGO_KWARGS[args.algo],
    )

    # Configure logger
    new_logger = configure(log_path, ["stdout", "tensorboard"])
    model.set_logger(new_logger)

    print("🚀 Starting training...")
    model.learn(total_timesteps=args.timesteps, progress_bar=True)

    model.save(model_path)

    print(f"\n✅ Training complete!")
    print(f"   Model saved to: {model_path}.zip")
    print(f"   TensorBoard logs: {log_path}")
    print(f"\n📊 View training progress with:")
    print(f"   tensorboard --logdir {args.logdir}\n")

    env.close()


if __name__ == "__main__":
    main()
