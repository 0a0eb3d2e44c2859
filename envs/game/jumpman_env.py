import os
from typing import List, Optional, Sequence, Tuple

import gymnasium as gym
import numpy as np
import pygame
import yaml
from gymnasium import spaces

from .constants import (
    ENEMY_SPEED,
    FPS,
    JUMP_POWER,
    MOVE_SPEED,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    STARTING_LIVES,
)
from .flow import Command, Game
from .levels import Level, load_levels
from .render import Renderer
from .simulation import Event, InputState
from .world import GameState

REWARD_MODES = ("explorer", "speedrunner")

# Actions: 0=noop, 1=left, 2=right, 3=jump, 4=left+jump, 5=right+jump
ACTIONS = {
    0: (False, False, False),
    1: (True, False, False),
    2: (False, True, False),
    3: (False, False, True),
    4: (True, False, True),
    5: (False, True, True),
}

NEAREST_COINS = 3
NEAREST_ENEMIES = 3
# player(8) + goal(2) + coins(3 x 3) + enemies(3 x 4)
OBS_SIZE = 8 + 2 + NEAREST_COINS * 3 + NEAREST_ENEMIES * 4


class JumpManEnv(gym.Env):
    """
    JumpMan Gymnasium Environment

    One episode is a full playthrough: levels advance automatically and the
    episode ends on game over, which includes clearing the last level.

    Reward modes:
    - 'explorer': Rewards coins, stomps and careful survival
    - 'speedrunner': Rewards fast completion and forward progress
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    def __init__(self, render_mode: Optional[str] = None, reward_mode: str = "explorer",
                 reward_config_path: Optional[str] = None,
                 levels: Optional[Sequence[Level]] = None, levels_path: Optional[str] = None,
                 max_steps: int = 10000):
        super().__init__()
        if reward_mode not in REWARD_MODES:
            raise ValueError(f"Unknown reward mode {reward_mode!r}, expected one of {REWARD_MODES}")
        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unsupported render mode {render_mode!r}")
        self.render_mode = render_mode
        self.reward_mode = reward_mode
        self.levels = tuple(levels) if levels is not None else load_levels(levels_path)
        self.dt = 1.0 / FPS

        # Load reward configuration
        if reward_config_path is None:
            # Default path relative to this file
            current_dir = os.path.dirname(os.path.abspath(__file__))
            reward_config_path = os.path.join(current_dir, "..", "..", "configs", "rewards.yaml")

        try:
            with open(reward_config_path, "r") as f:
                reward_configs = yaml.safe_load(f)
            self.reward_config = reward_configs[reward_mode]
        except (OSError, yaml.YAMLError, KeyError, TypeError) as e:
            print(f"Warning: Could not load reward config from {reward_config_path}: {e}")
            print("Using default hardcoded values.")
            self.reward_config = self._get_default_reward_config(reward_mode)

        self.action_space = spaces.Discrete(len(ACTIONS))
        self.observation_space = spaces.Box(
            low=-np.inf, high=np.inf, shape=(OBS_SIZE,), dtype=np.float32
        )

        self.max_steps = max_steps
        self.game = None
        self.frames = 0
        self.furthest_x = 0.0

        # Episode metrics
        self._deaths = 0
        self._completions = 0
        self._coins_collected = 0
        self._stomps = 0
        self._jumps = 0
        self._won = False

        # Pygame lazy init
        self._pygame = None
        self._screen = None
        self._clock = None
        self._renderer = None

    def _lazy_pygame(self):
        if self._pygame is None:
            pygame.init()
            self._pygame = True
            if self.render_mode == "human":
                self._screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
                pygame.display.set_caption("JumpMan - DRL")
            else:
                self._screen = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
            self._clock = pygame.time.Clock()
            self._renderer = Renderer(self._screen)

    def _get_default_reward_config(self, reward_mode: str) -> dict:
        """Fallback reward configuration if YAML fails to load"""
        if reward_mode == "explorer":
            return {
                "alive_bonus": 0.01,
                "new_ground_multiplier": 0.02,
                "coin_reward": 10.0,
                "stomp_reward": 15.0,
                "death_penalty": -25.0,
                "completion_reward": 50.0,
                "all_coins_bonus": 30.0,
                "standing_still_penalty": -0.01,
            }
        else:  # speedrunner
            return {
                "new_ground_multiplier": 0.05,
                "forward_multiplier": 0.01,
                "backward_penalty": -0.02,
                "coin_reward": 1.0,
                "stomp_reward": 2.0,
                "death_penalty": -25.0,
                "completion_reward": 100.0,
                "par_time": 20.0,
                "time_bonus_per_second": 3.0,
                "time_penalty": -0.005,
            }

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, dict]:
        super().reset(seed=seed)
        options = options or {}

        self.game = Game(self.levels)
        start_level = int(options.get("level", 0))
        if start_level:
            self.game.world.load_level(start_level)
        self.game.dispatch(Command.START)

        self.frames = 0
        self.furthest_x = self.game.world.player.rect.x
        self._deaths = 0
        self._completions = 0
        self._coins_collected = 0
        self._stomps = 0
        self._jumps = 0
        self._won = False

        obs = self._get_obs()
        info = {
            "reward_mode": self.reward_mode,
            "level_count": len(self.levels),
            "level_index": self.game.world.level_index,
            "world": self.game.world.snapshot(),
        }
        return obs, info

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, dict]:
        if self.game is None:
            raise RuntimeError("Call reset() before step()")
        world = self.game.world
        prev_x = world.player.rect.x
        prev_level = world.level_index

        events = self.game.tick(self.dt, self._action_to_input(action))
        self._count_events(events)

        reward = self._calculate_step_reward(events, prev_x)

        if Event.LEVEL_COMPLETE in events:
            self._completions += 1
            self._won = not world.has_next_level
            reward += self._calculate_completion_bonus()
            # Next level lands on its title screen; start it straight away
            self.game.dispatch(Command.ADVANCE)
            if self.game.state is GameState.MENU:
                self.game.dispatch(Command.START)

        if world.level_index != prev_level:
            self.furthest_x = world.player.rect.x

        terminated = self.game.state is GameState.GAME_OVER
        self.frames += 1
        truncated = not terminated and self.frames >= self.max_steps

        obs = self._get_obs()

        if self.render_mode == "human":
            self.render()

        info = {
            "reward_mode": self.reward_mode,
            "deaths": self._deaths,
            "completions": self._completions,
            "won": self._won,
            "coins_collected": self._coins_collected,
            "stomps": self._stomps,
            "jumps": self._jumps,
            "frames": self.frames,
            "score": world.session.score,
            "lives": world.session.lives,
            "level_index": world.level_index,
            "max_x_reached": int(self.furthest_x),
        }

        return obs, float(reward), bool(terminated), bool(truncated), info

    def _action_to_input(self, action) -> InputState:
        """Convert discrete action to held-key flags"""
        left, right, jump = ACTIONS[int(action)]
        return InputState(left=left, right=right, jump=jump)

    def _count_events(self, events: List[Event]):
        for event in events:
            if event is Event.COIN:
                self._coins_collected += 1
            elif event is Event.STOMP:
                self._stomps += 1
            elif event is Event.JUMP:
                self._jumps += 1
            elif event is Event.DEATH:
                self._deaths += 1

    def _get_obs(self) -> np.ndarray:
        """Get current observation"""
        world = self.game.world
        player = world.player
        body = player.rect
        cx = body.x + body.w / 2
        cy = body.y + body.h / 2

        obs = [
            body.x / world.width,
            body.y / world.height,
            player.vx / MOVE_SPEED,
            player.vy / JUMP_POWER,
            float(player.on_ground),
            world.session.lives / STARTING_LIVES,
            world.level_index / max(1, len(world.levels) - 1),
            len(world.coins) / max(1, world.coins_total),
        ]

        goal = world.goal.rect
        obs.extend([
            (goal.x + goal.w / 2 - cx) / world.width,
            (goal.y + goal.h / 2 - cy) / world.height,
        ])

        obs.extend(self._get_nearest(world.coins, NEAREST_COINS, cx, cy, with_speed=False))
        obs.extend(self._get_nearest(world.enemies, NEAREST_ENEMIES, cx, cy, with_speed=True))

        return np.array(obs, dtype=np.float32)

    def _get_nearest(self, entities, n: int, cx: float, cy: float, with_speed: bool) -> list:
        """Relative offsets of the n closest entities, zero-padded"""
        world = self.game.world
        dists = []
        for entity in entities:
            r = entity.rect
            dx = r.x + r.w / 2 - cx
            dy = r.y + r.h / 2 - cy
            dists.append((dx * dx + dy * dy, dx, dy, entity))
        dists.sort(key=lambda d: d[0])

        obs = []
        for i in range(n):
            if i < len(dists):
                _, dx, dy, entity = dists[i]
                obs.extend([dx / world.width, dy / world.height])
                if with_speed:
                    obs.append(entity.speed / ENEMY_SPEED)
                obs.append(1.0)
            else:
                obs.extend([0.0] * (4 if with_speed else 3))
        return obs

    def _calculate_step_reward(self, events: List[Event], prev_x: float) -> float:
        """Calculate reward for this step"""
        cfg = self.reward_config
        world = self.game.world
        reward = 0.0

        x = world.player.rect.x
        dx = x - prev_x

        if Event.DEATH in events:
            # Respawn teleports the player, ignore that movement
            dx = 0.0
            reward += cfg["death_penalty"]
        elif x > self.furthest_x:
            reward += (x - self.furthest_x) * cfg["new_ground_multiplier"]
            self.furthest_x = x

        reward += cfg.get("coin_reward", 0.0) * events.count(Event.COIN)
        reward += cfg.get("stomp_reward", 0.0) * events.count(Event.STOMP)

        if self.reward_mode == "explorer":
            reward += cfg["alive_bonus"]
            if dx == 0.0 and Event.DEATH not in events:
                reward += cfg["standing_still_penalty"]
        else:  # speedrunner
            if dx > 0:
                reward += dx * cfg["forward_multiplier"]
            elif dx < 0:
                reward += cfg["backward_penalty"]
            reward += cfg["time_penalty"]

        return reward

    def _calculate_completion_bonus(self) -> float:
        """Calculate bonus for completing a level"""
        cfg = self.reward_config
        world = self.game.world
        bonus = cfg["completion_reward"]
        if self.reward_mode == "explorer":
            if world.all_coins_collected:
                bonus += cfg["all_coins_bonus"]
        else:  # speedrunner
            spare = max(0.0, cfg["par_time"] - world.session.level_time)
            bonus += spare * cfg["time_bonus_per_second"]
        return bonus

    def render(self):
        """Render the environment"""
        if self.render_mode is None or self.game is None:
            return None
        self._lazy_pygame()

        if self.render_mode == "human":
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.close()
                    return None

        self._renderer.draw(self.game.world)

        if self.render_mode == "human":
            pygame.display.flip()
            self._clock.tick(self.metadata["render_fps"])
        elif self.render_mode == "rgb_array":
            arr = pygame.surfarray.array3d(self._screen)
            return np.transpose(arr, (1, 0, 2))

    def close(self):
        """Clean up resources"""
        if self._pygame is not None:
            pygame.quit()
            self._pygame = None
            self._screen = None
            self._clock = None
            self._renderer = None
