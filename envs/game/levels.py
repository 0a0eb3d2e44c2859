import copy
import os
from typing import Optional, Sequence, Tuple

import yaml

from .constants import PLAYER_SPAWN_OFFSET, PLAYER_SPAWN_X, SCREEN_HEIGHT, SCREEN_WIDTH
from .entities import Coin, Enemy, Goal, Platform


class Level:
    """Immutable blueprint for one stage. Never handed out directly to a running world."""

    def __init__(self, name: str, platforms: Sequence[Platform], coins: Sequence[Coin],
                 enemies: Sequence[Enemy], goal: Goal, spawn: Tuple[float, float]):
        self.name = name
        self.platforms = tuple(platforms)
        self.coins = tuple(coins)
        self.enemies = tuple(enemies)
        self.goal = goal
        self.spawn = (float(spawn[0]), float(spawn[1]))

    def instantiate(self):
        """Fresh copies of every placement, safe to mutate."""
        return (
            copy.deepcopy(list(self.platforms)),
            copy.deepcopy(list(self.coins)),
            copy.deepcopy(list(self.enemies)),
            copy.deepcopy(self.goal),
        )

    def __repr__(self):
        return f"Level({self.name!r}, platforms={len(self.platforms)}, coins={len(self.coins)}, enemies={len(self.enemies)})"


def build_levels(width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> Tuple[Level, ...]:
    """The three stock stages, laid out for a width x height screen."""
    W, H = width, height
    spawn = (PLAYER_SPAWN_X, H - PLAYER_SPAWN_OFFSET)

    # Level 1 - gentle intro
    l1 = Level(
        "Beginner Bluffs",
        platforms=[
            Platform(0, H - 40, W, 40),  # ground
            Platform(60, H - 120, 120, 16),
            Platform(260, H - 180, 120, 16),
            Platform(460, H - 140, 120, 16),
            Platform(650, H - 210, 120, 16),
        ],
        coins=[Coin(110, H - 160), Coin(310, H - 220), Coin(510, H - 180)],
        enemies=[Enemy(350, H - 60, 300, 500)],
        goal=Goal(W - 60, H - 250, 30, 60),
        spawn=spawn,
    )

    # Level 2 - gaps in the ground
    l2 = Level(
        "Gaps & Goons",
        platforms=[
            Platform(0, H - 40, 230, 40),
            Platform(280, H - 40, 200, 40),
            Platform(520, H - 40, 280, 40),
            Platform(120, H - 160, 120, 16),
            Platform(340, H - 220, 120, 16),
            Platform(560, H - 180, 120, 16),
        ],
        coins=[Coin(170, H - 200), Coin(390, H - 260), Coin(610, H - 220)],
        enemies=[Enemy(140, H - 60, 120, 220), Enemy(560, H - 60, 520, 760)],
        goal=Goal(W - 60, H - 230, 30, 60),
        spawn=spawn,
    )

    # Level 3 - tower climb
    l3 = Level(
        "Tower Tangle",
        platforms=[
            Platform(0, H - 40, W, 40),
            Platform(80, H - 120, 80, 16),
            Platform(180, H - 180, 80, 16),
            Platform(280, H - 240, 80, 16),
            Platform(380, H - 300, 80, 16),
            Platform(500, H - 260, 80, 16),
            Platform(620, H - 220, 80, 16),
        ],
        coins=[Coin(100, H - 160), Coin(300, H - 280), Coin(520, H - 300), Coin(650, H - 260)],
        enemies=[Enemy(420, H - 60, 380, 620)],
        goal=Goal(W - 70, H - 320, 30, 60),
        spawn=spawn,
    )

    return (l1, l2, l3)


def _numbers(entry, count, what, level_name):
    if not isinstance(entry, (list, tuple)) or len(entry) != count:
        raise ValueError(f"{level_name}: {what} needs {count} numbers, got {entry!r}")
    try:
        return [float(v) for v in entry]
    except (TypeError, ValueError):
        raise ValueError(f"{level_name}: {what} has a non-numeric value: {entry!r}") from None


def _parse_level(data: dict, index: int) -> Level:
    if not isinstance(data, dict):
        raise ValueError(f"Level #{index} must be a mapping, got {type(data).__name__}")
    name = str(data.get("name", f"Level {index + 1}"))
    if "goal" not in data:
        raise ValueError(f"{name}: missing goal")
    if "spawn" not in data:
        raise ValueError(f"{name}: missing spawn")
    platforms = [Platform(*_numbers(p, 4, "platform", name)) for p in data.get("platforms") or []]
    coins = [Coin(*_numbers(c, 2, "coin", name)) for c in data.get("coins") or []]
    # enemy entries: [x, feet_y, min_x, max_x]
    enemies = [Enemy(*_numbers(e, 4, "enemy", name)) for e in data.get("enemies") or []]
    goal = Goal(*_numbers(data["goal"], 4, "goal", name))
    spawn = _numbers(data["spawn"], 2, "spawn", name)
    return Level(name, platforms, coins, enemies, goal, spawn)


def load_levels(path: Optional[str] = None, width: int = SCREEN_WIDTH,
                height: int = SCREEN_HEIGHT) -> Tuple[Level, ...]:
    """Read a level catalog from YAML, falling back to the stock stages."""
    if path is None or not os.path.exists(path):
        if path is not None:
            print(f"Warning: Level file {path} not found. Using built-in levels.")
        return build_levels(width, height)

    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    entries = data.get("levels") if isinstance(data, dict) else None
    if not entries:
        raise ValueError(f"{path}: expected a non-empty 'levels' list")
    return tuple(_parse_level(entry, i) for i, entry in enumerate(entries))
