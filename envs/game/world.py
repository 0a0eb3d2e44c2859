from enum import Enum
from typing import Optional, Sequence

from .constants import SCREEN_HEIGHT, SCREEN_WIDTH
from .entities import Player
from .levels import Level
from .session import Session


class GameState(Enum):
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    LEVEL_COMPLETE = "level_complete"
    GAME_OVER = "game_over"


class World:
    """Everything a running game owns: the active level copy, the player,
    the HUD counters and the current flow state.

    The renderer and the RL wrapper only read from it; the simulation step
    and the flow machine are the only writers.
    """

    def __init__(self, levels: Sequence[Level], width: int = SCREEN_WIDTH,
                 height: int = SCREEN_HEIGHT):
        if not levels:
            raise ValueError("World needs at least one level")
        self.levels = tuple(levels)
        self.width = width
        self.height = height
        self.session = Session()

        self.state = GameState.MENU
        self.level_index = 0
        self.player: Optional[Player] = None
        self.platforms = []
        self.coins = []
        self.enemies = []
        self.goal = None
        self.coins_total = 0

        self.load_level(0)

    @property
    def level(self) -> Level:
        return self.levels[self.level_index]

    @property
    def all_coins_collected(self) -> bool:
        return not self.coins

    @property
    def has_next_level(self) -> bool:
        return self.level_index + 1 < len(self.levels)

    def load_level(self, index: int):
        if not 0 <= index < len(self.levels):
            raise IndexError(f"Level index {index} out of range [0, {len(self.levels)})")
        self.level_index = index
        level = self.levels[index]
        self.platforms, self.coins, self.enemies, self.goal = level.instantiate()
        self.coins_total = len(self.coins)
        self.player = Player(*level.spawn)
        self.session.reset_timer()
        self.state = GameState.MENU

    def lose_life(self) -> bool:
        """Costs a life and respawns. Returns True when that was the last one."""
        self.session.lives -= 1
        if self.session.lives <= 0:
            self.state = GameState.GAME_OVER
            self.session.stop_timer()
            return True
        self.player.respawn()
        return False

    def snapshot(self) -> dict:
        """Plain-data copy of the world for logging and RL info."""
        def box(rect):
            return (rect.x, rect.y, rect.w, rect.h)

        return {
            "state": self.state.value,
            "level_index": self.level_index,
            "level_name": self.level.name,
            "level_count": len(self.levels),
            "score": self.session.score,
            "lives": self.session.lives,
            "level_time": self.session.level_time,
            "all_coins_collected": self.all_coins_collected,
            "player": box(self.player.rect) if self.player else None,
            "platforms": [box(p.rect) for p in self.platforms],
            "coins": [box(c.rect) for c in self.coins],
            "enemies": [box(e.rect) for e in self.enemies],
            "goal": box(self.goal.rect) if self.goal else None,
        }
