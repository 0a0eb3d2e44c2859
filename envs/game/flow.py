from enum import Enum
from typing import List, Optional, Sequence

from .constants import MAX_DT, SCREEN_HEIGHT, SCREEN_WIDTH
from .levels import Level, build_levels
from .simulation import Event, InputState, advance
from .world import GameState, World


class Command(Enum):
    START = "start"
    PAUSE = "pause"
    ADVANCE = "advance"
    RESTART = "restart"


# The single confirm key means a different command in each screen
CONFIRM_COMMANDS = {
    GameState.MENU: Command.START,
    GameState.LEVEL_COMPLETE: Command.ADVANCE,
    GameState.GAME_OVER: Command.RESTART,
}


def clamp_dt(raw_dt: float) -> float:
    return max(0.0, min(raw_dt, MAX_DT))


class Game:
    """Frame driver and flow machine around a World.

    Menu -> Playing <-> Paused, Playing -> LevelComplete | GameOver,
    LevelComplete -> Menu (next level) | GameOver (last level),
    GameOver -> Menu (new game from level 0).
    """

    def __init__(self, levels: Optional[Sequence[Level]] = None,
                 width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT):
        if levels is None:
            levels = build_levels(width, height)
        self.world = World(levels, width, height)
        self.input = InputState()

    @property
    def state(self) -> GameState:
        return self.world.state

    def tick(self, raw_dt: float, inp: Optional[InputState] = None) -> List[Event]:
        """Run one frame. The simulation only moves while playing."""
        if self.world.state is not GameState.PLAYING:
            return []
        return advance(clamp_dt(raw_dt), inp if inp is not None else self.input, self.world)

    def dispatch(self, command: Command) -> bool:
        """Apply a one-shot command. Returns False when it does nothing in the current state."""
        world = self.world
        state = world.state

        if command is Command.START and state is GameState.MENU:
            world.state = GameState.PLAYING
            world.session.start_timer()
            return True

        if command is Command.PAUSE:
            if state is GameState.PLAYING:
                world.state = GameState.PAUSED
                return True
            if state is GameState.PAUSED:
                world.state = GameState.PLAYING
                return True
            return False

        if command is Command.ADVANCE and state is GameState.LEVEL_COMPLETE:
            if world.has_next_level:
                # Lands on the next level's title screen; START begins it
                world.load_level(world.level_index + 1)
            else:
                world.state = GameState.GAME_OVER
            return True

        if command is Command.RESTART and state is GameState.GAME_OVER:
            world.load_level(0)
            world.session.reset()
            return True

        return False

    def confirm(self) -> bool:
        command = CONFIRM_COMMANDS.get(self.world.state)
        if command is None:
            return False
        return self.dispatch(command)
