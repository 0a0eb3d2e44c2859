import os

# Headless pygame for the render tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from envs.game.constants import EPSILON, PLAYER_HEIGHT
from envs.game.entities import Coin, Enemy, Goal, Platform
from envs.game.levels import Level
from envs.game.world import GameState, World

GROUND_Y = 400
# Resting height for a player standing on the ground platform
STANDING_Y = GROUND_Y - PLAYER_HEIGHT - EPSILON


def make_world(platforms=((0, GROUND_Y, 800, 40),), coins=(), enemies=(),
               goal=(780, 0, 10, 10), spawn=(100, STANDING_Y), playing=True):
    level = Level(
        "Test Yard",
        platforms=[Platform(*p) for p in platforms],
        coins=[Coin(*c) for c in coins],
        enemies=[Enemy(*e) for e in enemies],
        goal=Goal(*goal),
        spawn=spawn,
    )
    world = World([level], width=800, height=480)
    if playing:
        world.state = GameState.PLAYING
        world.session.start_timer()
    return world


@pytest.fixture
def world():
    return make_world()
