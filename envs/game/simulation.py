from enum import Enum
from typing import List

from .constants import (
    COIN_SCORE,
    EPSILON,
    FALL_MARGIN,
    GRAVITY,
    JUMP_POWER,
    MOVE_SPEED,
    STOMP_BOUNCE,
    STOMP_DEPTH,
    STOMP_SCORE,
)
from .geometry import overlaps
from .world import GameState, World


class Event(Enum):
    JUMP = "jump"
    COIN = "coin"
    STOMP = "stomp"
    DEATH = "death"
    GAME_OVER = "game_over"
    LEVEL_COMPLETE = "level_complete"


class InputState:
    """Held-key flags, written by the input side between ticks."""

    def __init__(self, left=False, right=False, jump=False):
        self.left = left
        self.right = right
        self.jump = jump

    def __repr__(self):
        return f"InputState(left={self.left}, right={self.right}, jump={self.jump})"


def _lose_life(world: World, events: List[Event]):
    events.append(Event.DEATH)
    if world.lose_life():
        events.append(Event.GAME_OVER)


def advance(dt: float, inp: InputState, world: World) -> List[Event]:
    """One fixed step of play. Mutates world and reports what happened."""
    if world.player is None:
        raise RuntimeError("advance() called with no player in the world")
    if world.state is not GameState.PLAYING:
        raise RuntimeError(f"advance() called in state {world.state.name}")

    events = []
    player = world.player
    body = player.rect
    world.session.tick(dt)

    # Input -> velocity, no acceleration
    target_vx = 0.0
    if inp.left:
        target_vx -= MOVE_SPEED
    if inp.right:
        target_vx += MOVE_SPEED
    player.vx = target_vx

    # Jump fires once per press
    if not inp.jump:
        player.jump_latched = False
    elif player.on_ground and not player.jump_latched:
        player.vy = -JUMP_POWER
        player.on_ground = False
        player.jump_latched = True
        events.append(Event.JUMP)

    player.vy += GRAVITY * dt

    # Integrate X, then resolve against every platform
    old = body.copy()
    body.x += player.vx * dt
    for platform in world.platforms:
        p = platform.rect
        if overlaps(body, p):
            if old.right <= p.x:  # came from the left
                body.x = p.x - body.w - EPSILON
            elif old.x >= p.right:  # came from the right
                body.x = p.right + EPSILON

    # Integrate Y
    old = body.copy()
    body.y += player.vy * dt
    player.on_ground = False
    for platform in world.platforms:
        p = platform.rect
        if overlaps(body, p):
            if old.bottom <= p.y:  # landed on top
                body.y = p.y - body.h - EPSILON
                player.vy = 0.0
                player.on_ground = True
            elif old.y >= p.bottom:  # hit from below
                body.y = p.bottom + EPSILON
                player.vy = 0.0

    # Screen bounds
    if body.x < 0:
        body.x = 0.0
    if body.right > world.width:
        body.x = world.width - body.w

    # Fell off the bottom
    if body.y > world.height + FALL_MARGIN:
        _lose_life(world, events)
        return events

    for coin in list(world.coins):
        if overlaps(body, coin.rect):
            world.session.score += COIN_SCORE
            world.coins.remove(coin)
            events.append(Event.COIN)

    for enemy in world.enemies:
        enemy.update(dt)
        if overlaps(body, enemy.rect):
            if player.vy > 0 and body.bottom - enemy.rect.y < STOMP_DEPTH:
                world.session.score += STOMP_SCORE
                enemy.alive = False
                player.vy = -JUMP_POWER * STOMP_BOUNCE
                events.append(Event.STOMP)
            else:
                _lose_life(world, events)
                break
    world.enemies = [e for e in world.enemies if e.alive]

    if world.state is GameState.PLAYING and overlaps(body, world.goal.rect):
        world.state = GameState.LEVEL_COMPLETE
        world.session.stop_timer()
        events.append(Event.LEVEL_COMPLETE)

    return events
