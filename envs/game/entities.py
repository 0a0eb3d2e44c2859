from .constants import (
    COIN_SIZE,
    ENEMY_HEIGHT,
    ENEMY_SPEED,
    ENEMY_WIDTH,
    PLAYER_HEIGHT,
    PLAYER_WIDTH,
)
from .geometry import Rect


class Player:
    def __init__(self, x, y, width=PLAYER_WIDTH, height=PLAYER_HEIGHT):
        self.rect = Rect(x, y, width, height)
        self.vx = 0.0
        self.vy = 0.0
        self.on_ground = False
        self.spawn = (float(x), float(y))
        # Set when a jump is consumed, cleared once the jump key is released
        self.jump_latched = False

    def respawn(self):
        self.rect.x, self.rect.y = self.spawn
        self.vx = 0.0
        self.vy = 0.0
        self.on_ground = False


class Platform:
    def __init__(self, x, y, width, height):
        self.rect = Rect(x, y, width, height)


class Coin:
    def __init__(self, x, y):
        self.rect = Rect(x, y, COIN_SIZE, COIN_SIZE)


class Enemy:
    """Walker pacing between min_x and max_x. (x, y) is where its feet rest."""

    def __init__(self, x, y, min_x, max_x, speed=ENEMY_SPEED):
        if max_x - min_x < ENEMY_WIDTH:
            raise ValueError(f"Patrol range {min_x}..{max_x} is narrower than an enemy")
        self.rect = Rect(x, y - ENEMY_HEIGHT, ENEMY_WIDTH, ENEMY_HEIGHT)
        self.min_x = float(min_x)
        self.max_x = float(max_x)
        self.speed = float(speed)
        self.alive = True

    def update(self, dt):
        self.rect.x += self.speed * dt
        if self.rect.x < self.min_x:
            self.rect.x = self.min_x
            self.speed = abs(self.speed)
        if self.rect.right > self.max_x:
            self.rect.x = self.max_x - self.rect.w
            self.speed = -abs(self.speed)


class Goal:
    def __init__(self, x, y, width, height):
        self.rect = Rect(x, y, width, height)
