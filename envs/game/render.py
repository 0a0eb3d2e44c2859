import pygame

from .constants import (
    BACKGROUND,
    COIN_EDGE,
    COIN_FILL,
    ENEMY_EDGE,
    ENEMY_FILL,
    GOAL_CLOSED,
    GOAL_OPEN,
    GOAL_POLE,
    HUD_TEXT,
    OVERLAY_SHADE,
    OVERLAY_TEXT,
    PLATFORM_EDGE,
    PLATFORM_FILL,
    PLAYER_BODY,
    PLAYER_VISOR,
    STRIPE,
    TITLE_TEXT,
)
from .world import GameState

OVERLAY_MESSAGES = {
    GameState.PAUSED: "PAUSED - press P to resume",
    GameState.LEVEL_COMPLETE: "LEVEL COMPLETE! Press Enter",
    GameState.GAME_OVER: "GAME OVER - Press Enter for New Game",
}


class Renderer:
    """Draws a World onto a pygame surface. Never writes to the world."""

    def __init__(self, surface):
        self.surface = surface
        self.width, self.height = surface.get_size()
        if not pygame.font.get_init():
            pygame.font.init()
        self.hud_font = pygame.font.Font(None, 20)
        self.title_font = pygame.font.Font(None, 56)
        self.text_font = pygame.font.Font(None, 22)
        self.overlay_font = pygame.font.Font(None, 26)

    def draw(self, world):
        screen = self.surface
        screen.fill(BACKGROUND)

        # Background stripes
        for x in range(0, self.width, 40):
            pygame.draw.rect(screen, STRIPE, (x, 0, 20, self.height))

        if world.state is GameState.MENU:
            self._draw_title(world.level.name)

        self._draw_world(world)
        self._draw_hud(world)

        message = OVERLAY_MESSAGES.get(world.state)
        if message:
            self._draw_overlay(message)

    def _draw_title(self, level_name):
        cy = self.height // 2
        self._center_text("JUMPMAN", cy - 80, self.title_font, TITLE_TEXT)
        self._center_text(f"Level: {level_name}", cy - 40, self.text_font, TITLE_TEXT)
        self._center_text("Left/Right to move, Space/Up to jump", cy, self.text_font, TITLE_TEXT)
        self._center_text("P to pause - Press Enter to start", cy + 30, self.text_font, TITLE_TEXT)

    def _draw_world(self, world):
        screen = self.surface
        for platform in world.platforms:
            r = platform.rect.to_pygame()
            pygame.draw.rect(screen, PLATFORM_FILL, r)
            pygame.draw.rect(screen, PLATFORM_EDGE, r, 1)

        for coin in world.coins:
            r = coin.rect.to_pygame()
            pygame.draw.ellipse(screen, COIN_FILL, r)
            pygame.draw.ellipse(screen, COIN_EDGE, r, 1)

        if world.goal is not None:
            r = world.goal.rect.to_pygame()
            # Flag turns bright once every coin is collected
            flag = GOAL_OPEN if world.all_coins_collected else GOAL_CLOSED
            pygame.draw.rect(screen, GOAL_POLE, (r.x, r.y, 4, r.height))
            pygame.draw.rect(screen, flag, (r.x + 4, r.y, r.width - 4, 20))

        for enemy in world.enemies:
            r = enemy.rect.to_pygame()
            pygame.draw.rect(screen, ENEMY_FILL, r)
            pygame.draw.rect(screen, ENEMY_EDGE, r, 1)

        if world.player is not None:
            r = world.player.rect.to_pygame()
            pygame.draw.rect(screen, PLAYER_BODY, r)
            pygame.draw.rect(screen, PLAYER_VISOR, (r.x + 4, r.y + 6, r.width - 8, 8))

    def _draw_hud(self, world):
        session = world.session
        lines = [
            f"Score: {session.score}",
            f"Lives: {session.lives}",
            f"Time: {session.level_time:.1f}s",
        ]
        for i, line in enumerate(lines):
            text = self.hud_font.render(line, True, HUD_TEXT)
            self.surface.blit(text, (12, 8 + i * 18))

        level_text = self.hud_font.render(
            f"Level {world.level_index + 1}/{len(world.levels)}", True, HUD_TEXT
        )
        self.surface.blit(level_text, (self.width - 140, 8))

    def _draw_overlay(self, message):
        shade = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        shade.fill(OVERLAY_SHADE)
        self.surface.blit(shade, (0, 0))
        self._center_text(message, self.height // 2, self.overlay_font, OVERLAY_TEXT)

    def _center_text(self, message, y, font, color):
        text = font.render(message, True, color)
        rect = text.get_rect(center=(self.width // 2, y))
        self.surface.blit(text, rect)
