"""
Standalone playable JumpMan.
Arrow keys or A/D move, Space/Up/W jump, P pauses, Enter confirms, Esc quits.
"""
import argparse
import os
import sys

# Add parent directory to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pygame

from envs.game.constants import FPS, SCREEN_HEIGHT, SCREEN_WIDTH
from envs.game.flow import Command, Game
from envs.game.levels import load_levels
from envs.game.render import Renderer

LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
JUMP_KEYS = (pygame.K_UP, pygame.K_w, pygame.K_SPACE)


def update_held_keys(game, key, pressed):
    if key in LEFT_KEYS:
        game.input.left = pressed
    elif key in RIGHT_KEYS:
        game.input.right = pressed
    elif key in JUMP_KEYS:
        game.input.jump = pressed


def main():
    parser = argparse.ArgumentParser(description="Play JumpMan")
    parser.add_argument(
        "--levels",
        type=str,
        default=None,
        help="YAML level catalog (defaults to the built-in levels)"
    )
    args = parser.parse_args()

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption("JumpMan - Retro Platformer")
    clock = pygame.time.Clock()

    game = Game(load_levels(args.levels))
    renderer = Renderer(screen)

    running = True
    while running:
        # Game.tick clamps long stalls
        dt = clock.tick(FPS) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_p:
                    game.dispatch(Command.PAUSE)
                elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    game.confirm()
                else:
                    update_held_keys(game, event.key, True)
            elif event.type == pygame.KEYUP:
                update_held_keys(game, event.key, False)

        game.tick(dt)

        renderer.draw(game.world)
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
