#!/usr/bin/env python3
"""
Pocket Arcade - Main Entry Point

Three small games on top of UI-free engines:
  tictactoe  - two players share the keyboard
  shooter    - shoot falling rocks before they reach the bottom
  puzzle     - sudoku-style grid with live mistake highlighting

Usage:
    pocket-arcade [tictactoe|shooter|puzzle]
    python -m pocket_arcade.main shooter

Settings come from POCKET_ARCADE_* environment variables or a .env file.
"""
import argparse
import logging

import pygame

from pocket_arcade.config import get_settings
from pocket_arcade.gameplay.puzzle import GridPuzzleEngine
from pocket_arcade.gameplay.scheduler import FixedStepScheduler
from pocket_arcade.gameplay.shooter import ArcadeShooterEngine
from pocket_arcade.gameplay.tictactoe import TicTacToeEngine
from pocket_arcade.ui.input_handler import create_input_handler
from pocket_arcade.ui.renderer import PuzzleRenderer, ShooterRenderer, TicTacToeRenderer

logger = logging.getLogger(__name__)

GAMES = ("tictactoe", "shooter", "puzzle")
WINDOW_TITLES = {
    "tictactoe": "Neon Tic-Tac-Toe",
    "shooter": "Asteroid Shooter",
    "puzzle": "Grid Puzzle",
}


def build_game(name: str, surface: pygame.Surface, settings):
    """
    Create the engine, its renderer and (for the shooter) a scheduler.
    Returns (engine, renderer, scheduler).
    """
    scheduler = FixedStepScheduler()

    if name == "tictactoe":
        engine = TicTacToeEngine()
        renderer = TicTacToeRenderer(surface, engine)
    elif name == "shooter":
        engine = ArcadeShooterEngine(field_width=settings.shooter_field_width)
        renderer = ShooterRenderer(surface, engine)
        scheduler.every("tick", settings.shooter_tick_interval_ms / 1000, engine.tick)
        scheduler.every("spawn", settings.shooter_spawn_interval_ms / 1000, engine.spawn_obstacle)
    elif name == "puzzle":
        engine = GridPuzzleEngine(settings.puzzle_default_size)
        renderer = PuzzleRenderer(surface, engine)
    else:
        raise ValueError(f"unknown game: {name}")

    return engine, renderer, scheduler


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Pocket Arcade")
    parser.add_argument("game", nargs="?", default="tictactoe", choices=GAMES,
                        help="Which game to launch")
    args = parser.parse_args()

    settings = get_settings()

    # Configure logging
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    pygame.init()
    surface = pygame.display.set_mode((settings.window_width, settings.window_height))
    pygame.display.set_caption(WINDOW_TITLES[args.game])

    engine, renderer, scheduler = build_game(args.game, surface, settings)
    input_handler = create_input_handler(engine, renderer)
    clock = pygame.time.Clock()

    logger.info(f"Starting {args.game} at {settings.frame_rate} fps")

    running = True
    try:
        while running:
            dt = clock.tick(settings.frame_rate) / 1000

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if input_handler.handle_key(event.key):
                        running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    input_handler.handle_click(event.pos)

            input_handler.handle_held_keys(dt)
            scheduler.advance(dt)

            renderer.render()
            pygame.display.flip()
    finally:
        pygame.quit()
        logger.info("Pocket Arcade stopped")


if __name__ == "__main__":
    main()
