#!/usr/bin/env python3
"""
Bee Catch - Standalone entry point.

Usage:
    python main.py
    python main.py --assets-dir ./image --seed 42
"""

import argparse
import os
import sys

import pygame

# Support running from any directory - add project root to path
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from hive.games.input import InputManager
from hive.games.input.sources import MouseInputSource
from hive.logging import configure_logging, get_logger
from games.BeeCatch import config
from games.BeeCatch.assets import AssetLoadError
from games.BeeCatch.game_info import get_game_mode
from games.BeeCatch.game_mode import BeeCatchMode

log = get_logger('main')


def build_parser() -> argparse.ArgumentParser:
    """Command line parser built from the game's declared arguments."""
    parser = argparse.ArgumentParser(description=BeeCatchMode.DESCRIPTION)
    for arg in BeeCatchMode.get_arguments():
        options = {k: v for k, v in arg.items() if k != 'name'}
        parser.add_argument(arg['name'], **options)
    parser.add_argument('--log-level', type=str, default=None,
                        help='Log level: TRACE, DEBUG, INFO, WARNING, ERROR, OFF')
    return parser


def main(argv=None) -> int:
    """Run Bee Catch."""
    args = build_parser().parse_args(argv)
    if args.log_level:
        configure_logging(level=args.log_level)

    pygame.init()
    screen = pygame.display.set_mode((config.SCREEN_WIDTH, config.SCREEN_HEIGHT))
    pygame.display.set_caption(config.WINDOW_TITLE)

    try:
        game = get_game_mode(assets_dir=args.assets_dir, seed=args.seed)
    except AssetLoadError as e:
        log.critical("%s", e)
        pygame.quit()
        return 1

    input_manager = InputManager(MouseInputSource())
    clock = pygame.time.Clock()
    running = True

    log.info("Bee Catch ready: click bees, avoid hornets, ESC to quit")

    while running:
        dt = clock.tick(args.fps) / 1000.0

        input_manager.update(dt)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False

        game.handle_input(input_manager.get_events())
        game.update(dt)

        game.render(screen)
        pygame.display.flip()

    log.info("Final score: %d", game.get_score())
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
