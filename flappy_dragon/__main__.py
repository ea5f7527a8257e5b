"""
Entry point: python -m flappy_dragon / flappy-dragon
"""

import argparse
import logging
import sys
from typing import List, Optional

import pygame

from .constants import RENDER_FPS, CELL_SIZE, GAME_TITLE
from .flappy_client import FlappyClient
from .game_session import GameSession

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flappy-dragon", description=GAME_TITLE)
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible worlds")
    parser.add_argument("--fps", type=int, default=RENDER_FPS, help="Render frames per second")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE, help="Pixels per glyph cell")
    parser.add_argument("--debug", action="store_true", help="Enable DEBUG logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)

    session = GameSession(seed=args.seed)
    try:
        client = FlappyClient(session, fps=args.fps, cell_size=args.cell_size)
        client.run()
    except pygame.error as e:
        logger.error(f"Display error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
