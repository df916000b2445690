"""Command-line entry point that opens the game window and runs it."""

from __future__ import annotations

import argparse
import random

from .config import CANVAS_HEIGHT, CANVAS_WIDTH, WINDOW_HEIGHT, WINDOW_WIDTH
from .game import GameState
from .graphics import Graphics
from .render import Brush, ScaleMode

TITLE = "Bubble Popper"
FONT = "assets/bubbles.ttf"


def build_game(graphics, seed=None):
    """Create a game, set up the window on ``graphics`` and start the game."""
    game = GameState(graphics, random.Random(seed))

    graphics.create_window(WINDOW_WIDTH, WINDOW_HEIGHT, TITLE)
    graphics.set_draw_function(game.draw)
    graphics.set_update_function(game.update)

    graphics.set_canvas_size(CANVAS_WIDTH, CANVAS_HEIGHT)
    graphics.set_canvas_scale_mode(ScaleMode.FIT)
    graphics.set_window_background(Brush(fill_color=[0.6, 0.8, 0.95]))
    graphics.set_font(FONT)

    game.init()
    return game


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bubblepopper", description="Pop bubbles, collect stars.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    parser.add_argument("--mute", action="store_true", help="play no sounds")
    return parser


def main(argv=None):
    """Run the game until its window is closed; return the exit status."""
    args = _parser().parse_args(argv)
    graphics = Graphics(audio=not args.mute)
    build_game(graphics, args.seed)
    try:
        graphics.start_message_loop()
    finally:
        graphics.destroy_window()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())