"""Command-line launcher for the console snake game."""

from __future__ import annotations

import argparse
import curses
import logging
import sys

from console_snake.config import GameConfig
from console_snake.console import ConsoleUI
from console_snake.game import Game

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="console-snake",
        description="Play snake in the terminal. Arrow keys steer, q quits.",
    )
    parser.add_argument("--width", type=int, default=10, help="Grid width in cells.")
    parser.add_argument("--height", type=int, default=10, help="Grid height in cells.")
    return parser


def _play(stdscr: curses.window, game: Game) -> int:
    return game.run(ConsoleUI(stdscr))


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``console-snake`` CLI."""
    # Anything below WARNING on stderr would draw over the curses screen.
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = GameConfig(width=args.width, height=args.height)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)  # noqa: T201
        return 2

    try:
        score = curses.wrapper(_play, Game(config))
    except ValueError as exc:
        # Raised by ConsoleUI.init when the terminal cannot fit the board.
        print(f"error: {exc}", file=sys.stderr)  # noqa: T201
        return 2

    print(f"Game Over! Your score is {score}")  # noqa: T201
    return 0


if __name__ == "__main__":
    sys.exit(main())
