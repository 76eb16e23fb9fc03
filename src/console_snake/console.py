"""Curses front end: draws the board and turns key presses into commands."""

from __future__ import annotations

import curses
import logging
from typing import TYPE_CHECKING

from console_snake.command import Command, Quit, Turn
from console_snake.geometry import Direction
from console_snake.glyphs import body_glyphs
from console_snake.ui import UI

if TYPE_CHECKING:
    from console_snake.game import Game

logger = logging.getLogger(__name__)

BORDER = "#"
FOOD = "•"

_ESCAPE = 27
_CTRL_C = 3

_KEY_COMMANDS: dict[int, Command] = {
    ord("q"): Quit(),
    ord("Q"): Quit(),
    _ESCAPE: Quit(),
    _CTRL_C: Quit(),
    curses.KEY_UP: Turn(Direction.UP),
    curses.KEY_RIGHT: Turn(Direction.RIGHT),
    curses.KEY_DOWN: Turn(Direction.DOWN),
    curses.KEY_LEFT: Turn(Direction.LEFT),
}

# Colour pair numbers; the snake cycles through three as speed rises.
_PAIR_BORDER = 1
_PAIR_FOOD = 2
_SNAKE_PAIRS = (3, 4, 5)


def command_for_key(key: int) -> Command | None:
    """Map a curses key code to a command, or ``None`` if unbound."""
    return _KEY_COMMANDS.get(key)


class ConsoleUI(UI):
    """Renders a game into a curses window.

    The board is drawn with a one-cell ``#`` border, so grid cell (x, y)
    appears at screen column ``x + 1`` and row ``y + 1``. A status line
    sits below the border.
    """

    def __init__(self, window: curses.window) -> None:
        self.window = window
        self._border_attr = curses.A_DIM
        self._food_attr = curses.A_BOLD
        self._snake_attrs = (curses.A_NORMAL,) * len(_SNAKE_PAIRS)

    def init(self, game: Game) -> None:
        rows, cols = self.window.getmaxyx()
        need_rows, need_cols = game.height + 3, game.width + 2
        if rows < need_rows or cols < need_cols:
            raise ValueError(
                f"terminal is {cols}x{rows} but a {game.width}x{game.height} "
                f"board needs at least {need_cols}x{need_rows}."
            )

        curses.curs_set(0)
        curses.raw()
        self.window.keypad(True)
        if curses.has_colors():
            self._init_colors()
        self.window.clear()

    def _init_colors(self) -> None:
        curses.start_color()
        curses.use_default_colors()
        curses.init_pair(_PAIR_BORDER, curses.COLOR_WHITE, -1)
        curses.init_pair(_PAIR_FOOD, curses.COLOR_WHITE, -1)
        snake_colors = (curses.COLOR_GREEN, curses.COLOR_CYAN, curses.COLOR_YELLOW)
        for pair, color in zip(_SNAKE_PAIRS, snake_colors, strict=True):
            curses.init_pair(pair, color, -1)

        self._border_attr = curses.color_pair(_PAIR_BORDER) | curses.A_DIM
        self._food_attr = curses.color_pair(_PAIR_FOOD) | curses.A_BOLD
        self._snake_attrs = tuple(curses.color_pair(p) for p in _SNAKE_PAIRS)

    def render(self, game: Game) -> None:
        self._draw_borders(game)
        self._draw_background(game)
        self._draw_food(game)
        self._draw_snake(game)
        self._draw_status(game)
        self.window.refresh()

    def shutdown(self, game: Game) -> None:
        curses.noraw()
        curses.curs_set(1)
        logger.info("Console closed with final score %d.", game.score)

    def get_command(self, max_wait: float) -> Command | None:
        # Truncate so we never block past the budget.
        self.window.timeout(max(0, int(max_wait * 1000)))
        key = self.window.getch()
        if key == -1:
            return None
        return command_for_key(key)

    def _draw_borders(self, game: Game) -> None:
        right, bottom = game.width + 1, game.height + 1
        for y in range(bottom + 1):
            self.window.addstr(y, 0, BORDER, self._border_attr)
            self.window.addstr(y, right, BORDER, self._border_attr)
        for x in range(right + 1):
            self.window.addstr(0, x, BORDER, self._border_attr)
            self.window.addstr(bottom, x, BORDER, self._border_attr)

    def _draw_background(self, game: Game) -> None:
        blank = " " * game.width
        for y in range(1, game.height + 1):
            self.window.addstr(y, 1, blank)

    def _draw_food(self, game: Game) -> None:
        if game.food is not None:
            self.window.addstr(game.food.y + 1, game.food.x + 1, FOOD, self._food_attr)

    def _draw_snake(self, game: Game) -> None:
        attr = self._snake_attrs[game.speed % len(self._snake_attrs)]
        for point, glyph in body_glyphs(game.snake.body):
            self.window.addstr(point.y + 1, point.x + 1, glyph, attr)

    def _draw_status(self, game: Game) -> None:
        row = game.height + 2
        # The last column of the last row cannot be written without error.
        cols = self.window.getmaxyx()[1] - 1
        self.window.move(row, 0)
        self.window.clrtoeol()
        status = f"Score: {game.score}  Speed: {game.speed}"
        self.window.addstr(row, 0, status[:cols])
