"""Tests for the curses console UI with a mocked window."""

import curses
from unittest.mock import MagicMock, call

import numpy as np
import pytest

from console_snake.command import Quit, Turn
from console_snake.config import GameConfig
from console_snake.console import BORDER, FOOD, ConsoleUI, command_for_key
from console_snake.game import Game
from console_snake.geometry import Direction, Point
from console_snake.snake import Snake


def _game():
    game = Game(GameConfig(width=10, height=10), rng=np.random.default_rng(0))
    game.snake = Snake(Point(5, 5), 3, Direction.RIGHT)
    game.food = Point(1, 2)
    return game


def _window(rows=24, cols=80):
    window = MagicMock()
    window.getmaxyx.return_value = (rows, cols)
    return window


def _written(window):
    """Map (row, col) to the text written there via addstr."""
    cells = {}
    for c in window.addstr.call_args_list:
        row, col, text = c.args[:3]
        cells[(row, col)] = text
    return cells


class TestKeyMapping:
    def test_quit_keys(self):
        for key in (ord("q"), ord("Q"), 27, 3):
            assert command_for_key(key) == Quit()

    def test_arrow_keys(self):
        assert command_for_key(curses.KEY_UP) == Turn(Direction.UP)
        assert command_for_key(curses.KEY_RIGHT) == Turn(Direction.RIGHT)
        assert command_for_key(curses.KEY_DOWN) == Turn(Direction.DOWN)
        assert command_for_key(curses.KEY_LEFT) == Turn(Direction.LEFT)

    def test_unbound_key(self):
        assert command_for_key(ord("x")) is None
        assert command_for_key(ord("c")) is None


class TestGetCommand:
    def test_timeout_returns_none(self):
        window = _window()
        window.getch.return_value = -1
        ui = ConsoleUI(window)
        assert ui.get_command(0.25) is None
        window.timeout.assert_called_once_with(250)

    def test_wait_is_truncated(self):
        window = _window()
        window.getch.return_value = -1
        ConsoleUI(window).get_command(0.0109)
        window.timeout.assert_called_once_with(10)

    def test_key_becomes_command(self):
        window = _window()
        window.getch.return_value = curses.KEY_LEFT
        assert ConsoleUI(window).get_command(0.5) == Turn(Direction.LEFT)


class TestRender:
    def test_draws_snake_food_and_border(self):
        window = _window()
        ui = ConsoleUI(window)
        ui.render(_game())

        cells = _written(window)
        assert cells[(6, 6)] == "O"
        assert cells[(6, 5)] == "═"
        assert cells[(6, 4)] == "═"
        assert cells[(3, 2)] == FOOD
        assert cells[(0, 0)] == BORDER
        assert cells[(11, 11)] == BORDER
        window.refresh.assert_called_once()

    def test_status_line(self):
        window = _window()
        game = _game()
        game.score = 7
        ConsoleUI(window).render(game)
        assert _written(window)[(12, 0)].startswith("Score: 7")

    def test_status_line_not_cut_to_board_width(self):
        window = _window()
        game = Game(GameConfig(width=5, height=5), rng=np.random.default_rng(0))
        game.score = 7
        game.speed = 1
        ConsoleUI(window).render(game)
        assert _written(window)[(7, 0)] == "Score: 7  Speed: 1"

    def test_status_line_on_default_board(self):
        window = _window()
        game = _game()
        game.score = 7
        game.speed = 1
        ConsoleUI(window).render(game)
        assert _written(window)[(12, 0)] == "Score: 7  Speed: 1"

    def test_status_line_fits_narrow_terminal(self):
        window = _window(rows=13, cols=12)
        game = _game()
        game.score = 7
        ConsoleUI(window).render(game)
        assert _written(window)[(12, 0)] == "Score: 7  S"

    def test_no_food(self):
        window = _window()
        game = _game()
        game.food = None
        ConsoleUI(window).render(game)
        assert FOOD not in _written(window).values()


class TestLifecycle:
    def test_init_rejects_small_terminal(self):
        window = _window(rows=10, cols=40)
        with pytest.raises(ValueError, match="needs at least 12x13"):
            ConsoleUI(window).init(_game())

    def test_init_sets_up_terminal(self, monkeypatch):
        calls = []
        monkeypatch.setattr(curses, "curs_set", lambda v: calls.append(("curs_set", v)))
        monkeypatch.setattr(curses, "raw", lambda: calls.append(("raw",)))
        monkeypatch.setattr(curses, "has_colors", lambda: False)
        window = _window(rows=24, cols=80)

        ConsoleUI(window).init(_game())

        assert calls == [("curs_set", 0), ("raw",)]
        window.keypad.assert_called_once_with(True)
        window.clear.assert_called_once()

    def test_shutdown_restores_terminal(self, monkeypatch):
        calls = []
        monkeypatch.setattr(curses, "noraw", lambda: calls.append(("noraw",)))
        monkeypatch.setattr(curses, "curs_set", lambda v: calls.append(("curs_set", v)))
        ConsoleUI(_window()).shutdown(_game())
        assert calls == [("noraw",), ("curs_set", 1)]

    def test_border_uses_dim_attribute(self):
        window = _window()
        ConsoleUI(window).render(_game())
        assert call(0, 0, BORDER, curses.A_DIM) in window.addstr.call_args_list
