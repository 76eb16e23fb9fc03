"""Console Snake: a terminal snake game engine."""

from console_snake.command import Command, Quit, Turn
from console_snake.config import GameConfig
from console_snake.game import EndReason, Game, GameStatus
from console_snake.geometry import Direction, Point
from console_snake.snake import Snake
from console_snake.ui import UI

__all__ = [
    "Command",
    "Direction",
    "EndReason",
    "Game",
    "GameConfig",
    "GameStatus",
    "Point",
    "Quit",
    "Snake",
    "Turn",
    "UI",
]
