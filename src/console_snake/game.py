"""Timed game loop composing the snake, food and speed ramp."""

from __future__ import annotations

import enum
import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

import numpy as np

from console_snake.command import Quit, Turn
from console_snake.config import GameConfig
from console_snake.geometry import Direction, Point
from console_snake.snake import Snake

if TYPE_CHECKING:
    from console_snake.ui import UI

logger = logging.getLogger(__name__)

# Index order for drawing the initial heading.
_HEADINGS: list[Direction] = [
    Direction.UP,
    Direction.RIGHT,
    Direction.DOWN,
    Direction.LEFT,
]


class GameStatus(enum.Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


class EndReason(enum.Enum):
    """Why a game reached :attr:`GameStatus.GAME_OVER`."""

    QUIT = "quit"
    WALL = "wall"
    SELF = "self"


class Game:
    """Single-player snake game driven by a real-time loop.

    The game owns the snake, the food cell, the score and the speed level.
    :meth:`run` alternates between waiting on the UI for commands for one
    tick interval and advancing the snake with :meth:`advance`.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.clock = clock

        heading = _HEADINGS[int(self.rng.integers(0, len(_HEADINGS)))]
        self.snake = Snake(
            self.config.start_point, self.config.initial_length, heading,
        )

        self.food: Point | None = None
        self.score = 0
        self.speed = 0
        self.status = GameStatus.RUNNING
        self.end_reason: EndReason | None = None

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER

    def run(self, ui: UI) -> int:
        """Play until the player quits or the snake crashes.

        Returns the final score. Errors raised by *ui* are not caught.
        """
        self.place_food()
        logger.info(
            "Starting %dx%d game heading %s.",
            self.width, self.height, self.snake.get_direction().name,
        )
        ui.init(self)
        ui.render(self)

        while not self.game_over:
            interval = self.calculate_interval()
            if not self.wait_for_tick(ui, interval):
                break
            if self.advance():
                ui.render(self)

        ui.shutdown(self)
        return self.score

    def wait_for_tick(self, ui: UI, interval: float) -> bool:
        """Poll *ui* for commands until *interval* seconds have elapsed.

        Turns are checked against the heading at the start of the tick, so
        two quick turns can never reverse the snake. Returns ``False`` if
        the player quit.
        """
        heading = self.snake.get_direction()
        deadline = self.clock() + interval
        remaining = interval
        while remaining > 0:
            command = ui.get_command(remaining)
            if isinstance(command, Quit):
                self._end(EndReason.QUIT)
                return False
            if isinstance(command, Turn):
                self.turn(command.direction, heading)
            remaining = deadline - self.clock()
        return True

    def turn(self, direction: Direction, heading: Direction | None = None) -> bool:
        """Steer the snake unless *direction* is a no-op or a reversal.

        *heading* defaults to the snake's current direction.
        """
        if heading is None:
            heading = self.snake.get_direction()
        if direction in (heading, heading.opposite()):
            logger.debug("Ignoring turn %s while heading %s.", direction.name, heading.name)
            return False
        self.snake.set_direction(direction)
        return True

    def advance(self) -> bool:
        """Apply the end-of-tick rules.

        Returns ``True`` if the game is still running afterwards.
        """
        if self.game_over:
            return False

        # Collisions are checked before moving so a dead snake stays put.
        if self.has_collided_with_wall():
            self._end(EndReason.WALL)
            return False
        if self.has_bitten_itself():
            self._end(EndReason.SELF)
            return False

        self.snake.slither()

        if self.food is not None and self.snake.get_head_point() == self.food:
            self.snake.grow()
            self.place_food()
            self.score += 1
            if self.score % self.config.speed_threshold == 0:
                self._speed_up()

        return True

    def place_food(self) -> Point | None:
        """Drop food on a random cell that the snake does not occupy."""
        if len(set(self.snake.body)) >= self.width * self.height:
            logger.warning("No free cells available for food.")
            self.food = None
            return None

        while True:
            point = Point(
                int(self.rng.integers(0, self.width)),
                int(self.rng.integers(0, self.height)),
            )
            if not self.snake.contains_point(point):
                break

        self.food = point
        logger.debug("Food placed at (%d, %d).", point.x, point.y)
        return point

    def calculate_interval(self) -> float:
        """Return the current tick length in seconds."""
        return self.config.interval_ms(self.speed) / 1000

    def has_collided_with_wall(self) -> bool:
        """Check whether the head sits on the edge it is moving towards."""
        head = self.snake.get_head_point()
        direction = self.snake.get_direction()
        if direction is Direction.UP:
            return head.y == 0
        if direction is Direction.RIGHT:
            return head.x == self.width - 1
        if direction is Direction.DOWN:
            return head.y == self.height - 1
        return head.x == 0

    def has_bitten_itself(self) -> bool:
        """Check whether the next head lands on the body (look-ahead).

        The head is excluded, and so is the tail unless growth will keep
        it in place.
        """
        next_head = self.snake.next_head()
        body = self.snake.body
        remaining = body[1:] if self.snake.growth_pending else body[1:-1]
        return next_head in remaining

    def _speed_up(self) -> None:
        if self.speed >= self.config.max_speed:
            return
        self.speed += 1
        logger.info(
            "Speed increased to %d at score %d (interval %d ms).",
            self.speed, self.score, self.config.interval_ms(self.speed),
        )

    def _end(self, reason: EndReason) -> None:
        """Mark the game as over."""
        self.status = GameStatus.GAME_OVER
        self.end_reason = reason
        logger.info(
            "Game over (%s) with score %d at speed %d.",
            reason.value, self.score, self.speed,
        )
