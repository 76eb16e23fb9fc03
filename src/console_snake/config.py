"""Game configuration and timing constants."""

from __future__ import annotations

from dataclasses import dataclass

from console_snake.geometry import Direction, Point

MAX_SPEED = 20
MIN_INTERVAL_MS = 200
MAX_INTERVAL_MS = 700


@dataclass(frozen=True)
class GameConfig:
    """Board size, starting snake and speed ramp for a single game.

    Validation happens up front so a game can never start on a board where
    the initial snake does not fit or where the speed threshold is zero.
    """

    width: int = 10
    height: int = 10
    initial_length: int = 3
    max_speed: int = MAX_SPEED
    min_interval_ms: int = MIN_INTERVAL_MS
    max_interval_ms: int = MAX_INTERVAL_MS

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("width and height must each be at least 1.")
        if self.initial_length < 1:
            raise ValueError("initial_length must be at least 1.")
        if self.max_speed < 1:
            raise ValueError("max_speed must be at least 1.")
        if not 0 <= self.min_interval_ms <= self.max_interval_ms:
            raise ValueError(
                "intervals must satisfy 0 <= min_interval_ms <= max_interval_ms."
            )

        start = self.start_point
        for direction in Direction:
            tail = start.transform(direction.opposite(), self.initial_length - 1)
            if not (0 <= tail.x < self.width and 0 <= tail.y < self.height):
                raise ValueError(
                    f"a {self.width}x{self.height} grid cannot fit a snake of "
                    f"length {self.initial_length} heading {direction.name}; "
                    "increase grid size or reduce initial_length."
                )

        if self.speed_threshold == 0:
            raise ValueError(
                f"grid area {self.width * self.height} is smaller than "
                f"max_speed {self.max_speed}; the speed ramp needs at least "
                "one cell per level."
            )

    @property
    def start_point(self) -> Point:
        """Centre cell where the snake's head starts."""
        return Point(self.width // 2, self.height // 2)

    @property
    def speed_threshold(self) -> int:
        """Score step between speed levels."""
        return (self.width * self.height) // self.max_speed

    def interval_ms(self, speed: int) -> int:
        """Tick length in milliseconds at *speed*, falling linearly."""
        step = (self.max_interval_ms - self.min_interval_ms) // self.max_speed
        return self.min_interval_ms + step * (self.max_speed - speed)
