"""Grid coordinates and movement directions."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    ``y`` grows downwards, matching terminal rows.
    """

    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    def opposite(self) -> Direction:
        """Return the direction that would reverse this one."""
        return _OPPOSITES[self]


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Point:
    """An (x, y) grid cell. No bounds checking is done here."""

    x: int
    y: int

    def transform(self, direction: Direction, distance: int = 1) -> Point:
        """Return the point *distance* cells away along *direction*."""
        dx, dy = direction.value
        return Point(self.x + dx * distance, self.y + dy * distance)
