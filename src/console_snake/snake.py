"""Snake representation and movement logic."""

from __future__ import annotations

from console_snake.geometry import Direction, Point


class Snake:
    """A snake represented as an ordered list of body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. The heading is only
    reachable through :meth:`get_direction` and :meth:`set_direction`.
    """

    def __init__(
        self,
        head: Point,
        length: int = 3,
        direction: Direction = Direction.RIGHT,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        behind = direction.opposite()
        self.body: list[Point] = [head.transform(behind, i) for i in range(length)]
        self._direction = direction
        self._grow_pending = 0

    @property
    def growth_pending(self) -> int:
        return self._grow_pending

    def get_head_point(self) -> Point:
        return self.body[0]

    def get_body_points(self) -> list[Point]:
        """Return a copy of the body, head first."""
        return list(self.body)

    def get_direction(self) -> Direction:
        return self._direction

    def set_direction(self, direction: Direction) -> None:
        """Change heading. Reversal checks belong to the caller."""
        self._direction = direction

    def next_head(self) -> Point:
        """Compute the next head position without moving."""
        return self.body[0].transform(self._direction, 1)

    def contains_point(self, point: Point) -> bool:
        """Check whether any segment occupies *point*."""
        return point in self.body

    def slither(self) -> Point | None:
        """Move the snake one cell forward.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.insert(0, self.next_head())
        if self._grow_pending > 0:
            self._grow_pending -= 1
            return None
        return self.body.pop()

    def grow(self, segments: int = 1) -> None:
        """Keep the tail in place for the next *segments* moves."""
        if segments < 1:
            raise ValueError("segments must be at least 1.")
        self._grow_pending += segments
