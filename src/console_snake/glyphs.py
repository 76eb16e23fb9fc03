"""Box-drawing glyphs for snake body segments."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from console_snake.geometry import Direction, Point

HEAD = "O"
HORIZONTAL = "═"
VERTICAL = "║"
DOWN_RIGHT = "╔"
DOWN_LEFT = "╗"
UP_RIGHT = "╚"
UP_LEFT = "╝"

GLYPHS = frozenset(
    {HEAD, HORIZONTAL, VERTICAL, DOWN_RIGHT, DOWN_LEFT, UP_RIGHT, UP_LEFT}
)


def segment_glyph(
    previous: Point | None,
    point: Point,
    following: Point | None,
) -> str:
    """Pick the glyph for *point* given its neighbours in the body.

    *previous* is the segment nearer the head and *following* the one
    nearer the tail; the head has no *previous*.
    """
    if previous is None:
        return HEAD

    if following is None:
        return HORIZONTAL if point.y == previous.y else VERTICAL

    if previous.x == following.x:
        return VERTICAL
    if previous.y == following.y:
        return HORIZONTAL

    down = point.transform(Direction.DOWN)
    right = point.transform(Direction.RIGHT)
    # Cells above/left of row or column 0 do not exist.
    up = point if point.y == 0 else point.transform(Direction.UP)
    left = point if point.x == 0 else point.transform(Direction.LEFT)

    neighbours = {previous, following}
    if neighbours == {down, right}:
        return DOWN_RIGHT
    if neighbours == {down, left}:
        return DOWN_LEFT
    if neighbours == {up, right}:
        return UP_RIGHT
    return UP_LEFT


def body_glyphs(points: Sequence[Point]) -> Iterator[tuple[Point, str]]:
    """Yield ``(point, glyph)`` for each segment, head first."""
    last = len(points) - 1
    for i, point in enumerate(points):
        previous = points[i - 1] if i > 0 else None
        following = points[i + 1] if i < last else None
        yield point, segment_glyph(previous, point, following)
