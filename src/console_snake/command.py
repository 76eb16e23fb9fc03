"""Commands produced by the input side of a UI."""

from __future__ import annotations

from dataclasses import dataclass

from console_snake.geometry import Direction


@dataclass(frozen=True)
class Quit:
    """End the game immediately."""


@dataclass(frozen=True)
class Turn:
    """Request a change of heading."""

    direction: Direction


Command = Quit | Turn
