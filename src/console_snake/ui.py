"""Interface between the game loop and whatever draws it."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from console_snake.command import Command
    from console_snake.game import Game


class UI(abc.ABC):
    """Rendering and input collaborator driven by :class:`Game`.

    The game only reads from a UI through :meth:`get_command`; the other
    hooks receive the game for drawing and must not mutate it.
    """

    @abc.abstractmethod
    def init(self, game: Game) -> None:
        """Prepare the display before the first frame."""

    @abc.abstractmethod
    def render(self, game: Game) -> None:
        """Draw one frame."""

    @abc.abstractmethod
    def shutdown(self, game: Game) -> None:
        """Tear down the display once the game is over."""

    @abc.abstractmethod
    def get_command(self, max_wait: float) -> Command | None:
        """Wait at most *max_wait* seconds for a command.

        Returns ``None`` on timeout or unrecognised input.
        """
