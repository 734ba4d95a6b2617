"""
Renderer interface used by the game loop.

Renderers only read game state; they never mutate it.
"""
from abc import ABC, abstractmethod
from typing import Any


class Renderer(ABC):
    """Draws the current state of a game once per tick."""

    @abstractmethod
    def draw(self, game: Any) -> None:
        """Draw one frame.

        Args:
            game: The game to sample
        """
        pass

    def close(self) -> None:
        """Release display resources. Default does nothing."""
        pass


class NullRenderer(Renderer):
    """Renderer that draws nothing (headless runs and tests)."""

    def draw(self, game: Any) -> None:
        pass
