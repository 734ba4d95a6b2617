"""Base class for all G4 games.

All games should inherit from BaseGame to ensure a consistent interface
with the game loop and launchers.

Game metadata (NAME, DESCRIPTION, etc.) and CLI arguments (ARGUMENTS)
are declared as class attributes, so a launcher can build its parser
without instantiating the game.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from g4.games.game_state import GameState


class BaseGame(ABC):
    """Abstract base class for all G4 games.

    Class Attributes (metadata):
        NAME: Display name for the game
        DESCRIPTION: Short description of gameplay
        VERSION: Semantic version string
        AUTHOR: Author/team name
        ARGUMENTS: List of CLI argument definitions for argparse

    Subclasses must implement:
        - _get_internal_state() -> GameState: Map internal state to standard state
        - get_score() -> int: Return current score
        - handle_input(events): Process input events
        - update(dt): Advance the simulation by one tick

    Optional overrides:
        - end_frame(): Called once per tick after the frame was rendered

    Rendering is not part of the game: renderers sample the game's
    public state (see g4.games.renderer).
    """

    # =========================================================================
    # Game Metadata (override in subclasses)
    # =========================================================================

    NAME: str = "Unnamed Game"
    DESCRIPTION: str = "No description"
    VERSION: str = "1.0.0"
    AUTHOR: str = "Unknown"

    # CLI argument definitions for argparse
    # Each entry is a dict with keys: name, type, default, help, choices (optional), action (optional)
    ARGUMENTS: List[Dict[str, Any]] = []

    # =========================================================================
    # Standard Arguments (automatically available to all games)
    # Values are passed through as raw strings and validated by
    # models.config.load_launch_config, not by argparse.
    # =========================================================================

    _BASE_ARGUMENTS: List[Dict[str, Any]] = [
        {
            'name': '--framerate',
            'type': str,
            'default': None,
            'help': 'Ticks per second (default: 30)'
        },
        {
            'name': '--window',
            'action': 'store_true',
            'default': None,
            'help': 'Render in a pygame window instead of the terminal'
        },
    ]

    @classmethod
    def get_arguments(cls) -> List[Dict[str, Any]]:
        """Get all CLI arguments for this game (game-specific + base).

        Returns list of argument definitions suitable for argparse.
        Game-specific arguments come first, then base arguments.
        Duplicates by name are removed (game-specific takes precedence).
        """
        seen_names = set()
        result = []

        for arg in cls.ARGUMENTS:
            name = arg.get('name', '')
            if name and name not in seen_names:
                seen_names.add(name)
                result.append(arg)

        for arg in cls._BASE_ARGUMENTS:
            name = arg.get('name', '')
            if name and name not in seen_names:
                seen_names.add(name)
                result.append(arg)

        return result

    @property
    def state(self) -> GameState:
        """Current game state (standard interface).

        Games should not override this - override _get_internal_state instead.
        """
        return self._get_internal_state()

    @abstractmethod
    def _get_internal_state(self) -> GameState:
        """Map internal game state to standard GameState.

        Returns:
            GameState.PLAYING, GameState.GAME_OVER, etc.
        """
        pass

    @abstractmethod
    def get_score(self) -> int:
        """Get current score.

        Returns:
            Integer score value
        """
        pass

    @abstractmethod
    def handle_input(self, events: List) -> None:
        """Process input events.

        Args:
            events: List of InputEvent objects
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the game by one tick.

        Args:
            dt: Delta time in seconds since last tick
        """
        pass

    def end_frame(self) -> None:
        """Called once per tick after the frame was rendered.

        Override to count down per-frame feedback state.
        """
        pass
