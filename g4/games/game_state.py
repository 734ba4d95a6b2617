"""Common GameState enum for all G4 games.

All games report one of these standard states via their `state` property,
so the game loop and launcher can treat every game the same way.

Games can have additional internal sub-states (e.g. transient feedback),
but must map them to these standard states.
"""
from enum import Enum


class GameState(Enum):
    """Standard game states used by the G4 platform.

    States:
        PLAYING: Active gameplay in progress
        PAUSED: Game temporarily paused
        GAME_OVER: Game ended and will not accept further play

    Usage in game_mode.py:
        from g4.games.game_state import GameState

        class MyGameMode(BaseGame):
            def _get_internal_state(self) -> GameState:
                return GameState.PLAYING
    """
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"
