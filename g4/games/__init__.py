"""
G4 Game Framework.

Provides:
- game_state: Standard GameState enum for platform compatibility
- base_game: BaseGame class that all games should inherit from
- renderer: Renderer interface sampled once per tick
- loop: Fixed-rate GameLoop driving a game, a renderer and an input manager
- input: Common input event handling
"""

from g4.games.game_state import GameState
from g4.games.base_game import BaseGame
from g4.games.renderer import Renderer, NullRenderer
from g4.games.loop import GameLoop

__all__ = [
    'GameState',
    'BaseGame',
    'Renderer',
    'NullRenderer',
    'GameLoop',
]
