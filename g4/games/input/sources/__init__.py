"""
Input source implementations.

The pygame source is imported from g4.games.input.sources.window so that
terminal sessions do not load pygame.
"""

from g4.games.input.sources.base import InputSource
from g4.games.input.sources.keyboard import CursesKeyboardSource, action_for_key

__all__ = ['InputSource', 'CursesKeyboardSource', 'action_for_key']
