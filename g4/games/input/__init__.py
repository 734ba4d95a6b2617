"""
Input abstraction layer for G4 games.

Provides unified input handling that works identically with the terminal
keyboard or a pygame window.
"""

from g4.games.input.input_event import InputEvent
from g4.games.input.input_manager import InputManager

__all__ = ['InputEvent', 'InputManager']
