"""
G4 Terminal platform layer.

Shared infrastructure for terminal arcade games: logging, error types and
the game framework (game state, base class, input, fixed-rate loop).
"""

from g4.errors import G4Error, InvalidConfiguration

__all__ = ['G4Error', 'InvalidConfiguration']
