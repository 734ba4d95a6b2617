"""Rings - Game Info

Shoot through the gaps of a rotating ring of balls and bars.
"""

from games.Rings.game_mode import RingsMode

NAME = RingsMode.NAME
DESCRIPTION = RingsMode.DESCRIPTION
VERSION = RingsMode.VERSION
AUTHOR = RingsMode.AUTHOR
ARGUMENTS = RingsMode.ARGUMENTS


def get_game_mode(**kwargs):
    """Factory function to create game instance."""
    constructor_kwargs = {}
    if kwargs.get('seed') is not None:
        constructor_kwargs['seed'] = kwargs['seed']

    return RingsMode(**constructor_kwargs)
