"""Rings game entities."""

from .base import RingItem
from .ball import Ball
from .bar import Bar, point_turns
from .bullet import Bullet

__all__ = [
    'RingItem',
    'Ball',
    'Bar', 'point_turns',
    'Bullet',
]
