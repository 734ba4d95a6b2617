"""Rings skins.

Skins are imported from their modules so a terminal session never loads
pygame and a window session never initializes curses.
"""

from .base import RingsSkin

__all__ = ['RingsSkin']
