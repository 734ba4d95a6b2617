"""Common interface for everything that can occupy the playfield."""

from abc import ABC, abstractmethod

from models import Intensity


class RingItem(ABC):
    """An entity on the normalized plane.

    Entities know nothing about each other: the game asks each one
    whether it covers a point and tells each one how much time passed.
    """

    @abstractmethod
    def advance(self, dt: float) -> None:
        """Move the entity forward by dt (already time-scaled)."""
        pass

    @abstractmethod
    def pixel_test(self, x: float, y: float) -> Intensity:
        """Sample the entity at a point on the normalized plane.

        Args:
            x: Horizontal coordinate in [-1, 1]
            y: Vertical coordinate in [-1, 1]

        Returns:
            NONE outside, HALF on the soft edge, FULL inside
        """
        pass
