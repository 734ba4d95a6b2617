"""Bullet entity: a point travelling in a straight line."""

import math
from dataclasses import dataclass

from models import Intensity, Point2D, Vector2D
from games.Rings import config
from .base import RingItem


@dataclass
class Bullet(RingItem):
    """The player's projectile, in cartesian coordinates.

    Attributes:
        x: Horizontal position
        y: Vertical position
        vx: Horizontal velocity (units per scaled second)
        vy: Vertical velocity (units per scaled second)
    """

    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0

    @classmethod
    def aimed(cls, turns: float, distance: float, speed: float) -> 'Bullet':
        """Create a bullet on the aim line, moving outward along it.

        Args:
            turns: Aim angle in turns
            distance: Distance from the origin to spawn at
            speed: Speed along the aim direction (0 for a stationary marker)
        """
        angle = turns * 2 * math.pi
        dx = math.cos(angle)
        dy = math.sin(angle)
        return cls(x=dx * distance, y=dy * distance, vx=dx * speed, vy=dy * speed)

    @property
    def position(self) -> Point2D:
        """Current position."""
        return Point2D(x=self.x, y=self.y)

    @property
    def velocity(self) -> Vector2D:
        """Current velocity."""
        return Vector2D(x=self.vx, y=self.vy)

    @property
    def distance(self) -> float:
        """Distance from the origin."""
        return math.hypot(self.x, self.y)

    def advance(self, dt: float) -> None:
        """Move along the velocity."""
        self.x += self.vx * dt
        self.y += self.vy * dt

    def pixel_test(self, x: float, y: float) -> Intensity:
        """Fixed-size round marker; only used for drawing."""
        if math.hypot(self.x - x, self.y - y) <= config.BULLET_MARKER_RADIUS:
            return Intensity.FULL
        return Intensity.NONE
