"""Ball entity: a disc orbiting the center at a fixed distance."""

import math
from dataclasses import dataclass

from models import Intensity, Point2D
from games.Rings import config
from .base import RingItem


@dataclass
class Ball(RingItem):
    """A disc rotating with the ring.

    Attributes:
        angle: Position around the center in turns (wraps mod 1)
        distance: Distance of the disc center from the origin
        radius: Disc radius
    """

    angle: float
    distance: float
    radius: float

    @property
    def center(self) -> Point2D:
        """Current center of the disc."""
        return Point2D.from_polar(self.angle, self.distance)

    def advance(self, dt: float) -> None:
        """Rotate by dt turns."""
        self.angle += dt

    def pixel_test(self, x: float, y: float) -> Intensity:
        """Full inside 90% of the radius, half on the outer rim."""
        turns = self.angle * 2 * math.pi
        center_x = math.cos(turns) * self.distance
        center_y = math.sin(turns) * self.distance

        point_dist = math.hypot(center_x - x, center_y - y)

        if point_dist > self.radius:
            return Intensity.NONE
        if point_dist > self.radius * config.BALL_FULL_FRACTION:
            return Intensity.HALF
        return Intensity.FULL
