"""Bar entity: an arc-shaped wall at a fixed distance from the center."""

import math
from dataclasses import dataclass

from models import Intensity
from games.Rings import config
from .base import RingItem


def point_turns(x: float, y: float) -> float:
    """Angle of a point around the origin, in turns within [0, 1)."""
    angle = math.atan2(y, x)
    if angle < 0:
        angle += 2 * math.pi
    return (angle / (2 * math.pi)) % 1.0


@dataclass
class Bar(RingItem):
    """An annular arc rotating with the ring.

    Attributes:
        angle_start: Start of the arc in turns (wraps mod 1)
        angle_length: Angular span of the arc in turns
        distance: Radius of the arc's center line
        radius: Half thickness of the wall
    """

    angle_start: float
    angle_length: float
    distance: float
    radius: float

    @property
    def angle_end(self) -> float:
        """End of the arc in turns, within [0, 1)."""
        return (self.angle_start % 1.0 + self.angle_length) % 1.0

    def advance(self, dt: float) -> None:
        """Rotate by dt turns."""
        self.angle_start += dt

    def contains_angle(self, turns: float) -> bool:
        """Check whether an angle in [0, 1) lies on the arc.

        Arcs that cross angle 0 are split into [start, 1) and [0, end].
        """
        start = self.angle_start % 1.0
        end = self.angle_end
        if end > start:
            return start <= turns <= end
        return turns >= start or turns <= end

    def pixel_test(self, x: float, y: float) -> Intensity:
        """Full near the center line, half towards the wall edges."""
        if not self.contains_angle(point_turns(x, y)):
            return Intensity.NONE

        radius_distance = abs(math.hypot(x, y) - self.distance)

        if radius_distance > self.radius:
            return Intensity.NONE
        if radius_distance > self.radius * config.BAR_FULL_FRACTION:
            return Intensity.HALF
        return Intensity.FULL
