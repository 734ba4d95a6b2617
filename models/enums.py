"""
Game enumerations.

These enums define the values exchanged between the simulation,
the renderers and the input layer.
"""

from enum import Enum


class Intensity(str, Enum):
    """Result of sampling an entity at a point on the normalized plane.

    Used both for shading and as a collision signal: HALF and FULL
    both count as a hit.

    Attributes:
        NONE: Point is outside the entity
        HALF: Point is on the entity's soft outer edge
        FULL: Point is inside the entity's body
    """
    NONE = "none"
    HALF = "half"
    FULL = "full"

    @property
    def is_hit(self) -> bool:
        """True for HALF and FULL."""
        return self is not Intensity.NONE

    @property
    def rank(self) -> int:
        """Compositing precedence: FULL > HALF > NONE."""
        return _INTENSITY_RANK[self]


_INTENSITY_RANK = {
    Intensity.NONE: 0,
    Intensity.HALF: 1,
    Intensity.FULL: 2,
}


class Highlight(str, Enum):
    """Transient feedback set by level transitions.

    Attributes:
        NONE: No recent transition
        NEXT: Bullet escaped, level advanced
        HIT: Bullet collided, progress reset
    """
    NONE = "none"
    NEXT = "next"
    HIT = "hit"


class InputAction(str, Enum):
    """Actions recognized at the input boundary.

    Attributes:
        SHOOT: Fire a bullet along the current aim
        TERMINATE: End the session
    """
    SHOOT = "shoot"
    TERMINATE = "terminate"


class Cell(str, Enum):
    """What a single character cell of a sampled frame shows."""
    EMPTY = "empty"
    HALF = "half"
    FULL = "full"
    BULLET = "bullet"
    CROSSHAIR = "crosshair"
