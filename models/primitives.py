"""
Shared primitive data types for the game engine.

This module provides basic geometric and color types used throughout
the codebase: positions on the normalized plane and renderer colors.
"""

import math
from typing import Tuple

from pydantic import BaseModel, field_validator, computed_field, ConfigDict


class Point2D(BaseModel):
    """Immutable 2D point/vector for positions, velocities, and coordinates.

    This is the unified type used throughout the system for any 2D coordinate,
    whether it's a position on the normalized plane or a velocity.

    Attributes:
        x: X coordinate (horizontal)
        y: Y coordinate (vertical)

    Examples:
        >>> pos = Point2D(x=0.1, y=0.0)
        >>> vel = Point2D(x=-10.0, y=0.0)  # Moving left
        >>> pos.magnitude
        0.1
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)  # Immutable

    @classmethod
    def from_polar(cls, turns: float, distance: float) -> 'Point2D':
        """Build a point from an angle in turns and a distance from origin.

        Args:
            turns: Angle as a fraction of a full revolution
            distance: Distance from the origin

        Returns:
            Point2D at (cos(turns·2π)·distance, sin(turns·2π)·distance)
        """
        angle = turns * 2 * math.pi
        return cls(x=math.cos(angle) * distance, y=math.sin(angle) * distance)

    @property
    def magnitude(self) -> float:
        """Distance from the origin."""
        return math.hypot(self.x, self.y)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


# Alias used where the value is a velocity rather than a position
Vector2D = Point2D


class Color(BaseModel):
    """Immutable RGB color with validation.

    All color components must be in the range [0, 255] inclusive.

    Attributes:
        r: Red component (0-255)
        g: Green component (0-255)
        b: Blue component (0-255)

    Examples:
        >>> cyan = Color(r=0, g=255, b=255)
        >>> cyan.as_rgb_tuple
        (0, 255, 255)
    """
    r: int
    g: int
    b: int

    @field_validator('r', 'g', 'b')
    @classmethod
    def validate_color_range(cls, v: int) -> int:
        """Validate color components are in valid range [0, 255]."""
        if not 0 <= v <= 255:
            raise ValueError(f'Color component must be in range [0, 255], got {v}')
        return v

    @computed_field
    @property
    def as_rgb_tuple(self) -> Tuple[int, int, int]:
        """Return color as RGB tuple for pygame compatibility.

        Returns:
            Tuple of (r, g, b) values
        """
        return (self.r, self.g, self.b)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Color(r={self.r}, g={self.g}, b={self.b})"
