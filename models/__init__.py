"""
Unified models library for G4 Terminal.

This package provides the Pydantic data models and enums shared across
the platform and games:
- Primitives: Point2D, Vector2D, Color
- Enums: Intensity, Highlight, InputAction, Cell
- Config: LaunchConfig and its validating loader

Usage:
    >>> from models import Point2D, Intensity
    >>> from models.config import load_launch_config
"""

from .primitives import (
    Point2D,
    Vector2D,  # Alias for Point2D
    Color,
)

from .enums import (
    Intensity,
    Highlight,
    InputAction,
    Cell,
)

from .config import (
    LaunchConfig,
    load_launch_config,
)

__all__ = [
    # Primitives
    "Point2D",
    "Vector2D",
    "Color",
    # Enums
    "Intensity",
    "Highlight",
    "InputAction",
    "Cell",
    # Config
    "LaunchConfig",
    "load_launch_config",
]
