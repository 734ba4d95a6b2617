"""
Launch configuration models.

Raw options from the command line and environment arrive as strings.
LaunchConfig validates them once, at the configuration boundary, so the
game only ever receives well-formed values.
"""

import math
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator, ConfigDict

from g4.errors import InvalidConfiguration


class LaunchConfig(BaseModel):
    """Validated launch options.

    Attributes:
        framerate: Ticks per second for the game loop (must be positive and finite)
        seed: Seed for ring generation (None = nondeterministic)
        window: Render in a pygame window instead of the terminal
        width: Frame width in character cells
        height: Frame height in character cells

    Examples:
        >>> LaunchConfig(framerate='60').framerate
        60.0
        >>> LaunchConfig().width
        53
    """
    framerate: float = 30.0
    seed: Optional[int] = None
    window: bool = False
    width: int = Field(53, ge=3)
    height: int = Field(25, ge=3)

    model_config = ConfigDict(frozen=True)

    @field_validator('framerate')
    @classmethod
    def validate_framerate(cls, v: float) -> float:
        """Validate framerate is positive and finite."""
        if not math.isfinite(v) or v <= 0:
            raise ValueError(f'Framerate must be a positive number, got {v}')
        return v


def load_launch_config(**raw) -> LaunchConfig:
    """Validate raw launch options.

    None values are dropped so model defaults apply.

    Args:
        **raw: Option name -> raw value (typically strings from argparse/env)

    Returns:
        Validated LaunchConfig

    Raises:
        InvalidConfiguration: If any option fails validation
    """
    values = {k: v for k, v in raw.items() if v is not None}
    try:
        return LaunchConfig(**values)
    except ValidationError as e:
        first = e.errors()[0]
        field = '.'.join(str(p) for p in first.get('loc', ())) or None
        value = values.get(field) if field else None
        raise InvalidConfiguration(
            f"Invalid value for {field or 'configuration'}: {value!r} ({first.get('msg')})",
            field=field,
            value=value,
        ) from e
