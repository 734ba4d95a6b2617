"""
Input Event - Represents a single input action.

This is a shared module used by all games.
Uses Pydantic for validation and immutability.
"""
from pydantic import BaseModel, field_validator, ConfigDict

from models import InputAction


class InputEvent(BaseModel):
    """Immutable input event from any source.

    Represents a single recognized action at a specific time.
    All input sources must convert their raw key events to this common format.

    Attributes:
        action: The recognized action (SHOOT or TERMINATE)
        timestamp: Time when the event occurred (seconds, from monotonic clock)
    """
    action: InputAction
    timestamp: float

    @field_validator('timestamp')
    @classmethod
    def validate_timestamp(cls, v: float) -> float:
        """Validate timestamp is non-negative."""
        if v < 0:
            raise ValueError(f'Timestamp must be non-negative, got {v}')
        return v

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"InputEvent(action={self.action.value}, t={self.timestamp:.3f})"
