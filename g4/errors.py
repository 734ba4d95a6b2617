"""Error types raised at the platform boundaries."""
from typing import Optional


class G4Error(Exception):
    """Base class for all G4 errors."""
    pass


class InvalidConfiguration(G4Error):
    """Raised when launch options fail validation.

    Raised before any game state is constructed, so the simulation only
    ever sees validated values.

    Attributes:
        field: Name of the offending option, if known
        value: The rejected raw value, if known
    """

    def __init__(self, message: str, field: Optional[str] = None, value: object = None):
        super().__init__(message)
        self.field = field
        self.value = value
