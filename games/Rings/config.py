"""Configuration for Rings game.

Launch defaults are read from the environment (optionally from a .env file
in the game directory); gameplay constants and colors are fixed.
"""
import os
from pathlib import Path
from typing import Dict, Optional, Tuple

from dotenv import load_dotenv

from models import Color

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_str(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get raw string from environment (validated later by LaunchConfig)."""
    return os.getenv(key, default)


# Launch defaults (raw strings, validated by models.config.load_launch_config)
FRAMERATE = _get_str('G4_FRAMERATE')
SEED = _get_str('G4_SEED')
WIDTH = _get_str('G4_GRID_WIDTH')
HEIGHT = _get_str('G4_GRID_HEIGHT')

# Default frame size in character cells
GRID_WIDTH = 53
GRID_HEIGHT = 25

# Simulation
TIME_SCALE = 1.0 / 3.0        # Rotation speed relative to elapsed time
PLAY_BOUNDARY = 1.6           # Bullet distance that counts as an escape
RING_DISTANCE = 0.7           # Radius of the obstacle ring
HARD_LEVEL_THRESHOLD = 6      # Levels above this use difficulty 2
HIGHLIGHT_TICKS = 4           # Frames a transition highlight stays set

# Bullet
BULLET_SPAWN_DISTANCE = 0.1
BULLET_SPEED = 10.0
BULLET_MARKER_RADIUS = 0.05

# Ring generation
BALL_RADIUS = 0.3
SMALL_BALL_RADIUS = 0.15
BAR_RADIUS = 0.06
COMPANION_OFFSET = 0.08       # Turns between a ball and its companions
COMPANION_CHANCE = 0.3
BAR_CAP_CHANCE = 0.5

# Edge bands: inner fraction of the radius drawn as full intensity
BALL_FULL_FRACTION = 0.9
BAR_FULL_FRACTION = 0.7

# Window renderer
CELL_SIZE: Tuple[int, int] = (12, 24)  # Pixels per character cell
HUD_HEIGHT = 32

# Colors (match the terminal palette)
BACKGROUND_COLOR = Color(r=0, g=0, b=0)
CELL_COLORS: Dict[str, Color] = {
    'full': Color(r=0, g=205, b=205),       # cyan
    'half': Color(r=0, g=0, b=238),         # blue
    'bullet': Color(r=229, g=229, b=229),   # white
    'crosshair': Color(r=205, g=205, b=0),  # yellow
    'level': Color(r=205, g=0, b=0),        # red
}
HUD_TEXT_COLOR = Color(r=229, g=229, b=229)
