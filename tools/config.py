"""
Shared configuration for the avatar tools.
"""

import logging
import os
from pathlib import Path
from dotenv import load_dotenv

from avatar.config import DEFAULT_BRIGHTNESS, DEFAULT_SATURATION

logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()


def _env_float(name: str, default: float) -> float:
    """Read a float from the environment, falling back to the default."""
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not a number")
        return default


# Paths
PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = PROJECT_ROOT / "data"
PEOPLE_PATH = DATA_DIR / "people.json"
AVATARS_DIR = Path(os.getenv("AVATAR_OUTPUT_DIR", PROJECT_ROOT / "assets" / "avatars"))

# Output image settings
AVATAR_SIZE = 200
AVATAR_CORNERS = 0
AVATAR_SATURATION = _env_float("AVATAR_SATURATION", DEFAULT_SATURATION)
AVATAR_BRIGHTNESS = _env_float("AVATAR_BRIGHTNESS", DEFAULT_BRIGHTNESS)
AVATAR_FONT_PATH = os.getenv("AVATAR_FONT_PATH") or None
