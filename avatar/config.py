"""
Shared configuration for avatar generation.

Rendering defaults live here as fixed module constants. Environment
overrides for the tools live in tools/config.py.
"""

# Colors
DEFAULT_SATURATION = 0.40
DEFAULT_BRIGHTNESS = 0.80

# Text color picks dark text only above this background brightness
TEXT_CONTRAST_THRESHOLD = 0.8
TEXT_DARK_BRIGHTNESS = 0.2
TEXT_LIGHT_BRIGHTNESS = 1.0

# Geometry
DEFAULT_CORNER_RADIUS = 0
PADDING_RATIO = 0.1
FONT_SIZE_RATIO = 0.5

# Hashing
KEY_BYTES = 8
DEFAULT_INT_WIDTH = 8
HASH_MULTIPLIER = 33
BYTE_MULTIPLIER = 101
HUE_BUCKETS = 360
UINT64_MASK = 0xFFFFFFFFFFFFFFFF

# Name splitting
DEFAULT_MAX_SEGMENTS = 2
STRUCTURED_INITIALS_MAX = 2

# Try fonts in order: macOS → Windows → Linux
FONT_PATHS = [
    "/System/Library/Fonts/Helvetica.ttc",
    "C:/Windows/Fonts/arial.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
]