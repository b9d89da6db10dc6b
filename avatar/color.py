"""Background and text colors derived from an identity key and long text."""
from __future__ import annotations

import colorsys
from dataclasses import dataclass

from avatar.config import (
    BYTE_MULTIPLIER,
    HASH_MULTIPLIER,
    HUE_BUCKETS,
    TEXT_CONTRAST_THRESHOLD,
    TEXT_DARK_BRIGHTNESS,
    TEXT_LIGHT_BRIGHTNESS,
    UINT64_MASK,
)


@dataclass(frozen=True)
class HSBColor:
    """Color in hue/saturation/brightness, every channel in [0, 1]."""

    hue: float
    saturation: float
    brightness: float
    alpha: float = 1.0

    def to_rgb(self) -> tuple[int, int, int]:
        r, g, b = colorsys.hsv_to_rgb(self.hue, self.saturation, self.brightness)
        return round(r * 255), round(g * 255), round(b * 255)

    def to_rgba(self) -> tuple[int, int, int, int]:
        return (*self.to_rgb(), round(self.alpha * 255))

    @property
    def hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(*self.to_rgb())


@dataclass(frozen=True)
class ColorScheme:
    hue: float
    background: HSBColor
    text: HSBColor


def combine_hash(key: int, long_text: str) -> int:
    """Mix the UTF-8 bytes of long_text into the identity key.

    h = h * 33 + byte * 101 for every byte, wrapping at 64 bits.
    Empty text leaves the key untouched.
    """
    h = key & UINT64_MASK
    for byte in long_text.encode("utf-8", errors="replace"):
        h = (h * HASH_MULTIPLIER + byte * BYTE_MULTIPLIER) & UINT64_MASK
    return h


def hue_for(h: int) -> float:
    """Hue in [0, 1) picked from 360 evenly spaced buckets."""
    return (h % HUE_BUCKETS) / HUE_BUCKETS


def text_brightness(brightness: float) -> float:
    # dark text only on very light backgrounds
    if brightness > TEXT_CONTRAST_THRESHOLD:
        return TEXT_DARK_BRIGHTNESS
    return TEXT_LIGHT_BRIGHTNESS


def derive_appearance(key: int, long_text: str, saturation: float, brightness: float) -> ColorScheme:
    """Hue, background and text color for a key and the long text."""
    hue = hue_for(combine_hash(key, long_text))
    background = HSBColor(hue=hue, saturation=saturation, brightness=brightness)
    text = HSBColor(hue=0.0, saturation=0.0, brightness=text_brightness(brightness))
    return ColorScheme(hue=hue, background=background, text=text)
