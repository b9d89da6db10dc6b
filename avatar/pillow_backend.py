"""Pillow rasterizer for avatars.

PillowRenderer owns the image; PillowContext is the graphics context the
drawing code talks to. Pillow has no transformable context, so the
context keeps its own scale stack and applies it when compositing text.
"""
from __future__ import annotations

import base64
import logging
import math
from io import BytesIO
from pathlib import Path
from typing import Callable, Optional, Union

from PIL import Image, ImageDraw, ImageFont

from avatar.color import HSBColor
from avatar.config import FONT_PATHS
from avatar.layout import Rect

logger = logging.getLogger(__name__)

FontRef = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont, str, Path]


def load_font(size: int, path: Optional[Union[str, Path]] = None):
    """Load a TrueType font, trying the configured system fonts in order."""
    candidates = [str(path)] if path else FONT_PATHS
    for font_path in candidates:
        try:
            return ImageFont.truetype(font_path, size)
        except OSError:
            logger.debug(f"Font not available: {font_path}")
            continue
    logger.warning(f"No TrueType font found, using Pillow's default font at size {size}")
    return ImageFont.load_default(size=size)


class PillowContext:
    """Drawing surface over a Pillow RGBA image."""

    def __init__(self, image: Image.Image):
        self.image = image
        self._draw = ImageDraw.Draw(image)
        self._scale = (1.0, 1.0)
        self._saved: list[tuple[float, float]] = []

    @property
    def scale(self) -> tuple[float, float]:
        return self._scale

    def save_state(self):
        self._saved.append(self._scale)

    def restore_state(self):
        if self._saved:
            self._scale = self._saved.pop()

    def scale_by(self, sx: float, sy: float):
        self._scale = (self._scale[0] * sx, self._scale[1] * sy)

    def fill_rounded_rect(self, rect: Rect, radius: float, color: HSBColor):
        sx, sy = self._scale
        box = [
            rect.x * sx,
            rect.y * sy,
            math.ceil((rect.x + rect.width) * sx) - 1,
            math.ceil((rect.y + rect.height) * sy) - 1,
        ]
        self._draw.rounded_rectangle(box, radius=round(radius * min(sx, sy)), fill=color.to_rgba())

    def measure_text(self, text: str, font) -> tuple[float, float]:
        """Size of the inked bounding box of text at natural scale."""
        bbox = self._draw.textbbox((0, 0), text, font=font)
        return bbox[2] - bbox[0], bbox[3] - bbox[1]

    def draw_text(self, text: str, rect: Rect, font, color: HSBColor):
        """Draw text into rect, given in the current (scaled) coordinates."""
        bbox = self._draw.textbbox((0, 0), text, font=font)
        width = max(1, math.ceil(rect.width))
        height = max(1, math.ceil(rect.height))

        layer = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        ImageDraw.Draw(layer).text((-bbox[0], -bbox[1]), text, fill=color.to_rgba(), font=font)

        sx, sy = self._scale
        if (sx, sy) != (1.0, 1.0):
            target = (max(1, round(width * sx)), max(1, round(height * sy)))
            layer = layer.resize(target, Image.Resampling.LANCZOS)

        dest = (max(0, round(rect.x * sx)), max(0, round(rect.y * sy)))
        self.image.alpha_composite(layer, dest=dest)


class PillowRenderer:
    """Creates a transparent RGBA image and hands its context to a draw callback."""

    mode = "RGBA"

    def render(self, size: tuple[float, float], draw: Callable[[Optional[PillowContext]], None]) -> Image.Image:
        pixels = (math.ceil(size[0]), math.ceil(size[1]))
        image = Image.new(self.mode, pixels, (0, 0, 0, 0))
        draw(PillowContext(image))
        return image

    def resolve_font(self, font: Optional[FontRef], default_size: int):
        """A ready font object from a font, a font file path, or nothing."""
        if font is None:
            return load_font(default_size)
        if isinstance(font, (str, Path)):
            return load_font(default_size, path=font)
        return font


def to_png_bytes(image: Image.Image) -> bytes:
    buffer = BytesIO()
    image.save(buffer, "PNG")
    return buffer.getvalue()


def to_data_uri(image: Image.Image) -> str:
    """Base64 PNG data URI, ready for an <img src=...>."""
    encoded = base64.b64encode(to_png_bytes(image)).decode()
    return f"data:image/png;base64,{encoded}"
