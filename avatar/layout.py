"""Corner radius, padding and text placement for an avatar canvas.

Text is only ever scaled down. The returned rect is expressed in the
coordinate space of a context that has already been scaled by `scale`,
so a backend does save -> scale -> draw(rect) -> restore.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from avatar.config import PADDING_RATIO


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class TextLayout:
    scale: float
    rect: Rect

    @property
    def footprint(self) -> Rect:
        """Where the text lands on the canvas once the scale is applied."""
        return Rect(
            x=self.rect.x * self.scale,
            y=self.rect.y * self.scale,
            width=self.rect.width * self.scale,
            height=self.rect.height * self.scale,
        )


def clamp_corner_radius(requested: float, size: tuple[float, float]) -> float:
    width, height = size
    return max(0.0, min(requested, width / 2, height / 2))


def resolve_padding(padding: Optional[float], size: tuple[float, float]) -> float:
    """Caller padding, or 10% of the shorter side rounded up."""
    if padding is not None:
        return padding
    return float(math.ceil(min(size) * PADDING_RATIO))


def compute_layout(
    size: tuple[float, float],
    padding: float,
    text_size: tuple[float, float],
) -> Optional[TextLayout]:
    """Scale and pre-scale placement that centers the text inside the padding.

    Returns None when the measured text is empty, meaning nothing to draw.
    """
    width, height = size
    text_width, text_height = text_size
    if text_width <= 0 or text_height <= 0:
        return None

    scale = min(
        1.0,
        (width - padding * 2) / text_width,
        (height - padding * 2) / text_height,
    )
    if scale <= 0:
        # padding eats the whole canvas
        return None

    rect = Rect(
        x=((width - text_width * scale) / 2) / scale,
        y=((height - text_height * scale) / 2) / scale,
        width=text_width,
        height=text_height,
    )
    return TextLayout(scale=scale, rect=rect)
