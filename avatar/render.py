"""Avatar generation: derive the appearance, then hand drawing to a backend.

Usage:
    from avatar.render import generate_avatar
    from avatar.text import Name

    image = generate_avatar(Name("Ada Lovelace"), (128, 128), identity="ada@example.com")

Generation never raises for bad sizes or empty names. It returns the
caller's placeholder instead, and a background-only image when the text
measures empty.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Optional

from avatar.color import HSBColor, derive_appearance
from avatar.config import (
    DEFAULT_BRIGHTNESS,
    DEFAULT_CORNER_RADIUS,
    DEFAULT_SATURATION,
    FONT_SIZE_RATIO,
)
from avatar.identity import DEFAULT_IDENTITY, to_identity
from avatar.layout import Rect, clamp_corner_radius, compute_layout, resolve_padding
from avatar.text import TextSource, extract

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DerivedAppearance:
    """Everything a backend needs to draw one avatar."""

    size: tuple[float, float]
    hue: float
    background: HSBColor
    text_color: HSBColor
    initials: str
    corner_radius: float
    padding: float


def derive(
    text: TextSource,
    size: tuple[float, float],
    identity=DEFAULT_IDENTITY,
    saturation: float = DEFAULT_SATURATION,
    brightness: float = DEFAULT_BRIGHTNESS,
    corner_radius: float = DEFAULT_CORNER_RADIUS,
    padding: Optional[float] = None,
) -> Optional[DerivedAppearance]:
    """Compute colors, initials and geometry. None means use the placeholder."""
    width, height = size
    if width <= 0 or height <= 0:
        logger.debug(f"Non-positive avatar size {size}, using placeholder")
        return None

    # hash the long text, draw the initials
    initials, long_text = extract(text)
    if not initials:
        logger.debug("No initials to draw, using placeholder")
        return None

    colors = derive_appearance(to_identity(identity).key, long_text, saturation, brightness)
    return DerivedAppearance(
        size=(width, height),
        hue=colors.hue,
        background=colors.background,
        text_color=colors.text,
        initials=initials,
        corner_radius=clamp_corner_radius(corner_radius, size),
        padding=resolve_padding(padding, size),
    )


def draw_avatar(ctx, appearance: DerivedAppearance, font) -> None:
    """Draw the background and the centered initials into a graphics context."""
    if ctx is None:
        logger.warning("No graphics context to draw the avatar into")
        return

    width, height = appearance.size
    ctx.fill_rounded_rect(Rect(0, 0, width, height), appearance.corner_radius, appearance.background)

    text_size = ctx.measure_text(appearance.initials, font)
    layout = compute_layout(appearance.size, appearance.padding, text_size)
    if layout is None:
        logger.debug(f"Initials {appearance.initials!r} measure {text_size}, drawing background only")
        return

    ctx.save_state()
    try:
        ctx.scale_by(layout.scale, layout.scale)
        ctx.draw_text(appearance.initials, layout.rect, font, appearance.text_color)
    finally:
        ctx.restore_state()


def default_font_size(size: tuple[float, float]) -> int:
    return max(1, math.floor(size[1] * FONT_SIZE_RATIO))


def generate_avatar(
    text: TextSource,
    size: tuple[float, float],
    *,
    identity=DEFAULT_IDENTITY,
    saturation: float = DEFAULT_SATURATION,
    brightness: float = DEFAULT_BRIGHTNESS,
    font=None,
    corner_radius: float = DEFAULT_CORNER_RADIUS,
    padding: Optional[float] = None,
    placeholder: Any = None,
    renderer=None,
):
    """Render a rounded-rect avatar with centered initials.

    Args:
        text: Initials, Name or StructuredName
        size: (width, height) of the image
        identity: Identity, or an int/str/bytes to build one from
        font: backend font object or font file path; defaults to a system
            font at half the height
        corner_radius: clamped to half the shorter side
        padding: defaults to 10% of the shorter side, rounded up
        placeholder: returned as-is when nothing can be drawn
        renderer: drawing backend, PillowRenderer by default

    Returns:
        A new image of exactly `size`, or `placeholder`.
    """
    appearance = derive(
        text,
        size,
        identity=identity,
        saturation=saturation,
        brightness=brightness,
        corner_radius=corner_radius,
        padding=padding,
    )
    if appearance is None:
        return placeholder

    if renderer is None:
        from avatar.pillow_backend import PillowRenderer
        renderer = PillowRenderer()
    resolved_font = renderer.resolve_font(font, default_font_size(appearance.size))

    image = renderer.render(appearance.size, lambda ctx: draw_avatar(ctx, appearance, resolved_font))
    if image is None:
        return placeholder
    return image
