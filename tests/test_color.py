"""Tests for avatar/color.py"""
import random

import pytest

from avatar.color import (
    HSBColor,
    combine_hash,
    derive_appearance,
    hue_for,
    text_brightness,
)


class TestCombineHash:
    def test_empty_text_keeps_key(self):
        assert combine_hash(12345, "") == 12345

    def test_known_values(self):
        """h = h*33 + byte*101 over the UTF-8 bytes."""
        assert combine_hash(0, "a") == 97 * 101
        assert combine_hash(0, "ab") == 333199
        assert combine_hash(0, "ba") == 336431

    def test_wraps_at_64_bits(self):
        assert combine_hash(2 ** 64 - 1, "a") == 9764

    def test_multibyte_text_hashes_every_byte(self):
        assert combine_hash(0, "é") == (0xC3 * 101) * 33 + 0xA9 * 101

    def test_order_sensitive(self):
        """Swapping characters changes the hue for most keys."""
        rng = random.Random(7)
        keys = [rng.getrandbits(64) for _ in range(50)]
        differing = [k for k in keys if hue_for(combine_hash(k, "ab")) != hue_for(combine_hash(k, "ba"))]
        assert len(differing) > 40


class TestHue:
    def test_range(self):
        """10,000 random key/text pairs all land in [0, 1)."""
        rng = random.Random(2022)
        for _ in range(10_000):
            key = rng.getrandbits(64)
            text = "".join(chr(rng.randrange(32, 0x3000)) for _ in range(rng.randrange(0, 12)))
            hue = hue_for(combine_hash(key, text))
            assert 0.0 <= hue < 1.0

    def test_buckets(self):
        assert hue_for(0) == 0.0
        assert hue_for(359) == pytest.approx(359 / 360)
        assert hue_for(360) == 0.0


class TestTextBrightness:
    def test_light_background_gets_dark_text(self):
        assert text_brightness(0.9) == 0.2

    def test_darker_background_gets_light_text(self):
        assert text_brightness(0.5) == 1.0

    def test_threshold_is_exclusive(self):
        assert text_brightness(0.8) == 1.0


class TestDeriveAppearance:
    def test_deterministic(self):
        assert derive_appearance(99, "Ada Lovelace", 0.4, 0.8) == derive_appearance(99, "Ada Lovelace", 0.4, 0.8)

    def test_background_uses_style(self):
        scheme = derive_appearance(0, "ab", 0.4, 0.8)
        assert scheme.background == HSBColor(hue=199 / 360, saturation=0.4, brightness=0.8)
        assert scheme.hue == scheme.background.hue

    def test_text_is_grayscale(self):
        scheme = derive_appearance(5, "x", 0.7, 0.9)
        assert scheme.text.saturation == 0.0
        assert scheme.text.brightness == 0.2
        assert scheme.text.alpha == 1.0


class TestHSBColor:
    def test_to_rgb(self):
        assert HSBColor(0.0, 1.0, 1.0).to_rgb() == (255, 0, 0)
        assert HSBColor(0.0, 0.0, 0.2).to_rgb() == (51, 51, 51)

    def test_to_rgba_opaque(self):
        assert HSBColor(0.5, 0.0, 1.0).to_rgba() == (255, 255, 255, 255)

    def test_hex(self):
        assert HSBColor(1 / 3, 1.0, 1.0).hex == "#00ff00"
