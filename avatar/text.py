"""Initials and long text from the three kinds of avatar text input.

Every input yields two strings:
- initials: the short text drawn inside the avatar
- long: the full text, only ever fed to the color hash

Usage:
    from avatar.text import Name, extract

    initials, long = extract(Name("ada lovelace"))   # ("al", "ada lovelace")
"""
from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import Optional, Union

from avatar.config import DEFAULT_MAX_SEGMENTS, STRUCTURED_INITIALS_MAX

ZWJ = "\u200d"

# Unicode name prefixes of scripts written family-name first, without spaces
_CJK_PREFIXES = ("CJK UNIFIED", "CJK COMPATIBILITY", "HANGUL", "HIRAGANA", "KATAKANA")


# ──────────────────────────────────────────────
# Text variants
# ──────────────────────────────────────────────

@dataclass(frozen=True)
class Initials:
    """Ready-made initials, drawn as given."""

    text: str


@dataclass(frozen=True)
class Name:
    """A full display name; initials come from its first `max_segments` words."""

    text: str
    max_segments: int = DEFAULT_MAX_SEGMENTS


@dataclass(frozen=True)
class StructuredName:
    """Person name components.

    `family_first` forces the name order. Left as None, family-first order
    is used when the given or family name is written in a CJK script.
    """

    given_name: str = ""
    family_name: str = ""
    middle_name: str = ""
    name_prefix: str = ""
    name_suffix: str = ""
    nickname: str = ""
    family_first: Optional[bool] = None


TextSource = Union[Initials, Name, StructuredName]


# ──────────────────────────────────────────────
# Character helpers
# ──────────────────────────────────────────────

def _extends_cluster(ch: str, prev: str) -> bool:
    if prev == ZWJ or ch == ZWJ:
        return True
    if unicodedata.category(ch).startswith("M"):
        return True
    code = ord(ch)
    # variation selectors and emoji skin tone modifiers
    return 0xFE00 <= code <= 0xFE0F or 0xE0100 <= code <= 0xE01EF or 0x1F3FB <= code <= 0x1F3FF


def graphemes(text: str) -> list[str]:
    """Split text into user-perceived characters.

    A base character keeps any combining marks, variation selectors and
    zero-width-joined characters that follow it.
    """
    clusters: list[str] = []
    prev = ""
    for ch in text:
        if clusters and _extends_cluster(ch, prev):
            clusters[-1] += ch
        else:
            clusters.append(ch)
        prev = ch
    return clusters


def _is_separator(ch: str) -> bool:
    return ch.isspace() or unicodedata.category(ch).startswith(("P", "Z"))


def split_words(text: str) -> list[str]:
    """Split on Unicode whitespace and punctuation, dropping empty words."""
    words = []
    current = []
    for ch in text:
        if _is_separator(ch):
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(ch)
    if current:
        words.append("".join(current))
    return words


def _first(text: str) -> str:
    clusters = graphemes(text)
    return clusters[0] if clusters else ""


def _is_cjk(text: str) -> bool:
    return any(unicodedata.name(ch, "").startswith(_CJK_PREFIXES) for ch in text)


# ──────────────────────────────────────────────
# Extraction
# ──────────────────────────────────────────────

def name_initials(text: str, max_segments: int = DEFAULT_MAX_SEGMENTS) -> str:
    """Initials for a free-form name.

    A single word gives its first `max_segments` characters, uppercased
    ("Zoe" -> "ZO"). Otherwise the first character of each of the first
    `max_segments` words is kept in its own case ("ada lovelace" -> "al").
    """
    count = max(max_segments, 0)
    words = split_words(text)
    if len(words) == 1:
        return "".join(graphemes(words[0])[:count]).upper()
    return "".join(_first(word) for word in words[:count])


def _family_first(name: StructuredName) -> bool:
    if name.family_first is not None:
        return name.family_first
    return _is_cjk(name.given_name + name.family_name)


def abbreviated_name(name: StructuredName) -> str:
    """Short form: initial of the given and family names in display order."""
    order = [name.given_name, name.family_name]
    if _family_first(name):
        order.reverse()
    parts = [part for part in order if part]
    if not parts and name.nickname:
        parts = [name.nickname]
    return "".join(_first(part) for part in parts)


def long_name(name: StructuredName) -> str:
    """Long form: every component in display order."""
    if _family_first(name):
        separator = "" if _is_cjk(name.given_name + name.family_name) else " "
        core = separator.join(p for p in (name.family_name, name.given_name, name.middle_name) if p)
        return " ".join(p for p in (name.name_prefix, core, name.name_suffix) if p)
    parts = (
        name.name_prefix,
        name.given_name,
        name.middle_name,
        name.family_name,
        name.name_suffix,
    )
    return " ".join(p for p in parts if p)


def extract(source: TextSource) -> tuple[str, str]:
    """Return (initials, long) for a text source."""
    if isinstance(source, Initials):
        return source.text, source.text
    if isinstance(source, Name):
        return name_initials(source.text, source.max_segments), source.text
    if isinstance(source, StructuredName):
        initials = "".join(graphemes(abbreviated_name(source))[:STRUCTURED_INITIALS_MAX])
        return initials, long_name(source)
    raise TypeError(f"Unsupported avatar text: {type(source).__name__}")
