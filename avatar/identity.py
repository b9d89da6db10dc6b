"""Stable 64-bit keys for avatar identities.

An identity is whatever the avatar belongs to: a user id, an email, a
UUID. It is reduced to raw bytes, hashed with SHA-256, and the first
eight digest bytes become the key. Same bytes, same key, on every run.

Usage:
    from avatar.identity import Identity

    Identity.from_int(42).key
    Identity.from_string("ada@example.com").key
"""
from __future__ import annotations

import hashlib
import logging
import sys
from dataclasses import dataclass
from typing import Union

from avatar.config import DEFAULT_INT_WIDTH, KEY_BYTES

logger = logging.getLogger(__name__)


def derive_key(data: bytes) -> int:
    """Fold the first 8 bytes of SHA-256(data) big-endian into a u64."""
    digest = hashlib.sha256(data).digest()
    result = 0
    for byte in digest[:KEY_BYTES]:
        result = (result << 8) | byte
    return result


def int_to_bytes(value: int, width: int = DEFAULT_INT_WIDTH, byteorder: str = sys.byteorder) -> bytes:
    """Raw bytes of an integer stored in `width` bytes.

    Non-negative values are written unsigned, negative ones as two's
    complement. A value too wide for `width` is widened to the next
    multiple of `width` that holds it.
    """
    size = width
    while True:
        bits = size * 8
        if 0 <= value < (1 << bits) or -(1 << (bits - 1)) <= value < 0:
            break
        size += width
    return value.to_bytes(size, byteorder, signed=value < 0)


@dataclass(frozen=True)
class Identity:
    """Who an avatar is for, already reduced to its 64-bit key."""

    key: int

    @classmethod
    def from_bytes(cls, data: bytes) -> Identity:
        return cls(key=derive_key(bytes(data)))

    @classmethod
    def from_int(
        cls,
        value: int,
        width: int = DEFAULT_INT_WIDTH,
        byteorder: str = sys.byteorder,
    ) -> Identity:
        """Identity from an integer's raw memory representation.

        Python ints have no fixed width, so `width` stands in for the
        integer type (8 bytes matches a 64-bit Int). Pass an explicit
        `byteorder` to get the same key on big- and little-endian hosts.
        """
        return cls.from_bytes(int_to_bytes(value, width, byteorder))

    @classmethod
    def from_string(cls, value: str) -> Identity:
        """Identity from the UTF-8 bytes of a string.

        Strings UTF-8 can't represent (lone surrogates) hash as empty bytes.
        """
        try:
            data = value.encode("utf-8")
        except UnicodeEncodeError:
            logger.debug("Identity string is not UTF-8 encodable, hashing empty bytes")
            data = b""
        return cls.from_bytes(data)


# 64-bit zero: eight 0x00 bytes, identical in either byte order
DEFAULT_IDENTITY = Identity.from_bytes(bytes(KEY_BYTES))


def to_identity(value: Union[Identity, int, str, bytes, None]) -> Identity:
    """Accept an Identity or the raw value one is built from."""
    if value is None:
        return DEFAULT_IDENTITY
    if isinstance(value, Identity):
        return value
    if isinstance(value, str):
        return Identity.from_string(value)
    if isinstance(value, (bytes, bytearray)):
        return Identity.from_bytes(value)
    if isinstance(value, int):
        return Identity.from_int(value)
    raise TypeError(f"Unsupported avatar identity: {type(value).__name__}")
