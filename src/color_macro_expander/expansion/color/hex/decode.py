"""
decode.py
=========

Does: Normalize a hex color string (trim, one '#', one '0x'/'0X') and decode
      3/4-digit shorthand or 6/8-digit full-byte forms into an RGBAColor.
Returns: RGBAColor with channels byte / 255.0.
Used By: color.logic.resolver (hex variant).

Errors are raised without an anchor; the resolver anchors them at the
string literal.
"""

from __future__ import annotations

import logging

from ..diagnostics import HexEmptyError, HexInvalidCharacterError, HexUnsupportedLengthError
from ..types import RGBAColor

__all__ = [
    "SUPPORTED_LENGTHS",
    "normalize_hex",
    "hex_digit_value",
    "decode_hex",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

SUPPORTED_LENGTHS = (3, 4, 6, 8)

# ASCII only: full-width or other Unicode digits are rejected.
_HEX_DIGITS = {c: int(c, 16) for c in "0123456789abcdefABCDEF"}


def hex_digit_value(character: str) -> int | None:
    return _HEX_DIGITS.get(character)


def normalize_hex(text: str) -> str:
    """Does: Trim whitespace, strip one leading '#', then one leading '0x'/'0X'."""
    sanitized = text.strip()
    if sanitized.startswith("#"):
        sanitized = sanitized[1:]
    if sanitized.lower().startswith("0x"):
        sanitized = sanitized[2:]
    return sanitized


def _nibbles(digits: str) -> list[int]:
    values: list[int] = []
    for ch in digits:
        value = hex_digit_value(ch)
        if value is None:
            raise HexInvalidCharacterError(ch)
        values.append(value)
    return values


def _expand_shorthand(digits: str) -> RGBAColor:
    # each nibble n stands for the byte 0xnn == n * 17
    nibbles = _nibbles(digits)
    alpha = nibbles[3] if len(nibbles) == 4 else 15
    return RGBAColor.from_bytes(nibbles[0] * 17, nibbles[1] * 17, nibbles[2] * 17, alpha * 17)


def _expand_full_bytes(digits: str) -> RGBAColor:
    values = _nibbles(digits)
    data = [high * 16 + low for high, low in zip(values[::2], values[1::2])]
    alpha = data[3] if len(data) == 4 else 255
    return RGBAColor.from_bytes(data[0], data[1], data[2], alpha)


def decode_hex(text: str) -> RGBAColor:
    """
    Does: Decode '#FFF', '0x336699', 'FF990080', ... into an RGBAColor.
    Raises:
        HexEmptyError: nothing left after trimming and prefix stripping.
        HexUnsupportedLengthError: digit count not in 3, 4, 6, 8.
        HexInvalidCharacterError: first non-hex character, scanning left to right.
    """
    digits = normalize_hex(text)
    if not digits:
        raise HexEmptyError()

    length = len(digits)
    if length not in SUPPORTED_LENGTHS:
        raise HexUnsupportedLengthError(length)

    color = _expand_shorthand(digits) if length <= 4 else _expand_full_bytes(digits)
    logger.debug("Decoded hex %r -> %s", text, color)
    return color
