# src/color_macro_expander/expansion/color/literal/extract.py
from __future__ import annotations

"""
extract.py

Does: Read one argument expression as a byte channel (0-255 integer), a
      signed number (alpha) or a single-segment string literal. Knows
      nothing about color math; only about literal shapes and ranges.
Returns: int / float / str, or raises a ColorMacroError anchored at the
         offending expression.
Used by: color.logic.resolver for every channel, alpha and hex argument.
"""

import logging

from color_macro_expander.expansion.general.types import Expression, ExprKind

from ..constants import ColorVariant
from ..diagnostics import (
    HexInterpolatedStringError,
    HexNonStringLiteralError,
    InvalidNumericLiteralError,
    ValueOutOfRangeError,
)
from ..types import ByteChannel

__all__ = [
    "BYTE_MIN",
    "BYTE_MAX",
    "extract_integer",
    "extract_integers",
    "extract_signed_number",
    "extract_alpha",
    "extract_single_segment_string",
]

__docformat__ = "google"

logger = logging.getLogger(__name__)

BYTE_MIN, BYTE_MAX = 0, 255
ALPHA_MIN, ALPHA_MAX = 0.0, 1.0

# Literals must fit a signed 64-bit integer
INT_LITERAL_MAX = 2**63 - 1
_INT_LITERAL_DIGITS = len(str(INT_LITERAL_MAX))


def _clean(text: str) -> str:
    return text.replace("_", "").strip()


def _parse_decimal_int(text: str) -> int | None:
    """Decimal only: 0x/0b/0o literals are not accepted as channel values.

    None when the literal does not fit a signed 64-bit integer.
    """
    cleaned = _clean(text)
    if not cleaned.isascii() or not cleaned.isdigit():
        return None
    cleaned = cleaned.lstrip("0") or "0"
    if len(cleaned) > _INT_LITERAL_DIGITS:
        return None
    value = int(cleaned)
    return value if value <= INT_LITERAL_MAX else None


def _parse_number(text: str) -> float | None:
    cleaned = _clean(text)
    if cleaned.lower().startswith("0x"):
        try:
            return float.fromhex(cleaned)
        except (ValueError, OverflowError):
            return None
    try:
        return float(cleaned)
    except ValueError:
        return None


# ─────────────────────────────────────────────────────────────────────────────
# Integers (byte channels)
# ─────────────────────────────────────────────────────────────────────────────
def extract_integer(expr: Expression, variant: ColorVariant) -> ByteChannel:
    """
    Does: Read an integer literal as a byte channel.
    Returns: int in [0, 255].
    Raises:
        InvalidNumericLiteralError: not a decimal integer literal.
        ValueOutOfRangeError: outside [0, 255]; a negated integer literal
            (`-5`) is read so it can be reported as out of range.
    """
    if expr.kind is ExprKind.INTEGER_LITERAL:
        value = _parse_decimal_int(expr.text)
    elif (
        expr.kind is ExprKind.PREFIX_OPERATOR
        and expr.operator == "-"
        and expr.operand is not None
        and expr.operand.kind is ExprKind.INTEGER_LITERAL
    ):
        magnitude = _parse_decimal_int(expr.operand.text)
        value = None if magnitude is None else -magnitude
    else:
        value = None

    if value is None:
        raise InvalidNumericLiteralError(variant.display_name, expr.span)

    if not BYTE_MIN <= value <= BYTE_MAX:
        raise ValueOutOfRangeError(
            f"{variant.component_description} must be between {BYTE_MIN} and {BYTE_MAX}",
            value,
            expr.span,
            constraint="channel",
        )
    return value


def extract_integers(args: list[Expression], variant: ColorVariant) -> list[ByteChannel]:
    """Does: Extract each expression in order; the first failure propagates."""
    return [extract_integer(expr, variant) for expr in args]


# ─────────────────────────────────────────────────────────────────────────────
# Signed numbers (alpha)
# ─────────────────────────────────────────────────────────────────────────────
def extract_signed_number(expr: Expression, variant: ColorVariant) -> float:
    """
    Does: Read an integer/float literal, optionally behind a single unary minus.
    Raises:
        InvalidNumericLiteralError: any other shape (identifier, call, binary...).
    """
    value: float | None = None
    if expr.is_number_literal:
        value = _parse_number(expr.text)
    elif (
        expr.kind is ExprKind.PREFIX_OPERATOR
        and expr.operator == "-"
        and expr.operand is not None
        and expr.operand.is_number_literal
    ):
        magnitude = _parse_number(expr.operand.text)
        value = None if magnitude is None else -magnitude

    if value is None:
        raise InvalidNumericLiteralError(variant.display_name, expr.span)
    return value


def extract_alpha(expr: Expression, variant: ColorVariant) -> float:
    """Does: extract_signed_number() plus the [0, 1] alpha range check."""
    value = extract_signed_number(expr, variant)
    if not ALPHA_MIN <= value <= ALPHA_MAX:
        raise ValueOutOfRangeError(
            "Alpha must be between 0 and 1",
            value,
            expr.span,
            constraint="alpha",
        )
    return value


# ─────────────────────────────────────────────────────────────────────────────
# Strings (hex)
# ─────────────────────────────────────────────────────────────────────────────
def extract_single_segment_string(expr: Expression) -> str:
    """
    Does: Return the raw text of a string literal made of exactly one text segment.
    Raises:
        HexNonStringLiteralError: the expression is not a string literal.
        HexInterpolatedStringError: interpolation, or segment count != 1;
            anchored at the whole literal.
    """
    if expr.kind is not ExprKind.STRING_LITERAL:
        raise HexNonStringLiteralError(expr.span)

    segments = expr.segments
    if len(segments) != 1 or segments[0].interpolation:
        logger.debug("String literal has %d segment(s): %r", len(segments), expr.text)
        raise HexInterpolatedStringError(expr.span)
    return segments[0].text
