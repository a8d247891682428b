"""
color.
=====

Does: Aggregate the color-literal resolver's core definitions: the variant
      table, the RGBA value type, the diagnostic taxonomy.
Used By: literal extraction, hex decoding, resolver, emitter.
Returns: Pure data structures; resolution itself lives in `color.logic`.
"""

# ── Constants ────────────────────────────────────────────────────────────────
from .constants import (
    FALLBACK_COLOR,
    SUPPORTED_LABELS,
    VARIANT_TABLE,
    ColorVariant,
    VariantInfo,
)

# ── Diagnostics ──────────────────────────────────────────────────────────────
from .diagnostics import ColorMacroError, Diagnostic, DiagnosticKind, format_value

# ── Value types ──────────────────────────────────────────────────────────────
from .types import RGBAColor

__all__ = [
    # constants
    "ColorVariant",
    "VariantInfo",
    "VARIANT_TABLE",
    "SUPPORTED_LABELS",
    "FALLBACK_COLOR",
    # diagnostics
    "ColorMacroError",
    "Diagnostic",
    "DiagnosticKind",
    "format_value",
    # types
    "RGBAColor",
]
