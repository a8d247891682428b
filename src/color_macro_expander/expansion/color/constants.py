"""
constants
=========

Does: Hold the static ColorVariant table (arity, alpha flag, display name,
      component-group label) and the fallback color.
Used By: literal extraction messages, resolver dispatch, diagnostics.
Returns: Immutable data only; safe for concurrent reads.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import NamedTuple

from .types import RGBAColor

__all__ = [
    "ColorVariant",
    "VariantInfo",
    "VARIANT_TABLE",
    "SUPPORTED_LABELS",
    "SUPPORTED_LABELS_TEXT",
    "FALLBACK_COLOR",
    "MACRO_NAME",
]

MACRO_NAME = "Color"


class VariantInfo(NamedTuple):
    arity: int
    includes_alpha: bool
    component_description: str


class ColorVariant(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSLA = "hsla"
    HSB = "hsb"
    HSBA = "hsba"

    @classmethod
    def from_label(cls, text: str) -> ColorVariant | None:
        """Does: Case-insensitive lookup by label text; None when unknown."""
        try:
            return cls(text.lower())
        except ValueError:
            return None

    @property
    def info(self) -> VariantInfo:
        return VARIANT_TABLE[self]

    @property
    def expected_argument_count(self) -> int:
        return self.info.arity

    @property
    def includes_alpha(self) -> bool:
        return self.info.includes_alpha

    @property
    def component_description(self) -> str:
        return self.info.component_description

    @property
    def channel_count(self) -> int:
        """Number of leading 0-255 integer arguments (alpha excluded)."""
        return self.info.arity - 1 if self.info.includes_alpha else self.info.arity

    @property
    def display_name(self) -> str:
        return f"#{MACRO_NAME}({self.value}:)"


VARIANT_TABLE = MappingProxyType({
    ColorVariant.HEX: VariantInfo(1, False, "Values"),
    ColorVariant.RGB: VariantInfo(3, False, "RGB components"),
    ColorVariant.RGBA: VariantInfo(4, True, "RGB components"),
    ColorVariant.HSL: VariantInfo(3, False, "HSL components"),
    ColorVariant.HSLA: VariantInfo(4, True, "HSL components"),
    ColorVariant.HSB: VariantInfo(3, False, "HSB components"),
    ColorVariant.HSBA: VariantInfo(4, True, "HSB components"),
})

SUPPORTED_LABELS: tuple[str, ...] = tuple(v.value for v in ColorVariant)
SUPPORTED_LABELS_TEXT = ", ".join(SUPPORTED_LABELS)

# Fully transparent black, what `Color.clear` resolves to.
FALLBACK_COLOR = RGBAColor(0.0, 0.0, 0.0, 0.0)
