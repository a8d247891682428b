"""
types.py.

Does: Define RGBAColor, the resolver's only successful output: four float
      channels (red, green, blue, alpha), nominally in [0, 1].
Used by: hex decoder, color-space conversion, resolver, emitter.

HSL/HSB inputs are not clamped upstream, so a color produced from
saturation/lightness above 100 can carry channels outside [0, 1];
`in_gamut` and `clamped()` are there for callers that care.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass

import webcolors

__all__ = ["ByteChannel", "RGBAColor"]
__docformat__ = "google"


# 8-bit channel value, always 0-255 once extracted or decoded
ByteChannel = int


def _clamp_unit(value: float) -> float:
    return min(1.0, max(0.0, value))


def _to_byte(value: float) -> int:
    return int(round(_clamp_unit(value) * 255))


@dataclass(frozen=True)
class RGBAColor:
    red: float
    green: float
    blue: float
    alpha: float = 1.0

    # ── Constructors ─────────────────────────────────────────────────────────
    @classmethod
    def from_bytes(cls, red: int, green: int, blue: int, alpha: int = 255) -> RGBAColor:
        """Does: Build a color from 8-bit channels (each divided by 255.0)."""
        return cls(red / 255.0, green / 255.0, blue / 255.0, alpha / 255.0)

    # ── Views ────────────────────────────────────────────────────────────────
    def as_tuple(self) -> tuple[float, float, float, float]:
        return astuple(self)

    @property
    def in_gamut(self) -> bool:
        return all(0.0 <= c <= 1.0 for c in self.as_tuple())

    def clamped(self) -> RGBAColor:
        """Does: Return a copy with every channel clamped to [0, 1]."""
        return RGBAColor(*(_clamp_unit(c) for c in self.as_tuple()))

    def to_bytes(self) -> tuple[int, int, int, int]:
        """Returns: (r, g, b, a) rounded to 8-bit, out-of-gamut channels clamped."""
        return (
            _to_byte(self.red),
            _to_byte(self.green),
            _to_byte(self.blue),
            _to_byte(self.alpha),
        )

    def to_hex(self, include_alpha: bool = False) -> str:
        """Does: Render `#rrggbb`, or `#rrggbbaa` when include_alpha is set."""
        r, g, b, a = self.to_bytes()
        text = webcolors.rgb_to_hex((r, g, b))
        if include_alpha:
            text += f"{a:02x}"
        return text

    def css_name(self) -> str | None:
        """Returns: The exact CSS3 color name for the 8-bit RGB value, or None."""
        r, g, b, _ = self.to_bytes()
        try:
            return webcolors.rgb_to_name((r, g, b), spec=webcolors.CSS3)
        except ValueError:
            return None
