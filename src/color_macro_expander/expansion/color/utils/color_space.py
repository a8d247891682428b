"""
color_space.py
==============

Does: Convert (hue°, saturation%, lightness%) and (hue°, saturation%,
      brightness%) to RGB triples.
Used By: color.logic.resolver (hsl/hsla/hsb/hsba variants).
Returns: (red, green, blue) floats; pure and total.

Only the hue is wrapped into [0, 360). Saturation, lightness and brightness
are used as given, so values above 100 yield channels outside [0, 1].
"""

from __future__ import annotations

import math

__all__ = [
    "RGBTriple",
    "normalize_hue",
    "hsl_to_rgb",
    "hsb_to_rgb",
]
__docformat__ = "google"

RGBTriple = tuple[float, float, float]


def normalize_hue(hue_degrees: float) -> float:
    """Does: Wrap a hue into [0, 360) (fmod, then +360 for negatives)."""
    hue = math.fmod(hue_degrees, 360)
    if hue < 0:
        hue += 360
    return hue


def _sector(h: float, c: float, x: float) -> RGBTriple:
    """Pick the (r1, g1, b1) pattern for the 60° sector `h` falls in (0 <= h < 6)."""
    if h < 1:
        return c, x, 0.0
    if h < 2:
        return x, c, 0.0
    if h < 3:
        return 0.0, c, x
    if h < 4:
        return 0.0, x, c
    if h < 5:
        return x, 0.0, c
    return c, 0.0, x


def hsl_to_rgb(
    hue_degrees: float,
    saturation_percent: float,
    lightness_percent: float,
) -> RGBTriple:
    h = normalize_hue(hue_degrees) / 360
    s = saturation_percent / 100
    l = lightness_percent / 100  # noqa: E741

    c = (1 - abs(2 * l - 1)) * s
    h_prime = h * 6
    x = c * (1 - abs(math.fmod(h_prime, 2) - 1))
    m = l - c / 2

    r1, g1, b1 = _sector(h_prime, c, x)
    return r1 + m, g1 + m, b1 + m


def hsb_to_rgb(
    hue_degrees: float,
    saturation_percent: float,
    brightness_percent: float,
) -> RGBTriple:
    h = normalize_hue(hue_degrees) / 60
    s = saturation_percent / 100
    v = brightness_percent / 100

    c = v * s
    x = c * (1 - abs(math.fmod(h, 2) - 1))
    m = v - c

    r1, g1, b1 = _sector(h, c, x)
    return r1 + m, g1 + m, b1 + m
