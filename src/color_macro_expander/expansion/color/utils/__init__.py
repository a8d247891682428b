"""
utils package.
=============

Does: Numeric color-space helpers shared by the resolver.
"""

from .color_space import RGBTriple, hsb_to_rgb, hsl_to_rgb, normalize_hue

__all__ = [
    "RGBTriple",
    "normalize_hue",
    "hsl_to_rgb",
    "hsb_to_rgb",
]

__docformat__ = "google"
