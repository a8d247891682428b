"""
hex
===

Does: Hex color string decoding.
"""

from .decode import SUPPORTED_LENGTHS, decode_hex, hex_digit_value, normalize_hex

__all__ = ["SUPPORTED_LENGTHS", "decode_hex", "hex_digit_value", "normalize_hex"]
