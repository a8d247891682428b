"""
literal
=======

Does: Literal extraction for macro arguments (byte channels, alpha, hex strings).
"""

from .extract import (
    BYTE_MAX,
    BYTE_MIN,
    extract_alpha,
    extract_integer,
    extract_integers,
    extract_signed_number,
    extract_single_segment_string,
)

__all__ = [
    "BYTE_MIN",
    "BYTE_MAX",
    "extract_integer",
    "extract_integers",
    "extract_signed_number",
    "extract_alpha",
    "extract_single_segment_string",
]
