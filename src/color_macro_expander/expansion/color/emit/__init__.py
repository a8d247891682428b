"""
emit
====

Does: Turn resolution results into target source text or printable diagnostics.
"""

from .emitter import (
    DEFAULT_SURFACE,
    SURFACE_ENV_VAR,
    UnknownSurfaceError,
    available_surfaces,
    default_surface,
    emit_expression,
    emit_fallback,
    format_literal,
)
from .render import render_diagnostic

__all__ = [
    "DEFAULT_SURFACE",
    "SURFACE_ENV_VAR",
    "UnknownSurfaceError",
    "available_surfaces",
    "default_surface",
    "emit_expression",
    "emit_fallback",
    "format_literal",
    "render_diagnostic",
]
