# src/color_macro_expander/expansion/color/emit/emitter.py

"""
emitter.py
==========

Does: Render a resolved RGBAColor (or the fallback) as target-language source
      text, using per-surface templates from data/emitters.json.
Returns: emit_expression(), emit_fallback(), format_literal(), available_surfaces().
Used By: orchestrator.expand(), demo CLI.

Templates are str.format strings and may use {red} {green} {blue} {alpha}
(decimal literals), {hex} (#rrggbb) and {hexa} (#rrggbbaa).
"""

from __future__ import annotations

import logging
import os
from typing import Any

from color_macro_expander.expansion.general.utils import HAS_JSON5, ConfigTypeError, load_config

from ..diagnostics import format_value
from ..types import RGBAColor

__all__ = [
    "UnknownSurfaceError",
    "DEFAULT_SURFACE",
    "SURFACE_ENV_VAR",
    "format_literal",
    "available_surfaces",
    "default_surface",
    "emit_expression",
    "emit_fallback",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

CONFIG_NAME = "emitters"
DEFAULT_SURFACE = "swiftui"
SURFACE_ENV_VAR = "COLOR_MACRO_SURFACE"
_TEMPLATE_FIELDS = ("template", "fallback")


class UnknownSurfaceError(KeyError):
    """Raise when no template is configured for the requested surface."""

    def __init__(self, surface: str, known: list[str]):
        super().__init__(surface)
        self.surface = surface
        self.known = known

    def __str__(self) -> str:
        return f"Unknown surface '{self.surface}' (known: {', '.join(self.known)})"


def format_literal(value: float) -> str:
    """Does: Decimal literal with a guaranteed decimal point (1 -> '1.0')."""
    return format_value(value)


# ── Config ───────────────────────────────────────────────────────────────────
def _validate(data: dict[str, Any]) -> dict[str, Any]:
    surfaces = data.get("surfaces")
    if not isinstance(surfaces, dict) or not surfaces:
        raise ConfigTypeError("emitters.json: 'surfaces' must be a non-empty object")
    for name, entry in surfaces.items():
        if not isinstance(entry, dict):
            raise ConfigTypeError(f"emitters.json: surface '{name}' must be an object")
        for key in _TEMPLATE_FIELDS:
            if not isinstance(entry.get(key), str):
                raise ConfigTypeError(f"emitters.json: surface '{name}' needs a string '{key}'")
    return data


def _config() -> dict[str, Any]:
    # comments are allowed in emitters.json when json5 is installed
    return load_config(
        CONFIG_NAME,
        mode="validated_dict",
        validator=_validate,
        allow_comments=HAS_JSON5,
    )


def available_surfaces() -> list[str]:
    return sorted(_config()["surfaces"])


def default_surface() -> str:
    """Does: COLOR_MACRO_SURFACE, else the config's default_surface, else 'swiftui'."""
    env = os.getenv(SURFACE_ENV_VAR, "").strip()
    if env:
        return env
    return str(_config().get("default_surface") or DEFAULT_SURFACE)


def _surface(surface: str | None) -> dict[str, str]:
    name = surface or default_surface()
    surfaces = _config()["surfaces"]
    try:
        return surfaces[name]
    except KeyError:
        raise UnknownSurfaceError(name, sorted(surfaces)) from None


# ── Rendering ────────────────────────────────────────────────────────────────
def emit_expression(color: RGBAColor, surface: str | None = None) -> str:
    """Does: Fill the surface template with the color's channels."""
    template = _surface(surface)["template"]
    text = template.format(
        red=format_literal(color.red),
        green=format_literal(color.green),
        blue=format_literal(color.blue),
        alpha=format_literal(color.alpha),
        hex=color.to_hex(),
        hexa=color.to_hex(include_alpha=True),
    )
    logger.debug("Emitted %s", text)
    return text


def emit_fallback(surface: str | None = None) -> str:
    """Returns: The surface's placeholder expression used after a failed resolution."""
    return _surface(surface)["fallback"]
