# src/color_macro_expander/expansion/color/logic/resolver.py

"""
resolver.py
===========

Does: Resolve one `#Color(<label>: ...)` invocation into an RGBAColor:
      check arguments and label, gate on arity, then dispatch to the hex,
      RGB, HSL or HSB path. The first failure wins; it becomes the single
      Diagnostic of the invocation and the fallback color is returned.
Returns: ResolutionResult(color, diagnostic).
Used By: orchestrator.expand(), demo CLI, host integrations.

Stateless: safe to call from any number of threads at once.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from color_macro_expander.expansion.general.fuzzy import suggest_label
from color_macro_expander.expansion.general.types import (
    Expression,
    LabeledArgument,
    MacroInvocation,
    Span,
)
from color_macro_expander.expansion.general.utils import debug

from ..constants import FALLBACK_COLOR, SUPPORTED_LABELS, ColorVariant
from ..diagnostics import (
    ColorMacroError,
    Diagnostic,
    MissingArgumentError,
    MissingLabelError,
    UnexpectedArgumentCountError,
    UnknownLabelError,
)
from ..hex import decode_hex
from ..literal import extract_alpha, extract_integers, extract_single_segment_string
from ..types import RGBAColor
from ..utils import RGBTriple, hsb_to_rgb, hsl_to_rgb

__all__ = [
    "ResolutionResult",
    "resolve",
    "resolve_arguments",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolutionResult:
    """Resolved color, or the fallback color plus the diagnostic explaining why."""

    color: RGBAColor
    diagnostic: Diagnostic | None = None

    @property
    def ok(self) -> bool:
        return self.diagnostic is None


# ─────────────────────────────────────────────────────────────────────────────
# 1) Argument gate
# ─────────────────────────────────────────────────────────────────────────────
def _variant_for(arguments: Sequence[LabeledArgument], name_span: Span) -> ColorVariant:
    if not arguments:
        raise MissingArgumentError(name_span)

    first = arguments[0]
    if first.label is None:
        raise MissingLabelError(first.expression.span)

    variant = ColorVariant.from_label(first.label)
    if variant is None:
        hint = suggest_label(first.label, SUPPORTED_LABELS)
        raise UnknownLabelError(
            first.label,
            first.expression.span,
            suggestion=f"did you mean '{hint}'?" if hint else None,
        )

    actual = len(arguments)
    if actual != variant.expected_argument_count:
        if variant is ColorVariant.HEX and actual > 1:
            anchor = arguments[1].expression.span
        else:
            anchor = arguments[-1].expression.span
        raise UnexpectedArgumentCountError(
            variant.display_name, variant.expected_argument_count, actual, anchor
        )
    return variant


# ─────────────────────────────────────────────────────────────────────────────
# 2) Per-variant paths
# ─────────────────────────────────────────────────────────────────────────────
def _alpha(exprs: Sequence[Expression], variant: ColorVariant) -> float:
    if not variant.includes_alpha:
        return 1.0
    return extract_alpha(exprs[variant.channel_count], variant)


def _resolve_hex(exprs: Sequence[Expression], variant: ColorVariant) -> RGBAColor:
    literal = exprs[0]
    text = extract_single_segment_string(literal)
    try:
        return decode_hex(text)
    except ColorMacroError as err:
        err.anchor = literal.span
        raise


def _resolve_rgb(exprs: Sequence[Expression], variant: ColorVariant) -> RGBAColor:
    red, green, blue = extract_integers(list(exprs[: variant.channel_count]), variant)
    alpha = _alpha(exprs, variant)
    return RGBAColor(red / 255.0, green / 255.0, blue / 255.0, alpha)


def _converted(convert: Callable[[float, float, float], RGBTriple]):
    # 0-255 integers go straight into the degree/percent parameters
    def _resolve_cylindrical(exprs: Sequence[Expression], variant: ColorVariant) -> RGBAColor:
        hue, saturation, third = extract_integers(list(exprs[: variant.channel_count]), variant)
        alpha = _alpha(exprs, variant)
        red, green, blue = convert(float(hue), float(saturation), float(third))
        return RGBAColor(red, green, blue, alpha)

    return _resolve_cylindrical


_PATHS: dict[ColorVariant, Callable[[Sequence[Expression], ColorVariant], RGBAColor]] = {
    ColorVariant.HEX: _resolve_hex,
    ColorVariant.RGB: _resolve_rgb,
    ColorVariant.RGBA: _resolve_rgb,
    ColorVariant.HSL: _converted(hsl_to_rgb),
    ColorVariant.HSLA: _converted(hsl_to_rgb),
    ColorVariant.HSB: _converted(hsb_to_rgb),
    ColorVariant.HSBA: _converted(hsb_to_rgb),
}


# ─────────────────────────────────────────────────────────────────────────────
# 3) Public entry points
# ─────────────────────────────────────────────────────────────────────────────
def resolve_arguments(
    arguments: Sequence[LabeledArgument],
    *,
    name_span: Span,
) -> ResolutionResult:
    """
    Does: Resolve a labeled argument list (first label selects the variant).
    Args:
        arguments: The invocation's arguments, in order; never mutated.
        name_span: Span of the macro name, underlined when there are no arguments.
    Returns: ResolutionResult; on failure color is FALLBACK_COLOR.
    """
    try:
        variant = _variant_for(arguments, name_span)
        exprs = [arg.expression for arg in arguments]
        color = _PATHS[variant](exprs, variant)
    except ColorMacroError as err:
        diagnostic = err.to_diagnostic(default_anchor=name_span)
        logger.debug(
            "Resolution failed: %s at %d..%d", diagnostic.kind.value,
            diagnostic.anchor.start, diagnostic.anchor.end,
        )
        debug(f"{diagnostic.kind.value}: {diagnostic.message}", topic="resolver")
        return ResolutionResult(FALLBACK_COLOR, diagnostic)

    debug(f"{variant.value} -> {color.as_tuple()}", topic="resolver")
    return ResolutionResult(color)


def resolve(invocation: MacroInvocation) -> ResolutionResult:
    """Does: resolve_arguments() for a parsed invocation."""
    return resolve_arguments(invocation.arguments, name_span=invocation.name_span)
