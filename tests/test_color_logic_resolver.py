# tests/test_color_logic_resolver.py
"""
Variant resolver tests
======================

Does: Drive resolve() end to end from invocation text: the success scenarios
      for every variant, every diagnostic kind with its exact message and
      anchor, first-failure short-circuiting and the fallback color.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from color_macro_expander.expansion.color import FALLBACK_COLOR, DiagnosticKind, RGBAColor
from color_macro_expander.expansion.color.logic import resolve, resolve_arguments
from color_macro_expander.expansion.general.syntax import parse_invocation
from color_macro_expander.expansion.general.types import (
    Expression,
    ExprKind,
    LabeledArgument,
    Span,
)

K = DiagnosticKind


def _resolve(source: str):
    return resolve(parse_invocation(source))


def _anchor_text(source: str, result) -> str:
    span = result.diagnostic.anchor
    return source[span.start:span.end]


# ──────────────────────────────────────────────────────────────────────────────
# Successful resolution
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "source,expected",
    [
        ('#Color(hex: "#FFF")', (1.0, 1.0, 1.0, 1.0)),
        ('#Color(hex: "#0F8C")', (0.0, 1.0, 0.5333333333333333, 0.8)),
        ('#Color(hex: "0xFF9900")', (1.0, 0.6, 0.0, 1.0)),
        ("#Color(rgb: 154, 234, 98)", (0.6039215686274509, 0.9176470588235294, 0.3843137254901961, 1.0)),
        ("#Color(rgba: 154, 234, 98, 0.5)", (0.6039215686274509, 0.9176470588235294, 0.3843137254901961, 0.5)),
        ("#Color(hsl: 95, 76, 65)", (0.6056666666666666, 0.9159999999999999, 0.38400000000000006, 1.0)),
        ("#Color(hsla: 32, 100, 50, 0.8)", (1.0, 0.5333333333333333, 0.0, 0.8)),
        ("#Color(hsb: 200, 60, 80)", (0.32, 0.64, 0.8, 1.0)),
        ("#Color(hsba: 200, 60, 80, 0.5)", (0.32, 0.64, 0.8, 0.5)),
        ("#Color(RGB: 0, 0, 255)", (0.0, 0.0, 1.0, 1.0)),
        ("#Color(rgba: 0, 0, 0, 1)", (0.0, 0.0, 0.0, 1.0)),
        ("#Color(rgba: 255, 255, 255, 0)", (1.0, 1.0, 1.0, 0.0)),
    ],
)
def test_resolves_each_variant(source, expected):
    result = _resolve(source)
    assert result.ok
    assert result.diagnostic is None
    assert result.color.as_tuple() == pytest.approx(expected)


def test_rgb_channels_are_exact_byte_fractions():
    result = _resolve("#Color(rgba: 154, 234, 98, 0.5)")
    assert result.color == RGBAColor(154 / 255.0, 234 / 255.0, 98 / 255.0, 0.5)


def test_hsl_saturation_above_100_is_not_clamped():
    result = _resolve("#Color(hsl: 0, 200, 50)")
    assert result.ok
    assert result.color.as_tuple() == pytest.approx((1.5, -0.5, -0.5, 1.0))
    assert result.color.in_gamut is False


# ──────────────────────────────────────────────────────────────────────────────
# Diagnostics: kind, message, anchor
# ──────────────────────────────────────────────────────────────────────────────
SUPPORTED = "Supported labels: hex, rgb, rgba, hsl, hsla, hsb, hsba."


@pytest.mark.parametrize(
    "source,kind,message,anchor",
    [
        ("#Color()", K.MISSING_ARGUMENT, "#Color expects at least one labeled argument.", "Color"),
        ("#Color(154, 234, 98)", K.MISSING_LABEL, f"Label the first argument to #Color. {SUPPORTED}", "154"),
        ("#Color(rgbx: 1, 2, 3)", K.UNKNOWN_LABEL, f"Unknown #Color label 'rgbx'. {SUPPORTED}", "1"),
        ("#Color(Cmyk: 1, 2, 3, 4)", K.UNKNOWN_LABEL, f"Unknown #Color label 'Cmyk'. {SUPPORTED}", "1"),
        (
            "#Color(rgb: 154, 234)",
            K.UNEXPECTED_ARGUMENT_COUNT,
            "#Color(rgb:) expects 3 argument(s), but received 2.",
            "234",
        ),
        (
            "#Color(hsba: 1, 2, 3)",
            K.UNEXPECTED_ARGUMENT_COUNT,
            "#Color(hsba:) expects 4 argument(s), but received 3.",
            "3",
        ),
        (
            '#Color(hex: "#FFF", "#000", 3)',
            K.UNEXPECTED_ARGUMENT_COUNT,
            "#Color(hex:) expects 1 argument(s), but received 3.",
            '"#000"',
        ),
        ("#Color(hex: 0xFFF)", K.HEX_NON_STRING_LITERAL, "Hex values must be specified as string literals.", "0xFFF"),
        (
            r'#Color(hex: "#\(value)")',
            K.HEX_INTERPOLATED_STRING,
            "Hex strings cannot contain interpolation or multiple segments.",
            r'"#\(value)"',
        ),
        ('#Color(hex: "")', K.HEX_EMPTY, "Provide at least one hexadecimal digit.", '""'),
        ('#Color(hex: " # ")', K.HEX_EMPTY, "Provide at least one hexadecimal digit.", '" # "'),
        (
            '#Color(hex: "#12345")',
            K.HEX_UNSUPPORTED_LENGTH,
            "Hex literals must contain 3, 4, 6, or 8 digits, but found 5.",
            '"#12345"',
        ),
        (
            '#Color(hex: "#GGGGGG")',
            K.HEX_INVALID_CHARACTER,
            "Character 'G' is not valid in a hexadecimal color literal.",
            '"#GGGGGG"',
        ),
        (
            "#Color(hsba: 0, 0, brightness, 0.5)",
            K.INVALID_NUMERIC_LITERAL,
            "All #Color(hsba:) arguments must be numeric literals.",
            "brightness",
        ),
        (
            "#Color(rgba: 1, 2, 3, opacity)",
            K.INVALID_NUMERIC_LITERAL,
            "All #Color(rgba:) arguments must be numeric literals.",
            "opacity",
        ),
        (
            "#Color(rgb: 300, 0, 0)",
            K.VALUE_OUT_OF_RANGE,
            "RGB components must be between 0 and 255, but found 300.0.",
            "300",
        ),
        (
            "#Color(hsl: 0, 0, 256)",
            K.VALUE_OUT_OF_RANGE,
            "HSL components must be between 0 and 255, but found 256.0.",
            "256",
        ),
        (
            "#Color(hsb: -1, 0, 0)",
            K.VALUE_OUT_OF_RANGE,
            "HSB components must be between 0 and 255, but found -1.0.",
            "-1",
        ),
        (
            "#Color(rgba: 0, 0, 0, 2)",
            K.VALUE_OUT_OF_RANGE,
            "Alpha must be between 0 and 1, but found 2.0.",
            "2",
        ),
        (
            "#Color(rgba: 0, 0, 0, -0.5)",
            K.VALUE_OUT_OF_RANGE,
            "Alpha must be between 0 and 1, but found -0.5.",
            "-0.5",
        ),
    ],
)
def test_diagnostics(source, kind, message, anchor):
    result = _resolve(source)
    assert not result.ok
    assert result.color == FALLBACK_COLOR
    diag = result.diagnostic
    assert diag.kind is kind
    assert diag.message == message
    assert diag.severity == "error"
    assert _anchor_text(source, result) == anchor


def test_unknown_label_carries_suggestion():
    result = _resolve("#Color(rbga: 1, 2, 3, 0.5)")
    assert result.diagnostic.kind is K.UNKNOWN_LABEL
    assert result.diagnostic.suggestion == "did you mean 'rgba'?"


def test_unknown_label_without_close_match_has_no_suggestion():
    result = _resolve("#Color(zzzzzzzz: 1)")
    assert result.diagnostic.suggestion is None


def test_label_lookup_is_case_insensitive():
    assert _resolve('#Color(HeX: "#FFF")').color == RGBAColor(1.0, 1.0, 1.0, 1.0)


# ──────────────────────────────────────────────────────────────────────────────
# Ordering / short-circuit
# ──────────────────────────────────────────────────────────────────────────────
def test_arity_gate_precedes_value_checks():
    result = _resolve("#Color(rgb: 10, 20)")
    assert result.diagnostic.kind is K.UNEXPECTED_ARGUMENT_COUNT


def test_arity_gate_precedes_bad_values():
    result = _resolve("#Color(hsl: 999, x)")
    assert result.diagnostic.kind is K.UNEXPECTED_ARGUMENT_COUNT


def test_first_failure_wins():
    source = "#Color(rgba: 300, 999, x, 7)"
    result = _resolve(source)
    assert result.diagnostic.kind is K.VALUE_OUT_OF_RANGE
    assert _anchor_text(source, result) == "300"


def test_channels_are_checked_before_alpha():
    source = "#Color(hsla: 0, x, 0, 5)"
    result = _resolve(source)
    assert result.diagnostic.kind is K.INVALID_NUMERIC_LITERAL
    assert _anchor_text(source, result) == "x"


@pytest.mark.parametrize("digits", [20, 400, 5000])
def test_oversized_channel_literal_becomes_diagnostic(digits):
    wide = "9" * digits
    source = f"#Color(rgb: {wide}, 0, 0)"
    result = _resolve(source)
    assert result.diagnostic.kind is K.INVALID_NUMERIC_LITERAL
    assert result.diagnostic.message == "All #Color(rgb:) arguments must be numeric literals."
    assert _anchor_text(source, result) == wide
    assert result.color == FALLBACK_COLOR


def test_missing_label_reported_before_arity():
    result = _resolve("#Color(1)")
    assert result.diagnostic.kind is K.MISSING_LABEL


# ──────────────────────────────────────────────────────────────────────────────
# Boundary: hand-built arguments, no parser involved
# ──────────────────────────────────────────────────────────────────────────────
def test_resolve_arguments_with_hand_built_expressions():
    def lit(text: str, start: int, kind: ExprKind = ExprKind.INTEGER_LITERAL) -> Expression:
        return Expression(kind=kind, text=text, span=Span(start, start + len(text)))

    args = [
        LabeledArgument(lit("255", 0), label="rgba"),
        LabeledArgument(lit("0", 5)),
        LabeledArgument(lit("0", 8)),
        LabeledArgument(lit("0.25", 11, ExprKind.FLOAT_LITERAL)),
    ]
    result = resolve_arguments(args, name_span=Span(0, 0))
    assert result.ok
    assert result.color == RGBAColor(1.0, 0.0, 0.0, 0.25)


def test_resolve_arguments_empty_anchors_at_name():
    result = resolve_arguments([], name_span=Span(3, 8))
    assert result.diagnostic.kind is K.MISSING_ARGUMENT
    assert result.diagnostic.anchor == Span(3, 8)


def test_resolver_does_not_mutate_arguments():
    inv = parse_invocation("#Color(rgb: 300, 0, 0)")
    before = inv.arguments
    resolve(inv)
    resolve(inv)
    assert inv.arguments is before


# ──────────────────────────────────────────────────────────────────────────────
# Concurrency
# ──────────────────────────────────────────────────────────────────────────────
def test_concurrent_resolution_is_independent():
    sources = [f"#Color(rgb: {i}, {255 - i}, 0)" for i in range(256)] + ["#Color(rgb: 256, 0, 0)"] * 16
    invocations = [parse_invocation(s) for s in sources]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(resolve, invocations))

    for i, result in enumerate(results[:256]):
        assert result.ok
        assert result.color == RGBAColor(i / 255.0, (255 - i) / 255.0, 0.0, 1.0)
    assert all(r.diagnostic.kind is K.VALUE_OUT_OF_RANGE for r in results[256:])
