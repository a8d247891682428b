# src/color_macro_expander/expansion/color/diagnostics.py

"""
diagnostics.py
==============

Does: Define the closed error taxonomy of the color resolver. Each kind is an
      exception (raised at the point of failure) that knows its user-facing
      message and the source span to underline; the resolver turns the first
      one raised into a Diagnostic.
Returns: DiagnosticKind, Diagnostic, ColorMacroError and its subclasses,
         format_value().
Used By: literal extraction, hex decoding, resolver, diagnostic rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from color_macro_expander.expansion.general.types import Span

from .constants import MACRO_NAME, SUPPORTED_LABELS_TEXT

__all__ = [
    "DiagnosticKind",
    "Diagnostic",
    "ColorMacroError",
    "MissingArgumentError",
    "MissingLabelError",
    "UnknownLabelError",
    "UnexpectedArgumentCountError",
    "HexNonStringLiteralError",
    "HexInterpolatedStringError",
    "HexEmptyError",
    "HexUnsupportedLengthError",
    "HexInvalidCharacterError",
    "InvalidNumericLiteralError",
    "ValueOutOfRangeError",
    "format_value",
]
__docformat__ = "google"


class DiagnosticKind(str, Enum):
    MISSING_ARGUMENT = "missing_argument"
    MISSING_LABEL = "missing_label"
    UNKNOWN_LABEL = "unknown_label"
    UNEXPECTED_ARGUMENT_COUNT = "unexpected_argument_count"
    HEX_NON_STRING_LITERAL = "hex_non_string_literal"
    HEX_INTERPOLATED_STRING = "hex_interpolated_string"
    HEX_EMPTY = "hex_empty"
    HEX_UNSUPPORTED_LENGTH = "hex_unsupported_length"
    HEX_INVALID_CHARACTER = "hex_invalid_character"
    INVALID_NUMERIC_LITERAL = "invalid_numeric_literal"
    VALUE_OUT_OF_RANGE = "value_out_of_range"


def format_value(value: float) -> str:
    """Does: Render a number so it always shows a decimal point (300 -> '300.0')."""
    text = repr(float(value))
    if text.lstrip("-").isdigit():
        text += ".0"
    return text


@dataclass(frozen=True)
class Diagnostic:
    """One user-facing error for one failed resolution."""

    kind: DiagnosticKind
    message: str
    anchor: Span
    suggestion: str | None = None
    severity: str = "error"

    @property
    def diagnostic_id(self) -> str:
        return f"ColorMacros.{self.kind.value}"


# ─────────────────────────────────────────────────────────────────────────────
# Exception family
# ─────────────────────────────────────────────────────────────────────────────
class ColorMacroError(Exception):
    """Base for every resolver failure. `anchor` may be attached after raising."""

    kind: DiagnosticKind

    def __init__(self, anchor: Span | None = None, *, suggestion: str | None = None):
        self.anchor = anchor
        self.suggestion = suggestion
        super().__init__(self.message)

    @property
    def message(self) -> str:
        raise NotImplementedError

    def to_diagnostic(self, default_anchor: Span | None = None) -> Diagnostic:
        anchor = self.anchor or default_anchor
        if anchor is None:
            raise ValueError(f"{type(self).__name__} has no anchor to report")
        return Diagnostic(
            kind=self.kind,
            message=self.message,
            anchor=anchor,
            suggestion=self.suggestion,
        )


class MissingArgumentError(ColorMacroError):
    kind = DiagnosticKind.MISSING_ARGUMENT

    @property
    def message(self) -> str:
        return f"#{MACRO_NAME} expects at least one labeled argument."


class MissingLabelError(ColorMacroError):
    kind = DiagnosticKind.MISSING_LABEL

    @property
    def message(self) -> str:
        return (
            f"Label the first argument to #{MACRO_NAME}. "
            f"Supported labels: {SUPPORTED_LABELS_TEXT}."
        )


class UnknownLabelError(ColorMacroError):
    kind = DiagnosticKind.UNKNOWN_LABEL

    def __init__(self, label: str, anchor: Span | None = None, *, suggestion: str | None = None):
        self.label = label
        super().__init__(anchor, suggestion=suggestion)

    @property
    def message(self) -> str:
        return (
            f"Unknown #{MACRO_NAME} label '{self.label}'. "
            f"Supported labels: {SUPPORTED_LABELS_TEXT}."
        )


class UnexpectedArgumentCountError(ColorMacroError):
    kind = DiagnosticKind.UNEXPECTED_ARGUMENT_COUNT

    def __init__(self, label: str, expected: int, actual: int, anchor: Span | None = None):
        self.label = label
        self.expected = expected
        self.actual = actual
        super().__init__(anchor)

    @property
    def message(self) -> str:
        return f"{self.label} expects {self.expected} argument(s), but received {self.actual}."


class HexNonStringLiteralError(ColorMacroError):
    kind = DiagnosticKind.HEX_NON_STRING_LITERAL

    @property
    def message(self) -> str:
        return "Hex values must be specified as string literals."


class HexInterpolatedStringError(ColorMacroError):
    kind = DiagnosticKind.HEX_INTERPOLATED_STRING

    @property
    def message(self) -> str:
        return "Hex strings cannot contain interpolation or multiple segments."


class HexEmptyError(ColorMacroError):
    kind = DiagnosticKind.HEX_EMPTY

    @property
    def message(self) -> str:
        return "Provide at least one hexadecimal digit."


class HexUnsupportedLengthError(ColorMacroError):
    kind = DiagnosticKind.HEX_UNSUPPORTED_LENGTH

    def __init__(self, length: int, anchor: Span | None = None):
        self.length = length
        super().__init__(anchor)

    @property
    def message(self) -> str:
        return f"Hex literals must contain 3, 4, 6, or 8 digits, but found {self.length}."


class HexInvalidCharacterError(ColorMacroError):
    kind = DiagnosticKind.HEX_INVALID_CHARACTER

    def __init__(self, character: str, anchor: Span | None = None):
        self.character = character
        super().__init__(anchor)

    @property
    def message(self) -> str:
        return f"Character '{self.character}' is not valid in a hexadecimal color literal."


class InvalidNumericLiteralError(ColorMacroError):
    kind = DiagnosticKind.INVALID_NUMERIC_LITERAL

    def __init__(self, label: str, anchor: Span | None = None):
        self.label = label
        super().__init__(anchor)

    @property
    def message(self) -> str:
        return f"All {self.label} arguments must be numeric literals."


class ValueOutOfRangeError(ColorMacroError):
    """`constraint` is "channel" (0-255 integers) or "alpha" (0-1)."""

    kind = DiagnosticKind.VALUE_OUT_OF_RANGE

    def __init__(
        self,
        description: str,
        value: float,
        anchor: Span | None = None,
        *,
        constraint: str = "channel",
    ):
        self.description = description
        self.value = float(value)
        self.constraint = constraint
        super().__init__(anchor)

    @property
    def message(self) -> str:
        return f"{self.description}, but found {format_value(self.value)}."
