# color_macro_expander/expansion/general/types.py
from __future__ import annotations

"""
types.py.

Does: Define the read-only source model handed to the resolver: spans,
      recognized argument shapes, labeled arguments and whole invocations.
Used by: syntax parser, literal extraction, resolver, diagnostics rendering.
"""

from dataclasses import dataclass
from enum import Enum


class ExprKind(str, Enum):
    """Closed set of argument shapes the resolver knows how to read."""

    INTEGER_LITERAL = "integer_literal"
    FLOAT_LITERAL = "float_literal"
    PREFIX_OPERATOR = "prefix_operator"
    STRING_LITERAL = "string_literal"
    OTHER = "other"


@dataclass(frozen=True)
class Span:
    """Half-open [start, end) character offsets into the invocation source."""

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class StringSegment:
    """One piece of a string literal: raw text, or an interpolation `\\(...)`."""

    text: str
    interpolation: bool = False


@dataclass(frozen=True)
class Expression:
    kind: ExprKind
    text: str
    span: Span
    operator: str | None = None
    operand: Expression | None = None
    segments: tuple[StringSegment, ...] = ()

    @property
    def is_number_literal(self) -> bool:
        return self.kind in (ExprKind.INTEGER_LITERAL, ExprKind.FLOAT_LITERAL)


@dataclass(frozen=True)
class LabeledArgument:
    expression: Expression
    label: str | None = None
    label_span: Span | None = None


@dataclass(frozen=True)
class MacroInvocation:
    """A parsed `#Name(...)` call. Never mutated by the resolver."""

    name: str
    name_span: Span
    arguments: tuple[LabeledArgument, ...]
    source: str = ""


__all__ = [
    "ExprKind",
    "Span",
    "StringSegment",
    "Expression",
    "LabeledArgument",
    "MacroInvocation",
]

__docformat__ = "google"
