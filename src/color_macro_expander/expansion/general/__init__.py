"""
general.
=======

Shared general-purpose modules used across the expansion pipeline.

Exports:
- Source model types (Span, ExprKind, Expression, LabeledArgument, MacroInvocation).
"""

from .types import (
    Expression,
    ExprKind,
    LabeledArgument,
    MacroInvocation,
    Span,
    StringSegment,
)

__all__ = [
    "Expression",
    "ExprKind",
    "LabeledArgument",
    "MacroInvocation",
    "Span",
    "StringSegment",
]
