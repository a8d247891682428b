# src/color_macro_expander/expansion/general/syntax/parser.py

"""
parser.py
=========

Does: Tokenize `#Name(label: expr, expr, ...)` source text and classify each
      argument into one of the recognized shapes (integer/float literal,
      prefix operator, string literal with segments, anything else).
Returns: MacroInvocation with character spans pointing back into the source.
Used By: orchestrator.expand(), demo CLI, tests building invocations by hand.

Notes:
- String literal segments keep their raw source text; escapes are not
  processed. `\\( ... )` starts an interpolation segment and `\"\"\"` literals
  yield one text segment per content line.
- Prefixed integers (0x.., 0b.., 0o..) are still INTEGER_LITERAL here; the
  literal extractor decides what it accepts.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from color_macro_expander.expansion.general.types import (
    Expression,
    ExprKind,
    LabeledArgument,
    MacroInvocation,
    Span,
    StringSegment,
)

__all__ = ["MacroSyntaxError", "parse_invocation"]
__docformat__ = "google"

log = logging.getLogger(__name__)


class MacroSyntaxError(ValueError):
    """Raise when the invocation text cannot be tokenized or is not `#Name(...)`."""

    def __init__(self, message: str, position: int):
        super().__init__(f"{message} (at offset {position})")
        self.position = position


# ── Token patterns ───────────────────────────────────────────────────────────
_PREFIXED_INT_RE = re.compile(r"0x[0-9A-Fa-f_]+|0b[01_]+|0o[0-7_]+")
_DECIMAL_RE = re.compile(r"\d[\d_]*(?P<frac>\.\d[\d_]*)?(?P<exp>[eE][+-]?\d[\d_]*)?")
_IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_OPERATOR_RE = re.compile(r"[-+*/%=<>!&|^~?.]+")
_WS_RE = re.compile(r"\s+")

_OPEN = {"(": ")", "[": "]", "{": "}"}
_CLOSE = {")", "]", "}"}


@dataclass(frozen=True)
class _Token:
    kind: str  # int | float | string | ident | op | punct
    text: str
    start: int
    end: int
    segments: tuple[StringSegment, ...] = field(default=())


# ─────────────────────────────────────────────────────────────────────────────
# 1) String literals
# ─────────────────────────────────────────────────────────────────────────────
def _skip_interpolation(source: str, pos: int) -> int:
    """Return the offset just past the `)` closing an interpolation opened at pos."""
    depth = 0
    i = pos
    n = len(source)
    while i < n:
        ch = source[i]
        if ch == '"':
            # nested string inside the interpolation
            i += 1
            while i < n and source[i] != '"':
                i += 2 if source[i] == "\\" else 1
            if i >= n:
                break
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return i + 1
        i += 1
    raise MacroSyntaxError("Unterminated string interpolation", pos)


def _scan_string(source: str, start: int) -> _Token:
    multiline = source.startswith('"""', start)
    delimiter = '"""' if multiline else '"'
    i = start + len(delimiter)
    n = len(source)

    if multiline:
        if i < n and source[i] == "\r":
            i += 1
        if i >= n or source[i] != "\n":
            raise MacroSyntaxError("Multi-line string literal content must begin on a new line", start)
        i += 1

    segments: list[StringSegment] = []
    buf_start = i

    def flush(end: int) -> None:
        if end > buf_start:
            segments.append(StringSegment(source[buf_start:end]))

    while i < n:
        if source.startswith(delimiter, i):
            if multiline:
                # closing delimiter sits on its own line; drop its indentation
                line_start = source.rfind("\n", 0, i) + 1
                if source[line_start:i].strip():
                    flush(i)
            else:
                flush(i)
            end = i + len(delimiter)
            if not segments and not multiline:
                segments.append(StringSegment(""))
            return _Token("string", source[start:end], start, end, tuple(segments))

        ch = source[i]
        if ch == "\\" and i + 1 < n and source[i + 1] == "(":
            flush(i)
            close = _skip_interpolation(source, i + 1)
            segments.append(StringSegment(source[i:close], interpolation=True))
            i = close
            buf_start = i
        elif ch == "\\":
            i += 2
        elif ch == "\n":
            if not multiline:
                raise MacroSyntaxError("Unterminated string literal", start)
            flush(i + 1)
            i += 1
            buf_start = i
        else:
            i += 1

    raise MacroSyntaxError("Unterminated string literal", start)


# ─────────────────────────────────────────────────────────────────────────────
# 2) Tokenizer
# ─────────────────────────────────────────────────────────────────────────────
def _tokenize(source: str) -> list[_Token]:
    tokens: list[_Token] = []
    i = 0
    n = len(source)
    while i < n:
        m = _WS_RE.match(source, i)
        if m:
            i = m.end()
            continue

        if source[i] == '"':
            tok = _scan_string(source, i)
        else:
            tok = _scan_plain(source, i)
        tokens.append(tok)
        i = tok.end
    return tokens


def _scan_plain(source: str, i: int) -> _Token:
    m = _PREFIXED_INT_RE.match(source, i)
    if m:
        return _Token("int", m.group(), i, m.end())
    m = _DECIMAL_RE.match(source, i)
    if m:
        kind = "float" if (m.group("frac") or m.group("exp")) else "int"
        return _Token(kind, m.group(), i, m.end())
    m = _IDENT_RE.match(source, i)
    if m:
        return _Token("ident", m.group(), i, m.end())
    m = _OPERATOR_RE.match(source, i)
    if m:
        return _Token("op", m.group(), i, m.end())
    return _Token("punct", source[i], i, i + 1)


# ─────────────────────────────────────────────────────────────────────────────
# 3) Argument classification
# ─────────────────────────────────────────────────────────────────────────────
_LITERAL_KINDS = {
    "int": ExprKind.INTEGER_LITERAL,
    "float": ExprKind.FLOAT_LITERAL,
    "string": ExprKind.STRING_LITERAL,
}


def _classify(tokens: list[_Token], source: str) -> Expression:
    """Map a run of tokens to one recognized shape; unknown shapes become OTHER."""
    span = Span(tokens[0].start, tokens[-1].end)
    text = source[span.start:span.end]

    if len(tokens) == 1:
        tok = tokens[0]
        kind = _LITERAL_KINDS.get(tok.kind, ExprKind.OTHER)
        return Expression(kind=kind, text=text, span=span, segments=tok.segments)

    head, rest = tokens[0], tokens[1:]
    if head.kind == "op" and len(rest) == 1 and head.end == rest[0].start:
        operand = _classify(rest, source)
        return Expression(
            kind=ExprKind.PREFIX_OPERATOR,
            text=text,
            span=span,
            operator=head.text,
            operand=operand,
        )

    return Expression(kind=ExprKind.OTHER, text=text, span=span)


def _split_arguments(tokens: list[_Token], open_pos: int) -> tuple[list[list[_Token]], int]:
    """Split tokens after the opening paren on top-level commas.

    Returns the argument token runs and the index just past the closing paren.
    """
    args: list[list[_Token]] = []
    current: list[_Token] = []
    stack: list[str] = []
    i = 0
    while i < len(tokens):
        tok = tokens[i]
        if tok.kind == "punct" and tok.text in _OPEN:
            stack.append(_OPEN[tok.text])
        elif tok.kind == "punct" and tok.text in _CLOSE:
            if not stack:
                if tok.text != ")":
                    raise MacroSyntaxError(f"Unexpected '{tok.text}'", tok.start)
                if current:
                    args.append(current)
                elif args:
                    raise MacroSyntaxError("Expected expression after ','", tok.start)
                return args, i + 1
            if stack.pop() != tok.text:
                raise MacroSyntaxError(f"Mismatched '{tok.text}'", tok.start)
        elif tok.kind == "punct" and tok.text == "," and not stack:
            if not current:
                raise MacroSyntaxError("Expected expression before ','", tok.start)
            args.append(current)
            current = []
            i += 1
            continue
        current.append(tok)
        i += 1
    raise MacroSyntaxError("Expected ')' to close the argument list", open_pos)


def _to_argument(run: list[_Token], source: str) -> LabeledArgument:
    if len(run) >= 2 and run[0].kind == "ident" and run[1].kind == "punct" and run[1].text == ":":
        label = run[0]
        if len(run) == 2:
            raise MacroSyntaxError(f"Expected expression after '{label.text}:'", run[1].end)
        return LabeledArgument(
            expression=_classify(run[2:], source),
            label=label.text,
            label_span=Span(label.start, label.end),
        )
    return LabeledArgument(expression=_classify(run, source))


# ─────────────────────────────────────────────────────────────────────────────
# 4) Public entry point
# ─────────────────────────────────────────────────────────────────────────────
def parse_invocation(source: str) -> MacroInvocation:
    """Parse `#Name(args...)` into a MacroInvocation.

    Raises:
        MacroSyntaxError: When the text is not a single well-formed invocation.
    """
    tokens = _tokenize(source)
    if len(tokens) < 3 or tokens[0].text != "#" or tokens[1].kind != "ident":
        pos = tokens[0].start if tokens else 0
        raise MacroSyntaxError("Expected a macro invocation like '#Color(...)'", pos)

    name = tokens[1]
    if tokens[1].start != tokens[0].end:
        raise MacroSyntaxError("Macro name must follow '#' directly", tokens[1].start)
    if tokens[2].text != "(":
        raise MacroSyntaxError("Expected '(' after macro name", tokens[2].start)

    runs, consumed = _split_arguments(tokens[3:], tokens[2].start)
    trailing = tokens[3 + consumed:]
    if trailing:
        raise MacroSyntaxError("Unexpected text after invocation", trailing[0].start)

    arguments = tuple(_to_argument(run, source) for run in runs)
    log.debug("Parsed #%s with %d argument(s)", name.text, len(arguments))
    return MacroInvocation(
        name=name.text,
        name_span=Span(name.start, name.end),
        arguments=arguments,
        source=source,
    )
