# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: High-level orchestration: parse a `#Color(...)` invocation, resolve it,
      and emit target source for the chosen surface (or the fallback plus
      one diagnostic).
Returns:
  - expand(source, surface) -> ExpansionResult
  - expand_all(sources, surface) -> list[ExpansionResult]  (never aborts the batch)
Used by: demo CLI, host integrations, tests.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from color_macro_expander.expansion.color import FALLBACK_COLOR, Diagnostic, RGBAColor
from color_macro_expander.expansion.color.emit import (
    emit_expression,
    emit_fallback,
    render_diagnostic,
)
from color_macro_expander.expansion.color.logic import resolve
from color_macro_expander.expansion.general.syntax import MacroSyntaxError, parse_invocation

logger = logging.getLogger(__name__)

__all__ = [
    "ExpansionResult",
    "expand",
    "expand_all",
]


@dataclass(frozen=True)
class ExpansionResult:
    """
    source: the invocation text as given.
    expression: emitted target source (the fallback expression on failure).
    color: resolved color, FALLBACK_COLOR on failure.
    diagnostic: set when resolution failed.
    error: set when the invocation could not even be parsed (batch mode only).
    """

    source: str
    expression: str
    color: RGBAColor
    diagnostic: Diagnostic | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.diagnostic is None and self.error is None

    def render(self) -> str:
        if self.diagnostic is not None:
            return render_diagnostic(self.diagnostic, self.source)
        if self.error is not None:
            return f"{self.source}\nerror: {self.error}"
        return self.expression

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "source": self.source,
            "expression": self.expression,
            "rgba": list(self.color.as_tuple()),
            "ok": self.ok,
        }
        if self.diagnostic is not None:
            out["diagnostic"] = {
                "id": self.diagnostic.diagnostic_id,
                "kind": self.diagnostic.kind.value,
                "message": self.diagnostic.message,
                "severity": self.diagnostic.severity,
                "anchor": [self.diagnostic.anchor.start, self.diagnostic.anchor.end],
                "suggestion": self.diagnostic.suggestion,
            }
        if self.error is not None:
            out["error"] = self.error
        return out


def expand(source: str, *, surface: str | None = None) -> ExpansionResult:
    """
    Expand one invocation.

    Raises:
        MacroSyntaxError: the text is not a well-formed `#Name(...)` invocation.
        UnknownSurfaceError: no template for `surface`.
    """
    invocation = parse_invocation(source)
    result = resolve(invocation)
    if result.ok:
        expression = emit_expression(result.color, surface)
    else:
        expression = emit_fallback(surface)
    return ExpansionResult(
        source=source,
        expression=expression,
        color=result.color,
        diagnostic=result.diagnostic,
    )


def expand_all(sources: Iterable[str], *, surface: str | None = None) -> list[ExpansionResult]:
    """Expand every invocation; a malformed one is reported, never raised."""
    results: list[ExpansionResult] = []
    for source in sources:
        try:
            results.append(expand(source, surface=surface))
        except MacroSyntaxError as e:
            logger.warning("Skipping malformed invocation %r: %s", source, e)
            results.append(
                ExpansionResult(
                    source=source,
                    expression=emit_fallback(surface),
                    color=FALLBACK_COLOR,
                    error=str(e),
                )
            )
    failed = sum(1 for r in results if not r.ok)
    logger.info("Expanded %d invocation(s), %d failed", len(results), failed)
    return results
