"""
render.py

Does: Render a Diagnostic under the source line it points at:

    #Color(rgb: 300, 0, 0)
                ┬──
                ╰─ 🛑 RGB components must be between 0 and 255, but found 300.0.

Used by: demo CLI and host integrations that print diagnostics as text.
"""

from __future__ import annotations

from ..diagnostics import Diagnostic

__all__ = ["render_diagnostic"]

_SEVERITY_ICONS = {"error": "🛑", "warning": "⚠️", "note": "ℹ️"}


def render_diagnostic(diagnostic: Diagnostic, source: str) -> str:
    start = min(max(diagnostic.anchor.start, 0), len(source))
    line_start = source.rfind("\n", 0, start) + 1
    line_end = source.find("\n", start)
    if line_end == -1:
        line_end = len(source)

    column = start - line_start
    width = max(1, min(diagnostic.anchor.length, line_end - start))
    pad = " " * column
    icon = _SEVERITY_ICONS.get(diagnostic.severity, "🛑")

    lines = [
        source[line_start:line_end],
        pad + "┬" + "─" * (width - 1),
        f"{pad}╰─ {icon} {diagnostic.message}",
    ]
    if diagnostic.suggestion:
        lines.append(f"{pad}   note: {diagnostic.suggestion}")
    return "\n".join(lines)
