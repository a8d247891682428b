"""
syntax
======

Does: Turn the source text of one macro invocation into the read-only
      source model consumed by the resolver.
Returns: parse_invocation() and MacroSyntaxError.
Used by: orchestrator, demo CLI, tests.
"""

from __future__ import annotations

from .parser import MacroSyntaxError, parse_invocation

__all__ = [
    "MacroSyntaxError",
    "parse_invocation",
]

__docformat__ = "google"
