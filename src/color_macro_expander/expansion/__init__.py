# color_macro_expander/expansion/__init__.py

"""
expansion.
=========

Does: Group the color-literal resolver (color/*) and the shared plumbing
      it sits on (general/*: source model, parser, config, logging).
Returns: Nothing at import time; callers import from the subpackages or
         from `orchestrator`.
Used by: demo CLI, host integrations, tests.
"""

__all__: list[str] = []
__docformat__ = "google"
