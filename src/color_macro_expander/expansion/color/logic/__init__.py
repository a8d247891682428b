"""
logic
=====

Does: Variant resolution: label/arity gate and per-variant dispatch.
Returns: ResolutionResult, resolve(), resolve_arguments().
"""

from .resolver import ResolutionResult, resolve, resolve_arguments

__all__ = ["ResolutionResult", "resolve", "resolve_arguments"]
