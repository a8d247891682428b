"""
fuzzy
=====

Does: Fuzzy helpers for user-facing hints.
Returns: suggest_label().
"""

from .label_match import SUGGESTION_CUTOFF, suggest_label

__all__ = ["SUGGESTION_CUTOFF", "suggest_label"]
