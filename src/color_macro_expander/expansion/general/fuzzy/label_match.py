# src/color_macro_expander/expansion/general/fuzzy/label_match.py
from __future__ import annotations

"""
label_match.py

Does: Pick the closest known label for a misspelled one (e.g. 'rbga' -> 'rgba').
Returns: suggest_label() -> best label or None.
Used by: Unknown-label diagnostics in the color resolver.
"""

import logging
from collections.abc import Iterable

from rapidfuzz import fuzz, process

__all__ = ["SUGGESTION_CUTOFF", "suggest_label"]

__docformat__ = "google"

log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
SUGGESTION_CUTOFF = 60


def suggest_label(
    label: str,
    known: Iterable[str],
    *,
    cutoff: float = SUGGESTION_CUTOFF,
) -> str | None:
    """
    Does: Fuzzy-match `label` (case-insensitive) against `known`.
    Returns: The best candidate scoring at least `cutoff`, or None. Exact
             matches are not suggestions and return None.
    """
    query = (label or "").strip().lower()
    choices = list(known)
    if not query or not choices or query in choices:
        return None

    hit = process.extractOne(query, choices, scorer=fuzz.ratio, score_cutoff=cutoff)
    if hit is None:
        log.debug("No label suggestion for %r", label)
        return None
    best, score, _ = hit
    log.debug("Label suggestion %r -> %r (score=%.1f)", label, best, score)
    return best
