# tests/test_general_fuzzy.py
"""Tests for the fuzzy label suggestion helper."""

from __future__ import annotations

import pytest

from color_macro_expander.expansion.color.constants import SUPPORTED_LABELS
from color_macro_expander.expansion.general.fuzzy import suggest_label


@pytest.mark.parametrize(
    "label,expected",
    [
        ("rbga", "rgba"),
        ("RBGA", "rgba"),
        ("hexx", "hex"),
        ("hsbaa", "hsba"),
    ],
)
def test_suggest_close_labels(label, expected):
    assert suggest_label(label, SUPPORTED_LABELS) == expected


@pytest.mark.parametrize("label", ["", "   ", "zzzzzzzz", "rgba", "HEX"])
def test_no_suggestion(label):
    assert suggest_label(label, SUPPORTED_LABELS) is None


def test_cutoff_is_respected():
    assert suggest_label("hexx", SUPPORTED_LABELS, cutoff=99) is None


def test_empty_candidates():
    assert suggest_label("rgb", []) is None
