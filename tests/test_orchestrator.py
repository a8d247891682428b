# tests/test_orchestrator.py
"""End-to-end expansion: invocation text in, target source or rendered diagnostic out."""

from __future__ import annotations

import json

import pytest

from color_macro_expander.expansion.color import FALLBACK_COLOR, DiagnosticKind
from color_macro_expander.expansion.general.syntax import MacroSyntaxError
from color_macro_expander.expansion.general.utils import clear_config_cache
from color_macro_expander.expansion.orchestrator import expand, expand_all


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("COLOR_MACRO_DATA_DIR", "DATA_DIR", "COLOR_MACRO_SURFACE"):
        monkeypatch.delenv(var, raising=False)
    clear_config_cache()


@pytest.mark.parametrize(
    "source,expression",
    [
        ('#Color(hex: "#FFF")', "SwiftUI.Color(red: 1.0, green: 1.0, blue: 1.0, opacity: 1.0)"),
        ('#Color(hex: "#0F8C")', "SwiftUI.Color(red: 0.0, green: 1.0, blue: 0.5333333333333333, opacity: 0.8)"),
        ('#Color(hex: "#336699")', "SwiftUI.Color(red: 0.2, green: 0.4, blue: 0.6, opacity: 1.0)"),
        (
            '#Color(hex: "#FF990080")',
            "SwiftUI.Color(red: 1.0, green: 0.6, blue: 0.0, opacity: 0.5019607843137255)",
        ),
        ('#Color(hex: "0xFF9900")', "SwiftUI.Color(red: 1.0, green: 0.6, blue: 0.0, opacity: 1.0)"),
        (
            "#Color(rgb: 154, 234, 98)",
            "SwiftUI.Color(red: 0.6039215686274509, green: 0.9176470588235294, "
            "blue: 0.3843137254901961, opacity: 1.0)",
        ),
        (
            "#Color(rgba: 154, 234, 98, 0.5)",
            "SwiftUI.Color(red: 0.6039215686274509, green: 0.9176470588235294, "
            "blue: 0.3843137254901961, opacity: 0.5)",
        ),
        (
            "#Color(hsl: 95, 76, 65)",
            "SwiftUI.Color(red: 0.6056666666666666, green: 0.9159999999999999, "
            "blue: 0.38400000000000006, opacity: 1.0)",
        ),
        (
            "#Color(hsla: 32, 100, 50, 0.8)",
            "SwiftUI.Color(red: 1.0, green: 0.5333333333333333, blue: 0.0, opacity: 0.8)",
        ),
        (
            "#Color(hsb: 200, 60, 80)",
            "SwiftUI.Color(red: 0.32000000000000006, green: 0.6399999999999999, blue: 0.8, opacity: 1.0)",
        ),
        (
            "#Color(hsba: 200, 60, 80, 0.5)",
            "SwiftUI.Color(red: 0.32000000000000006, green: 0.6399999999999999, blue: 0.8, opacity: 0.5)",
        ),
    ],
)
def test_expand_emits_swiftui_source(source, expression):
    result = expand(source)
    assert result.ok
    assert result.expression == expression
    assert result.render() == expression


def test_expand_other_surface():
    result = expand('#Color(hex: "#336699")', surface="css")
    assert result.expression == "#336699ff"


@pytest.mark.parametrize(
    "source,rendered",
    [
        (
            '#Color(hex: "#GGGGGG")',
            '#Color(hex: "#GGGGGG")\n'
            "            ┬────────\n"
            "            ╰─ 🛑 Character 'G' is not valid in a hexadecimal color literal.",
        ),
        (
            "#Color(rgb: 300, 0, 0)",
            "#Color(rgb: 300, 0, 0)\n"
            "            ┬──\n"
            "            ╰─ 🛑 RGB components must be between 0 and 255, but found 300.0.",
        ),
        (
            "#Color(rgba: 0, 0, 0, 2)",
            "#Color(rgba: 0, 0, 0, 2)\n"
            "                      ┬\n"
            "                      ╰─ 🛑 Alpha must be between 0 and 1, but found 2.0.",
        ),
    ],
)
def test_expand_failure_renders_diagnostic_and_falls_back(source, rendered):
    result = expand(source)
    assert not result.ok
    assert result.expression == "SwiftUI.Color.clear"
    assert result.color == FALLBACK_COLOR
    assert result.render() == rendered


def test_expand_raises_on_malformed_source():
    with pytest.raises(MacroSyntaxError):
        expand("Color(hex: 1)")


def test_expand_all_continues_after_failures():
    results = expand_all(
        [
            '#Color(hex: "#FFF")',
            "Color(oops",
            "#Color(rgba: 0, 0, 0, 2)",
            '#Color(hex: "#12345")',
            "#Color(hsb: 0, 0, 100)",
        ]
    )
    assert [r.ok for r in results] == [True, False, False, False, True]
    assert results[1].error is not None
    assert results[1].diagnostic is None
    assert results[1].expression == "SwiftUI.Color.clear"
    assert "error:" in results[1].render()
    assert results[2].diagnostic.kind is DiagnosticKind.VALUE_OUT_OF_RANGE
    assert results[3].diagnostic.kind is DiagnosticKind.HEX_UNSUPPORTED_LENGTH
    assert results[4].color.as_tuple() == (1.0, 1.0, 1.0, 1.0)


def test_expand_all_survives_oversized_literals():
    results = expand_all(
        [
            '#Color(hex: "#FFF")',
            "#Color(rgb: " + "9" * 400 + ", 0, 0)",
            "#Color(hsba: 0, 0, " + "1" * 5000 + ", 1)",
            "#Color(rgb: 0, 0, 0)",
        ]
    )
    assert [r.ok for r in results] == [True, False, False, True]
    for bad in results[1:3]:
        assert bad.diagnostic.kind is DiagnosticKind.INVALID_NUMERIC_LITERAL
        assert bad.expression == "SwiftUI.Color.clear"


def test_to_dict_is_json_serializable():
    ok, bad = expand_all(['#Color(hex: "#FFF")', "#Color(rbga: 1, 2, 3, 0.5)"])
    payload = json.loads(json.dumps([ok.to_dict(), bad.to_dict()]))
    assert payload[0]["ok"] is True
    assert payload[0]["rgba"] == [1.0, 1.0, 1.0, 1.0]
    assert payload[1]["diagnostic"]["kind"] == "unknown_label"
    assert payload[1]["diagnostic"]["id"] == "ColorMacros.unknown_label"
    assert payload[1]["diagnostic"]["suggestion"] == "did you mean 'rgba'?"
    assert payload[1]["rgba"] == [0.0, 0.0, 0.0, 0.0]
