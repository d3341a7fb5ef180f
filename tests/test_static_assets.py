"""Tests tying the accordion script to the markup it enhances."""

from __future__ import annotations

from pathlib import Path

import pytest

pytestmark = pytest.mark.unit


def _app_js() -> str:
    repo_root = Path(__file__).resolve().parents[1]
    return (repo_root / "core" / "static" / "core" / "app.js").read_text(encoding="utf-8")


def test_accordion_script_reads_markup_configuration() -> None:
    """The script binds every `[data-accordion]` root and reads its single/collapsible flags."""

    script = _app_js()
    assert 'querySelectorAll("[data-accordion]")' in script
    assert 'getAttribute("data-accordion") === "single"' in script
    assert 'getAttribute("data-collapsible") === "true"' in script


def test_accordion_script_closes_siblings_when_one_opens() -> None:
    """Single-select mode closes every other open item on toggle."""

    script = _app_js()
    toggle = script[script.index('addEventListener("toggle"') :]
    assert "if (!single || !item.open)" in toggle
    assert "other !== item && other.open" in toggle
    assert "other.open = false;" in toggle
