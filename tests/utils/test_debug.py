"""Tests for the category-filtered debug logger."""

from __future__ import annotations

import pytest

from pyledtext.render import MAX_TEXT_LENGTH, ScrollingView, render_text
from pyledtext.utils import debug, debug_enabled, debug_log


@pytest.fixture
def categories(monkeypatch):
    monkeypatch.setattr(debug, "_CATEGORIES", None)

    def enable(value: str) -> None:
        monkeypatch.setenv(debug.ENV_VARIABLE, value)
        debug.reload_categories()

    return enable


def test_disabled_by_default(categories, monkeypatch, capsys) -> None:
    monkeypatch.delenv(debug.ENV_VARIABLE, raising=False)
    debug.reload_categories()

    assert not debug_enabled()
    debug_log("render", "hidden")
    assert capsys.readouterr().out == ""


def test_selected_categories_only(categories, capsys) -> None:
    categories("Render, scroll")

    assert debug_enabled("render")
    assert debug_enabled("SCROLL")
    assert not debug_enabled("font")
    debug_log("font", "hidden")
    debug_log("render", "width=%d", 5)
    assert capsys.readouterr().out == "[LEDTEXT][render] width=5\n"


def test_all_enables_everything(categories) -> None:
    categories("all")
    assert debug_enabled("anything")


def test_bad_format_arguments_are_appended(categories, capsys) -> None:
    categories("render")
    debug_log("render", "value=%d", "x")
    assert capsys.readouterr().out == "[LEDTEXT][render] value=%d ('x',)\n"


def test_renderer_logs_substitution_and_fallback(categories, capsys) -> None:
    categories("render,font")

    render_text("x" * (MAX_TEXT_LENGTH + 1))
    render_text("中")
    out = capsys.readouterr().out

    assert f"[LEDTEXT][render] text_too_long length={MAX_TEXT_LENGTH + 1} limit={MAX_TEXT_LENGTH}" in out
    assert "[LEDTEXT][font] fallback char=U+4E2D font=proportional" in out


def test_scroll_logs_offset(categories, capsys) -> None:
    categories("scroll")
    view = ScrollingView(render_text("Hello"))
    view.scroll_by_one_pixel()
    assert "[LEDTEXT][scroll] offset=1 width=29" in capsys.readouterr().out
