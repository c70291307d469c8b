"""Baseline tests ensuring the package layout loads correctly."""

import pyledtext


def test_package_exports() -> None:
    for name in ("font", "render", "ui", "utils", "TextRenderer", "ScrollingView", "render_text"):
        assert hasattr(pyledtext, name), f"missing export: {name}"


def test_render_exports() -> None:
    from pyledtext import render

    for name in ("RenderedMatrix", "WidthPolicy", "Rotation", "ViewMode", "create_renderer"):
        assert hasattr(render, name), f"render missing symbol: {name}"
