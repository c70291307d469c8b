"""Proportional text rendering and scrolling for 8-row LED matrices.

``font`` holds the glyph tables, ``render`` turns text into a pixel matrix
and exposes the scrolling display window, and ``ui`` provides a pygame
preview that stands in for real LED hardware.
"""

from __future__ import annotations

from . import font, render, ui, utils
from .render import RenderedMatrix, ScrollingView, TextRenderer, WidthPolicy, render_text

__all__: list[str] = [
    "font",
    "render",
    "ui",
    "utils",
    "RenderedMatrix",
    "ScrollingView",
    "TextRenderer",
    "WidthPolicy",
    "render_text",
]
