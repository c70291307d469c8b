"""Text rendering and display window helpers."""

from __future__ import annotations

from .palette import BLACK, GREEN, WHITE, RGBColor, validate_color
from .renderer import (
    MATRIX_HEIGHT,
    MAX_TEXT_LENGTH,
    TOO_LONG_TEXT,
    RenderedMatrix,
    RendererConfig,
    TextRenderer,
    WidthPolicy,
    create_renderer,
    render_text,
)
from .view import DEFAULT_PHYSICAL_WIDTH, Rotation, ScrollingView, ViewMode

__all__ = [
    "BLACK",
    "GREEN",
    "WHITE",
    "RGBColor",
    "validate_color",
    "MATRIX_HEIGHT",
    "MAX_TEXT_LENGTH",
    "TOO_LONG_TEXT",
    "RenderedMatrix",
    "RendererConfig",
    "TextRenderer",
    "WidthPolicy",
    "create_renderer",
    "render_text",
    "DEFAULT_PHYSICAL_WIDTH",
    "Rotation",
    "ScrollingView",
    "ViewMode",
]
