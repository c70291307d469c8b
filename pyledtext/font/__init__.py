"""Glyph tables for LED matrix text rendering."""

from __future__ import annotations

from .glyph import BLANK_CODE_POINT, CELL_HEIGHT, FontProvider, Glyph, GlyphTable
from .monospace import MONOSPACE_FONT
from .proportional import PROPORTIONAL_FONT

FONTS: dict[str, GlyphTable] = {
    PROPORTIONAL_FONT.name: PROPORTIONAL_FONT,
    MONOSPACE_FONT.name: MONOSPACE_FONT,
}


def get_font(name: str) -> GlyphTable:
    try:
        return FONTS[name.lower()]
    except KeyError:
        raise ValueError(f"unknown font {name!r}; choose from {', '.join(sorted(FONTS))}") from None


__all__ = [
    "BLANK_CODE_POINT",
    "CELL_HEIGHT",
    "FONTS",
    "FontProvider",
    "Glyph",
    "GlyphTable",
    "MONOSPACE_FONT",
    "PROPORTIONAL_FONT",
    "get_font",
]
