"""Glyph records and the font provider interface."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Protocol

CELL_HEIGHT = 8
BLANK_CODE_POINT = 0x20


@dataclass(frozen=True)
class Glyph:
    """Bitmap for one character, stored as LSB-first vertical columns."""

    code_point: int
    width: int
    height: int
    x_offset: int
    y_offset: int
    x_advance: int
    pixels: tuple[int, ...]

    def column(self, index: int) -> int:
        return self.pixels[index]

    def is_set(self, column: int, row: int) -> bool:
        """Return True when ``row`` of ``column`` is lit (glyph-local coordinates)."""

        if not 0 <= column < self.width or not 0 <= row < self.height:
            return False
        return bool(self.pixels[column] & (1 << row))


class FontProvider(Protocol):
    """Anything the renderer can pull glyphs from."""

    name: str
    cell_width: int
    cell_height: int

    def glyph_for(self, code_point: int) -> Glyph:
        ...


def validate_glyph(glyph: Glyph, cell_height: int = CELL_HEIGHT) -> None:
    if len(glyph.pixels) != glyph.width:
        raise ValueError(f"glyph U+{glyph.code_point:04X} has {len(glyph.pixels)} columns, expected {glyph.width}")
    if glyph.height > cell_height:
        raise ValueError(f"glyph U+{glyph.code_point:04X} exceeds the {cell_height}-row cell")
    if glyph.y_offset < 0 or glyph.height + glyph.y_offset > cell_height:
        raise ValueError(f"glyph U+{glyph.code_point:04X} overflows the cell vertically")
    mask = (1 << glyph.height) - 1
    for value in glyph.pixels:
        if value & ~mask:
            raise ValueError(f"glyph U+{glyph.code_point:04X} uses bits above its height")


class GlyphTable:
    """Immutable code point to glyph mapping with a blank fallback.

    Glyphs live in a tuple; a dict maps each code point to its slot.
    """

    def __init__(
        self,
        name: str,
        glyphs: Iterable[Glyph],
        *,
        blank_code_point: int = BLANK_CODE_POINT,
        cell_width: int = 8,
        cell_height: int = CELL_HEIGHT,
    ) -> None:
        self.name = name
        self.cell_width = cell_width
        self.cell_height = cell_height
        self._glyphs: tuple[Glyph, ...] = tuple(glyphs)
        index: dict[int, int] = {}
        for slot, glyph in enumerate(self._glyphs):
            validate_glyph(glyph, cell_height)
            if glyph.code_point in index:
                raise ValueError(f"duplicate glyph for U+{glyph.code_point:04X}")
            index[glyph.code_point] = slot
        if blank_code_point not in index:
            raise ValueError(f"font {name!r} has no blank glyph U+{blank_code_point:04X}")
        self._index = index
        self._blank = self._glyphs[index[blank_code_point]]

    @property
    def blank(self) -> Glyph:
        return self._blank

    def lookup(self, code_point: int) -> Glyph:
        """Return the glyph for ``code_point``, or the blank glyph when it is not defined."""

        slot = self._index.get(code_point)
        if slot is None:
            return self._blank
        return self._glyphs[slot]

    glyph_for = lookup

    def code_points(self) -> Iterator[int]:
        return iter(self._index)

    def __contains__(self, code_point: object) -> bool:
        return code_point in self._index

    def __len__(self) -> int:
        return len(self._glyphs)

    def __repr__(self) -> str:
        return f"GlyphTable(name={self.name!r}, glyphs={len(self._glyphs)})"
