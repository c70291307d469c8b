"""Tests for glyph tables and the proportional font."""

from __future__ import annotations

import pytest

from pyledtext.font import BLANK_CODE_POINT, MONOSPACE_FONT, PROPORTIONAL_FONT, Glyph, GlyphTable, get_font


def _blank() -> Glyph:
    return Glyph(BLANK_CODE_POINT, 3, 1, -1, 7, 4, (0, 0, 0))


def test_every_glyph_fits_the_cell() -> None:
    for code_point in PROPORTIONAL_FONT.code_points():
        glyph = PROPORTIONAL_FONT.lookup(code_point)
        assert glyph.code_point == code_point
        assert len(glyph.pixels) == glyph.width
        assert glyph.height + glyph.y_offset <= 8
        assert all(value < (1 << glyph.height) for value in glyph.pixels)


def test_capital_a_glyph() -> None:
    glyph = PROPORTIONAL_FONT.lookup(ord("A"))

    assert (glyph.width, glyph.height, glyph.x_offset, glyph.y_offset, glyph.x_advance) == (5, 7, 1, 0, 7)
    assert glyph.pixels == (0x7E, 0x11, 0x11, 0x11, 0x7E)
    assert glyph.is_set(0, 1)
    assert not glyph.is_set(0, 0)
    assert not glyph.is_set(5, 1)


@pytest.mark.parametrize("char", ["é", "Œ", "ž", "–", "—", "…", "€", "™", "‰", " "])
def test_extended_characters_are_defined(char: str) -> None:
    assert ord(char) in PROPORTIONAL_FONT
    assert PROPORTIONAL_FONT.lookup(ord(char)).code_point == ord(char)


@pytest.mark.parametrize("code_point", [0x00A4, 0x0100, 0x4E2D, 0xFFFF, 0x1F600, -1])
def test_missing_code_point_falls_back_to_blank(code_point: int) -> None:
    assert code_point not in PROPORTIONAL_FONT
    assert PROPORTIONAL_FONT.lookup(code_point) is PROPORTIONAL_FONT.blank
    assert PROPORTIONAL_FONT.glyph_for(code_point).code_point == BLANK_CODE_POINT


def test_blank_glyph_is_unlit() -> None:
    blank = PROPORTIONAL_FONT.blank
    assert blank.width == 3
    assert blank.x_advance == 4
    assert not any(blank.pixels)


def test_table_rejects_missing_blank() -> None:
    with pytest.raises(ValueError, match="blank"):
        GlyphTable("broken", [Glyph(0x41, 1, 1, 0, 0, 2, (1,))])


def test_table_rejects_duplicate_code_points() -> None:
    with pytest.raises(ValueError, match="duplicate"):
        GlyphTable("broken", [_blank(), _blank()])


@pytest.mark.parametrize(
    "glyph",
    [
        Glyph(0x41, 2, 7, 0, 0, 3, (0x7F,)),
        Glyph(0x41, 1, 3, 0, 0, 2, (0x08,)),
        Glyph(0x41, 1, 7, 0, 2, 2, (0x01,)),
        Glyph(0x41, 1, 9, 0, 0, 2, (0x01,)),
    ],
)
def test_table_rejects_malformed_glyphs(glyph: Glyph) -> None:
    with pytest.raises(ValueError):
        GlyphTable("broken", [_blank(), glyph])


def test_get_font_by_name() -> None:
    assert get_font("proportional") is PROPORTIONAL_FONT
    assert get_font("Monospace") is MONOSPACE_FONT
    with pytest.raises(ValueError, match="unknown font"):
        get_font("gothic")
