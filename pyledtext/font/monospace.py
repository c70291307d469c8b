"""Fixed-width 5x7 font in a 5x8 cell.

Every glyph is packed into a 40-bit integer, first column in the most
significant byte. Code points 0x20-0x7F are covered; anything else renders
as a space.
"""

from __future__ import annotations

from .glyph import Glyph, GlyphTable

FIRST_CODE_POINT = 0x20
GLYPH_WIDTH = 5
GLYPH_HEIGHT = 7
CELL_WIDTH = 5
CELL_HEIGHT = 8

FONT_5X7: tuple[int, ...] = (
    0x0000000000, 0x00005F0000, 0x0007070000, 0x147F147F14, 0x242A7F2A12, 0x2313086462, 0x3649552250, 0x0000030000,
    0x001C224100, 0x0041221C00, 0x14083E0814, 0x08083E0808, 0x0050300000, 0x0808080808, 0x0060600000, 0x2010080402,
    0x3E4141413E, 0x00427F4000, 0x6251494946, 0x2241494936, 0x1814127F10, 0x2745454539, 0x3C4A494930, 0x0371090503,
    0x3649494936, 0x264949493E, 0x0036360000, 0x0056360000, 0x0814224100, 0x1414141414, 0x0041221408, 0x0201510906,
    0x324979413E, 0x7E1111117E, 0x7F49494936, 0x3E41414122, 0x7F4141413E, 0x7F49494941, 0x7F09090901, 0x3E4141493A,
    0x7F0808087F, 0x00417F4100, 0x2040413F01, 0x7F08142241, 0x7F40404040, 0x7F020C027F, 0x7F0408107F, 0x3E4141413E,
    0x7F09090906, 0x3E4151215E, 0x7F09192946, 0x0649494930, 0x01017F0101, 0x3F4040403F, 0x1F2040201F, 0x3F4038403F,
    0x6314081463, 0x0708700807, 0x6151494543, 0x007F414100, 0x0204081020, 0x0041417F00, 0x0402010204, 0x4040404040,
    0x0001020400, 0x2054545478, 0x7F48444438, 0x3844444420, 0x384444487F, 0x3854545418, 0x087E090102, 0x085454543C,
    0x7F08040478, 0x00487D4000, 0x002040443D, 0x7F10284400, 0x00417F4000, 0x7C04780478, 0x7C08040478, 0x3844444438,
    0x7C14141408, 0x081414187C, 0x7C08040408, 0x4854545420, 0x043F444020, 0x3C4040207C, 0x1C2040201C, 0x3C4030403C,
    0x4428102844, 0x0C5050503C, 0x4464544C44, 0x0008364100, 0x00007F0000, 0x0041360800, 0x1008081008, 0x001E1E1E00,
)


def unpack_columns(packed: int, width: int = GLYPH_WIDTH) -> tuple[int, ...]:
    return tuple((packed >> (8 * (width - 1 - column))) & 0xFF for column in range(width))


def _build_table() -> GlyphTable:
    glyphs = (
        Glyph(
            FIRST_CODE_POINT + index,
            GLYPH_WIDTH,
            GLYPH_HEIGHT,
            0,
            0,
            CELL_WIDTH + 1,
            unpack_columns(packed),
        )
        for index, packed in enumerate(FONT_5X7)
    )
    return GlyphTable("monospace", glyphs, cell_width=CELL_WIDTH, cell_height=CELL_HEIGHT)


MONOSPACE_FONT = _build_table()
