"""Composite text into a single-row LED pixel matrix."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Sequence

from pyledtext.font import PROPORTIONAL_FONT, FontProvider, Glyph, get_font
from pyledtext.utils import debug_enabled, debug_log

from .palette import GREEN, RGBColor, validate_color, validate_optional_color

MATRIX_HEIGHT = 8
MAX_TEXT_LENGTH = 128
TOO_LONG_TEXT = "Text is too long"


class WidthPolicy(str, Enum):
    """How the total bitmap width is derived from the glyph sequence."""

    LEGACY_FULL_ADVANCE = "legacy-full-advance"
    TRAILING_WIDTH_TRIM = "trailing-width-trim"
    FIXED_MONOSPACE = "fixed-monospace"


@dataclass(frozen=True)
class RenderedMatrix:
    """Rendered bitmap of ``width * 8`` bytes, row-major, non-zero means lit."""

    text: str
    pixels: bytes
    width: int
    text_color: RGBColor = GREEN
    background_color: Optional[RGBColor] = None

    @property
    def height(self) -> int:
        return MATRIX_HEIGHT

    def is_pixel_set(self, x: int, y: int) -> bool:
        if not 0 <= x < self.width or not 0 <= y < MATRIX_HEIGHT:
            return False
        return self.pixels[x + y * self.width] != 0

    def rows(self) -> Iterator[bytes]:
        for y in range(MATRIX_HEIGHT):
            start = y * self.width
            yield self.pixels[start : start + self.width]

    def to_ascii(self, on: str = "#", off: str = ".") -> str:
        return "\n".join("".join(on if value else off for value in row) for row in self.rows())


def measure(glyphs: Sequence[Glyph], policy: WidthPolicy, cell_width: int) -> int:
    """Return the bitmap width for ``glyphs`` under ``policy``."""

    if not glyphs:
        return 0
    if policy is WidthPolicy.LEGACY_FULL_ADVANCE:
        return sum(glyph.x_advance for glyph in glyphs)
    if policy is WidthPolicy.FIXED_MONOSPACE:
        return len(glyphs) * (cell_width + 1) - 1
    # The trailing glyph contributes its ink only, so no blank columns follow it.
    return sum(glyph.x_advance for glyph in glyphs[:-1]) + glyphs[-1].width


class TextRenderer:
    """Turns strings into :class:`RenderedMatrix` instances.

    The renderer is stateless between calls. Overlong input is swapped for a
    fixed notice and unknown characters become blanks, so ``render`` accepts
    any string.
    """

    def __init__(
        self,
        font: FontProvider = PROPORTIONAL_FONT,
        policy: WidthPolicy = WidthPolicy.TRAILING_WIDTH_TRIM,
        *,
        text_color: Sequence[int] = GREEN,
        background_color: Optional[Sequence[int]] = None,
    ) -> None:
        self._font = font
        self._policy = WidthPolicy(policy)
        self._text_color = validate_color(text_color)
        self._background_color = validate_optional_color(background_color)

    @property
    def font(self) -> FontProvider:
        return self._font

    @property
    def policy(self) -> WidthPolicy:
        return self._policy

    def render(self, text: str) -> RenderedMatrix:
        if len(text) > MAX_TEXT_LENGTH:
            if debug_enabled("render"):
                debug_log("render", "text_too_long length=%d limit=%d", len(text), MAX_TEXT_LENGTH)
            text = TOO_LONG_TEXT

        glyphs = [self._font.glyph_for(ord(char)) for char in text]
        if debug_enabled("font"):
            for char, glyph in zip(text, glyphs):
                if glyph.code_point != ord(char):
                    debug_log("font", "fallback char=U+%04X font=%s", ord(char), self._font.name)

        width = measure(glyphs, self._policy, self._font.cell_width)
        matrix = bytearray(width * MATRIX_HEIGHT)

        monospace = self._policy is WidthPolicy.FIXED_MONOSPACE
        x = 0
        for glyph in glyphs:
            for cx in range(glyph.width):
                column = x + cx
                if column >= width:
                    break
                pattern = glyph.pixels[cx]
                for cy in range(glyph.height):
                    row = cy + glyph.y_offset
                    if row >= MATRIX_HEIGHT:
                        break
                    if pattern & (1 << cy):
                        matrix[column + row * width] = 1
            x += self._font.cell_width + 1 if monospace else glyph.x_advance

        if debug_enabled("render"):
            debug_log("render", "text=%r glyphs=%d width=%d policy=%s", text, len(glyphs), width, self._policy.value)

        return RenderedMatrix(
            text=text,
            pixels=bytes(matrix),
            width=width,
            text_color=self._text_color,
            background_color=self._background_color,
        )


@dataclass
class RendererConfig:
    """Selects the font and width policy for :func:`create_renderer`."""

    font_name: str = PROPORTIONAL_FONT.name
    policy: WidthPolicy = WidthPolicy.TRAILING_WIDTH_TRIM
    text_color: RGBColor = GREEN
    background_color: Optional[RGBColor] = None


def create_renderer(config: RendererConfig | None = None) -> TextRenderer:
    config = config or RendererConfig()
    return TextRenderer(
        get_font(config.font_name),
        config.policy,
        text_color=config.text_color,
        background_color=config.background_color,
    )


def render_text(
    text: str,
    *,
    font: FontProvider = PROPORTIONAL_FONT,
    policy: WidthPolicy = WidthPolicy.TRAILING_WIDTH_TRIM,
) -> RenderedMatrix:
    return TextRenderer(font, policy).render(text)
