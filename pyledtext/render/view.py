"""Physical display window over a rendered text matrix."""

from __future__ import annotations

from enum import Enum, auto
from typing import Optional

from pyledtext.utils import debug_enabled, debug_log

from .palette import RGBColor
from .renderer import MATRIX_HEIGHT, RenderedMatrix

DEFAULT_PHYSICAL_WIDTH = 8


class Rotation(Enum):
    """Clockwise rotation of the physical matrix."""

    ROTATE_0 = 0
    ROTATE_90 = 90
    ROTATE_180 = 180
    ROTATE_270 = 270


class ViewMode(Enum):
    STATIC = auto()
    SCROLLING = auto()


class ScrollingView:
    """Maps physical LED coordinates onto a :class:`RenderedMatrix`.

    Text narrower than the window is centred and never moves. Wider text is
    read through a wrapping horizontal offset that only
    :meth:`scroll_by_one_pixel` changes.
    """

    def __init__(
        self,
        matrix: RenderedMatrix,
        physical_width: int = DEFAULT_PHYSICAL_WIDTH,
        rotation: Rotation = Rotation.ROTATE_0,
    ) -> None:
        if physical_width <= 0:
            raise ValueError("physical_width must be positive")
        rotation = Rotation(rotation)
        if rotation is not Rotation.ROTATE_0 and physical_width != MATRIX_HEIGHT:
            raise ValueError(f"rotation requires a square {MATRIX_HEIGHT}x{MATRIX_HEIGHT} window")
        self._matrix = matrix
        self._physical_width = physical_width
        self._rotation = rotation
        self._scroll_offset = 0
        self._mode = ViewMode.SCROLLING if matrix.width > physical_width else ViewMode.STATIC

    @property
    def matrix(self) -> RenderedMatrix:
        return self._matrix

    @property
    def physical_width(self) -> int:
        return self._physical_width

    @property
    def physical_height(self) -> int:
        return MATRIX_HEIGHT

    @property
    def rotation(self) -> Rotation:
        return self._rotation

    @property
    def scroll_offset(self) -> int:
        return self._scroll_offset

    @property
    def mode(self) -> ViewMode:
        return self._mode

    @property
    def text_color(self) -> RGBColor:
        return self._matrix.text_color

    @property
    def background_color(self) -> Optional[RGBColor]:
        return self._matrix.background_color

    def is_pixel_set(self, x: int, y: int) -> bool:
        if not 0 <= x < self._physical_width or not 0 <= y < MATRIX_HEIGHT:
            return False
        x, y = self._unrotate(x, y)

        width = self._matrix.width
        if width == 0:
            return False

        if width < self._physical_width:
            effective_x = x - (self._physical_width - width) // 2
            if effective_x < 0 or effective_x >= width:
                return False
        else:
            effective_x = (x + self._scroll_offset) % width

        return self._matrix.pixels[effective_x + y * width] != 0

    def scroll_by_one_pixel(self) -> None:
        width = self._matrix.width
        if width <= self._physical_width:
            return
        self._scroll_offset = (self._scroll_offset + 1) % width
        if debug_enabled("scroll"):
            debug_log("scroll", "offset=%d width=%d", self._scroll_offset, width)

    def snapshot(self) -> tuple[tuple[bool, ...], ...]:
        return tuple(
            tuple(self.is_pixel_set(x, y) for x in range(self._physical_width))
            for y in range(MATRIX_HEIGHT)
        )

    def format_frame(self, on: str = "#", off: str = ".") -> str:
        return "\n".join("".join(on if lit else off for lit in row) for row in self.snapshot())

    def _unrotate(self, x: int, y: int) -> tuple[int, int]:
        last = MATRIX_HEIGHT - 1
        if self._rotation is Rotation.ROTATE_90:
            return y, last - x
        if self._rotation is Rotation.ROTATE_180:
            return last - x, last - y
        if self._rotation is Rotation.ROTATE_270:
            return last - y, x
        return x, y
