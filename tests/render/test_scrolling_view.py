"""Tests for the physical display window over rendered text."""

from __future__ import annotations

import pytest

from pyledtext.render import RenderedMatrix, Rotation, ScrollingView, ViewMode, WidthPolicy, render_text


def build_matrix(width: int, lit: set[tuple[int, int]] = frozenset()) -> RenderedMatrix:
    pixels = bytearray(width * 8)
    for x, y in lit:
        pixels[x + y * width] = 1
    return RenderedMatrix(text="test", pixels=bytes(pixels), width=width)


def lit_columns(view: ScrollingView) -> set[int]:
    return {x for x in range(view.physical_width) for y in range(8) if view.is_pixel_set(x, y)}


def test_empty_render_is_dark() -> None:
    view = ScrollingView(render_text(""))

    assert view.mode is ViewMode.STATIC
    assert lit_columns(view) == set()
    view.scroll_by_one_pixel()
    assert view.scroll_offset == 0


def test_narrow_text_is_centred_with_legacy_width() -> None:
    matrix = render_text("!", policy=WidthPolicy.LEGACY_FULL_ADVANCE)
    view = ScrollingView(matrix)

    assert matrix.width == 5
    # (8 - 5) // 2 == 1, so glyph column 0 lands on physical column 1.
    assert lit_columns(view) == {1}
    assert [view.is_pixel_set(1, y) for y in range(8)] == [True, True, True, True, True, False, True, False]


def test_narrow_text_is_centred_with_trimmed_width() -> None:
    view = ScrollingView(render_text("!"))

    assert view.matrix.width == 1
    assert lit_columns(view) == {3}


def test_centred_letter() -> None:
    view = ScrollingView(render_text("A"))

    assert view.mode is ViewMode.STATIC
    assert {y for y in range(8) if view.is_pixel_set(1, y)} == {1, 2, 3, 4, 5, 6}
    assert lit_columns(view) == {1, 2, 3, 4, 5}


def test_static_view_never_scrolls() -> None:
    view = ScrollingView(render_text("A"))
    before = view.snapshot()
    for _ in range(10):
        view.scroll_by_one_pixel()
    assert view.scroll_offset == 0
    assert view.snapshot() == before


def test_full_width_text_reads_directly_and_does_not_scroll() -> None:
    view = ScrollingView(build_matrix(8, {(0, 0), (7, 7)}))

    assert view.mode is ViewMode.STATIC
    assert view.is_pixel_set(0, 0)
    assert view.is_pixel_set(7, 7)
    view.scroll_by_one_pixel()
    assert view.scroll_offset == 0


def test_scroll_full_cycle_wraps() -> None:
    view = ScrollingView(build_matrix(20), physical_width=8)

    assert view.mode is ViewMode.SCROLLING
    offsets = []
    for _ in range(20):
        view.scroll_by_one_pixel()
        offsets.append(view.scroll_offset)
    assert offsets == list(range(1, 20)) + [0]


def test_scrolled_pixel_moves_left() -> None:
    view = ScrollingView(build_matrix(20, {(10, 0)}))
    assert not any(view.is_pixel_set(x, 0) for x in range(8))

    for _ in range(3):
        view.scroll_by_one_pixel()
    assert view.is_pixel_set(7, 0)

    for _ in range(7):
        view.scroll_by_one_pixel()
    assert view.is_pixel_set(0, 0)
    assert lit_columns(view) == {0}


def test_scroll_wraps_around_end_of_matrix() -> None:
    view = ScrollingView(build_matrix(20, {(2, 4)}))
    for _ in range(15):
        view.scroll_by_one_pixel()

    # (7 + 15) % 20 == 2
    assert view.is_pixel_set(7, 4)


def test_scrolling_rendered_text_returns_to_start() -> None:
    view = ScrollingView(render_text("AB"))
    start = view.snapshot()

    assert view.mode is ViewMode.SCROLLING
    for _ in range(view.matrix.width):
        view.scroll_by_one_pixel()
    assert view.scroll_offset == 0
    assert view.snapshot() == start


def test_coordinates_outside_window_are_off() -> None:
    view = ScrollingView(build_matrix(20, {(x, y) for x in range(20) for y in range(8)}))

    assert view.is_pixel_set(0, 0)
    assert not view.is_pixel_set(8, 0)
    assert not view.is_pixel_set(-1, 0)
    assert not view.is_pixel_set(0, 8)


def test_any_nonzero_byte_counts_as_lit() -> None:
    pixels = bytearray(8 * 8)
    pixels[3] = 200
    view = ScrollingView(RenderedMatrix(text="", pixels=bytes(pixels), width=8))
    assert view.is_pixel_set(3, 0)


def test_wider_physical_window() -> None:
    view = ScrollingView(render_text("AB"), physical_width=16)

    assert view.mode is ViewMode.STATIC
    # (16 - 12) // 2 == 2
    assert min(lit_columns(view)) == 2
    assert max(lit_columns(view)) == 13


@pytest.mark.parametrize(
    ("rotation", "expected"),
    [
        (Rotation.ROTATE_0, (1, 0)),
        (Rotation.ROTATE_90, (7, 1)),
        (Rotation.ROTATE_180, (6, 7)),
        (Rotation.ROTATE_270, (0, 6)),
    ],
)
def test_rotation_maps_physical_coordinates(rotation: Rotation, expected: tuple[int, int]) -> None:
    view = ScrollingView(build_matrix(8, {(1, 0)}), rotation=rotation)

    lit = [(x, y) for y in range(8) for x in range(8) if view.is_pixel_set(x, y)]
    assert lit == [expected]


def test_invalid_window_arguments() -> None:
    matrix = render_text("A")
    with pytest.raises(ValueError):
        ScrollingView(matrix, physical_width=0)
    with pytest.raises(ValueError, match="square"):
        ScrollingView(matrix, physical_width=16, rotation=Rotation.ROTATE_90)


def test_format_frame() -> None:
    view = ScrollingView(render_text("!"))
    rows = view.format_frame().splitlines()

    assert len(rows) == 8
    assert rows[0] == "...#...."
    assert rows[5] == "........"
    assert rows[7] == "........"


def test_colors_pass_through_view() -> None:
    matrix = RenderedMatrix(text="", pixels=b"", width=0, text_color=(9, 9, 9), background_color=(1, 1, 1))
    view = ScrollingView(matrix)
    assert view.text_color == (9, 9, 9)
    assert view.background_color == (1, 1, 1)
