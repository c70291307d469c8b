"""Presentation colours attached to rendered text.

Colours never influence which pixels are lit; they are carried along so a
display adapter knows how to draw the lit and unlit LEDs.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

RGBColor = Tuple[int, int, int]


BLACK: RGBColor = (0, 0, 0)
WHITE: RGBColor = (0xFF, 0xFF, 0xFF)
GREEN: RGBColor = (0, 0xFF, 0)


def validate_color(color: Sequence[int]) -> RGBColor:
    if len(color) != 3:
        raise ValueError("colour must be an RGB tuple")
    return tuple(int(channel) & 0xFF for channel in color)  # type: ignore[return-value]


def validate_optional_color(color: Optional[Sequence[int]]) -> Optional[RGBColor]:
    if color is None:
        return None
    return validate_color(color)
