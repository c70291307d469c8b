"""Command-line entry point for the LED matrix text renderer.

Renders text to ASCII frames on stdout with ``--print``; otherwise opens the
pygame preview window that plays the role of the LED hardware.
"""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from pyledtext.font import FONTS
from pyledtext.render import (
    DEFAULT_PHYSICAL_WIDTH,
    RendererConfig,
    Rotation,
    ScrollingView,
    WidthPolicy,
    create_renderer,
)
from pyledtext.ui.app import AppConfig, LedMatrixApp


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="run.py",
        description="Render scrolling text for an 8-row LED matrix",
    )
    parser.add_argument("text", help="Text to render (longer than 128 characters is replaced)")
    parser.add_argument(
        "--font",
        choices=sorted(FONTS),
        default="proportional",
        help="Glyph table to render with (default: proportional)",
    )
    parser.add_argument(
        "--policy",
        choices=[policy.value for policy in WidthPolicy],
        default=WidthPolicy.TRAILING_WIDTH_TRIM.value,
        help="Bitmap width policy (default: trailing-width-trim)",
    )
    parser.add_argument(
        "--rotate",
        type=int,
        choices=[rotation.value for rotation in Rotation],
        default=0,
        help="Clockwise display rotation in degrees",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=DEFAULT_PHYSICAL_WIDTH,
        help="Physical display width in LEDs (default: 8)",
    )
    parser.add_argument(
        "--scale",
        type=int,
        default=32,
        help="Preview pixels per LED (default: 32)",
    )
    parser.add_argument(
        "--interval",
        type=int,
        default=80,
        help="Preview scroll interval in milliseconds (default: 80)",
    )
    parser.add_argument(
        "--fullscreen",
        action="store_true",
        help="Open the preview in fullscreen mode",
    )
    parser.add_argument(
        "--print",
        dest="print_frames",
        action="store_true",
        help="Print ASCII frames instead of opening the preview",
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=1,
        help="Number of frames to print with --print, scrolling one pixel each (default: 1)",
    )
    return parser


def print_frames(view: ScrollingView, frames: int, out: TextIO) -> None:
    for index in range(frames):
        if index:
            out.write("\n")
            view.scroll_by_one_pixel()
        out.write(f"offset={view.scroll_offset}\n")
        out.write(view.format_frame() + "\n")


def main(argv: list[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.width <= 0:
        parser.error("--width must be positive")
    if args.frames <= 0:
        parser.error("--frames must be positive")
    rotation = Rotation(args.rotate)
    if rotation is not Rotation.ROTATE_0 and args.width != DEFAULT_PHYSICAL_WIDTH:
        parser.error("--rotate requires --width 8")

    policy = WidthPolicy(args.policy)
    if args.print_frames:
        renderer = create_renderer(RendererConfig(font_name=args.font, policy=policy))
        view = ScrollingView(renderer.render(args.text), args.width, rotation)
        print_frames(view, args.frames, sys.stdout)
        return 0

    config = AppConfig(
        text=args.text,
        font_name=args.font,
        policy=policy,
        rotation=rotation,
        physical_width=args.width,
        scale=args.scale,
        scroll_interval_ms=args.interval,
        fullscreen=args.fullscreen,
    )
    try:
        app = LedMatrixApp(config)
        app.run()
    except (RuntimeError, ValueError) as exc:
        parser.exit(1, f"run.py: {exc}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
