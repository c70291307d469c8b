"""Tests for the run.py command-line entry point."""

from __future__ import annotations

import pytest

from run import build_arg_parser, main


def test_print_single_frame(capsys) -> None:
    assert main(["!", "--print"]) == 0
    lines = capsys.readouterr().out.splitlines()

    assert lines[0] == "offset=0"
    assert lines[1] == "...#...."
    assert len(lines) == 9


def test_print_scrolling_frames(capsys) -> None:
    assert main(["Hello", "--print", "--frames", "3"]) == 0
    out = capsys.readouterr().out

    assert "offset=0" in out
    assert "offset=1" in out
    assert "offset=2" in out
    assert "offset=3" not in out


def test_print_monospace(capsys) -> None:
    assert main(["A", "--print", "--font", "monospace", "--policy", "fixed-monospace"]) == 0
    lines = capsys.readouterr().out.splitlines()

    # A five pixel glyph is centred in eight columns starting at column 1.
    assert lines[1] == "..###..."


def test_parser_defaults() -> None:
    args = build_arg_parser().parse_args(["text"])

    assert args.font == "proportional"
    assert args.policy == "trailing-width-trim"
    assert args.width == 8
    assert not args.print_frames


@pytest.mark.parametrize(
    "argv",
    [
        ["x", "--width", "0"],
        ["x", "--frames", "0"],
        ["x", "--rotate", "90", "--width", "16"],
        ["x", "--rotate", "45"],
        ["x", "--font", "gothic"],
    ],
)
def test_invalid_arguments_exit(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2
