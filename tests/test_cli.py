"""Tests for the command line interface."""

import pytest
from loguru import logger

from colorconverter.cli import _quote_positionals, convert_command, main, repl
from colorconverter.sinks import MemorySink


@pytest.fixture(autouse=True)
def quiet_logger():
    yield
    logger.remove()
    logger.disable("colorconverter")


def test_convert_prints_result_and_label(capsys):
    convert_command("#1AF")
    out = capsys.readouterr().out
    assert out == "rgb(17, 170, 255)\nHex #1AF to RGB\n"


def test_convert_joins_separate_arguments(capsys):
    # positional arguments are joined with spaces
    convert_command(21, 31, 41)
    assert capsys.readouterr().out.splitlines()[0] == "#151F29"


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["convert", "000000"], "rgb(0, 0, 0)\nHex 000000 to RGB\n"),
        (["convert", "000"], "rgb(0, 0, 0)\nHex 000 to RGB\n"),
        (["convert", "1e5"], "rgb(17, 238, 85)\nHex 1e5 to RGB\n"),
        (["convert", "123456"], "rgb(18, 52, 86)\nHex 123456 to RGB\n"),
        (["convert", "21, 31, 41"], "#151F29\nRGB 21, 31, 41 to hex\n"),
        (["convert", "21", "31", "41"], "#151F29\nRGB 21 31 41 to hex\n"),
        (["convert", "#1AF", "--verbose"], "rgb(17, 170, 255)\nHex #1AF to RGB\n"),
    ],
)
def test_main_keeps_arguments_as_text(capsys, argv, expected):
    main(argv)
    assert capsys.readouterr().out == expected


def test_main_no_match_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["convert", "not-a-color"])
    assert exc.value.code == 1


def test_quote_positionals_leaves_subcommand_and_flags():
    assert _quote_positionals(["convert", "000", "--copy", "--verbose"]) == [
        "convert",
        "'000'",
        "--copy",
        "--verbose",
    ]


def test_convert_copy_uses_sink(capsys):
    sink = MemorySink()
    convert_command("rgb(26, 43, 60)", copy=True, sink=sink)
    assert sink.copied == ["#1A2B3C"]


def test_convert_no_match_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        convert_command("not-a-color")
    assert exc.value.code == 1
    assert capsys.readouterr().out == ""


def test_repl_until_empty_line(capsys):
    lines = iter(["#1AF", "nope", "21，31，41", "", "#000"])
    sink = MemorySink()
    repl(copy=True, sink=sink, read=lambda prompt: next(lines))

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "rgb(17, 170, 255)",
        "Hex #1AF to RGB",
        "no conversion available",
        "#151F29",
        "RGB 21，31，41 to hex",
    ]
    assert sink.copied == ["rgb(17, 170, 255)", "#151F29"]


def test_repl_stops_at_eof(capsys):
    def read(prompt):
        raise EOFError

    repl(read=read)
    assert capsys.readouterr().out == ""
