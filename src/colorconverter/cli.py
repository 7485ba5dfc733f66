"""
Command line interface for the color converter.

Usage:
    colorconverter convert "#1AF"
    colorconverter convert 21 31 41 --copy
    colorconverter repl [--copy] [--verbose]
"""

__all__ = ["main", "convert_command", "repl", "configure_logging"]

import sys
from typing import Any, Callable, List, Optional

import fire
from loguru import logger

from colorconverter.color import ConversionResult, convert
from colorconverter.config import CONFIG
from colorconverter.sinks import ClipboardSink, ResultSink


def configure_logging(verbose: bool = False) -> None:
    """Send colorconverter logs to stderr."""
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else CONFIG["log_level"],
        format=CONFIG["log_format"],
    )
    logger.enable("colorconverter")


def _as_text(parts: tuple) -> str:
    """Join positional arguments into one query."""
    return " ".join(str(part) for part in parts)


def _quote_positionals(argv: List[str]) -> List[str]:
    """
    Keep positional arguments after the subcommand as strings for fire.

    fire evaluates bare tokens as Python literals, which would turn the hex
    color 000000 into 0 and 1e5 into 100000.0.

    Example:
        >>> _quote_positionals(["convert", "000000", "--copy"])
        ['convert', "'000000'", '--copy']
    """
    command: List[str] = []
    seen_subcommand = False
    for token in argv:
        if token.startswith("-"):
            command.append(token)
        elif not seen_subcommand:
            command.append(token)
            seen_subcommand = True
        else:
            command.append(repr(token))
    return command


def _render(result: ConversionResult) -> str:
    return f"{result.text}\n{result.label}"


def convert_command(
    *parts: Any,
    copy: bool = False,
    verbose: bool = False,
    sink: Optional[ResultSink] = None,
) -> None:
    """Convert one color and print the result and its description.

    Args:
        *parts: The color, e.g. "#1AF", "rgb(26, 43, 60)" or 21 31 41
        copy: Also copy the converted text to the clipboard
        verbose: Log debug messages

    Raises:
        SystemExit: With status 1 when the input is not a color
    """
    configure_logging(verbose)
    text = _as_text(parts)

    result = convert(text)
    if result is None:
        logger.error(f"{CONFIG['no_match_message']}: {text!r}")
        raise SystemExit(1)

    print(_render(result))
    if copy:
        (sink or ClipboardSink()).copy(result.copy_text)


def repl(
    copy: bool = False,
    verbose: bool = False,
    sink: Optional[ResultSink] = None,
    read: Callable[[str], str] = input,
) -> None:
    """Convert colors line by line until an empty line or EOF.

    Args:
        copy: Copy every successful conversion to the clipboard
        verbose: Log debug messages
    """
    configure_logging(verbose)
    if copy and sink is None:
        sink = ClipboardSink()

    while True:
        try:
            line = read("color> ")
        except (EOFError, KeyboardInterrupt):
            break
        if not line.strip():
            break

        result = convert(line)
        if result is None:
            print(CONFIG["no_match_message"])
            continue

        print(_render(result))
        if copy:
            sink.copy(result.copy_text)


def main(argv: Optional[List[str]] = None) -> None:
    if argv is None:
        argv = sys.argv[1:]
    fire.Fire(
        {
            "convert": convert_command,
            "repl": repl,
        },
        command=_quote_positionals(argv),
        name="colorconverter",
    )


if __name__ == "__main__":
    main()
