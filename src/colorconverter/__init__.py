"""
colorconverter - Convert color text between hex and RGB notation.

This package is organized into focused modules:

- color/    Pure parsing and formatting (no UI or clipboard dependencies)
            - models: RGBTriplet, ConversionResult
            - hex: parse_hex, format_hex
            - rgb: parse_rgb_function, parse_triplet, format_rgb
            - convert: convert, FORMATS

- sinks     Copy destinations (pyperclip clipboard, in-memory)
- plugin    Launcher plugin surface: results, context menus, themed icons
- cli       Command line entry point (fire)
- config    Centralized labels, icon paths and constants

Usage:
    from colorconverter import convert

    result = convert("#1AF")
    result.text   # 'rgb(17, 170, 255)'
    result.label  # 'Hex #1AF to RGB'
"""

__version__ = "0.0.1"

from loguru import logger

from colorconverter.color import (
    RGBTriplet,
    ConversionResult,
    parse_hex,
    format_hex,
    parse_rgb_function,
    parse_triplet,
    format_rgb,
    convert,
)

from colorconverter.sinks import (
    ResultSink,
    ClipboardSink,
    MemorySink,
)

from colorconverter.plugin import (
    ColorConverterPlugin,
    Result,
    ContextMenuEntry,
)

# Library stays quiet until an application opts in with logger.enable()
logger.disable("colorconverter")

__all__ = [
    "__version__",
    # color.models
    "RGBTriplet",
    "ConversionResult",
    # color.hex
    "parse_hex",
    "format_hex",
    # color.rgb
    "parse_rgb_function",
    "parse_triplet",
    "format_rgb",
    # color.convert
    "convert",
    # sinks
    "ResultSink",
    "ClipboardSink",
    "MemorySink",
    # plugin
    "ColorConverterPlugin",
    "Result",
    "ContextMenuEntry",
]
