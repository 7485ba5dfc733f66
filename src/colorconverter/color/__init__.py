"""
Color parsing subpackage - pure functions, no UI or clipboard dependencies.

Parsers return an RGBTriplet or None; convert() chains them in priority order.
"""

from colorconverter.color.models import (
    RGBTriplet,
    ConversionResult,
)

from colorconverter.color.hex import (
    parse_hex,
    format_hex,
)

from colorconverter.color.rgb import (
    parse_rgb_function,
    parse_triplet,
    format_rgb,
)

from colorconverter.color.convert import (
    convert,
    FORMATS,
)

__all__ = [
    # models
    "RGBTriplet",
    "ConversionResult",
    # hex
    "parse_hex",
    "format_hex",
    # rgb
    "parse_rgb_function",
    "parse_triplet",
    "format_rgb",
    # convert
    "convert",
    "FORMATS",
]
