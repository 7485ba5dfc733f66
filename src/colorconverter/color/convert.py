"""
Detect the format of a color query and convert it to the other notation.
"""

__all__ = ["convert", "FORMATS"]

from typing import Callable, Optional, Tuple

from loguru import logger

from colorconverter.config import CONFIG

from .hex import format_hex, parse_hex
from .models import ConversionResult, RGBTriplet
from .rgb import format_rgb, parse_rgb_function, parse_triplet

Parser = Callable[[str], Optional[RGBTriplet]]

# Priority order: (name, parser, source format, target format).
# Hex comes first so "123" reads as #123, and the functional form comes
# before the bare triplet so "rgb(1,2,3)" is never split.
FORMATS: Tuple[Tuple[str, Parser, str, str], ...] = (
    ("hex", parse_hex, "hex", "rgb"),
    ("rgb_function", parse_rgb_function, "rgb", "hex"),
    ("triplet", parse_triplet, "rgb", "hex"),
)

# target format -> (formatter, label template key, tooltip title key)
_TARGETS = {
    "rgb": (format_rgb, "label_hex_to_rgb", "tooltip_rgb"),
    "hex": (format_hex, "label_rgb_to_hex", "tooltip_hex"),
}


def _build_result(
    query: str,
    triplet: RGBTriplet,
    source_format: str,
    target_format: str,
) -> ConversionResult:
    formatter, label_key, tooltip_key = _TARGETS[target_format]
    text = formatter(triplet)
    return ConversionResult(
        query=query,
        text=text,
        label=CONFIG[label_key].format(query=query),
        triplet=triplet,
        source_format=source_format,
        target_format=target_format,
        tooltip=(CONFIG[tooltip_key], text),
    )


def convert(text: str) -> Optional[ConversionResult]:
    """
    Convert a color between hex and RGB notation.

    Formats are tried in a fixed order (hex, ``rgb()``, bare triplet) and
    the first one that parses decides the output. Unrecognised input is
    not an error.

    Args:
        text: User input, surrounding whitespace is ignored

    Returns:
        The conversion, or None if no format matches

    Example:
        >>> convert("#1AF").text
        'rgb(17, 170, 255)'
        >>> convert("21, 31, 41").text
        '#151F29'
        >>> convert("red") is None
        True
    """
    query = text.strip() if text else ""
    if not query:
        return None

    for name, parser, source_format, target_format in FORMATS:
        triplet = parser(query)
        if triplet is not None:
            logger.debug(f"{query!r} matched {name}: {triplet.as_tuple()}")
            return _build_result(query, triplet, source_format, target_format)

    logger.debug(f"{query!r} matched no color format")
    return None
