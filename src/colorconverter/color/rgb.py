"""
Parse and format decimal RGB notations.

Two input forms are recognised: functional ``rgb(r, g, b)`` and a bare
triplet such as ``21, 31, 41``.
"""

__all__ = [
    "parse_rgb_function",
    "parse_triplet",
    "format_rgb",
]

import re
from typing import Optional, Sequence

from colorconverter.config import CONFIG

from .models import RGBTriplet

_RGB_FUNCTION = re.compile(
    r"rgb\s*\(\s*([0-9]{1,3})\s*,\s*([0-9]{1,3})\s*,\s*([0-9]{1,3})\s*\)",
    re.IGNORECASE,
)
_TRIPLET_SEPARATORS = re.compile(CONFIG["triplet_separators"])
_DECIMAL = re.compile(r"[0-9]+")


def _to_triplet(values: Sequence[str]) -> Optional[RGBTriplet]:
    """Build a triplet from decimal strings, None if any is invalid."""
    if len(values) != 3 or not all(_DECIMAL.fullmatch(v) for v in values):
        return None
    try:
        return RGBTriplet(*(int(v) for v in values))
    except ValueError:
        return None


def parse_rgb_function(text: str) -> Optional[RGBTriplet]:
    """
    Decode functional notation ``rgb(r, g, b)``.

    The literal ``rgb`` is case-insensitive and whitespace is allowed around
    every token. The call may sit inside other text, e.g. a CSS declaration.

    Args:
        text: Candidate color string

    Returns:
        The decoded triplet, or None if the text does not match or a
        channel is outside [0, 255]

    Example:
        >>> parse_rgb_function("RGB( 26, 43 ,60 )")
        RGBTriplet(red=26, green=43, blue=60)
        >>> parse_rgb_function("rgb(300, 0, 0)") is None
        True
    """
    match = _RGB_FUNCTION.search(text)
    if match is None:
        return None
    return _to_triplet(match.groups())


def parse_triplet(text: str) -> Optional[RGBTriplet]:
    """
    Decode a bare triplet like ``21, 31, 41``.

    Separators are runs of ASCII commas, whitespace and full-width commas
    in any mix.

    Example:
        >>> parse_triplet("21，31 ,41")
        RGBTriplet(red=21, green=31, blue=41)
        >>> parse_triplet("21, 31") is None
        True
    """
    return _to_triplet(_TRIPLET_SEPARATORS.split(text.strip()))


def format_rgb(triplet: RGBTriplet) -> str:
    """Format a triplet as ``rgb(R, G, B)``."""
    return triplet.to_rgb()
