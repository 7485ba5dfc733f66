"""Parse and format hexadecimal color notation."""

__all__ = ["parse_hex", "format_hex"]

import re
from typing import Optional

from .models import RGBTriplet

# int(x, 16) alone would also accept signs, "0x" and underscores
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]{3}|[0-9a-fA-F]{6}")


def parse_hex(text: str) -> Optional[RGBTriplet]:
    """
    Decode ``#RGB`` or ``#RRGGBB`` (the ``#`` is optional).

    Args:
        text: Candidate color string

    Returns:
        The decoded triplet, or None when the text is not a hex color

    Example:
        >>> parse_hex("#1AF")
        RGBTriplet(red=17, green=170, blue=255)
        >>> parse_hex("1a2b3c")
        RGBTriplet(red=26, green=43, blue=60)
        >>> parse_hex("#12") is None
        True
    """
    digits = text.strip().removeprefix("#")
    if not _HEX_DIGITS.fullmatch(digits):
        return None

    if len(digits) == 3:
        # shorthand: each nibble doubles, "c" -> "cc"
        r, g, b = (int(c * 2, 16) for c in digits)
        return RGBTriplet(r, g, b)

    value = int(digits, 16)
    return RGBTriplet((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def format_hex(triplet: RGBTriplet) -> str:
    """Format a triplet as ``#RRGGBB`` (uppercase, always six digits)."""
    return triplet.to_hex()
