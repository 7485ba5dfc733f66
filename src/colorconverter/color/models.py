"""
Data models for color conversion.
"""

from dataclasses import dataclass
from typing import Tuple

from colorconverter.config import CHANNEL_MAX, CHANNEL_MIN

__all__ = ["RGBTriplet", "ConversionResult"]


@dataclass(frozen=True)
class RGBTriplet:
    """
    One decoded color, three channels in [0, 255].

    Construction validates every channel and raises ValueError instead of
    clamping, so an instance always holds a valid color.

    Example:
        >>> RGBTriplet(26, 43, 60).to_hex()
        '#1A2B3C'
        >>> RGBTriplet(26, 43, 60).to_rgb()
        'rgb(26, 43, 60)'
    """

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name, value in (
            ("red", self.red),
            ("green", self.green),
            ("blue", self.blue),
        ):
            # bool is an int subclass but never a channel value
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} channel must be an int, got {value!r}")
            if not CHANNEL_MIN <= value <= CHANNEL_MAX:
                raise ValueError(
                    f"{name} channel out of range "
                    f"[{CHANNEL_MIN}, {CHANNEL_MAX}]: {value}"
                )

    def as_tuple(self) -> Tuple[int, int, int]:
        """Return (red, green, blue)."""
        return (self.red, self.green, self.blue)

    def to_hex(self) -> str:
        """Six-digit uppercase hex notation, never shortened."""
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"

    def to_rgb(self) -> str:
        """Functional rgb() notation with decimal channels."""
        return f"rgb({self.red}, {self.green}, {self.blue})"


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of converting one query."""

    query: str
    text: str
    label: str
    triplet: RGBTriplet
    source_format: str
    target_format: str
    tooltip: Tuple[str, str]

    @property
    def copy_text(self) -> str:
        """Text handed to a copy action."""
        return self.text
