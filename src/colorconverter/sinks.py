"""
Destinations for a conversion's copy text.

The core never copies anything itself; hosts hand ``result.copy_text`` to a
sink.
"""

__all__ = [
    "ResultSink",
    "ClipboardSink",
    "MemorySink",
]

from typing import List, Protocol

import pyperclip
from loguru import logger


class ResultSink(Protocol):
    """Anything that accepts copied text and reports success."""

    def copy(self, text: str) -> bool: ...


class ClipboardSink:
    """Copy to the system clipboard with pyperclip."""

    def copy(self, text: str) -> bool:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            logger.warning(f"Failed to copy {text!r} to clipboard: {e}")
            return False
        logger.debug(f"Copied {text!r} to clipboard")
        return True


class MemorySink:
    """
    Keep copied text in memory.

    Example:
        >>> sink = MemorySink()
        >>> sink.copy("#151F29")
        True
        >>> sink.last
        '#151F29'
    """

    def __init__(self) -> None:
        self.copied: List[str] = []

    def copy(self, text: str) -> bool:
        self.copied.append(text)
        return True

    @property
    def last(self) -> str | None:
        """Most recently copied text, None if nothing was copied."""
        return self.copied[-1] if self.copied else None
