"""
Launcher plugin surface for the color converter.

Wraps convert() in the result and context-menu shapes a launcher host
expects. Clipboard access goes through an injected ResultSink, and the icon
follows the host theme.
"""

__all__ = [
    "ColorConverterPlugin",
    "Result",
    "ContextMenuEntry",
    "icon_for_theme",
]

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple

from loguru import logger

from colorconverter.color import ConversionResult, convert
from colorconverter.config import CONFIG, LIGHT_THEMES
from colorconverter.sinks import ClipboardSink, ResultSink


def icon_for_theme(theme: str) -> str:
    """
    Pick the icon path for a host theme.

    Example:
        >>> icon_for_theme("light")
        'images/colorconverter.light.png'
        >>> icon_for_theme("dark")
        'images/colorconverter.dark.png'
    """
    if theme in LIGHT_THEMES:
        return CONFIG["icon_light"]
    return CONFIG["icon_dark"]


@dataclass
class Result:
    """One launcher row."""

    title: str
    subtitle: str
    query_text: str
    icon_path: Optional[str]
    tooltip: Tuple[str, str]
    context_data: Any
    action: Callable[[], bool] = field(repr=False)
    conversion: Optional[ConversionResult] = None


@dataclass
class ContextMenuEntry:
    """Secondary action attached to a result."""

    plugin_name: str
    title: str
    font_family: str
    glyph: str
    accelerator: Tuple[str, str]
    action: Callable[[], bool] = field(repr=False)


class ColorConverterPlugin:
    """
    Hex/RGB converter exposed as a launcher plugin.

    Example:
        >>> from colorconverter.sinks import MemorySink
        >>> plugin = ColorConverterPlugin(sink=MemorySink())
        >>> plugin.init("dark")
        >>> [r.title for r in plugin.query("#1a2b3c")]
        ['rgb(26, 43, 60)']
    """

    plugin_id = CONFIG["plugin_id"]
    name = CONFIG["plugin_name"]
    description = CONFIG["plugin_description"]

    def __init__(self, sink: Optional[ResultSink] = None):
        self.sink: ResultSink = sink if sink is not None else ClipboardSink()
        self.icon_path: Optional[str] = None
        self.initialized = False
        self.disposed = False

    def init(self, theme: str) -> None:
        """Attach to the host, using its current theme."""
        self.update_icon_path(theme)
        self.initialized = True
        logger.debug(f"{self.name} initialized with theme {theme!r}")

    def update_icon_path(self, theme: str) -> None:
        self.icon_path = icon_for_theme(theme)

    def on_theme_changed(self, current_theme: str, new_theme: str) -> None:
        if self.disposed:
            return
        self.update_icon_path(new_theme)

    def _copy_action(self, text: str) -> Callable[[], bool]:
        return lambda: self.sink.copy(text)

    def query(self, search: Optional[str]) -> List[Result]:
        """Return zero or one result rows for the search text."""
        search = search.strip() if search else ""
        if not search:
            return []

        conversion = convert(search)
        if conversion is None:
            return []

        return [
            Result(
                title=conversion.text,
                subtitle=conversion.label,
                query_text=search,
                icon_path=self.icon_path,
                tooltip=conversion.tooltip,
                context_data=conversion.copy_text,
                action=self._copy_action(conversion.copy_text),
                conversion=conversion,
            )
        ]

    def context_menus(self, selected: Result) -> List[ContextMenuEntry]:
        """Copy entry for results carrying copyable text."""
        if not isinstance(selected.context_data, str):
            return []

        return [
            ContextMenuEntry(
                plugin_name=self.name,
                title=CONFIG["copy_title"],
                font_family=CONFIG["copy_font"],
                glyph=CONFIG["copy_glyph"],
                accelerator=CONFIG["copy_accelerator"],
                action=self._copy_action(selected.context_data),
            )
        ]

    def dispose(self) -> None:
        """Detach from the host. Safe to call more than once."""
        if self.disposed:
            return
        self.disposed = True
        logger.debug(f"{self.name} disposed")
