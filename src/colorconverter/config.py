"""
Application configuration and settings.

All labels, icon paths and parsing constants are centralized here
for easy maintenance and tuning.
"""

from typing import Any, Dict, Tuple

__all__ = ["CONFIG", "LIGHT_THEMES", "CHANNEL_MIN", "CHANNEL_MAX"]

# ====================================================================
# CHANNEL BOUNDS
# ====================================================================

CHANNEL_MIN = 0
CHANNEL_MAX = 255

# ====================================================================
# APPLICATION CONFIGURATION
# ====================================================================

CONFIG: Dict[str, Any] = {
    # Plugin Metadata
    "plugin_id": "COLORCONVERTERPLUGIN",
    "plugin_name": "ColorConverter",
    "plugin_description": "Convert colors between hex and RGB",
    # Icons (picked from the host theme)
    "icon_light": "images/colorconverter.light.png",
    "icon_dark": "images/colorconverter.dark.png",
    # Result labels ({query} is the trimmed user input)
    "label_hex_to_rgb": "Hex {query} to RGB",
    "label_rgb_to_hex": "RGB {query} to hex",
    "tooltip_rgb": "RGB",
    "tooltip_hex": "Hex",
    # Bare triplet separators: ASCII comma, whitespace, full-width comma
    "triplet_separators": r"[,\s，]+",
    # Context menu
    "copy_title": "Copy to clipboard (Ctrl+C)",
    "copy_font": "Segoe MDL2 Assets",
    "copy_glyph": "\ue8c8",
    "copy_accelerator": ("ctrl", "c"),
    # Logging
    "log_level": "INFO",
    "log_format": "<level>{level: <8}</level> | {message}",
    # CLI
    "no_match_message": "no conversion available",
}

# Themes that get the light icon; every other theme uses the dark one.
LIGHT_THEMES: Tuple[str, ...] = ("light", "high_contrast_white")
