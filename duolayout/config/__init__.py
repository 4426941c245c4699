"""
duolayout.config - Configuracion del layout.

This package contains:
    - settings : LayoutSettings and the parsers for its values
"""

from duolayout.config.settings import (
    LayoutSettings,
    SettingsError,
    parse_layout_option,
    parse_rect,
    settings_from_mapping,
)

__all__ = [
    "LayoutSettings",
    "SettingsError",
    "parse_layout_option",
    "parse_rect",
    "settings_from_mapping",
]
