"""
duolayout.config.settings - Configuracion del layout de pantallas.

Convierte valores de configuracion ya leidos (strings, bools, listas)
en un LayoutSettings tipado. Este modulo no lee ni escribe archivos:
la persistencia queda a cargo de la aplicacion.

Claves reconocidas por settings_from_mapping():
    layout_option  -> "default" | "single" | "large" | "side" | "custom"
    swap_screen    -> bool o "true"/"false"/"1"/"0"/"yes"/"no"
    custom_top     -> "left,top,right,bottom" o secuencia de 4 enteros
    custom_bottom  -> "left,top,right,bottom" o secuencia de 4 enteros
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from duolayout.layout.layouts import (
    CustomMode,
    DefaultMode,
    LargeMode,
    LayoutMode,
    LayoutOption,
    SideBySideMode,
    SingleMode,
)
from duolayout.layout.rect import Rect

log = logging.getLogger(__name__)


# Rectangulos custom por defecto: layout apilado a resolucion nativa
DEFAULT_CUSTOM_TOP = Rect(0, 0, 400, 240)
DEFAULT_CUSTOM_BOTTOM = Rect(40, 240, 360, 480)

# Alias aceptados ademas de los valores del enum
_OPTION_ALIASES: dict[str, LayoutOption] = {
    "stacked": LayoutOption.DEFAULT,
    "single_screen": LayoutOption.SINGLE,
    "large_screen": LayoutOption.LARGE,
    "side_by_side": LayoutOption.SIDE_BY_SIDE,
    "sidebyside": LayoutOption.SIDE_BY_SIDE,
    "sbs": LayoutOption.SIDE_BY_SIDE,
}

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off"})

_KNOWN_KEYS = frozenset({"layout_option", "swap_screen", "custom_top", "custom_bottom"})


class SettingsError(ValueError):
    """Raised when a configuration value cannot be parsed."""
    pass


# ============================================================================
# LayoutSettings
# ============================================================================
@dataclass(frozen=True, slots=True)
class LayoutSettings:
    """
    Valores de configuracion que consume el motor de layouts.

    Atributos:
        layout_option: Modo de layout seleccionado.
        swap_screen:   True si la pantalla inferior es la principal.
        custom_top:    Rect de la pantalla superior en modo custom.
        custom_bottom: Rect de la pantalla inferior en modo custom.
    """

    layout_option: LayoutOption = LayoutOption.DEFAULT
    swap_screen: bool = False
    custom_top: Rect = DEFAULT_CUSTOM_TOP
    custom_bottom: Rect = DEFAULT_CUSTOM_BOTTOM

    def custom_mode(self) -> CustomMode:
        """Modo custom armado con los rectangulos de la configuracion."""
        return CustomMode(self.custom_top, self.custom_bottom)

    def to_mode(self) -> LayoutMode:
        """Retorna el LayoutMode que corresponde a layout_option."""
        option = self.layout_option
        if option == LayoutOption.SINGLE:
            return SingleMode()
        if option == LayoutOption.LARGE:
            return LargeMode()
        if option == LayoutOption.SIDE_BY_SIDE:
            return SideBySideMode()
        if option == LayoutOption.CUSTOM:
            return self.custom_mode()
        return DefaultMode()


# ============================================================================
# Parsers
# ============================================================================
def parse_layout_option(value: str | LayoutOption) -> LayoutOption:
    """
    Parse a layout option name. Case-insensitive; '-' and ' ' are
    treated as '_'.

    Raises:
        SettingsError: If the name is not a known option or alias.
    """
    if isinstance(value, LayoutOption):
        return value
    if not isinstance(value, str) or not value.strip():
        raise SettingsError(f"Empty or invalid layout option: {value!r}")

    key = value.strip().lower().replace("-", "_").replace(" ", "_")
    for option in LayoutOption:
        if option.value == key or option.name.lower() == key:
            return option
    if key in _OPTION_ALIASES:
        return _OPTION_ALIASES[key]

    raise SettingsError(
        f"Unknown layout option: {value!r}. "
        f"Expected one of: {', '.join(o.value for o in LayoutOption)}"
    )


def parse_bool(value: Any, key: str = "value") -> bool:
    """Parse a bool from a bool, an int 0/1 or a common true/false string."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    raise SettingsError(f"Invalid boolean for {key}: {value!r}")


def parse_rect(value: str | Sequence[int] | Rect, key: str = "rect") -> Rect:
    """
    Parse a rectangle given as "left,top,right,bottom" or as a sequence
    of four integers.

    No geometric validation is done: the values are used as-is.

    Raises:
        SettingsError: If there are not exactly four integer values.
    """
    if isinstance(value, Rect):
        return value

    if isinstance(value, str):
        parts = [p.strip() for p in value.split(",")]
    elif isinstance(value, Sequence):
        parts = list(value)
    else:
        raise SettingsError(f"Invalid rectangle for {key}: {value!r}")

    if len(parts) != 4:
        raise SettingsError(
            f"Rectangle for {key} needs 4 values (left,top,right,bottom), "
            f"got {len(parts)}: {value!r}"
        )

    try:
        left, top, right, bottom = (int(p) for p in parts)
    except (TypeError, ValueError) as e:
        raise SettingsError(f"Non-integer value in {key}: {value!r}") from e

    return Rect(left, top, right, bottom)


def settings_from_mapping(values: Mapping[str, Any]) -> LayoutSettings:
    """
    Build a LayoutSettings from a plain mapping (e.g. a parsed INI/JSON
    section). Missing keys take their defaults; unknown keys are ignored
    with a warning.

    Raises:
        SettingsError: If a present value cannot be parsed.
    """
    for key in values:
        if key not in _KNOWN_KEYS:
            log.warning("Unknown layout setting ignored: %s", key)

    settings = LayoutSettings(
        layout_option=parse_layout_option(values.get("layout_option", LayoutOption.DEFAULT)),
        swap_screen=parse_bool(values.get("swap_screen", False), "swap_screen"),
        custom_top=parse_rect(values.get("custom_top", DEFAULT_CUSTOM_TOP), "custom_top"),
        custom_bottom=parse_rect(
            values.get("custom_bottom", DEFAULT_CUSTOM_BOTTOM), "custom_bottom"
        ),
    )
    log.debug("Layout settings loaded: %s", settings)
    return settings
