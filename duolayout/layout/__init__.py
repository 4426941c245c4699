"""
duolayout.layout - Motor de layout de las dos pantallas.

Este paquete contiene:
    - rect    : Estructura Rect para geometria de areas
    - screens : Dimensiones nativas y relaciones de aspecto
    - layouts : Layouts (Default, Single, Large, SideBySide, Custom)
    - engine  : LayoutEngine - mantiene el layout activo al dia
"""

from duolayout.layout.rect import Rect
from duolayout.layout.layouts import (
    CustomMode,
    DefaultMode,
    LargeMode,
    Layout,
    LayoutMode,
    LayoutOption,
    SideBySideMode,
    SingleMode,
    custom_frame_layout,
    default_frame_layout,
    frame_layout,
    large_frame_layout,
    max_rectangle,
    side_frame_layout,
    single_frame_layout,
)
from duolayout.layout.engine import LayoutEngine

__all__ = [
    "Rect",
    "Layout",
    "LayoutMode",
    "LayoutOption",
    "DefaultMode",
    "SingleMode",
    "LargeMode",
    "SideBySideMode",
    "CustomMode",
    "max_rectangle",
    "default_frame_layout",
    "single_frame_layout",
    "large_frame_layout",
    "side_frame_layout",
    "custom_frame_layout",
    "frame_layout",
    "LayoutEngine",
]
