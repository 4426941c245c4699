"""
duolayout.layout.engine - Controlador del layout activo.

El LayoutEngine es el lado "aplicacion" del motor de layouts: guarda
el tamano actual de la ventana, el modo activo y el estado de swap, y
recalcula el Layout cada vez que alguno de ellos cambia.

Responsabilidades:
    - Mantener la lista de modos disponibles y el modo activo.
    - Recalcular el Layout al redimensionar la ventana.
    - Permitir cambio de modo y de swap en caliente.
    - Notificar a los suscriptores (p. ej. el renderer) del nuevo Layout.

El calculo en si lo hacen las funciones puras de layouts.py.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from duolayout.layout.layouts import (
    DefaultMode,
    LargeMode,
    Layout,
    LayoutMode,
    LayoutOption,
    SideBySideMode,
    SingleMode,
    frame_layout,
)

if TYPE_CHECKING:
    from duolayout.config.settings import LayoutSettings

log = logging.getLogger(__name__)


# Callback invocado con cada Layout nuevo
LayoutCallback = Callable[[Layout], None]


# ============================================================================
# Modos disponibles por defecto
# ============================================================================
def default_modes() -> list[LayoutMode]:
    """Modos en el orden en que se recorren con next_layout()."""
    return [
        DefaultMode(),
        SingleMode(),
        LargeMode(),
        SideBySideMode(),
    ]


# ============================================================================
# LayoutEngine
# ============================================================================
class LayoutEngine:
    """
    Mantiene el Layout de la ventana de salida al dia.

    Uso tipico:
        engine = LayoutEngine(800, 480)
        engine.on_layout_changed(renderer.set_viewports)
        engine.resize(1280, 720)     # Recalcula y notifica
        engine.next_layout()         # Cambia al siguiente modo
        engine.toggle_swap()         # Intercambia las pantallas
    """

    def __init__(
        self,
        width: int,
        height: int,
        modes: list[LayoutMode] | None = None,
        swapped: bool = False,
    ) -> None:
        """
        Inicializa el engine y calcula el primer Layout.

        Args:
            width:   Ancho inicial de la ventana.
            height:  Alto inicial de la ventana.
            modes:   Modos disponibles. Si es None, usa los default.
            swapped: Estado inicial del swap.
        """
        self._modes = modes if modes else default_modes()
        self._mode_index = 0
        self._width = width
        self._height = height
        self._swapped = swapped
        self._callbacks: list[LayoutCallback] = []
        self._layout = frame_layout(self.current_mode, width, height, swapped)

        log.info(
            "LayoutEngine iniciado | modo=%s | ventana=%dx%d | swap=%s",
            self.current_mode.name,
            width,
            height,
            swapped,
        )

    @classmethod
    def from_settings(
        cls,
        settings: LayoutSettings,
        width: int,
        height: int,
    ) -> LayoutEngine:
        """
        Crea un engine con el modo y el swap indicados en *settings*.

        El modo custom de la configuracion se agrega a la lista de modos
        disponibles, y el modo de settings.to_mode() reemplaza al de su
        mismo tipo.
        """
        active = settings.to_mode()
        modes = default_modes()
        modes.append(settings.custom_mode())
        modes = [
            active if mode.layout_option == active.layout_option else mode
            for mode in modes
        ]
        engine = cls(width, height, modes=modes, swapped=settings.swap_screen)
        engine.set_layout(active.layout_option)
        return engine

    # ------------------------------------------------------------------
    # Propiedades
    # ------------------------------------------------------------------
    @property
    def layout(self) -> Layout:
        """Ultimo Layout calculado."""
        return self._layout

    @property
    def current_mode(self) -> LayoutMode:
        """Modo activo."""
        return self._modes[self._mode_index]

    @property
    def layout_name(self) -> str:
        """Nombre del modo activo."""
        return self.current_mode.name

    @property
    def mode_count(self) -> int:
        """Numero de modos disponibles."""
        return len(self._modes)

    @property
    def swapped(self) -> bool:
        return self._swapped

    @property
    def window_size(self) -> tuple[int, int]:
        return self._width, self._height

    # ------------------------------------------------------------------
    # Suscripciones
    # ------------------------------------------------------------------
    def on_layout_changed(self, callback: LayoutCallback) -> None:
        """Registra un callback que recibe cada Layout nuevo."""
        self._callbacks.append(callback)

    def _notify(self) -> None:
        for callback in list(self._callbacks):
            try:
                callback(self._layout)
            except Exception:
                log.exception("Error en callback de layout %r", callback)

    # ------------------------------------------------------------------
    # Recalculo
    # ------------------------------------------------------------------
    def update(self) -> Layout:
        """
        Recalcula el Layout con el estado actual y notifica a los
        suscriptores.

        Returns:
            El Layout nuevo.
        """
        return self._apply(
            frame_layout(self.current_mode, self._width, self._height, self._swapped)
        )

    def _apply(self, layout: Layout) -> Layout:
        self._layout = layout
        log.debug("Layout actualizado: %s", layout)
        self._notify()
        return layout

    def resize(self, width: int, height: int) -> Layout:
        """
        Actualiza el tamano de la ventana y recalcula.

        Si el tamano no cambio, retorna el Layout actual sin notificar.
        Si el calculo falla, el engine conserva el tamano y el Layout
        anteriores.
        """
        if (width, height) == (self._width, self._height):
            return self._layout

        layout = frame_layout(self.current_mode, width, height, self._swapped)
        self._width = width
        self._height = height
        log.info("Ventana redimensionada a %dx%d", width, height)
        return self._apply(layout)

    # ------------------------------------------------------------------
    # Cambio de modo
    # ------------------------------------------------------------------
    def next_layout(self) -> LayoutMode:
        """
        Cambia al siguiente modo en la lista circular.

        Returns:
            El nuevo modo activo.
        """
        self._mode_index = (self._mode_index + 1) % len(self._modes)
        mode = self.current_mode
        log.info("Layout cambiado a: %s", mode.name)
        self.update()
        return mode

    def prev_layout(self) -> LayoutMode:
        """
        Cambia al modo anterior en la lista circular.

        Returns:
            El nuevo modo activo.
        """
        self._mode_index = (self._mode_index - 1) % len(self._modes)
        mode = self.current_mode
        log.info("Layout cambiado a: %s", mode.name)
        self.update()
        return mode

    def set_layout(self, layout_option: LayoutOption) -> bool:
        """
        Cambia a un modo especifico por tipo.

        Args:
            layout_option: Tipo de layout deseado.

        Returns:
            True si se encontro y cambio, False si no esta disponible.
        """
        for i, mode in enumerate(self._modes):
            if mode.layout_option == layout_option:
                self._mode_index = i
                log.info("Layout establecido: %s", mode.name)
                self.update()
                return True
        log.warning("Layout no disponible: %s", layout_option.value)
        return False

    # ------------------------------------------------------------------
    # Swap
    # ------------------------------------------------------------------
    def set_swapped(self, swapped: bool) -> Layout:
        """Establece el swap y recalcula si cambio."""
        if swapped == self._swapped:
            return self._layout
        self._swapped = swapped
        log.info("Swap de pantallas: %s", swapped)
        return self.update()

    def toggle_swap(self) -> Layout:
        """Intercambia la pantalla principal."""
        return self.set_swapped(not self._swapped)

    # ------------------------------------------------------------------
    # Informacion / debug
    # ------------------------------------------------------------------
    def dump_state(self) -> str:
        """Retorna un resumen del estado del engine."""
        layout = self._layout
        return "\n".join([
            "=== LayoutEngine ===",
            f"    Layout: {self.layout_name} ({self._mode_index + 1}/{len(self._modes)})",
            f"    Ventana: {self._width}x{self._height}",
            f"    Swap: {self._swapped}",
            f"    Superior: {layout.top_screen}{'' if layout.top_enabled else ' (off)'}",
            f"    Inferior: {layout.bottom_screen}{'' if layout.bottom_enabled else ' (off)'}",
            f"    Escala: {layout.scaling_ratio}x",
        ])

    def __repr__(self) -> str:
        return (
            f"LayoutEngine("
            f"layout={self.layout_name}, "
            f"window={self._width}x{self._height}, "
            f"swapped={self._swapped})"
        )
