"""
duolayout.layout.layouts - Layouts para ubicar las dos pantallas.

Cada layout calcula, a partir del tamano de la ventana de salida, los
rectangulos donde se dibuja la pantalla superior y la inferior. Todas
las funciones son puras: no guardan estado y no hacen I/O, por lo que
pueden llamarse desde cualquier hilo.

Layouts disponibles:
    - DefaultMode    : Pantallas apiladas (superior arriba, inferior abajo)
    - SingleMode     : Solo la pantalla principal
    - LargeMode      : Pantalla principal grande + secundaria en miniatura
    - SideBySideMode : Ambas pantallas una al lado de la otra
    - CustomMode     : Rectangulos indicados por la configuracion

Con ``swapped=True`` la pantalla inferior pasa a ser la principal.
"""

from __future__ import annotations

import abc
import enum
import logging
import math
from dataclasses import dataclass

from duolayout.layout.rect import Rect
from duolayout.layout.screens import (
    BOTTOM_SCREEN_ASPECT_RATIO,
    BOTTOM_SCREEN_HEIGHT,
    BOTTOM_SCREEN_WIDTH,
    SIDE_BY_SIDE_ASPECT_RATIO,
    TOP_SCREEN_ASPECT_RATIO,
    TOP_SCREEN_HEIGHT,
    TOP_SCREEN_WIDTH,
)

log = logging.getLogger(__name__)


# ============================================================================
# Layout (resultado)
# ============================================================================
@dataclass(frozen=True, slots=True)
class Layout:
    """
    Resultado de un calculo de layout.

    Atributos:
        width:          Ancho de la ventana de salida.
        height:         Alto de la ventana de salida.
        top_enabled:    True si la pantalla superior debe dibujarse.
        bottom_enabled: True si la pantalla inferior debe dibujarse.
        top_screen:     Posicion de la pantalla superior en la ventana.
        bottom_screen:  Posicion de la pantalla inferior en la ventana.
    """

    width: int
    height: int
    top_enabled: bool
    bottom_enabled: bool
    top_screen: Rect
    bottom_screen: Rect

    @property
    def scaling_ratio(self) -> int:
        """
        Factor de escala entero de la pantalla superior respecto de su
        ancho nativo (1 = tamano nativo o menor).
        """
        return (self.top_screen.width - 1) // TOP_SCREEN_WIDTH + 1

    def __str__(self) -> str:
        return (
            f"Layout({self.width}x{self.height} | "
            f"top={self.top_screen}{'' if self.top_enabled else ' (off)'} | "
            f"bottom={self.bottom_screen}{'' if self.bottom_enabled else ' (off)'})"
        )


# ============================================================================
# Geometria base
# ============================================================================
def _round(value: float) -> int:
    # Redondeo al entero mas cercano, mitades hacia arriba (no bancario)
    return math.floor(value + 0.5)


def max_rectangle(window_area: Rect, screen_aspect_ratio: float) -> Rect:
    """
    Calcula el rectangulo mas grande con la relacion de aspecto dada
    que cabe dentro de *window_area*.

    El resultado queda anclado en el origen (0, 0); el llamador se
    encarga de trasladarlo. Como ancho y alto se redondean por separado,
    la relacion obtenida puede diferir de la pedida en un pixel.

    Args:
        window_area:         Area disponible.
        screen_aspect_ratio: Relacion alto / ancho deseada.

    Returns:
        Rect(0, 0, ancho, alto).
    """
    scale = min(float(window_area.width), window_area.height / screen_aspect_ratio)
    return Rect(0, 0, _round(scale), _round(scale * screen_aspect_ratio))


def _computed_layout(
    width: int,
    height: int,
    top_enabled: bool,
    bottom_enabled: bool,
    top_screen: Rect,
    bottom_screen: Rect,
) -> Layout:
    """Arma el Layout final garantizando que ambos rects queden dentro de la ventana."""
    top = top_screen.clamp(width, height)
    bottom = bottom_screen.clamp(width, height)
    if top is not top_screen or bottom is not bottom_screen:
        log.debug(
            "Layout recortado a %dx%d: top %s -> %s | bottom %s -> %s",
            width, height, top_screen, top, bottom_screen, bottom,
        )
    return Layout(width, height, top_enabled, bottom_enabled, top, bottom)


# ============================================================================
# Layout por defecto (apilado)
# ============================================================================
def default_frame_layout(width: int, height: int, swapped: bool = False) -> Layout:
    """
    Pantallas apiladas verticalmente, cada una en su mitad de la ventana.

    Esquema (sin swap):
        +------------------+
        |     superior     |
        +--+------------+--+
        |  |  inferior  |  |
        +--+------------+--+

    Args:
        width:   Ancho de la ventana (> 0).
        height:  Alto de la ventana (> 0).
        swapped: Si True, la pantalla inferior va en la mitad de arriba.
    """
    assert width > 0, f"ancho de ventana invalido: {width}"
    assert height > 0, f"alto de ventana invalido: {height}"

    half_height = height // 2

    # Ambas pantallas compiten por la misma mitad de la ventana
    screen_window_area = Rect(0, 0, width, half_height)
    top_screen = max_rectangle(screen_window_area, TOP_SCREEN_ASPECT_RATIO)
    bot_screen = max_rectangle(screen_window_area, BOTTOM_SCREEN_ASPECT_RATIO)

    window_aspect_ratio = height / width
    # Se multiplica por 2 porque hay dos pantallas apiladas
    emulation_aspect_ratio = TOP_SCREEN_ASPECT_RATIO * 2

    if window_aspect_ratio < emulation_aspect_ratio:
        # Ventana mas ancha que el contenido: bordes a izquierda y derecha
        top_screen = top_screen.translate_x((width - top_screen.width) // 2)
        bot_screen = bot_screen.translate_x((width - bot_screen.width) // 2)
    else:
        # Ventana mas alta que el contenido: bordes arriba y abajo.
        # La inferior se recalcula con el alto de la superior para que
        # ambas compartan el mismo ancho de referencia.
        screen_window_area = Rect(0, 0, width, top_screen.height)
        bot_screen = max_rectangle(screen_window_area, BOTTOM_SCREEN_ASPECT_RATIO)
        bot_screen = bot_screen.translate_x((top_screen.width - bot_screen.width) // 2)
        if swapped:
            bot_screen = bot_screen.translate_y(half_height - bot_screen.height)
        else:
            top_screen = top_screen.translate_y(half_height - top_screen.height)

    # La pantalla de abajo se mueve a la segunda mitad
    if swapped:
        top_screen = top_screen.translate_y(half_height)
    else:
        bot_screen = bot_screen.translate_y(half_height)

    return _computed_layout(width, height, True, True, top_screen, bot_screen)


# ============================================================================
# Layout single / large (formula compartida)
# ============================================================================
def _secondary_fits(
    width: int,
    height: int,
    primary_ratio: float,
    secondary_width: int,
    secondary_height: int,
) -> bool:
    """
    True si la secundaria de ese tamano puede acoplarse sin salirse de la
    ventana y dejando al menos una fila de pixeles a la principal.
    """
    viewport_height = int((width - secondary_width) * primary_ratio)
    if viewport_height <= 0:
        return False
    if height > viewport_height:
        primary_bottom = viewport_height + (height - viewport_height) // 2
        return secondary_height <= primary_bottom
    return secondary_height <= height


def _fit_secondary_scale(
    width: int,
    height: int,
    scale: float,
    native_width: int,
    native_height: int,
    primary_ratio: float,
) -> float:
    """
    Retorna *scale* si la secundaria entra a ese tamano. Si no entra, la
    reduce para que ocupe como mucho la mitad del ancho y la mitad del
    alto de la ventana.
    """
    secondary_width = int(native_width * scale)
    secondary_height = int(native_height * scale)
    if _secondary_fits(width, height, primary_ratio, secondary_width, secondary_height):
        return scale

    limit = min(scale, (width // 2) / native_width, (height // 2) / native_height)
    log.debug(
        "Escala secundaria %.3f no entra en %dx%d, se reduce a %.3f",
        scale, width, height, limit,
    )
    return limit


def _frame_layout(
    width: int,
    height: int,
    swapped: bool,
    scale: float,
    top_enabled: bool,
    bottom_enabled: bool,
) -> Layout:
    """
    Pantalla principal lo mas grande posible y la secundaria a escala
    *scale* de su tamano nativo, acoplada a la derecha.

    Con ``scale == 0`` la secundaria queda sin area (layout single).
    """
    assert width > 0, f"ancho de ventana invalido: {width}"
    assert height > 0, f"alto de ventana invalido: {height}"

    if swapped:
        primary_ratio = BOTTOM_SCREEN_ASPECT_RATIO
        native_width, native_height = TOP_SCREEN_WIDTH, TOP_SCREEN_HEIGHT
    else:
        primary_ratio = TOP_SCREEN_ASPECT_RATIO
        native_width, native_height = BOTTOM_SCREEN_WIDTH, BOTTOM_SCREEN_HEIGHT

    scale = _fit_secondary_scale(
        width, height, scale, native_width, native_height, primary_ratio
    )
    secondary_width = int(native_width * scale)
    secondary_height = int(native_height * scale)

    # Area que le queda a la principal descontando la secundaria
    viewport_height = int((width - secondary_width) * primary_ratio)
    viewport_width = int(height / primary_ratio + secondary_width)

    if height > viewport_height:
        # Limitada por el ancho: bordes arriba y abajo
        margin = (height - viewport_height) // 2
        primary_bottom = viewport_height + margin
        primary = Rect(0, margin, width - secondary_width, primary_bottom)
        secondary = Rect(
            width - secondary_width,
            primary_bottom - secondary_height,
            width,
            primary_bottom,
        )
    else:
        # Limitada por el alto: bordes a izquierda y derecha
        margin = (width - viewport_width) // 2
        primary_right = int(height / primary_ratio + margin)
        primary = Rect(margin, 0, primary_right, height)
        secondary = Rect(
            primary_right,
            height - secondary_height,
            primary_right + secondary_width,
            height,
        )

    if swapped:
        top_screen, bottom_screen = secondary, primary
    else:
        top_screen, bottom_screen = primary, secondary

    # El codigo de dibujo necesita un rect valido aunque la pantalla no se muestre
    if swapped and scale == 0:
        top_screen = bottom_screen

    return _computed_layout(
        width, height, top_enabled, bottom_enabled, top_screen, bottom_screen
    )


def single_frame_layout(width: int, height: int, swapped: bool = False) -> Layout:
    """
    Solo la pantalla principal, lo mas grande posible.

    La secundaria queda deshabilitada (sin swap: inferior; con swap:
    superior).
    """
    return _frame_layout(width, height, swapped, 0.0, not swapped, swapped)


def large_frame_layout(
    width: int,
    height: int,
    swapped: bool = False,
    scale: float = 1.0,
) -> Layout:
    """
    Pantalla principal grande y la secundaria acoplada a la derecha
    a *scale* veces su tamano nativo.
    """
    return _frame_layout(width, height, swapped, scale, True, True)


# ============================================================================
# Layout lado a lado
# ============================================================================
def side_frame_layout(width: int, height: int, swapped: bool = False) -> Layout:
    """
    Ambas pantallas una al lado de la otra, centradas en la ventana.

    Esquema (sin swap):
        +----------------+-----------+
        |    superior    | inferior  |
        +----------------+-----------+
    """
    assert width > 0, f"ancho de ventana invalido: {width}"
    assert height > 0, f"alto de ventana invalido: {height}"

    window_aspect_ratio = height / width
    screen_window_area = Rect(0, 0, width, height)

    # Region mas grande que contiene ambas pantallas juntas
    screen_rect = max_rectangle(screen_window_area, SIDE_BY_SIDE_ASPECT_RATIO)
    top_screen = max_rectangle(screen_rect, TOP_SCREEN_ASPECT_RATIO)
    bot_screen = max_rectangle(screen_rect, BOTTOM_SCREEN_ASPECT_RATIO)

    if window_aspect_ratio < SIDE_BY_SIDE_ASPECT_RATIO:
        shift_horizontal = (width - screen_rect.width) // 2
        top_screen = top_screen.translate_x(shift_horizontal)
        bot_screen = bot_screen.translate_x(shift_horizontal)
    else:
        shift_vertical = (height - screen_rect.height) // 2
        top_screen = top_screen.translate_y(shift_vertical)
        bot_screen = bot_screen.translate_y(shift_vertical)

    if swapped:
        top_screen = top_screen.translate_x(bot_screen.width)
    else:
        bot_screen = bot_screen.translate_x(top_screen.width)

    return _computed_layout(width, height, True, True, top_screen, bot_screen)


# ============================================================================
# Layout custom
# ============================================================================
def custom_frame_layout(
    width: int,
    height: int,
    top_screen: Rect,
    bottom_screen: Rect,
) -> Layout:
    """
    Retorna los rectangulos de la configuracion tal cual, sin validarlos.
    """
    assert width > 0, f"ancho de ventana invalido: {width}"
    assert height > 0, f"alto de ventana invalido: {height}"

    return Layout(width, height, True, True, top_screen, bottom_screen)


# ============================================================================
# LayoutOption enum
# ============================================================================
class LayoutOption(enum.Enum):
    """Identificador de cada tipo de layout."""
    DEFAULT = "default"
    SINGLE = "single"
    LARGE = "large"
    SIDE_BY_SIDE = "side"
    CUSTOM = "custom"


# ============================================================================
# LayoutMode (clase base abstracta)
# ============================================================================
class LayoutMode(abc.ABC):
    """
    Interfaz abstracta para un modo de layout.

    Cada modo sabe calcular el Layout completo para un tamano de ventana
    y un estado de swap. Los modos no guardan el resultado: dos llamadas
    con los mismos argumentos dan el mismo Layout.
    """

    @property
    @abc.abstractmethod
    def layout_option(self) -> LayoutOption:
        """Retorna el tipo de layout."""
        ...

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Nombre legible del layout."""
        ...

    @abc.abstractmethod
    def arrange(self, width: int, height: int, swapped: bool = False) -> Layout:
        """
        Calcula el layout para una ventana de *width* x *height*.

        Args:
            width:   Ancho de la ventana (> 0).
            height:  Alto de la ventana (> 0).
            swapped: Si True, la pantalla inferior es la principal.
        """
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class DefaultMode(LayoutMode):
    """Pantallas apiladas, cada una en su mitad de la ventana."""

    @property
    def layout_option(self) -> LayoutOption:
        return LayoutOption.DEFAULT

    @property
    def name(self) -> str:
        return "Default"

    def arrange(self, width: int, height: int, swapped: bool = False) -> Layout:
        return default_frame_layout(width, height, swapped)


class SingleMode(LayoutMode):
    """Solo la pantalla principal."""

    @property
    def layout_option(self) -> LayoutOption:
        return LayoutOption.SINGLE

    @property
    def name(self) -> str:
        return "Single"

    def arrange(self, width: int, height: int, swapped: bool = False) -> Layout:
        return single_frame_layout(width, height, swapped)


class LargeMode(LayoutMode):
    """
    Pantalla principal grande con la secundaria en miniatura.

    *scale* es el tamano de la secundaria respecto de su resolucion
    nativa (1.0 = tamano nativo). Valores negativos se tratan como 0.
    """

    def __init__(self, scale: float = 1.0) -> None:
        self._scale = max(0.0, scale)

    @property
    def scale(self) -> float:
        return self._scale

    @scale.setter
    def scale(self, value: float) -> None:
        self._scale = max(0.0, value)

    @property
    def layout_option(self) -> LayoutOption:
        return LayoutOption.LARGE

    @property
    def name(self) -> str:
        return "Large"

    def arrange(self, width: int, height: int, swapped: bool = False) -> Layout:
        return large_frame_layout(width, height, swapped, self._scale)

    def __repr__(self) -> str:
        return f"LargeMode(scale={self._scale:.2f})"


class SideBySideMode(LayoutMode):
    """Ambas pantallas lado a lado."""

    @property
    def layout_option(self) -> LayoutOption:
        return LayoutOption.SIDE_BY_SIDE

    @property
    def name(self) -> str:
        return "SideBySide"

    def arrange(self, width: int, height: int, swapped: bool = False) -> Layout:
        return side_frame_layout(width, height, swapped)


class CustomMode(LayoutMode):
    """
    Rectangulos fijos indicados por la configuracion.

    El flag *swapped* se ignora: la configuracion ya dice donde va
    cada pantalla.
    """

    def __init__(self, top_screen: Rect, bottom_screen: Rect) -> None:
        self._top_screen = top_screen
        self._bottom_screen = bottom_screen

    @property
    def top_screen(self) -> Rect:
        return self._top_screen

    @property
    def bottom_screen(self) -> Rect:
        return self._bottom_screen

    @property
    def layout_option(self) -> LayoutOption:
        return LayoutOption.CUSTOM

    @property
    def name(self) -> str:
        return "Custom"

    def arrange(self, width: int, height: int, swapped: bool = False) -> Layout:
        return custom_frame_layout(
            width, height, self._top_screen, self._bottom_screen
        )

    def __repr__(self) -> str:
        return f"CustomMode(top={self._top_screen}, bottom={self._bottom_screen})"


# ============================================================================
# Punto de entrada
# ============================================================================
def frame_layout(
    mode: LayoutMode,
    width: int,
    height: int,
    swapped: bool = False,
) -> Layout:
    """
    Calcula el layout de *mode* para una ventana de *width* x *height*.

    Raises:
        AssertionError: Si el ancho o el alto no son positivos.
    """
    layout = mode.arrange(width, height, swapped)
    log.debug("frame_layout %s swapped=%s -> %s", mode.name, swapped, layout)
    return layout
