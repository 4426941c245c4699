"""
duolayout.layout.rect - Estructura geometrica Rect.

Define un rectangulo inmutable que representa un area de la ventana
de salida. Se usa para describir tanto el area disponible como la
posicion final de cada pantalla (superior / inferior) en un layout.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rect:
    """
    Rectangulo inmutable definido por sus cuatro bordes.

    Todas las coordenadas estan en pixeles de la ventana. El origen (0, 0)
    es la esquina superior-izquierda de la ventana.

    Atributos:
        left:   Borde izquierdo.
        top:    Borde superior.
        right:  Borde derecho (exclusivo).
        bottom: Borde inferior (exclusivo).
    """

    left: int
    top: int
    right: int
    bottom: int

    # ------------------------------------------------------------------
    # Propiedades derivadas
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        """True si el rectangulo no tiene area visible."""
        return self.width <= 0 or self.height <= 0

    # ------------------------------------------------------------------
    # Operaciones geometricas
    # ------------------------------------------------------------------
    def translate_x(self, dx: int) -> Rect:
        """Retorna un nuevo Rect desplazado *dx* pixeles en horizontal."""
        return Rect(self.left + dx, self.top, self.right + dx, self.bottom)

    def translate_y(self, dy: int) -> Rect:
        """Retorna un nuevo Rect desplazado *dy* pixeles en vertical."""
        return Rect(self.left, self.top + dy, self.right, self.bottom + dy)

    def clamp(self, width: int, height: int) -> Rect:
        """
        Recorta el rectangulo al area [0, width] x [0, height].

        Args:
            width:  Ancho del area contenedora.
            height: Alto del area contenedora.

        Returns:
            Nuevo Rect contenido en el area. Si el rectangulo ya estaba
            dentro, se retorna el mismo objeto.
        """
        left = min(max(self.left, 0), width)
        top = min(max(self.top, 0), height)
        right = min(max(self.right, left), width)
        bottom = min(max(self.bottom, top), height)
        if (left, top, right, bottom) == self.to_ltrb():
            return self
        return Rect(left, top, right, bottom)

    # ------------------------------------------------------------------
    # Conversiones
    # ------------------------------------------------------------------
    def to_ltrb(self) -> tuple[int, int, int, int]:
        """Retorna (left, top, right, bottom)."""
        return (self.left, self.top, self.right, self.bottom)

    @classmethod
    def from_xywh(cls, x: int, y: int, w: int, h: int) -> Rect:
        """Crea un Rect desde posicion (x, y) y dimensiones (w, h)."""
        return cls(x, y, x + w, y + h)

    # ------------------------------------------------------------------
    # Representacion
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return f"Rect({self.width}x{self.height}+{self.left}+{self.top})"
