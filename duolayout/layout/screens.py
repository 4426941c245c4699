"""
duolayout.layout.screens - Dimensiones nativas de las dos pantallas.

Las relaciones de aspecto se calculan una sola vez al importar el modulo
y son de solo lectura durante toda la vida del proceso.
"""

from __future__ import annotations

# Pantalla superior (panoramica)
TOP_SCREEN_WIDTH: int = 400
TOP_SCREEN_HEIGHT: int = 240

# Pantalla inferior (tactil)
BOTTOM_SCREEN_WIDTH: int = 320
BOTTOM_SCREEN_HEIGHT: int = 240

# Relacion alto / ancho de cada pantalla
TOP_SCREEN_ASPECT_RATIO: float = TOP_SCREEN_HEIGHT / TOP_SCREEN_WIDTH
BOTTOM_SCREEN_ASPECT_RATIO: float = BOTTOM_SCREEN_HEIGHT / BOTTOM_SCREEN_WIDTH

# Ambas pantallas una al lado de la otra
SIDE_BY_SIDE_ASPECT_RATIO: float = TOP_SCREEN_HEIGHT / (
    TOP_SCREEN_WIDTH + BOTTOM_SCREEN_WIDTH
)
