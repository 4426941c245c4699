"""
duolayout - Motor de layout para dispositivos de doble pantalla.

Calcula donde dibujar la pantalla superior y la inferior dentro de una
ventana de salida de tamano arbitrario.
"""

__version__ = "0.1.0"
