"""
duolayout.capture.factory - Registro de proveedores de captura.

Mapea nombres de proveedores ("blank", "image", "qt", ...) a fabricas
capaces de crear un stream de captura, en vivo o de preview.

El CaptureRegistry es el registro central:
    registry = CaptureRegistry()
    registry.register("image", ImageFactory())
    stream = registry.create("image", "/path/to/photo.png")

Un nombre desconocido nunca falla: se registra un error en el log y se
retorna un BlankStream que entrega frames vacios.
"""

from __future__ import annotations

import abc
import logging

log = logging.getLogger(__name__)


BLANK_NAME = "blank"

DEFAULT_WIDTH = 640
DEFAULT_HEIGHT = 480


# ============================================================================
# CaptureStream
# ============================================================================
class CaptureStream(abc.ABC):
    """Interface of a capture stream produced by a CaptureFactory."""

    @abc.abstractmethod
    def start_capture(self) -> None:
        """Start delivering frames."""
        ...

    @abc.abstractmethod
    def stop_capture(self) -> None:
        """Stop delivering frames."""
        ...

    @abc.abstractmethod
    def set_resolution(self, width: int, height: int) -> None:
        """Set the size of the frames returned by receive_frame()."""
        ...

    @abc.abstractmethod
    def set_flip(self, horizontal: bool, vertical: bool) -> None:
        ...

    @abc.abstractmethod
    def receive_frame(self) -> list[int]:
        """Return the latest frame as a flat list of pixels, row major."""
        ...


class BlankStream(CaptureStream):
    """A stream that always returns a black frame."""

    def __init__(self) -> None:
        self._width = DEFAULT_WIDTH
        self._height = DEFAULT_HEIGHT
        self._capturing = False

    @property
    def resolution(self) -> tuple[int, int]:
        return self._width, self._height

    @property
    def is_capturing(self) -> bool:
        return self._capturing

    def start_capture(self) -> None:
        self._capturing = True

    def stop_capture(self) -> None:
        self._capturing = False

    def set_resolution(self, width: int, height: int) -> None:
        self._width = max(0, width)
        self._height = max(0, height)

    def set_flip(self, horizontal: bool, vertical: bool) -> None:
        # Un frame negro no cambia al espejarse
        pass

    def receive_frame(self) -> list[int]:
        return [0] * (self._width * self._height)

    def __repr__(self) -> str:
        return f"BlankStream({self._width}x{self._height})"


# ============================================================================
# CaptureFactory
# ============================================================================
class CaptureFactory(abc.ABC):
    """Creates capture streams from a provider-specific config string."""

    @abc.abstractmethod
    def create(self, config: str) -> CaptureStream:
        """
        Create a live capture stream.

        Args:
            config: Provider-specific configuration (device id, file path...).
        """
        ...

    def create_preview(self, config: str, width: int, height: int) -> CaptureStream:
        """
        Create a stream for a settings preview of *width* x *height*.

        The default implementation creates a regular stream and sets its
        resolution.
        """
        stream = self.create(config)
        stream.set_resolution(width, height)
        return stream


# ============================================================================
# CaptureRegistry
# ============================================================================
class CaptureRegistry:
    """
    Registry that maps provider names to capture factories.

    Registering a name twice replaces the previous factory.
    """

    def __init__(self) -> None:
        self._factories: dict[str, CaptureFactory] = {}

    @property
    def count(self) -> int:
        return len(self._factories)

    @property
    def names(self) -> list[str]:
        """All registered provider names, sorted."""
        return sorted(self._factories.keys())

    def register(self, name: str, factory: CaptureFactory) -> None:
        """
        Register a factory by name.

        Args:
            name:    Provider name (e.g. "image").
            factory: The factory used to create streams for *name*.
        """
        if name in self._factories:
            log.info("Capture factory replaced: %s", name)
        self._factories[name] = factory
        log.debug("Capture factory registered: %s", name)

    def unregister(self, name: str) -> bool:
        """Remove a factory by name. Returns True if it existed."""
        if self._factories.pop(name, None) is not None:
            log.debug("Capture factory unregistered: %s", name)
            return True
        return False

    def get(self, name: str) -> CaptureFactory | None:
        return self._factories.get(name)

    def create(self, name: str, config: str) -> CaptureStream:
        """
        Create a live stream from the factory registered as *name*.

        Returns:
            The factory's stream, or a BlankStream if *name* is unknown.
        """
        factory = self._factories.get(name)
        if factory is not None:
            return factory.create(config)

        self._log_unknown(name)
        return BlankStream()

    def create_preview(
        self,
        name: str,
        config: str,
        width: int,
        height: int,
    ) -> CaptureStream:
        """
        Create a preview stream from the factory registered as *name*.

        Returns:
            The factory's preview stream, or a BlankStream of
            *width* x *height* if *name* is unknown.
        """
        factory = self._factories.get(name)
        if factory is not None:
            return factory.create_preview(config, width, height)

        self._log_unknown(name)
        stream = BlankStream()
        stream.set_resolution(width, height)
        return stream

    @staticmethod
    def _log_unknown(name: str) -> None:
        # "blank" es un pedido explicito de stream vacio, no un error
        if name != BLANK_NAME:
            log.error("Unknown capture provider %r, using blank stream", name)


# ============================================================================
# Registro global
# ============================================================================
_default_registry = CaptureRegistry()


def default_registry() -> CaptureRegistry:
    """Process-wide registry used by the module-level helpers."""
    return _default_registry


def register_factory(name: str, factory: CaptureFactory) -> None:
    _default_registry.register(name, factory)


def create_stream(name: str, config: str) -> CaptureStream:
    return _default_registry.create(name, config)


def create_preview_stream(name: str, config: str, width: int, height: int) -> CaptureStream:
    return _default_registry.create_preview(name, config, width, height)
