"""
duolayout.ui.messages - Mensajes de conexion y confirmaciones al usuario.

Define los errores de conexion/sesion predefinidos y la interfaz de la
superficie de dialogos que los muestra. El motor de layouts nunca usa
este modulo: lo invoca el codigo de la aplicacion.

La implementacion real (ventana modal, toast, etc.) la provee el
frontend. LogDialogSurface es una version sin interfaz grafica que solo
registra los mensajes en el log.
"""

from __future__ import annotations

import abc
import logging
from dataclasses import dataclass

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SessionError:
    """A human-readable connection or session error."""

    message: str

    def __str__(self) -> str:
        return self.message


# ============================================================================
# Errores predefinidos
# ============================================================================
USERNAME_NOT_VALID = SessionError(
    "Username is not valid. Must be 4 to 20 alphanumeric characters."
)
ROOMNAME_NOT_VALID = SessionError(
    "Room name is not valid. Must be 4 to 20 alphanumeric characters."
)
USERNAME_IN_USE = SessionError("Username is already in use. Please choose another.")
IP_ADDRESS_NOT_VALID = SessionError("IP is not a valid IPv4 address.")
PORT_NOT_VALID = SessionError("Port must be a number between 0 to 65535.")
NO_INTERNET = SessionError(
    "Unable to find an internet connection. Check your internet settings."
)
UNABLE_TO_CONNECT = SessionError(
    "Unable to connect to the host. Verify that the connection settings are correct. "
    "If you still cannot connect, contact the room host and verify that the host is "
    "properly configured with the external port forwarded."
)
COULD_NOT_CREATE_ROOM = SessionError(
    "Creating a room failed. Please retry. Restarting the application might be necessary."
)
HOST_BANNED = SessionError(
    "The host of the room has banned you. Speak with the host to unban you "
    "or try a different room."
)
WRONG_VERSION = SessionError(
    "Version mismatch! Please update to the latest version. If the problem "
    "persists, contact the room host and ask them to update the server."
)
WRONG_PASSWORD = SessionError("Incorrect password.")
GENERIC_ERROR = SessionError(
    "An unknown error occurred. If this error continues to occur, please open an issue"
)
LOST_CONNECTION = SessionError("Connection to room lost. Try to reconnect.")
MAC_COLLISION = SessionError("MAC address is already in use. Please choose another.")


# ============================================================================
# DialogSurface
# ============================================================================
class DialogSurface(abc.ABC):
    """Presents errors and yes/no confirmations to the user."""

    @abc.abstractmethod
    def show_error(self, message: str) -> None:
        """Show an error message. Returns when the user dismisses it."""
        ...

    @abc.abstractmethod
    def confirm(self, title: str, message: str) -> bool:
        """
        Ask the user to confirm an action.

        Returns:
            True if the user accepted (Ok), False if they cancelled.
        """
        ...


class LogDialogSurface(DialogSurface):
    """
    Headless dialog surface: logs every message and answers every
    confirmation with *default_answer*.
    """

    def __init__(self, default_answer: bool = True) -> None:
        self._default_answer = default_answer

    def show_error(self, message: str) -> None:
        log.error("Dialog error: %s", message)

    def confirm(self, title: str, message: str) -> bool:
        log.warning("Dialog confirm [%s]: %s -> %s", title, message, self._default_answer)
        return self._default_answer


# ============================================================================
# Helpers
# ============================================================================
def show_error(surface: DialogSurface, error: SessionError) -> None:
    """Show a predefined session error on *surface*."""
    surface.show_error(error.message)


def warn_close_room(surface: DialogSurface) -> bool:
    """Ask before closing a hosted room. True if the user agreed."""
    return surface.confirm(
        "Leave Room",
        "You are about to close the room. Any network connections will be closed.",
    )


def warn_disconnect(surface: DialogSurface) -> bool:
    """Ask before leaving a room. True if the user agreed."""
    return surface.confirm(
        "Disconnect",
        "You are about to leave the room. Any network connections will be closed.",
    )
