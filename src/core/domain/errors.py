"""Errores del dominio.

Cada error lleva su `ErrorKind` para que la CLI y el controlador puedan
notificar sin inspeccionar tipos concretos. Ninguno es fatal para la sesión:
el usuario puede reintentar la acción inmediatamente.
"""

from __future__ import annotations

from core.domain.models import ErrorKind

GENERIC_FETCH_ERROR = "Error fetching JSON"


class FigmaJsonError(Exception):
    """Base de todos los errores de la aplicación."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FormatError(FigmaJsonError):
    """La URL de selección no coincide con ningún formato reconocido."""

    kind = ErrorKind.FORMAT

    def __init__(self, message: str = "Invalid Figma URL format") -> None:
        super().__init__(message)


class StorageError(FigmaJsonError):
    """El almacenamiento persistente del token no está disponible."""

    kind = ErrorKind.STORAGE


class NetworkError(FigmaJsonError):
    """La petición no llegó al servicio remoto."""

    kind = ErrorKind.NETWORK

    def __init__(self, message: str = GENERIC_FETCH_ERROR) -> None:
        super().__init__(message)


class RemoteApplicationError(FigmaJsonError):
    """El servicio respondió con un status de error."""

    kind = ErrorKind.REMOTE_APPLICATION

    def __init__(self, message: str = GENERIC_FETCH_ERROR, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
