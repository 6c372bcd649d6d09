"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ErrorKind(str, Enum):
    """Categorías de error visibles para el usuario."""

    FORMAT = "format"
    STORAGE = "storage"
    NETWORK = "network"
    REMOTE_APPLICATION = "remote_application"


class Severity(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class SelectionReference(BaseModel):
    """Par (archivo, nodo) extraído de una URL de selección.

    Es transitorio: solo vive lo que dura una petición. Los identificadores
    son opacos y se conservan tal cual (sin decodificar).
    """

    model_config = ConfigDict(frozen=True)

    file_id: str = Field(
        ...,
        description="Identificador del archivo Figma (file key).",
    )
    node_id: str = Field(
        ...,
        description="Identificador del nodo, tal como aparece en la URL.",
    )


class RetrievalResult(BaseModel):
    """Resultado de una recuperación: JSON formateado o un error tipado.

    Por qué un resultado y no una excepción:
    - El controlador muestra ambos casos como notificación; conservar el
      `error_kind` permite distinguir red vs. error de aplicación más adelante.
    """

    json_text: str | None = Field(
        default=None,
        description="Documento recibido, re-serializado con indentación.",
    )
    error_kind: ErrorKind | None = Field(
        default=None,
        description="Tipo de fallo (None si la petición tuvo éxito).",
    )
    message: str | None = Field(
        default=None,
        description="Mensaje legible para el usuario en caso de fallo.",
    )
    status_code: int | None = Field(
        default=None,
        description="Status HTTP si hubo respuesta.",
    )

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @classmethod
    def success(cls, json_text: str, *, status_code: int | None = None) -> "RetrievalResult":
        return cls(json_text=json_text, status_code=status_code)

    @classmethod
    def failure(
        cls,
        kind: ErrorKind,
        message: str,
        *,
        status_code: int | None = None,
    ) -> "RetrievalResult":
        return cls(error_kind=kind, message=message, status_code=status_code)

    def raise_for_error(self) -> None:
        """Convierte un resultado fallido en la excepción equivalente."""

        from core.domain.errors import (  # noqa: PLC0415
            GENERIC_FETCH_ERROR,
            NetworkError,
            RemoteApplicationError,
        )

        if self.error_kind is None:
            return
        message = self.message or GENERIC_FETCH_ERROR
        if self.error_kind == ErrorKind.NETWORK:
            raise NetworkError(message)
        raise RemoteApplicationError(message, status_code=self.status_code)
