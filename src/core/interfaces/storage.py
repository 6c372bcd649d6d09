"""Contrato de almacenamiento clave-valor.

Por qué Protocol:
- Sustituye al `localStorage` del navegador sin atar el Core a un backend.
- Permite dobles de test (`MemoryStorage`) y backends en archivo.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStorage(Protocol):
    """Almacén de strings por clave.

    Reglas de diseño:
    - `get` devuelve `None` si la clave no existe (no es un error).
    - `delete` es idempotente.
    - Si el backend no está disponible, las operaciones lanzan `StorageError`.
    """

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def delete(self, key: str) -> None:
        ...
