"""Ciclo de vida del token de acceso.

Un único slot global (clave fija) dentro de un `KeyValueStorage` inyectado.
No cifra ni valida el token: esta herramienta no es un gestor de secretos.
"""

from __future__ import annotations

from loguru import logger

from core.interfaces.storage import KeyValueStorage

DEFAULT_TOKEN_KEY = "figmaToken"


class TokenStore:
    """Guarda, carga y borra el token bajo `key`.

    El valor en memoria (`value`) solo cambia cuando la operación sobre el
    almacenamiento tuvo éxito; si el backend lanza `StorageError`, el estado
    previo se conserva.
    """

    def __init__(self, storage: KeyValueStorage, *, key: str = DEFAULT_TOKEN_KEY) -> None:
        self._storage = storage
        self._key = key
        self._value = ""

    @property
    def key(self) -> str:
        return self._key

    @property
    def value(self) -> str:
        return self._value

    def load(self) -> str:
        """Lee el token guardado; si no existe devuelve `""`."""

        saved = self._storage.get(self._key)
        self._value = saved or ""
        logger.debug("Token loaded from storage (present={})", bool(self._value))
        return self._value

    def save(self, token: str) -> None:
        self._storage.set(self._key, token)
        self._value = token
        logger.info("Token saved under key '{}'", self._key)

    def delete(self) -> None:
        self._storage.delete(self._key)
        self._value = ""
        logger.info("Token deleted from key '{}'", self._key)
