"""Almacenamiento clave-valor en un archivo JSON.

Equivalente local del `localStorage` del navegador:
- Un objeto JSON plano `{clave: valor}` en el directorio de config del usuario.
- Escritura atómica (archivo temporal + `replace`) para no dejar el archivo a medias.

Cualquier fallo de I/O o contenido corrupto se traduce en `StorageError`.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from loguru import logger

from core.domain.errors import StorageError


class JsonFileStorage:
    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def delete(self, key: str) -> None:
        data = self._read()
        if key not in data:
            return
        del data[key]
        self._write(data)

    def _read(self) -> dict[str, object]:
        if not self._path.exists():
            return {}
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not read storage file {}: {}", self._path, exc)
            raise StorageError(f"Storage unavailable: {exc}") from exc

        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StorageError(f"Storage file is corrupt: {self._path}") from exc
        if not isinstance(data, dict):
            raise StorageError(f"Storage file is corrupt: {self._path}")
        return data

    def _write(self, data: dict[str, object]) -> None:
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(
                json.dumps(data, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
                encoding="utf-8",
            )
            os.replace(tmp, self._path)
        except OSError as exc:
            logger.warning("Could not write storage file {}: {}", self._path, exc)
            raise StorageError(f"Storage unavailable: {exc}") from exc
