"""Contrato del cliente de recuperación de nodos.

Por qué Protocol:
- El controlador de la app depende de esta abstracción, no de httpx.
- Permite sustituir el cliente real por uno falso en tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import RetrievalResult, SelectionReference


@runtime_checkable
class SelectionFetcher(Protocol):
    """Contrato mínimo para recuperar el JSON de una selección.

    Reglas de diseño:
    - `fetch` es asíncrono porque hace I/O (HTTP) con un único punto de espera.
    - Nunca lanza por fallos de red/servicio: los devuelve en `RetrievalResult`.
    """

    async def fetch(self, token: str, ref: SelectionReference) -> RetrievalResult:
        ...
