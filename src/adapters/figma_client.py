"""Cliente de la API REST de Figma: `GET /v1/files/:key/nodes`.

Responsabilidad:
- Una única petición autenticada (`X-Figma-Token`) por llamada.
- Devolver el cuerpo tal cual, re-serializado con indentación (mismo orden de
  claves, sin escapar no-ASCII).
- Normalizar fallos como `RetrievalResult` con su `ErrorKind`.

Sin reintentos, sin caché, sin cancelación.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
from loguru import logger

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import GENERIC_FETCH_ERROR
from core.domain.models import ErrorKind, RetrievalResult, SelectionReference
from core.interfaces.retrieval import SelectionFetcher
from core.selection_url import build_nodes_url

TOKEN_HEADER = "X-Figma-Token"


def format_json(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2)


def extract_error_message(response: httpx.Response) -> str:
    """Mensaje del payload de error (`message`) o el genérico."""

    try:
        payload = response.json()
    except ValueError:
        return GENERIC_FETCH_ERROR
    if isinstance(payload, dict):
        message = payload.get("message")
        if isinstance(message, str) and message:
            return message
    return GENERIC_FETCH_ERROR


async def fetch_selection_json(
    *,
    token: str,
    ref: SelectionReference,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RetrievalResult:
    settings = settings or AppSettings()
    url = build_nodes_url(settings.api_base_url, ref)
    logger.debug("GET {} (file={}, node={})", url, ref.file_id, ref.node_id)

    try:
        async with build_async_client(
            settings,
            extra_headers={TOKEN_HEADER: token},
            transport=transport,
        ) as client:
            response = await client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as exc:
        # InvalidURL: ids with control chars. UnicodeEncodeError: non-ASCII token in the header.
        logger.warning("Request to Figma API failed: {}", exc)
        return RetrievalResult.failure(ErrorKind.NETWORK, GENERIC_FETCH_ERROR)

    if not response.is_success:
        message = extract_error_message(response)
        logger.warning("Figma API responded {}: {}", response.status_code, message)
        return RetrievalResult.failure(
            ErrorKind.REMOTE_APPLICATION,
            message,
            status_code=response.status_code,
        )

    try:
        data = response.json()
    except ValueError:
        logger.warning("Figma API returned a non-JSON body (status {})", response.status_code)
        return RetrievalResult.failure(
            ErrorKind.REMOTE_APPLICATION,
            GENERIC_FETCH_ERROR,
            status_code=response.status_code,
        )

    return RetrievalResult.success(format_json(data), status_code=response.status_code)


class FigmaNodesClient(SelectionFetcher):
    """Implementación de `SelectionFetcher` sobre la API pública de Figma."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def fetch(self, token: str, ref: SelectionReference) -> RetrievalResult:
        return await fetch_selection_json(
            token=token,
            ref=ref,
            settings=self._settings,
            transport=self._transport,
        )
