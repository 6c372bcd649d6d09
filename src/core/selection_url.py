"""Resolución de URLs de selección de Figma.

Formatos aceptados (se prueban en este orden, gana el primero que coincide):
1. `.../design/<file_id>/<nombre>?node-id=<node_id>[&...]`
2. `.../file/<file_id>/?node-id=<node_id>[&...]`

Los dos patrones no son mutuamente excluyentes con entradas manipuladas; el
orden de prueba es parte del contrato.

El `node_id` se devuelve literal: `12%3A34` sigue siendo `12%3A34`.
"""

from __future__ import annotations

import re

from core.domain.errors import FormatError
from core.domain.models import SelectionReference

_DESIGN_URL_RE = re.compile(r"design/(.*?)/(.*?)\?node-id=(.*?)(?:&|$)")
_FILE_URL_RE = re.compile(r"file/(.*?)/\?node-id=(.*?)(?:&|$)")


def resolve_selection_url(url: str) -> SelectionReference:
    """Extrae (file_id, node_id) de una URL de selección.

    Lanza `FormatError` si la URL no coincide con ningún formato.
    """

    match = _DESIGN_URL_RE.search(url)
    if match:
        return SelectionReference(file_id=match.group(1), node_id=match.group(3))

    match = _FILE_URL_RE.search(url)
    if match:
        return SelectionReference(file_id=match.group(1), node_id=match.group(2))

    raise FormatError()


def build_nodes_url(base_url: str, ref: SelectionReference) -> str:
    """URL del endpoint `GET /v1/files/:key/nodes` para una selección.

    Los identificadores se interpolan sin re-codificar.
    """

    base = base_url.rstrip("/")
    return f"{base}/v1/files/{ref.file_id}/nodes?ids={ref.node_id}"
