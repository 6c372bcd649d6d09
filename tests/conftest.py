import json
from pathlib import Path
from typing import Callable

import httpx
import pytest

from adapters.storage import MemoryStorage
from core.config import AppSettings
from core.token_store import TokenStore

NODES_PAYLOAD = {
    "name": "Checkout",
    "lastModified": "2024-05-01T10:00:00Z",
    "nodes": {
        "12:34": {
            "document": {"id": "12:34", "name": "Botón «Pagar»", "type": "FRAME"},
            "components": {},
        }
    },
}


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    return AppSettings(
        _env_file=None,
        storage_path=tmp_path / "storage.json",
        api_base_url="https://api.figma.com",
        http_timeout_seconds=5.0,
    )


@pytest.fixture
def memory_storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def token_store(memory_storage: MemoryStorage) -> TokenStore:
    return TokenStore(memory_storage)


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def json_transport(recorded_requests: list[httpx.Request]) -> Callable[..., httpx.MockTransport]:
    """Builds a MockTransport answering every request with a fixed response."""

    def _build(status_code: int = 200, body: object = NODES_PAYLOAD, *, raw: bytes | None = None) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            content = raw if raw is not None else json.dumps(body).encode("utf-8")
            return httpx.Response(status_code, content=content, headers={"Content-Type": "application/json"})

        return httpx.MockTransport(handler)

    return _build


@pytest.fixture
def nodes_payload() -> dict[str, object]:
    return NODES_PAYLOAD
