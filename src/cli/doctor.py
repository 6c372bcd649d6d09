"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from adapters.storage import JsonFileStorage
from core.config import AppSettings, write_user_env_vars
from core.domain.errors import StorageError
from core.token_store import TokenStore

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


def _check_token(settings: AppSettings) -> tuple[str, str]:
    store = TokenStore(JsonFileStorage(settings.storage_path), key=settings.token_key)
    try:
        token = store.load()
    except StorageError as exc:
        return "FAIL", exc.message
    if not token:
        return "MISSING", "Run `figma-json token save`"
    return "OK", f"{len(token)} chars under '{settings.token_key}'"


@app.command()
def run(
    offline: bool = typer.Option(False, "--offline", help="Skip the connectivity check."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="Figma JSON Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("API base_url", "OK", settings.api_base_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s (no retries)")
    table.add_row("Storage file", "OK", str(settings.storage_path))

    # Token
    token_status, token_detail = _check_token(settings)
    table.add_row("Access token", token_status, token_detail)

    # Connectivity (best-effort)
    if offline:
        table.add_row("HTTP connectivity", "SKIPPED", "--offline")
    else:
        ok_http, detail_http = asyncio.run(_check_http(settings.api_base_url, settings))
        table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if token_status == "FAIL":
        raise typer.Exit(code=1)


@app.command(name="configure")
def configure() -> None:
    """Interactive setup (stores config in the user config .env)."""

    settings = AppSettings()

    base_url = typer.prompt("API base URL", default=settings.api_base_url, show_default=True).strip()
    timeout = typer.prompt(
        "HTTP timeout (seconds)",
        default=settings.http_timeout_seconds,
        type=float,
        show_default=True,
    )

    if not base_url:
        raise typer.BadParameter("base_url is required")
    if timeout <= 0:
        raise typer.BadParameter("timeout must be greater than 0")

    env_path = write_user_env_vars(
        {
            "FIGMA_JSON_API_BASE_URL": base_url,
            "FIGMA_JSON_HTTP_TIMEOUT_SECONDS": f"{timeout:g}",
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
