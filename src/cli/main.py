"""Figma JSON CLI (Typer).

Commands are thin: they build a `SelectionJsonApp`, trigger one action and
print the resulting notification. JSON goes to stdout, messages to stderr.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.text import Text

from adapters.figma_client import FigmaNodesClient
from adapters.storage import JsonFileStorage
from cli import doctor
from cli.interactive import run_interactive
from cli.ui_components import print_json_result, print_notification
from core.config import AppSettings
from core.logging_setup import configure_logging
from core.services.selection_app import SelectionJsonApp
from core.token_store import TokenStore

EXIT_FAILURE = 1
EXIT_INVALID_URL = 2

app = typer.Typer(
    no_args_is_help=True,
    help="Fetch the raw JSON of a Figma selection using a personal access token.",
)
token_app = typer.Typer(no_args_is_help=True, help="Manage the saved Figma access token.")
app.add_typer(token_app, name="token")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def build_app(settings: AppSettings) -> SelectionJsonApp:
    store = TokenStore(JsonFileStorage(settings.storage_path), key=settings.token_key)
    return SelectionJsonApp(token_store=store, fetcher=FigmaNodesClient(settings))


def _finish(ui_app: SelectionJsonApp, ok: bool, *, code: int = EXIT_FAILURE) -> None:
    print_notification(_err_console, ui_app.state.notification)
    if not ok:
        raise typer.Exit(code=code)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging on stderr."),
) -> None:
    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)


@token_app.command("save")
def token_save(
    token: Optional[str] = typer.Argument(None, help="Token value. Prompted (hidden) when omitted."),
) -> None:
    """Save the personal access token, overwriting any previous one."""

    value = token if token is not None else typer.prompt("Personal access token", hide_input=True)
    ui_app = build_app(AppSettings())
    ui_app.set_token(value)
    _finish(ui_app, ui_app.save_token())


@token_app.command("delete")
def token_delete() -> None:
    """Delete the saved token (no-op when nothing is saved)."""

    ui_app = build_app(AppSettings())
    _finish(ui_app, ui_app.delete_token())


@token_app.command("show")
def token_show(
    reveal: bool = typer.Option(False, "--reveal", help="Print the token in clear text."),
) -> None:
    """Show the saved token (masked by default)."""

    ui_app = build_app(AppSettings())
    ui_app.start()
    if ui_app.state.notification.open:
        _finish(ui_app, False)
    if not ui_app.state.token:
        _err_console.print(Text("No token saved.", style="yellow"))
        raise typer.Exit(code=EXIT_FAILURE)
    if reveal:
        ui_app.toggle_token_visibility()
    typer.echo(ui_app.masked_token())


@app.command("get")
def get_json(
    url: str = typer.Argument(..., help="Figma selection URL ('Copy link' in Figma)."),
    token: Optional[str] = typer.Option(None, "--token", "-t", help="Use this token instead of the saved one."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also write the JSON to this file."),
    save: bool = typer.Option(False, "--save", help="Also write the JSON under ./exports/."),
) -> None:
    """Fetch the JSON of the selected node and print it."""

    settings = AppSettings()
    ui_app = build_app(settings)
    if token:
        ui_app.set_token(token)
    else:
        ui_app.start()
        if ui_app.state.notification.open:
            _finish(ui_app, False)

    if not ui_app.state.token:
        _err_console.print(
            Text("No token saved. Run `figma-json token save` or pass --token.", style="red")
        )
        raise typer.Exit(code=EXIT_FAILURE)

    ui_app.set_selection_url(url.strip())
    result = asyncio.run(ui_app.get_json())
    if result is None:
        _finish(ui_app, False, code=EXIT_INVALID_URL)
        return
    if not result.ok:
        _finish(ui_app, False)
        return

    print_json_result(_console, ui_app.state.json_result)

    target = output or (ui_app.default_export_path() if save else None)
    if target is not None:
        _finish(ui_app, ui_app.export_json(target) is not None)


@app.command("ui")
def ui() -> None:
    """Interactive mode: the token form and the selection form in one loop."""

    run_interactive(build_app(AppSettings()), _console)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
