"""Interactive `ui` loop.

Render the state, ask for one action, apply it, repeat. Every failure ends
up as a notification; the loop only stops on quit (or EOF on stdin).
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from cli.ui_components import print_banner, render_app
from core.domain.models import Severity
from core.services.selection_app import SelectionJsonApp

_QUIT = "q"

_ACTIONS: dict[str, str] = {
    "1": "Edit token",
    "2": "Show/hide token",
    "3": "Save token",
    "4": "Delete token",
    "5": "Edit selection URL",
    "6": "Get JSON",
    "7": "Export JSON",
    _QUIT: "Quit",
}


def build_actions_table(app: SelectionJsonApp) -> Table:
    enabled = {
        "3": app.can_save,
        "4": app.can_delete,
        "6": app.can_fetch,
        "7": bool(app.state.json_result),
    }
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Action")
    for key, label in _ACTIONS.items():
        style = "white" if enabled.get(key, True) else "dim"
        table.add_row(key, label, style=style)
    return table


def apply_action(app: SelectionJsonApp, choice: str) -> bool:
    """Apply one menu choice. Returns False when the loop should stop."""

    if choice == _QUIT:
        return False
    if choice == "1":
        app.set_token(typer.prompt("Personal access token", default="", hide_input=True, show_default=False))
    elif choice == "2":
        app.toggle_token_visibility()
    elif choice == "3":
        app.save_token()
    elif choice == "4":
        app.delete_token()
    elif choice == "5":
        app.set_selection_url(typer.prompt("Figma selection URL", default="", show_default=False).strip())
    elif choice == "6":
        asyncio.run(app.get_json())
    elif choice == "7":
        default = app.default_export_path()
        path = typer.prompt("Export to", default=str(default))
        app.export_json(Path(path))
    else:
        app.notify(f"Unknown action: {choice!r}", Severity.ERROR)
    return True


def run_interactive(app: SelectionJsonApp, console: Console) -> None:
    print_banner(console)
    app.start()
    while True:
        render_app(console, app)
        app.close_notification()
        console.print(build_actions_table(app))
        try:
            choice = typer.prompt("Action", default=_QUIT).strip().lower()
        except typer.Abort:
            break
        if not apply_action(app, choice):
            break
