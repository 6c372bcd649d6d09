"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar paneles en los comandos sueltos y en el modo `ui`.
"""

from __future__ import annotations

import typer
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.syntax import Syntax
from rich.text import Text

from core.domain.models import Severity
from core.services.selection_app import Notification, SelectionJsonApp

_SEVERITY_STYLE = {
    Severity.SUCCESS: "green",
    Severity.ERROR: "red",
}


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (solo en modo interactivo)."""

    title = Text("Figma JSON Parser", style="bold cyan")
    subtitle = Text("Token • Selection URL • Node JSON", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_notification(console: Console, notification: Notification) -> None:
    if not notification.open:
        return
    style = _SEVERITY_STYLE.get(notification.severity, "white")
    console.print(Text(notification.message, style=style))


def print_json_result(console: Console, json_text: str) -> None:
    """JSON con resaltado en terminal; texto plano si la salida es un pipe."""

    if console.is_terminal:
        console.print(Syntax(json_text, "json", word_wrap=True))
    else:
        typer.echo(json_text)


def build_token_panel(app: SelectionJsonApp) -> Panel:
    token = app.masked_token() or "(empty)"
    body = Text()
    body.append("Personal Access Token: ", style="bold")
    body.append(token + "\n")
    body.append(
        "Your token is stored in a local file. Never share your token publicly.",
        style="dim",
    )
    return Panel(body, title="Figma Access Token", border_style="cyan")


def build_selection_panel(app: SelectionJsonApp) -> Panel:
    body = Text()
    body.append("Figma Selection URL: ", style="bold")
    body.append((app.state.selection_url or "(empty)") + "\n")
    body.append(
        "Copy the link to a specific Figma element by right-clicking it in Figma and selecting 'Copy link'.",
        style="dim",
    )
    return Panel(body, title="Generate JSON from Figma Selection", border_style="cyan")


def build_result_panel(json_text: str) -> Panel:
    return Panel(Syntax(json_text, "json", word_wrap=True), title="JSON Result", border_style="green")


def render_app(console: Console, app: SelectionJsonApp) -> None:
    """Pinta el estado completo del formulario."""

    parts: list[Panel] = [build_token_panel(app), build_selection_panel(app)]
    if app.state.json_result:
        parts.append(build_result_panel(app.state.json_result))
    console.print(Group(*parts))
    print_notification(console, app.state.notification)
