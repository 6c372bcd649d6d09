"""Application state and user actions for the selection-to-JSON flow.

The browser form kept its state in reactive hooks; here the state is an
explicit `AppState` and every button is a method on `SelectionJsonApp`.
Front-ends (the interactive CLI loop, one-shot commands, tests) call the
actions and render `app.state` afterwards. No action raises for expected
failures: the outcome is always reflected in `state.notification`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from adapters.json_exporter import export_selection_json
from core.domain.errors import FormatError, StorageError
from core.domain.models import RetrievalResult, Severity
from core.interfaces.retrieval import SelectionFetcher
from core.selection_url import resolve_selection_url
from core.token_store import TokenStore

MASK_CHAR = "•"
DEFAULT_EXPORT_DIR = Path("exports")


def sanitize_for_filename(value: str) -> str:
    """Generate a filesystem-friendly slug for exported files."""

    out: list[str] = []
    for ch in value.strip():
        if ch.isalnum() or ch in ("-", "_", "."):
            out.append(ch)
        else:
            out.append("-")
    cleaned = "".join(out).strip("-_.")
    return cleaned or "selection"


@dataclass
class Notification:
    """Transient, dismissible message shown after an action."""

    message: str = ""
    severity: Severity = Severity.SUCCESS
    open: bool = False


@dataclass
class AppState:
    token: str = ""
    show_token: bool = False
    selection_url: str = ""
    json_result: str = ""
    notification: Notification = field(default_factory=Notification)


class SelectionJsonApp:
    """Drives the token form and the selection form."""

    def __init__(self, *, token_store: TokenStore, fetcher: SelectionFetcher) -> None:
        self._token_store = token_store
        self._fetcher = fetcher
        self.state = AppState()

    # Enabling rules (the form disables buttons with these)

    @property
    def can_save(self) -> bool:
        return bool(self.state.token)

    @property
    def can_delete(self) -> bool:
        return bool(self.state.token)

    @property
    def can_fetch(self) -> bool:
        return bool(self.state.token) and bool(self.state.selection_url)

    def notify(self, message: str, severity: Severity = Severity.SUCCESS) -> None:
        self.state.notification = Notification(message=message, severity=severity, open=True)

    def close_notification(self) -> None:
        self.state.notification.open = False

    def start(self) -> None:
        """Load the previously saved token, if any."""

        try:
            saved = self._token_store.load()
        except StorageError as exc:
            self.notify(exc.message, Severity.ERROR)
            return
        if saved:
            self.state.token = saved

    def set_token(self, value: str) -> None:
        self.state.token = value

    def set_selection_url(self, value: str) -> None:
        self.state.selection_url = value

    def toggle_token_visibility(self) -> None:
        self.state.show_token = not self.state.show_token

    def masked_token(self) -> str:
        if self.state.show_token:
            return self.state.token
        return MASK_CHAR * len(self.state.token)

    def save_token(self) -> bool:
        if not self.can_save:
            self.notify("Enter a token first", Severity.ERROR)
            return False
        try:
            self._token_store.save(self.state.token)
        except StorageError as exc:
            self.notify(exc.message, Severity.ERROR)
            return False
        self.notify("Token saved successfully!")
        return True

    def delete_token(self) -> bool:
        # Idempotent: deleting an absent token is not an error.
        try:
            self._token_store.delete()
        except StorageError as exc:
            self.notify(exc.message, Severity.ERROR)
            return False
        self.state.token = ""
        self.notify("Token deleted successfully!")
        return True

    async def get_json(self) -> RetrievalResult | None:
        """Resolve the URL, fetch the node and keep the formatted JSON.

        Returns `None` when no request was sent (missing token or invalid URL).
        An empty URL is reported as an invalid URL.
        """

        if not self.state.token:
            self.notify("A token is required", Severity.ERROR)
            return None
        try:
            ref = resolve_selection_url(self.state.selection_url)
        except FormatError as exc:
            self.notify(exc.message, Severity.ERROR)
            return None

        result = await self._fetcher.fetch(self.state.token, ref)
        if result.ok and result.json_text is not None:
            self.state.json_result = result.json_text
            self.notify("JSON fetched successfully!")
        else:
            logger.debug("Retrieval failed ({}): {}", result.error_kind, result.message)
            self.notify(result.message or "Error fetching JSON", Severity.ERROR)
        return result

    def default_export_path(self, directory: Path = DEFAULT_EXPORT_DIR) -> Path:
        try:
            ref = resolve_selection_url(self.state.selection_url)
        except FormatError:
            return directory / "selection.json"
        return directory / f"{sanitize_for_filename(f'{ref.file_id}_{ref.node_id}')}.json"

    def export_json(self, output_path: Path) -> Path | None:
        if not self.state.json_result:
            self.notify("Nothing to export yet", Severity.ERROR)
            return None
        try:
            written = export_selection_json(json_text=self.state.json_result, output_path=output_path)
        except OSError as exc:
            self.notify(f"Could not export JSON: {exc}", Severity.ERROR)
            return None
        self.notify(f"JSON exported to {written}")
        return written
