"""Exportación del JSON recuperado a disco.

Sustituye al "copiar al portapapeles" del formulario: el texto se escribe
tal cual se mostró (UTF-8, salto de línea final).
"""

from __future__ import annotations

from pathlib import Path


def export_selection_json(*, json_text: str, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json_text + "\n", encoding="utf-8")
    return output_path
