"""Configuración de logging (loguru).

Un único sink a stderr para que stdout quede libre para el JSON.
"""

from __future__ import annotations

import sys

from loguru import logger

_FORMAT = "{time:HH:mm:ss} | {level: <8} | {name} - {message}"


def _stderr_sink(message: str) -> None:
    # sys.stderr se resuelve en cada escritura (CliRunner/pytest lo sustituyen).
    sys.stderr.write(message)


def configure_logging(level: str = "WARNING") -> None:
    logger.remove()
    logger.add(_stderr_sink, level=level.upper(), format=_FORMAT)
