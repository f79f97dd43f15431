"""Configuración de logging.

Los módulos usan `logging.getLogger(__name__)`; la CLI llama una sola vez a
`configure_logging()` para renderizar los registros con Rich en stderr.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from core.config import AppSettings

_HANDLER_NAME = "dog-client-rich"


def configure_logging(level: str | int | None = None, *, console: Console | None = None) -> None:
    """Instala un `RichHandler` en el root logger (idempotente).

    `level` tiene prioridad sobre `AppSettings.log_level`.
    """

    if level is None:
        level = AppSettings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(level)
            return

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
    # httpx loguea cada request en INFO; lo dejamos en WARNING salvo en DEBUG.
    logging.getLogger("httpx").setLevel(logging.DEBUG if level <= logging.DEBUG else logging.WARNING)
