"""Configuración de logging.

Los registros van siempre a stderr mediante `RichHandler`; stdout queda
reservado para las líneas de los pedidos procesados.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_ROOT_LOGGER = "order_dispatch"

_handler: RichHandler | None = None


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Configura el logger raíz de la aplicación.

    Llamadas repetidas sustituyen el handler anterior en lugar de acumularlos.
    """

    global _handler

    logger = logging.getLogger(_ROOT_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    _handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(_handler)
    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger hijo del logger de la aplicación (`order_dispatch.<name>`)."""

    return logging.getLogger(f"{_ROOT_LOGGER}.{name}")
