"""Gestor genérico de pedidos.

`OrderManager[T]` envuelve un único `OrderProcessor[T]` y reenvía cada
pedido. Es el punto donde añadir comportamiento transversal (logging,
métricas, auditoría) sin tocar los procesadores: hoy emite un registro DEBUG
y admite hooks opcionales antes/después del reenvío.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from core.interfaces.processor import OrderProcessor
from core.log_config import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


@dataclass
class ManagerHooks:
    """Callbacks opcionales antes y después de cada reenvío."""

    before: Callable[[object], None] | None = None
    after: Callable[[object], None] | None = None


class OrderManager(Generic[T]):
    """Liga un procesador a las llamadas de un tipo de pedido.

    El procesador se fija en la construcción y no se puede sustituir.
    """

    def __init__(self, processor: OrderProcessor[T], *, hooks: ManagerHooks | None = None) -> None:
        self._processor = processor
        self._hooks = hooks or ManagerHooks()

    @property
    def processor(self) -> OrderProcessor[T]:
        return self._processor

    def handle(self, order: T) -> None:
        """Reenvía `order` al procesador asociado."""

        logger.debug(
            "handling %s via %s",
            type(order).__name__,
            type(self._processor).__name__,
        )
        if self._hooks.before:
            self._hooks.before(order)
        self._processor.process(order)
        if self._hooks.after:
            self._hooks.after(order)
