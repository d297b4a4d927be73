"""Procesador: pedidos físicos.

La dirección se escribe entre comillas simples y sin normalizar (puede
contener comas, p.ej. `c/Goya, 12`).
"""

from __future__ import annotations

from adapters.processors.base import ConsoleWriter
from core.domain.models import PhysicalOrder
from core.interfaces.processor import OrderProcessor


class PhysicalOrderProcessor(ConsoleWriter, OrderProcessor[PhysicalOrder]):
    """Describe un pedido físico junto con su dirección de envío."""

    def describe(self, order: PhysicalOrder) -> str:
        return f"Processing physical order: {order.description} with address '{order.shipping_address}'."

    def process(self, order: PhysicalOrder) -> None:
        self.write_line(self.describe(order))
