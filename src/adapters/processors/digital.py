"""Procesador: pedidos digitales."""

from __future__ import annotations

from adapters.processors.base import ConsoleWriter
from core.domain.models import DigitalOrder
from core.interfaces.processor import OrderProcessor


class DigitalOrderProcessor(ConsoleWriter, OrderProcessor[DigitalOrder]):
    """Describe un pedido digital junto con su URL de descarga."""

    def describe(self, order: DigitalOrder) -> str:
        return f"Processing digital order: {order.description} with url '{order.download_url}'."

    def process(self, order: DigitalOrder) -> None:
        self.write_line(self.describe(order))
