"""Procesador: pedidos de suscripción."""

from __future__ import annotations

from adapters.processors.base import ConsoleWriter
from core.domain.models import SubscriptionOrder
from core.interfaces.processor import OrderProcessor


class SubscriptionOrderProcessor(ConsoleWriter, OrderProcessor[SubscriptionOrder]):
    """Describe una suscripción con su duración en meses (sin normalizar)."""

    def describe(self, order: SubscriptionOrder) -> str:
        return (
            f"Processing subscription order: {order.description}, "
            f"duration = {order.duration_months} months."
        )

    def process(self, order: SubscriptionOrder) -> None:
        self.write_line(self.describe(order))
