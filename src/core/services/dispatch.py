"""Driver del ejemplo de despacho genérico.

Construye un gestor por variante, un pedido de muestra por variante y los
procesa en orden fijo: digital, físico, suscripción. Sin bucles ni ramas:
la secuencia queda determinada de antemano.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console

from adapters.processors import (
    DigitalOrderProcessor,
    PhysicalOrderProcessor,
    SubscriptionOrderProcessor,
)
from core.domain.models import DigitalOrder, PhysicalOrder, SubscriptionOrder
from core.log_config import get_logger
from core.services.order_manager import ManagerHooks, OrderManager

logger = get_logger(__name__)


@dataclass(frozen=True)
class OrderManagers:
    """Un gestor por variante de pedido."""

    digital: OrderManager[DigitalOrder]
    physical: OrderManager[PhysicalOrder]
    subscription: OrderManager[SubscriptionOrder]


@dataclass(frozen=True)
class SampleOrders:
    """Pedidos literales usados por el ejemplo."""

    digital: DigitalOrder
    physical: PhysicalOrder
    subscription: SubscriptionOrder


def build_managers(
    console: Console | None = None,
    *,
    hooks: ManagerHooks | None = None,
) -> OrderManagers:
    """Crea los tres gestores, todos escribiendo en la misma consola."""

    return OrderManagers(
        digital=OrderManager(DigitalOrderProcessor(console), hooks=hooks),
        physical=OrderManager(PhysicalOrderProcessor(console), hooks=hooks),
        subscription=OrderManager(SubscriptionOrderProcessor(console), hooks=hooks),
    )


def sample_orders() -> SampleOrders:
    return SampleOrders(
        digital=DigitalOrder(
            id=1,
            category="digital",
            description="Kotlin e-book",
            download_url="www.downloads.com",
        ),
        physical=PhysicalOrder(
            id=2,
            category="physical",
            description="Printed Kotlin book",
            shipping_address="c/Goya, 12",
        ),
        subscription=SubscriptionOrder(
            id=3,
            category="subscription",
            description="Kotlin course subscription",
            duration_months=12,
        ),
    )


def run(
    managers: OrderManagers | None = None,
    orders: SampleOrders | None = None,
) -> None:
    """Procesa los tres pedidos de muestra en orden fijo."""

    managers = managers or build_managers()
    orders = orders or sample_orders()

    logger.debug("dispatching sample orders")
    managers.digital.handle(orders.digital)
    managers.physical.handle(orders.physical)
    managers.subscription.handle(orders.subscription)
