"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- La salida de pedidos procesados no pasa por aquí: solo tablas y paneles.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.kind import OrderKind
from core.domain.models import DigitalOrder, PhysicalOrder, SubscriptionOrder
from core.services.dispatch import SampleOrders


def print_banner(console: Console) -> None:
    """Panel con el nombre y las variantes soportadas (la CLI lo manda a stderr)."""

    kinds = " • ".join(kind.label() for kind in OrderKind)
    body = Text.assemble(("ORDER-DISPATCH", "bold green"), "\n", (kinds, "dim"))
    console.print(Panel(Align.center(body), border_style="green", padding=(0, 2)))


def build_orders_table() -> Table:
    table = Table(title="Sample Orders", show_lines=False)
    for header, kwargs in (
        ("Kind", {"style": "green", "no_wrap": True}),
        ("Id", {"justify": "right"}),
        ("Category", {"style": "dim"}),
        ("Description", {}),
        ("Detail", {"style": "yellow"}),
    ):
        table.add_column(header, **kwargs)
    return table


def render_sample_orders(orders: SampleOrders) -> Table:
    table = build_orders_table()
    _add_order_row(table, OrderKind.DIGITAL, orders.digital, orders.digital.download_url)
    _add_order_row(table, OrderKind.PHYSICAL, orders.physical, orders.physical.shipping_address)
    _add_order_row(
        table,
        OrderKind.SUBSCRIPTION,
        orders.subscription,
        f"{orders.subscription.duration_months} months",
    )
    return table


def _add_order_row(
    table: Table,
    kind: OrderKind,
    order: DigitalOrder | PhysicalOrder | SubscriptionOrder,
    detail: str,
) -> None:
    table.add_row(kind.label(), str(order.id), order.category, order.description, detail)
