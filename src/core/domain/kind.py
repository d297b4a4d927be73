"""Tipos de pedido conocidos por la aplicación.

Vive en el dominio para que la CLI etiquete pedidos sin importar los
procesadores concretos.
"""

from __future__ import annotations

from enum import Enum


class OrderKind(str, Enum):
    """Conjunto cerrado de variantes de pedido."""

    DIGITAL = "digital"
    PHYSICAL = "physical"
    SUBSCRIPTION = "subscription"

    def label(self) -> str:
        return self.value.capitalize()
