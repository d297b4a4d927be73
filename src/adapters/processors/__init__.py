"""Procesadores de pedidos (implementaciones concretas).

Por qué un paquete:
- Agrupa un módulo por variante de pedido.
- Cada módulo implementa `core.interfaces.processor.OrderProcessor`.
"""

from adapters.processors.digital import DigitalOrderProcessor
from adapters.processors.physical import PhysicalOrderProcessor
from adapters.processors.subscription import SubscriptionOrderProcessor

__all__ = [
	"DigitalOrderProcessor",
	"PhysicalOrderProcessor",
	"SubscriptionOrderProcessor",
]
