"""Contrato genérico de procesadores de pedidos.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El parámetro de tipo `T` liga cada procesador a una única variante de
  pedido; el gestor (`OrderManager[T]`) hereda ese vínculo.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class OrderProcessor(Protocol[T_contra]):
    """Contrato mínimo para procesar un pedido de tipo `T`.

    Reglas de diseño:
    - `process` no devuelve nada: su efecto es la salida por consola.
    - No hay camino de error; un fallo de escritura se propaga tal cual.
    """

    def process(self, order: T_contra) -> None:
        """Procesa `order` y emite su descripción."""

        ...
