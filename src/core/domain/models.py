"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Documentación autocontenida de cada campo (Field) y modelos inmutables
  (`frozen=True`) sin escribir `__init__`/`__eq__` a mano.
- Acepta tanto snake_case como los nombres camelCase de origen
  (`downloadUrl`, `shippingAddress`, `durationMonths`).

Nota:
- Sin restricciones de negocio: `category` es informativo y no se contrasta
  con el tipo del pedido; `duration_months` admite cero o negativos.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class _OrderBase(BaseModel):
    """Campos comunes a todas las variantes de pedido."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(
        ...,
        description="Identificador del pedido (no se comprueba unicidad).",
    )
    category: str = Field(
        ...,
        description="Etiqueta de categoría; dato informativo, no se valida.",
    )
    description: str = Field(
        ...,
        description="Descripción legible del pedido.",
    )


class DigitalOrder(_OrderBase):
    """Pedido de un producto descargable."""

    download_url: str = Field(
        ...,
        alias="downloadUrl",
        description="URL de descarga del producto.",
    )


class PhysicalOrder(_OrderBase):
    """Pedido que requiere envío."""

    shipping_address: str = Field(
        ...,
        alias="shippingAddress",
        description="Dirección de envío.",
    )


class SubscriptionOrder(_OrderBase):
    """Pedido de suscripción por meses."""

    duration_months: int = Field(
        ...,
        alias="durationMonths",
        description="Duración de la suscripción en meses (sin límites).",
    )
