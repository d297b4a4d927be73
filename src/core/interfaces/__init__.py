"""Contratos del Core.

`processor.OrderProcessor` es el único: lo implementan los procesadores de
`adapters.processors` y lo consume `core.services.order_manager`.
"""
