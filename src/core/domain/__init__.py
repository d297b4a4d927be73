"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras e inmutables (Pydantic v2).
- El dominio no conoce la consola ni la CLI: solo qué es un pedido.
"""
