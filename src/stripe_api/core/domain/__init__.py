"""Modelos y entidades del dominio.

- Estructuras de datos puras y estrictas (Pydantic v2): recursos remotos,
  el sobre de paginación y los parámetros de cada operación.
- El dominio no conoce HTTP ni la CLI.
"""
