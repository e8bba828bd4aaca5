"""Modelos y entidades del dominio.

- `models`: DTOs de la API REST (Pydantic v2), tal cual viajan por la red.
- `wrapper` y los módulos de entidades: objetos de dominio que envuelven un DTO
  y navegan a sus recursos relacionados a través del contexto.
"""
