"""Contrato de las estrategias de listado."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)

# Predicado client-side sobre el tipo de dominio ya envuelto.
Predicate = Callable[[Any], bool]


@runtime_checkable
class ListRootEntity(Protocol[T_co]):
    """Enumera una colección raíz (sin padre) de objetos de dominio.

    `selector` admite:
    - `None`: toda la colección.
    - un valor de opciones reconocido por el endpoint.
    - un callable: filtro client-side sobre el objeto envuelto.
    - una colección de IDs: solo los encontrados, en orden.
    """

    def execute(self, selector: Any = None) -> Iterable[T_co]: ...
