"""Envoltorio DTO -> objeto de dominio.

Un objeto de dominio es un DTO ligado al `ApiContext` que lo originó, lo que
permite navegar a recursos relacionados. Envolver nunca hace llamadas de red.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Generic, Iterable, TypeVar

from core.domain.models import SingleResourceDto
from core.errors import InvalidDtoError

if TYPE_CHECKING:
    from core.context import ApiContext
    from core.interfaces.api import AbiquoApi

D = TypeVar("D", bound=SingleResourceDto)
W = TypeVar("W", bound="DomainWrapper[Any]")


class DomainWrapper(Generic[D]):
    """Base de los objetos de dominio.

    Cada subclase declara el DTO que acepta (`dto_type`) y el campo que
    actúa como identidad (`identity_field`). Igualdad y hash van por
    (tipo, identidad).
    """

    dto_type: ClassVar[type[SingleResourceDto]] = SingleResourceDto
    identity_field: ClassVar[str] = "id"

    def __init__(self, context: "ApiContext", target: D) -> None:
        self._context = context
        self._target = target

    @property
    def context(self) -> "ApiContext":
        return self._context

    @property
    def api(self) -> "AbiquoApi":
        return self._context.api

    @property
    def identity(self) -> Any:
        return getattr(self._target, self.identity_field)

    def unwrap(self) -> D:
        return self._target

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DomainWrapper):
            return NotImplemented
        return type(self) is type(other) and self.identity == other.identity

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.identity))

    def __repr__(self) -> str:
        name = getattr(self._target, "name", None)
        return f"{type(self).__name__}({self.identity_field}={self.identity!r}, name={name!r})"


def wrap(context: "ApiContext", target_type: type[W], dto: SingleResourceDto | None) -> W:
    """Envuelve un DTO en un objeto de dominio de tipo `target_type`.

    Lanza `InvalidDtoError` si el DTO es `None`, no es del tipo esperado o
    no trae su identidad.
    """

    if dto is None:
        raise InvalidDtoError(f"Cannot wrap a null {target_type.dto_type.__name__}")
    if not isinstance(dto, target_type.dto_type):
        raise InvalidDtoError(
            f"{target_type.__name__} wraps {target_type.dto_type.__name__}, got {type(dto).__name__}"
        )
    if getattr(dto, target_type.identity_field, None) is None:
        raise InvalidDtoError(
            f"{type(dto).__name__} has no {target_type.identity_field}; cannot wrap as {target_type.__name__}"
        )
    return target_type(context, dto)


def wrap_all(
    context: "ApiContext",
    target_type: type[W],
    dtos: Iterable[SingleResourceDto] | None,
) -> list[W]:
    """Envuelve una secuencia preservando el orden. Vacío -> lista vacía."""

    return [wrap(context, target_type, dto) for dto in dtos or ()]


def unwrap_all(objects: Iterable[DomainWrapper[D]]) -> list[D]:
    return [obj.unwrap() for obj in objects]
