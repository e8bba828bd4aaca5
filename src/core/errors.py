"""Errores del cliente.

- `ValidationError`: input requerido ausente; se lanza antes de tocar la red.
- `TransportError`: la llamada HTTP falló (red, status, deserialización).
- `InvalidDtoError`: el wrapper recibió un DTO sin identidad o de otro tipo.

El "no encontrado" no es un error: `None` en gets y colección vacía en listados.
"""

from __future__ import annotations

from typing import Any

# Prefijos de mensaje compartidos por las validaciones de precondición.
NULL_RESOURCE = "The resource cannot be null: "
MISSING_REQUIRED_FIELD = "Missing required field"


class AbiquoError(Exception):
    """Base de todos los errores del cliente."""


class ValidationError(AbiquoError):
    """A required input is missing. `field` names the offending input."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class TransportError(AbiquoError):
    """The underlying API call failed."""

    def __init__(
        self,
        message: str,
        *,
        method: str | None = None,
        url: str | None = None,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url
        self.status_code = status_code
        self.body = body


class InvalidDtoError(AbiquoError):
    """A DTO handed to the wrapper breaks the upstream contract."""


def check_not_none(value: Any, name: str) -> Any:
    """Devuelve `value` o lanza `ValidationError` si es `None`."""

    if value is None:
        raise ValidationError(f"{NULL_RESOURCE}{name}", field=name)
    return value


def check_required_field(value: Any, field: str, owner: str) -> Any:
    if value is None:
        raise ValidationError(f"{MISSING_REQUIRED_FIELD} {field} in {owner}", field=field)
    return value
