"""Opciones de consulta (filtros server-side).

Valores inmutables que se traducen a query params del endpoint. Solo se
envían los campos definidos.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class QueryOptions(BaseModel):
    """Base común: pistas de paginación `startwith` y `limit`."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # nombre del campo -> nombre del query param
    query_names: ClassVar[dict[str, str]] = {
        "start_with": "startwith",
        "limit": "limit",
    }

    start_with: int | None = Field(default=None, ge=0)
    limit: int | None = Field(default=None, ge=0)

    def to_query_params(self) -> dict[str, str]:
        names: dict[str, str] = {}
        for cls in reversed(type(self).__mro__):
            names.update(vars(cls).get("query_names", {}))

        params: dict[str, str] = {}
        for field_name, value in self:
            if value is None:
                continue
            key = names.get(field_name, field_name)
            params[key] = str(value).lower() if isinstance(value, bool) else str(value)
        return params


class VirtualDatacenterOptions(QueryOptions):
    """Filtra virtual datacenters por enterprise y/o datacenter físico."""

    query_names: ClassVar[dict[str, str]] = {
        "enterprise_id": "enterprise",
        "datacenter_id": "datacenter",
    }

    enterprise_id: int | None = None
    datacenter_id: int | None = None


class VirtualMachineTemplateOptions(QueryOptions):
    query_names: ClassVar[dict[str, str]] = {
        "hypervisor_type": "hypervisorTypeName",
        "category_name": "categoryName",
        "virtual_machine_template_id": "idTemplate",
        "shared": "shared",
    }

    hypervisor_type: str | None = None
    category_name: str | None = None
    virtual_machine_template_id: int | None = None
    shared: bool | None = None


class ConversionOptions(QueryOptions):
    """Filtra conversiones compatibles con un hipervisor o en un estado."""

    query_names: ClassVar[dict[str, str]] = {
        "hypervisor_type": "hypervisor",
        "conversion_state": "state",
    }

    hypervisor_type: str | None = None
    conversion_state: str | None = None
