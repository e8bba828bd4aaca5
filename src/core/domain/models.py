"""Transfer objects (DTOs) de la API de Abiquo (Pydantic v2).

Por qué Pydantic aquí:
- Validación del payload en el borde y serialización camelCase sin código a mano.
- Los DTOs son registros planos e inmutables; la navegación vive en los
  objetos de dominio que los envuelven (`core.domain.wrapper`).

Nota:
- Estos modelos describen *qué* devuelve el servidor, no *cómo* se obtiene.
"""

from __future__ import annotations

import re
from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

_TRAILING_ID = re.compile(r"/(\d+)/?$")


class RESTLink(BaseModel):
    """Enlace hipermedia tal como lo sirve la API (`rel` + `href`)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    rel: str = Field(..., min_length=1)
    href: str = Field(..., min_length=1)
    type: str | None = None
    title: str | None = None

    def id_from_href(self) -> int | None:
        match = _TRAILING_ID.search(self.href)
        return int(match.group(1)) if match else None


class WireModel(BaseModel):
    """Base de todos los DTOs: alias camelCase, campos extra ignorados."""

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    MEDIA_TYPE: ClassVar[str] = "application/json"

    def to_payload(self) -> dict:
        """Serializa al formato wire (camelCase, sin nulos)."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class SingleResourceDto(WireModel):
    """Recurso individual con enlaces hipermedia."""

    links: list[RESTLink] = Field(default_factory=list)

    def search_link(self, rel: str) -> RESTLink | None:
        for link in self.links:
            if link.rel == rel:
                return link
        return None

    @property
    def edit_link(self) -> RESTLink | None:
        return self.search_link("edit")

    def id_from_link(self, rel: str) -> int | None:
        link = self.search_link(rel)
        return link.id_from_href() if link else None

    def with_links(self, *links: RESTLink) -> "SingleResourceDto":
        return self.model_copy(update={"links": [*self.links, *links]})


T = TypeVar("T", bound=SingleResourceDto)


class WrapperDto(WireModel, Generic[T]):
    """Colección paginada: `collection` + `totalSize`."""

    links: list[RESTLink] = Field(default_factory=list)
    collection: list[T] = Field(default_factory=list)
    total_size: int | None = None


# --------------------------------------------------------------------------
# Cloud
# --------------------------------------------------------------------------


class VirtualDatacenterDto(SingleResourceDto):
    MEDIA_TYPE: ClassVar[str] = "application/vnd.abiquo.virtualdatacenter+json"

    id: int | None = None
    name: str | None = None
    hypervisor_type: str | None = None


class VirtualDatacentersDto(WrapperDto[VirtualDatacenterDto]):
    MEDIA_TYPE: ClassVar[str] = "application/vnd.abiquo.virtualdatacenters+json"


class VirtualApplianceDto(SingleResourceDto):
    MEDIA_TYPE: ClassVar[str] = "application/vnd.abiquo.virtualappliance+json"

    id: int | None = None
    name: str | None = None
    state: str | None = None
    error: int | None = None


class VirtualAppliancesDto(WrapperDto[VirtualApplianceDto]):
    MEDIA_TYPE: ClassVar[str] = "application/vnd.abiquo.virtualappliances+json"


class VirtualMachineDto(SingleResourceDto):
    MEDIA_TYPE: ClassVar[str] = "application/vnd.abiquo.virtualmachine+json"

    id: int | None = None
    name: str | None = None
    label: str | None = None
    uuid: str | None = None
    state: str | None = None
    cpu: int | None = None
    ram: int | None = None
    hd_in_bytes: int | None = None


class VirtualMachinesDto(WrapperDto[VirtualMachineDto]):
    MEDIA_TYPE: ClassVar[str] = "application/vnd.abiquo.virtualmachines+json"


class VirtualMachineWithNodeExtendedDto(VirtualMachineDto):
    MEDIA_TYPE: ClassVar[str] = "application/vnd.abiquo.virtualmachinewithnodeextended+json"

    node_name: str | None = None
    user_name: str | None = None
    enterprise_name: str | None = None


class VirtualMachinesWithNodeExtendedDto(WrapperDto[VirtualMachineWithNodeExtendedDto]):
    MEDIA_TYPE: ClassVar[str] = "application/vnd.abiquo.virtualmachineswithnodeextended+json"


# --------------------------------------------------------------------------
# Enterprise
# --------------------------------------------------------------------------


class EnterpriseDto(SingleResourceDto):
    MEDIA_TYPE: ClassVar[str] = "application/vnd.abiquo.enterprise+json"

    id: int | None = None
    name: str | None = None


class EnterprisesDto(WrapperDto[EnterpriseDto]):
    MEDIA_TYPE: ClassVar[str] = "application/vnd.abiquo.enterprises+json"


class TierDto(SingleResourceDto):
    """Tier de almacenamiento de un datacenter."""

    MEDIA_TYPE: ClassVar[str] = "application/vnd.abiquo.tier+json"

    id: int | None = None
    name: str | None = None
    description: str | None = None
    enabled: bool | None = None


# --------------------------------------------------------------------------
# Apps library
# --------------------------------------------------------------------------


class VirtualMachineTemplateDto(SingleResourceDto):
    MEDIA_TYPE: ClassVar[str] = "application/vnd.abiquo.virtualmachinetemplate+json"

    id: int | None = None
    name: str | None = None
    description: str | None = None
    disk_format_type: str | None = None
    disk_file_size: int | None = None
    cpu_required: int | None = None
    ram_required: int | None = None
    hd_required: int | None = None
    shared: bool | None = None
    cost_code: int | None = None
    creation_user: str | None = None
    creation_date: str | None = None
    icon_url: str | None = None
    state: str | None = None


class VirtualMachineTemplatesDto(WrapperDto[VirtualMachineTemplateDto]):
    MEDIA_TYPE: ClassVar[str] = "application/vnd.abiquo.virtualmachinetemplates+json"


class VirtualMachineTemplatePersistentDto(SingleResourceDto):
    """Opciones para crear un template persistente.

    Enlaces esperados: `virtualdatacenter`, `tier` (opcional) y
    `virtualmachinetemplate` (el template de origen).
    """

    MEDIA_TYPE: ClassVar[str] = "application/vnd.abiquo.virtualmachinetemplatepersistent+json"

    persistent_template_name: str | None = None
    persistent_volume_name: str | None = None


class VirtualMachineTemplateRequestDto(SingleResourceDto):
    """Petición de creación de template.

    - Descarga de una definición: enlace `templateDefinition`.
    - Promoción de una instancia: enlace `virtualmachinetemplate` + `promotedName`.
    """

    MEDIA_TYPE: ClassVar[str] = "application/vnd.abiquo.virtualmachinetemplaterequest+json"

    promoted_name: str | None = None


class ConversionDto(SingleResourceDto):
    MEDIA_TYPE: ClassVar[str] = "application/vnd.abiquo.conversion+json"

    state: str | None = None
    source_format: str | None = None
    target_format: str | None = None
    source_path: str | None = None
    target_path: str | None = None
    target_size_in_bytes: int | None = None
    start_timestamp: str | None = None


class ConversionsDto(WrapperDto[ConversionDto]):
    MEDIA_TYPE: ClassVar[str] = "application/vnd.abiquo.conversions+json"


class AcceptedRequestDto(SingleResourceDto):
    """Respuesta 202 de operaciones largas: enlace `status` + mensaje."""

    MEDIA_TYPE: ClassVar[str] = "application/vnd.abiquo.acceptedrequest+json"

    entity: str | None = None

    @property
    def status_link(self) -> RESTLink | None:
        return self.search_link("status")
