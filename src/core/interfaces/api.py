"""Contratos de la API REST de Abiquo.

Por qué Protocol:
- Cada método mapea una operación sobre un recurso REST; la implementación
  httpx vive en `adapters.api` y los tests pueden sustituirla por fakes.

Reglas comunes:
- Los `get_*` devuelven `None` si el recurso no existe (404).
- Cualquier otro fallo se señala con `core.errors.TransportError`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import (
    AcceptedRequestDto,
    ConversionDto,
    ConversionsDto,
    EnterpriseDto,
    EnterprisesDto,
    VirtualApplianceDto,
    VirtualAppliancesDto,
    VirtualDatacenterDto,
    VirtualDatacentersDto,
    VirtualMachineDto,
    VirtualMachinesDto,
    VirtualMachinesWithNodeExtendedDto,
    VirtualMachineTemplateDto,
    VirtualMachineTemplatePersistentDto,
    VirtualMachineTemplateRequestDto,
    VirtualMachineTemplatesDto,
)
from core.domain.options import (
    ConversionOptions,
    VirtualDatacenterOptions,
    VirtualMachineTemplateOptions,
)


@runtime_checkable
class CloudApi(Protocol):
    """Virtual datacenters, virtual appliances and virtual machines."""

    def list_virtual_datacenters(
        self, options: VirtualDatacenterOptions | None = None
    ) -> VirtualDatacentersDto: ...

    def get_virtual_datacenter(self, virtual_datacenter_id: int) -> VirtualDatacenterDto | None: ...

    def list_virtual_appliances(self, virtual_datacenter: VirtualDatacenterDto) -> VirtualAppliancesDto: ...

    def get_virtual_appliance(
        self, virtual_datacenter: VirtualDatacenterDto, virtual_appliance_id: int
    ) -> VirtualApplianceDto | None: ...

    def get_virtual_datacenter_of(self, virtual_appliance: VirtualApplianceDto) -> VirtualDatacenterDto | None:
        """Follow the `virtualdatacenter` link of an appliance."""
        ...

    def list_virtual_machines(self, virtual_appliance: VirtualApplianceDto) -> VirtualMachinesDto: ...

    def list_all_virtual_machines(self) -> VirtualMachinesWithNodeExtendedDto:
        """Every virtual machine visible to the caller, across appliances."""
        ...

    def get_virtual_appliance_of(self, virtual_machine: VirtualMachineDto) -> VirtualApplianceDto | None: ...


@runtime_checkable
class EnterpriseApi(Protocol):
    def list_enterprises(self) -> EnterprisesDto: ...

    def get_enterprise(self, enterprise_id: int) -> EnterpriseDto | None: ...


@runtime_checkable
class VirtualMachineTemplateApi(Protocol):
    """Templates of an enterprise inside a datacenter repository.

    Creation and conversion are long-running on the server side: they answer
    with an `AcceptedRequestDto` whose `status` link must be polled separately.
    """

    def list_virtual_machine_templates(
        self,
        enterprise_id: int,
        datacenter_repository_id: int,
        options: VirtualMachineTemplateOptions | None = None,
    ) -> VirtualMachineTemplatesDto: ...

    def get_virtual_machine_template(
        self, enterprise_id: int, datacenter_repository_id: int, virtual_machine_template_id: int
    ) -> VirtualMachineTemplateDto | None: ...

    def update_virtual_machine_template(self, template: VirtualMachineTemplateDto) -> VirtualMachineTemplateDto: ...

    def delete_virtual_machine_template(self, template: VirtualMachineTemplateDto) -> None: ...

    def create_persistent_virtual_machine_template(
        self,
        enterprise_id: int,
        datacenter_repository_id: int,
        persistent_options: VirtualMachineTemplatePersistentDto,
    ) -> AcceptedRequestDto: ...

    def create_virtual_machine_template(
        self,
        enterprise_id: int,
        datacenter_repository_id: int,
        template_request: VirtualMachineTemplateRequestDto,
    ) -> AcceptedRequestDto: ...

    def list_conversions(
        self, template: VirtualMachineTemplateDto, options: ConversionOptions | None = None
    ) -> ConversionsDto: ...

    def get_conversion(self, template: VirtualMachineTemplateDto, target_format: str) -> ConversionDto | None: ...

    def request_conversion(
        self, template: VirtualMachineTemplateDto, target_format: str, conversion: ConversionDto
    ) -> AcceptedRequestDto: ...


@runtime_checkable
class AbiquoApi(Protocol):
    """Agregado de features; es lo que el contexto expone como `context.api`."""

    @property
    def cloud(self) -> CloudApi: ...

    @property
    def enterprise(self) -> EnterpriseApi: ...

    @property
    def templates(self) -> VirtualMachineTemplateApi: ...

    def close(self) -> None: ...
