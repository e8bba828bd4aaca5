"""Cloud API sobre httpx: /cloud/virtualdatacenters y /cloud/virtualmachines."""

from __future__ import annotations

from adapters.http_client import RestClient
from core.domain.models import (
    SingleResourceDto,
    VirtualApplianceDto,
    VirtualAppliancesDto,
    VirtualDatacenterDto,
    VirtualDatacentersDto,
    VirtualMachineDto,
    VirtualMachinesDto,
    VirtualMachinesWithNodeExtendedDto,
)
from core.domain.options import VirtualDatacenterOptions
from core.errors import check_not_none, check_required_field


def link_href(dto: SingleResourceDto, rel: str) -> str:
    """`href` del enlace `rel`; un DTO sin él viola el contrato del servidor."""

    link = dto.search_link(rel)
    check_required_field(link, f"link {rel}", type(dto).__name__)
    return link.href


class HttpCloudApi:
    def __init__(self, rest: RestClient) -> None:
        self._rest = rest

    def list_virtual_datacenters(self, options: VirtualDatacenterOptions | None = None) -> VirtualDatacentersDto:
        params = options.to_query_params() if options else None
        return self._rest.get_required("/cloud/virtualdatacenters", VirtualDatacentersDto, params=params)

    def get_virtual_datacenter(self, virtual_datacenter_id: int) -> VirtualDatacenterDto | None:
        check_not_none(virtual_datacenter_id, "virtual_datacenter_id")
        return self._rest.get(
            f"/cloud/virtualdatacenters/{virtual_datacenter_id}", VirtualDatacenterDto, null_on_404=True
        )

    def list_virtual_appliances(self, virtual_datacenter: VirtualDatacenterDto) -> VirtualAppliancesDto:
        check_not_none(virtual_datacenter, "virtual_datacenter")
        href = link_href(virtual_datacenter, "virtualappliances")
        return self._rest.get_required(href, VirtualAppliancesDto)

    def get_virtual_appliance(
        self, virtual_datacenter: VirtualDatacenterDto, virtual_appliance_id: int
    ) -> VirtualApplianceDto | None:
        check_not_none(virtual_datacenter, "virtual_datacenter")
        check_not_none(virtual_appliance_id, "virtual_appliance_id")
        href = link_href(virtual_datacenter, "virtualappliances")
        return self._rest.get(f"{href.rstrip('/')}/{virtual_appliance_id}", VirtualApplianceDto, null_on_404=True)

    def get_virtual_datacenter_of(self, virtual_appliance: VirtualApplianceDto) -> VirtualDatacenterDto | None:
        check_not_none(virtual_appliance, "virtual_appliance")
        href = link_href(virtual_appliance, "virtualdatacenter")
        return self._rest.get(href, VirtualDatacenterDto, null_on_404=True)

    def list_virtual_machines(self, virtual_appliance: VirtualApplianceDto) -> VirtualMachinesDto:
        check_not_none(virtual_appliance, "virtual_appliance")
        href = link_href(virtual_appliance, "virtualmachines")
        return self._rest.get_required(href, VirtualMachinesDto)

    def list_all_virtual_machines(self) -> VirtualMachinesWithNodeExtendedDto:
        return self._rest.get_required("/cloud/virtualmachines", VirtualMachinesWithNodeExtendedDto)

    def get_virtual_appliance_of(self, virtual_machine: VirtualMachineDto) -> VirtualApplianceDto | None:
        check_not_none(virtual_machine, "virtual_machine")
        href = link_href(virtual_machine, "virtualappliance")
        return self._rest.get(href, VirtualApplianceDto, null_on_404=True)
