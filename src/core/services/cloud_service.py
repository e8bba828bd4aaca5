"""High level Abiquo cloud operations.

`CloudService` is the single entry point application code uses to list and
look up virtual datacenters, virtual appliances, virtual machines and
enterprises. It composes the listing strategies with the domain wrapper and
applies predicates client-side where the API has no server-side filter.

Not-found is soft: `get_*` and `find_*` return `None`, list operations
return an empty collection.
"""

from __future__ import annotations

from typing import Callable, Sequence

from core.context import ApiContext
from core.domain.cloud import VirtualAppliance, VirtualDatacenter, VirtualMachine
from core.domain.enterprise import Enterprise
from core.domain.options import VirtualDatacenterOptions
from core.domain.wrapper import wrap, wrap_all
from core.errors import check_not_none, check_required_field
from core.strategy.cloud import ListVirtualAppliances, ListVirtualDatacenters


class CloudService:
    def __init__(
        self,
        context: ApiContext,
        list_virtual_datacenters: ListVirtualDatacenters,
        list_virtual_appliances: ListVirtualAppliances,
    ) -> None:
        self.context = check_not_none(context, "context")
        self.list_virtual_datacenters_strategy = check_not_none(
            list_virtual_datacenters, "list_virtual_datacenters"
        )
        self.list_virtual_appliances_strategy = check_not_none(list_virtual_appliances, "list_virtual_appliances")

    @classmethod
    def from_context(cls, context: ApiContext) -> "CloudService":
        """Wire the default strategies around `context`."""

        list_vdcs = ListVirtualDatacenters(context)
        return cls(context, list_vdcs, ListVirtualAppliances(context, list_vdcs))

    # ------------------------------------------------------------------
    # Virtual datacenters
    # ------------------------------------------------------------------

    def list_virtual_datacenters(
        self, predicate: Callable[[VirtualDatacenter], bool] | None = None
    ) -> list[VirtualDatacenter]:
        return self.list_virtual_datacenters_strategy.execute(predicate)

    def list_virtual_datacenters_for_enterprise(self, enterprise: Enterprise) -> list[VirtualDatacenter]:
        """Virtual datacenters of one enterprise, filtered server-side."""

        check_not_none(enterprise, Enterprise.__name__)
        check_required_field(enterprise.id, "id", Enterprise.__name__)

        options = VirtualDatacenterOptions(enterprise_id=enterprise.id)
        return self.list_virtual_datacenters_strategy.execute(options)

    def get_virtual_datacenter(self, virtual_datacenter_id: int) -> VirtualDatacenter | None:
        dto = self.context.api.cloud.get_virtual_datacenter(virtual_datacenter_id)
        return None if dto is None else wrap(self.context, VirtualDatacenter, dto)

    def get_virtual_datacenters(self, virtual_datacenter_ids: Sequence[int]) -> list[VirtualDatacenter]:
        """Only the IDs that exist are returned; unknown IDs are skipped."""

        check_not_none(virtual_datacenter_ids, "virtual_datacenter_ids")
        return self.list_virtual_datacenters_strategy.execute(list(virtual_datacenter_ids))

    def find_virtual_datacenter(self, predicate: Callable[[VirtualDatacenter], bool]) -> VirtualDatacenter | None:
        return next(iter(self.list_virtual_datacenters(predicate)), None)

    # ------------------------------------------------------------------
    # Virtual appliances
    # ------------------------------------------------------------------

    def list_virtual_appliances(
        self, predicate: Callable[[VirtualAppliance], bool] | None = None
    ) -> list[VirtualAppliance]:
        return self.list_virtual_appliances_strategy.execute(predicate)

    def find_virtual_appliance(self, predicate: Callable[[VirtualAppliance], bool]) -> VirtualAppliance | None:
        return next(iter(self.list_virtual_appliances(predicate)), None)

    # ------------------------------------------------------------------
    # Virtual machines
    # ------------------------------------------------------------------

    def list_virtual_machines(
        self, predicate: Callable[[VirtualMachine], bool] | None = None
    ) -> list[VirtualMachine]:
        dto = self.context.api.cloud.list_all_virtual_machines()
        vms = wrap_all(self.context, VirtualMachine, dto.collection)
        return vms if predicate is None else [vm for vm in vms if predicate(vm)]

    def find_virtual_machine(self, predicate: Callable[[VirtualMachine], bool]) -> VirtualMachine | None:
        return next(iter(self.list_virtual_machines(predicate)), None)

    # ------------------------------------------------------------------
    # Enterprises
    # ------------------------------------------------------------------

    def list_enterprises(self, predicate: Callable[[Enterprise], bool] | None = None) -> list[Enterprise]:
        dto = self.context.api.enterprise.list_enterprises()
        enterprises = wrap_all(self.context, Enterprise, dto.collection)
        return enterprises if predicate is None else [e for e in enterprises if predicate(e)]

    def get_enterprise(self, enterprise_id: int) -> Enterprise | None:
        dto = self.context.api.enterprise.get_enterprise(enterprise_id)
        return None if dto is None else wrap(self.context, Enterprise, dto)

    def find_enterprise(self, predicate: Callable[[Enterprise], bool]) -> Enterprise | None:
        return next(iter(self.list_enterprises(predicate)), None)
