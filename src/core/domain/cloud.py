"""Objetos de dominio de cloud: virtual datacenters, appliances y máquinas."""

from __future__ import annotations

from typing import Callable, Iterable

from core.domain.models import (
    VirtualApplianceDto,
    VirtualDatacenterDto,
    VirtualMachineDto,
)
from core.domain.wrapper import DomainWrapper, wrap, wrap_all


class VirtualDatacenter(DomainWrapper[VirtualDatacenterDto]):
    dto_type = VirtualDatacenterDto

    @property
    def id(self) -> int | None:
        return self._target.id

    @property
    def name(self) -> str | None:
        return self._target.name

    @property
    def hypervisor_type(self) -> str | None:
        return self._target.hypervisor_type

    @property
    def enterprise_id(self) -> int | None:
        return self._target.id_from_link("enterprise")

    def list_virtual_appliances(
        self, predicate: Callable[["VirtualAppliance"], bool] | None = None
    ) -> Iterable["VirtualAppliance"]:
        dto = self.api.cloud.list_virtual_appliances(self._target)
        vapps = wrap_all(self._context, VirtualAppliance, dto.collection)
        return vapps if predicate is None else [v for v in vapps if predicate(v)]

    def find_virtual_appliance(self, predicate: Callable[["VirtualAppliance"], bool]) -> "VirtualAppliance | None":
        return next(iter(self.list_virtual_appliances(predicate)), None)

    def get_virtual_appliance(self, virtual_appliance_id: int) -> "VirtualAppliance | None":
        dto = self.api.cloud.get_virtual_appliance(self._target, virtual_appliance_id)
        return None if dto is None else wrap(self._context, VirtualAppliance, dto)


class VirtualAppliance(DomainWrapper[VirtualApplianceDto]):
    dto_type = VirtualApplianceDto

    @property
    def id(self) -> int | None:
        return self._target.id

    @property
    def name(self) -> str | None:
        return self._target.name

    @property
    def state(self) -> str | None:
        return self._target.state

    def get_virtual_datacenter(self) -> VirtualDatacenter | None:
        dto = self.api.cloud.get_virtual_datacenter_of(self._target)
        return None if dto is None else wrap(self._context, VirtualDatacenter, dto)

    def list_virtual_machines(
        self, predicate: Callable[["VirtualMachine"], bool] | None = None
    ) -> Iterable["VirtualMachine"]:
        dto = self.api.cloud.list_virtual_machines(self._target)
        vms = wrap_all(self._context, VirtualMachine, dto.collection)
        return vms if predicate is None else [vm for vm in vms if predicate(vm)]

    def find_virtual_machine(self, predicate: Callable[["VirtualMachine"], bool]) -> "VirtualMachine | None":
        return next(iter(self.list_virtual_machines(predicate)), None)


class VirtualMachine(DomainWrapper[VirtualMachineDto]):
    """Máquina virtual. Acepta también la variante extendida con nodo."""

    dto_type = VirtualMachineDto

    @property
    def id(self) -> int | None:
        return self._target.id

    @property
    def name(self) -> str | None:
        return self._target.name

    @property
    def label(self) -> str | None:
        return self._target.label

    @property
    def uuid(self) -> str | None:
        return self._target.uuid

    @property
    def state(self) -> str | None:
        return self._target.state

    @property
    def cpu(self) -> int | None:
        return self._target.cpu

    @property
    def ram(self) -> int | None:
        return self._target.ram

    def get_virtual_appliance(self) -> VirtualAppliance | None:
        dto = self.api.cloud.get_virtual_appliance_of(self._target)
        return None if dto is None else wrap(self._context, VirtualAppliance, dto)
