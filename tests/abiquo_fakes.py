"""In-memory fakes of the Abiquo API contracts and DTO builders for tests.

Every fake records its calls in `calls` so tests can assert how many round
trips an operation made (and with which arguments).
"""

from __future__ import annotations

from core.domain.models import (
    AcceptedRequestDto,
    ConversionDto,
    ConversionsDto,
    EnterpriseDto,
    EnterprisesDto,
    RESTLink,
    VirtualApplianceDto,
    VirtualAppliancesDto,
    VirtualDatacenterDto,
    VirtualDatacentersDto,
    VirtualMachinesDto,
    VirtualMachinesWithNodeExtendedDto,
    VirtualMachineTemplateDto,
    VirtualMachineTemplatesDto,
    VirtualMachineWithNodeExtendedDto,
)

API = "http://abiquo.test/api"


# ---------------------------------------------------------------------------
# DTO builders
# ---------------------------------------------------------------------------

def link(rel: str, path: str) -> RESTLink:
    return RESTLink(rel=rel, href=f"{API}{path}")


def vdc_dto(vdc_id: int | None, name: str = "vdc", enterprise_id: int = 1, hypervisor: str = "KVM") -> VirtualDatacenterDto:
    links = []
    if vdc_id is not None:
        links = [
            link("edit", f"/cloud/virtualdatacenters/{vdc_id}"),
            link("enterprise", f"/admin/enterprises/{enterprise_id}"),
            link("virtualappliances", f"/cloud/virtualdatacenters/{vdc_id}/virtualappliances"),
        ]
    return VirtualDatacenterDto(id=vdc_id, name=name, hypervisor_type=hypervisor, links=links)


def vapp_dto(vapp_id: int, vdc_id: int, name: str = "vapp", state: str = "DEPLOYED") -> VirtualApplianceDto:
    base = f"/cloud/virtualdatacenters/{vdc_id}/virtualappliances/{vapp_id}"
    return VirtualApplianceDto(
        id=vapp_id,
        name=name,
        state=state,
        links=[
            link("edit", base),
            link("virtualdatacenter", f"/cloud/virtualdatacenters/{vdc_id}"),
            link("virtualmachines", f"{base}/virtualmachines"),
        ],
    )


def vm_dto(vm_id: int, vapp_id: int, vdc_id: int, name: str = "vm", state: str = "ON") -> VirtualMachineWithNodeExtendedDto:
    vapp = f"/cloud/virtualdatacenters/{vdc_id}/virtualappliances/{vapp_id}"
    return VirtualMachineWithNodeExtendedDto(
        id=vm_id,
        name=name,
        label=name.upper(),
        state=state,
        cpu=1,
        ram=512,
        node_name=f"node-{vm_id}",
        links=[
            link("edit", f"{vapp}/virtualmachines/{vm_id}"),
            link("virtualappliance", vapp),
        ],
    )


def enterprise_dto(enterprise_id: int | None, name: str = "ent") -> EnterpriseDto:
    links = [link("edit", f"/admin/enterprises/{enterprise_id}")] if enterprise_id is not None else []
    return EnterpriseDto(id=enterprise_id, name=name, links=links)


def template_dto(template_id: int, enterprise_id: int = 1, repository_id: int = 2, name: str = "tpl") -> VirtualMachineTemplateDto:
    base = f"/admin/enterprises/{enterprise_id}/datacenterrepositories/{repository_id}"
    return VirtualMachineTemplateDto(
        id=template_id,
        name=name,
        disk_format_type="VMDK_FLAT",
        links=[
            link("edit", f"{base}/virtualmachinetemplates/{template_id}"),
            link("enterprise", f"/admin/enterprises/{enterprise_id}"),
            link("datacenterrepository", base),
            link("conversions", f"{base}/virtualmachinetemplates/{template_id}/conversions"),
        ],
    )


def accepted_dto(task: str = "task-1") -> AcceptedRequestDto:
    return AcceptedRequestDto(entity="You can keep track of the progress in the link", links=[link("status", f"/tasks/{task}")])


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------

class _Recorder:
    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple]] = []
        self.error: Exception | None = None

    def _record(self, name: str, *args: object) -> None:
        self.calls.append((name, args))
        if self.error is not None:
            raise self.error

    def count(self, name: str) -> int:
        return sum(1 for call, _ in self.calls if call == name)


class FakeCloudApi(_Recorder):
    def __init__(self) -> None:
        super().__init__()
        self.vdcs: list[VirtualDatacenterDto] = []
        self.vapps: list[VirtualApplianceDto] = []
        self.vms: list[VirtualMachineWithNodeExtendedDto] = []

    def list_virtual_datacenters(self, options=None):
        self._record("list_virtual_datacenters", options)
        vdcs = self.vdcs
        if options is not None and options.enterprise_id is not None:
            vdcs = [v for v in vdcs if v.id_from_link("enterprise") == options.enterprise_id]
        return VirtualDatacentersDto(collection=vdcs, total_size=len(vdcs))

    def get_virtual_datacenter(self, virtual_datacenter_id):
        self._record("get_virtual_datacenter", virtual_datacenter_id)
        return next((v for v in self.vdcs if v.id == virtual_datacenter_id), None)

    def list_virtual_appliances(self, virtual_datacenter):
        self._record("list_virtual_appliances", virtual_datacenter.id)
        vapps = [v for v in self.vapps if v.id_from_link("virtualdatacenter") == virtual_datacenter.id]
        return VirtualAppliancesDto(collection=vapps, total_size=len(vapps))

    def get_virtual_appliance(self, virtual_datacenter, virtual_appliance_id):
        self._record("get_virtual_appliance", virtual_datacenter.id, virtual_appliance_id)
        return next(
            (
                v
                for v in self.vapps
                if v.id == virtual_appliance_id and v.id_from_link("virtualdatacenter") == virtual_datacenter.id
            ),
            None,
        )

    def get_virtual_datacenter_of(self, virtual_appliance):
        self._record("get_virtual_datacenter_of", virtual_appliance.id)
        vdc_id = virtual_appliance.id_from_link("virtualdatacenter")
        return next((v for v in self.vdcs if v.id == vdc_id), None)

    def list_virtual_machines(self, virtual_appliance):
        self._record("list_virtual_machines", virtual_appliance.id)
        vms = [vm for vm in self.vms if vm.id_from_link("virtualappliance") == virtual_appliance.id]
        return VirtualMachinesDto(collection=vms, total_size=len(vms))

    def list_all_virtual_machines(self):
        self._record("list_all_virtual_machines")
        return VirtualMachinesWithNodeExtendedDto(collection=self.vms, total_size=len(self.vms))

    def get_virtual_appliance_of(self, virtual_machine):
        self._record("get_virtual_appliance_of", virtual_machine.id)
        vapp_id = virtual_machine.id_from_link("virtualappliance")
        return next((v for v in self.vapps if v.id == vapp_id), None)


class FakeEnterpriseApi(_Recorder):
    def __init__(self) -> None:
        super().__init__()
        self.enterprises: list[EnterpriseDto] = []

    def list_enterprises(self):
        self._record("list_enterprises")
        return EnterprisesDto(collection=self.enterprises, total_size=len(self.enterprises))

    def get_enterprise(self, enterprise_id):
        self._record("get_enterprise", enterprise_id)
        return next((e for e in self.enterprises if e.id == enterprise_id), None)


class FakeTemplateApi(_Recorder):
    def __init__(self) -> None:
        super().__init__()
        self.templates: list[VirtualMachineTemplateDto] = []
        self.conversions: list[ConversionDto] = []
        self.accepted = accepted_dto()

    def list_virtual_machine_templates(self, enterprise_id, datacenter_repository_id, options=None):
        self._record("list_virtual_machine_templates", enterprise_id, datacenter_repository_id, options)
        templates = [
            t
            for t in self.templates
            if t.id_from_link("enterprise") == enterprise_id
            and t.id_from_link("datacenterrepository") == datacenter_repository_id
        ]
        return VirtualMachineTemplatesDto(collection=templates, total_size=len(templates))

    def get_virtual_machine_template(self, enterprise_id, datacenter_repository_id, virtual_machine_template_id):
        self._record("get_virtual_machine_template", enterprise_id, datacenter_repository_id, virtual_machine_template_id)
        return next((t for t in self.templates if t.id == virtual_machine_template_id), None)

    def update_virtual_machine_template(self, template):
        self._record("update_virtual_machine_template", template)
        return template

    def delete_virtual_machine_template(self, template):
        self._record("delete_virtual_machine_template", template)

    def create_persistent_virtual_machine_template(self, enterprise_id, datacenter_repository_id, persistent_options):
        self._record("create_persistent_virtual_machine_template", enterprise_id, datacenter_repository_id, persistent_options)
        return self.accepted

    def create_virtual_machine_template(self, enterprise_id, datacenter_repository_id, template_request):
        self._record("create_virtual_machine_template", enterprise_id, datacenter_repository_id, template_request)
        return self.accepted

    def list_conversions(self, template, options=None):
        self._record("list_conversions", template.id, options)
        return ConversionsDto(collection=self.conversions, total_size=len(self.conversions))

    def get_conversion(self, template, target_format):
        self._record("get_conversion", template.id, target_format)
        return next((c for c in self.conversions if c.target_format == target_format), None)

    def request_conversion(self, template, target_format, conversion):
        self._record("request_conversion", template.id, target_format, conversion)
        return self.accepted


class FakeAbiquoApi:
    def __init__(self) -> None:
        self.cloud = FakeCloudApi()
        self.enterprise = FakeEnterpriseApi()
        self.templates = FakeTemplateApi()
        self.closed = False

    def close(self) -> None:
        self.closed = True
