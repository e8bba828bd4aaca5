"""Tests for enterprise templates, conversions and accepted requests."""

import pytest

from abiquo_fakes import enterprise_dto, link, template_dto, vdc_dto
from core.domain.cloud import VirtualDatacenter
from core.domain.enterprise import Enterprise
from core.domain.models import (
    ConversionDto,
    TierDto,
    VirtualMachineTemplateDto,
    VirtualMachineTemplatePersistentDto,
    VirtualMachineTemplateRequestDto,
)
from core.domain.options import ConversionOptions, VirtualMachineTemplateOptions
from core.domain.templates import AcceptedRequest, Conversion, VirtualMachineTemplate
from core.domain.wrapper import wrap
from core.errors import ValidationError


@pytest.fixture
def enterprise(context, fake_api) -> Enterprise:
    fake_api.templates.templates = [
        template_dto(1, enterprise_id=1, repository_id=2, name="ubuntu"),
        template_dto(2, enterprise_id=1, repository_id=2, name="centos"),
        template_dto(3, enterprise_id=1, repository_id=9, name="windows"),
    ]
    return wrap(context, Enterprise, enterprise_dto(1))


@pytest.fixture
def template(context, fake_api) -> VirtualMachineTemplate:
    return wrap(context, VirtualMachineTemplate, template_dto(5, enterprise_id=1, repository_id=2, name="debian"))


class TestEnterpriseTemplates:
    def test_list_templates_in_repository(self, enterprise, fake_api):
        templates = list(enterprise.list_templates(2))
        assert [t.name for t in templates] == ["ubuntu", "centos"]

    def test_list_templates_passes_options(self, enterprise, fake_api):
        options = VirtualMachineTemplateOptions(hypervisor_type="KVM")
        list(enterprise.list_templates(2, options=options))
        assert fake_api.templates.calls == [("list_virtual_machine_templates", (1, 2, options))]

    def test_find_template(self, enterprise):
        assert enterprise.find_template(2, lambda t: t.name == "centos").id == 2
        assert enterprise.find_template(2, lambda t: t.name == "windows") is None

    def test_get_template(self, enterprise):
        assert enterprise.get_template(2, 1).name == "ubuntu"
        assert enterprise.get_template(2, 99) is None

    def test_repository_is_required(self, enterprise, fake_api):
        with pytest.raises(ValidationError):
            enterprise.list_templates(None)
        assert fake_api.templates.calls == []

    def test_create_template(self, enterprise, fake_api):
        request = VirtualMachineTemplateRequestDto(promoted_name="golden")
        accepted = enterprise.create_template(2, request)

        assert isinstance(accepted, AcceptedRequest)
        assert accepted.status_link.href.endswith("/tasks/task-1")
        assert fake_api.templates.calls == [("create_virtual_machine_template", (1, 2, request))]


class TestVirtualMachineTemplate:
    def test_owner_ids_from_links(self, template):
        assert template.enterprise_id == 1
        assert template.repository_id == 2

    def test_update_sends_local_changes(self, template, fake_api):
        template.name = "debian-12"
        template.description = "stable"
        template.update()

        name, (sent,) = fake_api.templates.calls[0]
        assert name == "update_virtual_machine_template"
        assert isinstance(sent, VirtualMachineTemplateDto)
        assert (sent.name, sent.description) == ("debian-12", "stable")
        assert template.name == "debian-12"

    def test_delete(self, template, fake_api):
        template.delete()
        assert fake_api.templates.count("delete_virtual_machine_template") == 1

    def test_conversions(self, template, fake_api):
        fake_api.templates.conversions = [
            ConversionDto(target_format="QCOW2_SPARSE", state="FINISHED"),
            ConversionDto(target_format="VHD_FLAT", state="FAILED"),
        ]

        conversions = list(template.list_conversions())
        failed = list(template.list_conversions(predicate=lambda c: c.state == "FAILED"))

        assert all(isinstance(c, Conversion) for c in conversions)
        assert [c.target_format for c in conversions] == ["QCOW2_SPARSE", "VHD_FLAT"]
        assert [c.target_format for c in failed] == ["VHD_FLAT"]
        assert template.get_conversion("VHD_FLAT").state == "FAILED"
        assert template.get_conversion("RAW") is None

    def test_list_conversions_with_options(self, template, fake_api):
        options = ConversionOptions(hypervisor_type="KVM")
        list(template.list_conversions(options=options))
        assert fake_api.templates.calls == [("list_conversions", (5, options))]

    def test_request_conversion(self, template, fake_api):
        accepted = template.request_conversion("VMDK_STREAM_OPTIMIZED")

        name, (template_id, target_format, body) = fake_api.templates.calls[0]
        assert (name, template_id, target_format) == ("request_conversion", 5, "VMDK_STREAM_OPTIMIZED")
        assert body.target_format == "VMDK_STREAM_OPTIMIZED"
        assert accepted.message

    def test_make_persistent(self, template, fake_api, context):
        vdc = wrap(context, VirtualDatacenter, vdc_dto(4))

        template.make_persistent(vdc, "debian-persistent")

        name, (enterprise_id, repository_id, options) = fake_api.templates.calls[0]
        assert (name, enterprise_id, repository_id) == ("create_persistent_virtual_machine_template", 1, 2)
        assert isinstance(options, VirtualMachineTemplatePersistentDto)
        assert options.persistent_volume_name == "debian-persistent"
        assert options.search_link("virtualdatacenter").href.endswith("/cloud/virtualdatacenters/4")
        assert options.search_link("virtualmachinetemplate").href.endswith("/virtualmachinetemplates/5")

    def test_make_persistent_on_tier(self, template, fake_api, context):
        vdc = wrap(context, VirtualDatacenter, vdc_dto(4))
        tier = TierDto(id=9, name="gold", links=[link("edit", "/admin/datacenters/1/storage/tiers/9")])

        template.make_persistent(vdc, "debian-persistent", "debian-vol", tier=tier)

        _, (_, _, options) = fake_api.templates.calls[0]
        assert options.persistent_volume_name == "debian-vol"
        tier_link = options.search_link("tier")
        assert tier_link.href.endswith("/storage/tiers/9")
        assert tier_link.type == "application/vnd.abiquo.tier+json"

    def test_make_persistent_without_tier_has_no_tier_link(self, template, fake_api, context):
        template.make_persistent(wrap(context, VirtualDatacenter, vdc_dto(4)), "debian-persistent")

        _, (_, _, options) = fake_api.templates.calls[0]
        assert options.search_link("tier") is None

    def test_make_persistent_requires_datacenter(self, template, fake_api):
        with pytest.raises(ValidationError):
            template.make_persistent(None, "name")
        assert fake_api.templates.calls == []

    def test_promote_to_master(self, template, fake_api):
        template.promote_to_master("golden")

        name, (_, _, request) = fake_api.templates.calls[0]
        assert name == "create_virtual_machine_template"
        assert request.promoted_name == "golden"
        assert request.search_link("virtualmachinetemplate") is not None

    def test_template_without_owner_links(self, context, fake_api):
        orphan = wrap(context, VirtualMachineTemplate, VirtualMachineTemplateDto(id=1, name="orphan"))
        with pytest.raises(ValidationError, match="enterprise"):
            orphan.promote_to_master()
