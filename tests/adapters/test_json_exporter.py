"""Tests for JSON export of domain objects."""

import json

from abiquo_fakes import template_dto, vdc_dto
from adapters.json_exporter import export_json, to_json
from core.domain.cloud import VirtualDatacenter
from core.domain.templates import VirtualMachineTemplate
from core.domain.wrapper import wrap_all


def test_to_json_uses_api_names_without_links(context):
    vdcs = wrap_all(context, VirtualDatacenter, [vdc_dto(2, name="dev", hypervisor="VMX_04")])

    payload = json.loads(to_json(vdcs))

    assert payload == [{"hypervisorType": "VMX_04", "id": 2, "name": "dev"}]


def test_to_json_empty():
    assert json.loads(to_json([])) == []


def test_export_json_creates_parent_dirs(context, tmp_path):
    templates = wrap_all(context, VirtualMachineTemplate, [template_dto(5, name="ubuntu")])
    output = tmp_path / "out" / "templates.json"

    path = export_json(objects=templates, output_path=output)

    assert path == output
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload[0]["name"] == "ubuntu"
    assert payload[0]["diskFormatType"] == "VMDK_FLAT"
    assert "links" not in payload[0]
