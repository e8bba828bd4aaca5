"""Virtual machine template API sobre httpx.

Colección base:
`/admin/enterprises/{enterprise}/datacenterrepositories/{repository}/virtualmachinetemplates`

Las operaciones sobre un template existente siguen sus enlaces (`edit`,
`conversions`) en lugar de reconstruir URLs.
"""

from __future__ import annotations

from adapters.api.cloud import link_href
from adapters.http_client import RestClient
from core.domain.models import (
    AcceptedRequestDto,
    ConversionDto,
    ConversionsDto,
    VirtualMachineTemplateDto,
    VirtualMachineTemplatePersistentDto,
    VirtualMachineTemplateRequestDto,
    VirtualMachineTemplatesDto,
)
from core.domain.options import ConversionOptions, VirtualMachineTemplateOptions
from core.errors import check_not_none


def templates_path(enterprise_id: int, datacenter_repository_id: int) -> str:
    check_not_none(enterprise_id, "enterprise_id")
    check_not_none(datacenter_repository_id, "datacenter_repository_id")
    return (
        f"/admin/enterprises/{enterprise_id}"
        f"/datacenterrepositories/{datacenter_repository_id}/virtualmachinetemplates"
    )


class HttpVirtualMachineTemplateApi:
    def __init__(self, rest: RestClient) -> None:
        self._rest = rest

    def list_virtual_machine_templates(
        self,
        enterprise_id: int,
        datacenter_repository_id: int,
        options: VirtualMachineTemplateOptions | None = None,
    ) -> VirtualMachineTemplatesDto:
        params = options.to_query_params() if options else None
        return self._rest.get_required(
            templates_path(enterprise_id, datacenter_repository_id), VirtualMachineTemplatesDto, params=params
        )

    def get_virtual_machine_template(
        self, enterprise_id: int, datacenter_repository_id: int, virtual_machine_template_id: int
    ) -> VirtualMachineTemplateDto | None:
        check_not_none(virtual_machine_template_id, "virtual_machine_template_id")
        path = f"{templates_path(enterprise_id, datacenter_repository_id)}/{virtual_machine_template_id}"
        return self._rest.get(path, VirtualMachineTemplateDto, null_on_404=True)

    def update_virtual_machine_template(self, template: VirtualMachineTemplateDto) -> VirtualMachineTemplateDto:
        check_not_none(template, "template")
        return self._rest.put(link_href(template, "edit"), template, VirtualMachineTemplateDto)

    def delete_virtual_machine_template(self, template: VirtualMachineTemplateDto) -> None:
        check_not_none(template, "template")
        self._rest.delete(link_href(template, "edit"))

    def create_persistent_virtual_machine_template(
        self,
        enterprise_id: int,
        datacenter_repository_id: int,
        persistent_options: VirtualMachineTemplatePersistentDto,
    ) -> AcceptedRequestDto:
        check_not_none(persistent_options, "persistent_options")
        return self._rest.post(
            templates_path(enterprise_id, datacenter_repository_id), persistent_options, AcceptedRequestDto
        )

    def create_virtual_machine_template(
        self,
        enterprise_id: int,
        datacenter_repository_id: int,
        template_request: VirtualMachineTemplateRequestDto,
    ) -> AcceptedRequestDto:
        check_not_none(template_request, "template_request")
        return self._rest.post(
            templates_path(enterprise_id, datacenter_repository_id), template_request, AcceptedRequestDto
        )

    def list_conversions(
        self, template: VirtualMachineTemplateDto, options: ConversionOptions | None = None
    ) -> ConversionsDto:
        check_not_none(template, "template")
        params = options.to_query_params() if options else None
        return self._rest.get_required(link_href(template, "conversions"), ConversionsDto, params=params)

    def get_conversion(self, template: VirtualMachineTemplateDto, target_format: str) -> ConversionDto | None:
        check_not_none(template, "template")
        check_not_none(target_format, "target_format")
        href = link_href(template, "conversions").rstrip("/")
        return self._rest.get(f"{href}/{target_format}", ConversionDto, null_on_404=True)

    def request_conversion(
        self, template: VirtualMachineTemplateDto, target_format: str, conversion: ConversionDto
    ) -> AcceptedRequestDto:
        check_not_none(template, "template")
        check_not_none(target_format, "target_format")
        check_not_none(conversion, "conversion")
        href = link_href(template, "conversions").rstrip("/")
        return self._rest.put(f"{href}/{target_format}", conversion, AcceptedRequestDto)
