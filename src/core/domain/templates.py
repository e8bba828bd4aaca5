"""Objetos de dominio del apps library: templates, conversiones y peticiones aceptadas.

Las operaciones largas (crear/convertir templates) devuelven un
`AcceptedRequest`: un token con el enlace `status` que hay que consultar
aparte. Este módulo no hace polling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable

from core.domain.models import (
    AcceptedRequestDto,
    ConversionDto,
    RESTLink,
    SingleResourceDto,
    TierDto,
    VirtualMachineTemplateDto,
    VirtualMachineTemplatePersistentDto,
    VirtualMachineTemplateRequestDto,
)
from core.domain.options import ConversionOptions
from core.domain.wrapper import DomainWrapper, wrap, wrap_all
from core.errors import ValidationError, check_not_none

if TYPE_CHECKING:
    from core.context import ApiContext
    from core.domain.cloud import VirtualDatacenter


def link_to(dto: SingleResourceDto, rel: str) -> RESTLink:
    """Construye un enlace `rel` apuntando al `edit` del DTO dado."""

    edit = dto.edit_link
    if edit is None:
        raise ValidationError(f"{type(dto).__name__} has no edit link to reference as {rel}", field="links")
    return RESTLink(rel=rel, href=edit.href, type=type(dto).MEDIA_TYPE)


class AcceptedRequest:
    """Handle de una operación asíncrona en curso en el servidor."""

    def __init__(self, context: "ApiContext", target: AcceptedRequestDto) -> None:
        self._context = context
        self._target = target

    @property
    def status_link(self) -> RESTLink | None:
        return self._target.status_link

    @property
    def message(self) -> str | None:
        return self._target.entity

    def unwrap(self) -> AcceptedRequestDto:
        return self._target

    def __repr__(self) -> str:
        href = self.status_link.href if self.status_link else None
        return f"AcceptedRequest(status={href!r})"


class Conversion(DomainWrapper[ConversionDto]):
    """Conversión V2V de un template; su identidad es el formato destino."""

    dto_type = ConversionDto
    identity_field = "target_format"

    @property
    def target_format(self) -> str | None:
        return self._target.target_format

    @property
    def source_format(self) -> str | None:
        return self._target.source_format

    @property
    def state(self) -> str | None:
        return self._target.state


class VirtualMachineTemplate(DomainWrapper[VirtualMachineTemplateDto]):
    dto_type = VirtualMachineTemplateDto

    @property
    def id(self) -> int | None:
        return self._target.id

    @property
    def name(self) -> str | None:
        return self._target.name

    @name.setter
    def name(self, value: str) -> None:
        self._target = self._target.model_copy(update={"name": value})

    @property
    def description(self) -> str | None:
        return self._target.description

    @description.setter
    def description(self, value: str | None) -> None:
        self._target = self._target.model_copy(update={"description": value})

    @property
    def disk_format_type(self) -> str | None:
        return self._target.disk_format_type

    @property
    def enterprise_id(self) -> int | None:
        return self._target.id_from_link("enterprise")

    @property
    def repository_id(self) -> int | None:
        return self._target.id_from_link("datacenterrepository")

    def update(self) -> "VirtualMachineTemplate":
        """Persiste los cambios locales (nombre, descripción)."""

        self._target = self.api.templates.update_virtual_machine_template(self._target)
        return self

    def delete(self) -> None:
        self.api.templates.delete_virtual_machine_template(self._target)

    def list_conversions(
        self,
        predicate: Callable[[Conversion], bool] | None = None,
        options: ConversionOptions | None = None,
    ) -> Iterable[Conversion]:
        dto = self.api.templates.list_conversions(self._target, options)
        conversions = wrap_all(self._context, Conversion, dto.collection)
        return conversions if predicate is None else [c for c in conversions if predicate(c)]

    def get_conversion(self, target_format: str) -> Conversion | None:
        check_not_none(target_format, "target_format")
        dto = self.api.templates.get_conversion(self._target, target_format)
        return None if dto is None else wrap(self._context, Conversion, dto)

    def request_conversion(self, target_format: str) -> AcceptedRequest:
        """Inicia (o reintenta si falló) la conversión a `target_format`."""

        check_not_none(target_format, "target_format")
        body = ConversionDto(target_format=target_format)
        accepted = self.api.templates.request_conversion(self._target, target_format, body)
        return AcceptedRequest(self._context, accepted)

    def make_persistent(
        self,
        virtual_datacenter: "VirtualDatacenter",
        persistent_template_name: str,
        persistent_volume_name: str | None = None,
        tier: TierDto | None = None,
    ) -> AcceptedRequest:
        """Crea un template persistente a partir de este, en el repositorio de origen.

        Sin `tier`, el servidor elige el tier por defecto del datacenter.
        """

        check_not_none(virtual_datacenter, "virtual_datacenter")
        check_not_none(persistent_template_name, "persistent_template_name")
        enterprise_id, repository_id = self._owner_ids()

        links = [
            link_to(virtual_datacenter.unwrap(), "virtualdatacenter"),
            link_to(self._target, "virtualmachinetemplate"),
        ]
        if tier is not None:
            links.append(link_to(tier, "tier"))

        options = VirtualMachineTemplatePersistentDto(
            persistent_template_name=persistent_template_name,
            persistent_volume_name=persistent_volume_name or persistent_template_name,
            links=links,
        )
        accepted = self.api.templates.create_persistent_virtual_machine_template(
            enterprise_id, repository_id, options
        )
        return AcceptedRequest(self._context, accepted)

    def promote_to_master(self, promoted_name: str | None = None) -> AcceptedRequest:
        """Promociona esta instancia a template maestro con nombre `promoted_name`."""

        enterprise_id, repository_id = self._owner_ids()
        request = VirtualMachineTemplateRequestDto(
            promoted_name=promoted_name or self.name,
            links=[link_to(self._target, "virtualmachinetemplate")],
        )
        accepted = self.api.templates.create_virtual_machine_template(enterprise_id, repository_id, request)
        return AcceptedRequest(self._context, accepted)

    def _owner_ids(self) -> tuple[int, int]:
        enterprise_id = self.enterprise_id
        repository_id = self.repository_id
        if enterprise_id is None:
            raise ValidationError("Missing required field enterprise link in VirtualMachineTemplate", field="enterprise")
        if repository_id is None:
            raise ValidationError(
                "Missing required field datacenterrepository link in VirtualMachineTemplate",
                field="datacenterrepository",
            )
        return enterprise_id, repository_id
