"""Objeto de dominio Enterprise (tenant) y acceso a sus templates."""

from __future__ import annotations

from typing import Callable, Iterable

from core.domain.models import EnterpriseDto, VirtualMachineTemplateRequestDto
from core.domain.options import VirtualMachineTemplateOptions
from core.domain.templates import AcceptedRequest, VirtualMachineTemplate
from core.domain.wrapper import DomainWrapper, wrap, wrap_all
from core.errors import check_not_none


class Enterprise(DomainWrapper[EnterpriseDto]):
    dto_type = EnterpriseDto

    @property
    def id(self) -> int | None:
        return self._target.id

    @property
    def name(self) -> str | None:
        return self._target.name

    def list_templates(
        self,
        repository_id: int,
        predicate: Callable[[VirtualMachineTemplate], bool] | None = None,
        options: VirtualMachineTemplateOptions | None = None,
    ) -> Iterable[VirtualMachineTemplate]:
        """Templates de esta enterprise en el repositorio de un datacenter."""

        check_not_none(repository_id, "repository_id")
        dto = self.api.templates.list_virtual_machine_templates(self._target.id, repository_id, options)
        templates = wrap_all(self._context, VirtualMachineTemplate, dto.collection)
        return templates if predicate is None else [t for t in templates if predicate(t)]

    def find_template(
        self, repository_id: int, predicate: Callable[[VirtualMachineTemplate], bool]
    ) -> VirtualMachineTemplate | None:
        return next(iter(self.list_templates(repository_id, predicate)), None)

    def get_template(self, repository_id: int, template_id: int) -> VirtualMachineTemplate | None:
        check_not_none(repository_id, "repository_id")
        check_not_none(template_id, "template_id")
        dto = self.api.templates.get_virtual_machine_template(self._target.id, repository_id, template_id)
        return None if dto is None else wrap(self._context, VirtualMachineTemplate, dto)

    def create_template(self, repository_id: int, request: VirtualMachineTemplateRequestDto) -> AcceptedRequest:
        check_not_none(repository_id, "repository_id")
        check_not_none(request, "request")
        accepted = self.api.templates.create_virtual_machine_template(self._target.id, repository_id, request)
        return AcceptedRequest(self._context, accepted)
