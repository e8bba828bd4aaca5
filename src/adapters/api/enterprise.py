"""Enterprise API sobre httpx: /admin/enterprises."""

from __future__ import annotations

from adapters.http_client import RestClient
from core.domain.models import EnterpriseDto, EnterprisesDto
from core.errors import check_not_none


class HttpEnterpriseApi:
    def __init__(self, rest: RestClient) -> None:
        self._rest = rest

    def list_enterprises(self) -> EnterprisesDto:
        return self._rest.get_required("/admin/enterprises", EnterprisesDto)

    def get_enterprise(self, enterprise_id: int) -> EnterpriseDto | None:
        check_not_none(enterprise_id, "enterprise_id")
        return self._rest.get(f"/admin/enterprises/{enterprise_id}", EnterpriseDto, null_on_404=True)
