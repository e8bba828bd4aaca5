"""Cliente REST de Abiquo (httpx).

`HttpAbiquoApi` agrupa las features (`cloud`, `enterprise`, `templates`)
sobre un único `httpx.Client`. `build_context` es el punto de montaje
habitual: settings -> cliente -> `ApiContext`.
"""

from __future__ import annotations

import httpx

from adapters.api.cloud import HttpCloudApi
from adapters.api.enterprise import HttpEnterpriseApi
from adapters.api.templates import HttpVirtualMachineTemplateApi
from adapters.http_client import RestClient, build_client
from core.config import AppSettings
from core.context import ApiContext


class HttpAbiquoApi:
    def __init__(self, client: httpx.Client) -> None:
        self._rest = RestClient(client)
        self._cloud = HttpCloudApi(self._rest)
        self._enterprise = HttpEnterpriseApi(self._rest)
        self._templates = HttpVirtualMachineTemplateApi(self._rest)

    @property
    def cloud(self) -> HttpCloudApi:
        return self._cloud

    @property
    def enterprise(self) -> HttpEnterpriseApi:
        return self._enterprise

    @property
    def templates(self) -> HttpVirtualMachineTemplateApi:
        return self._templates

    def close(self) -> None:
        self._rest.close()


def build_context(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> ApiContext:
    settings = settings or AppSettings()
    client = build_client(settings, transport=transport)
    return ApiContext(settings=settings, api=HttpAbiquoApi(client))


__all__ = [
    "HttpAbiquoApi",
    "HttpCloudApi",
    "HttpEnterpriseApi",
    "HttpVirtualMachineTemplateApi",
    "build_context",
]
