"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers, credenciales y logging de todas las llamadas.
- Traduce cualquier fallo de transporte a `TransportError`.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

import httpx
from pydantic import ValidationError as PydanticValidationError

from core.config import AppSettings
from core.domain.models import WireModel
from core.errors import TransportError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=WireModel)


def build_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` apuntando al endpoint configurado.

    - `base_url` = endpoint de la API; los paths relativos se resuelven contra él.
    - HTTP Basic si hay `identity` + `credential`.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {"User-Agent": settings.user_agent}
    if extra_headers:
        headers.update(extra_headers)

    auth = None
    if settings.has_credentials:
        auth = httpx.BasicAuth(settings.identity or "", settings.credential or "")

    return httpx.Client(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
        auth=auth,
        verify=settings.verify_tls,
        follow_redirects=True,
        transport=transport,
    )


class RestClient:
    """Llamadas REST tipadas: DTO de entrada/salida por media type."""

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def close(self) -> None:
        self._client.close()

    def request(
        self,
        method: str,
        url: str,
        *,
        accept: str | None = None,
        params: dict[str, str] | None = None,
        body: WireModel | None = None,
    ) -> httpx.Response:
        headers: dict[str, str] = {}
        if accept:
            headers["Accept"] = accept
        content = None
        if body is not None:
            headers["Content-Type"] = type(body).MEDIA_TYPE
            content = json.dumps(body.to_payload())

        logger.debug("%s %s params=%s", method, url, params or {})
        try:
            return self._client.request(method, url, params=params, headers=headers, content=content)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise TransportError(f"{method} {url} failed: {exc}", method=method, url=url) from exc

    def get(
        self,
        url: str,
        dto_type: type[M],
        *,
        params: dict[str, str] | None = None,
        null_on_404: bool = False,
    ) -> M | None:
        response = self.request("GET", url, accept=dto_type.MEDIA_TYPE, params=params)
        if null_on_404 and response.status_code == 404:
            logger.debug("GET %s -> 404, returning None", url)
            return None
        return self._parse(response, dto_type)

    def get_required(self, url: str, dto_type: type[M], *, params: dict[str, str] | None = None) -> M:
        response = self.request("GET", url, accept=dto_type.MEDIA_TYPE, params=params)
        return self._parse(response, dto_type)

    def post(self, url: str, body: WireModel, dto_type: type[M]) -> M:
        response = self.request("POST", url, accept=dto_type.MEDIA_TYPE, body=body)
        return self._parse(response, dto_type)

    def put(self, url: str, body: WireModel, dto_type: type[M]) -> M:
        response = self.request("PUT", url, accept=dto_type.MEDIA_TYPE, body=body)
        return self._parse(response, dto_type)

    def delete(self, url: str) -> None:
        response = self.request("DELETE", url)
        self._raise_for_status(response)

    def _parse(self, response: httpx.Response, dto_type: type[M]) -> M:
        self._raise_for_status(response)
        try:
            data: Any = response.json()
            return dto_type.model_validate(data)
        except (ValueError, PydanticValidationError) as exc:
            request = response.request
            logger.warning("Cannot decode %s from %s %s: %s", dto_type.__name__, request.method, request.url, exc)
            raise TransportError(
                f"Cannot decode {dto_type.__name__}: {exc}",
                method=request.method,
                url=str(request.url),
                status_code=response.status_code,
                body=response.text,
            ) from exc

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        if response.is_success:
            return
        request = response.request
        logger.warning("%s %s -> HTTP %s", request.method, request.url, response.status_code)
        raise TransportError(
            f"{request.method} {request.url} returned HTTP {response.status_code}",
            method=request.method,
            url=str(request.url),
            status_code=response.status_code,
            body=response.text,
        )
