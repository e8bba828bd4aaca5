"""Contexto de la API.

Handle compartido por objetos de dominio, estrategias y servicios: agrupa la
configuración y el cliente ya construido. No se muta tras crearse.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from core.config import AppSettings
from core.interfaces.api import AbiquoApi

if TYPE_CHECKING:
    from core.services.cloud_service import CloudService


@dataclass(frozen=True)
class ApiContext:
    settings: AppSettings
    api: AbiquoApi

    def cloud_service(self) -> "CloudService":
        """Facade de alto nivel ligada a este contexto."""

        from core.services.cloud_service import CloudService  # noqa: PLC0415

        return CloudService.from_context(self)

    def close(self) -> None:
        self.api.close()

    def __enter__(self) -> "ApiContext":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
