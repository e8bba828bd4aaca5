"""Listado de virtual datacenters y virtual appliances.

Reglas:
- La llamada a la API ocurre dentro de `execute`, así que los
  `TransportError` salen en el sitio de la llamada; no hay reintentos.
- Los filtros por predicado se aplican sobre la colección ya envuelta y el
  resultado es siempre una lista reiterable. Nada se cachea entre llamadas.
"""

from __future__ import annotations

import logging
from itertools import chain
from typing import Any, Iterable

from core.context import ApiContext
from core.domain.cloud import VirtualAppliance, VirtualDatacenter
from core.domain.options import VirtualDatacenterOptions
from core.domain.wrapper import wrap_all

logger = logging.getLogger(__name__)


def _is_id_collection(selector: Any) -> bool:
    return isinstance(selector, Iterable) and not isinstance(selector, (str, bytes))


class ListVirtualDatacenters:
    """Enumera los virtual datacenters visibles para el usuario."""

    def __init__(self, context: ApiContext) -> None:
        self._context = context

    def execute(self, selector: Any = None) -> list[VirtualDatacenter]:
        """`selector`: None, `VirtualDatacenterOptions`, predicado o colección de IDs."""

        if selector is None or isinstance(selector, VirtualDatacenterOptions):
            return self._list(selector)
        if callable(selector):
            return [vdc for vdc in self._list(None) if selector(vdc)]
        if _is_id_collection(selector):
            return self._by_ids(selector)
        raise TypeError(f"Unsupported virtual datacenter selector: {type(selector).__name__}")

    def _list(self, options: VirtualDatacenterOptions | None) -> list[VirtualDatacenter]:
        logger.debug("Listing virtual datacenters (options=%s)", options)
        dto = self._context.api.cloud.list_virtual_datacenters(options)
        return wrap_all(self._context, VirtualDatacenter, dto.collection)

    def _by_ids(self, virtual_datacenter_ids: Iterable[int]) -> list[VirtualDatacenter]:
        # Orden de la lista de IDs; los que no existen se omiten sin error.
        wanted = list(dict.fromkeys(virtual_datacenter_ids))
        by_id = {vdc.id: vdc for vdc in self._list(None)}
        missing = [i for i in wanted if i not in by_id]
        if missing:
            logger.debug("Virtual datacenters not found, skipping: %s", missing)
        return [by_id[i] for i in wanted if i in by_id]


class ListVirtualAppliances:
    """Enumera los virtual appliances de todos los virtual datacenters."""

    def __init__(self, context: ApiContext, list_virtual_datacenters: ListVirtualDatacenters) -> None:
        self._context = context
        self._list_virtual_datacenters = list_virtual_datacenters

    def execute(self, selector: Any = None) -> list[VirtualAppliance]:
        """`selector`: None, `VirtualDatacenterOptions` (acota los datacenters) o predicado."""

        if selector is None or isinstance(selector, VirtualDatacenterOptions):
            return self._list(self._list_virtual_datacenters.execute(selector))
        if callable(selector):
            return [vapp for vapp in self._list(self._list_virtual_datacenters.execute()) if selector(vapp)]
        raise TypeError(f"Unsupported virtual appliance selector: {type(selector).__name__}")

    def _list(self, virtual_datacenters: Iterable[VirtualDatacenter]) -> list[VirtualAppliance]:
        cloud = self._context.api.cloud
        return list(
            chain.from_iterable(
                wrap_all(self._context, VirtualAppliance, cloud.list_virtual_appliances(vdc.unwrap()).collection)
                for vdc in virtual_datacenters
            )
        )
