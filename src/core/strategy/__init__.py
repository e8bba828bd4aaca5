"""Estrategias de listado: cómo enumerar cada colección raíz."""

from core.strategy.cloud import ListVirtualAppliances, ListVirtualDatacenters

__all__ = [
    "ListVirtualAppliances",
    "ListVirtualDatacenters",
]
