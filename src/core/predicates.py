"""Predicados reutilizables para los filtros client-side.

Funcionan con cualquier objeto de dominio que exponga `id`, `name` o `state`.
"""

from __future__ import annotations

from typing import Any, Callable


def ids(*values: int) -> Callable[[Any], bool]:
    wanted = set(values)
    return lambda obj: getattr(obj, "id", None) in wanted


def names(*values: str) -> Callable[[Any], bool]:
    wanted = set(values)
    return lambda obj: getattr(obj, "name", None) in wanted


def name_contains(text: str) -> Callable[[Any], bool]:
    """Coincidencia parcial, sin distinguir mayúsculas."""

    needle = text.lower()
    return lambda obj: needle in (getattr(obj, "name", None) or "").lower()


def states(*values: str) -> Callable[[Any], bool]:
    wanted = {v.upper() for v in values}
    return lambda obj: (getattr(obj, "state", None) or "").upper() in wanted
