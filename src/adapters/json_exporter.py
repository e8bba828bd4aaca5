"""Exportación JSON de objetos de dominio.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines (jq, scripts).
- Se exporta el DTO tal cual lo sirve la API (camelCase), sin enlaces.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from core.domain.wrapper import DomainWrapper


def to_json(objects: Iterable[DomainWrapper]) -> str:
    """Serializa a JSON UTF-8 con formato estable."""

    payload = [obj.unwrap().model_dump(mode="json", by_alias=True, exclude={"links"}) for obj in objects]
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_json(*, objects: Iterable[DomainWrapper], output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(to_json(objects), encoding="utf-8")
    return output_path
