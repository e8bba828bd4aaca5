"""Logging centralizado.

Los módulos usan `logging.getLogger(__name__)`; aquí solo se configura la
salida (stderr, texto o JSON) para los paquetes del proyecto.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

PROJECT_LOGGERS = ("core", "adapters", "cli")


class JSONFormatter(logging.Formatter):
    """Formato JSON de una línea por registro."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


def configure_logging(level: int = logging.WARNING, json_format: bool = False) -> None:
    """Configura los loggers del proyecto.

    Args:
        level: nivel de logging (DEBUG, INFO, WARNING...).
        json_format: salida JSON estructurada en lugar de texto.
    """

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))

    for name in PROJECT_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers.clear()
        logger.addHandler(handler)
        logger.propagate = False
