"""Configuración del cliente.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP) y el contexto lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, HttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "abiquo-d2"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "abiquo-d2"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "abiquo-d2"
    return Path.home() / ".config" / "abiquo-d2"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario.

    Las claves existentes se conservan; un valor `None` no pisa el anterior.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# abiquo-d2 user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central del cliente Abiquo.

    Un único contrato de configuración para la CLI, el contexto y el
    cliente HTTP. Nunca se muta tras construirse.
    """

    model_config = SettingsConfigDict(
        env_prefix="ABIQUO_D2_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    endpoint: HttpUrl = Field(
        default=HttpUrl("http://localhost/api"),
        description="URL base de la API REST de Abiquo (p.ej. https://abiquo.example.com/api).",
    )
    identity: str | None = Field(
        default=None,
        description="Usuario para autenticación HTTP Basic.",
    )
    credential: str | None = Field(
        default=None,
        description="Password para autenticación HTTP Basic.",
    )

    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="abiquo-d2/0.1",
        min_length=1,
        description="User-Agent para las peticiones a la API.",
    )
    verify_tls: bool = Field(
        default=True,
        description="Verificar certificados TLS del endpoint.",
    )

    @property
    def base_url(self) -> str:
        """Endpoint sin barra final, listo para concatenar paths."""

        return str(self.endpoint).rstrip("/")

    @property
    def has_credentials(self) -> bool:
        return bool(self.identity) and self.credential is not None
