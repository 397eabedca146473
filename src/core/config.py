"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los ejemplos no necesitan configuración para funcionar: todo tiene default.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="SOLID_DEMO_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (el handler escribe en stderr).",
    )
    show_banner: bool = Field(
        default=True,
        description="Mostrar el banner de la CLI antes de cada comando.",
    )
    reports_dir: Path = Field(
        default=Path("reports"),
        description="Directorio base para exportaciones con ruta relativa.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> str:
        name = str(value).strip().upper()
        if name not in _LEVEL_NAMES:
            raise ValueError(f"nivel de logging desconocido: {value!r}")
        return name
