"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los demos reciben valores ya validados (moneda, debug dump) en lugar de
  leer el entorno por su cuenta.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Every field can be overridden with a `PATTERN_DEMOS_<FIELD>` environment
    variable or a `.env` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="PATTERN_DEMOS_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    currency: str = Field(
        default="RUB",
        min_length=1,
        max_length=8,
        description="Currency label used in tax reports.",
    )
    debug_dump: bool = Field(
        default=True,
        description="Print the DEBUG===> block with the raw lookup result.",
    )
    fixtures_path: Path | None = Field(
        default=None,
        description="JSON file replacing the built-in sample data.",
    )
    show_banner: bool = Field(
        default=True,
        description="Show the Rich banner before command output.",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Minimum level for log records written to stderr.",
    )
