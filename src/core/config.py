"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI
  ni el entrypoint de la función.
- Permite que adaptadores (HTTP) lean config de forma consistente.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BREEDS_API_URL = "https://dog.ceo/api/breeds/list/all"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para la función, la CLI y los adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="DOG_BREEDS_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    breeds_api_url: str = Field(
        default=DEFAULT_BREEDS_API_URL,
        min_length=8,
        description="Endpoint que lista todas las razas (dog.ceo compatible).",
    )
    request_timeout_seconds: float = Field(
        default=6.0,
        gt=0,
        description="Tiempo máximo de la invocación antes de cancelar la petición (segundos).",
    )
    timeout_enabled: bool = Field(
        default=True,
        description="Si es False se espera al upstream sin límite propio (solo el de httpx).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request a nivel de cliente httpx (segundos).",
    )
    user_agent: str = Field(
        default="dog-breeds/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para la petición saliente.",
    )
    log_level: LogLevel = Field(
        default="INFO",
        description="Nivel de logging para la función y la CLI.",
    )

    @property
    def effective_timeout(self) -> float | None:
        """Timeout de la carrera petición/temporizador, o None si está desactivado."""

        return self.request_timeout_seconds if self.timeout_enabled else None
