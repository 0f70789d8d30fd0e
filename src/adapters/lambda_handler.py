"""Entrypoint serverless: `adapters.lambda_handler.handler`.

La plataforma invoca `handler(event, context)` de forma síncrona; aquí solo
se arma la configuración, se ejecuta el servicio en un event loop propio y se
devuelve un dict plano. Cada invocación crea su propio cliente y su propio timer.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from pydantic import ValidationError

from adapters.dog_ceo import DogCeoBreedsSource
from core.config import AppSettings
from core.domain.models import (
    UNEXPECTED_ERROR_MESSAGE,
    BreedListResult,
    ErrorResponse,
    to_platform_dict,
)
from core.interfaces.breeds_source import BreedsSource
from core.logging_config import configure_logging
from core.services.breed_list import fetch_breed_list

logger = logging.getLogger(__name__)


def _build_source(settings: AppSettings) -> BreedsSource:
    return DogCeoBreedsSource(settings)


async def list_breeds(settings: AppSettings | None = None) -> BreedListResult:
    """Versión async reutilizable (CLI, tests) del handler."""

    settings = settings or AppSettings()
    return await fetch_breed_list(
        _build_source(settings),
        timeout_seconds=settings.effective_timeout,
    )


def handler(event: Any = None, context: Any = None) -> dict[str, Any]:
    """Lista las razas de perro. `event` y `context` se ignoran."""

    try:
        settings = AppSettings()
    except ValidationError:
        configure_logging()
        logger.exception("Invalid DOG_BREEDS_* configuration")
        return to_platform_dict(ErrorResponse(status_code=500, message=UNEXPECTED_ERROR_MESSAGE))

    configure_logging(settings.log_level)
    result = asyncio.run(list_breeds(settings))
    return to_platform_dict(result)
