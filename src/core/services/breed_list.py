"""Orquestación del listado de razas.

Este módulo concentra todo lo que ocurre en una invocación:
- carrera entre la petición y el temporizador (gana el primero en resolverse),
- aplanado del payload,
- traducción de cada variante de error a una respuesta normalizada.

El entrypoint serverless y la CLI delegan aquí, así que ninguno de los dos
necesita saber qué excepciones existen: siempre reciben un único resultado.
"""

from __future__ import annotations

import asyncio
import logging

from core.domain.breeds import flatten_breeds
from core.domain.errors import BreedsFetchError, HttpStatusError, TransportTimeout
from core.domain.models import (
    DEFAULT_HTTP_ERROR_MESSAGE,
    REQUEST_TIMEOUT_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
    BreedListResponse,
    BreedListResult,
    BreedsPayload,
    ErrorResponse,
)
from core.interfaces.breeds_source import BreedsSource

logger = logging.getLogger(__name__)


def error_response_for(error: BreedsFetchError) -> ErrorResponse:
    """Traduce una variante de error a la respuesta que ve el llamador."""

    if isinstance(error, TransportTimeout):
        return ErrorResponse(status_code=408, message=REQUEST_TIMEOUT_MESSAGE)
    if isinstance(error, HttpStatusError):
        return ErrorResponse(
            status_code=error.status,
            message=error.text or DEFAULT_HTTP_ERROR_MESSAGE,
        )
    # MalformedPayload, TransportError y cualquier variante futura.
    return ErrorResponse(status_code=500, message=UNEXPECTED_ERROR_MESSAGE)


async def _fetch_within(source: BreedsSource, timeout_seconds: float | None) -> BreedsPayload:
    if timeout_seconds is None:
        return await source.fetch_breeds()
    try:
        # wait_for cancela la petición en curso al vencer y libera el timer si termina antes.
        return await asyncio.wait_for(source.fetch_breeds(), timeout=timeout_seconds)
    except asyncio.TimeoutError as exc:
        raise TransportTimeout(f"no response after {timeout_seconds}s") from exc


async def fetch_breed_list(
    source: BreedsSource,
    *,
    timeout_seconds: float | None = None,
) -> BreedListResult:
    """Obtiene el listado aplanado o un error normalizado. Nunca lanza.

    `timeout_seconds=None` espera al upstream sin límite propio.
    """

    try:
        payload = await _fetch_within(source, timeout_seconds)
        body = flatten_breeds(payload.message)
    except BreedsFetchError as exc:
        response = error_response_for(exc)
        logger.warning(
            "Breed list failed with %s (%s) -> %s",
            type(exc).__name__,
            exc,
            response.status_code,
        )
        return response
    except Exception:
        logger.exception("Unexpected failure while loading dog breeds")
        return ErrorResponse(status_code=500, message=UNEXPECTED_ERROR_MESSAGE)

    logger.debug("Loaded %d flattened breeds", len(body))
    return BreedListResponse(body=body)
