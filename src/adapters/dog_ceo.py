"""Fuente de razas: dog.ceo.

Implementación:
- GET al endpoint configurado (`https://dog.ceo/api/breeds/list/all` por defecto).
- Valida el sobre `{message: {raza: [sub-razas]}, status}` con Pydantic.

Notas:
- 2xx + JSON válido => `BreedsPayload`
- status fuera de 2xx => `HttpStatusError(status, reason_phrase)`
- reset/timeout de transporte => `TransportTimeout`
- cualquier otro fallo de red => `TransportError`
"""

from __future__ import annotations

import errno
import logging

import httpx
from pydantic import ValidationError

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import HttpStatusError, MalformedPayload, TransportError, TransportTimeout
from core.domain.models import BreedsPayload
from core.interfaces.breeds_source import BreedsSource

logger = logging.getLogger(__name__)

_RESET_ERRNOS = {errno.ECONNRESET, errno.ECONNABORTED}


def _is_connection_reset(exc: BaseException) -> bool:
    """Busca un reset/abort de socket en la cadena de causas de httpx."""

    current: BaseException | None = exc
    seen: set[int] = set()
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, (ConnectionResetError, ConnectionAbortedError)):
            return True
        if isinstance(current, OSError) and current.errno in _RESET_ERRNOS:
            return True
        current = current.__cause__ or current.__context__
    return False


class DogCeoBreedsSource(BreedsSource):
    """Obtiene el listado de razas vía HTTP."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def fetch_breeds(self) -> BreedsPayload:
        url = self._settings.breeds_api_url
        logger.debug("Requesting dog breeds from %s", url)

        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.get(url)
        except httpx.TimeoutException as exc:
            raise TransportTimeout(str(exc) or "upstream timed out") from exc
        except httpx.TransportError as exc:
            if _is_connection_reset(exc):
                raise TransportTimeout(str(exc) or "connection reset") from exc
            raise TransportError(str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            raise HttpStatusError(response.status_code, response.reason_phrase)

        try:
            data = response.json()
        except ValueError as exc:
            raise MalformedPayload("response body is not valid JSON") from exc

        try:
            return BreedsPayload.model_validate(data)
        except ValidationError as exc:
            raise MalformedPayload(f"unexpected payload shape: {exc.error_count()} error(s)") from exc
