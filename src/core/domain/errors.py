"""Errores tipados del listado de razas.

Por qué variantes explícitas:
- El adaptador HTTP decide *qué* pasó (timeout, transporte, status, payload)
  y el servicio solo traduce cada variante a una respuesta.
- Ninguna excepción de httpx cruza hacia el Core.
"""

from __future__ import annotations


class BreedsFetchError(Exception):
    """Base de todos los fallos al obtener el listado."""


class TransportTimeout(BreedsFetchError):
    """Conexión reseteada, petición abortada o cancelada por el temporizador."""

    def __init__(self, detail: str = "request timed out") -> None:
        super().__init__(detail)
        self.detail = detail


class TransportError(BreedsFetchError):
    """Fallo de red genérico (DNS, conexión rechazada, TLS...)."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class HttpStatusError(BreedsFetchError):
    """El upstream respondió con un status fuera de 2xx."""

    def __init__(self, status: int, text: str = "") -> None:
        super().__init__(f"HTTP {status} {text}".strip())
        self.status = status
        self.text = text


class MalformedPayload(BreedsFetchError):
    """Respuesta 2xx cuyo cuerpo no es `{message: {raza: [sub-razas]}}`."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail
