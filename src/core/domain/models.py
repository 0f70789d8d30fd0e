"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta del payload upstream sin acoplar el Core a httpx.
- Las respuestas se serializan con los alias que espera la plataforma
  (`statusCode`), manteniendo nombres pythonicos dentro del código.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

DEFAULT_HTTP_ERROR_MESSAGE = "Error Loading Dog Breeds"
REQUEST_TIMEOUT_MESSAGE = "Request Timeout"
UNEXPECTED_ERROR_MESSAGE = "Something went wrong"


class BreedsPayload(BaseModel):
    """Sobre devuelto por el listado de razas.

    Ejemplo (dog.ceo):
    {"message": {"sheepdog": ["english", "shetland"], "beagle": []}, "status": "success"}
    """

    model_config = ConfigDict(extra="ignore", strict=True)

    message: dict[str, list[str]] = Field(
        ...,
        description="Raza -> sub-razas (lista posiblemente vacía), en el orden recibido.",
    )
    status: str | None = Field(
        default=None,
        description="Estado reportado por el upstream ('success').",
    )

    @field_validator("message", mode="before")
    @classmethod
    def _null_sub_breeds_as_empty(cls, value: Any) -> Any:
        # dog.ceo nunca manda null, pero una lista nula equivale a "sin sub-razas".
        if isinstance(value, dict):
            return {breed: [] if subs is None else subs for breed, subs in value.items()}
        return value


class BreedListResponse(BaseModel):
    """Resultado exitoso: lista aplanada de razas."""

    model_config = ConfigDict(populate_by_name=True)

    status_code: Literal[200] = Field(default=200, alias="statusCode")
    body: list[str] = Field(
        default_factory=list,
        description="Nombres '<sub-raza> <raza>' o '<raza>'.",
    )


class ErrorResponse(BaseModel):
    """Resultado de error normalizado."""

    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(..., ge=100, alias="statusCode")
    message: str = Field(..., min_length=1)


BreedListResult = BreedListResponse | ErrorResponse


def to_platform_dict(result: BreedListResult) -> dict[str, Any]:
    """Serializa el resultado con las claves que devuelve la función."""

    return result.model_dump(mode="json", by_alias=True)
