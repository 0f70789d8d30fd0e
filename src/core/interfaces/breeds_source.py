"""Contrato de la fuente de razas.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que el servicio se pruebe con fuentes falsas sin tocar la red.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import BreedsPayload


@runtime_checkable
class BreedsSource(Protocol):
    """Contrato mínimo para obtener el listado de razas.

    Reglas de diseño:
    - `fetch_breeds` es asíncrono porque hace I/O (HTTP) y debe ser cancelable.
    - Ante cualquier fallo lanza una subclase de `BreedsFetchError`.
    """

    async def fetch_breeds(self) -> BreedsPayload:
        """Obtiene y valida el payload de razas."""

        ...
