"""Transformación pura: razas anidadas -> lista plana."""

from __future__ import annotations

from typing import Mapping, Sequence


def flatten_breeds(breeds: Mapping[str, Sequence[str]]) -> list[str]:
    """Aplana `{raza: [sub-razas]}` preservando el orden.

    - Sin sub-razas: aporta `"<raza>"` una sola vez.
    - Con N sub-razas: aporta N entradas `"<sub-raza> <raza>"` y nunca la raza sola.
    """

    flattened: list[str] = []
    for breed, sub_breeds in breeds.items():
        if sub_breeds:
            flattened.extend(f"{sub_breed} {breed}" for sub_breed in sub_breeds)
        else:
            flattened.append(breed)
    return flattened
