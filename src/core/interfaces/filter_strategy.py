"""Contrato de una estrategia de filtrado (Strategy)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class Image:
    """Subject handed to the filters. Filters never modify it."""

    name: str = "test-image"


@runtime_checkable
class FilterStrategy(Protocol):
    """Interchangeable image filter.

    Reglas de diseño:
    - Sin estado entre invocaciones.
    - Su efecto es la salida que produce; devuelve la misma imagen.
    """

    def process(self, image: Image) -> Image:
        ...
