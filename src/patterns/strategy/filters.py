"""Strategy: filtros de imagen.

Cada filtro tiene un comportamiento propio, así que heredar de un filtro
base no reutilizaría nada. El filtrado se trata como un comportamiento que
el objeto `Filter` *tiene* y que se puede cambiar en tiempo de ejecución.

No conviene aplicar el patrón si el algoritmo es fijo y no tiene variantes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from rich.console import Console

from core.errors import UnknownComponentError
from core.interfaces.filter_strategy import FilterStrategy, Image

logger = logging.getLogger(__name__)


class SepiaFilter:
    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def process(self, image: Image) -> Image:
        self._console.out("Apply SEPIA filter to image", highlight=False)
        return image

    def __repr__(self) -> str:
        return "SepiaFilter()"


class BWFilter:
    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def process(self, image: Image) -> Image:
        self._console.out("Apply B&W filter to image", highlight=False)
        return image

    def __repr__(self) -> str:
        return "BWFilter()"


class DistortionFilter:
    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def process(self, image: Image) -> Image:
        self._console.out("Apply DISTORTION filter to image", highlight=False)
        return image

    def __repr__(self) -> str:
        return "DistortionFilter()"


FILTERS: dict[str, Callable[[Console | None], FilterStrategy]] = {
    "sepia": SepiaFilter,
    "bw": BWFilter,
    "distortion": DistortionFilter,
}

NO_FILTER = "none"


def create_filter(name: str, console: Console | None = None) -> FilterStrategy | None:
    """Instancia un filtro por nombre; `none` significa "sin filtro"."""

    key = name.strip().lower()
    if key == NO_FILTER:
        return None
    try:
        factory = FILTERS[key]
    except KeyError:
        raise UnknownComponentError("filter", name, [*FILTERS, NO_FILTER]) from None
    return factory(console)


class Filter:
    """Contexto: guarda como mucho una estrategia y le delega el trabajo."""

    def __init__(self, strategy: FilterStrategy | None = None) -> None:
        self._strategy = strategy

    @property
    def strategy(self) -> FilterStrategy | None:
        return self._strategy

    def set_strategy(self, strategy: FilterStrategy | None) -> None:
        logger.debug("Filter strategy: %r -> %r", self._strategy, strategy)
        self._strategy = strategy

    def apply_filter(self, image: Image) -> None:
        if self._strategy is None:
            return
        self._strategy.process(image)
