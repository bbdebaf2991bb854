"""Demo del patrón Strategy."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console

from core.domain.models import StrategyFixture
from core.interfaces.filter_strategy import Image
from patterns.strategy.filters import Filter, create_filter


def run_strategy_demo(
    fixture: StrategyFixture,
    console: Console,
    filters: Sequence[str] | None = None,
) -> Filter:
    """Aplica cada filtro a la misma imagen cambiando la estrategia entre llamadas.

    Names are resolved up front, so an unknown name fails before any output.
    Returns the context with the last strategy still set.
    """

    names = fixture.filters if filters is None else filters
    strategies = [create_filter(name, console) for name in names]

    image = Image(name=fixture.image_name)
    context = Filter()
    for strategy in strategies:
        context.set_strategy(strategy)
        context.apply_filter(image)
    return context
