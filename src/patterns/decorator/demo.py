"""Demo del patrón Decorator."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console

from core.domain.models import DecoratorFixture
from core.domain.reports import format_price
from core.interfaces.beverage import Beverage
from patterns.decorator.coffee import build_beverage


def print_beverage(console: Console, beverage: Beverage) -> None:
    console.out(beverage.description(), highlight=False)
    console.out(format_price(beverage.cost()), highlight=False)


def run_decorator_demo(
    fixture: DecoratorFixture,
    console: Console,
    orders: Sequence[Sequence[str]] | None = None,
) -> list[Beverage]:
    """Prepara cada pedido y lo imprime: descripción y precio, una línea cada uno.

    `orders` replaces the fixture orders when given.
    """

    chains = fixture.orders if orders is None else orders
    beverages: list[Beverage] = []
    for chain in chains:
        beverage = build_beverage(fixture.base, fixture.condiments, chain)
        print_beverage(console, beverage)
        beverages.append(beverage)
    return beverages
