"""Decorator: cafetería.

Casi todos los cafés se preparan sobre un espresso: un capuchino es espresso
con leche y nata montada, un mocha es espresso con nata y chocolate. En vez
de una clase por combinación (o una cadena de if/else), cada añadido envuelve
a la bebida que recibe y suma su recargo y su etiqueta.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from core.domain.models import BaseBeverageSpec, CondimentSpec
from core.errors import UnknownComponentError
from core.interfaces.beverage import Beverage

logger = logging.getLogger(__name__)


class Espresso:
    """Bebida base: no envuelve nada."""

    def __init__(self, price: float = 100.0, label: str = "Espresso") -> None:
        self._price = price
        self._label = label

    @classmethod
    def from_spec(cls, spec: BaseBeverageSpec) -> "Espresso":
        return cls(price=spec.price, label=spec.label)

    def cost(self) -> float:
        return self._price

    def description(self) -> str:
        return self._label

    def __repr__(self) -> str:
        return f"Espresso(price={self._price!r}, label={self._label!r})"


class Condiment:
    """Añadido: posee exactamente una bebida y amplía su precio y descripción."""

    def __init__(self, beverage: Beverage, *, label: str, surcharge: float) -> None:
        if beverage is None:
            raise TypeError("a condiment needs a beverage to wrap")
        self._beverage = beverage
        self.label = label
        self.surcharge = surcharge

    @classmethod
    def from_spec(cls, beverage: Beverage, spec: CondimentSpec) -> "Condiment":
        return cls(beverage, label=spec.label, surcharge=spec.surcharge)

    @property
    def wrapped(self) -> Beverage:
        return self._beverage

    def cost(self) -> float:
        return self._beverage.cost() + self.surcharge

    def description(self) -> str:
        return f"{self._beverage.description()}, {self.label}"

    def __repr__(self) -> str:
        return f"Condiment({self._beverage!r}, label={self.label!r}, surcharge={self.surcharge!r})"


def milk(beverage: Beverage) -> Condiment:
    return Condiment(beverage, label="Milk", surcharge=20.0)


def whip(beverage: Beverage) -> Condiment:
    return Condiment(beverage, label="Whip", surcharge=30.0)


def chocolate(beverage: Beverage) -> Condiment:
    return Condiment(beverage, label="Chocolate", surcharge=50.0)


def add_condiments(
    beverage: Beverage,
    condiments: Mapping[str, CondimentSpec],
    names: Iterable[str],
) -> Beverage:
    """Envuelve `beverage` con cada añadido de `names`, en orden."""

    for name in names:
        spec = condiments.get(name)
        if spec is None:
            raise UnknownComponentError("condiment", name, list(condiments))
        logger.debug("Wrapping %r with %s (+%s)", beverage.description(), spec.label, spec.surcharge)
        beverage = Condiment.from_spec(beverage, spec)
    return beverage


def build_beverage(
    base: BaseBeverageSpec,
    condiments: Mapping[str, CondimentSpec],
    names: Iterable[str],
) -> Beverage:
    return add_condiments(Espresso.from_spec(base), condiments, names)


def recipe_condiments(recipes: Mapping[str, list[str]], name: str) -> list[str]:
    try:
        return list(recipes[name])
    except KeyError:
        raise UnknownComponentError("recipe", name, list(recipes)) from None
