"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta de los datos de ejemplo, tanto los integrados como los
  que llegan desde un JSON de fixtures.
- Los registros de impuestos son inmutables (`frozen=True`) una vez creados.

Nota:
- Estos modelos describen *qué* datos usa cada demo, no *cómo* se usan.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict


class TaxRecord(BaseModel):
    """Impuestos de un usuario: cuenta, impuesto sobre la renta y sobre la propiedad."""

    model_config = ConfigDict(frozen=True)

    account: str = Field(
        ...,
        min_length=1,
        max_length=128,
        description="Account label shown in the report (e.g. 'User#1').",
    )
    income_tax: int = Field(
        ...,
        ge=0,
        description="Income tax amount.",
    )
    property_tax: int = Field(
        ...,
        ge=0,
        description="Property tax amount.",
    )


class BaseBeverageSpec(BaseModel):
    """Bebida base de la cadena de decoradores (sin dependencias)."""

    label: str = Field(default="Espresso", min_length=1, max_length=64)
    price: float = Field(default=100.0, ge=0)


class CondimentSpec(BaseModel):
    """Añadido que envuelve una bebida: etiqueta y recargo fijo."""

    label: str = Field(..., min_length=1, max_length=64)
    surcharge: float = Field(..., ge=0)


def _default_condiments() -> dict[str, CondimentSpec]:
    return {
        "milk": CondimentSpec(label="Milk", surcharge=20.0),
        "whip": CondimentSpec(label="Whip", surcharge=30.0),
        "chocolate": CondimentSpec(label="Chocolate", surcharge=50.0),
    }


def _default_recipes() -> dict[str, list[str]]:
    return {
        "espresso": [],
        "cappuccino": ["milk", "whip"],
        "mocha": ["whip", "chocolate"],
        "cappuccino-chocolate": ["milk", "whip", "chocolate"],
    }


class DecoratorFixture(BaseModel):
    """Sample data for the Decorator demo.

    `orders` are condiment-name chains applied in order to the base beverage;
    the empty chain is the plain base.
    """

    base: BaseBeverageSpec = Field(default_factory=BaseBeverageSpec)
    condiments: dict[str, CondimentSpec] = Field(default_factory=_default_condiments)
    recipes: dict[str, list[str]] = Field(default_factory=_default_recipes)
    orders: list[list[str]] = Field(
        default_factory=lambda: [[], ["milk", "whip"], ["milk", "whip", "chocolate"]],
    )

    @model_validator(mode="after")
    def _check_condiment_names(self) -> "DecoratorFixture":
        chains = list(self.recipes.values()) + list(self.orders)
        for chain in chains:
            for name in chain:
                if name not in self.condiments:
                    raise ValueError(f"unknown condiment {name!r} (known: {', '.join(sorted(self.condiments))})")
        return self


class StrategyFixture(BaseModel):
    """Sample data for the Strategy demo: filter names applied one after another."""

    image_name: str = Field(default="test-image", min_length=1)
    filters: list[str] = Field(default_factory=lambda: ["sepia", "bw", "distortion"])


def _default_tax_records() -> dict[int, TaxRecord]:
    return {
        1: TaxRecord(account="User#1", income_tax=5, property_tax=10),
        2: TaxRecord(account="User#2", income_tax=7, property_tax=15),
        3: TaxRecord(account="User#3", income_tax=10, property_tax=20),
    }


class NullObjectFixture(BaseModel):
    """Sample data for the Null Object demos: the registry and the ids to look up."""

    records: dict[int, TaxRecord] = Field(default_factory=_default_tax_records)
    lookups: list[int] = Field(default_factory=lambda: [1, 4])


class DemoFixtures(BaseModel):
    """Todas las fixtures; cada sección es opcional en JSON y cae a su default."""

    model_config = ConfigDict(extra="forbid")

    decorator: DecoratorFixture = Field(default_factory=DecoratorFixture)
    strategy: StrategyFixture = Field(default_factory=StrategyFixture)
    null_object: NullObjectFixture = Field(default_factory=NullObjectFixture)
