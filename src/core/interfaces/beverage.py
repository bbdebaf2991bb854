"""Contrato de una bebida (Decorator).

Por qué Protocol:
- La bebida base y cada añadido cumplen el mismo contrato sin compartir
  una jerarquía de herencia.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Beverage(Protocol):
    """Anything with a price and an ingredient description.

    Both methods are pure: same chain, same answer.
    """

    def cost(self) -> float:
        ...

    def description(self) -> str:
        ...
