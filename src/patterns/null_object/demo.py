"""Demo del patrón Null Object en sus cuatro variantes.

The problem variant is run like the others: when a lookup misses, its
`AttributeError` leaves this function (and the CLI) unhandled.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from rich.console import Console

from core.domain.models import NullObjectFixture, TaxRecord
from core.errors import UnknownComponentError
from patterns.null_object import anti_pattern, pattern, problem, solution


@runtime_checkable
class TaxesLookup(Protocol):
    def find_user(self, user_id: int) -> object:
        ...


@runtime_checkable
class TaxesReporter(Protocol):
    def render_taxes(self) -> str:
        ...


RepositoryFactory = Callable[[Mapping[int, TaxRecord]], TaxesLookup]
AccountFactory = Callable[..., TaxesReporter]


@dataclass(frozen=True)
class Variant:
    """One way of handling a missing user, with its repository and client."""

    name: str
    summary: str
    repository_cls: RepositoryFactory
    account_cls: AccountFactory


VARIANTS: dict[str, Variant] = {
    "problem": Variant(
        "problem",
        "Unchecked access: a missing user crashes the client.",
        problem.TaxesRepository,
        problem.Account,
    ),
    "solution": Variant(
        "solution",
        "Explicit None check in the client: safe, repeated at every call site.",
        solution.TaxesRepository,
        solution.Account,
    ),
    "pattern": Variant(
        "pattern",
        "Null Object: the repository always returns a usable object.",
        pattern.TaxesRepository,
        pattern.Account,
    ),
    "anti-pattern": Variant(
        "anti-pattern",
        "Null Object with is_null(): the client branches again.",
        anti_pattern.TaxesRepository,
        anti_pattern.Account,
    ),
}


def get_variant(name: str) -> Variant:
    try:
        return VARIANTS[name]
    except KeyError:
        raise UnknownComponentError("null object variant", name, list(VARIANTS)) from None


def run_null_object_demo(
    fixture: NullObjectFixture,
    console: Console,
    variant: str = "pattern",
    user_ids: Sequence[int] | None = None,
    *,
    currency: str = "RUB",
    debug: bool = True,
) -> list[str]:
    """Imprime el informe de impuestos de cada usuario pedido.

    Returns the reports in lookup order. Consecutive reports are separated
    by two blank lines.
    """

    chosen = get_variant(variant)
    ids = fixture.lookups if user_ids is None else user_ids
    repository = chosen.repository_cls(fixture.records)

    reports: list[str] = []
    for index, user_id in enumerate(ids):
        if index:
            console.out("\n", highlight=False)
        account = chosen.account_cls(user_id, repository, console=console, currency=currency, debug=debug)
        report = account.render_taxes()
        console.out(report, end="", highlight=False)
        reports.append(report)
    return reports
