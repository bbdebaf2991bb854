"""Null Object, 2: la solución defensiva.

Same entity and repository as the problem variant; only the client changes.
It checks for `None` and returns an empty report, which works but has to be
repeated by every caller of `find_user`.
"""

from __future__ import annotations

from rich.console import Console

from core.debug import debug_dump
from core.domain.reports import render_tax_report
from patterns.null_object.problem import TaxesRepository, UserTaxes

__all__ = ["Account", "TaxesRepository", "UserTaxes"]


class Account:
    def __init__(
        self,
        user_id: int,
        repository: TaxesRepository,
        *,
        console: Console | None = None,
        currency: str = "RUB",
        debug: bool = True,
    ) -> None:
        self.user_id = user_id
        self._repository = repository
        self._console = console or Console()
        self._currency = currency
        self._debug = debug

    def render_taxes(self) -> str:
        user_taxes = self._repository.find_user(self.user_id)

        if self._debug:
            debug_dump(self._console, user_taxes)

        if user_taxes is not None:
            taxes = user_taxes.get_user_taxes()
            return render_tax_report(taxes.account, taxes.income_tax, taxes.property_tax, currency=self._currency)
        return ""
