"""Null Object, 4: el anti-patrón.

Igual que el patrón, pero la interfaz añade `is_null()`. Con ese método la
lógica de elección vuelve al cliente: `Account` comprueba `is_null()` y
calcula por su cuenta "unknown", 0 y 0, descartando los valores que
`NullUserTaxes` ya trae.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Protocol, runtime_checkable

from rich.console import Console

from core.debug import debug_dump
from core.domain.models import TaxRecord
from core.domain.reports import render_tax_report
from core.interfaces.user_taxes import UserTaxesSource

logger = logging.getLogger(__name__)


@runtime_checkable
class NullAwareUserTaxes(UserTaxesSource, Protocol):
    def is_null(self) -> bool:
        """Whether this is the null user. Its presence is the defect."""

        ...


class UserTaxes:
    def __init__(self, record: TaxRecord) -> None:
        self._record = record

    def get_user_taxes(self) -> TaxRecord:
        return self._record

    def is_null(self) -> bool:
        return False

    def __repr__(self) -> str:
        r = self._record
        return f"UserTaxes(account={r.account!r}, income_tax={r.income_tax!r}, property_tax={r.property_tax!r})"


class NullUserTaxes:
    def get_user_taxes(self) -> TaxRecord:
        return TaxRecord(account="Unknown", income_tax=0, property_tax=0)

    def is_null(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "NullUserTaxes()"


class TaxesRepository:
    def __init__(self, records: Mapping[int, TaxRecord]) -> None:
        self._user_taxes = MappingProxyType({user_id: UserTaxes(r) for user_id, r in records.items()})

    def find_user(self, user_id: int) -> NullAwareUserTaxes:
        found = self._user_taxes.get(user_id)
        if found is not None:
            return found
        logger.debug("find_user(%s): miss, returning NullUserTaxes", user_id)
        return NullUserTaxes()


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

        calc_income_tax = calc_property_tax = 0
        user_name = ""
        # is_null() pushes the found/not-found choice back into the client.
        if not user_taxes.is_null():
            taxes = user_taxes.get_user_taxes()
            user_name = taxes.account
            calc_income_tax = taxes.income_tax
            calc_property_tax = taxes.property_tax
        else:
            user_name = "unknown"

        return render_tax_report(user_name, calc_income_tax, calc_property_tax, currency=self._currency)
