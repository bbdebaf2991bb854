"""Null Object, 3: el patrón.

Dos objetos con contenido distinto y la misma interfaz (`UserTaxesSource`):
el usuario real y `NullUserTaxes`, que devuelve datos por defecto. El
repositorio siempre devuelve uno de los dos, así que el cliente tiene un
único camino y ninguna comprobación.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from rich.console import Console

from core.debug import debug_dump
from core.domain.models import TaxRecord
from core.domain.reports import render_tax_report
from core.interfaces.user_taxes import UserTaxesSource

logger = logging.getLogger(__name__)

UNKNOWN_TAXES = TaxRecord(account="Unknown", income_tax=0, property_tax=0)


class UserTaxes:
    def __init__(self, record: TaxRecord) -> None:
        self._record = record

    def get_user_taxes(self) -> TaxRecord:
        return self._record

    def __repr__(self) -> str:
        r = self._record
        return f"UserTaxes(account={r.account!r}, income_tax={r.income_tax!r}, property_tax={r.property_tax!r})"


class NullUserTaxes:
    """No hace nada: devuelve la cuenta "Unknown" sin impuestos."""

    def get_user_taxes(self) -> TaxRecord:
        return UNKNOWN_TAXES

    def __repr__(self) -> str:
        return "NullUserTaxes()"


class TaxesRepository:
    """Devuelve el `UserTaxes` existente o un `NullUserTaxes` con los valores por defecto."""

    def __init__(self, records: Mapping[int, TaxRecord]) -> None:
        self._user_taxes = MappingProxyType({user_id: UserTaxes(r) for user_id, r in records.items()})

    def find_user(self, user_id: int) -> UserTaxesSource:
        found = self._user_taxes.get(user_id)
        if found is not None:
            return found
        logger.debug("find_user(%s): miss, returning NullUserTaxes", user_id)
        return NullUserTaxes()


class Account:
    """Cliente que usa el patrón."""

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

        taxes = user_taxes.get_user_taxes()

        return render_tax_report(taxes.account, taxes.income_tax, taxes.property_tax, currency=self._currency)
