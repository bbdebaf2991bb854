"""Null Object, 1: el problema.

El repositorio devuelve `None` para un usuario que no existe y el cliente
usa el resultado sin comprobarlo: `render_taxes()` termina con
`AttributeError: 'NoneType' object has no attribute 'get_user_taxes'`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from rich.console import Console

from core.debug import debug_dump
from core.domain.models import TaxRecord
from core.domain.reports import render_tax_report

logger = logging.getLogger(__name__)


class UserTaxes:
    """Información de impuestos de un usuario concreto."""

    def __init__(self, record: TaxRecord) -> None:
        self._record = record

    def get_user_taxes(self) -> TaxRecord:
        return self._record

    def __repr__(self) -> str:
        r = self._record
        return f"UserTaxes(account={r.account!r}, income_tax={r.income_tax!r}, property_tax={r.property_tax!r})"


class TaxesRepository:
    """Repositorio con los usuarios; se llena una vez y después solo se lee."""

    def __init__(self, records: Mapping[int, TaxRecord]) -> None:
        self._user_taxes = MappingProxyType({user_id: UserTaxes(r) for user_id, r in records.items()})

    def find_user(self, user_id: int) -> UserTaxes | None:
        found = self._user_taxes.get(user_id)
        logger.debug("find_user(%s): %s", user_id, "hit" if found is not None else "miss")
        return found


class Account:
    """Código cliente."""

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

        taxes = user_taxes.get_user_taxes()  # type: ignore[union-attr]

        return render_tax_report(taxes.account, taxes.income_tax, taxes.property_tax, currency=self._currency)
