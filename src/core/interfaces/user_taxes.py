"""Contrato de acceso a los impuestos de un usuario (Null Object).

Two different objects satisfy it: the real user entity and the null one.
Callers only ever see this capability.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import TaxRecord


@runtime_checkable
class UserTaxesSource(Protocol):
    def get_user_taxes(self) -> TaxRecord:
        """Return the taxes to report for this user."""

        ...
