"""Use cases managing account valuations."""

from datetime import date
from decimal import Decimal
from typing import Any

from src.application.ports.record_store import ValuationsStorePort
from src.domain.models import Valuation
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


class ListValuationsUseCase:
    """Return valuations, optionally for a single account."""

    def __init__(self, store: ValuationsStorePort) -> None:
        self._store = store

    def execute(self, account_id: str | None = None) -> list[Valuation]:
        return self._store.list_valuations(account_id)


class AddValuationUseCase:
    """Record the total worth of an account at a date."""

    def __init__(self, store: ValuationsStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        account_id: str,
        value: Decimal | float | str,
        valuation_date: date | None = None,
        notes: str = "",
    ) -> Valuation:
        """Store the valuation.

        Args:
            account_id: Valued account id.
            value: Account worth; unparseable values become 0.
            valuation_date: Optional date, defaults to today.
            notes: Free text.

        Returns:
            Valuation: Stored valuation with its generated id.
        """
        valuation = self._store.add_valuation(
            {
                "account_id": account_id,
                "date": valuation_date,
                "value": coerce_decimal(value),
                "notes": notes or "",
            }
        )
        self._logger.info(
            f"Valuation created: {valuation.id} value={valuation.value} "
            f"on account {account_id}"
        )
        return valuation


class UpdateValuationUseCase:
    """Patch the value and notes of a valuation."""

    def __init__(self, store: ValuationsStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, valuation_id: str, updates: dict[str, Any]) -> Valuation:
        valuation = self._store.update_valuation(valuation_id, updates)
        self._logger.info(
            f"Valuation updated: {valuation_id} fields={sorted(updates)}"
        )
        return valuation


__all__ = [
    "ListValuationsUseCase",
    "AddValuationUseCase",
    "UpdateValuationUseCase",
]
