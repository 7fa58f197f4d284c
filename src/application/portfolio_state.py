"""Explicit cache of the last-fetched portfolio records.

Presentation layers hold one instance, pass it around, and call
``refresh()`` after every mutation they perform.
"""

from datetime import date

from src.application.ports.record_store import RecordStorePort
from src.domain.models import Account, DashboardSummary, Transaction, Valuation
from src.domain.services.dashboard import compute_dashboard


class PortfolioState:
    """Last-fetched records with explicit refresh."""

    def __init__(self, store: RecordStorePort) -> None:
        self._store = store
        self.accounts: list[Account] = []
        self.transactions: list[Transaction] = []
        self.valuations: list[Valuation] = []
        self.config: dict[str, str] = {}
        self.loaded = False

    @property
    def store(self) -> RecordStorePort:
        return self._store

    def refresh(self) -> "PortfolioState":
        """Reload every collection from the store."""
        self.accounts = self._store.list_accounts()
        self.transactions = self._store.list_transactions()
        self.valuations = self._store.list_valuations()
        self.config = self._store.get_config()
        self.loaded = True
        return self

    def summary(self, now: date) -> DashboardSummary:
        """Compute the dashboard from the cached records."""
        if not self.loaded:
            self.refresh()
        return compute_dashboard(
            self.accounts,
            self.transactions,
            self.valuations,
            now,
        )

    def account(self, account_id: str) -> Account | None:
        return next(
            (item for item in self.accounts if item.id == account_id),
            None,
        )

    def transactions_for(self, account_id: str) -> list[Transaction]:
        return [
            item for item in self.transactions if item.account_id == account_id
        ]

    def valuations_for(self, account_id: str) -> list[Valuation]:
        return [
            item for item in self.valuations if item.account_id == account_id
        ]


__all__ = ["PortfolioState"]
