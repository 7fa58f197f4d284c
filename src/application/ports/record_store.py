"""Ports for reading and writing portfolio records."""

from pathlib import Path
from typing import Any, Protocol

from src.domain.models import Account, ConfigEntry, Transaction, Valuation


class AccountsStorePort(Protocol):
    """Port exposing CRUD access to accounts."""

    def list_accounts(self) -> list[Account]:
        """Return every account in insertion order."""

    def add_account(self, fields: dict[str, Any]) -> Account:
        """Insert an account and return it with its generated id."""

    def update_account(self, account_id: str, updates: dict[str, Any]) -> Account:
        """Patch an account and return the updated record."""

    def delete_account(self, account_id: str) -> None:
        """Delete an account together with its transactions and valuations."""


class TransactionsStorePort(Protocol):
    """Port exposing access to transactions."""

    def list_transactions(
        self,
        account_id: str | None = None,
    ) -> list[Transaction]:
        """Return transactions, optionally restricted to one account."""

    def add_transaction(self, fields: dict[str, Any]) -> Transaction:
        """Insert a transaction and return it with its generated id."""

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction."""


class ValuationsStorePort(Protocol):
    """Port exposing access to valuations."""

    def list_valuations(
        self,
        account_id: str | None = None,
    ) -> list[Valuation]:
        """Return valuations, optionally restricted to one account."""

    def add_valuation(self, fields: dict[str, Any]) -> Valuation:
        """Insert a valuation and return it with its generated id."""

    def update_valuation(
        self,
        valuation_id: str,
        updates: dict[str, Any],
    ) -> Valuation:
        """Patch the value and notes of a valuation."""

    def delete_valuation(self, valuation_id: str) -> None:
        """Delete a valuation."""


class ConfigStorePort(Protocol):
    """Port exposing the key/value configuration."""

    def get_config(self) -> dict[str, str]:
        """Return every configuration entry as a mapping."""

    def set_config(self, key: str, value: str) -> ConfigEntry:
        """Insert or replace a configuration entry."""


class RecordStorePort(
    AccountsStorePort,
    TransactionsStorePort,
    ValuationsStorePort,
    ConfigStorePort,
    Protocol,
):
    """Complete record store backing the application."""

    @property
    def path(self) -> Path:
        """Location of the underlying store."""

    def exists(self) -> bool:
        """Return whether the underlying store has been created."""

    def reset(self) -> None:
        """Drop every record and recreate the default configuration."""


__all__ = [
    "AccountsStorePort",
    "TransactionsStorePort",
    "ValuationsStorePort",
    "ConfigStorePort",
    "RecordStorePort",
]
