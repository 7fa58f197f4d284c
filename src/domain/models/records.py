"""Domain models for the persisted portfolio records."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Account:
    """A tracked investment holding.

    Attributes:
        id: Generated identifier, immutable.
        type: Account type tag (see ``ACCOUNT_TYPES``).
        name: Display name.
        platform: Custodian or broker tag.
        opened_date: Opening date, None when unknown.
        notes: Free text.
    """

    id: str
    type: str
    name: str
    platform: str
    opened_date: date | None
    notes: str = ""


@dataclass(frozen=True)
class Transaction:
    """A deposit or withdrawal on an account."""

    id: str
    account_id: str
    date: date | None
    kind: str
    amount: Decimal
    recurrence: str | None = None
    description: str = ""


@dataclass(frozen=True)
class Valuation:
    """Point-in-time mark of an account's total worth."""

    id: str
    account_id: str
    date: date | None
    value: Decimal
    notes: str = ""


@dataclass(frozen=True)
class ConfigEntry:
    """Key/value configuration pair."""

    key: str
    value: str


__all__ = ["Account", "Transaction", "Valuation", "ConfigEntry"]
