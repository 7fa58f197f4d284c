"""Application ports package."""

from .record_store import (
    AccountsStorePort,
    ConfigStorePort,
    RecordStorePort,
    TransactionsStorePort,
    ValuationsStorePort,
)

__all__ = [
    "AccountsStorePort",
    "ConfigStorePort",
    "RecordStorePort",
    "TransactionsStorePort",
    "ValuationsStorePort",
]
