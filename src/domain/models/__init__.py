"""Domain models package."""

from .dashboard import (
    AccountPerformance,
    AllocationSlice,
    DashboardSummary,
    HistoryPoint,
    RecurringDeposit,
)
from .records import Account, ConfigEntry, Transaction, Valuation

__all__ = [
    "Account",
    "Transaction",
    "Valuation",
    "ConfigEntry",
    "AccountPerformance",
    "AllocationSlice",
    "DashboardSummary",
    "HistoryPoint",
    "RecurringDeposit",
]
