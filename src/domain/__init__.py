"""Domain package for business rules and core models."""

from .constants import ACCOUNT_TYPES, PLATFORMS, TRANSACTION_KINDS
from .models import (
    Account,
    AccountPerformance,
    AllocationSlice,
    ConfigEntry,
    DashboardSummary,
    HistoryPoint,
    RecurringDeposit,
    Transaction,
    Valuation,
)
from .policies import default_account_name, resolve_account_name
from .services import compute_dashboard, latest_valuations

__all__ = [
    "ACCOUNT_TYPES",
    "PLATFORMS",
    "TRANSACTION_KINDS",
    "Account",
    "AccountPerformance",
    "AllocationSlice",
    "ConfigEntry",
    "DashboardSummary",
    "HistoryPoint",
    "RecurringDeposit",
    "Transaction",
    "Valuation",
    "default_account_name",
    "resolve_account_name",
    "compute_dashboard",
    "latest_valuations",
]
