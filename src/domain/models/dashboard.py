"""Domain models for the derived dashboard view."""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.models.records import Account


@dataclass(frozen=True)
class RecurringDeposit:
    """Recurring deposit hint surfaced for an account."""

    amount: Decimal
    recurrence: str


@dataclass(frozen=True)
class AccountPerformance:
    """Per-account metrics merged with the account record.

    Attributes:
        account: Underlying account record.
        current_value: Latest valuation value, 0 without valuation.
        total_invested: Deposits minus withdrawals.
        performance: Percentage gain over net invested.
        gain: Current value minus net invested.
        recurring_deposit: First recurring deposit, if any.
    """

    account: Account
    current_value: Decimal
    total_invested: Decimal
    performance: Decimal
    gain: Decimal
    recurring_deposit: RecurringDeposit | None = None


@dataclass(frozen=True)
class HistoryPoint:
    """Portfolio value at the end of a calendar month."""

    month_key: str
    label: str
    value: Decimal


@dataclass(frozen=True)
class AllocationSlice:
    """Share of current value held in one account type."""

    name: str
    value: Decimal
    percentage: Decimal


@dataclass(frozen=True)
class DashboardSummary:
    """Aggregated portfolio view computed on every request."""

    total_wealth: Decimal
    total_invested_portfolio: Decimal
    total_gain: Decimal
    global_performance: Decimal
    deposits_this_month: Decimal
    accounts: list[AccountPerformance]
    history: list[HistoryPoint]
    allocation: list[AllocationSlice]
    monthly_recurring_total: Decimal = Decimal("0")

    def to_dict(self) -> dict:
        """Return a JSON-ready mapping using the public field names."""
        return {
            "totalWealth": float(self.total_wealth),
            "totalInvestedPortfolio": float(self.total_invested_portfolio),
            "totalGain": float(self.total_gain),
            "globalPerformance": float(self.global_performance),
            "depositsThisMonth": float(self.deposits_this_month),
            "monthlyRecurringTotal": float(self.monthly_recurring_total),
            "accounts": [_account_to_dict(item) for item in self.accounts],
            "history": [
                {
                    "monthKey": point.month_key,
                    "label": point.label,
                    "value": float(point.value),
                }
                for point in self.history
            ],
            "allocation": [
                {
                    "name": item.name,
                    "value": float(item.value),
                    "percentage": float(item.percentage),
                }
                for item in self.allocation
            ],
        }


def _account_to_dict(item: AccountPerformance) -> dict:
    account = item.account
    recurring = item.recurring_deposit
    return {
        "id": account.id,
        "type": account.type,
        "name": account.name,
        "platform": account.platform,
        "openedDate": (
            account.opened_date.isoformat() if account.opened_date else None
        ),
        "notes": account.notes,
        "currentValue": float(item.current_value),
        "totalInvested": float(item.total_invested),
        "performance": float(item.performance),
        "gain": float(item.gain),
        "recurringDeposit": (
            {
                "amount": float(recurring.amount),
                "recurrence": recurring.recurrence,
            }
            if recurring
            else None
        ),
    }


__all__ = [
    "RecurringDeposit",
    "AccountPerformance",
    "HistoryPoint",
    "AllocationSlice",
    "DashboardSummary",
]
