"""Domain service computing the portfolio dashboard."""

from collections import defaultdict
from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from src.domain.constants import (
    DEPOSIT,
    HISTORY_MONTHS,
    MONTH_ABBREVIATIONS,
    account_type_label,
)
from src.domain.models import (
    Account,
    AccountPerformance,
    AllocationSlice,
    DashboardSummary,
    HistoryPoint,
    Transaction,
    Valuation,
)
from src.domain.services.finance import (
    compute_net_invested,
    compute_performance,
    compute_share,
    find_recurring_deposit,
    monthly_equivalent,
)
from src.domain.services.valuations import latest_valuations
from src.utils.date_utils import coerce_date, month_end, trailing_months
from src.utils.decimal_utils import coerce_decimal


def compute_dashboard(
    accounts: Sequence[Account],
    transactions: Sequence[Transaction],
    valuations: Sequence[Valuation],
    now: date,
) -> DashboardSummary:
    """Compute the dashboard summary from raw records.

    The computation is pure: the same records and ``now`` always produce the
    same summary. Transactions and valuations referencing unknown accounts
    do not contribute to any aggregate.

    Args:
        accounts: Account records.
        transactions: Transaction records in insertion order.
        valuations: Valuation records in insertion order.
        now: Reference date (or datetime) for the current month.

    Returns:
        DashboardSummary: Totals, per-account details, history and allocation.
    """
    reference = coerce_date(now)
    account_ids = {account.id for account in accounts}
    latest = latest_valuations(valuations)

    by_account: dict[str, list[Transaction]] = defaultdict(list)
    for transaction in transactions:
        by_account[transaction.account_id].append(transaction)

    details = []
    for account in accounts:
        account_transactions = by_account.get(account.id, [])
        latest_valuation = latest.get(account.id)
        current_value = (
            coerce_decimal(latest_valuation.value)
            if latest_valuation
            else Decimal("0")
        )
        net_invested = compute_net_invested(account_transactions)
        details.append(
            AccountPerformance(
                account=account,
                current_value=current_value,
                total_invested=net_invested,
                performance=compute_performance(current_value, net_invested),
                gain=current_value - net_invested,
                recurring_deposit=find_recurring_deposit(account_transactions),
            )
        )

    total_wealth = sum(
        (item.current_value for item in details),
        Decimal("0"),
    )
    total_invested = sum(
        (item.total_invested for item in details),
        Decimal("0"),
    )

    return DashboardSummary(
        total_wealth=total_wealth,
        total_invested_portfolio=total_invested,
        total_gain=total_wealth - total_invested,
        global_performance=compute_performance(total_wealth, total_invested),
        deposits_this_month=_deposits_in_month(
            transactions,
            account_ids,
            reference,
        ),
        accounts=details,
        history=_build_history(account_ids, valuations, reference),
        allocation=_build_allocation(details, total_wealth),
        monthly_recurring_total=sum(
            (monthly_equivalent(item.recurring_deposit) for item in details),
            Decimal("0"),
        ),
    )


def _deposits_in_month(
    transactions: Sequence[Transaction],
    account_ids: set[str],
    reference: date,
) -> Decimal:
    total = Decimal("0")
    for transaction in transactions:
        if transaction.kind != DEPOSIT:
            continue
        if transaction.account_id not in account_ids:
            continue
        transaction_date = coerce_date(transaction.date)
        if transaction_date is None:
            continue
        if (transaction_date.year, transaction_date.month) == (
            reference.year,
            reference.month,
        ):
            total += coerce_decimal(transaction.amount)
    return total


def _build_history(
    account_ids: set[str],
    valuations: Sequence[Valuation],
    reference: date,
) -> list[HistoryPoint]:
    known = [item for item in valuations if item.account_id in account_ids]
    history = []
    for year, month in trailing_months(reference, HISTORY_MONTHS):
        marks = latest_valuations(known, as_of=month_end(year, month))
        value = sum(
            (coerce_decimal(mark.value) for mark in marks.values()),
            Decimal("0"),
        )
        history.append(
            HistoryPoint(
                month_key=f"{year:04d}-{month:02d}",
                label=f"{MONTH_ABBREVIATIONS[month - 1]} {year % 100:02d}",
                value=value,
            )
        )
    return history


def _build_allocation(
    details: Sequence[AccountPerformance],
    total_wealth: Decimal,
) -> list[AllocationSlice]:
    totals: dict[str, Decimal] = {}
    for item in details:
        label = account_type_label(item.account.type)
        totals[label] = totals.get(label, Decimal("0")) + item.current_value
    return [
        AllocationSlice(
            name=name,
            value=value,
            percentage=compute_share(value, total_wealth),
        )
        for name, value in totals.items()
    ]


__all__ = ["compute_dashboard"]
