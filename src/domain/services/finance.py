"""Domain services for invested capital and performance."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import (
    DEPOSIT,
    OCCURRENCES_PER_YEAR,
    ONE_TIME,
    WITHDRAWAL,
)
from src.domain.models import RecurringDeposit, Transaction
from src.utils.decimal_utils import coerce_decimal

HUNDRED = Decimal("100")


def compute_net_invested(transactions: Iterable[Transaction]) -> Decimal:
    """Return deposits minus withdrawals.

    Args:
        transactions: Transactions of a single account (or a portfolio).

    Returns:
        Decimal: Net invested capital. Other kinds are ignored.
    """
    invested = Decimal("0")
    withdrawn = Decimal("0")
    for transaction in transactions:
        if transaction.kind == DEPOSIT:
            invested += coerce_decimal(transaction.amount)
        elif transaction.kind == WITHDRAWAL:
            withdrawn += coerce_decimal(transaction.amount)
    return invested - withdrawn


def compute_performance(current_value: Decimal, invested: Decimal) -> Decimal:
    """Return the percentage gain of ``current_value`` over ``invested``.

    Nothing invested (zero or negative net) yields 0.
    """
    if invested <= 0:
        return Decimal("0")
    return (current_value - invested) / invested * HUNDRED


def compute_share(value: Decimal, total: Decimal) -> Decimal:
    """Return ``value`` as a percentage of ``total`` (0 for an empty total)."""
    if total == 0:
        return Decimal("0")
    return value / total * HUNDRED


def find_recurring_deposit(
    transactions: Iterable[Transaction],
) -> RecurringDeposit | None:
    """Return the first deposit flagged with a recurrence."""
    for transaction in transactions:
        if transaction.kind != DEPOSIT:
            continue
        if not transaction.recurrence or transaction.recurrence == ONE_TIME:
            continue
        return RecurringDeposit(
            amount=coerce_decimal(transaction.amount),
            recurrence=transaction.recurrence,
        )
    return None


def monthly_equivalent(deposit: RecurringDeposit | None) -> Decimal:
    """Convert a recurring deposit into its monthly amount.

    Unknown recurrences count as monthly.
    """
    if deposit is None:
        return Decimal("0")
    per_year = OCCURRENCES_PER_YEAR.get(deposit.recurrence, 12)
    return deposit.amount * per_year / 12


__all__ = [
    "compute_net_invested",
    "compute_performance",
    "compute_share",
    "find_recurring_deposit",
    "monthly_equivalent",
]
