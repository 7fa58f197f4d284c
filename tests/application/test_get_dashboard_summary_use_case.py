"""Tests for the GetDashboardSummaryUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_dashboard_summary import (
    GetDashboardSummaryUseCase,
)
from src.domain.models import Account, Transaction, Valuation


def _build_store() -> MagicMock:
    store = MagicMock()
    store.list_accounts.return_value = [
        Account(
            id="a",
            type="brokerage",
            name="PEA",
            platform="boursorama",
            opened_date=date(2023, 6, 1),
        )
    ]
    store.list_transactions.return_value = [
        Transaction(
            id="t",
            account_id="a",
            date=date(2024, 5, 3),
            kind="deposit",
            amount=Decimal("800"),
        )
    ]
    store.list_valuations.return_value = [
        Valuation(
            id="v",
            account_id="a",
            date=date(2024, 5, 4),
            value=Decimal("1000"),
        )
    ]
    return store


def test_execute_computes_summary_from_store() -> None:
    """Use case should read all collections and aggregate them."""
    store = _build_store()
    logger = MagicMock()

    summary = GetDashboardSummaryUseCase(store, logger=logger).execute(
        now=date(2024, 5, 20)
    )

    assert summary.total_wealth == Decimal("1000")
    assert summary.total_invested_portfolio == Decimal("800")
    assert summary.deposits_this_month == Decimal("800")
    assert summary.history[-1].label == "May 24"
    store.list_accounts.assert_called_once()
    store.list_transactions.assert_called_once()
    store.list_valuations.assert_called_once()
    logger.info.assert_called_once()


def test_execute_defaults_to_clock() -> None:
    """Without an explicit date the injected clock is used."""
    store = _build_store()

    summary = GetDashboardSummaryUseCase(
        store,
        logger=MagicMock(),
        clock=lambda: date(2024, 6, 2),
    ).execute()

    assert summary.deposits_this_month == Decimal("0")
    assert summary.history[-1].month_key == "2024-06"
