"""Streamlit dashboard entry point.

The app keeps one ``PortfolioState`` per browser session and refreshes it
after every write it performs.
"""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import streamlit as st
import altair as alt

from src.application.errors import StoreUnavailableError
from src.application.portfolio_state import PortfolioState
from src.application.use_cases.get_dashboard_summary import DashboardSummary
from src.application.use_cases.record_monthly_update import (
    MonthlyAccountUpdate,
    RecordMonthlyUpdateUseCase,
)
from src.domain.constants import account_type_label, platform_label
from src.domain.models import Account, AllocationSlice, HistoryPoint
from src.infrastructure.container import build_portfolio_state
from src.infrastructure.settings import TrackerSettings

STATE_KEY = "portfolio_state"

PAGES = ["Dashboard", "Monthly update", "Accounts"]

RECURRENCE_SUFFIXES = {
    "weekly": "/wk",
    "monthly": "/mo",
    "quarterly": "/qtr",
    "yearly": "/yr",
}

PALETTE = [
    "#3b82f6",
    "#8b5cf6",
    "#10b981",
    "#f59e0b",
    "#ef4444",
    "#06b6d4",
    "#6366f1",
    "#ec4899",
]


def _get_portfolio_state() -> PortfolioState:
    """Return the session's portfolio state, loading it on first use."""
    state = st.session_state.get(STATE_KEY)
    if state is None:
        state = build_portfolio_state().refresh()
        st.session_state[STATE_KEY] = state
    return state


def _fetch_currency(config: dict[str, str]) -> str:
    """Return the workbook currency, falling back to the environment."""
    return config.get("currency") or TrackerSettings.from_env().currency


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    symbol = "€" if currency_code == "EUR" else currency_code
    return f"{value:,.2f} {symbol}"


def _format_percent(value: Decimal) -> str:
    """Format a percentage with an explicit sign."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.2f}%"


def _format_recurring(item) -> str:
    """Format the recurring deposit hint of an account row."""
    deposit = item.recurring_deposit
    if deposit is None:
        return "—"
    suffix = RECURRENCE_SUFFIXES.get(deposit.recurrence, "")
    return f"{deposit.amount:,.2f}{suffix}"


def _prepare_donut_chart_data(
    allocation: Sequence[AllocationSlice],
    currency_code: str,
    max_categories: int = 6,
) -> list[dict[str, str | float]]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        allocation: Allocation slices by account type.
        currency_code: Currency used for labels.
        max_categories: Maximum slices to keep before grouping into Other.

    Returns:
        list[dict[str, str | float]]: Altair-ready chart data.
    """
    sorted_items = sorted(
        allocation,
        key=lambda item: item.value,
        reverse=True,
    )
    top_items = sorted_items[:max_categories]
    other_items = sorted_items[max_categories:]
    if other_items:
        top_items = [
            *top_items,
            AllocationSlice(
                name="Other",
                value=sum(
                    (item.value for item in other_items),
                    start=Decimal("0"),
                ),
                percentage=sum(
                    (item.percentage for item in other_items),
                    start=Decimal("0"),
                ),
            ),
        ]
    return [
        {
            "category": item.name,
            "amount": float(item.value),
            "amount_label": _format_currency(item.value, currency_code),
            "share_label": f"{item.percentage:.1f}%",
        }
        for item in top_items
        if item.value != 0
    ]


def _prepare_history_chart_data(
    history: Sequence[HistoryPoint],
) -> list[dict[str, str | float]]:
    """Return Altair-ready points for the monthly history chart."""
    return [
        {
            "month": point.month_key,
            "label": point.label,
            "value": float(point.value),
        }
        for point in history
    ]


def _render_history_chart(
    history: Sequence[HistoryPoint],
    currency_code: str,
) -> None:
    """Render the 12-month net worth line chart."""
    st.subheader(f"Wealth over 12 months ({currency_code})")
    data = _prepare_history_chart_data(history)
    chart = alt.Chart(alt.Data(values=data)).mark_area(
        line={"color": PALETTE[0]},
        color=PALETTE[0],
        opacity=0.2,
    ).encode(
        x=alt.X("month:O", title=None, sort=None),
        y=alt.Y("value:Q", title=None),
        tooltip=[
            alt.Tooltip("label:N"),
            alt.Tooltip("value:Q", format=",.2f"),
        ],
    ).properties(height=300)
    st.altair_chart(chart, width="stretch")


def _render_allocation_chart(
    allocation: Sequence[AllocationSlice],
    currency_code: str,
    chart_size: int = 300,
) -> None:
    """Render a donut chart of current value by account type.

    Args:
        allocation: Allocation slices by account type.
        currency_code: Currency used for labels.
        chart_size: Width/height for the chart canvas.
    """
    st.subheader("Allocation by account type")
    data = _prepare_donut_chart_data(allocation, currency_code)
    if not data:
        st.info("No valuations recorded yet.")
        return

    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(range=PALETTE),
            legend=alt.Legend(orient="bottom", title=None, columns=2),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.6)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    chart = base.add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    ).configure_view(stroke=None)
    st.altair_chart(chart, width="stretch")


def _render_accounts_table(
    summary: DashboardSummary,
    currency_code: str,
) -> None:
    """Render per-account performance rows."""
    st.subheader("Accounts")
    data = [
        {
            "Name": item.account.name,
            "Type": account_type_label(item.account.type),
            "Value": _format_currency(item.current_value, currency_code),
            "Invested": _format_currency(item.total_invested, currency_code),
            "Gain": _format_currency(item.gain, currency_code),
            "Performance": _format_percent(item.performance),
            "Recurring": _format_recurring(item),
        }
        for item in summary.accounts
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def _render_dashboard(summary: DashboardSummary, currency_code: str) -> None:
    """Render metrics, charts and the accounts table."""
    wealth_col, invested_col, gain_col, deposits_col = st.columns(4)
    wealth_col.metric(
        "Total wealth",
        _format_currency(summary.total_wealth, currency_code),
    )
    invested_col.metric(
        "Invested",
        _format_currency(summary.total_invested_portfolio, currency_code),
    )
    gain_col.metric(
        "Gain",
        _format_currency(summary.total_gain, currency_code),
        _format_percent(summary.global_performance),
    )
    deposits_col.metric(
        "Deposits this month",
        _format_currency(summary.deposits_this_month, currency_code),
    )
    if summary.monthly_recurring_total:
        st.caption(
            "Recurring investments: "
            f"{_format_currency(summary.monthly_recurring_total, currency_code)}"
            " per month"
        )

    chart_left, chart_right = st.columns(2)
    with chart_left:
        _render_history_chart(summary.history, currency_code)
    with chart_right:
        _render_allocation_chart(summary.allocation, currency_code)
    _render_accounts_table(summary, currency_code)


def _render_accounts(accounts: Sequence[Account]) -> None:
    """Render the accounts list with readable type and platform labels."""
    st.subheader("Accounts")
    data = [
        {
            "Name": account.name,
            "Type": account_type_label(account.type),
            "Platform": platform_label(account.platform),
            "Opened": (
                account.opened_date.isoformat() if account.opened_date else "—"
            ),
            "Notes": account.notes,
        }
        for account in accounts
    ]
    st.dataframe(data, width="stretch", hide_index=True, height=420)


def _render_monthly_update(state: PortfolioState, currency_code: str) -> None:
    """Render the monthly check-in form and record the submitted figures."""
    st.subheader(f"Monthly update ({currency_code})")
    summary = state.summary(date.today())
    if not summary.accounts:
        st.warning("No accounts recorded yet.")
        return

    updates = []
    with st.form("monthly_update"):
        for item in summary.accounts:
            account = item.account
            st.markdown(f"**{account.name}**")
            value_col, deposit_col, withdrawal_col = st.columns(3)
            value = value_col.number_input(
                "Current value",
                min_value=0.0,
                value=float(item.current_value),
                step=100.0,
                key=f"value_{account.id}",
            )
            deposit = deposit_col.number_input(
                "Deposit",
                min_value=0.0,
                value=0.0,
                step=50.0,
                key=f"deposit_{account.id}",
            )
            withdrawal = withdrawal_col.number_input(
                "Withdrawal",
                min_value=0.0,
                value=0.0,
                step=50.0,
                key=f"withdrawal_{account.id}",
            )
            updates.append(
                MonthlyAccountUpdate(
                    account_id=account.id,
                    current_value=Decimal(str(value)),
                    deposit=Decimal(str(deposit)),
                    withdrawal=Decimal(str(withdrawal)),
                )
            )
        submitted = st.form_submit_button("Save")

    if not submitted:
        return
    result = RecordMonthlyUpdateUseCase(state.store).execute(updates)
    state.refresh()
    st.success(
        f"Saved {result.valuation_count} valuations and "
        f"{result.transaction_count} transactions."
    )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Portfolio Tracker", layout="wide")
    st.title("Portfolio Tracker")

    page = st.sidebar.selectbox("Page", PAGES)

    try:
        state = _get_portfolio_state()
        if st.sidebar.button("Reload workbook"):
            state.refresh()
        currency_code = _fetch_currency(state.config)

        if page == "Dashboard":
            summary = state.summary(date.today())
            if not summary.accounts:
                st.warning("No accounts recorded yet.")
                return
            _render_dashboard(summary, currency_code)
        elif page == "Monthly update":
            _render_monthly_update(state, currency_code)
        else:
            st.caption(f"{len(state.accounts)} accounts recorded")
            if not state.accounts:
                st.warning("No accounts recorded yet.")
                return
            _render_accounts(state.accounts)
    except StoreUnavailableError as exc:
        st.error(str(exc))


if __name__ == "__main__":  # pragma: no cover
    main()
