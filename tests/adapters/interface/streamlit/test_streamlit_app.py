"""Tests for the Streamlit app module."""

from datetime import date
from decimal import Decimal
from pathlib import Path
from unittest.mock import MagicMock

from src.adapters.interface.streamlit import app
from src.application.errors import StoreUnavailableError
from src.application.portfolio_state import PortfolioState
from src.domain.models import (
    Account,
    AccountPerformance,
    AllocationSlice,
    DashboardSummary,
    HistoryPoint,
    RecurringDeposit,
)
from src.infrastructure.workbook_store import WorkbookRecordStore


def _account() -> Account:
    return Account(
        id="a",
        type="brokerage",
        name="PEA",
        platform="fortuneo",
        opened_date=date(2022, 9, 1),
        notes="long term",
    )


def _summary(accounts: list[AccountPerformance]) -> DashboardSummary:
    return DashboardSummary(
        total_wealth=Decimal("1000"),
        total_invested_portfolio=Decimal("800"),
        total_gain=Decimal("200"),
        global_performance=Decimal("25"),
        deposits_this_month=Decimal("100"),
        accounts=accounts,
        history=[
            HistoryPoint(
                month_key="2024-01",
                label="Jan 24",
                value=Decimal("0"),
            ),
            HistoryPoint(
                month_key="2024-02",
                label="Feb 24",
                value=Decimal("1000"),
            ),
        ],
        allocation=[
            AllocationSlice(
                name="Brokerage account",
                value=Decimal("1000"),
                percentage=Decimal("100"),
            )
        ],
        monthly_recurring_total=Decimal("100"),
    )


class _FakeState:
    def __init__(self, summary: DashboardSummary, accounts=None) -> None:
        self._summary = summary
        self.accounts = accounts or [item.account for item in summary.accounts]
        self.config = {"currency": "EUR"}
        self.refresh_count = 0

    def summary(self, _now):
        return self._summary

    def refresh(self):
        self.refresh_count += 1
        return self


class _FakeColumn:
    def __init__(self, owner: "_FakeStreamlit") -> None:
        self.owner = owner

    def metric(self, label, value, delta=None):
        self.owner.metrics.append((label, value, delta))

    def number_input(self, label, key=None, value=0.0, **_kwargs):
        return self.owner.inputs.get(key, value)

    def __enter__(self):
        return self

    def __exit__(self, *_exc):
        return False


class _FakeForm:
    def __enter__(self):
        return self

    def __exit__(self, *_exc):
        return False


class _FakeSidebar:
    def __init__(self, page: str, reload: bool = False) -> None:
        self.page = page
        self.reload = reload

    def selectbox(self, _label, options):
        assert self.page in options
        return self.page

    def button(self, _label):
        return self.reload


class _FakeStreamlit:
    def __init__(
        self,
        page: str = "Dashboard",
        reload: bool = False,
        submitted: bool = False,
        inputs: dict | None = None,
    ) -> None:
        self.sidebar = _FakeSidebar(page, reload)
        self.session_state: dict = {}
        self.submitted = submitted
        self.inputs = inputs or {}
        self.config_called = False
        self.title_text = None
        self.captions: list[str] = []
        self.warnings: list[str] = []
        self.errors: list[str] = []
        self.successes: list[str] = []
        self.infos: list[str] = []
        self.subheaders: list[str] = []
        self.metrics: list[tuple] = []
        self.charts: list = []
        self.dataframes: list[tuple] = []

    def set_page_config(self, **kwargs):
        self.config_called = True
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def caption(self, text: str):
        self.captions.append(text)

    def warning(self, text: str):
        self.warnings.append(text)

    def error(self, text: str):
        self.errors.append(text)

    def success(self, text: str):
        self.successes.append(text)

    def info(self, text: str):
        self.infos.append(text)

    def subheader(self, text: str):
        self.subheaders.append(text)

    def markdown(self, _text: str):
        pass

    def columns(self, count: int):
        return [_FakeColumn(self) for _ in range(count)]

    def form(self, _key: str):
        return _FakeForm()

    def form_submit_button(self, _label: str):
        return self.submitted

    def altair_chart(self, chart, **kwargs):
        self.charts.append((chart, kwargs))

    def dataframe(self, data, **kwargs):
        self.dataframes.append((data, kwargs))


def _dashboard_detail() -> AccountPerformance:
    return AccountPerformance(
        account=_account(),
        current_value=Decimal("1000"),
        total_invested=Decimal("800"),
        performance=Decimal("25"),
        gain=Decimal("200"),
    )


def test_get_portfolio_state_is_kept_in_session(monkeypatch):
    """The state is built and loaded once, then reused from the session."""
    fake_st = _FakeStreamlit()
    built = []

    def _build():
        state = _FakeState(_summary([]))
        built.append(state)
        return state

    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "build_portfolio_state", _build)

    first = app._get_portfolio_state()
    second = app._get_portfolio_state()

    assert first is second
    assert len(built) == 1
    assert first.refresh_count == 1
    assert fake_st.session_state[app.STATE_KEY] is first


def test_fetch_currency_prefers_workbook_config(monkeypatch):
    monkeypatch.setenv("PORTFOLIO_CURRENCY", "USD")

    assert app._fetch_currency({"currency": "CHF"}) == "CHF"


def test_fetch_currency_falls_back_to_environment(monkeypatch):
    monkeypatch.delenv("PORTFOLIO_WORKBOOK", raising=False)
    monkeypatch.setenv("PORTFOLIO_CURRENCY", "usd")

    assert app._fetch_currency({"currency": ""}) == "USD"
    assert app._fetch_currency({}) == "USD"


def test_configured_currency_reaches_new_workbook(monkeypatch, tmp_path):
    """A fresh workbook is created with the currency from the environment."""
    monkeypatch.setenv("PORTFOLIO_WORKBOOK", str(tmp_path / "book.xlsx"))
    monkeypatch.setenv("PORTFOLIO_CURRENCY", "USD")
    monkeypatch.setattr(
        "src.infrastructure.container.get_app_logger",
        MagicMock,
    )
    monkeypatch.setattr(
        "src.infrastructure.settings.get_app_logger",
        MagicMock,
    )
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)

    state = app._get_portfolio_state()

    assert app._fetch_currency(state.config) == "USD"


def test_formatters():
    assert app._format_currency(Decimal("1234.5"), "EUR") == "1,234.50 €"
    assert app._format_currency(Decimal("-3"), "USD") == "-3.00 USD"
    assert app._format_percent(Decimal("12.346")) == "+12.35%"
    assert app._format_percent(Decimal("-4")) == "-4.00%"


def test_format_recurring():
    detail = AccountPerformance(
        account=_account(),
        current_value=Decimal("0"),
        total_invested=Decimal("0"),
        performance=Decimal("0"),
        gain=Decimal("0"),
        recurring_deposit=RecurringDeposit(
            amount=Decimal("150"),
            recurrence="monthly",
        ),
    )

    assert app._format_recurring(detail) == "150.00/mo"


def test_prepare_donut_chart_data_groups_small_slices():
    """Slices beyond the limit are merged into Other, zeros are dropped."""
    allocation = [
        AllocationSlice(
            name=f"T{index}",
            value=Decimal(value),
            percentage=Decimal(value),
        )
        for index, value in enumerate(["40", "30", "20", "6", "4", "0"])
    ]

    data = app._prepare_donut_chart_data(allocation, "EUR", max_categories=3)

    assert [item["category"] for item in data] == ["T0", "T1", "T2", "Other"]
    assert data[-1]["amount"] == 10.0
    assert data[-1]["share_label"] == "10.0%"
    assert data[0]["amount_label"] == "40.00 €"


def test_prepare_history_chart_data():
    history = [
        HistoryPoint(
            month_key="2024-01",
            label="Jan 24",
            value=Decimal("5.5"),
        )
    ]

    assert app._prepare_history_chart_data(history) == [
        {"month": "2024-01", "label": "Jan 24", "value": 5.5}
    ]


def test_main_renders_dashboard(monkeypatch):
    """main should render metrics, both charts and the accounts table."""
    fake_st = _FakeStreamlit()
    fake_st.session_state[app.STATE_KEY] = _FakeState(
        _summary([_dashboard_detail()])
    )
    monkeypatch.setattr(app, "st", fake_st)

    app.main()

    assert fake_st.config_called
    assert fake_st.title_text == "Portfolio Tracker"
    assert [label for label, _, _ in fake_st.metrics] == [
        "Total wealth",
        "Invested",
        "Gain",
        "Deposits this month",
    ]
    assert fake_st.metrics[2][2] == "+25.00%"
    assert len(fake_st.charts) == 2
    table, kwargs = fake_st.dataframes[0]
    assert table[0]["Name"] == "PEA"
    assert table[0]["Type"] == "Brokerage account"
    assert table[0]["Recurring"] == "—"
    assert kwargs["hide_index"] is True
    assert "Recurring investments: 100.00 € per month" in fake_st.captions


def test_main_reload_button_refreshes_state(monkeypatch):
    fake_st = _FakeStreamlit(reload=True)
    state = _FakeState(_summary([_dashboard_detail()]))
    fake_st.session_state[app.STATE_KEY] = state
    monkeypatch.setattr(app, "st", fake_st)

    app.main()

    assert state.refresh_count == 1


def test_main_warns_when_no_accounts(monkeypatch):
    """main should warn the user when the workbook holds no account."""
    fake_st = _FakeStreamlit()
    fake_st.session_state[app.STATE_KEY] = _FakeState(_summary([]))
    monkeypatch.setattr(app, "st", fake_st)

    app.main()

    assert fake_st.warnings == ["No accounts recorded yet."]
    assert fake_st.charts == []


def test_main_displays_accounts_page(monkeypatch):
    fake_st = _FakeStreamlit(page="Accounts")
    fake_st.session_state[app.STATE_KEY] = _FakeState(
        _summary([]),
        accounts=[_account()],
    )
    monkeypatch.setattr(app, "st", fake_st)

    app.main()

    table, _ = fake_st.dataframes[0]
    assert table == [
        {
            "Name": "PEA",
            "Type": "Brokerage account",
            "Platform": "Fortuneo",
            "Opened": "2022-09-01",
            "Notes": "long term",
        }
    ]
    assert fake_st.captions == ["1 accounts recorded"]


def test_main_reports_unreadable_workbook(monkeypatch):
    """A store failure is shown to the user instead of a traceback."""
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)

    def _broken_state():
        raise StoreUnavailableError("Cannot read workbook at book.xlsx")

    monkeypatch.setattr(app, "_get_portfolio_state", _broken_state)

    app.main()

    assert fake_st.errors == ["Cannot read workbook at book.xlsx"]
    assert fake_st.dataframes == []


def test_monthly_update_records_and_refreshes(tmp_path: Path, monkeypatch):
    """Submitting the form writes the records and reloads the state."""
    store = WorkbookRecordStore(tmp_path / "book.xlsx", logger=MagicMock())
    account = store.add_account({"type": "crypto", "platform": "other"})
    store.add_valuation(
        {"account_id": account.id, "date": "2024-01-01", "value": 500}
    )
    state = PortfolioState(store).refresh()
    monkeypatch.setattr(
        "src.application.use_cases.record_monthly_update.get_app_logger",
        MagicMock,
    )
    fake_st = _FakeStreamlit(
        page="Monthly update",
        submitted=True,
        inputs={
            f"value_{account.id}": 650.0,
            f"deposit_{account.id}": 100.0,
        },
    )
    fake_st.session_state[app.STATE_KEY] = state
    monkeypatch.setattr(app, "st", fake_st)

    app.main()

    assert [v.value for v in state.valuations_for(account.id)] == [
        Decimal("500"),
        Decimal("650"),
    ]
    deposits = state.transactions_for(account.id)
    assert [t.amount for t in deposits] == [Decimal("100")]
    assert fake_st.successes == ["Saved 1 valuations and 1 transactions."]


def test_monthly_update_without_submit_writes_nothing(monkeypatch):
    fake_st = _FakeStreamlit(page="Monthly update")
    state = _FakeState(_summary([_dashboard_detail()]))
    fake_st.session_state[app.STATE_KEY] = state
    monkeypatch.setattr(app, "st", fake_st)

    app.main()

    assert fake_st.successes == []
    assert state.refresh_count == 0
