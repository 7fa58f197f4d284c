"""Tests for the composition root."""

from pathlib import Path
from unittest.mock import MagicMock

from src.application.portfolio_state import PortfolioState
from src.application.use_cases.get_dashboard_summary import (
    GetDashboardSummaryUseCase,
)
from src.infrastructure import container
from src.infrastructure.settings import TrackerSettings
from src.infrastructure.workbook_store import WorkbookRecordStore


def test_build_record_store_uses_settings(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    settings = TrackerSettings(workbook_file=tmp_path / "book.xlsx")

    store = container.build_record_store(settings)

    assert isinstance(store, WorkbookRecordStore)
    assert store.path == tmp_path / "book.xlsx"


def test_build_record_store_reads_environment(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    monkeypatch.setattr(
        container.TrackerSettings,
        "from_env",
        classmethod(
            lambda cls: cls(workbook_file=tmp_path / "env.xlsx")
        ),
    )

    store = container.build_record_store()

    assert store.path == tmp_path / "env.xlsx"


def test_builders_wrap_given_store(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    store = MagicMock()

    use_case = container.build_dashboard_use_case(store)
    state = container.build_portfolio_state(store)

    assert isinstance(use_case, GetDashboardSummaryUseCase)
    assert isinstance(state, PortfolioState)
    assert state.loaded is False


def test_build_record_store_seeds_configured_currency(
    monkeypatch,
    tmp_path: Path,
) -> None:
    """A new workbook starts with the currency from the settings."""
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    settings = TrackerSettings(
        workbook_file=tmp_path / "book.xlsx",
        currency="USD",
    )

    store = container.build_record_store(settings)

    assert store.get_config()["currency"] == "USD"
