"""Composition root for wiring infrastructure adapters."""

from src.application.portfolio_state import PortfolioState
from src.application.ports.record_store import RecordStorePort
from src.application.use_cases.get_dashboard_summary import (
    GetDashboardSummaryUseCase,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import TrackerSettings
from src.infrastructure.workbook_store import WorkbookRecordStore


def build_record_store(
    settings: TrackerSettings | None = None,
) -> RecordStorePort:
    """Return the workbook-backed record store."""
    resolved = settings or TrackerSettings.from_env()
    return WorkbookRecordStore(
        resolved.workbook_file,
        logger=get_app_logger(),
        currency=resolved.currency,
    )


def build_dashboard_use_case(
    store: RecordStorePort | None = None,
) -> GetDashboardSummaryUseCase:
    """Return the dashboard use case bound to the record store."""
    resolved_store = store or build_record_store()
    return GetDashboardSummaryUseCase(resolved_store, logger=get_app_logger())


def build_portfolio_state(
    store: RecordStorePort | None = None,
) -> PortfolioState:
    """Return a fresh portfolio state container."""
    return PortfolioState(store or build_record_store())


__all__ = [
    "build_record_store",
    "build_dashboard_use_case",
    "build_portfolio_state",
]
