"""Use case to compute the portfolio dashboard from stored records."""

from collections.abc import Callable
from datetime import date

from src.application.ports.record_store import RecordStorePort
from src.domain.models import DashboardSummary
from src.domain.services.dashboard import compute_dashboard
from src.infrastructure.logging.logger import get_app_logger


class GetDashboardSummaryUseCase:
    """Compute the dashboard summary from the record store."""

    def __init__(
        self,
        store: RecordStorePort,
        logger=None,
        clock: Callable[[], date] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Port listing accounts, transactions and valuations.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning today's date.
        """
        self._store = store
        self._logger = logger or get_app_logger()
        self._clock = clock or date.today

    def execute(self, now: date | None = None) -> DashboardSummary:
        """Return the dashboard summary.

        Args:
            now: Optional reference date, defaults to the clock's today.

        Returns:
            DashboardSummary: Aggregated portfolio view.
        """
        reference = now or self._clock()
        accounts = self._store.list_accounts()
        transactions = self._store.list_transactions()
        valuations = self._store.list_valuations()

        summary = compute_dashboard(
            accounts,
            transactions,
            valuations,
            reference,
        )
        self._logger.info(
            f"Dashboard computed for {reference.isoformat()}: "
            f"accounts={len(accounts)}, wealth={summary.total_wealth}, "
            f"invested={summary.total_invested_portfolio}"
        )
        return summary


__all__ = ["GetDashboardSummaryUseCase", "DashboardSummary"]
