"""Use case recording the periodic check-in of every account.

Once a month the user reports, per account, what it is worth now and what
was paid in or taken out since the last check-in.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.application.ports.record_store import RecordStorePort
from src.application.use_cases.manage_transactions import AddTransactionUseCase
from src.application.use_cases.manage_valuations import AddValuationUseCase
from src.domain.constants import DEPOSIT, ONE_TIME, WITHDRAWAL
from src.domain.services.valuations import latest_valuations
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal

MONTHLY_DEPOSIT_DESCRIPTION = "Monthly deposit"
WITHDRAWAL_DESCRIPTION = "Withdrawal"


@dataclass(frozen=True)
class MonthlyAccountUpdate:
    """Figures reported for one account.

    Attributes:
        account_id: Updated account id.
        current_value: Worth today; None keeps the latest valuation.
        deposit: Amount paid in since the last check-in.
        withdrawal: Amount taken out since the last check-in.
    """

    account_id: str
    current_value: Decimal | None = None
    deposit: Decimal = Decimal("0")
    withdrawal: Decimal = Decimal("0")


@dataclass(frozen=True)
class MonthlyUpdateResult:
    """Records created by a monthly update."""

    valuation_count: int
    transaction_count: int


class RecordMonthlyUpdateUseCase:
    """Store new valuations and cash movements for a batch of accounts."""

    def __init__(self, store: RecordStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Record store receiving the new records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()
        self._add_transaction = AddTransactionUseCase(
            store,
            logger=self._logger,
        )
        self._add_valuation = AddValuationUseCase(store, logger=self._logger)

    def execute(
        self,
        updates: list[MonthlyAccountUpdate],
        today: date | None = None,
    ) -> MonthlyUpdateResult:
        """Record the reported figures, dated today.

        A valuation is added only when the reported value differs from the
        account's latest one (0 when the account was never valued). Zero
        deposits and withdrawals are skipped.

        Args:
            updates: Figures reported per account.
            today: Optional reference date, defaults to today.

        Returns:
            MonthlyUpdateResult: Number of created records.
        """
        reference = today or date.today()
        previous = latest_valuations(self._store.list_valuations())
        valuation_count = 0
        transaction_count = 0
        for update in updates:
            if update.current_value is not None:
                value = coerce_decimal(update.current_value)
                latest = previous.get(update.account_id)
                previous_value = (
                    coerce_decimal(latest.value) if latest else Decimal("0")
                )
                if value != previous_value:
                    self._add_valuation.execute(
                        account_id=update.account_id,
                        value=value,
                        valuation_date=reference,
                    )
                    valuation_count += 1

            for kind, amount, description in (
                (DEPOSIT, update.deposit, MONTHLY_DEPOSIT_DESCRIPTION),
                (WITHDRAWAL, update.withdrawal, WITHDRAWAL_DESCRIPTION),
            ):
                amount = coerce_decimal(amount)
                if amount <= 0:
                    continue
                self._add_transaction.execute(
                    account_id=update.account_id,
                    kind=kind,
                    amount=amount,
                    transaction_date=reference,
                    recurrence=ONE_TIME,
                    description=description,
                )
                transaction_count += 1

        self._logger.info(
            f"Monthly update recorded on {reference.isoformat()}: "
            f"valuations={valuation_count}, transactions={transaction_count}"
        )
        return MonthlyUpdateResult(
            valuation_count=valuation_count,
            transaction_count=transaction_count,
        )


__all__ = [
    "MonthlyAccountUpdate",
    "MonthlyUpdateResult",
    "RecordMonthlyUpdateUseCase",
]
