"""Use cases managing deposits and withdrawals."""

from datetime import date
from decimal import Decimal

from src.application.ports.record_store import TransactionsStorePort
from src.domain.constants import ONE_TIME, RECURRENCES, TRANSACTION_KINDS
from src.domain.models import Transaction
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


class ListTransactionsUseCase:
    """Return transactions, optionally for a single account."""

    def __init__(self, store: TransactionsStorePort) -> None:
        self._store = store

    def execute(self, account_id: str | None = None) -> list[Transaction]:
        return self._store.list_transactions(account_id)


class AddTransactionUseCase:
    """Record a deposit or withdrawal."""

    def __init__(self, store: TransactionsStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port providing transaction persistence.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        account_id: str,
        kind: str,
        amount: Decimal | float | str,
        transaction_date: date | None = None,
        recurrence: str = ONE_TIME,
        description: str = "",
    ) -> Transaction:
        """Store the transaction.

        Args:
            account_id: Owning account id.
            kind: ``deposit`` or ``withdrawal``.
            amount: Non-negative amount; unparseable values become 0.
            transaction_date: Optional date, defaults to today.
            recurrence: Recurrence tag, informational only.
            description: Free text.

        Returns:
            Transaction: Stored transaction with its generated id.
        """
        if kind not in TRANSACTION_KINDS:
            self._logger.warning(
                f"Transaction kind '{kind}' is ignored by the dashboard"
            )
        if recurrence not in RECURRENCES:
            self._logger.warning(f"Unknown recurrence '{recurrence}'")
        value = coerce_decimal(amount)
        if value < 0:
            self._logger.warning(
                f"Negative transaction amount for account {account_id}: {value}"
            )
        transaction = self._store.add_transaction(
            {
                "account_id": account_id,
                "date": transaction_date,
                "kind": kind,
                "amount": value,
                "recurrence": recurrence,
                "description": description or "",
            }
        )
        self._logger.info(
            f"Transaction created: {transaction.id} {kind} {value} "
            f"on account {account_id}"
        )
        return transaction


class DeleteTransactionUseCase:
    """Delete a transaction by id."""

    def __init__(self, store: TransactionsStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, transaction_id: str) -> None:
        self._store.delete_transaction(transaction_id)
        self._logger.info(f"Transaction deleted: {transaction_id}")


__all__ = [
    "ListTransactionsUseCase",
    "AddTransactionUseCase",
    "DeleteTransactionUseCase",
]
