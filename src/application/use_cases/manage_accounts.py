"""Use cases managing investment accounts."""

from datetime import date
from typing import Any

from src.application.ports.record_store import AccountsStorePort
from src.domain.constants import ACCOUNT_TYPES
from src.domain.models import Account
from src.domain.policies.account_naming import resolve_account_name
from src.infrastructure.logging.logger import get_app_logger


class ListAccountsUseCase:
    """Return every account."""

    def __init__(self, store: AccountsStorePort) -> None:
        self._store = store

    def execute(self) -> list[Account]:
        return self._store.list_accounts()


class AddAccountUseCase:
    """Create an account, deriving its name when none is given."""

    def __init__(self, store: AccountsStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port providing account persistence.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        account_type: str,
        platform: str,
        name: str | None = None,
        opened_date: date | None = None,
        notes: str = "",
    ) -> Account:
        """Create the account.

        Args:
            account_type: Account type tag.
            platform: Platform tag or free text.
            name: Optional display name.
            opened_date: Optional opening date, defaults to today.
            notes: Free text notes.

        Returns:
            Account: Stored account with its generated id.
        """
        if account_type not in dict(ACCOUNT_TYPES):
            self._logger.warning(f"Unknown account type '{account_type}'")
        account = self._store.add_account(
            {
                "type": account_type,
                "name": resolve_account_name(name, account_type, platform),
                "platform": platform,
                "opened_date": opened_date,
                "notes": notes or "",
            }
        )
        self._logger.info(f"Account created: {account.id} ({account.name})")
        return account


class UpdateAccountUseCase:
    """Patch an existing account.

    ``type``, ``name``, ``platform`` and ``opened_date`` are applied only
    when given a non-empty value. ``notes`` is applied whenever the key is
    present and not None, so an empty string clears it.
    """

    def __init__(self, store: AccountsStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, account_id: str, updates: dict[str, Any]) -> Account:
        account = self._store.update_account(account_id, updates)
        self._logger.info(
            f"Account updated: {account_id} fields={sorted(updates)}"
        )
        return account


class DeleteAccountUseCase:
    """Delete an account and its dependent records."""

    def __init__(self, store: AccountsStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, account_id: str) -> None:
        self._store.delete_account(account_id)
        self._logger.info(f"Account deleted: {account_id}")


__all__ = [
    "ListAccountsUseCase",
    "AddAccountUseCase",
    "UpdateAccountUseCase",
    "DeleteAccountUseCase",
]
