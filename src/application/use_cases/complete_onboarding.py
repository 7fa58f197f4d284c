"""Use case creating the initial portfolio from onboarding drafts.

Each draft describes an account as the user knows it on day one: what was
invested so far, what is invested regularly, and what it is worth today.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.application.ports.record_store import RecordStorePort
from src.application.use_cases.manage_accounts import AddAccountUseCase
from src.application.use_cases.manage_config import ONBOARDING_KEY
from src.application.use_cases.manage_transactions import AddTransactionUseCase
from src.application.use_cases.manage_valuations import AddValuationUseCase
from src.domain.constants import DEPOSIT, ONE_TIME
from src.domain.models import Account
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


@dataclass(frozen=True)
class OnboardingAccountDraft:
    """Account described during onboarding.

    Attributes:
        account_type: Account type tag.
        platform: Platform tag.
        name: Optional display name.
        opened_date: Optional opening date.
        initial_investment: Capital invested so far.
        recurring_amount: Amount invested on a schedule.
        recurrence: Schedule of the recurring amount.
        current_value: Worth of the account today.
    """

    account_type: str
    platform: str
    name: str | None = None
    opened_date: date | None = None
    initial_investment: Decimal = Decimal("0")
    recurring_amount: Decimal = Decimal("0")
    recurrence: str = "monthly"
    current_value: Decimal = Decimal("0")


@dataclass(frozen=True)
class OnboardingResult:
    """Accounts created by an onboarding run."""

    accounts: list[Account]
    transaction_count: int
    valuation_count: int


class CompleteOnboardingUseCase:
    """Persist onboarding drafts and flag onboarding as complete."""

    def __init__(self, store: RecordStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Record store receiving the new records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()
        self._add_account = AddAccountUseCase(store, logger=self._logger)
        self._add_transaction = AddTransactionUseCase(
            store,
            logger=self._logger,
        )
        self._add_valuation = AddValuationUseCase(store, logger=self._logger)

    def execute(
        self,
        drafts: list[OnboardingAccountDraft],
        today: date | None = None,
    ) -> OnboardingResult:
        """Create accounts, opening deposits and first valuations.

        Args:
            drafts: Accounts collected during onboarding.
            today: Optional reference date, defaults to today.

        Returns:
            OnboardingResult: Created accounts and record counts.
        """
        reference = today or date.today()
        accounts = []
        transaction_count = 0
        valuation_count = 0
        for draft in drafts:
            opened = draft.opened_date or reference
            account = self._add_account.execute(
                account_type=draft.account_type,
                platform=draft.platform,
                name=draft.name,
                opened_date=opened,
            )
            accounts.append(account)

            initial = coerce_decimal(draft.initial_investment)
            if initial > 0:
                self._add_transaction.execute(
                    account_id=account.id,
                    kind=DEPOSIT,
                    amount=initial,
                    transaction_date=opened,
                    recurrence=ONE_TIME,
                    description="Initial investment",
                )
                transaction_count += 1

            recurring = coerce_decimal(draft.recurring_amount)
            if recurring > 0:
                self._add_transaction.execute(
                    account_id=account.id,
                    kind=DEPOSIT,
                    amount=recurring,
                    transaction_date=reference,
                    recurrence=draft.recurrence or "monthly",
                    description="Recurring investment",
                )
                transaction_count += 1

            current = coerce_decimal(draft.current_value)
            if current > 0:
                self._add_valuation.execute(
                    account_id=account.id,
                    value=current,
                    valuation_date=reference,
                )
                valuation_count += 1

        self._store.set_config(ONBOARDING_KEY, "true")
        self._logger.info(
            f"Onboarding complete: accounts={len(accounts)}, "
            f"transactions={transaction_count}, valuations={valuation_count}"
        )
        return OnboardingResult(
            accounts=accounts,
            transaction_count=transaction_count,
            valuation_count=valuation_count,
        )


__all__ = [
    "OnboardingAccountDraft",
    "OnboardingResult",
    "CompleteOnboardingUseCase",
]
