"""Application use cases package."""

from .complete_onboarding import (
    CompleteOnboardingUseCase,
    OnboardingAccountDraft,
    OnboardingResult,
)
from .get_dashboard_summary import DashboardSummary, GetDashboardSummaryUseCase
from .manage_accounts import (
    AddAccountUseCase,
    DeleteAccountUseCase,
    ListAccountsUseCase,
    UpdateAccountUseCase,
)
from .manage_config import (
    GetConfigUseCase,
    ResetWorkbookUseCase,
    SetConfigUseCase,
)
from .manage_transactions import (
    AddTransactionUseCase,
    DeleteTransactionUseCase,
    ListTransactionsUseCase,
)
from .manage_valuations import (
    AddValuationUseCase,
    ListValuationsUseCase,
    UpdateValuationUseCase,
)
from .record_monthly_update import (
    MonthlyAccountUpdate,
    MonthlyUpdateResult,
    RecordMonthlyUpdateUseCase,
)

__all__ = [
    "CompleteOnboardingUseCase",
    "OnboardingAccountDraft",
    "OnboardingResult",
    "DashboardSummary",
    "GetDashboardSummaryUseCase",
    "AddAccountUseCase",
    "DeleteAccountUseCase",
    "ListAccountsUseCase",
    "UpdateAccountUseCase",
    "GetConfigUseCase",
    "ResetWorkbookUseCase",
    "SetConfigUseCase",
    "AddTransactionUseCase",
    "DeleteTransactionUseCase",
    "ListTransactionsUseCase",
    "AddValuationUseCase",
    "ListValuationsUseCase",
    "UpdateValuationUseCase",
    "MonthlyAccountUpdate",
    "MonthlyUpdateResult",
    "RecordMonthlyUpdateUseCase",
]
