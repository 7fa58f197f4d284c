"""Domain constants for the portfolio tracker."""

ACCOUNT_TYPES = (
    ("life-insurance", "Life insurance"),
    ("brokerage", "Brokerage account"),
    ("regulated-savings", "Regulated savings"),
    ("retirement", "Retirement plan"),
    ("real-estate-fund", "Real estate fund"),
    ("crypto", "Crypto"),
    ("other", "Other"),
)

PLATFORMS = (
    ("boursorama", "Boursorama"),
    ("fortuneo", "Fortuneo"),
    ("bourse-direct", "Bourse Direct"),
    ("degiro", "Degiro"),
    ("trade-republic", "Trade Republic"),
    ("interactive-brokers", "Interactive Brokers"),
    ("linxea", "Linxea"),
    ("yomoni", "Yomoni"),
    ("nalo", "Nalo"),
    ("swisslife", "Swisslife"),
    ("axa", "AXA"),
    ("generali", "Generali"),
    ("credit-agricole", "Credit Agricole"),
    ("bnp-paribas", "BNP Paribas"),
    ("societe-generale", "Societe Generale"),
    ("other", "Other"),
)

DEPOSIT = "deposit"
WITHDRAWAL = "withdrawal"
TRANSACTION_KINDS = (DEPOSIT, WITHDRAWAL)

ONE_TIME = "one-time"
RECURRENCES = (ONE_TIME, "weekly", "monthly", "quarterly", "yearly")

# Occurrences per year of each recurring schedule.
OCCURRENCES_PER_YEAR = {
    "weekly": 52,
    "monthly": 12,
    "quarterly": 4,
    "yearly": 1,
}

MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

HISTORY_MONTHS = 12

DEFAULT_CURRENCY = "EUR"

DEFAULT_CONFIG = (
    ("currency", DEFAULT_CURRENCY),
    ("dateFormat", "DD/MM/YYYY"),
    ("onboardingComplete", "false"),
    ("version", "1.0.0"),
)


def account_type_label(type_id: str | None) -> str:
    """Return the display label of an account type, or the raw tag."""
    return dict(ACCOUNT_TYPES).get(type_id or "", type_id or "")


def platform_label(platform_id: str | None) -> str:
    """Return the display label of a platform, or the raw tag."""
    return dict(PLATFORMS).get(platform_id or "", platform_id or "")


__all__ = [
    "ACCOUNT_TYPES",
    "PLATFORMS",
    "DEPOSIT",
    "WITHDRAWAL",
    "TRANSACTION_KINDS",
    "ONE_TIME",
    "RECURRENCES",
    "OCCURRENCES_PER_YEAR",
    "MONTH_ABBREVIATIONS",
    "HISTORY_MONTHS",
    "DEFAULT_CURRENCY",
    "DEFAULT_CONFIG",
    "account_type_label",
    "platform_label",
]
