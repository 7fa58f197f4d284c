"""Policy deriving display names for new accounts."""

from src.domain.constants import account_type_label, platform_label


def default_account_name(account_type: str, platform: str) -> str:
    """Return the "{type label} - {platform label}" fallback name."""
    return f"{account_type_label(account_type)} - {platform_label(platform)}"


def resolve_account_name(
    name: str | None,
    account_type: str,
    platform: str,
) -> str:
    """Return the given name, or the derived one when it is blank."""
    if name and name.strip():
        return name.strip()
    return default_account_name(account_type, platform)


__all__ = ["default_account_name", "resolve_account_name"]
