"""Domain policies package."""

from .account_naming import default_account_name, resolve_account_name

__all__ = ["default_account_name", "resolve_account_name"]
