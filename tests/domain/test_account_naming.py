"""Tests for the account naming policy."""

from src.domain.policies import default_account_name, resolve_account_name


def test_default_account_name_uses_labels() -> None:
    assert default_account_name("life-insurance", "linxea") == (
        "Life insurance - Linxea"
    )


def test_default_account_name_keeps_unknown_tags() -> None:
    """Unknown tags are shown verbatim."""
    assert default_account_name("pea", "My Bank") == "pea - My Bank"


def test_resolve_account_name_prefers_given_name() -> None:
    assert resolve_account_name("  Main PEA ", "brokerage", "fortuneo") == (
        "Main PEA"
    )
    assert resolve_account_name("   ", "brokerage", "fortuneo") == (
        "Brokerage account - Fortuneo"
    )
    assert resolve_account_name(None, "crypto", "other") == "Crypto - Other"
