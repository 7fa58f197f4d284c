"""Tests for Decimal helpers."""

from decimal import Decimal

from src.utils.decimal_utils import coerce_decimal, is_decimal_like


def test_coerce_decimal_parses_numbers_and_text() -> None:
    assert coerce_decimal(12) == Decimal("12")
    assert coerce_decimal(1.5) == Decimal("1.5")
    assert coerce_decimal(" 1234,56 ") == Decimal("1234.56")
    assert coerce_decimal(Decimal("3.10")) == Decimal("3.10")


def test_coerce_decimal_treats_garbage_as_zero() -> None:
    """Missing, boolean, non-finite and malformed values become 0."""
    for value in (None, True, "", "abc", "nan", float("inf"), Decimal("NaN")):
        assert coerce_decimal(value) == Decimal("0")


def test_is_decimal_like() -> None:
    assert is_decimal_like("10,5")
    assert is_decimal_like(3)
    assert not is_decimal_like("ten")
    assert not is_decimal_like(None)
    assert not is_decimal_like(False)
    assert not is_decimal_like("inf")
