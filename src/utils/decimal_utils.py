"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Unparseable or non-finite values are treated as zero so that a single
    malformed cell never poisons an aggregate.

    Args:
        value: Raw numeric value from the workbook or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal("0")
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
        if not value:
            return Decimal("0")
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Decimal("0")
    if not result.is_finite():
        return Decimal("0")
    return result


def is_decimal_like(value) -> bool:
    """Return whether a raw value parses as a finite number."""
    if value is None or isinstance(value, bool):
        return False
    if isinstance(value, (int, float, Decimal)):
        return Decimal(str(value)).is_finite()
    if isinstance(value, str):
        try:
            return Decimal(value.strip().replace(",", ".")).is_finite()
        except InvalidOperation:
            return False
    return False


__all__ = ["coerce_decimal", "is_decimal_like"]
