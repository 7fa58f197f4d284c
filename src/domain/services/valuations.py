"""Selection of valuation marks for an account."""

from collections.abc import Iterable
from datetime import date

from src.domain.models import Valuation
from src.utils.date_utils import coerce_date


def latest_valuations(
    valuations: Iterable[Valuation],
    as_of: date | None = None,
) -> dict[str, Valuation]:
    """Return the most recent valuation per account.

    On equal dates the valuation appearing later in ``valuations`` wins.
    Valuations without a usable date are ignored.

    Args:
        valuations: Valuation records in insertion order.
        as_of: Optional inclusive upper bound on the valuation date.

    Returns:
        dict[str, Valuation]: Latest valuation keyed by account id.
    """
    latest: dict[str, Valuation] = {}
    latest_dates: dict[str, date] = {}
    for valuation in valuations:
        valuation_date = coerce_date(valuation.date)
        if valuation_date is None:
            continue
        if as_of is not None and valuation_date > as_of:
            continue
        current = latest_dates.get(valuation.account_id)
        if current is None or valuation_date >= current:
            latest[valuation.account_id] = valuation
            latest_dates[valuation.account_id] = valuation_date
    return latest


__all__ = ["latest_valuations"]
