"""Domain services package."""

from .dashboard import compute_dashboard
from .finance import (
    compute_net_invested,
    compute_performance,
    compute_share,
    find_recurring_deposit,
    monthly_equivalent,
)
from .valuations import latest_valuations

__all__ = [
    "compute_dashboard",
    "compute_net_invested",
    "compute_performance",
    "compute_share",
    "find_recurring_deposit",
    "monthly_equivalent",
    "latest_valuations",
]
