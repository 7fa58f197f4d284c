"""CLI adapter printing the dashboard summary as JSON.

The reference date defaults to today and can be overridden with the
``SUMMARY_DATE`` environment variable (YYYY-MM-DD).
"""

import json
import os
from datetime import date

from src.application.errors import StoreUnavailableError
from src.infrastructure.container import build_dashboard_use_case
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def main() -> None:
    """Compute the dashboard and print it to stdout."""
    logger = get_app_logger()
    get_usage_logger().info("dashboard_summary_cli invoked")
    reference = _parse_date(os.getenv("SUMMARY_DATE"), logger)

    use_case = build_dashboard_use_case()
    try:
        summary = use_case.execute(now=reference)
    except StoreUnavailableError as exc:
        logger.error(str(exc))
        raise SystemExit(1) from exc

    print(json.dumps(summary.to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":  # pragma: no cover
    main()
