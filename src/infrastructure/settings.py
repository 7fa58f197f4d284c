"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from urllib.parse import unquote, urlparse

from src.domain.constants import DEFAULT_CURRENCY
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root

DEFAULT_WORKBOOK_NAME = "investments.xlsx"


@dataclass(frozen=True)
class TrackerSettings:
    """Settings for locating the portfolio workbook.

    Attributes:
        workbook_file: Path to the ``.xlsx`` workbook used as storage.
        currency: Currency code used for display.
    """

    workbook_file: Path
    currency: str = DEFAULT_CURRENCY

    @classmethod
    def from_env(cls) -> "TrackerSettings":
        """Build settings from environment variables.

        Returns:
            TrackerSettings: Settings sourced from environment variables.
        """
        raw_workbook = os.getenv("PORTFOLIO_WORKBOOK")
        currency = (
            os.getenv("PORTFOLIO_CURRENCY", DEFAULT_CURRENCY).strip().upper()
            or DEFAULT_CURRENCY
        )
        if raw_workbook:
            workbook_file = cls._normalize_path(
                raw_workbook,
                logger=get_app_logger(),
            )
        else:
            workbook_file = cls._default_workbook_file()
        return cls(workbook_file=workbook_file, currency=currency)

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize the workbook path or ``file://`` URI.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Normalized filesystem path.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        path = Path(raw_path).expanduser().resolve()
        if path.suffix.lower() != ".xlsx":
            logger.warning(
                f"Workbook path {path} does not end with .xlsx"
            )
        if not path.exists():
            logger.info(f"Workbook will be created at {path}")
        return path

    @staticmethod
    def _default_workbook_file() -> Path:
        """Return ``data/investments.xlsx`` under the project root."""
        return get_project_root() / "data" / DEFAULT_WORKBOOK_NAME


__all__ = ["TrackerSettings", "DEFAULT_WORKBOOK_NAME"]
