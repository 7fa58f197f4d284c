"""Use cases reading and writing the workbook configuration."""

from src.application.ports.record_store import ConfigStorePort, RecordStorePort
from src.domain.models import ConfigEntry
from src.infrastructure.logging.logger import get_app_logger

ONBOARDING_KEY = "onboardingComplete"


class GetConfigUseCase:
    """Return the configuration mapping."""

    def __init__(self, store: ConfigStorePort) -> None:
        self._store = store

    def execute(self) -> dict[str, str]:
        return self._store.get_config()

    def is_onboarding_complete(self) -> bool:
        """Return whether the onboarding flag is set to ``"true"``."""
        return self.execute().get(ONBOARDING_KEY) == "true"


class SetConfigUseCase:
    """Insert or replace a configuration entry."""

    def __init__(self, store: ConfigStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, key: str, value: str) -> ConfigEntry:
        if not key:
            raise ValueError("Configuration key must not be empty")
        entry = self._store.set_config(key, str(value))
        self._logger.info(f"Configuration set: {key}={entry.value}")
        return entry


class ResetWorkbookUseCase:
    """Drop every record and restore the default configuration."""

    def __init__(self, store: RecordStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self) -> None:
        self._store.reset()
        self._logger.warning(f"Workbook reset at {self._store.path}")


__all__ = [
    "ONBOARDING_KEY",
    "GetConfigUseCase",
    "SetConfigUseCase",
    "ResetWorkbookUseCase",
]
