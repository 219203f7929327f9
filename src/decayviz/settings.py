# src/decayviz/settings.py
import logging
from typing import Protocol

from PySide6.QtCore import QSettings

from .config import SETTINGS_APPLICATION, SETTINGS_ORGANIZATION

logger = logging.getLogger(__name__)


class SettingsStore(Protocol):
    """Minimal key-value preference store: string values, missing keys read as None."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class QtSettingsStore:
    """
    SettingsStore backed by QSettings (registry / plist / ini depending on the platform).
    Values survive restarts and are scoped to the current user.
    """

    def __init__(self, settings: QSettings | None = None):
        self._settings = settings if settings is not None else QSettings(SETTINGS_ORGANIZATION, SETTINGS_APPLICATION)

    def get(self, key: str) -> str | None:
        value = self._settings.value(key, None)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        self._settings.setValue(key, value)
        self._settings.sync()
        logger.info("saved %s=%r to %s", key, value, self._settings.fileName())
