"""Registry configuration loaded from environment variables."""

from .settings_manager import (
    ApplicationSettings,
    StorageSettings,
    DatabaseSettings,
    SettingsManager,
)

__all__ = [
    "SettingsManager",
    "ApplicationSettings",
    "StorageSettings",
    "DatabaseSettings",
]
