"""Registry settings loaded from the environment.

Each section is a dataclass; ``ENVIRONMENT_VARIABLES`` maps variable names
(without prefix) to ``(section, field)``. Values are converted to the
field's declared type.
"""

import os
from dataclasses import dataclass, fields
from threading import Lock
from typing import Dict, List, Optional

from loguru import logger

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
TRUE_VALUES = ("true", "1", "yes")


@dataclass
class ApplicationSettings:
    name: str = "vsx-registry"
    log_level: str = "INFO"


@dataclass
class StorageSettings:
    """Table names of the registry entities."""

    table_name_namespaces: str = "namespaces"
    table_name_extensions: str = "extensions"
    table_name_extension_versions: str = "extension_versions"


@dataclass
class DatabaseSettings:
    """Database connection settings.

    ``url`` takes precedence over the individual connection fields.
    """

    url: str = ""
    driver: str = "postgresql+psycopg2"
    host: str = "localhost"
    port: int = 5432
    name: str = "openvsx"
    username: str = "openvsx"
    password: str = ""
    schema: str = "public"
    sslmode: str = "prefer"
    pool_size: int = 10
    max_overflow: int = 20
    echo: bool = False


ENVIRONMENT_VARIABLES = {
    "APP_NAME": ("application", "name"),
    "APP_LOG_LEVEL": ("application", "log_level"),
    "TABLE_NAME_NAMESPACES": ("storage", "table_name_namespaces"),
    "TABLE_NAME_EXTENSIONS": ("storage", "table_name_extensions"),
    "TABLE_NAME_EXTENSION_VERSIONS": ("storage", "table_name_extension_versions"),
    "DATABASE_URL": ("database", "url"),
    "POSTGRESQL_DRIVER": ("database", "driver"),
    "POSTGRESQL_HOST": ("database", "host"),
    "POSTGRESQL_PORT": ("database", "port"),
    "POSTGRESQL_DATABASE_NAME": ("database", "name"),
    "POSTGRESQL_USERNAME": ("database", "username"),
    "POSTGRESQL_PASSWORD": ("database", "password"),
    "POSTGRESQL_SCHEMA": ("database", "schema"),
    "POSTGRESQL_SSLMODE": ("database", "sslmode"),
    "POSTGRESQL_POOL_SIZE": ("database", "pool_size"),
    "POSTGRESQL_MAX_OVERFLOW": ("database", "max_overflow"),
    "POSTGRESQL_ECHO": ("database", "echo"),
}


def _convert(raw: str, target: type):
    if target is bool:
        return raw.lower() in TRUE_VALUES
    if target is int:
        return int(raw)
    return raw


class SettingsManager:
    """Process-wide registry settings.

    Usage:
        settings = SettingsManager.get_instance()
        settings.storage.table_name_extension_versions
    """

    _instance: Optional["SettingsManager"] = None
    _lock: Lock = Lock()

    def __init__(self):
        """Defaults only; get_instance() also applies the environment."""
        self.application = ApplicationSettings()
        self.storage = StorageSettings()
        self.database = DatabaseSettings()
        self._change_lock = Lock()

    @classmethod
    def get_instance(cls) -> "SettingsManager":
        """Get or create the singleton, loading the environment once."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = cls()
                    instance.load_from_env()
                    cls._instance = instance
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the singleton so the next get_instance() reloads (tests)."""
        with cls._lock:
            cls._instance = None

    def load_from_env(self, prefix: str = "") -> None:
        """Apply every known environment variable that is set.

        Args:
            prefix: Optional prefix for variable names (e.g., "VSX_")

        Raises:
            ValueError: If a numeric variable does not hold an integer.
        """
        with self._change_lock:
            applied = []
            for variable, (section_name, field_name) in ENVIRONMENT_VARIABLES.items():
                raw = os.environ.get(f"{prefix}{variable}")
                if raw is None:
                    continue
                section = getattr(self, section_name)
                field_type = {f.name: f.type for f in fields(section)}[field_name]
                setattr(section, field_name, _convert(raw, field_type))
                applied.append(variable)

            logger.info("Loaded {} setting(s) from environment{}", len(applied), f" with prefix {prefix}" if prefix else "")

    def validate(self) -> Dict[str, List[str]]:
        """Per-section validation errors; sections without errors are omitted."""
        errors: Dict[str, List[str]] = {"application": [], "storage": [], "database": []}

        if not self.application.name:
            errors["application"].append("Application name is required")
        if self.application.log_level.upper() not in LOG_LEVELS:
            errors["application"].append("Invalid log level")

        table_names = [
            self.storage.table_name_namespaces,
            self.storage.table_name_extensions,
            self.storage.table_name_extension_versions,
        ]
        if not all(table_names):
            errors["storage"].append("Table names must not be empty")
        if len(set(table_names)) != len(table_names):
            errors["storage"].append("Table names must be distinct")

        # A full URL bypasses the individual connection fields
        if not self.database.url:
            if not self.database.host:
                errors["database"].append("Database host is required")
            if not 1 <= self.database.port <= 65535:
                errors["database"].append("Database port must be between 1 and 65535")
            if not self.database.name:
                errors["database"].append("Database name is required")

        return {section: messages for section, messages in errors.items() if messages}
