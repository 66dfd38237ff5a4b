from contextlib import contextmanager
from typing import Any, Generator

from loguru import logger
from sqlalchemy import Engine, create_engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from ..config import SettingsManager
from ..services.postgresql import get_connection_string
from .base import Base

# Backends whose default pool does not take QueuePool sizing arguments
_UNPOOLED_BACKENDS = {"sqlite"}


def engine_options(connection_string: str, settings: SettingsManager) -> dict[str, Any]:
    """Keyword arguments for create_engine suited to the URL's backend."""
    options: dict[str, Any] = {"echo": settings.database.echo}
    if make_url(connection_string).get_backend_name() not in _UNPOOLED_BACKENDS:
        options["pool_size"] = settings.database.pool_size
        options["max_overflow"] = settings.database.max_overflow
    return options


class SessionManager:
    """Owns the registry engine and hands out sessions bound to it."""

    def __init__(self, connection_string: str | None = None):
        """Create the engine from an explicit URL or from the configured database settings."""
        if connection_string:
            self._engine = create_engine(connection_string)
        else:
            settings = SettingsManager.get_instance()
            url = get_connection_string(settings)
            self._engine = create_engine(url, **engine_options(url, settings))
        logger.debug("Database engine created for dialect {}", self._engine.dialect.name)
        self._session_factory = sessionmaker(bind=self._engine, expire_on_commit=False)

    @property
    def engine(self) -> Engine:
        return self._engine

    def create_all(self) -> None:
        Base.metadata.create_all(self._engine)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Session committed on success and rolled back when the block raises."""
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def get_session(self) -> Session:
        """Unmanaged session; the caller closes it."""
        return self._session_factory()

    def close(self) -> None:
        self._engine.dispose()


_session_manager: SessionManager | None = None


def init_session_manager(connection_string: str | None = None) -> SessionManager:
    """Create the process-wide session manager, replacing any previous one."""
    global _session_manager
    _session_manager = SessionManager(connection_string=connection_string)
    return _session_manager


def get_session_manager() -> SessionManager:
    """Return the process-wide session manager.

    Raises:
        RuntimeError: If init_session_manager() has not been called.
    """
    if _session_manager is None:
        raise RuntimeError(
            "Database not initialized. Call init_session_manager() first or set environment variables."
        )
    return _session_manager


@contextmanager
def get_session() -> Generator[Session, None, None]:
    """Managed session from the process-wide session manager."""
    with get_session_manager().session() as session:
        yield session
