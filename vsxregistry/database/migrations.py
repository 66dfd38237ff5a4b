"""Schema bootstrap and verification for the registry tables."""

from loguru import logger
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from ..config import SettingsManager
from .session import SessionManager, get_session_manager


def registry_tables() -> list[str]:
    """Configured names of the namespace, extension and extension version tables."""
    storage = SettingsManager.get_instance().storage
    return [
        storage.table_name_namespaces,
        storage.table_name_extensions,
        storage.table_name_extension_versions,
    ]


def init_database(session_manager: SessionManager | None = None) -> None:
    """Create the registry tables that do not exist yet."""
    session_manager = session_manager or get_session_manager()

    from .. import models  # noqa: F401  registers the tables on Base.metadata

    logger.info("Creating missing registry tables")
    session_manager.create_all()


def verify_schema(session_manager: SessionManager | None = None) -> dict:
    """Check that every registry table exists.

    Returns:
        {'status': 'ok' | 'missing_tables' | 'error',
         'expected_tables': [...], 'missing_tables': [...]}
        plus 'error' when the database could not be inspected.
    """
    session_manager = session_manager or get_session_manager()
    expected = registry_tables()

    try:
        inspector = inspect(session_manager.engine)
        missing = [name for name in expected if not inspector.has_table(name)]
    except SQLAlchemyError as e:
        logger.error("Could not inspect registry schema: {}", e)
        return {"status": "error", "error": str(e), "expected_tables": expected, "missing_tables": []}

    if missing:
        logger.warning("Missing registry tables: {}", missing)
    return {
        "status": "missing_tables" if missing else "ok",
        "expected_tables": expected,
        "missing_tables": missing,
    }
