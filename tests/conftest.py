"""Pytest configuration and shared test fixtures.

Responsibilities:
- Provide database fixtures with in-memory SQLite
- Seed a small registry of namespaces, extensions and versions
- Configure logging for tests
"""

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from tests.test_utilities import DatabaseSessionMockBuilder
from vsxregistry.database import SessionManager
from vsxregistry.database.migrations import init_database
from vsxregistry.models import Extension, ExtensionVersion, Namespace


@pytest.fixture
def mock_db_session():
    """Provide a mocked database session."""
    return DatabaseSessionMockBuilder().build()


@pytest.fixture(scope="session")
def test_db_config():
    """Database configuration for testing (SQLite in-memory)."""
    return "sqlite:///:memory:"


@pytest.fixture(scope="function")
def session_manager(test_db_config):
    """Provide a session manager with all tables created."""
    manager = SessionManager(connection_string=test_db_config)
    init_database(manager)

    try:
        yield manager
    finally:
        manager.close()


@pytest.fixture(scope="function")
def db_session(session_manager):
    """Provide a database session for testing.

    Each test gets a fresh in-memory database that is discarded afterwards.
    """
    session = session_manager.get_session()

    try:
        yield session
    finally:
        session.close()


def seed_registry(session):
    """Create namespace 'bar' with extension 'foo' (1.0.0, 2.0.0) and 'baz' (1.0.0)."""
    namespace = Namespace(name="bar")
    foo = Extension(name="foo", namespace=namespace)
    baz = Extension(name="baz", namespace=namespace)

    versions = {
        "1.0.0": ExtensionVersion(
            extension=foo,
            version="1.0.0",
            display_name="Foo",
            timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc),
        ),
        "2.0.0": ExtensionVersion(
            extension=foo,
            version="2.0.0",
            display_name="Foo",
            description="Second release",
            timestamp=datetime(2024, 6, 1, tzinfo=timezone.utc),
        ),
    }
    other = ExtensionVersion(
        extension=baz,
        version="1.0.0",
        timestamp=datetime(2024, 3, 1, tzinfo=timezone.utc),
    )
    session.add_all([namespace, foo, baz, *versions.values(), other])
    session.commit()

    return SimpleNamespace(
        namespace=namespace,
        foo=foo,
        baz=baz,
        versions=versions,
        other=other,
    )


@pytest.fixture(scope="function")
def registry(db_session):
    """Provide a seeded registry in the test database."""
    return seed_registry(db_session)


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Configure logging for tests."""
    from loguru import logger
    import sys

    # Remove default handlers
    logger.remove()

    # Add test-specific handler with appropriate level
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    )

    yield

    # Cleanup
    logger.remove()
