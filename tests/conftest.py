"""Shared pytest fixtures for all tests."""

import sqlite3
import pytest
from fastapi.testclient import TestClient
from pathlib import Path

from api import create_app
from cli.migrate import apply_pending
from config import Config, get_migrations_dir
from db.manager import DatabaseManager
from services.base import Services
from tests.helpers import TODAY, run_migrations


@pytest.fixture
def test_db():
    """Create an in-memory SQLite database for testing.

    The connection is shared with the API's worker threads, so the
    same-thread check is off.

    Yields:
        sqlite3.Connection: Connection to in-memory database.
    """
    conn = sqlite3.connect(":memory:", check_same_thread=False, isolation_level=None)
    conn.execute("PRAGMA foreign_keys = ON")
    yield conn
    conn.close()


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary database.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "budgetbook",
        db_data_dir=tmp_path / "budgetbook" / "db",
        db_filename="test.db",
        log_level="DEBUG",
        log_dir=tmp_path / "budgetbook" / "logs",
        db_timeout=30.0,
        default_user_id=1,
    )


class TestDatabaseManager(DatabaseManager):
    """Database manager that hands out one shared in-memory connection."""

    __test__ = False

    def __init__(self, config, conn):
        super().__init__(config)
        self.conn = conn

    def _open(self):
        return self.conn

    def _release(self, conn):
        # Don't close the connection - let the fixture handle it
        pass

    def get_db_path(self):
        return Path(":memory:")


@pytest.fixture
def db_manager_with_schema(test_config, test_db):
    """Create a DatabaseManager with schema already set up.

    Args:
        test_config: Test configuration fixture.
        test_db: In-memory database connection fixture.

    Returns:
        TestDatabaseManager: Database manager with schema ready.
    """
    run_migrations(test_db, get_migrations_dir())
    return TestDatabaseManager(test_config, test_db)


@pytest.fixture
def services(test_config, db_manager_with_schema):
    """Create a Services container with test database.

    The ledger's clock is pinned to tests.helpers.TODAY.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config, db_manager=db_manager_with_schema, clock=lambda: TODAY)


@pytest.fixture
def file_services(test_config):
    """Services backed by a real database file, migrated with the CLI code.

    Each call opens its own connection, like the running server does.
    """
    db_manager = DatabaseManager(test_config)
    apply_pending(db_manager)
    return Services(test_config, db_manager=db_manager, clock=lambda: TODAY)


@pytest.fixture
def client(services):
    """FastAPI test client wired to the in-memory services."""
    with TestClient(create_app(services)) as test_client:
        yield test_client
