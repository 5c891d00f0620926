"""Database manager for SQLite connections and path management."""

import sqlite3
from contextlib import contextmanager
from config import Config, get_migrations_dir
from errors import StorageError


class DatabaseManager:
    """Manages database connections and paths.

    Args:
        config: Application configuration object.
    """

    def __init__(self, config: Config):
        """Initialize the database manager.

        Args:
            config: Config object containing database configuration.
        """
        self.config = config

    @contextmanager
    def connect(self):
        """Get a database connection with automatic cleanup.

        Any sqlite3 error raised while the connection is in use is re-raised
        as StorageError.

        Yields:
            sqlite3.Connection: Database connection in autocommit mode.
        """
        try:
            conn = self._open()
        except sqlite3.Error as e:
            raise StorageError(f"Could not open database: {e}") from e

        try:
            yield conn
        except sqlite3.Error as e:
            raise StorageError(f"Database error: {e}") from e
        finally:
            self._release(conn)

    def _open(self) -> sqlite3.Connection:
        db_path = self.config.db_path
        db_path.parent.mkdir(parents=True, exist_ok=True)

        # isolation_level=None so write_transaction controls BEGIN/COMMIT
        conn = sqlite3.connect(
            db_path, timeout=self.config.db_timeout, isolation_level=None
        )
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    def _release(self, conn: sqlite3.Connection) -> None:
        conn.close()

    def get_db_path(self):
        """Get the current database path.

        Returns:
            Path: Path to the database file.
        """
        return self.config.db_path

    def get_migrations_dir(self):
        """Get the migrations directory path.

        Returns:
            Path: Path to the migrations directory.
        """
        return get_migrations_dir()


@contextmanager
def write_transaction(conn: sqlite3.Connection):
    """Run a read-modify-write sequence as one serialized transaction.

    BEGIN IMMEDIATE takes the database write lock before the first read, so
    two writers touching the same row run strictly one after the other.
    Rolls back if the block raises.

    Args:
        conn: Connection opened in autocommit mode.

    Yields:
        sqlite3.Connection: The same connection, inside the transaction.
    """
    conn.execute("BEGIN IMMEDIATE")
    try:
        yield conn
    except BaseException:
        conn.execute("ROLLBACK")
        raise
    conn.execute("COMMIT")
