"""Helper utilities for tests."""

from datetime import date
from decimal import Decimal
from pathlib import Path
import sqlite3

# Date returned by the ledger clock in the services fixtures.
TODAY = date(2025, 1, 15)


def run_migrations(conn: sqlite3.Connection, migrations_dir: Path) -> None:
    """Run all SQL migrations in order.

    Args:
        conn: SQLite connection to run migrations against.
        migrations_dir: Path to directory containing .sql migration files.
    """
    for migration_file in sorted(migrations_dir.glob("*.sql")):
        conn.executescript(migration_file.read_text())


def history_sum(category) -> Decimal:
    """Sum every entry amount in a category's history."""
    return sum(
        (e.amount for entries in category.transaction_history.values() for e in entries),
        Decimal("0"),
    )
