#!/usr/bin/env python3

from typing import List, Set

from logger import get_logger

logger = get_logger()


def _applied_migrations(conn) -> Set[str]:
    """Names of migration files already run, creating the tracking table if needed."""
    conn.execute("""
        CREATE TABLE IF NOT EXISTS schema_migrations (
            migration_file TEXT PRIMARY KEY,
            applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    """)
    return {row[0] for row in conn.execute("SELECT migration_file FROM schema_migrations")}


def pending_migrations(db_manager) -> List[str]:
    """List migration files that have not been applied, in run order."""
    migrations_dir = db_manager.get_migrations_dir()
    with db_manager.connect() as conn:
        applied = _applied_migrations(conn)
    return sorted(
        path.name for path in migrations_dir.glob("*.sql") if path.name not in applied
    )


def apply_pending(db_manager) -> int:
    """Run every pending migration script.

    Connections are in autocommit mode, so each script must be safe to re-run
    (CREATE ... IF NOT EXISTS, INSERT OR IGNORE) in case recording it fails.

    Returns:
        Number of migrations applied.
    """
    pending = pending_migrations(db_manager)
    if not pending:
        logger.info("No pending migrations.")
        return 0

    migrations_dir = db_manager.get_migrations_dir()
    with db_manager.connect() as conn:
        for migration_file in pending:
            conn.executescript((migrations_dir / migration_file).read_text())
            conn.execute(
                "INSERT INTO schema_migrations (migration_file) VALUES (?)",
                (migration_file,),
            )
            logger.info(f"Applied migration: {migration_file}")

    logger.info(f"Successfully applied {len(pending)} migration(s).")
    return len(pending)


def cmd_status(args, db_manager):
    """Show how many migrations are pending."""
    if not db_manager.get_db_path().exists():
        logger.info(
            "Database does not exist. Run 'python -m cli migrate apply' to create it."
        )
        return

    pending = pending_migrations(db_manager)
    for migration_file in pending:
        logger.info(f"{migration_file}: PENDING")
    logger.info(f"Pending migrations: {len(pending)}")


def cmd_apply(args, db_manager):
    """Apply pending migrations."""
    apply_pending(db_manager)


def setup_parser(subparsers):
    """Setup migrate subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "migrate",
        help="Database migrations",
        description="Manage the budget database schema",
    )

    migrate_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available migration commands",
        dest="subcommand",
        required=True,
    )

    status_parser = migrate_subparsers.add_parser(
        "status", help="Show pending migrations"
    )
    status_parser.set_defaults(func=cmd_status)

    apply_parser = migrate_subparsers.add_parser(
        "apply", help="Apply pending migrations"
    )
    apply_parser.set_defaults(func=cmd_apply)
