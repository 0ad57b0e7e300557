#!/usr/bin/env python3

from logger import get_logger

logger = get_logger()


def init_schema_migrations_table(conn):
    conn.execute("""
        CREATE TABLE IF NOT EXISTS schema_migrations (
            migration_file TEXT PRIMARY KEY,
            applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    """)
    conn.commit()


def get_pending_migrations(conn, db_manager):
    """Return (available, pending) migration file names, both sorted.

    Creates the bookkeeping table on first use.
    """
    init_schema_migrations_table(conn)
    cursor = conn.execute("SELECT migration_file FROM schema_migrations")
    applied = {row[0] for row in cursor.fetchall()}

    migrations_dir = db_manager.get_migrations_dir()
    available = (
        sorted(p.name for p in migrations_dir.glob("*.sql"))
        if migrations_dir.exists()
        else []
    )
    return available, [m for m in available if m not in applied]


def apply_migration(conn, migration_file, db_manager):
    migration_path = db_manager.get_migrations_dir() / migration_file
    sql = migration_path.read_text()

    try:
        conn.executescript(sql)
        conn.execute(
            "INSERT INTO schema_migrations (migration_file) VALUES (?)",
            (migration_file,),
        )
        conn.commit()
        logger.info(f"Applied migration: {migration_file}")
    except Exception as e:
        conn.rollback()
        logger.error(f"Error applying migration {migration_file}: {e}")
        raise


def cmd_status(args, db_manager):
    """Show migration status."""
    if not db_manager.get_db_path().exists():
        logger.info(
            "Database does not exist. Run 'python -m cli migrate apply' to create it."
        )
        return

    with db_manager.connect() as conn:
        available, pending = get_pending_migrations(conn, db_manager)

    if not available:
        logger.info("No migrations found.")
        return

    logger.info("Migration Status:")
    logger.info("================")
    for migration in available:
        status_text = "PENDING" if migration in pending else "APPLIED"
        logger.info(f"{migration}: {status_text}")

    logger.info(f"\nTotal migrations: {len(available)}")
    logger.info(f"Pending: {len(pending)}")


def cmd_apply(args, db_manager):
    """Apply pending migrations."""
    with db_manager.connect() as conn:
        _, pending = get_pending_migrations(conn, db_manager)

        if not pending:
            logger.info("No pending migrations.")
            return

        logger.info(f"Applying {len(pending)} migration(s)...")
        for migration in pending:
            apply_migration(conn, migration, db_manager)

    logger.info(f"Successfully applied {len(pending)} migration(s).")


def setup_parser(subparsers):
    """Setup migrate subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "migrate",
        help="Database migrations",
        description="Manage database schema migrations",
    )

    migrate_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available migration commands",
        dest="subcommand",
        required=True,
    )

    status_parser = migrate_subparsers.add_parser(
        "status", help="Show migration status"
    )
    status_parser.set_defaults(func=cmd_status)

    apply_parser = migrate_subparsers.add_parser(
        "apply", help="Apply pending migrations"
    )
    apply_parser.set_defaults(func=cmd_apply)
