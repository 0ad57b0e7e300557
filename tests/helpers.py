"""Helper utilities for tests."""

from datetime import datetime
from decimal import Decimal
from pathlib import Path
import sqlite3
from typing import Optional

from models.budget import Budget
from models.transaction import Transaction


def run_migrations(conn: sqlite3.Connection, migrations_dir: Path) -> None:
    """Run all SQL migrations in order.

    Args:
        conn: SQLite connection to run migrations against.
        migrations_dir: Path to directory containing .sql migration files.
    """
    for migration_file in sorted(migrations_dir.glob("*.sql")):
        conn.executescript(migration_file.read_text())

    conn.commit()


def make_transaction(
    type: str,
    amount: str,
    category: str,
    when: datetime,
    *,
    id: int = 0,
    user_id: int = 1,
    description: Optional[str] = None,
) -> Transaction:
    """Build an in-memory Transaction for pure aggregation tests."""
    return Transaction(
        id=id,
        user_id=user_id,
        amount=Decimal(amount),
        category=category,
        description=description,
        type=type,
        date=when,
        created_at=when,
    )


def make_budget(category: str, amount: str, *, id: int = 0, user_id: int = 1) -> Budget:
    """Build an in-memory Budget for pure aggregation tests."""
    now = datetime(2024, 1, 1)
    return Budget(
        id=id,
        user_id=user_id,
        category=category,
        amount=Decimal(amount),
        period="monthly",
        created_at=now,
        updated_at=now,
    )
