"""Transaction service for database operations."""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from aggregation import month_bounds
from context import RequestContext, require_user
from errors import NotAuthorized, NotFound
from logger import get_logger
from models.transaction import Transaction
from schemas import TransactionInput, validate

logger = get_logger()

# SQL Query Constants
_TRANSACTION_SELECT_FIELDS = """id, user_id, amount, category, description,
       transaction_type, transaction_date, created_at"""


class TransactionService:
    """Service for managing a user's transactions."""

    def __init__(self, db_manager):
        """Initialize the transaction service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def create(self, ctx: RequestContext, payload: dict) -> Transaction:
        """Create a transaction owned by the caller.

        Args:
            ctx: Caller identity.
            payload: Raw fields, validated with TransactionInput. The date
                defaults to now when omitted.

        Returns:
            The created Transaction with id populated.

        Raises:
            ValidationError: If any field is missing or out of range.
        """
        user_id = require_user(ctx)
        data = validate(TransactionInput, payload)
        created_at = datetime.now()
        transaction_date = data.date or created_at

        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                """
                INSERT INTO transactions (user_id, amount, category, description,
                    transaction_type, transaction_date, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    user_id,
                    float(data.amount),
                    data.category,
                    data.description,
                    data.type,
                    transaction_date.isoformat(),
                    created_at.isoformat(),
                ),
            )
            conn.commit()
            transaction_id = cursor.lastrowid

        logger.debug(f"User {user_id} created transaction {transaction_id}")
        return Transaction(
            id=transaction_id,
            user_id=user_id,
            amount=data.amount,
            category=data.category,
            description=data.description,
            type=data.type,
            date=transaction_date,
            created_at=created_at,
        )

    def find_all(
        self, ctx: RequestContext, *, category: Optional[str] = None
    ) -> List[Transaction]:
        """Get all of the caller's transactions.

        Args:
            ctx: Caller identity.
            category: Optional category name to filter by (exact match).

        Returns:
            List of Transaction objects ordered by date (newest first).
        """
        user_id = require_user(ctx)
        query = f"""
            SELECT {_TRANSACTION_SELECT_FIELDS}
            FROM transactions
            WHERE user_id = ?
        """
        params = [user_id]

        if category is not None:
            query += " AND category = ?"
            params.append(category)

        query += " ORDER BY transaction_date DESC, id DESC"

        with self.db_manager.connect() as conn:
            cursor = conn.execute(query, params)
            return [self._row_to_transaction(row) for row in cursor.fetchall()]

    def find_by_month(
        self,
        ctx: RequestContext,
        month: Optional[date] = None,
        *,
        category: Optional[str] = None,
    ) -> List[Transaction]:
        """Get the caller's transactions for one calendar month.

        Args:
            ctx: Caller identity.
            month: Any date in the month (day ignored). Defaults to the
                current month.
            category: Optional category name to filter by (exact match).

        Returns:
            List of Transaction objects ordered by date (newest first).
        """
        user_id = require_user(ctx)
        first_day, last_day = month_bounds(month)

        # Stored dates are ISO datetimes, so the upper bound is the next day
        query = f"""
            SELECT {_TRANSACTION_SELECT_FIELDS}
            FROM transactions
            WHERE user_id = ?
              AND transaction_date >= ?
              AND transaction_date < date(?, '+1 day')
        """
        params = [user_id, first_day.isoformat(), last_day.isoformat()]

        if category is not None:
            query += " AND category = ?"
            params.append(category)

        query += " ORDER BY transaction_date DESC, id DESC"

        with self.db_manager.connect() as conn:
            cursor = conn.execute(query, params)
            return [self._row_to_transaction(row) for row in cursor.fetchall()]

    def find(self, ctx: RequestContext, transaction_id: int) -> Transaction:
        """Get one of the caller's transactions by ID.

        Raises:
            NotFound: If no transaction has this ID.
            NotAuthorized: If the transaction belongs to another user.
        """
        user_id = require_user(ctx)
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"""
                SELECT {_TRANSACTION_SELECT_FIELDS}
                FROM transactions
                WHERE id = ?
                """,
                (transaction_id,),
            )
            row = cursor.fetchone()

        if not row:
            raise NotFound("Transaction not found")
        transaction = self._row_to_transaction(row)
        if transaction.user_id != user_id:
            raise NotAuthorized("Not authorized")
        return transaction

    def update(
        self, ctx: RequestContext, transaction_id: int, payload: dict
    ) -> Transaction:
        """Replace amount, category, description, type and date.

        An omitted date keeps the stored date. An omitted description
        clears it.

        Raises:
            NotAuthenticated: If the context carries no user.
            ValidationError: If any field is missing or out of range.
            NotFound: If no transaction has this ID.
            NotAuthorized: If the transaction belongs to another user.
        """
        require_user(ctx)
        data = validate(TransactionInput, payload)
        existing = self.find(ctx, transaction_id)
        transaction_date = data.date or existing.date

        with self.db_manager.connect() as conn:
            conn.execute(
                """
                UPDATE transactions
                SET amount = ?, category = ?, description = ?,
                    transaction_type = ?, transaction_date = ?
                WHERE id = ?
                """,
                (
                    float(data.amount),
                    data.category,
                    data.description,
                    data.type,
                    transaction_date.isoformat(),
                    existing.id,
                ),
            )
            conn.commit()

        logger.debug(f"User {existing.user_id} updated transaction {existing.id}")
        return Transaction(
            id=existing.id,
            user_id=existing.user_id,
            amount=data.amount,
            category=data.category,
            description=data.description,
            type=data.type,
            date=transaction_date,
            created_at=existing.created_at,
        )

    def delete(self, ctx: RequestContext, transaction_id: int) -> Transaction:
        """Delete one of the caller's transactions.

        Returns:
            The deleted Transaction.

        Raises:
            NotFound: If no transaction has this ID.
            NotAuthorized: If the transaction belongs to another user.
        """
        transaction = self.find(ctx, transaction_id)
        with self.db_manager.connect() as conn:
            conn.execute("DELETE FROM transactions WHERE id = ?", (transaction.id,))
            conn.commit()

        logger.debug(f"User {transaction.user_id} deleted transaction {transaction.id}")
        return transaction

    def _row_to_transaction(self, row: tuple) -> Transaction:
        """Convert a database row to a Transaction object."""
        return Transaction(
            id=row[0],
            user_id=row[1],
            amount=Decimal(str(row[2])),
            category=row[3],
            description=row[4],
            type=row[5],
            date=datetime.fromisoformat(row[6]),
            created_at=datetime.fromisoformat(row[7]),
        )
