"""Budget service for database operations."""

import sqlite3
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from context import RequestContext, require_user
from errors import Conflict, NotAuthorized, NotFound
from logger import get_logger
from models.budget import Budget
from schemas import BudgetInput, validate

logger = get_logger()

_BUDGET_SELECT_FIELDS = "id, user_id, category, amount, period, created_at, updated_at"


class BudgetService:
    """Service for managing a user's monthly category budgets."""

    def __init__(self, db_manager):
        """Initialize the budget service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def find_all(self, ctx: RequestContext) -> List[Budget]:
        """Get all of the caller's budgets.

        Returns:
            List of Budget objects, ordered by id (creation order).
        """
        user_id = require_user(ctx)
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"SELECT {_BUDGET_SELECT_FIELDS} FROM budgets WHERE user_id = ? ORDER BY id",
                (user_id,),
            )
            return [self._row_to_budget(row) for row in cursor.fetchall()]

    def find(self, ctx: RequestContext, budget_id: int) -> Budget:
        """Get one of the caller's budgets by ID.

        Raises:
            NotFound: If no budget has this ID.
            NotAuthorized: If the budget belongs to another user.
        """
        user_id = require_user(ctx)
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"SELECT {_BUDGET_SELECT_FIELDS} FROM budgets WHERE id = ?",
                (budget_id,),
            )
            row = cursor.fetchone()

        if not row:
            raise NotFound("Budget not found")
        budget = self._row_to_budget(row)
        if budget.user_id != user_id:
            raise NotAuthorized("Not authorized")
        return budget

    def find_by_category(
        self, ctx: RequestContext, category: str
    ) -> Optional[Budget]:
        """Get the caller's budget for a category name, if any."""
        user_id = require_user(ctx)
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"""
                SELECT {_BUDGET_SELECT_FIELDS} FROM budgets
                WHERE user_id = ? AND category = ?
                """,
                (user_id, category),
            )
            row = cursor.fetchone()
            return self._row_to_budget(row) if row else None

    def create(self, ctx: RequestContext, payload: dict) -> Budget:
        """Create a budget for the caller.

        Args:
            ctx: Caller identity.
            payload: Raw fields, validated with BudgetInput.

        Returns:
            The created Budget with id populated.

        Raises:
            ValidationError: If any field is missing or out of range.
            Conflict: If the caller already has a budget for this category.
        """
        user_id = require_user(ctx)
        data = validate(BudgetInput, payload)

        if self.find_by_category(ctx, data.category):
            raise Conflict(f"Budget already exists for category '{data.category}'")

        now = datetime.now()
        with self.db_manager.connect() as conn:
            try:
                cursor = conn.execute(
                    """
                    INSERT INTO budgets (user_id, category, amount, period, created_at, updated_at)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    (
                        user_id,
                        data.category,
                        float(data.amount),
                        data.period,
                        now.isoformat(),
                        now.isoformat(),
                    ),
                )
            except sqlite3.IntegrityError as e:
                raise Conflict(
                    f"Budget already exists for category '{data.category}'"
                ) from e
            conn.commit()
            budget_id = cursor.lastrowid

        logger.debug(f"User {user_id} created budget {budget_id} ({data.category})")
        return Budget(
            id=budget_id,
            user_id=user_id,
            category=data.category,
            amount=data.amount,
            period=data.period,
            created_at=now,
            updated_at=now,
        )

    def update(self, ctx: RequestContext, budget_id: int, payload: dict) -> Budget:
        """Replace a budget's category, amount and period.

        Raises:
            NotAuthenticated: If the context carries no user.
            ValidationError: If any field is missing or out of range.
            NotFound: If no budget has this ID.
            NotAuthorized: If the budget belongs to another user.
            Conflict: If another of the caller's budgets already covers the
                new category.
        """
        require_user(ctx)
        data = validate(BudgetInput, payload)
        existing = self.find(ctx, budget_id)

        other = self.find_by_category(ctx, data.category)
        if other and other.id != existing.id:
            raise Conflict(f"Budget already exists for category '{data.category}'")

        now = datetime.now()
        with self.db_manager.connect() as conn:
            try:
                conn.execute(
                    """
                    UPDATE budgets
                    SET category = ?, amount = ?, period = ?, updated_at = ?
                    WHERE id = ?
                    """,
                    (
                        data.category,
                        float(data.amount),
                        data.period,
                        now.isoformat(),
                        existing.id,
                    ),
                )
            except sqlite3.IntegrityError as e:
                raise Conflict(
                    f"Budget already exists for category '{data.category}'"
                ) from e
            conn.commit()

        logger.debug(f"User {existing.user_id} updated budget {existing.id}")
        return Budget(
            id=existing.id,
            user_id=existing.user_id,
            category=data.category,
            amount=data.amount,
            period=data.period,
            created_at=existing.created_at,
            updated_at=now,
        )

    def delete(self, ctx: RequestContext, budget_id: int) -> Budget:
        """Delete one of the caller's budgets.

        Returns:
            The deleted Budget.

        Raises:
            NotFound: If no budget has this ID.
            NotAuthorized: If the budget belongs to another user.
        """
        budget = self.find(ctx, budget_id)
        with self.db_manager.connect() as conn:
            conn.execute("DELETE FROM budgets WHERE id = ?", (budget.id,))
            conn.commit()

        logger.debug(f"User {budget.user_id} deleted budget {budget.id}")
        return budget

    def _row_to_budget(self, row: tuple) -> Budget:
        return Budget(
            id=row[0],
            user_id=row[1],
            category=row[2],
            amount=Decimal(str(row[3])),
            period=row[4],
            created_at=datetime.fromisoformat(row[5]),
            updated_at=datetime.fromisoformat(row[6]),
        )
