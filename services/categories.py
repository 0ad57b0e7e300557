"""Category service for database operations."""

import sqlite3
from datetime import datetime
from typing import List, Optional

from context import RequestContext, require_user
from errors import Conflict, NotAuthorized, NotFound
from logger import get_logger
from models.category import Category
from schemas import CategoryInput, validate

logger = get_logger()

_CATEGORY_SELECT_FIELDS = "id, user_id, name, created_at"


class CategoryService:
    """Service for managing a user's categories."""

    def __init__(self, db_manager):
        """Initialize the category service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def find_all(self, ctx: RequestContext) -> List[Category]:
        """Get all of the caller's categories.

        Returns:
            List of Category objects, ordered by name.
        """
        user_id = require_user(ctx)
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"""
                SELECT {_CATEGORY_SELECT_FIELDS} FROM categories
                WHERE user_id = ? ORDER BY name
                """,
                (user_id,),
            )
            return [self._row_to_category(row) for row in cursor.fetchall()]

    def find(self, ctx: RequestContext, category_id: int) -> Category:
        """Get one of the caller's categories by ID.

        Raises:
            NotFound: If no category has this ID.
            NotAuthorized: If the category belongs to another user.
        """
        user_id = require_user(ctx)
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"SELECT {_CATEGORY_SELECT_FIELDS} FROM categories WHERE id = ?",
                (category_id,),
            )
            row = cursor.fetchone()

        if not row:
            raise NotFound("Category not found")
        category = self._row_to_category(row)
        if category.user_id != user_id:
            raise NotAuthorized("Not authorized")
        return category

    def find_by_name(self, ctx: RequestContext, name: str) -> Optional[Category]:
        """Get one of the caller's categories by exact name.

        Returns:
            Category object if found, None otherwise.
        """
        user_id = require_user(ctx)
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"""
                SELECT {_CATEGORY_SELECT_FIELDS} FROM categories
                WHERE user_id = ? AND name = ?
                """,
                (user_id, name),
            )
            row = cursor.fetchone()
            return self._row_to_category(row) if row else None

    def create(self, ctx: RequestContext, payload: dict) -> Category:
        """Create a new category for the caller.

        Args:
            ctx: Caller identity.
            payload: Raw fields, validated with CategoryInput.

        Returns:
            The created Category object with id populated.

        Raises:
            ValidationError: If the name is missing or empty.
            Conflict: If the caller already has a category with this name.
        """
        user_id = require_user(ctx)
        data = validate(CategoryInput, payload)

        if self.find_by_name(ctx, data.name):
            raise Conflict(f"Category '{data.name}' already exists")

        created_at = datetime.now()
        with self.db_manager.connect() as conn:
            try:
                cursor = conn.execute(
                    "INSERT INTO categories (user_id, name, created_at) VALUES (?, ?, ?)",
                    (user_id, data.name, created_at.isoformat()),
                )
            except sqlite3.IntegrityError as e:
                raise Conflict(f"Category '{data.name}' already exists") from e
            conn.commit()
            category_id = cursor.lastrowid

        logger.debug(f"User {user_id} created category {category_id} ({data.name})")
        return Category(
            id=category_id, user_id=user_id, name=data.name, created_at=created_at
        )

    def delete(self, ctx: RequestContext, category_id: int) -> Category:
        """Delete one of the caller's categories.

        Transactions and budgets naming the category are left as they are.

        Returns:
            The deleted Category.

        Raises:
            NotFound: If no category has this ID.
            NotAuthorized: If the category belongs to another user.
        """
        category = self.find(ctx, category_id)
        with self.db_manager.connect() as conn:
            conn.execute("DELETE FROM categories WHERE id = ?", (category.id,))
            conn.commit()

        logger.debug(f"User {category.user_id} deleted category {category.id}")
        return category

    def _row_to_category(self, row: tuple) -> Category:
        return Category(
            id=row[0],
            user_id=row[1],
            name=row[2],
            created_at=datetime.fromisoformat(row[3]),
        )
