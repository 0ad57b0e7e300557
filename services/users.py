"""User service for database operations."""

import sqlite3
from datetime import datetime
from typing import List, Optional

from errors import Conflict
from logger import get_logger
from models.user import User
from schemas import UserInput, validate

logger = get_logger()


class UserService:
    """Service for managing registered users."""

    def __init__(self, db_manager):
        """Initialize the user service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def find_all(self) -> List[User]:
        """Get all users, ordered by name."""
        with self.db_manager.connect() as conn:
            cursor = conn.execute("SELECT id, name, created_at FROM users ORDER BY name")
            return [self._row_to_user(row) for row in cursor.fetchall()]

    def find(self, user_id: int) -> Optional[User]:
        """Get a single user by ID.

        Returns:
            User object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "SELECT id, name, created_at FROM users WHERE id = ?", (user_id,)
            )
            row = cursor.fetchone()
            return self._row_to_user(row) if row else None

    def find_by_name(self, name: str) -> Optional[User]:
        """Get a single user by name (case-sensitive).

        Returns:
            User object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "SELECT id, name, created_at FROM users WHERE name = ?", (name,)
            )
            row = cursor.fetchone()
            return self._row_to_user(row) if row else None

    def create(self, name: str) -> User:
        """Register a new user.

        Args:
            name: Login name (must be unique).

        Returns:
            The created User with id populated.

        Raises:
            ValidationError: If the name is empty.
            Conflict: If the name is already taken.
        """
        data = validate(UserInput, {"name": name})
        created_at = datetime.now()

        if self.find_by_name(data.name):
            raise Conflict(f"User '{data.name}' already exists")

        with self.db_manager.connect() as conn:
            try:
                cursor = conn.execute(
                    "INSERT INTO users (name, created_at) VALUES (?, ?)",
                    (data.name, created_at.isoformat()),
                )
            except sqlite3.IntegrityError as e:
                raise Conflict(f"User '{data.name}' already exists") from e
            conn.commit()
            user_id = cursor.lastrowid

        logger.debug(f"Created user {user_id} ({data.name})")
        return User(id=user_id, name=data.name, created_at=created_at)

    def _row_to_user(self, row: tuple) -> User:
        return User(id=row[0], name=row[1], created_at=datetime.fromisoformat(row[2]))
