"""Category model for transaction categorization."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Category:
    """Represents a user-defined transaction category.

    Transactions and budgets refer to a category by name, so deleting a
    category leaves those records untouched.

    Attributes:
        id: Unique identifier (auto-generated).
        user_id: Owning user.
        name: Category name (unique per user).
        created_at: When the category was created.
    """

    id: int
    user_id: int
    name: str
    created_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "createdAt": self.created_at.isoformat(),
        }
