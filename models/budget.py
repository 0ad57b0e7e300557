"""Budget model for monthly per-category spending limits."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

MONTHLY = "monthly"


@dataclass
class Budget:
    """A monthly spending limit for one category.

    Attributes:
        id: Unique identifier (auto-generated).
        user_id: Owning user.
        category: Category name the limit applies to (one budget per name).
        amount: Limit for the month, always positive.
        period: Always "monthly".
        created_at: When the budget was created.
        updated_at: When the budget was last replaced.
    """

    id: int
    user_id: int
    category: str
    amount: Decimal
    period: str
    created_at: datetime
    updated_at: datetime
