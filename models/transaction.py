from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

INCOME = "income"
EXPENSE = "expense"
TRANSACTION_TYPES = (INCOME, EXPENSE)


@dataclass
class Transaction:
    id: int
    user_id: int
    amount: Decimal  # always positive, direction comes from type
    category: str  # category name, not id
    description: Optional[str]
    type: str  # 'income' or 'expense'
    date: datetime
    created_at: datetime

    @property
    def is_expense(self) -> bool:
        return self.type == EXPENSE

    @property
    def is_income(self) -> bool:
        return self.type == INCOME

    def to_dict(self) -> dict:
        """Convert transaction to its JSON-ready form."""
        return {
            "id": self.id,
            "amount": float(self.amount),
            "category": self.category,
            "description": self.description,
            "type": self.type,
            "date": self.date.isoformat(),
            "createdAt": self.created_at.isoformat(),
        }
