"""Derived report types produced by the aggregation engine.

None of these are persisted. ``to_dict`` returns the JSON shape the
presentation layer consumes, with camelCase keys and plain numbers.
"""

from dataclasses import dataclass
from decimal import Decimal

from models.budget import Budget


@dataclass(frozen=True)
class Summary:
    total_income: Decimal
    total_expenses: Decimal
    balance: Decimal

    def to_dict(self) -> dict:
        return {
            "totalIncome": float(self.total_income),
            "totalExpenses": float(self.total_expenses),
            "balance": float(self.balance),
        }


@dataclass(frozen=True)
class CategorySpend:
    category: str
    total: Decimal

    def to_dict(self) -> dict:
        return {"category": self.category, "total": float(self.total)}


@dataclass(frozen=True)
class TrendPoint:
    month: str  # "YYYY-MM"
    total: Decimal

    def to_dict(self) -> dict:
        return {"month": self.month, "total": float(self.total)}


@dataclass(frozen=True)
class BudgetView:
    """A budget together with what has been spent against it this month."""

    id: int
    category: str
    amount: Decimal
    period: str
    spent: Decimal

    @classmethod
    def from_budget(cls, budget: Budget, spent: Decimal) -> "BudgetView":
        return cls(
            id=budget.id,
            category=budget.category,
            amount=budget.amount,
            period=budget.period,
            spent=spent,
        )

    @property
    def utilization(self) -> Decimal:
        """Spent divided by amount. Values above 1 mean over budget."""
        return self.spent / self.amount

    @property
    def remaining(self) -> Decimal:
        return self.amount - self.spent

    @property
    def over_budget(self) -> bool:
        return self.spent > self.amount

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "category": self.category,
            "amount": float(self.amount),
            "period": self.period,
            "spent": float(self.spent),
        }
