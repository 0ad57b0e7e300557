"""Report service: read-only aggregated views over a user's records."""

from datetime import date
from typing import List, Optional

from aggregation import (
    compute_budget_views,
    compute_category_spend,
    compute_summary,
    compute_trend,
)
from context import RequestContext, require_user
from logger import get_logger
from models.reports import BudgetView, CategorySpend, Summary, TrendPoint

logger = get_logger()


class ReportService:
    """Computes summary, category, trend and budget views on every call.

    Nothing is cached. Each call loads the caller's records through the
    transaction and budget services and aggregates them in memory.

    Args:
        transactions: TransactionService used to load records.
        budgets: BudgetService used to load budgets.
    """

    def __init__(self, transactions, budgets):
        self.transactions = transactions
        self.budgets = budgets

    def summary(self, ctx: RequestContext) -> Summary:
        """Income, expenses and balance over all of the caller's transactions."""
        user_id = require_user(ctx)
        result = compute_summary(self.transactions.find_all(ctx))
        logger.debug(f"Computed summary for user {user_id}: {result}")
        return result

    def category_spend(
        self, ctx: RequestContext, month: Optional[date] = None
    ) -> List[CategorySpend]:
        """Expense totals per category for a month (current month by default)."""
        require_user(ctx)
        return compute_category_spend(self.transactions.find_by_month(ctx, month), month)

    def trend(self, ctx: RequestContext) -> List[TrendPoint]:
        """Expense totals per month, oldest first."""
        require_user(ctx)
        return compute_trend(self.transactions.find_all(ctx))

    def budget_views(
        self, ctx: RequestContext, month: Optional[date] = None
    ) -> List[BudgetView]:
        """Each budget with the month's spending in its category."""
        require_user(ctx)
        budgets = self.budgets.find_all(ctx)
        if not budgets:
            return []
        transactions = self.transactions.find_by_month(ctx, month)
        return compute_budget_views(budgets, transactions, month)
