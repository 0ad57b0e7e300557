"""Aggregation of a transaction log into summary, category, trend and
budget views.

Everything here is a pure function over records that have already been
loaded for a single user. Nothing touches the database, so the same inputs
always give the same outputs.
"""

from collections import defaultdict
from datetime import date, datetime
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple

from dateutil.relativedelta import relativedelta

from models.budget import Budget
from models.reports import BudgetView, CategorySpend, Summary, TrendPoint
from models.transaction import Transaction

ZERO = Decimal("0")


def month_bounds(month: Optional[date] = None) -> Tuple[date, date]:
    """Get the first and last calendar day of a month.

    Args:
        month: Any date within the month (day ignored). Defaults to today,
            using the server's local clock.

    Returns:
        (first_day, last_day), both inclusive.
    """
    month = month or date.today()
    if isinstance(month, datetime):
        month = month.date()
    first_day = month.replace(day=1)
    last_day = first_day + relativedelta(day=31)
    return first_day, last_day


def month_key(value: date) -> str:
    """Format a date's year and month as "YYYY-MM"."""
    return f"{value.year:04d}-{value.month:02d}"


def _sum_by(transactions: Iterable[Transaction], key) -> Dict[str, Decimal]:
    totals: Dict[str, Decimal] = defaultdict(lambda: ZERO)
    for transaction in transactions:
        totals[key(transaction)] += transaction.amount
    return dict(totals)


def _month_expenses(
    transactions: Iterable[Transaction], month: Optional[date]
) -> List[Transaction]:
    first_day, last_day = month_bounds(month)
    return [
        t
        for t in transactions
        if t.is_expense and first_day <= t.date.date() <= last_day
    ]


def compute_summary(transactions: Iterable[Transaction]) -> Summary:
    """Total income, total expenses and balance over every transaction.

    An empty log gives all zeros.
    """
    total_income = ZERO
    total_expenses = ZERO
    for transaction in transactions:
        if transaction.is_income:
            total_income += transaction.amount
        elif transaction.is_expense:
            total_expenses += transaction.amount

    return Summary(
        total_income=total_income,
        total_expenses=total_expenses,
        balance=total_income - total_expenses,
    )


def compute_category_spend(
    transactions: Iterable[Transaction], month: Optional[date] = None
) -> List[CategorySpend]:
    """Expense totals per category for one calendar month.

    Categories are matched by exact string. Categories without spending in
    the month are left out. Results are ordered by category name.
    """
    totals = _sum_by(_month_expenses(transactions, month), lambda t: t.category)
    return [
        CategorySpend(category=category, total=totals[category])
        for category in sorted(totals)
    ]


def compute_trend(transactions: Iterable[Transaction]) -> List[TrendPoint]:
    """Expense totals per "YYYY-MM" bucket, oldest first.

    Months without expenses are absent, not zero-filled.
    """
    totals = _sum_by(
        (t for t in transactions if t.is_expense), lambda t: month_key(t.date)
    )
    return [TrendPoint(month=key, total=totals[key]) for key in sorted(totals)]


def compute_budget_views(
    budgets: Iterable[Budget],
    transactions: Iterable[Transaction],
    month: Optional[date] = None,
) -> List[BudgetView]:
    """Pair each budget with the month's spending in its category.

    Budgets keep their input order. A budget whose category has no
    spending in the month gets spent = 0.
    """
    spent = _sum_by(_month_expenses(transactions, month), lambda t: t.category)
    return [
        BudgetView.from_budget(budget, spent.get(budget.category, ZERO))
        for budget in budgets
    ]
