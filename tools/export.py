"""CSV export of a user's transactions."""

import csv
from datetime import date
from typing import Iterable, List, Optional, TextIO

from context import RequestContext
from models.transaction import Transaction

CSV_HEADER = ["Date", "Amount", "Type", "Category", "Description"]
MISSING_DESCRIPTION = "N/A"


def write_transactions_csv(
    transactions: Iterable[Transaction], stream: TextIO
) -> int:
    """Write transactions as CSV rows.

    Dates are written as YYYY-MM-DD and amounts with two decimal places.
    A missing or empty description is written as "N/A".

    Args:
        transactions: Transactions to write, in output order.
        stream: Text stream opened with newline="".

    Returns:
        Number of data rows written.
    """
    writer = csv.writer(stream)
    writer.writerow(CSV_HEADER)

    count = 0
    for t in transactions:
        writer.writerow(
            [
                t.date.date().isoformat(),
                f"{t.amount:.2f}",
                t.type,
                t.category,
                t.description or MISSING_DESCRIPTION,
            ]
        )
        count += 1
    return count


def load_transactions(
    services, ctx: RequestContext, month: Optional[date] = None
) -> List[Transaction]:
    """Load the caller's transactions for export, newest first."""
    if month is None:
        return services.transactions.find_all(ctx)
    return services.transactions.find_by_month(ctx, month)


def export_transactions(
    services,
    ctx: RequestContext,
    stream: TextIO,
    month: Optional[date] = None,
) -> int:
    """Export the caller's transactions, newest first.

    Args:
        services: Services container with transaction service.
        ctx: Caller identity.
        stream: Text stream opened with newline="".
        month: Optional month to restrict the export to (day ignored).

    Returns:
        Number of data rows written.
    """
    return write_transactions_csv(load_transactions(services, ctx, month), stream)
