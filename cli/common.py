"""Argument helpers shared by the CLI commands."""

import argparse
import json
from datetime import date
from decimal import Decimal

from models.currency import find_currency


def month_arg(value: str) -> date:
    """argparse type for a YYYY-MM month. Returns the first day of the month."""
    try:
        year, month = value.split("-")
        return date(int(year), int(month), 1)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid month '{value}'. Use YYYY-MM format."
        )


def format_amount(amount: Decimal, config) -> str:
    """Format an amount with the configured currency symbol."""
    currency = find_currency(config.currency)
    symbol = currency.symbol if currency else ""
    return f"{symbol}{amount:,.2f}"


def print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))
