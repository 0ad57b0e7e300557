#!/usr/bin/env python3

import sys
from pathlib import Path

from cli.common import format_amount, month_arg, print_json
from logger import get_logger
from tools.export import load_transactions, write_transactions_csv

logger = get_logger()


def _payload_from_args(args) -> dict:
    """Build a transaction payload from parsed arguments."""
    payload = {
        "amount": args.amount,
        "type": args.type,
        "category": args.category,
        "description": args.description,
    }
    if args.date:
        payload["date"] = args.date
    return payload


def _log_transaction(transaction, config):
    logger.info(
        f"{transaction.id:>6}  {transaction.date.date().isoformat()}  "
        f"{transaction.type:<7}  {format_amount(transaction.amount, config):>14}  "
        f"{transaction.category:<20}  {transaction.description or ''}"
    )


def cmd_add(args, services, ctx):
    """Record a new income or expense transaction."""
    try:
        transaction = services.transactions.create(ctx, _payload_from_args(args))
    except Exception as e:
        logger.error(f"Error creating transaction: {e}")
        sys.exit(1)

    logger.info(f"✓ Transaction created with ID: {transaction.id}")
    _log_transaction(transaction, services.config)


def cmd_list(args, services, ctx):
    """List the user's transactions, newest first."""
    if args.month:
        transactions = services.transactions.find_by_month(
            ctx, args.month, category=args.category
        )
    else:
        transactions = services.transactions.find_all(ctx, category=args.category)

    if args.json:
        print_json([t.to_dict() for t in transactions])
        return

    if not transactions:
        logger.info("No transactions found.")
        return

    logger.info("\nTransactions:")
    logger.info("=" * 80)
    for transaction in transactions:
        _log_transaction(transaction, services.config)

    logger.info(f"\nTotal transactions: {len(transactions)}")


def cmd_update(args, services, ctx):
    """Replace the fields of an existing transaction."""
    try:
        transaction = services.transactions.update(
            ctx, args.transaction_id, _payload_from_args(args)
        )
    except Exception as e:
        logger.error(f"Error updating transaction: {e}")
        sys.exit(1)

    logger.info("✓ Transaction updated successfully")
    _log_transaction(transaction, services.config)


def cmd_delete(args, services, ctx):
    """Delete a transaction by ID."""
    try:
        transaction = services.transactions.delete(ctx, args.transaction_id)
    except Exception as e:
        logger.error(f"Error deleting transaction: {e}")
        sys.exit(1)

    logger.info(f"✓ Transaction {transaction.id} deleted successfully.")


def cmd_export(args, services, ctx):
    """Export transactions to CSV.

    Args:
        args: Parsed command-line arguments with output and optional month
        services: Services container with transactions service
        ctx: Caller identity
    """
    output_path = Path(args.output)

    # Query before touching the filesystem so a failed lookup leaves no file
    transactions = load_transactions(services, ctx, month=args.month)

    # Create parent directory if it doesn't exist
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", newline="") as csvfile:
        count = write_transactions_csv(transactions, csvfile)

    logger.info(f"✓ Exported {count} transaction(s) to {output_path}")


def _add_fields(parser):
    parser.add_argument("--amount", required=True, help="Positive amount")
    parser.add_argument(
        "--type", required=True, choices=["income", "expense"], help="Transaction type"
    )
    parser.add_argument("--category", required=True, help="Category name")
    parser.add_argument("--description", default=None, help="Optional note")
    parser.add_argument(
        "--date", default=None, help="ISO date or datetime (default: now)"
    )


def setup_parser(subparsers):
    """Setup transactions subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "transactions",
        help="Manage transactions",
        description="Record, list, update, delete and export transactions",
    )

    transactions_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available transaction commands",
        dest="subcommand",
        required=True,
    )

    # transactions add
    add_parser = transactions_subparsers.add_parser(
        "add", help="Record a new transaction"
    )
    _add_fields(add_parser)
    add_parser.set_defaults(func=cmd_add)

    # transactions list
    list_parser = transactions_subparsers.add_parser(
        "list", help="List transactions, newest first"
    )
    list_parser.add_argument(
        "--month", type=month_arg, default=None, help="Only this month (YYYY-MM)"
    )
    list_parser.add_argument(
        "--category", default=None, help="Only show this category (exact name)"
    )
    list_parser.add_argument("--json", action="store_true", help="Print JSON output")
    list_parser.set_defaults(func=cmd_list)

    # transactions update
    update_parser = transactions_subparsers.add_parser(
        "update", help="Replace a transaction's fields"
    )
    update_parser.add_argument("transaction_id", type=int, help="Transaction ID")
    _add_fields(update_parser)
    update_parser.set_defaults(func=cmd_update)

    # transactions delete
    delete_parser = transactions_subparsers.add_parser(
        "delete", help="Delete a transaction by ID"
    )
    delete_parser.add_argument("transaction_id", type=int, help="Transaction ID")
    delete_parser.set_defaults(func=cmd_delete)

    # transactions export
    export_parser = transactions_subparsers.add_parser(
        "export", help="Export transactions to a CSV file"
    )
    export_parser.add_argument("output", help="Output CSV file path")
    export_parser.add_argument(
        "--month", type=month_arg, default=None, help="Only this month (YYYY-MM)"
    )
    export_parser.set_defaults(func=cmd_export)
