#!/usr/bin/env python3

import sys
from cli.common import format_amount
from logger import get_logger

logger = get_logger()


def cmd_list(args, services, ctx):
    """List the user's budgets."""
    budgets = services.budgets.find_all(ctx)

    if not budgets:
        logger.info("No budgets found.")
        return

    logger.info("\nBudgets:")
    logger.info("=" * 80)
    for budget in budgets:
        logger.info(
            f"ID: {budget.id}  {budget.category}: "
            f"{format_amount(budget.amount, services.config)} ({budget.period})"
        )

    logger.info(f"\nTotal budgets: {len(budgets)}")


def cmd_create(args, services, ctx):
    """Create a monthly budget for a category."""
    try:
        budget = services.budgets.create(
            ctx, {"category": args.category, "amount": args.amount}
        )
    except Exception as e:
        logger.error(f"Error creating budget: {e}")
        sys.exit(1)

    logger.info(
        f"✓ Budget for '{budget.category}' created with ID: {budget.id} "
        f"({format_amount(budget.amount, services.config)} monthly)"
    )


def cmd_update(args, services, ctx):
    """Replace a budget's category and amount."""
    try:
        budget = services.budgets.update(
            ctx, args.budget_id, {"category": args.category, "amount": args.amount}
        )
    except Exception as e:
        logger.error(f"Error updating budget: {e}")
        sys.exit(1)

    logger.info(
        f"✓ Budget {budget.id} updated: '{budget.category}' "
        f"{format_amount(budget.amount, services.config)} monthly"
    )


def cmd_delete(args, services, ctx):
    """Delete a budget by ID."""
    try:
        budget = services.budgets.delete(ctx, args.budget_id)
    except Exception as e:
        logger.error(f"Error deleting budget: {e}")
        sys.exit(1)

    logger.info(f"✓ Budget for '{budget.category}' deleted successfully.")


def setup_parser(subparsers):
    """Setup budgets subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "budgets",
        help="Manage budgets",
        description="Create, list, update and delete monthly category budgets",
    )

    budgets_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available budget commands",
        dest="subcommand",
        required=True,
    )

    list_parser = budgets_subparsers.add_parser("list", help="List all budgets")
    list_parser.set_defaults(func=cmd_list)

    create_parser = budgets_subparsers.add_parser("create", help="Create a budget")
    create_parser.add_argument("category", help="Category name")
    create_parser.add_argument("amount", help="Monthly limit (positive)")
    create_parser.set_defaults(func=cmd_create)

    update_parser = budgets_subparsers.add_parser("update", help="Replace a budget")
    update_parser.add_argument("budget_id", type=int, help="Budget ID")
    update_parser.add_argument("category", help="Category name")
    update_parser.add_argument("amount", help="Monthly limit (positive)")
    update_parser.set_defaults(func=cmd_update)

    delete_parser = budgets_subparsers.add_parser("delete", help="Delete a budget")
    delete_parser.add_argument("budget_id", type=int, help="Budget ID")
    delete_parser.set_defaults(func=cmd_delete)
