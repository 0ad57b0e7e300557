#!/usr/bin/env python3

from cli.common import format_amount, month_arg, print_json
from logger import get_logger

logger = get_logger()


def cmd_summary(args, services, ctx):
    """Show total income, expenses and balance."""
    summary = services.reports.summary(ctx)

    if args.json:
        print_json(summary.to_dict())
        return

    config = services.config
    logger.info("\nSummary (all time):")
    logger.info("=" * 80)
    logger.info(f"Income:   {format_amount(summary.total_income, config):>16}")
    logger.info(f"Expenses: {format_amount(summary.total_expenses, config):>16}")
    logger.info(f"Balance:  {format_amount(summary.balance, config):>16}")


def cmd_categories(args, services, ctx):
    """Show expense totals per category for a month."""
    spend = services.reports.category_spend(ctx, args.month)

    if args.json:
        print_json([item.to_dict() for item in spend])
        return

    if not spend:
        logger.info("No expenses this month.")
        return

    logger.info("\nSpending by category:")
    logger.info("=" * 80)
    for item in spend:
        logger.info(f"{item.category:<30} {format_amount(item.total, services.config):>16}")


def cmd_trend(args, services, ctx):
    """Show expense totals per month."""
    trend = services.reports.trend(ctx)

    if args.json:
        print_json([point.to_dict() for point in trend])
        return

    if not trend:
        logger.info("No expenses recorded.")
        return

    logger.info("\nMonthly expenses:")
    logger.info("=" * 80)
    for point in trend:
        logger.info(f"{point.month}  {format_amount(point.total, services.config):>16}")


def cmd_budgets(args, services, ctx):
    """Show each budget with this month's spending against it."""
    views = services.reports.budget_views(ctx, args.month)

    if args.json:
        print_json([view.to_dict() for view in views])
        return

    if not views:
        logger.info("No budgets found.")
        return

    config = services.config
    logger.info("\nBudgets:")
    logger.info("=" * 80)
    for view in views:
        status = "OVER" if view.over_budget else "ok"
        logger.info(
            f"{view.category:<24} {format_amount(view.spent, config):>14} / "
            f"{format_amount(view.amount, config):<14} "
            f"{float(view.utilization) * 100:6.1f}%  {status}"
        )


def setup_parser(subparsers):
    """Setup reports subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "reports",
        help="Aggregated views",
        description="Summary, category spending, monthly trend and budget usage",
    )

    reports_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available reports",
        dest="subcommand",
        required=True,
    )

    summary_parser = reports_subparsers.add_parser(
        "summary", help="Total income, expenses and balance"
    )
    summary_parser.set_defaults(func=cmd_summary)

    categories_parser = reports_subparsers.add_parser(
        "categories", help="Spending by category for a month"
    )
    categories_parser.set_defaults(func=cmd_categories)

    trend_parser = reports_subparsers.add_parser(
        "trend", help="Spending per month"
    )
    trend_parser.set_defaults(func=cmd_trend)

    budgets_parser = reports_subparsers.add_parser(
        "budgets", help="Budget usage for a month"
    )
    budgets_parser.set_defaults(func=cmd_budgets)

    for sub in (categories_parser, budgets_parser):
        sub.add_argument(
            "--month", type=month_arg, default=None, help="Month (YYYY-MM), default current"
        )
    for sub in (summary_parser, categories_parser, trend_parser, budgets_parser):
        sub.add_argument("--json", action="store_true", help="Print JSON output")
