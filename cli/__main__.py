#!/usr/bin/env python3
"""
Pennywise CLI - Track income, expenses, categories and monthly budgets.

Usage:
    python -m cli [--user NAME] <command> <subcommand> [options]

Commands:
    users         Register and list users
    transactions  Record and manage transactions
    categories    Manage categories
    budgets       Manage monthly budgets
    reports       Summary, category spending, trend and budget usage
    currencies    List supported display currencies
    migrate       Database migrations

Examples:
    python -m cli migrate apply
    python -m cli users create alice
    python -m cli --user alice transactions add --amount 50 --type expense --category Food
    python -m cli --user alice reports summary --json
    python -m cli --user alice reports budgets --month 2024-02
"""

import sys
import argparse
from cli import budgets, categories, currencies, migrate, reports, transactions, users
from config import load_config
from context import authenticate
from services.base import Services
from db.manager import DatabaseManager
from logger import setup_logging

# Commands that act on one user's records and need a RequestContext
USER_SCOPED_COMMANDS = ("transactions", "categories", "budgets", "reports")


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Pennywise - Personal finance tracking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--user",
        default=None,
        help="User to act as (default: default_user from config)",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    users.setup_parser(subparsers)
    transactions.setup_parser(subparsers)
    categories.setup_parser(subparsers)
    budgets.setup_parser(subparsers)
    reports.setup_parser(subparsers)
    currencies.setup_parser(subparsers)
    migrate.setup_parser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)

            if args.command == "migrate":
                # Migrate commands need db_manager for raw database operations
                args.func(args, DatabaseManager(config))
                return

            services = Services(config)
            if args.command in USER_SCOPED_COMMANDS:
                ctx = authenticate(services, args.user or config.default_user)
                args.func(args, services, ctx)
            else:
                args.func(args, services)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
