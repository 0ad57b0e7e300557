#!/usr/bin/env python3

import sys
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List all registered users."""
    users = services.users.find_all()

    if not users:
        logger.info("No users found.")
        return

    logger.info("\nUsers:")
    logger.info("=" * 80)
    for user in users:
        logger.info(f"ID: {user.id}  Name: {user.name}")

    logger.info(f"\nTotal users: {len(users)}")


def cmd_create(args, services):
    """Register a new user."""
    try:
        user = services.users.create(args.name)
    except Exception as e:
        logger.error(f"Error creating user: {e}")
        sys.exit(1)

    logger.info(f"✓ User '{user.name}' created with ID: {user.id}")


def setup_parser(subparsers):
    """Setup users subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "users",
        help="Manage users",
        description="Register and list users",
    )

    users_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available user commands",
        dest="subcommand",
        required=True,
    )

    list_parser = users_subparsers.add_parser("list", help="List all users")
    list_parser.set_defaults(func=cmd_list)

    create_parser = users_subparsers.add_parser("create", help="Register a new user")
    create_parser.add_argument("name", help="Login name (must be unique)")
    create_parser.set_defaults(func=cmd_create)
