#!/usr/bin/env python3

import sys
from cli.common import print_json
from logger import get_logger

logger = get_logger()


def cmd_list(args, services, ctx):
    """List the user's categories."""
    categories = services.categories.find_all(ctx)

    if args.json:
        print_json([c.to_dict() for c in categories])
        return

    if not categories:
        logger.info("No categories found.")
        return

    logger.info("\nCategories:")
    logger.info("=" * 80)
    for category in categories:
        logger.info(f"ID: {category.id}  Name: {category.name}")

    logger.info(f"\nTotal categories: {len(categories)}")


def cmd_create(args, services, ctx):
    """Create a new category."""
    try:
        category = services.categories.create(ctx, {"name": args.name})
    except Exception as e:
        logger.error(f"Error creating category: {e}")
        sys.exit(1)

    logger.info(f"✓ Category '{category.name}' created with ID: {category.id}")


def cmd_delete(args, services, ctx):
    """Delete a category by ID.

    Transactions and budgets that use the category's name are kept.
    """
    category = services.categories.find(ctx, args.category_id)

    if not args.yes:
        confirm = (
            input(f"\nDelete category '{category.name}'? (yes/no): ").strip().lower()
        )
        if confirm != "yes":
            logger.info("Deletion cancelled.")
            return

    try:
        services.categories.delete(ctx, category.id)
    except Exception as e:
        logger.error(f"Error deleting category: {e}")
        sys.exit(1)

    logger.info(f"✓ Category '{category.name}' deleted successfully.")


def setup_parser(subparsers):
    """Setup categories subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "categories",
        help="Manage categories",
        description="Create, list, and delete transaction categories",
    )

    categories_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available category commands",
        dest="subcommand",
        required=True,
    )

    # categories list
    list_parser = categories_subparsers.add_parser("list", help="List all categories")
    list_parser.add_argument("--json", action="store_true", help="Print JSON output")
    list_parser.set_defaults(func=cmd_list)

    # categories create
    create_parser = categories_subparsers.add_parser(
        "create", help="Create a new category"
    )
    create_parser.add_argument("name", help="Category name (e.g., Groceries)")
    create_parser.set_defaults(func=cmd_create)

    # categories delete
    delete_parser = categories_subparsers.add_parser(
        "delete", help="Delete a category by ID"
    )
    delete_parser.add_argument(
        "category_id",
        type=int,
        help="ID of the category to delete",
    )
    delete_parser.add_argument(
        "-y", "--yes", action="store_true", help="Skip the confirmation prompt"
    )
    delete_parser.set_defaults(func=cmd_delete)
