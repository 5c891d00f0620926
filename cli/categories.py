#!/usr/bin/env python3

import sys
from errors import BudgetError
from logger import get_logger
from models.category import CategoryOutcome
from tools.budget import get_budget_overview

logger = get_logger()


def cmd_list(args, services):
    """List all budget categories for the user."""
    categories = services.categories.find_all(args.user_id)

    if not categories:
        logger.info("No categories found.")
        return

    logger.info("\nCategories:")
    logger.info("=" * 80)
    for category in categories:
        logger.info(f"Name: {category.name}")
        logger.info(f"Planned: ${category.original_value}")
        logger.info(f"Spent: ${category.spent_amount_so_far}")
        logger.info(f"Remaining: ${category.remaining}")
        logger.info("-" * 80)

    logger.info(f"\nTotal categories: {len(categories)}")


def cmd_show(args, services):
    """Show one category with its transaction history."""
    try:
        category = services.categories.find(args.user_id, args.name)
    except BudgetError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    if not category:
        logger.error(f"Category '{args.name}' not found.")
        sys.exit(1)

    logger.info(f"\n{category.name}")
    logger.info("=" * 80)
    logger.info(f"Planned: ${category.original_value}")
    logger.info(f"Spent: ${category.spent_amount_so_far}")
    logger.info(f"Remaining: ${category.remaining}")

    if not category.transaction_history:
        logger.info("\nNo spends recorded.")
        return

    logger.info("\nHistory:")
    for day, entries in category.transaction_history.items():
        logger.info(day)
        for entry in entries:
            logger.info(f"  ${entry.amount:>10}  {entry.description}")


def cmd_add(args, services):
    """Add a category, or update the planned value of an existing one."""
    try:
        outcome = services.categories.add_or_update(
            args.user_id, args.name, args.original_value
        )
    except BudgetError as e:
        logger.error(f"Error saving category: {e}")
        sys.exit(1)

    if outcome is CategoryOutcome.CREATED:
        logger.info(f"✓ Budget category '{args.name}' added successfully.")
    else:
        logger.info(f"✓ Budget category '{args.name}' updated successfully.")


def cmd_delete(args, services):
    """Delete a category and its transaction history."""
    category = services.categories.find(args.user_id, args.name)
    if not category:
        logger.error(f"Category '{args.name}' not found.")
        sys.exit(1)

    if not args.yes:
        logger.info("\nCategory to delete:")
        logger.info(f"  Name: {category.name}")
        logger.info(f"  Spent so far: ${category.spent_amount_so_far}")
        logger.info(f"  Transactions: {category.transaction_count()}")

        confirm = (
            input("\nAre you sure you want to delete this category? (yes/no): ")
            .strip()
            .lower()
        )
        if confirm != "yes":
            logger.info("Deletion cancelled.")
            return

    if services.categories.delete(args.user_id, args.name):
        logger.info(f"✓ Category '{category.name}' deleted successfully.")
    else:
        logger.error("Failed to delete category.")
        sys.exit(1)


def cmd_overview(args, services):
    """Show planned vs. spent for every category."""
    overview = get_budget_overview(services, args.user_id)

    if not overview["categories"]:
        logger.info("No categories found.")
        return

    logger.info(f"\n{'Category':<30}{'Planned':>14}{'Spent':>14}{'Remaining':>14}")
    logger.info("=" * 72)
    for row in overview["categories"]:
        flag = "  OVER" if row["over_budget"] else ""
        logger.info(
            f"{row['category']:<30}{row['original_value']:>14}"
            f"{row['spent_amount_so_far']:>14}{row['remaining']:>14}{flag}"
        )

    totals = overview["totals"]
    logger.info("-" * 72)
    logger.info(
        f"{'Total':<30}{totals['original_value']:>14}"
        f"{totals['spent_amount_so_far']:>14}{totals['remaining']:>14}"
    )


def setup_parser(subparsers):
    """Setup categories subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "categories",
        help="Manage budget categories",
        description="Add, list, show and delete budget categories",
    )

    categories_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available category commands",
        dest="subcommand",
        required=True,
    )

    # categories list
    list_parser = categories_subparsers.add_parser("list", help="List all categories")
    list_parser.set_defaults(func=cmd_list)

    # categories show
    show_parser = categories_subparsers.add_parser(
        "show", help="Show a category and its transaction history"
    )
    show_parser.add_argument("name", help="Category name")
    show_parser.set_defaults(func=cmd_show)

    # categories add
    add_parser = categories_subparsers.add_parser(
        "add",
        help="Add a category or update its planned value",
        epilog="""
Examples:
  python -m cli categories add Groceries 300
  python -m cli categories add Rent 1250.00
        """,
    )
    add_parser.add_argument("name", help="Category name")
    add_parser.add_argument("original_value", help="Planned budget for the category")
    add_parser.set_defaults(func=cmd_add)

    # categories delete
    delete_parser = categories_subparsers.add_parser(
        "delete", help="Delete a category and its history"
    )
    delete_parser.add_argument("name", help="Category name")
    delete_parser.add_argument(
        "--yes", action="store_true", help="Skip the confirmation prompt"
    )
    delete_parser.set_defaults(func=cmd_delete)

    # categories overview
    overview_parser = categories_subparsers.add_parser(
        "overview", help="Show planned vs. spent for all categories"
    )
    overview_parser.set_defaults(func=cmd_overview)
