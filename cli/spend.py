#!/usr/bin/env python3

import sys
from datetime import date, datetime
from errors import BudgetError, CategoryNotFoundError
from logger import get_logger
from tools.budget import get_monthly_spending

logger = get_logger()


def _parse_month(value: str) -> date:
    return datetime.strptime(value, "%Y/%m").date()


def cmd_record(args, services):
    """Record a spend against a category."""
    event_date = None
    if args.date:
        try:
            event_date = date.fromisoformat(args.date)
        except ValueError:
            logger.error(f"Invalid date '{args.date}'. Use YYYY-MM-DD format.")
            sys.exit(1)

    try:
        new_total = services.ledger.record_spend(
            args.user_id, args.name, args.amount, args.description, event_date
        )
    except CategoryNotFoundError:
        logger.error(f"Budget category '{args.name}' not found for user.")
        sys.exit(1)
    except BudgetError as e:
        logger.error(f"Error recording spend: {e}")
        sys.exit(1)

    logger.info(f"✓ Spend recorded for '{args.name}'. New spent total: {new_total}")


def cmd_monthly(args, services):
    """Show a category's spending per month."""
    try:
        start_month = _parse_month(args.start_month)
        end_month = _parse_month(args.end_month)
    except ValueError:
        logger.error("Months must use YYYY/MM format (e.g., 2025/01).")
        sys.exit(1)

    if start_month > end_month:
        logger.error("Start month must not be after end month.")
        sys.exit(1)

    category = services.categories.find(args.user_id, args.name)
    if not category:
        logger.error(f"Category '{args.name}' not found.")
        sys.exit(1)

    monthly = get_monthly_spending(category, start_month, end_month)

    logger.info(f"\nMonthly spending for '{category.name}':")
    logger.info("=" * 40)
    for month, amount in monthly.items():
        logger.info(f"{month}  ${amount:>12}")
    logger.info("-" * 40)
    logger.info(f"Total    ${sum(monthly.values()):>12}")


def setup_parser(subparsers):
    """Setup spend subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "spend",
        help="Record and review spends",
        description="Record spends against budget categories",
    )

    spend_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available spend commands",
        dest="subcommand",
        required=True,
    )

    # spend record
    record_parser = spend_subparsers.add_parser(
        "record",
        help="Record a spend against a category",
        epilog="""
Examples:
  python -m cli spend record Groceries 45.50 "Weekly shop"
  python -m cli spend record Groceries 12.25 "Snacks" --date 2025-01-15
        """,
    )
    record_parser.add_argument("name", help="Category name")
    record_parser.add_argument("amount", help="Amount spent")
    record_parser.add_argument("description", help="What the money was spent on")
    record_parser.add_argument(
        "--date",
        help="Date of the spend in YYYY-MM-DD format (defaults to today)",
    )
    record_parser.set_defaults(func=cmd_record)

    # spend monthly
    monthly_parser = spend_subparsers.add_parser(
        "monthly", help="Show spending per month for a category"
    )
    monthly_parser.add_argument("name", help="Category name")
    monthly_parser.add_argument("start_month", help="First month in YYYY/MM format")
    monthly_parser.add_argument("end_month", help="Last month in YYYY/MM format")
    monthly_parser.set_defaults(func=cmd_monthly)
