#!/usr/bin/env python3
"""
Budgetbook CLI - Command-line interface for budget categories and spends.

Usage:
    python -m cli [--user-id ID] <command> <subcommand> [options]

Commands:
    categories   Manage budget categories
    spend        Record and review spends
    migrate      Database migrations
    serve        Run the HTTP API

Examples:
    python -m cli categories add Groceries 300
    python -m cli spend record Groceries 45.50 "Weekly shop"
    python -m cli categories show Groceries
    python -m cli migrate apply
    python -m cli serve --port 8080
"""

import sys
import argparse
from cli import categories, spend, migrate, serve
from config import load_config
from services.base import Services
from db.manager import DatabaseManager
from logger import setup_logging


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Budgetbook - Personal budget categories and spend tracking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--user-id",
        type=int,
        help="Owner of the categories (defaults to budget.default_user_id in config)",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    categories.setup_parser(subparsers)
    spend.setup_parser(subparsers)
    migrate.setup_parser(subparsers)
    serve.setup_parser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)

            if args.user_id is None:
                args.user_id = config.default_user_id

            # migrate works on the raw database; everything else uses services
            if args.command == "migrate":
                args.func(args, DatabaseManager(config))
            else:
                args.func(args, Services(config))
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
