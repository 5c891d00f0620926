#!/usr/bin/env python3

import uvicorn
from api import create_app
from cli.migrate import apply_pending
from logger import get_logger

logger = get_logger()


def cmd_serve(args, services):
    """Run the budget HTTP API."""
    host = args.host or services.config.api_host
    port = args.port or services.config.api_port

    apply_pending(services.db_manager)
    services.users.ensure_default(services.config.default_user_id)

    logger.info(f"Starting budget API on {host}:{port}")
    uvicorn.run(create_app(services), host=host, port=port)


def setup_parser(subparsers):
    """Setup serve subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP API",
        description="Serve the budget REST API with uvicorn",
    )
    parser.add_argument("--host", help="Interface to bind (defaults to config)")
    parser.add_argument("--port", type=int, help="Port to listen on (defaults to config)")
    parser.set_defaults(func=cmd_serve)
