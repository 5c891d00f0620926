"""HTTP API for budget categories and spends."""

from api.app import create_app

__all__ = ["create_app"]
