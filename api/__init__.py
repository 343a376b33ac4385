"""
SportFwd API package.

Provides the FastAPI application for the SportFwd social network.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
