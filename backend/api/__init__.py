"""
BlueTask API package.

Provides the FastAPI application for the BlueTask collaborative todo service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
