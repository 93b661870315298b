"""FastAPI REST API for the smart wall configurator.

Usage:
    uvicorn smartwall.web:app --reload
"""

from smartwall.web.app import app, create_app

__all__ = ["app", "create_app"]
