"""FastAPI REST API for cutting-plan generation.

Usage:
    uvicorn nestplan.web:app --reload
"""

from nestplan.web.app import app, create_app

__all__ = ["app", "create_app"]
