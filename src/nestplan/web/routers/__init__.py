"""API routers for the REST API."""

from nestplan.web.routers.catalog import router as catalog_router
from nestplan.web.routers.plan import router as plan_router
from nestplan.web.routers.validate import router as validate_router

__all__ = [
    "catalog_router",
    "plan_router",
    "validate_router",
]
