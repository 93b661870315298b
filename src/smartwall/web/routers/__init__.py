"""API routers for the REST API."""

from smartwall.web.routers.catalog import router as catalog_router
from smartwall.web.routers.dimensions import router as dimensions_router
from smartwall.web.routers.recommendations import router as recommendations_router
from smartwall.web.routers.validate import router as validate_router
from smartwall.web.routers.wall import router as wall_router

__all__ = [
    "catalog_router",
    "dimensions_router",
    "recommendations_router",
    "validate_router",
    "wall_router",
]
