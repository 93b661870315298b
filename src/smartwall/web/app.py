"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from smartwall.web.exceptions import register_exception_handlers
from smartwall.web.routers import (
    catalog_router,
    dimensions_router,
    recommendations_router,
    validate_router,
    wall_router,
)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="Smart Wall Configurator API",
        description="REST API for planning modular wall panel layouts",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # The configurator page is served from a different origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(catalog_router, prefix="/api/v1")
    app.include_router(dimensions_router, prefix="/api/v1")
    app.include_router(wall_router, prefix="/api/v1")
    app.include_router(recommendations_router, prefix="/api/v1")
    app.include_router(validate_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Application instance for ASGI servers (uvicorn)
app = create_app()
