"""Error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from smartwall.application.config import ConfigError
from smartwall.domain import EnvelopeNotReadyError


class InvalidDimensionError(Exception):
    """Raised when a request carries a wall dimension that cannot be used."""

    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.value = value
        super().__init__(f"'{value}' is not a usable wall {field}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Wall plan could not be loaded",
                "error_type": exc.error_type,
                "details": exc.details,
            },
        )

    @app.exception_handler(EnvelopeNotReadyError)
    async def envelope_not_ready_handler(
        request: Request, exc: EnvelopeNotReadyError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "envelope_not_ready",
                "details": None,
            },
        )

    @app.exception_handler(InvalidDimensionError)
    async def invalid_dimension_handler(
        request: Request, exc: InvalidDimensionError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "invalid_dimension",
                "details": {"field": exc.field, "value": exc.value},
            },
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "invalid_wall",
                "details": None,
            },
        )
