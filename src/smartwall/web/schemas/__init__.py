"""Pydantic schemas for the REST API."""

from smartwall.web.schemas.common import AccessoriesSchema, ModuleSchema
from smartwall.web.schemas.requests import (
    AddModuleRequest,
    CompletionRequest,
    ConfigValidateRequest,
    DimensionsRequest,
    RecommendationRequest,
    RemoveModuleRequest,
    ReserveAccessoryRequest,
    WallRequest,
    WallStateSchema,
)
from smartwall.web.schemas.responses import (
    CandidateFitSchema,
    CatalogSchema,
    CompletionSchema,
    DimensionCheckSchema,
    ErrorResponseSchema,
    ModuleConfigurationSchema,
    PaletteResponse,
    PlacementResponse,
    RecommendationResponse,
    RemovalResponse,
    ValidationResultSchema,
    WallSnapshotSchema,
)

__all__ = [
    # Common
    "AccessoriesSchema",
    "ModuleSchema",
    # Requests
    "AddModuleRequest",
    "CompletionRequest",
    "ConfigValidateRequest",
    "DimensionsRequest",
    "RecommendationRequest",
    "RemoveModuleRequest",
    "ReserveAccessoryRequest",
    "WallRequest",
    "WallStateSchema",
    # Responses
    "CandidateFitSchema",
    "CatalogSchema",
    "CompletionSchema",
    "DimensionCheckSchema",
    "ErrorResponseSchema",
    "ModuleConfigurationSchema",
    "PaletteResponse",
    "PlacementResponse",
    "RecommendationResponse",
    "RemovalResponse",
    "ValidationResultSchema",
    "WallSnapshotSchema",
]
