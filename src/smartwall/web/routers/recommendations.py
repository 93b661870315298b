"""Module recommendation endpoint."""

from fastapi import APIRouter

from smartwall.domain import is_quotable_width, normalize_dimension, recommend_modules
from smartwall.web.exceptions import InvalidDimensionError
from smartwall.web.schemas.requests import RecommendationRequest
from smartwall.web.schemas.responses import (
    ModuleConfigurationSchema,
    RecommendationResponse,
)

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


@router.post("", response_model=RecommendationResponse)
async def recommend(request: RecommendationRequest) -> RecommendationResponse:
    """Suggest up to five module runs for a wall width.

    Raises:
        InvalidDimensionError: If the width is unreadable or outside
            1000-10000mm.
    """
    width_mm = normalize_dimension(request.width)
    if width_mm is None or not is_quotable_width(width_mm):
        raise InvalidDimensionError("width", request.width)

    configurations = recommend_modules(width_mm, request.accessories.to_domain())
    return RecommendationResponse(
        width_mm=width_mm,
        configurations=[
            ModuleConfigurationSchema.from_domain(c) for c in configurations
        ],
    )
