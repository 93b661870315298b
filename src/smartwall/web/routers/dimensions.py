"""Dimension validation endpoint."""

from fastapi import APIRouter

from smartwall.domain import check_dimensions
from smartwall.web.schemas.requests import DimensionsRequest
from smartwall.web.schemas.responses import DimensionCheckSchema

router = APIRouter(prefix="/dimensions", tags=["dimensions"])


@router.post("", response_model=DimensionCheckSchema)
async def check_wall_dimensions(request: DimensionsRequest) -> DimensionCheckSchema:
    """Normalize typed dimensions and report their validation status.

    Never fails for bad input; unreadable values come back as ``missing``.
    """
    check = check_dimensions(
        request.width, request.height, request.accessories.to_domain()
    )
    return DimensionCheckSchema.from_domain(check)
