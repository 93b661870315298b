"""Module catalog endpoint."""

from fastapi import APIRouter

from smartwall.domain.value_objects import (
    ACCESSORY_MODULE_COUNT,
    ACCESSORY_MODULE_WIDTH,
    CAPACITY_TOLERANCE,
    CATALOG_WIDTHS,
    HEIGHT_MAX,
    HEIGHT_MIN,
    OPTIMAL_FIT_WINDOW,
    QUOTATION_WIDTH_MAX,
    WIDTH_MAX,
    WIDTH_MIN,
)
from smartwall.web.schemas.responses import CatalogSchema

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("", response_model=CatalogSchema)
async def get_catalog() -> CatalogSchema:
    """Module widths and the dimension bounds the configurator enforces."""
    return CatalogSchema(
        widths_mm=list(CATALOG_WIDTHS),
        width_min_mm=WIDTH_MIN,
        width_max_mm=WIDTH_MAX,
        quotation_width_max_mm=QUOTATION_WIDTH_MAX,
        height_min_mm=HEIGHT_MIN,
        height_max_mm=HEIGHT_MAX,
        capacity_tolerance_mm=CAPACITY_TOLERANCE,
        optimal_fit_window_mm=OPTIMAL_FIT_WINDOW,
        accessory_module_width_mm=ACCESSORY_MODULE_WIDTH,
        accessory_module_count=ACCESSORY_MODULE_COUNT,
    )
