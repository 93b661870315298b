"""Pydantic request schemas for the REST API.

The API keeps no server-side sessions. Every wall operation receives the
current wall state and returns the new one, so the client owns the session.
"""

from typing import Any

from pydantic import BaseModel, Field

from smartwall.domain import (
    AccessoryEnforcement,
    AccessorySlot,
    ModuleSegment,
    WallComposition,
    WallEnvelope,
    is_quotable_width,
    is_valid_height,
    is_valid_width,
)
from smartwall.web.schemas.common import (
    AccessoriesSchema,
    AccessorySlotLiteral,
    ModuleSchema,
)


class DimensionsRequest(BaseModel):
    """Dimensions as typed by the customer."""

    width: str | int | float | None = Field(
        default=None, description="Wall width, e.g. 5700 or '5.7m'"
    )
    height: str | int | float | None = Field(
        default=None, description="Wall height, e.g. 2500 or '2.5m'"
    )
    accessories: AccessoriesSchema = Field(default_factory=AccessoriesSchema)


class WallStateSchema(BaseModel):
    """Committed wall dimensions and the modules placed on it."""

    width_mm: int = Field(..., gt=0, description="Committed wall width in mm")
    height_mm: int = Field(..., gt=0, description="Committed wall height in mm")
    modules: list[ModuleSchema] = Field(default_factory=list)
    accessories: AccessoriesSchema = Field(default_factory=AccessoriesSchema)
    allow_custom_quotation: bool = Field(
        default=False, description="Accept widths over 6000mm for a custom quotation"
    )

    def to_domain(self) -> tuple[WallEnvelope, WallComposition]:
        """Rebuild the engine state.

        Raises:
            ValueError: If the dimensions are out of bounds, a module has a
                non-catalog width, or module ids repeat.
        """
        usable_width = is_valid_width(self.width_mm) or (
            self.allow_custom_quotation and is_quotable_width(self.width_mm)
        )
        if not usable_width:
            raise ValueError(f"Wall width {self.width_mm}mm is out of bounds")
        if not is_valid_height(self.height_mm):
            raise ValueError(f"Wall height {self.height_mm}mm is out of bounds")

        envelope = WallEnvelope(width_mm=self.width_mm, height_mm=self.height_mm)
        composition = WallComposition(
            modules=tuple(
                ModuleSegment(
                    id=module.id,
                    width_mm=module.width_mm,
                    accessory_slot=(
                        AccessorySlot(module.accessory_slot)
                        if module.accessory_slot
                        else None
                    ),
                )
                for module in self.modules
            )
        )
        return envelope, composition


class WallRequest(BaseModel):
    """Request carrying only the wall state."""

    wall: WallStateSchema


class AddModuleRequest(BaseModel):
    """Request to place one catalog module."""

    wall: WallStateSchema
    width_mm: int = Field(..., description="Catalog width of the module to add")


class ReserveAccessoryRequest(BaseModel):
    """Request to place the 2 x 1000mm pair for an accessory."""

    wall: WallStateSchema
    slot: AccessorySlotLiteral = Field(..., description="tv or fire")


class RemoveModuleRequest(BaseModel):
    """Request to remove one module by id."""

    wall: WallStateSchema
    module_id: str = Field(..., description="Id of the module to remove")


class CompletionRequest(BaseModel):
    """Request to check whether a wall design is complete."""

    wall: WallStateSchema
    accessory_enforcement: AccessoryEnforcement | None = Field(
        default=None,
        description="advisory or strict; the server default when omitted",
    )


class RecommendationRequest(BaseModel):
    """Request for suggested module runs."""

    width: str | int | float = Field(..., description="Wall width, e.g. 5700 or '5.7m'")
    accessories: AccessoriesSchema = Field(default_factory=AccessoriesSchema)


class ConfigValidateRequest(BaseModel):
    """Request for validating a wall plan."""

    config: dict[str, Any] = Field(..., description="Wall plan JSON")
