"""Common Pydantic schemas shared across requests and responses."""

from typing import Literal

from pydantic import BaseModel, Field

from smartwall.domain import CATALOG_WIDTHS, AccessoryRequirements, ModuleSegment

AccessorySlotLiteral = Literal["tv", "fire"]


class AccessoriesSchema(BaseModel):
    """Accessories selected for the wall."""

    tv: bool = Field(default=False, description="Wall will hold a TV")
    fire: bool = Field(default=False, description="Wall will hold a fireplace")

    def to_domain(self) -> AccessoryRequirements:
        return AccessoryRequirements(has_tv=self.tv, has_fire=self.fire)


class ModuleSchema(BaseModel):
    """A placed module."""

    id: str = Field(..., min_length=1, description="Module id")
    width_mm: int = Field(
        ..., description=f"Catalog width in mm, one of {list(CATALOG_WIDTHS)}"
    )
    accessory_slot: AccessorySlotLiteral | None = Field(
        default=None, description="Set when the module is half of an accessory pair"
    )

    @classmethod
    def from_domain(cls, module: ModuleSegment) -> "ModuleSchema":
        return cls(
            id=module.id,
            width_mm=module.width_mm,
            accessory_slot=module.accessory_slot.value if module.accessory_slot else None,
        )
