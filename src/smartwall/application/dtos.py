"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from smartwall.domain import (
    AccessoryRequirements,
    CompositionState,
    HeightStatus,
    ModuleSegment,
    WallComposition,
    WallEnvelope,
    WidthStatus,
    classify_height,
    classify_width,
    composition_state,
    compute_utilization,
)


@dataclass(frozen=True)
class WallSnapshot:
    """Read-only view of a configurator session for rendering.

    Attributes:
        width_mm: Committed wall width, None until both dimensions are usable.
        height_mm: Committed wall height, None until both dimensions are usable.
        modules: Placed segments in left-to-right order.
        total_width_mm: Sum of module widths.
        utilization_percent: Share of the wall width covered by modules.
        remaining_mm: Wall width minus total; negative on overrun, None when
            no envelope is set.
        is_over_capacity: Modules overrun the wall beyond the tolerance band.
        state: Allocator state.
        width_status: Validation band of the last entered width.
        height_status: Validation band of the last entered height.
        requirements: Selected accessories.
    """

    width_mm: int | None
    height_mm: int | None
    modules: tuple[ModuleSegment, ...]
    total_width_mm: int
    utilization_percent: float
    remaining_mm: int | None
    is_over_capacity: bool
    state: CompositionState
    width_status: WidthStatus
    height_status: HeightStatus
    requirements: AccessoryRequirements = AccessoryRequirements()

    @property
    def is_oversize(self) -> bool:
        """Wall is wider than the catalog; route to a custom quotation."""
        return self.width_status is WidthStatus.OVERSIZE

    @classmethod
    def build(
        cls,
        envelope: WallEnvelope,
        composition: WallComposition,
        width_status: WidthStatus | None = None,
        height_status: HeightStatus | None = None,
        requirements: AccessoryRequirements | None = None,
    ) -> "WallSnapshot":
        """Assemble a snapshot from engine state.

        Statuses default to those of the envelope's own dimensions.
        """
        if width_status is None:
            width_status = classify_width(envelope.width_mm)
        if height_status is None:
            height_status = classify_height(envelope.height_mm)

        if envelope.is_set:
            report = compute_utilization(composition, envelope)
            utilization = report.utilization_percent
            remaining: int | None = report.remaining_mm
            over = report.is_over_capacity
            state = composition_state(composition, envelope)
        else:
            utilization = 0.0
            remaining = None
            over = False
            state = CompositionState.EMPTY

        return cls(
            width_mm=envelope.width_mm,
            height_mm=envelope.height_mm,
            modules=composition.modules,
            total_width_mm=composition.total_width_mm,
            utilization_percent=utilization,
            remaining_mm=remaining,
            is_over_capacity=over,
            state=state,
            width_status=width_status,
            height_status=height_status,
            requirements=requirements or AccessoryRequirements(),
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-compatible representation."""
        return {
            "width_mm": self.width_mm,
            "height_mm": self.height_mm,
            "modules": [
                {
                    "id": module.id,
                    "width_mm": module.width_mm,
                    "accessory_slot": (
                        module.accessory_slot.value if module.accessory_slot else None
                    ),
                }
                for module in self.modules
            ],
            "total_width_mm": self.total_width_mm,
            "utilization_percent": round(self.utilization_percent, 1),
            "remaining_mm": self.remaining_mm,
            "is_over_capacity": self.is_over_capacity,
            "is_oversize": self.is_oversize,
            "state": self.state.value,
            "width_status": self.width_status.value,
            "height_status": self.height_status.value,
            "accessories": {
                "tv": self.requirements.has_tv,
                "fire": self.requirements.has_fire,
            },
        }
