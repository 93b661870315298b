"""Accessory pairing checks.

A TV mount or fireplace sits on two 1000mm modules. Selecting the feature at
the dimension stage only produces hints; whether a missing pair blocks a
finished design depends on the AccessoryEnforcement setting.
"""

from __future__ import annotations

from dataclasses import dataclass

from .allocator import WallComposition, compute_utilization
from .value_objects import (
    ACCESSORY_MODULE_COUNT,
    ACCESSORY_MODULE_WIDTH,
    CAPACITY_TOLERANCE,
    AccessoryEnforcement,
    AccessoryRequirements,
    AccessorySlot,
    WallEnvelope,
)


@dataclass(frozen=True)
class CompletionReport:
    """Whether a design is ready to be quoted.

    Attributes:
        errors: Problems that block completion.
        warnings: Problems the customer should see but that do not block.
    """

    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def is_complete(self) -> bool:
        return not self.errors

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)


def dimension_hints(
    width_mm: int | None, requirements: AccessoryRequirements
) -> tuple[list[str], list[str]]:
    """Hints and warnings for selected accessories at the dimension stage.

    Args:
        width_mm: Valid wall width, or None if the width is not valid yet.
        requirements: Selected accessories.

    Returns:
        (hints, warnings). Hints describe the modules each accessory will
        take; a warning is added when the wall cannot hold all of them.
    """
    hints = [
        f"{slot.label} requires {ACCESSORY_MODULE_COUNT} x "
        f"{ACCESSORY_MODULE_WIDTH}mm modules ({slot.reserved_width}mm)"
        for slot in requirements.slots
    ]
    warnings: list[str] = []
    reserved = requirements.reserved_width_mm
    if width_mm is not None and reserved > width_mm + CAPACITY_TOLERANCE:
        labels = " and ".join(slot.label for slot in requirements.slots)
        warnings.append(
            f"{labels} need {reserved}mm but the wall is only {width_mm}mm wide"
        )
    return hints, warnings


def pair_status(composition: WallComposition, slot: AccessorySlot) -> int:
    """Number of placed modules tagged for slot."""
    return len(composition.accessory_segments(slot))


def check_completion(
    composition: WallComposition,
    envelope: WallEnvelope,
    requirements: AccessoryRequirements,
    enforcement: AccessoryEnforcement = AccessoryEnforcement.ADVISORY,
) -> CompletionReport:
    """Check whether the composition is a finished design.

    Missing or broken accessory pairs are warnings under ADVISORY and errors
    under STRICT. An empty wall, unset dimensions or an over-capacity wall are
    always errors.
    """
    if not envelope.is_set:
        return CompletionReport(errors=("Wall dimensions have not been entered",))

    errors: list[str] = []
    warnings: list[str] = []

    if composition.is_empty:
        errors.append("Place at least one module on the wall")

    report = compute_utilization(composition, envelope)
    if report.is_over_capacity:
        errors.append(
            f"Modules exceed the wall width by {-report.remaining_mm}mm; "
            f"remove modules or increase the width"
        )

    pair_issues = errors if enforcement is AccessoryEnforcement.STRICT else warnings
    for slot in requirements.slots:
        placed = pair_status(composition, slot)
        if placed == 0:
            pair_issues.append(
                f"{slot.label} selected but its {ACCESSORY_MODULE_COUNT} x "
                f"{ACCESSORY_MODULE_WIDTH}mm modules are not placed"
            )
        elif placed < ACCESSORY_MODULE_COUNT:
            pair_issues.append(
                f"{slot.label} pair is incomplete: {placed} of "
                f"{ACCESSORY_MODULE_COUNT} modules placed"
            )

    for slot in AccessorySlot:
        if slot not in requirements.slots and pair_status(composition, slot):
            warnings.append(f"{slot.label} modules placed but {slot.label} not selected")

    return CompletionReport(errors=tuple(errors), warnings=tuple(warnings))
