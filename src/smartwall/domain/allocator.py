"""Module capacity allocation along the wall width.

A WallComposition is the ordered run of placed modules. Every operation here
is a pure function: it takes the current composition and envelope and returns
a new composition (or the same one when nothing changed). Capacity is a plain
sum, so module order only matters for display.

Placement refusals are not errors. The UI is expected to disable a module
button before the user can click it, so add_module and reserve_accessory
refuse quietly and report the outcome through PlacementResult.accepted.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from .value_objects import (
    ACCESSORY_MODULE_COUNT,
    ACCESSORY_MODULE_WIDTH,
    CAPACITY_TOLERANCE,
    CATALOG_WIDTHS,
    OPTIMAL_FIT_WINDOW,
    AccessorySlot,
    CandidateFit,
    CompositionState,
    FitStatus,
    ModuleSegment,
    UtilizationReport,
    WallEnvelope,
    check_catalog_width,
)

logger = logging.getLogger(__name__)


class EnvelopeNotReadyError(Exception):
    """Raised when capacity is requested for a wall with no dimensions."""

    pass


@dataclass(frozen=True)
class WallComposition:
    """Placed modules in left-to-right order."""

    modules: tuple[ModuleSegment, ...] = ()

    def __post_init__(self) -> None:
        ids = [module.id for module in self.modules]
        if len(ids) != len(set(ids)):
            raise ValueError("Module ids must be unique within a composition")

    @property
    def total_width_mm(self) -> int:
        return sum(module.width_mm for module in self.modules)

    @property
    def is_empty(self) -> bool:
        return not self.modules

    def find(self, module_id: str) -> ModuleSegment | None:
        for module in self.modules:
            if module.id == module_id:
                return module
        return None

    def accessory_segments(self, slot: AccessorySlot) -> tuple[ModuleSegment, ...]:
        return tuple(m for m in self.modules if m.accessory_slot is slot)


@dataclass(frozen=True)
class PlacementResult:
    """Outcome of a placement attempt.

    Attributes:
        composition: Composition after the attempt (unchanged when refused).
        accepted: Whether the modules were placed.
        fit: Classification of the candidate before placement.
        placed: Segments added by this attempt.
        reason: Why the attempt was refused, None when accepted.
    """

    composition: WallComposition
    accepted: bool
    fit: FitStatus
    placed: tuple[ModuleSegment, ...] = ()
    reason: str | None = None


def new_segment_id() -> str:
    """Generate a fresh module id."""
    return f"module-{uuid.uuid4().hex[:12]}"


def _require_width(envelope: WallEnvelope) -> int:
    if envelope.width_mm is None:
        raise EnvelopeNotReadyError("Wall dimensions have not been set")
    return envelope.width_mm


def compute_utilization(
    composition: WallComposition, envelope: WallEnvelope
) -> UtilizationReport:
    """Compute total, utilization and remaining width.

    remaining_mm goes negative when the modules overrun the wall.

    Raises:
        EnvelopeNotReadyError: If the envelope has no width.
    """
    width = _require_width(envelope)
    total = composition.total_width_mm
    return UtilizationReport(
        total_width_mm=total,
        utilization_percent=total / width * 100,
        remaining_mm=width - total,
    )


def composition_state(
    composition: WallComposition, envelope: WallEnvelope
) -> CompositionState:
    """Current allocator state for the composition on this wall."""
    if composition.is_empty:
        return CompositionState.EMPTY
    if compute_utilization(composition, envelope).is_over_capacity:
        return CompositionState.OVER_CAPACITY
    return CompositionState.POPULATED


def classify_candidate(candidate_mm: int, remaining_mm: int) -> FitStatus:
    """Classify a candidate width against the remaining wall width.

    - TOO_LARGE: overruns the wall by more than the tolerance band.
    - OPTIMAL: fits without overrun and leaves at most 200mm uncovered.
    - FITS: anything else.
    """
    if candidate_mm > remaining_mm + CAPACITY_TOLERANCE:
        return FitStatus.TOO_LARGE
    if remaining_mm - OPTIMAL_FIT_WINDOW <= candidate_mm <= remaining_mm:
        return FitStatus.OPTIMAL
    return FitStatus.FITS


def classify_palette(
    composition: WallComposition, envelope: WallEnvelope
) -> tuple[CandidateFit, ...]:
    """Classify every catalog width for the module palette."""
    remaining = compute_utilization(composition, envelope).remaining_mm
    return tuple(
        CandidateFit(width_mm=width, status=classify_candidate(width, remaining))
        for width in CATALOG_WIDTHS
    )


def can_fit(
    composition: WallComposition, envelope: WallEnvelope, width_mm: int
) -> bool:
    """Whether width_mm more of modules stays within the tolerance band."""
    limit = envelope.capacity_limit_mm
    if limit is None:
        raise EnvelopeNotReadyError("Wall dimensions have not been set")
    return composition.total_width_mm + width_mm <= limit


def add_module(
    composition: WallComposition,
    envelope: WallEnvelope,
    width_mm: int,
    *,
    segment_id: str | None = None,
) -> PlacementResult:
    """Append a catalog module if it fits within the tolerance band.

    Args:
        composition: Current composition.
        envelope: Wall the modules are placed on.
        width_mm: Catalog width of the module to add.
        segment_id: Id for the new segment; generated when omitted.

    Returns:
        PlacementResult; ``accepted`` is False and the composition unchanged
        when the module would overrun the wall.

    Raises:
        ValueError: If width_mm is not a catalog width.
        EnvelopeNotReadyError: If the envelope has no width.
    """
    width_mm = check_catalog_width(width_mm)
    remaining = compute_utilization(composition, envelope).remaining_mm
    fit = classify_candidate(width_mm, remaining)

    if not can_fit(composition, envelope, width_mm):
        logger.debug(
            f"Refused {width_mm}mm module: {remaining}mm remaining "
            f"(+{CAPACITY_TOLERANCE}mm tolerance)"
        )
        return PlacementResult(
            composition=composition,
            accepted=False,
            fit=fit,
            reason=f"{width_mm}mm module exceeds remaining width of {remaining}mm",
        )

    segment = ModuleSegment(id=segment_id or new_segment_id(), width_mm=width_mm)
    logger.debug(f"Placed {width_mm}mm module {segment.id}")
    return PlacementResult(
        composition=WallComposition(modules=composition.modules + (segment,)),
        accepted=True,
        fit=fit,
        placed=(segment,),
    )


def reserve_accessory(
    composition: WallComposition,
    envelope: WallEnvelope,
    slot: AccessorySlot,
) -> PlacementResult:
    """Place the pair of 1000mm modules reserved for a TV or fireplace.

    Both modules are placed or neither is. Each slot can be reserved once.

    Raises:
        EnvelopeNotReadyError: If the envelope has no width.
    """
    pair_width = ACCESSORY_MODULE_WIDTH * ACCESSORY_MODULE_COUNT
    remaining = compute_utilization(composition, envelope).remaining_mm
    fit = classify_candidate(pair_width, remaining)

    if composition.accessory_segments(slot):
        return PlacementResult(
            composition=composition,
            accepted=False,
            fit=fit,
            reason=f"{slot.label} modules are already placed",
        )
    if not can_fit(composition, envelope, pair_width):
        logger.debug(f"Refused {slot.value} pair: {remaining}mm remaining")
        return PlacementResult(
            composition=composition,
            accepted=False,
            fit=fit,
            reason=(
                f"{slot.label} needs {pair_width}mm but only {remaining}mm remains"
            ),
        )

    pair = tuple(
        ModuleSegment(
            id=new_segment_id(),
            width_mm=ACCESSORY_MODULE_WIDTH,
            accessory_slot=slot,
        )
        for _ in range(ACCESSORY_MODULE_COUNT)
    )
    logger.debug(f"Reserved {slot.value} pair {[m.id for m in pair]}")
    return PlacementResult(
        composition=WallComposition(modules=composition.modules + pair),
        accepted=True,
        fit=fit,
        placed=pair,
    )


def remove_module(composition: WallComposition, module_id: str) -> WallComposition:
    """Remove one module by id.

    Unknown ids leave the composition untouched (the same instance is
    returned). Removing half of an accessory pair removes only that half.
    """
    if composition.find(module_id) is None:
        return composition
    return WallComposition(
        modules=tuple(m for m in composition.modules if m.id != module_id)
    )


def clear_wall() -> WallComposition:
    """Return an empty composition."""
    return WallComposition()
