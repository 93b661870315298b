"""Wall composition endpoints.

Each endpoint applies one allocator transition to the wall state sent by the
client and returns the resulting snapshot.
"""

from fastapi import APIRouter

from smartwall.application import WallSnapshot
from smartwall.domain import (
    AccessorySlot,
    PlacementResult,
    WallComposition,
    WallEnvelope,
    add_module,
    check_completion,
    classify_palette,
    clear_wall,
    compute_utilization,
    remove_module,
    reserve_accessory,
)
from smartwall.web.dependencies import SessionSettingsDep
from smartwall.web.schemas.common import ModuleSchema
from smartwall.web.schemas.requests import (
    AddModuleRequest,
    CompletionRequest,
    RemoveModuleRequest,
    ReserveAccessoryRequest,
    WallRequest,
    WallStateSchema,
)
from smartwall.web.schemas.responses import (
    CandidateFitSchema,
    CompletionSchema,
    PaletteResponse,
    PlacementResponse,
    RemovalResponse,
    WallSnapshotSchema,
)

router = APIRouter(prefix="/wall", tags=["wall"])


def _snapshot(
    wall: WallStateSchema, envelope: WallEnvelope, composition: WallComposition
) -> WallSnapshotSchema:
    snapshot = WallSnapshot.build(
        envelope, composition, requirements=wall.accessories.to_domain()
    )
    return WallSnapshotSchema.from_snapshot(snapshot)


def _placement_response(
    wall: WallStateSchema, envelope: WallEnvelope, result: PlacementResult
) -> PlacementResponse:
    return PlacementResponse(
        accepted=result.accepted,
        fit=result.fit.value,
        reason=result.reason,
        placed=[ModuleSchema.from_domain(m) for m in result.placed],
        wall=_snapshot(wall, envelope, result.composition),
    )


@router.post("/add", response_model=PlacementResponse)
async def add_wall_module(request: AddModuleRequest) -> PlacementResponse:
    """Place one catalog module; refusals come back with ``accepted`` false."""
    envelope, composition = request.wall.to_domain()
    result = add_module(composition, envelope, request.width_mm)
    return _placement_response(request.wall, envelope, result)


@router.post("/reserve", response_model=PlacementResponse)
async def reserve_wall_accessory(
    request: ReserveAccessoryRequest,
) -> PlacementResponse:
    """Place the 2 x 1000mm pair for a TV or fireplace."""
    envelope, composition = request.wall.to_domain()
    result = reserve_accessory(composition, envelope, AccessorySlot(request.slot))
    return _placement_response(request.wall, envelope, result)


@router.post("/remove", response_model=RemovalResponse)
async def remove_wall_module(request: RemoveModuleRequest) -> RemovalResponse:
    """Remove one module by id; unknown ids leave the wall unchanged."""
    envelope, composition = request.wall.to_domain()
    updated = remove_module(composition, request.module_id)
    return RemovalResponse(
        removed=updated is not composition,
        wall=_snapshot(request.wall, envelope, updated),
    )


@router.post("/clear", response_model=WallSnapshotSchema)
async def clear_wall_modules(request: WallRequest) -> WallSnapshotSchema:
    """Remove every module."""
    envelope, _ = request.wall.to_domain()
    return _snapshot(request.wall, envelope, clear_wall())


@router.post("/palette", response_model=PaletteResponse)
async def module_palette(request: WallRequest) -> PaletteResponse:
    """Fit status of every catalog width against the remaining space."""
    envelope, composition = request.wall.to_domain()
    report = compute_utilization(composition, envelope)
    return PaletteResponse(
        remaining_mm=report.remaining_mm,
        palette=[
            CandidateFitSchema.from_domain(fit)
            for fit in classify_palette(composition, envelope)
        ],
    )


@router.post("/completion", response_model=CompletionSchema)
async def wall_completion(
    request: CompletionRequest, settings: SessionSettingsDep
) -> CompletionSchema:
    """Whether the design is ready to quote."""
    envelope, composition = request.wall.to_domain()
    enforcement = request.accessory_enforcement or settings.accessory_enforcement
    report = check_completion(
        composition, envelope, request.wall.accessories.to_domain(), enforcement
    )
    return CompletionSchema.from_domain(report)
