"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from smartwall.application import WallSnapshot
from smartwall.domain import (
    CandidateFit,
    CompletionReport,
    DimensionCheck,
    ModuleConfiguration,
)
from smartwall.web.schemas.common import AccessoriesSchema, ModuleSchema


class DimensionCheckSchema(BaseModel):
    """Normalized dimensions and their validation outcome."""

    width_mm: int | None
    height_mm: int | None
    width_status: str
    height_status: str
    is_valid: bool
    is_oversize: bool = Field(..., description="Width needs a custom quotation")
    hints: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, check: DimensionCheck) -> "DimensionCheckSchema":
        return cls(
            width_mm=check.width_mm,
            height_mm=check.height_mm,
            width_status=check.width_status.value,
            height_status=check.height_status.value,
            is_valid=check.is_valid,
            is_oversize=check.is_oversize,
            hints=list(check.hints),
            warnings=list(check.warnings),
        )


class WallSnapshotSchema(BaseModel):
    """Read-only wall state."""

    width_mm: int | None
    height_mm: int | None
    modules: list[ModuleSchema]
    total_width_mm: int
    utilization_percent: float
    remaining_mm: int | None
    is_over_capacity: bool
    is_oversize: bool
    state: str
    width_status: str
    height_status: str
    accessories: AccessoriesSchema

    @classmethod
    def from_snapshot(cls, snapshot: WallSnapshot) -> "WallSnapshotSchema":
        return cls.model_validate(snapshot.to_dict())


class PlacementResponse(BaseModel):
    """Outcome of a placement request."""

    accepted: bool
    fit: str = Field(..., description="optimal, fits or too_large")
    reason: str | None = None
    placed: list[ModuleSchema] = Field(default_factory=list)
    wall: WallSnapshotSchema


class RemovalResponse(BaseModel):
    """Outcome of a removal request."""

    removed: bool
    wall: WallSnapshotSchema


class CandidateFitSchema(BaseModel):
    """Fit status of one catalog width."""

    width_mm: int
    status: str
    is_enabled: bool

    @classmethod
    def from_domain(cls, fit: CandidateFit) -> "CandidateFitSchema":
        return cls(
            width_mm=fit.width_mm, status=fit.status.value, is_enabled=fit.is_enabled
        )


class PaletteResponse(BaseModel):
    """Fit status for every catalog width."""

    remaining_mm: int
    palette: list[CandidateFitSchema]


class CompletionSchema(BaseModel):
    """Whether the wall design is ready to quote."""

    is_complete: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, report: CompletionReport) -> "CompletionSchema":
        return cls(
            is_complete=report.is_complete,
            errors=list(report.errors),
            warnings=list(report.warnings),
        )


class ModuleConfigurationSchema(BaseModel):
    """A suggested module run."""

    modules: list[int]
    total_width_mm: int
    module_count: int
    description: str
    is_optimal: bool

    @classmethod
    def from_domain(cls, config: ModuleConfiguration) -> "ModuleConfigurationSchema":
        return cls(
            modules=list(config.modules),
            total_width_mm=config.total_width_mm,
            module_count=config.module_count,
            description=config.description,
            is_optimal=config.is_optimal,
        )


class RecommendationResponse(BaseModel):
    """Suggested module runs for a wall width."""

    width_mm: int
    configurations: list[ModuleConfigurationSchema]


class CatalogSchema(BaseModel):
    """Module catalog and dimension bounds."""

    widths_mm: list[int]
    width_min_mm: int
    width_max_mm: int
    quotation_width_max_mm: int
    height_min_mm: int
    height_max_mm: int
    capacity_tolerance_mm: int
    optimal_fit_window_mm: int
    accessory_module_width_mm: int
    accessory_module_count: int


class ValidationResultSchema(BaseModel):
    """Response for wall plan validation."""

    is_valid: bool = Field(..., description="Whether the plan has no errors")
    exit_code: int = Field(..., description="0 valid, 1 errors, 2 warnings only")
    errors: list[dict[str, Any]] = Field(default_factory=list)
    warnings: list[dict[str, Any]] = Field(default_factory=list)


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
