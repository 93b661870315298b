"""Domain layer - dimension validation and module allocation."""

from .accessories import CompletionReport, check_completion, dimension_hints
from .allocator import (
    EnvelopeNotReadyError,
    PlacementResult,
    WallComposition,
    add_module,
    can_fit,
    classify_candidate,
    classify_palette,
    clear_wall,
    composition_state,
    compute_utilization,
    remove_module,
    reserve_accessory,
)
from .dimensions import (
    check_dimensions,
    classify_height,
    classify_width,
    is_oversize_width,
    is_quotable_width,
    is_valid_height,
    is_valid_width,
    normalize_dimension,
)
from .recommendations import example_configuration, recommend_modules
from .value_objects import (
    CATALOG_WIDTHS,
    AccessoryEnforcement,
    AccessoryRequirements,
    AccessorySlot,
    CandidateFit,
    CompositionState,
    DimensionCheck,
    FitStatus,
    HeightStatus,
    ModuleConfiguration,
    ModuleSegment,
    UtilizationReport,
    WallEnvelope,
    WidthStatus,
)

__all__ = [
    "CATALOG_WIDTHS",
    "AccessoryEnforcement",
    "AccessoryRequirements",
    "AccessorySlot",
    "CandidateFit",
    "CompletionReport",
    "CompositionState",
    "DimensionCheck",
    "EnvelopeNotReadyError",
    "FitStatus",
    "HeightStatus",
    "ModuleConfiguration",
    "ModuleSegment",
    "PlacementResult",
    "UtilizationReport",
    "WallComposition",
    "WallEnvelope",
    "WidthStatus",
    "add_module",
    "can_fit",
    "check_completion",
    "check_dimensions",
    "classify_candidate",
    "classify_height",
    "classify_palette",
    "classify_width",
    "clear_wall",
    "composition_state",
    "compute_utilization",
    "dimension_hints",
    "example_configuration",
    "is_oversize_width",
    "is_quotable_width",
    "is_valid_height",
    "is_valid_width",
    "normalize_dimension",
    "recommend_modules",
    "remove_module",
    "reserve_accessory",
]
