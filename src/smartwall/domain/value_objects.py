"""Value objects for the smart wall domain.

All lengths are whole millimetres. Every class here is immutable; transitions
build new instances rather than mutating existing ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Fixed module catalog in mm
CATALOG_WIDTHS: tuple[int, ...] = (400, 600, 800, 1000, 1100, 1200)

WIDTH_MIN = 1000
WIDTH_MAX = 6000
QUOTATION_WIDTH_MAX = 10000
HEIGHT_MIN = 2200
HEIGHT_MAX = 4000

# Trim/edge fittings may overhang the wall by this much
CAPACITY_TOLERANCE = 100
OPTIMAL_FIT_WINDOW = 200

ACCESSORY_MODULE_WIDTH = 1000
ACCESSORY_MODULE_COUNT = 2


class AccessorySlot(str, Enum):
    """Feature a pair of 1000mm modules is reserved for."""

    TV = "tv"
    FIRE = "fire"

    @property
    def label(self) -> str:
        return "TV" if self is AccessorySlot.TV else "Fire"

    @property
    def reserved_width(self) -> int:
        """Total width consumed by the reserved pair."""
        return ACCESSORY_MODULE_WIDTH * ACCESSORY_MODULE_COUNT


class FitStatus(str, Enum):
    """Classification of a candidate module against remaining capacity."""

    OPTIMAL = "optimal"
    FITS = "fits"
    TOO_LARGE = "too_large"


class CompositionState(str, Enum):
    """Allocator states."""

    EMPTY = "empty"
    POPULATED = "populated"
    OVER_CAPACITY = "over_capacity"


class WidthStatus(str, Enum):
    """Outcome of checking a wall width against the catalog bounds.

    OVERSIZE is advisory: the wall is wider than the standard catalog supports
    and should be routed to a custom quotation rather than rejected.
    """

    MISSING = "missing"
    TOO_SMALL = "too_small"
    VALID = "valid"
    OVERSIZE = "oversize"
    EXCEEDS_MAXIMUM = "exceeds_maximum"


class HeightStatus(str, Enum):
    """Outcome of checking a wall height against the catalog bounds."""

    MISSING = "missing"
    TOO_SMALL = "too_small"
    VALID = "valid"
    TOO_LARGE = "too_large"


class AccessoryEnforcement(str, Enum):
    """How strictly accessory pairs are required for a complete design."""

    ADVISORY = "advisory"
    STRICT = "strict"


def check_catalog_width(width_mm: int) -> int:
    """Return width_mm if it is a catalog width, raise ValueError otherwise."""
    if isinstance(width_mm, bool) or width_mm not in CATALOG_WIDTHS:
        raise ValueError(
            f"Module width must be one of {list(CATALOG_WIDTHS)}, got {width_mm!r}"
        )
    return int(width_mm)


@dataclass(frozen=True)
class WallEnvelope:
    """The customer's target wall, in millimetres.

    Both fields are set together or not at all.
    """

    width_mm: int | None = None
    height_mm: int | None = None

    def __post_init__(self) -> None:
        if (self.width_mm is None) != (self.height_mm is None):
            raise ValueError("Envelope width and height must be set together")
        for value in (self.width_mm, self.height_mm):
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError("Envelope dimensions must be whole millimetres")
            if value <= 0:
                raise ValueError("Envelope dimensions must be positive")

    @classmethod
    def empty(cls) -> "WallEnvelope":
        return cls()

    @property
    def is_set(self) -> bool:
        return self.width_mm is not None

    @property
    def capacity_limit_mm(self) -> int | None:
        """Largest total module width the wall accepts, tolerance included."""
        if self.width_mm is None:
            return None
        return self.width_mm + CAPACITY_TOLERANCE


@dataclass(frozen=True)
class AccessoryRequirements:
    """Customer-selected features that each need a reserved module pair."""

    has_tv: bool = False
    has_fire: bool = False

    @property
    def slots(self) -> tuple[AccessorySlot, ...]:
        selected: list[AccessorySlot] = []
        if self.has_tv:
            selected.append(AccessorySlot.TV)
        if self.has_fire:
            selected.append(AccessorySlot.FIRE)
        return tuple(selected)

    @property
    def reserved_width_mm(self) -> int:
        return sum(slot.reserved_width for slot in self.slots)


@dataclass(frozen=True)
class ModuleSegment:
    """A placed wall panel.

    Attributes:
        id: Unique within the composition; assigned at placement time.
        width_mm: One of CATALOG_WIDTHS.
        accessory_slot: Set when the segment is half of a TV or fire pair.
    """

    id: str
    width_mm: int
    accessory_slot: AccessorySlot | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Module id must not be empty")
        check_catalog_width(self.width_mm)
        if (
            self.accessory_slot is not None
            and self.width_mm != ACCESSORY_MODULE_WIDTH
        ):
            raise ValueError(
                f"Accessory modules must be {ACCESSORY_MODULE_WIDTH}mm wide"
            )


@dataclass(frozen=True)
class UtilizationReport:
    """Capacity figures for a composition on a given envelope."""

    total_width_mm: int
    utilization_percent: float
    remaining_mm: int

    @property
    def is_over_capacity(self) -> bool:
        """True once the modules overrun the wall beyond the tolerance band."""
        return self.remaining_mm < -CAPACITY_TOLERANCE


@dataclass(frozen=True)
class CandidateFit:
    """Fit classification for one catalog width."""

    width_mm: int
    status: FitStatus

    @property
    def is_enabled(self) -> bool:
        return self.status is not FitStatus.TOO_LARGE


@dataclass(frozen=True)
class DimensionCheck:
    """Normalized dimensions with their validation outcome."""

    width_mm: int | None
    height_mm: int | None
    width_status: WidthStatus
    height_status: HeightStatus
    hints: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def is_width_valid(self) -> bool:
        return self.width_status is WidthStatus.VALID

    @property
    def is_height_valid(self) -> bool:
        return self.height_status is HeightStatus.VALID

    @property
    def is_valid(self) -> bool:
        return self.is_width_valid and self.is_height_valid

    @property
    def is_oversize(self) -> bool:
        return self.width_status is WidthStatus.OVERSIZE


@dataclass(frozen=True)
class ModuleConfiguration:
    """A suggested sequence of modules for a wall width."""

    modules: tuple[int, ...]
    total_width_mm: int
    description: str
    is_optimal: bool

    @property
    def module_count(self) -> int:
        return len(self.modules)
