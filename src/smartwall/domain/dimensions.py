"""Dimension normalization and bounds checking.

Free-text wall dimensions are converted to whole millimetres before any
validation happens. Parsing never raises: anything that cannot be read as a
length comes back as None, the same as an empty field.

Example:
    >>> normalize_dimension("5.7m")
    5700
    >>> normalize_dimension("2500")
    2500
    >>> normalize_dimension("abc") is None
    True
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from .accessories import dimension_hints
from .value_objects import (
    HEIGHT_MAX,
    HEIGHT_MIN,
    QUOTATION_WIDTH_MAX,
    WIDTH_MAX,
    WIDTH_MIN,
    AccessoryRequirements,
    DimensionCheck,
    HeightStatus,
    WidthStatus,
)

_NUMBER = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$")
_UNIT = re.compile(r"^(?P<number>.*?)\s*(?P<unit>mm|m)?$", re.IGNORECASE)


def _round_half_up(value: Decimal) -> int | None:
    # Lengths too long for the decimal context cannot be a wall dimension
    try:
        return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))
    except InvalidOperation:
        return None


def normalize_dimension(raw: str | int | float | None) -> int | None:
    """Convert a typed dimension to whole millimetres.

    A trailing ``m`` (any case) means metres; ``mm`` or no suffix means
    millimetres. The result is rounded to the nearest millimetre, halves
    away from zero.

    Args:
        raw: Text as typed, or a number already in millimetres.

    Returns:
        The length in millimetres, or None when the input is empty or not a
        number.
    """
    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, (int, float)):
        if not math.isfinite(raw):
            return None
        return _round_half_up(Decimal(str(raw)))

    text = str(raw).strip()
    if not text:
        return None

    match = _UNIT.match(text)
    if match is None:
        return None
    number = match.group("number").strip()
    unit = (match.group("unit") or "mm").lower()

    if not _NUMBER.match(number):
        return None

    value = Decimal(number)
    if unit == "m":
        value *= 1000
    return _round_half_up(value)


def classify_width(width_mm: int | None) -> WidthStatus:
    """Place a normalized width into its validation band."""
    if width_mm is None:
        return WidthStatus.MISSING
    if width_mm < WIDTH_MIN:
        return WidthStatus.TOO_SMALL
    if width_mm <= WIDTH_MAX:
        return WidthStatus.VALID
    if width_mm <= QUOTATION_WIDTH_MAX:
        return WidthStatus.OVERSIZE
    return WidthStatus.EXCEEDS_MAXIMUM


def classify_height(height_mm: int | None) -> HeightStatus:
    """Place a normalized height into its validation band."""
    if height_mm is None:
        return HeightStatus.MISSING
    if height_mm < HEIGHT_MIN:
        return HeightStatus.TOO_SMALL
    if height_mm > HEIGHT_MAX:
        return HeightStatus.TOO_LARGE
    return HeightStatus.VALID


def is_valid_width(width_mm: int | None) -> bool:
    """True for 1000-6000mm inclusive."""
    return classify_width(width_mm) is WidthStatus.VALID


def is_valid_height(height_mm: int | None) -> bool:
    """True for 2200-4000mm inclusive."""
    return classify_height(height_mm) is HeightStatus.VALID


def is_oversize_width(width_mm: int | None) -> bool:
    """True when the width needs a custom quotation instead of the catalog."""
    return classify_width(width_mm) is WidthStatus.OVERSIZE


def is_quotable_width(width_mm: int | None) -> bool:
    """True for widths the custom quotation flow accepts (1000-10000mm)."""
    return classify_width(width_mm) in (WidthStatus.VALID, WidthStatus.OVERSIZE)


def width_message(status: WidthStatus) -> str | None:
    """Field-level message for a width status, None when nothing to say."""
    return {
        WidthStatus.MISSING: "Enter a wall width, e.g. 5000 or 5m",
        WidthStatus.TOO_SMALL: f"Wall width must be at least {WIDTH_MIN}mm",
        WidthStatus.OVERSIZE: (
            f"Walls wider than {WIDTH_MAX}mm need a custom quotation"
        ),
        WidthStatus.EXCEEDS_MAXIMUM: (
            f"Wall width cannot exceed {QUOTATION_WIDTH_MAX}mm"
        ),
    }.get(status)


def height_message(status: HeightStatus) -> str | None:
    """Field-level message for a height status, None when nothing to say."""
    return {
        HeightStatus.MISSING: "Enter a wall height, e.g. 2500 or 2.5m",
        HeightStatus.TOO_SMALL: f"Wall height must be at least {HEIGHT_MIN}mm",
        HeightStatus.TOO_LARGE: f"Wall height cannot exceed {HEIGHT_MAX}mm",
    }.get(status)


def check_dimensions(
    raw_width: str | int | float | None,
    raw_height: str | int | float | None,
    requirements: AccessoryRequirements | None = None,
) -> DimensionCheck:
    """Normalize and validate both dimensions in one pass.

    Accessory selections only add hints and warnings here; they never make
    the dimensions invalid.
    """
    width_mm = normalize_dimension(raw_width)
    height_mm = normalize_dimension(raw_height)
    width_status = classify_width(width_mm)
    height_status = classify_height(height_mm)

    warnings: list[str] = []
    for message in (width_message(width_status), height_message(height_status)):
        if message:
            warnings.append(message)

    hints, accessory_warnings = dimension_hints(
        width_mm if width_status is WidthStatus.VALID else None,
        requirements or AccessoryRequirements(),
    )
    warnings.extend(accessory_warnings)

    return DimensionCheck(
        width_mm=width_mm,
        height_mm=height_mm,
        width_status=width_status,
        height_status=height_status,
        hints=tuple(hints),
        warnings=tuple(warnings),
    )
