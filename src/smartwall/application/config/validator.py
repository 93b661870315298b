"""Wall plan validation.

Schema problems are caught when the plan is loaded. This module checks what
the schema cannot: whether the dimensions are in range, whether each module
actually fits when the plan is replayed, and whether the finished wall is
complete.
"""

from dataclasses import dataclass, field
from typing import Any

from smartwall.application.config.adapter import apply_config
from smartwall.application.config.schema import WallPlanConfiguration
from smartwall.domain import (
    HeightStatus,
    WidthStatus,
    check_dimensions,
    dimension_hints,
)
from smartwall.domain.dimensions import height_message, width_message


@dataclass
class ValidationError:
    """A problem that makes the plan unusable.

    Attributes:
        path: JSON path to the offending field, e.g. "modules[3]".
        message: Human-readable description.
        value: The offending value, when there is one.
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A problem the customer should see but that does not block the plan."""

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Errors and warnings collected from a plan."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def exit_code(self) -> int:
        """CLI exit code: 1 with errors, 2 with only warnings, else 0."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_wall_dimensions(config: WallPlanConfiguration) -> ValidationResult:
    """Range checks for ``wall.width`` and ``wall.height``."""
    result = ValidationResult()
    check = check_dimensions(config.wall.width, config.wall.height)

    if check.width_status is WidthStatus.OVERSIZE:
        if not config.settings.allow_custom_quotation:
            result.add_warning(
                "wall.width",
                width_message(check.width_status) or "",
                suggestion=(
                    "Set settings.allow_custom_quotation to true to plan "
                    "modules for this wall"
                ),
            )
    elif check.width_status is not WidthStatus.VALID:
        result.add_error(
            "wall.width", width_message(check.width_status) or "", config.wall.width
        )

    if check.height_status is not HeightStatus.VALID:
        result.add_error(
            "wall.height",
            height_message(check.height_status) or "",
            config.wall.height,
        )
    return result


def validate_config(config: WallPlanConfiguration) -> ValidationResult:
    """Validate a loaded wall plan by replaying it.

    Module placement is only checked when the wall dimensions are usable;
    otherwise every placement would be refused and the dimension problem is
    the only thing worth reporting.
    """
    result = check_wall_dimensions(config)
    if not result.is_valid:
        return result

    session, steps = apply_config(config)
    if not session.is_active:
        return result

    for step in steps:
        if not step.accepted:
            result.add_error(f"modules[{step.index}]", f"{step.label}: {step.reason}")

    completion = session.completion()
    for message in completion.errors:
        result.add_error("modules", message)
    for message in completion.warnings:
        result.add_warning("modules", message)

    _, accessory_warnings = dimension_hints(
        session.envelope.width_mm, session.requirements
    )
    for message in accessory_warnings:
        result.add_warning("accessories", message)
    return result
