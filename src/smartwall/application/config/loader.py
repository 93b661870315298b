"""Wall plan file loading.

Turns file system, JSON and schema failures into a single ConfigError with
an ``error_type`` the CLI can report on.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from smartwall.application.config.schema import WallPlanConfiguration


class ConfigError(Exception):
    """Raised when a wall plan cannot be loaded.

    Attributes:
        message: Primary error message.
        error_type: One of file_not_found, file_read_error, json_parse,
            validation.
        path: File the plan was read from, if any.
        details: Per-problem dictionaries (line/column for JSON errors,
            path/message/value for schema errors).
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def format_json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic location as a JSON path.

    Examples:
        >>> format_json_path(("modules", 2, "width"))
        'modules[2].width'
        >>> format_json_path(("wall", "height"))
        'wall.height'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path += f".{segment}" if path else str(segment)
    return path


def _validation_details(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def load_config_from_dict(
    data: dict[str, Any], path: Path | None = None
) -> WallPlanConfiguration:
    """Validate an already parsed wall plan.

    Raises:
        ConfigError: With error_type "validation" if the data does not match
            the schema.
    """
    try:
        return WallPlanConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _validation_details(e)
        lines = ["Wall plan validation failed:"]
        lines.extend(f"  - {d['path']}: {d['message']}" for d in details)
        raise ConfigError(
            message="\n".join(lines),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_config(path: Path) -> WallPlanConfiguration:
    """Load and validate a wall plan JSON file.

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON, or does
            not match the schema.
    """
    if not path.exists():
        raise ConfigError(
            message=f"Wall plan not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            message=f"Error reading wall plan {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    if not isinstance(data, dict):
        raise ConfigError(
            message=f"Wall plan {path} must contain a JSON object",
            error_type="validation",
            path=path,
            details=[{"path": "", "message": "expected an object", "value": data}],
        )

    return load_config_from_dict(data, path=path)
