"""Wall plan configuration: schema, loading, replay and validation.

Example:
    >>> from pathlib import Path
    >>> config = load_config(Path("living-room.json"))
    >>> result = validate_config(config)
    >>> result.exit_code
    0
"""

from smartwall.application.config.adapter import (
    PlanStep,
    apply_config,
    config_to_requirements,
    config_to_settings,
)
from smartwall.application.config.loader import (
    ConfigError,
    format_json_path,
    load_config,
    load_config_from_dict,
)
from smartwall.application.config.schema import (
    SUPPORTED_VERSIONS,
    AccessoriesConfig,
    ModuleConfig,
    SettingsConfig,
    WallConfig,
    WallPlanConfiguration,
)
from smartwall.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_wall_dimensions,
    validate_config,
)

__all__ = [
    # Schema
    "SUPPORTED_VERSIONS",
    "AccessoriesConfig",
    "ModuleConfig",
    "SettingsConfig",
    "WallConfig",
    "WallPlanConfiguration",
    # Loading
    "ConfigError",
    "format_json_path",
    "load_config",
    "load_config_from_dict",
    # Replay
    "PlanStep",
    "apply_config",
    "config_to_requirements",
    "config_to_settings",
    # Validation
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_wall_dimensions",
    "validate_config",
]
