"""Pydantic schema for wall plan configuration files.

A wall plan records what a customer typed and placed so it can be replayed
and validated outside the browser:

    {
      "schema_version": "1.0",
      "wall": {"width": "5.7m", "height": 2500},
      "accessories": {"tv": true},
      "modules": [{"width": 1000}, {"accessory": "tv"}, {"width": 800}],
      "settings": {"accessory_enforcement": "strict"}
    }
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from smartwall.domain.value_objects import (
    CATALOG_WIDTHS,
    AccessoryEnforcement,
    AccessorySlot,
)

# Version 1.0: Initial wall plan schema
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class WallConfig(BaseModel):
    """Wall dimensions as the customer typed them.

    Numbers are millimetres; strings may carry an ``m`` or ``mm`` suffix.
    Values are normalized and checked by the validator, not here, so an
    unreadable value is reported as a validation error with its path.
    """

    model_config = ConfigDict(extra="forbid")

    width: str | int | float | None = None
    height: str | int | float | None = None


class AccessoriesConfig(BaseModel):
    """Accessories selected at the dimension stage."""

    model_config = ConfigDict(extra="forbid")

    tv: bool = False
    fire: bool = False


class ModuleConfig(BaseModel):
    """One placement step: a catalog module or an accessory pair.

    Attributes:
        width: Catalog width in mm for a plain module.
        accessory: "tv" or "fire" to place the reserved 2 x 1000mm pair.
    """

    model_config = ConfigDict(extra="forbid")

    width: int | None = None
    accessory: AccessorySlot | None = None

    @field_validator("width")
    @classmethod
    def width_in_catalog(cls, value: int | None) -> int | None:
        if value is not None and value not in CATALOG_WIDTHS:
            raise ValueError(
                f"width must be one of {', '.join(str(w) for w in CATALOG_WIDTHS)}"
            )
        return value

    @model_validator(mode="after")
    def exactly_one_kind(self) -> "ModuleConfig":
        if (self.width is None) == (self.accessory is None):
            raise ValueError("specify either 'width' or 'accessory'")
        return self


class SettingsConfig(BaseModel):
    """Session behaviour."""

    model_config = ConfigDict(extra="forbid")

    debounce_ms: int = Field(default=250, ge=0, le=5000)
    accessory_enforcement: AccessoryEnforcement = AccessoryEnforcement.ADVISORY
    allow_custom_quotation: bool = False


class WallPlanConfiguration(BaseModel):
    """Root wall plan model."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    wall: WallConfig = Field(default_factory=WallConfig)
    accessories: AccessoriesConfig = Field(default_factory=AccessoriesConfig)
    modules: list[ModuleConfig] = Field(default_factory=list, max_length=50)
    settings: SettingsConfig = Field(default_factory=SettingsConfig)

    @field_validator("schema_version")
    @classmethod
    def supported_version(cls, value: str) -> str:
        if value not in SUPPORTED_VERSIONS:
            raise ValueError(
                f"unsupported schema_version '{value}'; "
                f"supported: {', '.join(sorted(SUPPORTED_VERSIONS))}"
            )
        return value
