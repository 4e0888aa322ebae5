"""Pydantic models for cut list configuration files.

A configuration file describes the stock, the saw, and every cut:

    {
      "schema_version": "1.0",
      "board_length_feet": 8,
      "margin": 0.25,
      "kerf": 0.125,
      "parts": [{"name": "shelf", "cuts": [30, 30]}],
      "miscellaneous": [10]
    }

Unknown fields are rejected so that typos are reported instead of ignored.
"""

from typing import Annotated

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from lumber_cuts.domain.value_objects import PackingDefaults

# Supported schema versions for configuration files
# Version 1.0: Board length, margin, kerf, named parts and miscellaneous cuts
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

_DEFAULTS = PackingDefaults()

CutLength = Annotated[float, Field(gt=0, allow_inf_nan=False)]


class PartConfig(BaseModel):
    """Cuts belonging to one named part.

    Attributes:
        name: Part name, unique within the configuration.
        cuts: Cut lengths in inches, without kerf.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, description="Part name")
    cuts: list[CutLength] = Field(
        ..., min_length=1, description="Cut lengths in inches"
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Strip surrounding whitespace and reject blank names."""
        v = v.strip()
        if not v:
            raise ValueError("Part name must not be blank")
        if ":" in v:
            raise ValueError("Part name must not contain ':'")
        return v


class CutListConfiguration(BaseModel):
    """Root configuration model for a cut list.

    Attributes:
        schema_version: Configuration schema version.
        board_length_feet: Stock length in whole feet.
        margin: Allowed length measurement error in inches.
        kerf: Saw blade width in inches.
        parts: Named parts and their cuts.
        miscellaneous: Cuts not belonging to any part.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", description="Schema version")
    board_length_feet: int = Field(
        ..., gt=0, description="Stock board length in feet"
    )
    margin: float = Field(
        default=_DEFAULTS.margin,
        ge=0,
        allow_inf_nan=False,
        description="Length measurement margin in inches",
    )
    kerf: float = Field(
        default=_DEFAULTS.kerf,
        gt=0,
        allow_inf_nan=False,
        description="Saw kerf width in inches",
    )
    parts: list[PartConfig] = Field(default_factory=list)
    miscellaneous: list[CutLength] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            raise ValueError(
                f"Unsupported schema version '{v}'. "
                f"Supported: {', '.join(sorted(SUPPORTED_VERSIONS))}"
            )
        return v

    @model_validator(mode="after")
    def validate_margin_and_names(self) -> "CutListConfiguration":
        """Check cross-field rules: margin vs kerf and unique part names."""
        if self.margin < self.kerf:
            raise ValueError("Lumber error margin cannot be less than blade width.")
        seen: set[str] = set()
        for part in self.parts:
            if part.name in seen:
                raise ValueError(f"Part names should not repeat: '{part.name}'")
            seen.add(part.name)
        return self
