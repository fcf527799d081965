"""Ability data model for the team builder."""

from pydantic import BaseModel, Field


class AbilityVariable(BaseModel):
    """A named ability parameter with one value per star level."""
    name: str = Field(..., description="Variable identifier, unique within an ability")
    type: str = Field(default="", description="Free-form kind tag (damage, heal, ...)")
    values: list[float] = Field(default_factory=list, description="Numeric values at [1-star, 2-star, 3-star, ...]")
    display_values: list[str] = Field(default_factory=list, description="Upstream text values, e.g. '50%'")
    scaling: str = Field(default="", description="Primary scaling tag")
    scalings: list[str] = Field(default_factory=list, description="All scaling tags in upstream order")
    css_class: str = Field(default="", description="Optional style hint")

    model_config = {"frozen": True}


class Ability(BaseModel):
    """Champion ability with its description template and variables."""
    name: str = ""
    description: str = Field(default="", description="Template with {Name} / @Name@ placeholders")
    description_raw: str = Field(default="", description="Fallback raw text")
    icon: str = Field(default="", description="Resolved spell icon path")
    variables: dict[str, AbilityVariable] = Field(default_factory=dict)

    model_config = {"frozen": True}
