"""Unit (champion) data model for the team builder."""

from pydantic import BaseModel, Field

from .ability import Ability


class Trait(BaseModel):
    """A trait shown on a unit card."""
    name: str
    icon: str = ""

    model_config = {"frozen": True}


class UnitStats(BaseModel):
    """Base stats shown in the unit tooltip."""
    hp: list[int] = Field(default_factory=list, description="HP at [1-star, 2-star, 3-star]")
    damage: list[int] = Field(default_factory=list, description="AD at [1-star, 2-star, 3-star]")
    armor: int = 0
    magic_resist: int = 0
    attack_speed: float = 0.0
    crit_chance: float = 0.0
    crit_multiplier: float = 0.0
    mana: int = 0
    initial_mana: int = 0
    range: int = 0
    ability_power: int = 100

    model_config = {"frozen": True}


class Unit(BaseModel):
    """TFT unit as served to the builder page."""
    name: str = Field(..., description="Display name")
    cost: int = Field(..., description="Cost tier (1-7)")
    url: str = Field(..., description="Portrait image path or URL")
    traits: list[Trait] = Field(default_factory=list)
    ability: Ability = Field(default_factory=Ability)
    unlock: bool = Field(default=False, description="Whether this unit requires unlocking")
    unlock_description: str = ""
    role: str = ""
    stats: UnitStats = Field(default_factory=UnitStats)

    model_config = {"frozen": True}


class UnitsData(BaseModel):
    """The complete, sorted list of served units."""
    units: list[Unit] = Field(default_factory=list)

    model_config = {"frozen": True}
