# Data Models
from .ability import Ability, AbilityVariable
from .unit import Trait, Unit, UnitStats, UnitsData
from .board import BoardRow, BoardView
from .set_data import (
    AbilityVariables,
    DetailedAbilityVariable,
    ScalingList,
    SetAbility,
    SetChampion,
    SetFile,
    SetIcons,
    SetStats,
    SetVariable,
    ValueList,
)

__all__ = [
    "Ability",
    "AbilityVariable",
    "Trait",
    "Unit",
    "UnitStats",
    "UnitsData",
    "BoardRow",
    "BoardView",
    # Raw set file shapes
    "AbilityVariables",
    "DetailedAbilityVariable",
    "ScalingList",
    "SetAbility",
    "SetChampion",
    "SetFile",
    "SetIcons",
    "SetStats",
    "SetVariable",
    "ValueList",
]
