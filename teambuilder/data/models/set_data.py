"""Raw shapes of the generated set JSON file.

The upstream data is loose: numbers may arrive as JSON numbers or as strings
with suffixes ("50%"), scalings as a single string or a list, and ability
variables either as a name -> details mapping or as a legacy list of
``{name, value}`` pairs. The types here absorb those variations at decode
time so the adapters only ever see one normalized shape.
"""

import json
import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field, GetCoreSchemaHandler
from pydantic_core import core_schema


def format_float(value: float) -> str:
    """Shortest round-trip decimal text, without exponent or trailing zeros."""
    if not math.isfinite(value):
        return repr(value)
    return format(Decimal(repr(float(value))).normalize(), "f")


def parse_float_string(text: str) -> Optional[float]:
    """Parse "25", " 25% " or "0.5" into a float; None when not numeric."""
    t = text.strip()
    t = t.removesuffix("%").strip()
    try:
        return float(t)
    except ValueError:
        return None


def _is_number(raw: Any) -> bool:
    return isinstance(raw, (int, float)) and not isinstance(raw, bool)


def _describe(raw: Any) -> str:
    return json.dumps(raw, default=str)


class _JsonShape:
    """Lets a plain class act as a pydantic field type via ``parse``."""

    @classmethod
    def parse(cls, raw: Any):
        raise NotImplementedError

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler):
        return core_schema.no_info_plain_validator_function(cls.parse)


@dataclass(frozen=True)
class ValueList(_JsonShape):
    """Numbers given as JSON numbers or strings, keeping the raw text.

    ``numbers`` and ``display`` are filled independently: a string that does
    not parse as a number only contributes to ``display``.
    """
    nums: tuple[float, ...] = ()
    texts: tuple[str, ...] = ()

    @classmethod
    def parse(cls, raw: Any) -> "ValueList":
        if isinstance(raw, cls):
            return raw
        if raw is None:
            return cls()

        single = cls._parse_single(raw)
        if single is not None:
            return single
        if isinstance(raw, list):
            parsed = cls._parse_array(raw)
            if parsed is not None:
                return parsed

        raise ValueError(f"unsupported number list format: {_describe(raw)}")

    @classmethod
    def _parse_single(cls, raw: Any) -> Optional["ValueList"]:
        if _is_number(raw):
            try:
                num = float(raw)
            except OverflowError:
                raise ValueError(f"unsupported number list format: {_describe(raw)}")
            return cls(nums=(num,), texts=(format_float(num),))
        if isinstance(raw, str):
            text = raw.strip()
            parsed = parse_float_string(text)
            return cls(nums=() if parsed is None else (parsed,), texts=(text,))
        return None

    @classmethod
    def _parse_array(cls, items: list) -> Optional["ValueList"]:
        nums: list[float] = []
        texts: list[str] = []
        for item in items:
            single = cls._parse_single(item)
            if single is None:
                continue
            nums.extend(single.nums)
            texts.extend(single.texts)

        if not texts:
            return None
        return cls(nums=tuple(nums), texts=tuple(texts))

    def numbers(self) -> list[float]:
        return list(self.nums)

    def display(self) -> list[str]:
        return list(self.texts)


@dataclass(frozen=True)
class ScalingList(_JsonShape):
    """Scaling tags given as a single string or a list of strings."""
    tags: tuple[str, ...] = ()

    @classmethod
    def parse(cls, raw: Any) -> "ScalingList":
        if isinstance(raw, cls):
            return raw
        if raw is None:
            return cls()
        if isinstance(raw, str):
            trimmed = raw.strip()
            return cls(tags=(trimmed,) if trimmed else ())
        if isinstance(raw, list) and all(item is None or isinstance(item, str) for item in raw):
            # null entries count as blank
            return cls(tags=tuple(item.strip() for item in raw if item and item.strip()))

        raise ValueError(f"unsupported scaling format: {_describe(raw)}")

    def primary(self) -> str:
        return self.tags[0] if self.tags else ""

    def all(self) -> list[str]:
        return list(self.tags)


class SetVariable(BaseModel):
    """Legacy list-form ability variable."""
    name: str = ""
    value: ValueList = Field(default_factory=ValueList)


class DetailedAbilityVariable(BaseModel):
    """Mapping-form ability variable."""
    values: ValueList = Field(default_factory=ValueList)
    type: str = ""
    scaling: ScalingList = Field(default_factory=ScalingList)
    css_class: str = Field(default="", alias="cssClass")

    model_config = {"populate_by_name": True}


@dataclass(frozen=True)
class AbilityVariables(_JsonShape):
    """Ability variables in either upstream shape.

    A JSON object decodes to ``mapping``, a JSON array to ``entries``; any
    other value (including null) leaves both empty.
    """
    mapping: dict[str, DetailedAbilityVariable] = field(default_factory=dict)
    entries: tuple[SetVariable, ...] = ()

    @classmethod
    def parse(cls, raw: Any) -> "AbilityVariables":
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, dict):
            return cls(mapping={
                str(name): DetailedAbilityVariable.model_validate(details)
                for name, details in raw.items()
            })
        if isinstance(raw, list):
            return cls(entries=tuple(SetVariable.model_validate(item) for item in raw))
        return cls()


class SetAbility(BaseModel):
    name: str = ""
    description: str = ""
    description_raw: str = Field(default="", alias="descriptionRaw")
    variables: AbilityVariables = Field(default_factory=AbilityVariables)
    spell_key: str = Field(default="", alias="spellKey")

    model_config = {"populate_by_name": True}


class SetIcons(BaseModel):
    square: str = ""
    tile: str = ""
    portrait: str = ""


class SetStats(BaseModel):
    armor: float = 0.0
    attack_speed: float = Field(default=0.0, alias="attackSpeed")
    crit_chance: float = Field(default=0.0, alias="critChance")
    crit_multiplier: float = Field(default=0.0, alias="critMultiplier")
    damage: ValueList = Field(default_factory=ValueList)
    hp: ValueList = Field(default_factory=ValueList)
    initial_mana: float = Field(default=0.0, alias="initialMana")
    magic_resist: float = Field(default=0.0, alias="magicResist")
    mana: float = 0.0
    range: float = 0.0

    model_config = {"populate_by_name": True}


class SetChampion(BaseModel):
    api_name: str = Field(default="", alias="apiName")
    name: str = ""
    cost: int = 0
    traits: list[str] = Field(default_factory=list)
    ability: SetAbility = Field(default_factory=SetAbility)
    icons: SetIcons = Field(default_factory=SetIcons)
    unlock: bool = False
    unlock_description: str = Field(default="", alias="unlockDescription")
    role: str = ""
    stats: SetStats = Field(default_factory=SetStats)

    model_config = {"populate_by_name": True}


class SetFile(BaseModel):
    """Top-level document of the generated set JSON."""
    champions: list[SetChampion] = Field(default_factory=list)
