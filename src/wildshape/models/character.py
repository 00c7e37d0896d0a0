from __future__ import annotations

import builtins
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class FlyManeuverability(str, Enum):
    CLUMSY = "Clumsy"
    POOR = "Poor"
    AVERAGE = "Average"
    GOOD = "Good"
    PERFECT = "Perfect"


class AbilityScores(BaseModel):
    # Field names shadow the builtins, so annotations go through the module.
    model_config = ConfigDict(frozen=True)

    str: builtins.int = 10
    dex: builtins.int = 10
    con: builtins.int = 10
    int: builtins.int = 10
    wis: builtins.int = 10
    cha: builtins.int = 10

    def get(self, name: builtins.str) -> builtins.int:
        return getattr(self, name)


class HitPoints(BaseModel):
    model_config = ConfigDict(frozen=True)

    current: int = 0
    max: int = 0
    temp: int = 0


class ArmorClassComponents(BaseModel):
    """The druid's own AC bonuses, excluding the base 10, Dex and size."""

    model_config = ConfigDict(frozen=True)

    armor: int = 0
    shield: int = 0
    natural: int = 0
    deflection: int = 0
    dodge: int = 0
    misc: int = 0


class Saves(BaseModel):
    model_config = ConfigDict(frozen=True)

    fortitude: int = 0
    reflex: int = 0
    will: int = 0


class Movement(BaseModel):
    """Speeds in feet; None means the creature lacks that mode."""

    model_config = ConfigDict(frozen=True)

    land: Optional[int] = None
    fly: Optional[int] = None
    fly_maneuver: Optional[FlyManeuverability] = None
    swim: Optional[int] = None
    climb: Optional[int] = None
    burrow: Optional[int] = None


class Senses(BaseModel):
    model_config = ConfigDict(frozen=True)

    darkvision: Optional[int] = None
    low_light: bool = False
    scent: bool = False
    tremorsense: Optional[int] = None
    blindsense: Optional[int] = None


class BaseCharacter(BaseModel):
    """The druid's untransformed statistics. Read-only to the engine."""

    model_config = ConfigDict(frozen=True)

    level: int = Field(default=1, ge=1)
    effective_druid_level: int = Field(default=0, ge=0)
    ability: AbilityScores = Field(default_factory=AbilityScores)
    hp: HitPoints = Field(default_factory=HitPoints)
    bab: int = 0
    ac: ArmorClassComponents = Field(default_factory=ArmorClassComponents)
    saves: Saves = Field(default_factory=Saves)
    movement: Movement = Field(default_factory=lambda: Movement(land=30))
    senses: Senses = Field(default_factory=Senses)
    feats: list[str] = Field(default_factory=list)
    traits: list[str] = Field(default_factory=list)
    attack_ability: Literal["str", "dex", "wis"] = "str"
    damage_ability: Literal["str", "dex", "wis"] = "str"
    damage_multiplier: float = 1.0
    misc_attack_bonus: int = 0
    misc_damage_bonus: int = 0
