from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from wildshape.models.character import (
    AbilityScores,
    BaseCharacter,
    HitPoints,
    Movement,
    Senses,
)
from wildshape.models.form import CreatureSize, ElementType, Form, Tier

ExplainSource = Literal["base", "form", "tier", "size", "calc"]


class Explain(BaseModel):
    """One line of the audit trail, e.g. ``ability.str +4 (Beast Shape II, Large)``."""

    model_config = ConfigDict(frozen=True)

    target: str
    label: str
    delta: Union[int, str]
    source: ExplainSource


class ComputeInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    base: BaseCharacter
    form: Form
    tier: Tier
    chosen_size: Optional[CreatureSize] = None
    element: Optional[ElementType] = None

    @model_validator(mode="after")
    def _resolve_defaults(self) -> ComputeInput:
        if self.chosen_size is None:
            object.__setattr__(self, "chosen_size", self.form.base_size)
        if self.tier.is_elemental and self.element is None:
            if self.form.element is None:
                raise ValueError(f"{self.tier.value} requires an element")
            object.__setattr__(self, "element", self.form.element)
        return self


class ComputedAttack(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    count: int = 1
    attack_bonus: int
    damage_dice: str
    damage_bonus: int = 0
    primary: bool = True
    traits: list[str] = Field(default_factory=list)
    explain: list[Explain] = Field(default_factory=list)

    @property
    def damage(self) -> str:
        if self.damage_bonus > 0:
            return f"{self.damage_dice}+{self.damage_bonus}"
        if self.damage_bonus < 0:
            return f"{self.damage_dice}{self.damage_bonus}"
        return self.damage_dice


class ArmorClassBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    base: int = 10
    armor: int = 0
    shield: int = 0
    natural: int = 0
    deflection: int = 0
    dodge: int = 0
    size: int = 0
    dex: int = 0
    misc: int = 0


class ArmorClass(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: int
    touch: int
    flat_footed: int
    breakdown: ArmorClassBreakdown
    explain: list[Explain] = Field(default_factory=list)


class SavingThrows(BaseModel):
    model_config = ConfigDict(frozen=True)

    fortitude: int
    reflex: int
    will: int
    explain: list[Explain] = Field(default_factory=list)


class SizeSkillModifiers(BaseModel):
    model_config = ConfigDict(frozen=True)

    stealth: int = 0
    fly: int = 0


class ComputedPlaysheet(BaseModel):
    model_config = ConfigDict(frozen=True)

    size: CreatureSize
    ability: AbilityScores
    hp: HitPoints
    ac: ArmorClass
    saves: SavingThrows
    movement: Movement
    senses: Senses
    skills: SizeSkillModifiers = Field(default_factory=SizeSkillModifiers)
    traits: list[str] = Field(default_factory=list)
    attacks: list[ComputedAttack] = Field(default_factory=list)
    explain: list[Explain] = Field(default_factory=list)
