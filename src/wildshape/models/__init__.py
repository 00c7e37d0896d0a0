from __future__ import annotations

from wildshape.models.character import (
    AbilityScores,
    ArmorClassComponents,
    BaseCharacter,
    FlyManeuverability,
    HitPoints,
    Movement,
    Saves,
    Senses,
)
from wildshape.models.form import (
    AttackType,
    CreatureSize,
    ElementType,
    Form,
    FormKind,
    FormRequirements,
    NaturalAttack,
    Tier,
)
from wildshape.models.grants import Grants
from wildshape.models.playsheet import (
    ArmorClass,
    ArmorClassBreakdown,
    ComputeInput,
    ComputedAttack,
    ComputedPlaysheet,
    Explain,
    SavingThrows,
    SizeSkillModifiers,
)

__all__ = [
    "AbilityScores",
    "ArmorClass",
    "ArmorClassBreakdown",
    "ArmorClassComponents",
    "AttackType",
    "BaseCharacter",
    "ComputeInput",
    "ComputedAttack",
    "ComputedPlaysheet",
    "CreatureSize",
    "ElementType",
    "Explain",
    "FlyManeuverability",
    "Form",
    "FormKind",
    "FormRequirements",
    "Grants",
    "HitPoints",
    "Movement",
    "NaturalAttack",
    "SavingThrows",
    "Saves",
    "Senses",
    "SizeSkillModifiers",
    "Tier",
]
