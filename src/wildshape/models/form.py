from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from wildshape.models.character import Movement, Senses


class CreatureSize(str, Enum):
    FINE = "Fine"
    DIMINUTIVE = "Diminutive"
    TINY = "Tiny"
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    HUGE = "Huge"
    GARGANTUAN = "Gargantuan"
    COLOSSAL = "Colossal"


class Tier(str, Enum):
    """Polymorph spell a wild shape is modeled on."""

    BEAST_SHAPE_I = "Beast Shape I"
    BEAST_SHAPE_II = "Beast Shape II"
    BEAST_SHAPE_III = "Beast Shape III"
    BEAST_SHAPE_IV = "Beast Shape IV"
    ELEMENTAL_BODY_I = "Elemental Body I"
    ELEMENTAL_BODY_II = "Elemental Body II"
    ELEMENTAL_BODY_III = "Elemental Body III"
    ELEMENTAL_BODY_IV = "Elemental Body IV"
    PLANT_SHAPE_I = "Plant Shape I"
    PLANT_SHAPE_II = "Plant Shape II"
    PLANT_SHAPE_III = "Plant Shape III"

    @property
    def is_beast(self) -> bool:
        return self.value.startswith("Beast Shape")

    @property
    def is_elemental(self) -> bool:
        return self.value.startswith("Elemental Body")

    @property
    def is_plant(self) -> bool:
        return self.value.startswith("Plant Shape")


class FormKind(str, Enum):
    ANIMAL = "Animal"
    MAGICAL_BEAST = "Magical Beast"
    ELEMENTAL = "Elemental"
    PLANT = "Plant"


class ElementType(str, Enum):
    AIR = "Air"
    EARTH = "Earth"
    FIRE = "Fire"
    WATER = "Water"


class AttackType(str, Enum):
    BITE = "bite"
    CLAW = "claw"
    GORE = "gore"
    SLAM = "slam"
    TALON = "talon"
    STING = "sting"
    TAIL = "tail"
    WING = "wing"
    OTHER = "other"


class NaturalAttack(BaseModel):
    """One natural weapon, with damage dice at the form's native size."""

    model_config = ConfigDict(frozen=True)

    type: AttackType
    dice: str
    count: int = Field(default=1, ge=1)
    primary: bool = True
    traits: list[str] = Field(default_factory=list)


class FormRequirements(BaseModel):
    model_config = ConfigDict(frozen=True)

    spell_equivalent: Optional[Tier] = None
    min_edl: Optional[int] = None


class Form(BaseModel):
    """A creature shape from the template library or a custom form."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    kind: FormKind
    base_size: CreatureSize
    natural_attacks: list[NaturalAttack] = Field(default_factory=list)
    movement: Movement = Field(default_factory=Movement)
    senses: Senses = Field(default_factory=Senses)
    traits: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    archetype: Optional[str] = None
    natural_armor: int = 0
    requirements: FormRequirements = Field(default_factory=FormRequirements)
    element: Optional[ElementType] = None
