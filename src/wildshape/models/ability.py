from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class AbilityCategory(str, Enum):
    MOVEMENT = "Movement"
    SENSES = "Senses"
    COMBAT = "Combat"
    ELEMENTAL = "Elemental"
    PLANT = "Plant"
    DEFENSIVE = "Defensive"


class SpecialAbility(BaseModel):
    """Glossary entry for a special ability a form can have."""

    model_config = ConfigDict(frozen=True)

    name: str
    category: AbilityCategory
    description: str
