from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from wildshape.models.character import Movement, Senses


class Grants(BaseModel):
    """What a tier hands out regardless of the creature chosen."""

    model_config = ConfigDict(frozen=True)

    movement: Movement = Field(default_factory=Movement)
    senses: Senses = Field(default_factory=Senses)
    traits: list[str] = Field(default_factory=list)


NO_GRANTS = Grants()
