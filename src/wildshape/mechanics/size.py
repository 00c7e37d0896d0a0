"""Size mechanics — pure functions for size modifiers and damage dice scaling."""
from __future__ import annotations

import builtins
import logging
from dataclasses import dataclass

from wildshape.mechanics.dice import normalize
from wildshape.models.form import CreatureSize

logger = logging.getLogger(__name__)

SIZE_ORDER: list[CreatureSize] = [
    CreatureSize.FINE,
    CreatureSize.DIMINUTIVE,
    CreatureSize.TINY,
    CreatureSize.SMALL,
    CreatureSize.MEDIUM,
    CreatureSize.LARGE,
    CreatureSize.HUGE,
    CreatureSize.GARGANTUAN,
    CreatureSize.COLOSSAL,
]

# Size modifier to attack rolls and AC. Smaller creatures are harder to hit.
SIZE_TO_HIT_AC: dict[CreatureSize, int] = {
    CreatureSize.FINE: 8,
    CreatureSize.DIMINUTIVE: 4,
    CreatureSize.TINY: 2,
    CreatureSize.SMALL: 1,
    CreatureSize.MEDIUM: 0,
    CreatureSize.LARGE: -1,
    CreatureSize.HUGE: -2,
    CreatureSize.GARGANTUAN: -4,
    CreatureSize.COLOSSAL: -8,
}

SIZE_TO_STEALTH: dict[CreatureSize, int] = {
    CreatureSize.FINE: 16,
    CreatureSize.DIMINUTIVE: 12,
    CreatureSize.TINY: 8,
    CreatureSize.SMALL: 4,
    CreatureSize.MEDIUM: 0,
    CreatureSize.LARGE: -4,
    CreatureSize.HUGE: -8,
    CreatureSize.GARGANTUAN: -12,
    CreatureSize.COLOSSAL: -16,
}

SIZE_TO_FLY: dict[CreatureSize, int] = {
    CreatureSize.FINE: 8,
    CreatureSize.DIMINUTIVE: 6,
    CreatureSize.TINY: 4,
    CreatureSize.SMALL: 2,
    CreatureSize.MEDIUM: 0,
    CreatureSize.LARGE: -2,
    CreatureSize.HUGE: -4,
    CreatureSize.GARGANTUAN: -6,
    CreatureSize.COLOSSAL: -8,
}

# Natural attack damage progression, smallest to largest.
DAMAGE_STEPS: tuple[str, ...] = (
    "1",
    "1d2",
    "1d3",
    "1d4",
    "1d6",
    "1d8",
    "2d6",
    "3d6",
    "4d6",
    "6d6",
    "8d6",
    "12d6",
    "16d6",
)


def size_difference(from_size: CreatureSize, to_size: CreatureSize) -> int:
    """Number of size steps from one category to another (positive = growing)."""
    return SIZE_ORDER.index(CreatureSize(to_size)) - SIZE_ORDER.index(CreatureSize(from_size))


def step_dice(dice: str, steps: int) -> str:
    """Move a dice expression along the damage progression, clamped at both ends.

    Dice that are not on the progression (e.g. '1d10') are returned unchanged.
    """
    canonical = normalize(dice)
    if canonical not in DAMAGE_STEPS:
        if steps:
            logger.debug("Damage dice %r not on the size progression, leaving as is", dice)
        return canonical
    idx = DAMAGE_STEPS.index(canonical) + steps
    return DAMAGE_STEPS[max(0, min(len(DAMAGE_STEPS) - 1, idx))]


def scale_damage_for_size(dice: str, from_size: CreatureSize, to_size: CreatureSize) -> str:
    """Scale natural attack dice from one size to another, one step per size category."""
    return step_dice(dice, size_difference(from_size, to_size))


def attack_size_modifier(size: CreatureSize) -> int:
    return SIZE_TO_HIT_AC.get(size, 0)


def stealth_modifier(size: CreatureSize) -> int:
    return SIZE_TO_STEALTH.get(size, 0)


def fly_modifier(size: CreatureSize) -> int:
    return SIZE_TO_FLY.get(size, 0)


@dataclass(frozen=True)
class SizeModifiers:
    """Size bonuses a polymorph tier grants at one size. Zero means no bonus."""

    str: int = 0
    dex: int = 0
    con: int = 0
    natural_armor: int = 0

    @property
    def is_empty(self) -> bool:
        return not (self.str or self.dex or self.con or self.natural_armor)

    def ability_deltas(self) -> dict[builtins.str, int]:
        return {"str": self.str, "dex": self.dex, "con": self.con}


NO_SIZE_MODIFIERS = SizeModifiers()
