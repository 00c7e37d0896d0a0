"""Elemental Body size bonuses, movement, senses and special abilities.

Each element leans on different abilities: air and fire on Dexterity, earth on
Strength, water on Constitution. Bonuses are indexed by tier, then element, then
size; only the largest size a tier unlocks carries a bonus.
"""
from __future__ import annotations

from wildshape.mechanics.size import NO_SIZE_MODIFIERS, SizeModifiers
from wildshape.models.character import FlyManeuverability, Movement, Senses
from wildshape.models.form import CreatureSize, ElementType, Tier
from wildshape.models.grants import NO_GRANTS, Grants

ELEMENTAL_SIZE_BONUS: dict[Tier, dict[ElementType, dict[CreatureSize, SizeModifiers]]] = {
    Tier.ELEMENTAL_BODY_I: {
        ElementType.AIR: {CreatureSize.SMALL: SizeModifiers(dex=2, natural_armor=2)},
        ElementType.EARTH: {CreatureSize.SMALL: SizeModifiers(str=2, natural_armor=4)},
        ElementType.FIRE: {CreatureSize.SMALL: SizeModifiers(dex=2, natural_armor=2)},
        ElementType.WATER: {CreatureSize.SMALL: SizeModifiers(con=2, natural_armor=4)},
    },
    Tier.ELEMENTAL_BODY_II: {
        ElementType.AIR: {CreatureSize.MEDIUM: SizeModifiers(dex=4, natural_armor=3)},
        ElementType.EARTH: {CreatureSize.MEDIUM: SizeModifiers(str=4, natural_armor=5)},
        ElementType.FIRE: {CreatureSize.MEDIUM: SizeModifiers(dex=4, natural_armor=3)},
        ElementType.WATER: {CreatureSize.MEDIUM: SizeModifiers(con=4, natural_armor=5)},
    },
    Tier.ELEMENTAL_BODY_III: {
        ElementType.AIR: {CreatureSize.LARGE: SizeModifiers(str=2, dex=4, natural_armor=4)},
        ElementType.EARTH: {CreatureSize.LARGE: SizeModifiers(str=6, dex=-2, con=2, natural_armor=6)},
        ElementType.FIRE: {CreatureSize.LARGE: SizeModifiers(dex=4, con=2, natural_armor=4)},
        ElementType.WATER: {CreatureSize.LARGE: SizeModifiers(str=2, dex=-2, con=6, natural_armor=6)},
    },
    Tier.ELEMENTAL_BODY_IV: {
        ElementType.AIR: {CreatureSize.HUGE: SizeModifiers(str=4, dex=6, natural_armor=4)},
        ElementType.EARTH: {CreatureSize.HUGE: SizeModifiers(str=8, dex=-2, con=4, natural_armor=6)},
        ElementType.FIRE: {CreatureSize.HUGE: SizeModifiers(dex=6, con=4, natural_armor=4)},
        ElementType.WATER: {CreatureSize.HUGE: SizeModifiers(str=4, dex=-2, con=8, natural_armor=6)},
    },
}

# Per-element grants at Elemental Body I and II.
ELEMENTAL_GRANTS: dict[ElementType, Grants] = {
    ElementType.AIR: Grants(
        movement=Movement(fly=60, fly_maneuver=FlyManeuverability.PERFECT),
        senses=Senses(darkvision=60),
        traits=["whirlwind", "air_subtype"],
    ),
    ElementType.EARTH: Grants(
        movement=Movement(burrow=20),
        senses=Senses(darkvision=60),
        traits=["earth_glide", "earth_subtype"],
    ),
    ElementType.FIRE: Grants(
        movement=Movement(land=50),
        senses=Senses(darkvision=60),
        traits=["burn", "fire_immunity", "cold_vulnerability", "fire_subtype"],
    ),
    ElementType.WATER: Grants(
        movement=Movement(swim=60),
        senses=Senses(darkvision=60),
        traits=["drench", "water_mastery", "water_subtype"],
    ),
}

# Elemental Body IV speeds up air and water elementals.
_ELEMENTAL_BODY_IV_MOVEMENT: dict[ElementType, dict[str, int]] = {
    ElementType.AIR: {"fly": 120},
    ElementType.WATER: {"swim": 120},
}


def get_elemental_size_modifiers(
    tier: Tier,
    element: ElementType,
    size: CreatureSize,
) -> SizeModifiers:
    return ELEMENTAL_SIZE_BONUS.get(tier, {}).get(element, {}).get(size, NO_SIZE_MODIFIERS)


def get_elemental_movement_for_tier(tier: Tier, element: ElementType) -> Movement:
    """Speeds an elemental of this element moves at under the given tier."""
    base = ELEMENTAL_GRANTS[element].movement
    if tier == Tier.ELEMENTAL_BODY_IV and element in _ELEMENTAL_BODY_IV_MOVEMENT:
        return base.model_copy(update=_ELEMENTAL_BODY_IV_MOVEMENT[element])
    return base


def get_elemental_grants(tier: Tier, element: ElementType | None) -> Grants:
    if element is None or tier not in ELEMENTAL_SIZE_BONUS:
        return NO_GRANTS
    grants = ELEMENTAL_GRANTS[element]
    return grants.model_copy(update={"movement": get_elemental_movement_for_tier(tier, element)})
