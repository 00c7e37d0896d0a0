"""Wild shape tier gating and size-based ability/natural armor bonuses.

Effective druid level (EDL) unlocks polymorph tiers; each tier allows a range of
sizes and grants size bonuses that depend on the size chosen. Beast Shape bonuses
live here; Elemental Body and Plant Shape tables live in their own modules and
are reached through :func:`get_size_modifiers`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from wildshape.mechanics.elemental import get_elemental_size_modifiers
from wildshape.mechanics.plant import get_plant_size_modifiers
from wildshape.mechanics.size import NO_SIZE_MODIFIERS, SizeModifiers
from wildshape.models.form import CreatureSize, ElementType, FormKind, Tier

logger = logging.getLogger(__name__)

_DIMINUTIVE_TO_HUGE = (
    CreatureSize.DIMINUTIVE,
    CreatureSize.TINY,
    CreatureSize.SMALL,
    CreatureSize.MEDIUM,
    CreatureSize.LARGE,
    CreatureSize.HUGE,
)


@dataclass(frozen=True)
class TierAvailability:
    animal: Tier
    sizes: tuple[CreatureSize, ...]
    elemental: Optional[Tier] = None
    plant: Optional[Tier] = None


# Druid wild shape progression. Levels between keys use the nearest lower key.
EDL_TO_TIERS: dict[int, TierAvailability] = {
    4: TierAvailability(
        animal=Tier.BEAST_SHAPE_I,
        sizes=(CreatureSize.SMALL, CreatureSize.MEDIUM),
    ),
    6: TierAvailability(
        animal=Tier.BEAST_SHAPE_II,
        elemental=Tier.ELEMENTAL_BODY_I,
        sizes=(CreatureSize.TINY, CreatureSize.SMALL, CreatureSize.MEDIUM, CreatureSize.LARGE),
    ),
    8: TierAvailability(
        animal=Tier.BEAST_SHAPE_III,
        elemental=Tier.ELEMENTAL_BODY_II,
        plant=Tier.PLANT_SHAPE_I,
        sizes=_DIMINUTIVE_TO_HUGE,
    ),
    10: TierAvailability(
        animal=Tier.BEAST_SHAPE_III,
        elemental=Tier.ELEMENTAL_BODY_III,
        plant=Tier.PLANT_SHAPE_II,
        sizes=_DIMINUTIVE_TO_HUGE,
    ),
    # 12 and up keeps the same tiers
    12: TierAvailability(
        animal=Tier.BEAST_SHAPE_III,
        elemental=Tier.ELEMENTAL_BODY_IV,
        plant=Tier.PLANT_SHAPE_III,
        sizes=_DIMINUTIVE_TO_HUGE,
    ),
}

# Sizes each tier can assume.
TIER_SIZES: dict[Tier, tuple[CreatureSize, ...]] = {
    Tier.BEAST_SHAPE_I: (CreatureSize.SMALL, CreatureSize.MEDIUM),
    Tier.BEAST_SHAPE_II: (CreatureSize.TINY, CreatureSize.SMALL, CreatureSize.MEDIUM, CreatureSize.LARGE),
    Tier.BEAST_SHAPE_III: _DIMINUTIVE_TO_HUGE,
    Tier.BEAST_SHAPE_IV: _DIMINUTIVE_TO_HUGE,
    Tier.ELEMENTAL_BODY_I: (CreatureSize.SMALL,),
    Tier.ELEMENTAL_BODY_II: (CreatureSize.SMALL, CreatureSize.MEDIUM),
    Tier.ELEMENTAL_BODY_III: (CreatureSize.SMALL, CreatureSize.MEDIUM, CreatureSize.LARGE),
    Tier.ELEMENTAL_BODY_IV: (CreatureSize.SMALL, CreatureSize.MEDIUM, CreatureSize.LARGE, CreatureSize.HUGE),
    Tier.PLANT_SHAPE_I: (CreatureSize.SMALL, CreatureSize.MEDIUM),
    Tier.PLANT_SHAPE_II: (CreatureSize.SMALL, CreatureSize.MEDIUM, CreatureSize.LARGE),
    Tier.PLANT_SHAPE_III: (CreatureSize.SMALL, CreatureSize.MEDIUM, CreatureSize.LARGE, CreatureSize.HUGE),
}

# Beast Shape size bonuses, from the spell descriptions.
SIZE_TO_ABILITY: dict[Tier, dict[CreatureSize, SizeModifiers]] = {
    Tier.BEAST_SHAPE_I: {
        CreatureSize.SMALL: SizeModifiers(dex=2, natural_armor=1),
        CreatureSize.MEDIUM: SizeModifiers(str=2, natural_armor=2),
    },
    Tier.BEAST_SHAPE_II: {
        CreatureSize.TINY: SizeModifiers(str=-2, dex=4, natural_armor=1),
        CreatureSize.LARGE: SizeModifiers(str=4, dex=-2, con=4, natural_armor=4),
    },
    Tier.BEAST_SHAPE_III: {
        CreatureSize.DIMINUTIVE: SizeModifiers(str=-4, dex=6, natural_armor=1),
        CreatureSize.HUGE: SizeModifiers(str=6, dex=-4, natural_armor=6),
        # magical beast variants
        CreatureSize.SMALL: SizeModifiers(dex=4, natural_armor=2),
        CreatureSize.MEDIUM: SizeModifiers(str=4, natural_armor=4),
    },
    Tier.BEAST_SHAPE_IV: {
        CreatureSize.DIMINUTIVE: SizeModifiers(str=-4, dex=6, natural_armor=1),
        CreatureSize.HUGE: SizeModifiers(str=6, dex=-4, natural_armor=6),
    },
}


def get_tier_for_edl(edl: int) -> TierAvailability | None:
    """Tiers and sizes available at an EDL, or None below 4th level."""
    if edl < 4:
        return None
    levels = [lvl for lvl in EDL_TO_TIERS if lvl <= edl]
    return EDL_TO_TIERS[max(levels)] if levels else None


def get_available_tiers(edl: int) -> list[Tier]:
    """Every tier unlocked at an EDL, lower tiers included, in table order."""
    tiers: list[Tier] = []
    for lvl in sorted(EDL_TO_TIERS):
        if lvl > edl:
            break
        availability = EDL_TO_TIERS[lvl]
        for tier in (availability.animal, availability.elemental, availability.plant):
            if tier is not None and tier not in tiers:
                tiers.append(tier)
    return [t for t in Tier if t in tiers]


def best_tier_for_kind(edl: int, kind: FormKind) -> Tier | None:
    """Highest tier a druid of this EDL can use for a form kind."""
    availability = get_tier_for_edl(edl)
    if availability is None:
        return None
    if kind == FormKind.ELEMENTAL:
        return availability.elemental
    if kind == FormKind.PLANT:
        return availability.plant
    return availability.animal


def is_size_allowed_for_tier(size: CreatureSize, tier: Tier) -> bool:
    return size in TIER_SIZES.get(tier, ())


def get_beast_size_modifiers(tier: Tier, size: CreatureSize) -> SizeModifiers:
    return SIZE_TO_ABILITY.get(tier, {}).get(size, NO_SIZE_MODIFIERS)


def get_size_modifiers(
    tier: Tier,
    size: CreatureSize,
    element: ElementType | None = None,
) -> SizeModifiers:
    """Size bonuses for a tier at a size (and element, for Elemental Body).

    Combinations the tables do not cover yield zero modifiers rather than an error.
    """
    tier = Tier(tier)
    if tier.is_elemental:
        mods = get_elemental_size_modifiers(tier, element, size) if element else NO_SIZE_MODIFIERS
    elif tier.is_plant:
        mods = get_plant_size_modifiers(tier, size)
    else:
        mods = get_beast_size_modifiers(tier, size)

    if mods.is_empty:
        logger.debug("No size modifiers for %s at %s (element=%s)", tier.value, size, element)
    return mods
