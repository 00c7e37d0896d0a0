"""Plant Shape size bonuses, senses and special abilities."""
from __future__ import annotations

from wildshape.mechanics.size import NO_SIZE_MODIFIERS, SizeModifiers
from wildshape.models.character import Senses
from wildshape.models.form import CreatureSize, Tier
from wildshape.models.grants import NO_GRANTS, Grants

# Con bonuses here are sometimes printed as enhancement bonuses; they are
# applied as size bonuses all the same.
PLANT_SIZE_BONUS: dict[Tier, dict[CreatureSize, SizeModifiers]] = {
    Tier.PLANT_SHAPE_I: {
        CreatureSize.SMALL: SizeModifiers(con=2, natural_armor=2),
        CreatureSize.MEDIUM: SizeModifiers(str=2, con=2, natural_armor=2),
    },
    Tier.PLANT_SHAPE_II: {
        CreatureSize.LARGE: SizeModifiers(str=4, con=2, natural_armor=4),
    },
    Tier.PLANT_SHAPE_III: {
        CreatureSize.HUGE: SizeModifiers(str=8, dex=-2, con=4, natural_armor=6),
    },
}

PLANT_SENSES = Senses(darkvision=60, low_light=True)

PLANT_TRAITS = ["constrict", "grab", "poison"]

PLANT_SHAPE_III_TRAITS = ["damage_reduction", "regeneration", "trample"]


def get_plant_size_modifiers(tier: Tier, size: CreatureSize) -> SizeModifiers:
    return PLANT_SIZE_BONUS.get(tier, {}).get(size, NO_SIZE_MODIFIERS)


def get_plant_traits_for_tier(tier: Tier) -> list[str]:
    if tier == Tier.PLANT_SHAPE_III:
        return PLANT_TRAITS + PLANT_SHAPE_III_TRAITS
    return list(PLANT_TRAITS)


def get_plant_grants(tier: Tier) -> Grants:
    """Senses and abilities for a Plant Shape tier; other tiers get nothing."""
    if tier not in PLANT_SIZE_BONUS:
        return NO_GRANTS
    return Grants(senses=PLANT_SENSES, traits=get_plant_traits_for_tier(tier))


def is_plant_trait_granted_by_tier(trait: str, tier: Tier) -> bool:
    return trait.lower() in get_plant_grants(tier).traits
