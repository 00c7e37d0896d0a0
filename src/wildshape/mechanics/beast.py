"""Beast Shape grants — movement, senses and special abilities per tier."""
from __future__ import annotations

from wildshape.models.character import FlyManeuverability, Movement, Senses
from wildshape.models.form import Tier
from wildshape.models.grants import NO_GRANTS, Grants

_BEAST_SHAPE_III_TRAITS = [
    "constrict",
    "ferocity",
    "grab",
    "jet",
    "poison",
    "pounce",
    "rake",
    "trample",
    "trip",
    "web",
]

# Movement values are the maxima the spell allows; senses are granted outright.
BEAST_GRANTS_BY_TIER: dict[Tier, Grants] = {
    Tier.BEAST_SHAPE_I: Grants(
        movement=Movement(climb=30, fly=30, swim=30, fly_maneuver=FlyManeuverability.AVERAGE),
        senses=Senses(darkvision=60, low_light=True, scent=True),
        traits=[],
    ),
    Tier.BEAST_SHAPE_II: Grants(
        movement=Movement(climb=60, fly=60, swim=60, fly_maneuver=FlyManeuverability.GOOD),
        senses=Senses(darkvision=60, low_light=True, scent=True),
        traits=["grab", "pounce", "trip"],
    ),
    Tier.BEAST_SHAPE_III: Grants(
        movement=Movement(burrow=30, climb=90, fly=90, swim=90, fly_maneuver=FlyManeuverability.GOOD),
        senses=Senses(darkvision=60, low_light=True, scent=True, blindsense=30),
        traits=_BEAST_SHAPE_III_TRAITS,
    ),
    Tier.BEAST_SHAPE_IV: Grants(
        movement=Movement(burrow=30, climb=90, fly=90, swim=90, fly_maneuver=FlyManeuverability.GOOD),
        senses=Senses(darkvision=60, low_light=True, scent=True, blindsense=30),
        traits=_BEAST_SHAPE_III_TRAITS,
    ),
}


def get_beast_grants(tier: Tier) -> Grants:
    """Grants for a Beast Shape tier; any other tier gets nothing."""
    return BEAST_GRANTS_BY_TIER.get(tier, NO_GRANTS)


def is_trait_granted_by_tier(trait: str, tier: Tier) -> bool:
    """Whether a native form ability survives the transformation at this tier."""
    return trait.lower() in get_beast_grants(tier).traits
