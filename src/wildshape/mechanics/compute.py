"""Wild shape stat computation.

Single pass over one ``ComputeInput``:

1. size modifiers for the tier at the chosen size (abilities, natural armor)
2. tier grants (movement, senses, special abilities)
3. natural attacks rescaled to the chosen size
4. armor class
5. saves, hit points and the finished playsheet

Each stage reads the previous stage's output, and nothing is shared between
calls. Inputs are trusted to be legal (see ``engine.validators``); table gaps
produce zero modifiers instead of errors.
"""
from __future__ import annotations

import logging
from typing import Optional

from wildshape.mechanics.ability_scores import SAVE_ABILITIES, apply_ability_deltas, modifier, modifier_change
from wildshape.mechanics.armor_class import aggregate_armor_class
from wildshape.mechanics.attacks import scale_attacks
from wildshape.mechanics.beast import get_beast_grants, is_trait_granted_by_tier
from wildshape.mechanics.elemental import get_elemental_grants
from wildshape.mechanics.plant import get_plant_grants, is_plant_trait_granted_by_tier
from wildshape.mechanics.size import SizeModifiers, fly_modifier, stealth_modifier
from wildshape.mechanics.tiers import get_size_modifiers
from wildshape.models.character import AbilityScores, BaseCharacter, Movement, Senses
from wildshape.models.form import CreatureSize, ElementType, Form, FormKind, Tier
from wildshape.models.grants import Grants
from wildshape.models.playsheet import (
    ComputedPlaysheet,
    ComputeInput,
    Explain,
    ExplainSource,
    SavingThrows,
    SizeSkillModifiers,
)

logger = logging.getLogger(__name__)

DEFAULT_LAND_SPEED = 30
PLANT_LAND_SPEED = 5

_MOVE_MODES = ("fly", "swim", "climb", "burrow")


def _max_or(*values: Optional[int]) -> Optional[int]:
    """Highest of the values that are set, or None if none are."""
    present = [v for v in values if v is not None]
    return max(present) if present else None


def get_grants(tier: Tier, element: ElementType | None = None) -> Grants:
    if tier.is_elemental:
        return get_elemental_grants(tier, element)
    if tier.is_plant:
        return get_plant_grants(tier)
    return get_beast_grants(tier)


# -- Stage 1: size modifiers --


def _tier_label(tier: Tier, size: CreatureSize, element: ElementType | None) -> str:
    if tier.is_elemental and element is not None:
        return f"{tier.value} {element.value} ({size.value})"
    return f"{tier.value} ({size.value})"


def _size_explain(mods: SizeModifiers, label: str) -> list[Explain]:
    return [
        Explain(target=f"ability.{ability}", label=label, delta=delta, source="tier")
        for ability, delta in mods.ability_deltas().items()
        if delta
    ]


def _granted_natural_armor(form: Form, mods: SizeModifiers, label: str) -> tuple[int, str, ExplainSource]:
    """Natural armor the transformation provides; a form-listed value overrides the table."""
    if form.natural_armor:
        return form.natural_armor, form.name, "form"
    return mods.natural_armor, label, "tier"


# -- Stage 2: grants --


def _beast_movement(base: BaseCharacter, form: Form, grants: Grants) -> Movement:
    """The form's speeds, capped at what the tier allows, never below the druid's own."""
    limits = grants.movement
    speeds: dict[str, Optional[int]] = {"land": _max_or(base.movement.land, form.movement.land)}
    for mode in _MOVE_MODES:
        native = getattr(form.movement, mode)
        limit = getattr(limits, mode)
        granted = min(native, limit) if native is not None and limit is not None else None
        speeds[mode] = _max_or(getattr(base.movement, mode), granted)

    maneuver = None
    if form.movement.fly is not None and limits.fly is not None:
        maneuver = limits.fly_maneuver
    elif base.movement.fly is not None:
        maneuver = base.movement.fly_maneuver
    return Movement(fly_maneuver=maneuver, **speeds)


def _elemental_movement(base: BaseCharacter, form: Form, grants: Grants) -> Movement:
    element_moves = grants.movement
    return Movement(
        land=_max_or(base.movement.land, form.movement.land, element_moves.land),
        climb=_max_or(base.movement.climb, form.movement.climb),
        swim=_max_or(base.movement.swim, form.movement.swim, element_moves.swim),
        burrow=_max_or(base.movement.burrow, form.movement.burrow, element_moves.burrow),
        fly=_max_or(base.movement.fly, form.movement.fly, element_moves.fly),
        fly_maneuver=(
            element_moves.fly_maneuver or form.movement.fly_maneuver or base.movement.fly_maneuver
        ),
    )


def _plant_movement(form: Form) -> Movement:
    return form.movement.model_copy(update={"land": form.movement.land or PLANT_LAND_SPEED})


def merge_movement(tier: Tier, base: BaseCharacter, form: Form, grants: Grants) -> Movement:
    if tier.is_elemental:
        movement = _elemental_movement(base, form, grants)
    elif tier.is_plant:
        movement = _plant_movement(form)
    else:
        movement = _beast_movement(base, form, grants)
    if movement.land is None:
        movement = movement.model_copy(update={"land": base.movement.land or DEFAULT_LAND_SPEED})
    if not movement.fly:
        movement = movement.model_copy(update={"fly_maneuver": None})
    return movement


def merge_senses(base: BaseCharacter, form: Form, grants: Grants) -> Senses:
    """Tier senses apply outright; ranges take the best source."""
    sources = (base.senses, form.senses, grants.senses)
    return Senses(
        darkvision=_max_or(*(s.darkvision for s in sources)),
        low_light=any(s.low_light for s in sources),
        scent=any(s.scent for s in sources),
        tremorsense=_max_or(*(s.tremorsense for s in sources)),
        blindsense=_max_or(*(s.blindsense for s in sources)),
    )


def _form_trait_allowed(trait: str, tier: Tier, kind: FormKind) -> bool:
    if kind in (FormKind.ANIMAL, FormKind.MAGICAL_BEAST):
        return is_trait_granted_by_tier(trait, tier)
    if kind == FormKind.PLANT:
        return is_plant_trait_granted_by_tier(trait, tier)
    return True


def merge_traits(form: Form, grants: Grants, tier: Tier) -> list[str]:
    """Tier traits first, then the form's own traits the tier lets through."""
    merged: list[str] = []
    seen: set[str] = set()
    candidates = list(grants.traits) + [t for t in form.traits if _form_trait_allowed(t, tier, form.kind)]
    for trait in candidates:
        key = trait.lower()
        if key not in seen:
            seen.add(key)
            merged.append(trait)
    return merged


# -- Stage 5: saves --


def compute_saves(base: BaseCharacter, ability_after: AbilityScores) -> SavingThrows:
    values: dict[str, int] = {}
    explain: list[Explain] = []
    for save, ability in SAVE_ABILITIES.items():
        delta = modifier_change(base.ability, ability_after, ability)
        values[save] = getattr(base.saves, save) + delta
        if delta:
            explain.append(Explain(
                target=f"saves.{save}",
                label=f"{ability.upper()} change",
                delta=delta,
                source="calc",
            ))
    return SavingThrows(explain=explain, **values)


def compute_pf1e(compute_input: ComputeInput) -> ComputedPlaysheet:
    """Compute the playsheet for a druid in an assumed form."""
    base, form, tier = compute_input.base, compute_input.form, compute_input.tier
    element = compute_input.element
    size = CreatureSize(compute_input.chosen_size or form.base_size)
    label = _tier_label(tier, size, element)

    # 1. size modifiers
    mods = get_size_modifiers(tier, size, element)
    ability = apply_ability_deltas(base.ability, mods.ability_deltas())
    granted_natural, natural_label, natural_source = _granted_natural_armor(form, mods, label)
    explain = _size_explain(mods, label)
    logger.debug("%s: size modifiers %s", label, mods)

    # 2. grants
    grants = get_grants(tier, element)
    movement = merge_movement(tier, base, form, grants)
    senses = merge_senses(base, form, grants)
    traits = merge_traits(form, grants, tier)
    logger.debug("%s: movement %s, senses %s, traits %s", label, movement, senses, traits)

    # 3. attacks
    attacks = scale_attacks(form.natural_attacks, base, ability, form.base_size, size)

    # 4. armor class
    ac = aggregate_armor_class(
        base.ac,
        size,
        modifier(ability.dex),
        granted_natural,
        natural_label=natural_label,
        natural_source=natural_source,
    )
    logger.debug("%s: AC %d (touch %d, flat-footed %d)", label, ac.total, ac.touch, ac.flat_footed)

    # 5. assemble
    return ComputedPlaysheet(
        size=size,
        ability=ability,
        hp=base.hp,
        ac=ac,
        saves=compute_saves(base, ability),
        movement=movement,
        senses=senses,
        skills=SizeSkillModifiers(stealth=stealth_modifier(size), fly=fly_modifier(size)),
        traits=traits,
        attacks=attacks,
        explain=explain,
    )
