"""Convert stored character and form records into engine models.

Records are the storage layer's nested camelCase dicts. Older records keep ability
scores flat on ``baseStats``, HP as a bare number, and AC bonuses, BAB and saves
under ``combatStats``; both layouts are accepted.
"""
from __future__ import annotations

import logging
import re
from typing import Any

from wildshape.models.character import (
    AbilityScores,
    ArmorClassComponents,
    BaseCharacter,
    HitPoints,
    Movement,
    Saves,
    Senses,
)
from wildshape.models.form import AttackType, ElementType, Form, FormKind, NaturalAttack, Tier
from wildshape.utils import safe_int

logger = logging.getLogger(__name__)

_RANGE_RE = re.compile(r"(\d+)")
_RIDERS_RE = re.compile(r"\(([^)]+)\)")

DEFAULT_DARKVISION = 60


# -- Characters --


def _ability_scores(base_stats: dict[str, Any]) -> AbilityScores:
    scores = base_stats.get("abilityScores") or {
        ability: base_stats.get(ability) or 10
        for ability in ("str", "dex", "con", "int", "wis", "cha")
    }
    return AbilityScores.model_validate(scores)


def _hit_points(base_stats: dict[str, Any], combat_stats: dict[str, Any]) -> HitPoints:
    hp = base_stats.get("hp")
    if isinstance(hp, dict) and safe_int(hp.get("max")) > 0:
        return HitPoints(current=safe_int(hp.get("current", hp["max"])), max=safe_int(hp["max"]))
    if isinstance(hp, (int, float)) and hp > 0:
        return HitPoints(current=int(hp), max=int(hp))
    legacy = safe_int(combat_stats.get("baseHP"))
    if legacy > 0:
        return HitPoints(current=legacy, max=legacy)
    # 1 HP makes the missing value obvious on the sheet
    logger.warning("Character record has no hit points, defaulting to 1")
    return HitPoints(current=1, max=1)


def _misc_bonuses(combat_stats: dict[str, Any]) -> tuple[int, int]:
    """(attack, damage) misc bonuses from the bonus list, or the older single fields."""
    bonuses = combat_stats.get("miscBonuses")
    if not isinstance(bonuses, list):
        return safe_int(combat_stats.get("miscAttackBonus")), safe_int(combat_stats.get("miscDamageBonus"))

    attack = damage = 0
    for bonus in bonuses:
        value = safe_int(bonus.get("value"))
        if bonus.get("type") in ("attack", "both"):
            attack += value
        if bonus.get("type") in ("damage", "both"):
            damage += value
    return attack, damage


def extract_darkvision_range(senses: list[str]) -> int | None:
    """Range from an entry like 'darkvision 60 ft'; bare 'darkvision' means 60."""
    for sense in senses:
        if "darkvision" in sense.lower():
            m = _RANGE_RE.search(sense)
            return int(m.group(1)) if m else DEFAULT_DARKVISION
    return None


def character_to_base_character(record: dict[str, Any]) -> BaseCharacter:
    base_stats = record.get("baseStats") or {}
    combat_stats = record.get("combatStats") or {}
    features = record.get("features") or {}
    ac_bonuses = combat_stats.get("acBonuses") or {}
    saves = base_stats.get("saves") or {}
    legacy_saves = combat_stats.get("saves") or {}
    movement = base_stats.get("movement") or {}
    senses = [s.lower() for s in base_stats.get("senses") or []]

    level = base_stats.get("level") or record.get("level") or combat_stats.get("level") or 1
    bab = base_stats.get("bab")
    if bab is None:
        bab = combat_stats.get("baseAttackBonus", 0)
    misc_attack, misc_damage = _misc_bonuses(combat_stats)
    logger.debug("Character %s: level %s, BAB %s", record.get("name", "?"), level, bab)

    return BaseCharacter(
        level=safe_int(level, 1),
        effective_druid_level=safe_int(base_stats.get("effectiveDruidLevel", level)),
        ability=_ability_scores(base_stats),
        hp=_hit_points(base_stats, combat_stats),
        bab=safe_int(bab),
        ac=ArmorClassComponents(
            armor=safe_int(ac_bonuses.get("armor")),
            shield=safe_int(ac_bonuses.get("shield")),
            natural=safe_int(combat_stats.get("baseNaturalArmor")),
            deflection=safe_int(ac_bonuses.get("deflection")),
            dodge=safe_int(ac_bonuses.get("dodge")),
            misc=safe_int(ac_bonuses.get("misc")),
        ),
        saves=Saves(
            fortitude=safe_int(saves.get("fortitude") or legacy_saves.get("fort")),
            reflex=safe_int(saves.get("reflex") or legacy_saves.get("ref")),
            will=safe_int(saves.get("will") or legacy_saves.get("will")),
        ),
        movement=Movement(
            land=movement.get("land") or 30,
            swim=movement.get("swim"),
            climb=movement.get("climb"),
            fly=movement.get("fly"),
            burrow=movement.get("burrow"),
        ),
        senses=Senses(
            low_light="low-light vision" in senses,
            scent="scent" in senses,
            darkvision=extract_darkvision_range(senses),
        ),
        feats=features.get("feats") or [],
        traits=features.get("raceTraits") or [],
        attack_ability=(combat_stats.get("attackStatModifier") or "STR").lower(),
        damage_ability=(combat_stats.get("damageStatModifier") or "STR").lower(),
        damage_multiplier=combat_stats.get("damageMultiplier") or 1.0,
        misc_attack_bonus=misc_attack,
        misc_damage_bonus=misc_damage,
    )


# -- Forms --


def infer_form_kind(spell_level: str) -> FormKind:
    if "Elemental" in spell_level:
        return FormKind.ELEMENTAL
    if "Plant" in spell_level:
        return FormKind.PLANT
    return FormKind.ANIMAL


def infer_attack_type(attack_name: str) -> AttackType:
    name = attack_name.lower()
    for attack_type in AttackType:
        if attack_type != AttackType.OTHER and attack_type.value in name:
            return attack_type
    return AttackType.OTHER


def extract_attack_traits(attack_name: str) -> list[str]:
    """Riders written into the name, e.g. 'Bite (grab, trip)' -> ['grab', 'trip']."""
    m = _RIDERS_RE.search(attack_name)
    if not m:
        return []
    return [s.strip().lower() for s in m.group(1).split(",") if s.strip()]


def infer_element(name: str, tags: list[str]) -> ElementType | None:
    text = " ".join([name, *tags]).lower()
    for element in ElementType:
        if element.value.lower() in text:
            return element
    return None


def _tier_or_none(value: str | None) -> Tier | None:
    try:
        return Tier(value) if value else None
    except ValueError:
        logger.debug("Unrecognised spell level %r on form record", value)
        return None


def wild_shape_form_to_form(record: dict[str, Any]) -> Form:
    mods = record.get("statModifications") or {}
    movement = mods.get("movement") or {}
    senses = mods.get("senses") or {}
    tags = record.get("tags") or []
    spell_level = record.get("requiredSpellLevel") or ""
    kind = infer_form_kind(spell_level)
    form_id = record.get("id") or re.sub(r"\s+", "-", record["name"].strip().lower())

    attacks = [
        NaturalAttack(
            type=infer_attack_type(attack["name"]),
            dice=attack["damage"],
            count=attack.get("count") or 1,
            primary=attack.get("type", "primary") == "primary",
            traits=extract_attack_traits(attack["name"]),
        )
        for attack in mods.get("naturalAttacks") or []
    ]

    return Form(
        id=form_id,
        name=record["name"],
        kind=kind,
        base_size=record["size"],
        natural_attacks=attacks,
        movement=Movement(
            land=movement.get("land"),
            swim=movement.get("swim"),
            climb=movement.get("climb"),
            fly=movement.get("fly"),
            fly_maneuver=movement.get("flyManeuver"),
            burrow=movement.get("burrow"),
        ),
        senses=Senses(
            low_light=bool(senses.get("lowLight")),
            scent=bool(senses.get("scent")),
            darkvision=senses.get("darkvision"),
            tremorsense=senses.get("tremorsense"),
            blindsense=senses.get("blindsense"),
        ),
        traits=mods.get("specialAbilities") or [],
        tags=tags,
        natural_armor=safe_int(mods.get("naturalArmor")),
        requirements={
            "spell_equivalent": _tier_or_none(spell_level),
            "min_edl": record.get("requiredDruidLevel"),
        },
        element=infer_element(record["name"], tags) if kind == FormKind.ELEMENTAL else None,
    )
