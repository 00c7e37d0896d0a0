"""Natural attack scaling — pure functions, no I/O."""
from __future__ import annotations

import math

from wildshape.mechanics.ability_scores import modifier
from wildshape.mechanics.size import attack_size_modifier, scale_damage_for_size
from wildshape.models.character import AbilityScores, BaseCharacter
from wildshape.models.form import CreatureSize, NaturalAttack
from wildshape.models.playsheet import ComputedAttack, Explain

SECONDARY_ATTACK_PENALTY = -5


def attack_name(attack: NaturalAttack) -> str:
    return attack.type.value.capitalize()


def attack_bonus(
    bab: int,
    ability_mod: int,
    size: CreatureSize,
    primary: bool = True,
    misc: int = 0,
) -> int:
    """BAB + ability modifier + size modifier, -5 for secondary attacks."""
    penalty = 0 if primary else SECONDARY_ATTACK_PENALTY
    return bab + ability_mod + attack_size_modifier(size) + penalty + misc


def damage_bonus(ability_mod: int, primary: bool = True, multiplier: float = 1.0, misc: int = 0) -> int:
    """Secondary attacks add half the ability modifier; the multiplier applies before misc."""
    base = ability_mod if primary else ability_mod // 2
    return math.floor(base * multiplier) + misc


def compute_attack(
    attack: NaturalAttack,
    base: BaseCharacter,
    ability: AbilityScores,
    native_size: CreatureSize,
    size: CreatureSize,
) -> ComputedAttack:
    """Rescale one natural attack to the assumed size and work out its numbers.

    ``ability`` must already carry the tier's size bonuses.
    """
    to_hit_mod = modifier(ability.get(base.attack_ability))
    damage_mod = modifier(ability.get(base.damage_ability))
    size_mod = attack_size_modifier(size)

    bonus = attack_bonus(base.bab, to_hit_mod, size, attack.primary, base.misc_attack_bonus)
    dice = scale_damage_for_size(attack.dice, native_size, size)
    ability_damage = damage_mod if attack.primary else damage_mod // 2
    dmg_bonus = damage_bonus(damage_mod, attack.primary, base.damage_multiplier, base.misc_damage_bonus)
    multiplied = dmg_bonus - base.misc_damage_bonus

    explain = [
        Explain(target="attack", label="BAB", delta=base.bab, source="base"),
        Explain(target="attack", label=f"{base.attack_ability.upper()} mod", delta=to_hit_mod, source="calc"),
        Explain(target="attack", label="Size", delta=size_mod, source="size"),
    ]
    if not attack.primary:
        explain.append(Explain(target="attack", label="Secondary", delta=SECONDARY_ATTACK_PENALTY, source="calc"))
    if base.misc_attack_bonus:
        explain.append(Explain(target="attack", label="Misc", delta=base.misc_attack_bonus, source="base"))
    explain.append(Explain(target="damage", label="Size scaling", delta=dice, source="size"))
    explain.append(Explain(
        target="damage",
        label=f"{base.damage_ability.upper()} ({'primary' if attack.primary else 'secondary'})",
        delta=ability_damage,
        source="calc",
    ))
    if multiplied != ability_damage:
        explain.append(Explain(
            target="damage",
            label=f"x{base.damage_multiplier:g} multiplier",
            delta=multiplied - ability_damage,
            source="calc",
        ))
    if base.misc_damage_bonus:
        explain.append(Explain(target="damage", label="Misc", delta=base.misc_damage_bonus, source="base"))

    return ComputedAttack(
        name=attack_name(attack),
        count=attack.count,
        attack_bonus=bonus,
        damage_dice=dice,
        damage_bonus=dmg_bonus,
        primary=attack.primary,
        traits=list(attack.traits),
        explain=explain,
    )


def scale_attacks(
    attacks: list[NaturalAttack],
    base: BaseCharacter,
    ability: AbilityScores,
    native_size: CreatureSize,
    size: CreatureSize,
) -> list[ComputedAttack]:
    """One entry per natural attack; counts stay on the entry (2 claws is one row)."""
    return [compute_attack(a, base, ability, native_size, size) for a in attacks]
