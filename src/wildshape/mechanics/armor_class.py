"""Armor class aggregation for an assumed form — pure functions, no I/O."""
from __future__ import annotations

from wildshape.mechanics.size import attack_size_modifier
from wildshape.models.character import ArmorClassComponents
from wildshape.models.form import CreatureSize
from wildshape.models.playsheet import ArmorClass, ArmorClassBreakdown, Explain, ExplainSource


def resolve_natural_armor(base_natural: int, granted_natural: int) -> int:
    """Natural armor from the form replaces the druid's own; the two never stack.

    Whichever is higher applies.
    """
    return max(base_natural, granted_natural)


def touch_ac(breakdown: ArmorClassBreakdown) -> int:
    """Total minus armor, shield and natural armor."""
    return (
        breakdown.base
        + breakdown.dex
        + breakdown.size
        + breakdown.deflection
        + breakdown.dodge
        + breakdown.misc
    )


def flat_footed_ac(breakdown: ArmorClassBreakdown) -> int:
    """Total minus Dex and dodge."""
    return (
        breakdown.base
        + breakdown.armor
        + breakdown.shield
        + breakdown.natural
        + breakdown.size
        + breakdown.deflection
        + breakdown.misc
    )


def aggregate_armor_class(
    components: ArmorClassComponents,
    size: CreatureSize,
    dex_mod: int,
    granted_natural: int = 0,
    natural_label: str = "Form natural armor",
    natural_source: ExplainSource = "form",
    explain: list[Explain] | None = None,
) -> ArmorClass:
    """Combine the druid's AC components with the form's size, Dex and natural armor.

    The ``ac.natural`` explain entries always sum to the change from the
    druid's own natural armor.
    """
    natural = resolve_natural_armor(components.natural, granted_natural)
    breakdown = ArmorClassBreakdown(
        armor=components.armor,
        shield=components.shield,
        natural=natural,
        deflection=components.deflection,
        dodge=components.dodge,
        size=attack_size_modifier(size),
        dex=dex_mod,
        misc=components.misc,
    )
    total = flat_footed_ac(breakdown) + breakdown.dex + breakdown.dodge

    notes = list(explain or [])
    if natural != components.natural:
        notes.append(Explain(target="ac.natural", label=natural_label, delta=granted_natural, source=natural_source))
        if components.natural:
            notes.append(Explain(
                target="ac.natural",
                label="Replaces base natural armor",
                delta=-components.natural,
                source="calc",
            ))
    if breakdown.size:
        notes.append(Explain(target="ac.size", label=f"Size ({CreatureSize(size).value})", delta=breakdown.size, source="size"))

    return ArmorClass(
        total=total,
        touch=touch_ac(breakdown),
        flat_footed=flat_footed_ac(breakdown),
        breakdown=breakdown,
        explain=notes,
    )
