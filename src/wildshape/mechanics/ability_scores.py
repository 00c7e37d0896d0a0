"""Ability score math — pure functions, no I/O."""
from __future__ import annotations

from wildshape.models.character import AbilityScores

ABILITY_NAMES = ["str", "dex", "con", "int", "wis", "cha"]

# Saving throw -> the ability that drives it.
SAVE_ABILITIES: dict[str, str] = {
    "fortitude": "con",
    "reflex": "dex",
    "will": "wis",
}


def modifier(score: int) -> int:
    """Calculate ability modifier from score."""
    return (score - 10) // 2


def apply_ability_deltas(scores: AbilityScores, deltas: dict[str, int]) -> AbilityScores:
    """Return new scores with each delta added. Unknown keys are ignored."""
    updates = {
        ability: scores.get(ability) + delta
        for ability, delta in deltas.items()
        if ability in ABILITY_NAMES and delta
    }
    return scores.model_copy(update=updates)


def modifier_change(before: AbilityScores, after: AbilityScores, ability: str) -> int:
    """How far an ability's modifier moved between two sets of scores."""
    return modifier(after.get(ability)) - modifier(before.get(ability))
