"""Tests for src/wildshape/mechanics/ability_scores.py."""
from __future__ import annotations

import pytest

from wildshape.mechanics.ability_scores import (
    SAVE_ABILITIES,
    apply_ability_deltas,
    modifier,
    modifier_change,
)
from wildshape.models.character import AbilityScores


class TestModifier:
    @pytest.mark.parametrize("score, expected", [
        (1, -5), (8, -1), (9, -1), (10, 0), (11, 0), (12, 1), (18, 4), (19, 4), (20, 5),
    ])
    def test_modifier(self, score, expected):
        assert modifier(score) == expected


class TestApplyAbilityDeltas:
    def test_adds_deltas(self):
        scores = AbilityScores(str=10, dex=14, con=12)
        result = apply_ability_deltas(scores, {"str": 4, "dex": -2, "con": 4})
        assert (result.str, result.dex, result.con) == (14, 12, 16)

    def test_input_unchanged(self):
        scores = AbilityScores(str=10)
        apply_ability_deltas(scores, {"str": 4})
        assert scores.str == 10

    def test_mental_scores_untouched(self):
        scores = AbilityScores(int=13, wis=18, cha=8)
        result = apply_ability_deltas(scores, {"str": 2})
        assert (result.int, result.wis, result.cha) == (13, 18, 8)

    def test_unknown_keys_ignored(self):
        scores = AbilityScores()
        assert apply_ability_deltas(scores, {"natural_armor": 4}) == scores


class TestModifierChange:
    def test_change(self):
        before = AbilityScores(con=14)
        after = AbilityScores(con=18)
        assert modifier_change(before, after, "con") == 2

    def test_odd_scores_round_down(self):
        before = AbilityScores(dex=14)
        after = AbilityScores(dex=12)
        assert modifier_change(before, after, "dex") == -1

    def test_save_abilities(self):
        assert SAVE_ABILITIES == {"fortitude": "con", "reflex": "dex", "will": "wis"}
