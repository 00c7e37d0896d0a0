"""Tests for src/wildshape/engine/validators.py."""
from __future__ import annotations

import pytest

from wildshape.engine.validators import validate_compute_input
from wildshape.models.form import CreatureSize, ElementType, Tier
from wildshape.models.playsheet import ComputeInput


def _check(base, form, tier, size=None, element=None):
    return validate_compute_input(
        ComputeInput(base=base, form=form, tier=tier, chosen_size=size, element=element)
    )


class TestValidateComputeInput:
    def test_legal_shape(self, druid, dire_wolf):
        assert _check(druid, dire_wolf, Tier.BEAST_SHAPE_II, CreatureSize.LARGE) == (True, "")

    def test_below_edl_4(self, druid, leopard):
        novice = druid.model_copy(update={"effective_druid_level": 3})
        ok, reason = _check(novice, leopard, Tier.BEAST_SHAPE_I)
        assert not ok
        assert "no wild shape" in reason

    def test_tier_not_unlocked(self, druid, leopard):
        ok, reason = _check(druid, leopard, Tier.BEAST_SHAPE_IV, CreatureSize.HUGE)
        assert not ok
        assert "not available" in reason

    def test_wrong_family(self, druid, leopard):
        ok, reason = _check(druid, leopard, Tier.PLANT_SHAPE_I, CreatureSize.MEDIUM)
        assert not ok
        assert "cannot be assumed" in reason

    def test_form_min_edl(self, druid):
        from wildshape.content.loader import get_form

        mound = get_form("shambling-mound")
        ok, reason = _check(druid, mound, Tier.PLANT_SHAPE_I, CreatureSize.MEDIUM)
        assert not ok
        assert "requires effective druid level 10" in reason

    @pytest.mark.parametrize("tier, size", [
        (Tier.BEAST_SHAPE_I, CreatureSize.LARGE),
        (Tier.BEAST_SHAPE_II, CreatureSize.HUGE),
        (Tier.BEAST_SHAPE_III, CreatureSize.GARGANTUAN),
    ])
    def test_illegal_size(self, druid, leopard, tier, size):
        ok, reason = _check(druid, leopard, tier, size)
        assert not ok
        assert "allowed:" in reason

    def test_element_mismatch(self, druid, small_air_elemental):
        ok, reason = _check(druid, small_air_elemental, Tier.ELEMENTAL_BODY_I, CreatureSize.SMALL, ElementType.FIRE)
        assert not ok
        assert "Air elemental" in reason

    def test_element_defaulted_from_form(self, druid, small_air_elemental):
        assert _check(druid, small_air_elemental, Tier.ELEMENTAL_BODY_I)[0]
