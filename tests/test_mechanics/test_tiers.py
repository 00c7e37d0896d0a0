"""Tests for src/wildshape/mechanics/tiers.py."""
from __future__ import annotations

import pytest

from wildshape.mechanics.size import NO_SIZE_MODIFIERS, SizeModifiers
from wildshape.mechanics.tiers import (
    TIER_SIZES,
    best_tier_for_kind,
    get_available_tiers,
    get_size_modifiers,
    get_tier_for_edl,
    is_size_allowed_for_tier,
)
from wildshape.models.form import CreatureSize, ElementType, FormKind, Tier

S = CreatureSize


class TestTierForEdl:
    @pytest.mark.parametrize("edl", [0, 1, 3])
    def test_below_four_has_no_wild_shape(self, edl):
        assert get_tier_for_edl(edl) is None
        assert get_available_tiers(edl) == []

    def test_edl_4(self):
        availability = get_tier_for_edl(4)
        assert availability.animal == Tier.BEAST_SHAPE_I
        assert availability.elemental is None
        assert availability.plant is None

    def test_odd_level_uses_lower_entry(self):
        assert get_tier_for_edl(7) == get_tier_for_edl(6)

    def test_edl_8(self):
        availability = get_tier_for_edl(8)
        assert availability.animal == Tier.BEAST_SHAPE_III
        assert availability.elemental == Tier.ELEMENTAL_BODY_II
        assert availability.plant == Tier.PLANT_SHAPE_I

    def test_high_levels_cap(self):
        assert get_tier_for_edl(20) == get_tier_for_edl(12)
        assert get_tier_for_edl(20).elemental == Tier.ELEMENTAL_BODY_IV


class TestAvailableTiers:
    def test_includes_lower_tiers(self):
        assert get_available_tiers(6) == [
            Tier.BEAST_SHAPE_I,
            Tier.BEAST_SHAPE_II,
            Tier.ELEMENTAL_BODY_I,
        ]

    def test_edl_12_has_every_unlocked_tier(self):
        tiers = get_available_tiers(12)
        assert Tier.PLANT_SHAPE_III in tiers
        assert Tier.ELEMENTAL_BODY_IV in tiers
        assert Tier.BEAST_SHAPE_IV not in tiers


class TestBestTierForKind:
    @pytest.mark.parametrize("edl, kind, expected", [
        (4, FormKind.ANIMAL, Tier.BEAST_SHAPE_I),
        (6, FormKind.MAGICAL_BEAST, Tier.BEAST_SHAPE_II),
        (6, FormKind.ELEMENTAL, Tier.ELEMENTAL_BODY_I),
        (6, FormKind.PLANT, None),
        (10, FormKind.PLANT, Tier.PLANT_SHAPE_II),
        (3, FormKind.ANIMAL, None),
    ])
    def test_best_tier(self, edl, kind, expected):
        assert best_tier_for_kind(edl, kind) == expected


class TestTierSizes:
    def test_every_tier_has_sizes(self):
        assert set(TIER_SIZES) == set(Tier)

    @pytest.mark.parametrize("size, tier, allowed", [
        (S.MEDIUM, Tier.BEAST_SHAPE_I, True),
        (S.LARGE, Tier.BEAST_SHAPE_I, False),
        (S.LARGE, Tier.BEAST_SHAPE_II, True),
        (S.HUGE, Tier.BEAST_SHAPE_III, True),
        (S.DIMINUTIVE, Tier.BEAST_SHAPE_III, True),
        (S.MEDIUM, Tier.ELEMENTAL_BODY_I, False),
        (S.HUGE, Tier.PLANT_SHAPE_III, True),
        (S.GARGANTUAN, Tier.BEAST_SHAPE_IV, False),
    ])
    def test_size_allowed(self, size, tier, allowed):
        assert is_size_allowed_for_tier(size, tier) is allowed


class TestSizeModifiers:
    @pytest.mark.parametrize("tier, size, expected", [
        (Tier.BEAST_SHAPE_I, S.SMALL, SizeModifiers(dex=2, natural_armor=1)),
        (Tier.BEAST_SHAPE_I, S.MEDIUM, SizeModifiers(str=2, natural_armor=2)),
        (Tier.BEAST_SHAPE_II, S.TINY, SizeModifiers(str=-2, dex=4, natural_armor=1)),
        (Tier.BEAST_SHAPE_II, S.LARGE, SizeModifiers(str=4, dex=-2, con=4, natural_armor=4)),
        (Tier.BEAST_SHAPE_III, S.DIMINUTIVE, SizeModifiers(str=-4, dex=6, natural_armor=1)),
        (Tier.BEAST_SHAPE_III, S.HUGE, SizeModifiers(str=6, dex=-4, natural_armor=6)),
    ])
    def test_beast_table(self, tier, size, expected):
        assert get_size_modifiers(tier, size) == expected

    def test_elemental_dispatch(self):
        mods = get_size_modifiers(Tier.ELEMENTAL_BODY_I, S.SMALL, ElementType.AIR)
        assert mods == SizeModifiers(dex=2, natural_armor=2)

    def test_elemental_without_element(self):
        assert get_size_modifiers(Tier.ELEMENTAL_BODY_I, S.SMALL) == NO_SIZE_MODIFIERS

    def test_plant_dispatch(self):
        mods = get_size_modifiers(Tier.PLANT_SHAPE_II, S.LARGE)
        assert mods == SizeModifiers(str=4, con=2, natural_armor=4)

    def test_missing_entry_is_zero(self):
        assert get_size_modifiers(Tier.BEAST_SHAPE_II, S.HUGE) == NO_SIZE_MODIFIERS

    def test_accepts_tier_value(self):
        assert get_size_modifiers("Beast Shape I", S.MEDIUM).str == 2
