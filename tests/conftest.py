"""Shared fixtures for the wild shape test suite."""
from __future__ import annotations

import pytest

from wildshape.content.loader import get_form
from wildshape.models.character import (
    AbilityScores,
    ArmorClassComponents,
    BaseCharacter,
    HitPoints,
    Movement,
    Saves,
)
from wildshape.models.form import Form


@pytest.fixture
def druid() -> BaseCharacter:
    """Level 8 druid: STR 10, DEX 14, CON 14, WIS 18, BAB +6."""
    return BaseCharacter(
        level=8,
        effective_druid_level=8,
        ability=AbilityScores(str=10, dex=14, con=14, int=10, wis=18, cha=10),
        hp=HitPoints(current=60, max=60),
        bab=6,
        ac=ArmorClassComponents(armor=2, deflection=1, dodge=1),
        saves=Saves(fortitude=8, reflex=4, will=10),
        movement=Movement(land=30),
    )


@pytest.fixture
def low_con_druid(druid) -> BaseCharacter:
    """STR 10, DEX 14, CON 12."""
    return druid.model_copy(update={"ability": AbilityScores(str=10, dex=14, con=12, wis=18)})


@pytest.fixture
def leopard() -> Form:
    return get_form("leopard")


@pytest.fixture
def dire_wolf() -> Form:
    return get_form("dire-wolf")


@pytest.fixture
def small_air_elemental() -> Form:
    return get_form("small-air-elemental")


@pytest.fixture
def vegepygmy() -> Form:
    return get_form("vegepygmy")
