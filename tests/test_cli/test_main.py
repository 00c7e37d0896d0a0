"""Tests for src/wildshape/cli/main.py."""
from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from wildshape.cli import display
from wildshape.cli.main import app

runner = CliRunner()

DRUID = """
level = 8
effective_druid_level = 8
bab = 6
ability = { str = 10, dex = 14, con = 12, int = 10, wis = 18, cha = 10 }
hp = { current = 60, max = 60 }
ac = { armor = 2, deflection = 1, dodge = 1 }
saves = { fortitude = 8, reflex = 4, will = 10 }
"""


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    monkeypatch.setattr(display.console, "width", 200)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[logging]\nlevel = "WARNING"\n')
    return path


@pytest.fixture
def druid_file(tmp_path):
    path = tmp_path / "druid.toml"
    path.write_text(DRUID)
    return path


def _invoke(config_file, *args):
    return runner.invoke(app, ["--config", str(config_file), *args])


class TestCompute:
    def test_json_output(self, config_file, druid_file):
        result = _invoke(
            config_file, "compute", str(druid_file), "dire-wolf",
            "--tier", "Beast Shape II", "--size", "Large", "--json",
        )
        assert result.exit_code == 0, result.output
        sheet = json.loads(result.output)
        assert sheet["ability"]["str"] == 14
        assert sheet["ability"]["con"] == 16
        assert sheet["movement"]["land"] == 50

    def test_default_tier_and_size(self, config_file, druid_file):
        result = _invoke(config_file, "compute", str(druid_file), "leopard", "--json")
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["size"] == "Medium"

    def test_rendered_output(self, config_file, druid_file):
        result = _invoke(config_file, "compute", str(druid_file), "dire-wolf", "--explain")
        assert result.exit_code == 0, result.output
        assert "Dire Wolf" in result.output
        assert "Bite" in result.output

    def test_storage_record_json(self, config_file, tmp_path):
        path = tmp_path / "druid.json"
        path.write_text(json.dumps({
            "baseStats": {"level": 6, "abilityScores": {"dex": 14}, "hp": 40},
            "combatStats": {"baseAttackBonus": 4},
        }))
        result = _invoke(config_file, "compute", str(path), "wolf", "--json")
        assert result.exit_code == 0, result.output

    def test_illegal_shape_fails(self, config_file, druid_file):
        result = _invoke(config_file, "compute", str(druid_file), "leopard", "--tier", "Beast Shape I", "--size", "Huge")
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_force_computes_anyway(self, config_file, druid_file):
        result = _invoke(
            config_file, "compute", str(druid_file), "leopard",
            "--tier", "Beast Shape I", "--size", "Huge", "--force", "--json",
        )
        assert result.exit_code == 0, result.output

    def test_unknown_form(self, config_file, druid_file):
        result = _invoke(config_file, "compute", str(druid_file), "tarrasque")
        assert result.exit_code == 1
        assert "Unknown form" in result.output

    def test_bad_tier(self, config_file, druid_file):
        result = _invoke(config_file, "compute", str(druid_file), "wolf", "--tier", "Beast Shape IX")
        assert result.exit_code == 1


class TestListings:
    def test_forms(self, config_file):
        result = _invoke(config_file, "forms")
        assert result.exit_code == 0
        assert "dire-wolf" in result.output

    def test_forms_by_kind(self, config_file):
        result = _invoke(config_file, "forms", "--kind", "Plant")
        assert result.exit_code == 0
        assert "vegepygmy" in result.output
        assert "dire-wolf" not in result.output

    def test_forms_bad_kind(self, config_file):
        assert _invoke(config_file, "forms", "--kind", "Ooze").exit_code == 1

    def test_tiers(self, config_file):
        result = _invoke(config_file, "tiers", "8")
        assert result.exit_code == 0
        assert "Beast Shape III" in result.output

    def test_tiers_too_low(self, config_file):
        result = _invoke(config_file, "tiers", "2")
        assert result.exit_code == 0
        assert "no wild shape" in result.output

    def test_ability(self, config_file):
        result = _invoke(config_file, "ability", "pounce")
        assert result.exit_code == 0
        assert "Pounce" in result.output

    def test_unknown_ability(self, config_file):
        assert _invoke(config_file, "ability", "laser eyes").exit_code == 1

    def test_ability_category(self, config_file):
        result = _invoke(config_file, "ability", "--category", "movement")
        assert result.exit_code == 0, result.output
        assert "Burrow" in result.output
        assert "Pounce" not in result.output

    def test_unknown_category(self, config_file):
        assert _invoke(config_file, "ability", "--category", "cosmic").exit_code == 1

    def test_ability_needs_name_or_category(self, config_file):
        assert _invoke(config_file, "ability").exit_code == 1


class TestMalformedCharacterFiles:
    @pytest.mark.parametrize("filename, content", [
        ("druid.json", "{not json"),
        ("druid.toml", "level = = 8"),
    ])
    def test_parse_error_reported(self, config_file, tmp_path, filename, content):
        path = tmp_path / filename
        path.write_text(content)
        result = _invoke(config_file, "compute", str(path), "wolf")
        assert result.exit_code == 1
        assert "Could not parse" in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)
