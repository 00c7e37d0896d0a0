"""Tests for src/wildshape/config.py."""
from __future__ import annotations

import logging

from wildshape.config import CONFIG_ENV_VAR, DEFAULT_CONFIG, load_config, setup_logging


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "missing.toml") == DEFAULT_CONFIG

    def test_file_overrides_defaults(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('[logging]\nlevel = "DEBUG"\n')
        config = load_config(path)
        assert config["logging"]["level"] == "DEBUG"
        assert config["library"]["extra_form_dirs"] == []

    def test_env_var(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.toml"
        path.write_text('[library]\nextra_form_dirs = ["~/forms"]\n')
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert load_config()["library"]["extra_form_dirs"] == ["~/forms"]

    def test_defaults_not_mutated(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('[logging]\nlevel = "ERROR"\n')
        load_config(path)
        assert DEFAULT_CONFIG["logging"]["level"] == "WARNING"


class TestSetupLogging:
    def test_verbose_forces_debug(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
        setup_logging("ERROR", verbose=True)
        assert calls["level"] == logging.DEBUG

    def test_named_level(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
        setup_logging("info")
        assert calls["level"] == logging.INFO

    def test_unknown_level_falls_back(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
        setup_logging("LOUD")
        assert calls["level"] == logging.WARNING
