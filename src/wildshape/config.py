"""Configuration loading."""
from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_ENV_VAR = "WILDSHAPE_CONFIG"

DEFAULT_CONFIG: dict[str, Any] = {
    "logging": {"level": "WARNING"},
    "library": {"extra_form_dirs": []},
}


def _config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path(__file__).parent.parent.parent / "config.toml"


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load config.toml, layered over the defaults. A missing file means defaults."""
    config_path = path or _config_path()
    config = {section: dict(values) for section, values in DEFAULT_CONFIG.items()}
    if config_path.exists():
        with open(config_path, "rb") as f:
            for section, values in tomllib.load(f).items():
                if isinstance(values, dict):
                    config.setdefault(section, {}).update(values)
                else:
                    config[section] = values
    return config


def setup_logging(level: str | int = "WARNING", verbose: bool = False) -> None:
    """Configure root logging; --verbose forces DEBUG."""
    if verbose:
        level = logging.DEBUG
    elif isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
