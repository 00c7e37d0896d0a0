"""Template form library and special ability glossary, stored as TOML."""
from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any, Iterable

from wildshape.models.ability import AbilityCategory, SpecialAbility
from wildshape.models.form import Form

logger = logging.getLogger(__name__)

CONTENT_DIR = Path(__file__).parent


def load_toml(filepath: Path) -> dict[str, Any]:
    with open(filepath, "rb") as f:
        return tomllib.load(f)


def load_forms_from_dir(form_dir: Path) -> dict[str, Form]:
    """Every form in a directory; a file holds one form or a [[forms]] list."""
    forms: dict[str, Form] = {}
    for f in sorted(form_dir.glob("*.toml")):
        data = load_toml(f)
        for entry in data.get("forms", [data]):
            form = Form.model_validate(entry)
            if form.id in forms:
                logger.warning("Form %r in %s overrides an earlier definition", form.id, f)
            forms[form.id] = form
    return forms


def load_all_forms(extra_dirs: Iterable[str | Path] = ()) -> dict[str, Form]:
    """Bundled template forms, then user-authored forms from extra_dirs (later wins)."""
    forms = load_forms_from_dir(CONTENT_DIR / "forms")
    for extra in extra_dirs:
        path = Path(extra).expanduser()
        if not path.is_dir():
            logger.warning("Form directory %s does not exist, skipping", path)
            continue
        forms.update(load_forms_from_dir(path))
    return forms


def get_form(form_id: str, extra_dirs: Iterable[str | Path] = ()) -> Form:
    forms = load_all_forms(extra_dirs)
    if form_id not in forms:
        raise KeyError(f"Unknown form: {form_id}")
    return forms[form_id]


def load_special_abilities() -> dict[str, SpecialAbility]:
    data = load_toml(CONTENT_DIR / "special_abilities.toml")
    abilities = (SpecialAbility.model_validate(entry) for entry in data.get("abilities", []))
    return {a.name: a for a in abilities}


def get_ability_description(name: str) -> SpecialAbility | None:
    """Look up a special ability by name, ignoring case, spaces and underscores."""
    abilities = load_special_abilities()
    if name in abilities:
        return abilities[name]
    wanted = name.replace("_", " ").strip().lower()
    for key, ability in abilities.items():
        if key.lower() == wanted:
            return ability
    return None


def get_abilities_by_category(category: AbilityCategory | str) -> list[SpecialAbility]:
    category = AbilityCategory(category)
    return [a for a in load_special_abilities().values() if a.category == category]
