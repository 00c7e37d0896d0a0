"""Typer CLI application."""
from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError

from wildshape.config import load_config, setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="wildshape",
    help="Pathfinder 1e wild shape stat calculator",
    no_args_is_help=True,
)

_state: dict[str, Any] = {"extra_form_dirs": []}


def _load_record(path: Path) -> dict[str, Any]:
    """A character file in TOML or JSON."""
    if path.suffix.lower() == ".json":
        return json.loads(path.read_text(encoding="utf-8"))
    from wildshape.content.loader import load_toml

    return load_toml(path)


def _load_character(path: Path):
    from wildshape.adapters import character_to_base_character
    from wildshape.models.character import BaseCharacter

    record = _load_record(path)
    # Storage records are camelCase and nest stats under baseStats
    if "baseStats" in record or "combatStats" in record:
        return character_to_base_character(record)
    return BaseCharacter.model_validate(record)


def _fail(message: str) -> None:
    from wildshape.cli.display import Display

    Display().show_error(message)
    raise typer.Exit(code=1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.toml"),
) -> None:
    settings = load_config(config)
    setup_logging(settings["logging"].get("level", "WARNING"), verbose=verbose)
    _state["extra_form_dirs"] = list(settings["library"].get("extra_form_dirs", []))


@app.command()
def compute(
    character_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Character record (TOML or JSON)"),
    form_id: str = typer.Argument(..., help="Form id from the library"),
    tier: Optional[str] = typer.Option(None, "--tier", "-t", help="Spell tier, e.g. 'Beast Shape II'"),
    size: Optional[str] = typer.Option(None, "--size", "-s", help="Size to assume (defaults to the form's size)"),
    element: Optional[str] = typer.Option(None, "--element", "-e", help="Element for elemental body"),
    explain: bool = typer.Option(False, "--explain", help="Show where every modifier came from"),
    force: bool = typer.Option(False, "--force", help="Compute even if the shape is not legal"),
    as_json: bool = typer.Option(False, "--json", help="Print the playsheet as JSON"),
) -> None:
    """Compute the stat block for a druid in an assumed form."""
    from wildshape.cli.display import Display
    from wildshape.content.loader import get_form
    from wildshape.engine.validators import validate_compute_input
    from wildshape.mechanics.compute import compute_pf1e
    from wildshape.mechanics.tiers import best_tier_for_kind
    from wildshape.models.playsheet import ComputeInput

    try:
        base = _load_character(character_file)
        form = get_form(form_id, _state["extra_form_dirs"])
    except KeyError as e:
        _fail(str(e.args[0]))
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        _fail(f"Could not parse character file {character_file}: {e}")
    except ValidationError as e:
        _fail(f"Invalid character file {character_file}:\n{e}")

    if tier is None:
        best = best_tier_for_kind(base.effective_druid_level, form.kind)
        if best is None:
            _fail(f"Effective druid level {base.effective_druid_level} grants no shape for {form.kind.value} forms.")
        tier = best.value

    try:
        compute_input = ComputeInput(base=base, form=form, tier=tier, chosen_size=size, element=element)
    except ValidationError as e:
        _fail(str(e))

    ok, reason = validate_compute_input(compute_input)
    if not ok:
        if not force:
            _fail(reason)
        logger.warning("Computing illegal shape: %s", reason)

    sheet = compute_pf1e(compute_input)
    if as_json:
        typer.echo(sheet.model_dump_json(indent=2))
        return
    Display(show_explain=explain).show_playsheet(sheet, form, compute_input.tier)


@app.command()
def forms(
    kind: Optional[str] = typer.Option(None, "--kind", "-k", help="Only show forms of this kind"),
) -> None:
    """List the form library."""
    from wildshape.cli.display import Display
    from wildshape.content.loader import load_all_forms
    from wildshape.models.form import FormKind

    library = list(load_all_forms(_state["extra_form_dirs"]).values())
    if kind:
        try:
            wanted = FormKind(kind)
        except ValueError:
            _fail(f"Unknown form kind: {kind}")
        library = [f for f in library if f.kind == wanted]
    Display().show_forms(sorted(library, key=lambda f: (f.kind.value, f.name)))


@app.command()
def tiers(edl: int = typer.Argument(..., min=0, help="Effective druid level")) -> None:
    """Show the wild shape tiers and sizes open at an effective druid level."""
    from wildshape.cli.display import Display
    from wildshape.mechanics.tiers import get_available_tiers, get_tier_for_edl

    Display().show_tiers(edl, get_tier_for_edl(edl), get_available_tiers(edl))


@app.command()
def ability(
    name: Optional[str] = typer.Argument(None, help="Special ability name, e.g. 'pounce'"),
    category: Optional[str] = typer.Option(None, "--category", help="List every ability in a category"),
) -> None:
    """Describe a special ability, or list a category of them."""
    from wildshape.cli.display import Display
    from wildshape.content.loader import get_abilities_by_category, get_ability_description

    if category:
        try:
            abilities = get_abilities_by_category(category.capitalize())
        except ValueError:
            _fail(f"Unknown ability category: {category}")
        Display().show_abilities(category.capitalize(), abilities)
        return
    if not name:
        _fail("Give an ability name or --category.")

    found = get_ability_description(name)
    if found is None:
        _fail(f"Unknown special ability: {name}")
    Display().show_ability(found)


if __name__ == "__main__":
    app()
