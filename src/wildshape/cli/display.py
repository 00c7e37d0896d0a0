"""Rich terminal rendering for playsheets, the form library and tier tables."""
from __future__ import annotations

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from wildshape.mechanics.ability_scores import ABILITY_NAMES, modifier
from wildshape.mechanics.dice import average_damage
from wildshape.mechanics.tiers import TIER_SIZES, TierAvailability
from wildshape.models.ability import SpecialAbility
from wildshape.models.form import Form, Tier
from wildshape.models.playsheet import ComputedPlaysheet, Explain

console = Console()


def _signed(value: int) -> str:
    return f"+{value}" if value >= 0 else str(value)


class Display:
    def __init__(self, width: int = 80, show_explain: bool = False):
        self.console = console
        self.width = width
        self.show_explain = show_explain

    def show_playsheet(self, sheet: ComputedPlaysheet, form: Form, tier: Tier) -> None:
        title = Text()
        title.append(form.name, style="bold green")
        title.append(f"  {sheet.size.value} {form.kind.value}", style="dim")
        title.append(f"  ({tier.value})", style="cyan")
        self.console.print(Panel(title, border_style="green", box=box.DOUBLE, width=self.width))

        abilities = Table(box=box.SIMPLE_HEAVY, border_style="cyan", show_edge=False)
        for name in ABILITY_NAMES:
            abilities.add_column(name.upper(), justify="center")
        abilities.add_row(*(
            f"{sheet.ability.get(name)} ({_signed(modifier(sheet.ability.get(name)))})"
            for name in ABILITY_NAMES
        ))
        self.console.print(abilities)

        ac = sheet.ac
        b = ac.breakdown
        defense = Table(title="Defense", box=box.ROUNDED, border_style="cyan", width=self.width)
        defense.add_column("Stat", style="bold")
        defense.add_column("Value")
        defense.add_row("AC", f"{ac.total}  touch {ac.touch}, flat-footed {ac.flat_footed}")
        defense.add_row(
            "",
            f"[dim]10 {_signed(b.armor)} armor {_signed(b.shield)} shield {_signed(b.dex)} Dex "
            f"{_signed(b.size)} size {_signed(b.natural)} natural {_signed(b.deflection)} deflection "
            f"{_signed(b.dodge)} dodge {_signed(b.misc)} misc[/dim]",
        )
        defense.add_row("HP", f"{sheet.hp.current}/{sheet.hp.max}")
        defense.add_row(
            "Saves",
            f"Fort {_signed(sheet.saves.fortitude)}, Ref {_signed(sheet.saves.reflex)}, "
            f"Will {_signed(sheet.saves.will)}",
        )
        self.console.print(defense)

        attacks = Table(title="Attacks", box=box.ROUNDED, border_style="red", width=self.width)
        attacks.add_column("Attack", style="bold")
        attacks.add_column("To Hit", justify="right")
        attacks.add_column("Damage")
        attacks.add_column("Avg", justify="right", style="dim")
        attacks.add_column("Traits", style="yellow")
        for atk in sheet.attacks:
            name = atk.name if atk.count == 1 else f"{atk.count} x {atk.name}"
            if not atk.primary:
                name += " [dim](secondary)[/dim]"
            try:
                avg = f"{average_damage(atk.damage_dice, atk.damage_bonus):.1f}"
            except ValueError:
                avg = "-"
            attacks.add_row(name, _signed(atk.attack_bonus), atk.damage, avg, ", ".join(atk.traits))
        if not sheet.attacks:
            attacks.add_row("[dim]No natural attacks[/dim]", "", "", "", "")
        self.console.print(attacks)

        self.console.print(f"[bold]Speed:[/bold] {self._format_movement(sheet)}")
        self.console.print(f"[bold]Senses:[/bold] {self._format_senses(sheet) or 'none'}")
        self.console.print(
            f"[bold]Skills:[/bold] Stealth {_signed(sheet.skills.stealth)}, Fly {_signed(sheet.skills.fly)} (size)"
        )
        if sheet.traits:
            self.console.print(f"[bold]Special:[/bold] {', '.join(sheet.traits)}")

        if self.show_explain:
            self.show_explain_trail(sheet)

    def show_explain_trail(self, sheet: ComputedPlaysheet) -> None:
        table = Table(title="How these numbers were reached", box=box.SIMPLE, border_style="dim")
        table.add_column("Target")
        table.add_column("Source", style="dim")
        table.add_column("Label")
        table.add_column("Delta", justify="right")
        entries: list[Explain] = [*sheet.explain, *sheet.ac.explain, *sheet.saves.explain]
        for atk in sheet.attacks:
            entries.extend(e.model_copy(update={"target": f"{atk.name}.{e.target}"}) for e in atk.explain)
        for e in entries:
            delta = _signed(e.delta) if isinstance(e.delta, int) else e.delta
            table.add_row(e.target, e.source, e.label, delta)
        self.console.print(table)

    @staticmethod
    def _format_movement(sheet: ComputedPlaysheet) -> str:
        m = sheet.movement
        parts = [f"{m.land} ft."]
        for mode in ("burrow", "climb", "swim"):
            speed = getattr(m, mode)
            if speed:
                parts.append(f"{mode} {speed} ft.")
        if m.fly:
            maneuver = f" ({m.fly_maneuver.value.lower()})" if m.fly_maneuver else ""
            parts.append(f"fly {m.fly} ft.{maneuver}")
        return ", ".join(parts)

    @staticmethod
    def _format_senses(sheet: ComputedPlaysheet) -> str:
        s = sheet.senses
        parts = []
        if s.darkvision:
            parts.append(f"darkvision {s.darkvision} ft.")
        if s.low_light:
            parts.append("low-light vision")
        if s.scent:
            parts.append("scent")
        if s.blindsense:
            parts.append(f"blindsense {s.blindsense} ft.")
        if s.tremorsense:
            parts.append(f"tremorsense {s.tremorsense} ft.")
        return ", ".join(parts)

    def show_forms(self, forms: list[Form]) -> None:
        table = Table(title="Form Library", box=box.ROUNDED, border_style="cyan")
        table.add_column("ID", style="bold")
        table.add_column("Name")
        table.add_column("Kind")
        table.add_column("Size")
        table.add_column("Tier", style="dim")
        table.add_column("Min EDL", justify="right")
        for form in forms:
            tier = form.requirements.spell_equivalent
            min_edl = form.requirements.min_edl
            table.add_row(
                form.id,
                form.name,
                form.kind.value,
                form.base_size.value,
                tier.value if tier else "",
                str(min_edl) if min_edl is not None else "",
            )
        self.console.print(table)

    def show_tiers(self, edl: int, availability: TierAvailability | None, tiers: list[Tier]) -> None:
        if availability is None:
            self.show_info(f"Effective druid level {edl} grants no wild shape.")
            return
        table = Table(title=f"Wild Shape at EDL {edl}", box=box.ROUNDED, border_style="green")
        table.add_column("Tier", style="bold")
        table.add_column("Sizes")
        best = {availability.animal, availability.elemental, availability.plant}
        for tier in tiers:
            label = f"[green]{tier.value}[/green]" if tier in best else tier.value
            table.add_row(label, ", ".join(s.value for s in TIER_SIZES[tier]))
        self.console.print(table)

    def show_ability(self, ability: SpecialAbility) -> None:
        self.console.print(Panel(
            ability.description,
            title=f"[bold]{ability.name}[/bold] [dim]({ability.category.value})[/dim]",
            border_style="yellow",
            width=self.width,
        ))

    def show_abilities(self, category: str, abilities: list[SpecialAbility]) -> None:
        table = Table(title=f"{category} Abilities", box=box.ROUNDED, border_style="yellow")
        table.add_column("Name", style="bold")
        table.add_column("Description")
        for a in sorted(abilities, key=lambda a: a.name):
            table.add_row(a.name, a.description)
        self.console.print(table)

    def show_error(self, message: str) -> None:
        self.console.print(f"[bold red]Error:[/bold red] {message}")

    def show_info(self, message: str) -> None:
        self.console.print(f"[cyan]{message}[/cyan]")
