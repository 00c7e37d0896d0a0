"""Damage dice expressions — parsing and formatting, no rolling."""
from __future__ import annotations

import re
from dataclasses import dataclass

# Pattern: NdM or a flat N, optional +/-X
_DICE_RE = re.compile(
    r"^(\d+)(?:d(\d+))?"
    r"([+-]\d+)?$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class DiceExpression:
    count: int
    sides: int | None = None
    modifier: int = 0

    @property
    def dice(self) -> str:
        """The dice part only: '2d6', or '1' for a flat point of damage."""
        if self.sides is None:
            return str(self.count)
        return f"{self.count}d{self.sides}"

    @property
    def average(self) -> float:
        if self.sides is None:
            return float(self.count + self.modifier)
        return self.count * (self.sides + 1) / 2 + self.modifier

    def __str__(self) -> str:
        if self.modifier > 0:
            return f"{self.dice}+{self.modifier}"
        if self.modifier < 0:
            return f"{self.dice}{self.modifier}"
        return self.dice


def parse(expression: str) -> DiceExpression:
    """Parse '1d6', '2d6+3', '1D8' or a flat '1'."""
    expr = expression.replace(" ", "")
    m = _DICE_RE.match(expr)
    if not m:
        raise ValueError(f"Invalid dice expression: {expression}")

    count = int(m.group(1))
    sides = int(m.group(2)) if m.group(2) else None
    modifier = int(m.group(3)) if m.group(3) else 0
    return DiceExpression(count=count, sides=sides, modifier=modifier)


def normalize(expression: str) -> str:
    """Canonical spelling of a dice expression; unparsable input comes back stripped."""
    try:
        return str(parse(expression))
    except ValueError:
        return expression.strip()


def average_damage(expression: str, bonus: int = 0) -> float:
    return parse(expression).average + bonus
