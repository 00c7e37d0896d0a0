"""Legality checks to run before computing a wild shape."""
from __future__ import annotations

from wildshape.mechanics.tiers import TIER_SIZES, get_available_tiers, is_size_allowed_for_tier
from wildshape.models.form import FormKind
from wildshape.models.playsheet import ComputeInput

# Tier family each form kind may use.
_KIND_FAMILY = {
    FormKind.ANIMAL: "is_beast",
    FormKind.MAGICAL_BEAST: "is_beast",
    FormKind.ELEMENTAL: "is_elemental",
    FormKind.PLANT: "is_plant",
}


def validate_compute_input(compute_input: ComputeInput) -> tuple[bool, str]:
    """Check EDL gating, tier/form fit, size legality and element choice."""
    base, form, tier = compute_input.base, compute_input.form, compute_input.tier
    edl = base.effective_druid_level

    if edl < 4:
        return False, f"Effective druid level {edl} grants no wild shape."

    if tier not in get_available_tiers(edl):
        return False, f"{tier.value} is not available at effective druid level {edl}."

    if not getattr(tier, _KIND_FAMILY[form.kind]):
        return False, f"{form.name} ({form.kind.value}) cannot be assumed with {tier.value}."

    required = form.requirements.min_edl
    if required is not None and edl < required:
        return False, f"{form.name} requires effective druid level {required}."

    size = compute_input.chosen_size
    if not is_size_allowed_for_tier(size, tier):
        allowed = ", ".join(s.value for s in TIER_SIZES[tier])
        return False, f"{tier.value} cannot assume {size.value} size (allowed: {allowed})."

    if form.kind == FormKind.ELEMENTAL and form.element and compute_input.element != form.element:
        return False, f"{form.name} is a {form.element.value} elemental, not {compute_input.element.value}."

    return True, ""
