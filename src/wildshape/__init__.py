"""Pathfinder 1e wild shape stat computation."""
from __future__ import annotations

from wildshape.mechanics.compute import compute_pf1e

__all__ = ["compute_pf1e"]
