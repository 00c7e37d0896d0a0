"""Shared utility functions."""
from __future__ import annotations


def safe_int(value, default: int = 0) -> int:
    """Coerce a stored value to int, or return default.

    Handles the common pattern where stored records hold numbers, numeric
    strings, empty strings or None for the same field.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return int(value)
    try:
        return int(str(value).strip())
    except ValueError:
        return default
