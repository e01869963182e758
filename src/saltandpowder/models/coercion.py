"""Coercion helpers shared by the record validators.

Host records store numbers loosely (``"8"``, ``"3.0"``, ``8.0``); every
numeric field goes through ``as_int`` before it is clamped.
"""

from __future__ import annotations

from typing import Any


def as_int(value: Any) -> int:
    """Coerce host values (ints, floats, numeric strings) to int.

    Raises:
        ValueError: If the value is not numeric at all.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, str):
        return int(float(value.strip()))
    return int(value)


def clamp(value: int, low: int, high: int) -> int:
    """Clamp ``value`` into ``[low, high]``."""
    return max(low, min(high, value))


__all__ = ["as_int", "clamp"]
