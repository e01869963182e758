"""Minimal update patches between two character records.

The persistence collaborator receives only the fields a transition changed,
nested the same way the record is, for example::

    {"skills": {"sea": {"wounds": 2}}}

Fields absent from a patch are left untouched when it is merged.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from saltandpowder.core.exceptions import ValidationError
from saltandpowder.models.character import Character


Patch = dict[str, Any]

# Collections the engine replaces wholesale rather than diffing element-wise
_OPAQUE_FIELDS = frozenset({"items"})


def diff(old: Mapping[str, Any], new: Mapping[str, Any]) -> Patch:
    """Nested difference of two plain mappings, keeping ``new``'s values."""
    patch: Patch = {}
    for key, value in new.items():
        if key not in old:
            patch[key] = value
            continue
        previous = old[key]
        if isinstance(value, Mapping) and isinstance(previous, Mapping):
            nested = diff(previous, value)
            if nested:
                patch[key] = nested
        elif value != previous:
            patch[key] = value
    return patch


def diff_character(old: Character, new: Character) -> Patch:
    """Patch carrying only the fields that differ between two characters.

    Returns:
        A JSON-compatible nested dict, empty when nothing changed.
    """
    before = old.model_dump(mode="json")
    after = new.model_dump(mode="json")
    patch: Patch = {}
    for key in _OPAQUE_FIELDS:
        if before.get(key) != after.get(key):
            patch[key] = after.get(key)
        before.pop(key, None)
        after.pop(key, None)
    patch.update(diff(before, after))
    return patch


def apply_patch(record: Mapping[str, Any], patch: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge ``patch`` into a copy of ``record``.

    Raises:
        ValidationError: If the patch is not a mapping.
    """
    if not isinstance(patch, Mapping):
        raise ValidationError(
            "Patch must be a mapping",
            field_name="patch",
            invalid_value=type(patch).__name__,
        )
    merged = dict(record)
    for key, value in patch.items():
        current = merged.get(key)
        if isinstance(value, Mapping) and isinstance(current, Mapping):
            merged[key] = apply_patch(current, value)
        else:
            merged[key] = value
    return merged


__all__ = ["Patch", "diff", "diff_character", "apply_patch"]
