"""Item records and the buckets the classifier sorts them into."""

from __future__ import annotations

from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from saltandpowder.core.constants import SPELL_LEVELS
from saltandpowder.models.coercion import as_int, clamp
from saltandpowder.models.enums import ItemType


class Item(BaseModel):
    """A possession of a character.

    The engine only reads ``type`` and, for spells, ``spell_level``. Levels
    outside 0-9 are clamped; a missing level stays ``None``. A missing image
    stays ``None`` here and is resolved when the sheet is projected.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(default_factory=lambda: uuid4().hex)
    name: str = Field(default="", description="Display name")
    type: ItemType = Field(description="Item document type")
    img: str | None = Field(default=None, description="Image path, if any")
    spell_level: int | None = Field(default=None, description="Spell level 0-9")

    @field_validator("spell_level", mode="before")
    @classmethod
    def clamp_spell_level(cls, value: Any) -> int | None:
        if value is None or value == "":
            return None
        return clamp(as_int(value), SPELL_LEVELS[0], SPELL_LEVELS[-1])

    @classmethod
    def from_system_data(cls, data: dict[str, Any]) -> Item:
        """Build an item from a host record (``system.spellLevel`` layout)."""
        system = data.get("system") or {}
        return cls(
            id=data.get("_id") or data.get("id") or uuid4().hex,
            name=data.get("name", ""),
            type=data["type"],
            img=data.get("img"),
            spell_level=system.get("spellLevel"),
        )


def _empty_spell_levels() -> dict[int, list[Item]]:
    return {level: [] for level in SPELL_LEVELS}


class ItemBuckets(BaseModel):
    """Display buckets produced by the item classifier.

    Attributes:
        gear: Items of type ``item``.
        weapons: Items of type ``weapon``.
        trained_skills: Items of type ``feature``.
        spells_by_level: Spells grouped by level, keys 0 to 9 always present.
        unleveled_spells: Spells without a level (empty under the drop policy).
    """

    model_config = ConfigDict(frozen=True)

    gear: list[Item] = Field(default_factory=list)
    weapons: list[Item] = Field(default_factory=list)
    trained_skills: list[Item] = Field(default_factory=list)
    spells_by_level: dict[int, list[Item]] = Field(default_factory=_empty_spell_levels)
    unleveled_spells: list[Item] = Field(default_factory=list)


__all__ = ["Item", "ItemBuckets"]
