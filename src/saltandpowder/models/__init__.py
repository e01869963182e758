"""Pydantic V2 records for the Salt & Powder condition engine.

Submodules:
    enums: ActorType, ItemType, IntoxicationStage, ScarSlot, UnleveledSpellPolicy.
    character: Skill and Character records with clamping validators.
    items: Item records and the ItemBuckets produced by classification.
    coercion: Numeric coercion shared by the validators.

Example:
    >>> from saltandpowder.models import Character, Skill
    >>> hero = Character(name="Anne", skills={"sea": Skill(value=8, max=8)})
    >>> hero.skills["sea"].value
    8
"""

from __future__ import annotations

from saltandpowder.models.character import (
    Character,
    Skill,
    default_skills,
    snap_die_size,
)
from saltandpowder.models.coercion import as_int, clamp
from saltandpowder.models.enums import (
    ActorType,
    IntoxicationStage,
    ItemType,
    ScarSlot,
    UnleveledSpellPolicy,
)
from saltandpowder.models.items import Item, ItemBuckets


__all__ = [
    # Enumerations
    "ActorType",
    "IntoxicationStage",
    "ItemType",
    "ScarSlot",
    "UnleveledSpellPolicy",
    # Records
    "Character",
    "Skill",
    "Item",
    "ItemBuckets",
    # Helpers
    "as_int",
    "clamp",
    "default_skills",
    "snap_die_size",
]
