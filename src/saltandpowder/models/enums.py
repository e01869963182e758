"""Enumeration types for the Salt & Powder condition engine."""

from __future__ import annotations

from enum import StrEnum


class ActorType(StrEnum):
    """Kinds of actor a sheet can belong to."""

    CHARACTER = "character"
    NPC = "npc"


class ItemType(StrEnum):
    """Item document types known to the classifier."""

    ITEM = "item"
    WEAPON = "weapon"
    FEATURE = "feature"
    SPELL = "spell"


class IntoxicationStage(StrEnum):
    """Ordered intoxication stages, escalated by drinking and cleared by rest.

    Members are declared in escalation order; ``rank`` exposes that order so
    stages can be compared without relying on string ordering.
    """

    SOBER = "sober"
    DIZZY = "dizzy"
    SICK = "sick"
    DRUNK = "drunk"

    @property
    def rank(self) -> int:
        """Position of the stage in the escalation order (SOBER is 0)."""
        return list(IntoxicationStage).index(self)

    @classmethod
    def from_flags(cls, *, dizzy: bool = False, sick: bool = False, drunk: bool = False) -> IntoxicationStage:
        """Build a stage from the boolean flags a host record stores.

        The most advanced raised flag wins.
        """
        if drunk:
            return cls.DRUNK
        if sick:
            return cls.SICK
        if dizzy:
            return cls.DIZZY
        return cls.SOBER


class ScarSlot(StrEnum):
    """Logical state of a single scar slot.

    Slots below ``used_scars`` are burned, slots below ``scars`` are filled,
    the rest are empty.
    """

    EMPTY = "empty"
    FILLED = "filled"
    BURNED = "burned"


class UnleveledSpellPolicy(StrEnum):
    """What the item classifier does with a spell that has no level."""

    CATCH_ALL = "catch_all"
    DROP = "drop"


__all__ = [
    "ActorType",
    "ItemType",
    "IntoxicationStage",
    "ScarSlot",
    "UnleveledSpellPolicy",
]
