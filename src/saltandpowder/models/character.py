"""Skill and character condition records.

Both records are frozen pydantic models: transitions in
``saltandpowder.engine`` never mutate them, they return the next record.
Construction clamps every counter into its legal range instead of rejecting
the input, mirroring how the rules treat track lengths and die sizes as fixed
constants rather than user errors.
"""

from __future__ import annotations

from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from saltandpowder.core.constants import (
    DIE_SIZES,
    MAX_SCARS,
    MAX_STRESS,
    MAX_WOUNDS,
    SKILL_LABELS,
)
from saltandpowder.models.coercion import as_int, clamp
from saltandpowder.models.enums import ActorType, IntoxicationStage
from saltandpowder.models.items import Item


# =============================================================================
# Die sizes
# =============================================================================


def snap_die_size(value: Any) -> int:
    """Snap a number to the nearest legal die size.

    Ties go to the smaller die, so a 5 becomes a d4 and a 7 a d6.

    Example:
        >>> snap_die_size(12)
        10
        >>> snap_die_size("8")
        8
    """
    size = as_int(value)
    return min(DIE_SIZES, key=lambda legal: (abs(legal - size), legal))


# =============================================================================
# Skill
# =============================================================================


class Skill(BaseModel):
    """Die size and condition counters of one named skill.

    Attributes:
        value: Current die size, one of 4, 6, 8, 10.
        max: Die size the skill restores to.
        wounds: Marked wounds, 0 to 3.
        scars: Scars held, 0 to 3.
        used_scars: Burned scars, never more than ``scars``.

    Example:
        >>> Skill(value=7, wounds=5)
        Skill(value=6, max=6, wounds=3, scars=0, used_scars=0)
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    value: int = Field(default=6, description="Current die size")
    max: int = Field(default=6, description="Baseline die size")
    wounds: int = Field(default=0, description="Marked wounds (0-3)")
    scars: int = Field(default=0, description="Scars held (0-3)")
    used_scars: int = Field(default=0, description="Burned scars (0-scars)")

    @field_validator("value", "max", mode="before")
    @classmethod
    def snap_die(cls, value: Any) -> int:
        return snap_die_size(value)

    @field_validator("wounds", mode="before")
    @classmethod
    def clamp_wounds(cls, value: Any) -> int:
        return clamp(as_int(value), 0, MAX_WOUNDS)

    @field_validator("scars", mode="before")
    @classmethod
    def clamp_scars(cls, value: Any) -> int:
        return clamp(as_int(value), 0, MAX_SCARS)

    @model_validator(mode="before")
    @classmethod
    def clamp_used_scars(cls, data: Any) -> Any:
        """Keep ``used_scars`` within ``[0, scars]``.

        Runs before the field validators, so the scar count is clamped here
        as well to know the ceiling.
        """
        if isinstance(data, dict) and "used_scars" in data:
            scars = clamp(as_int(data.get("scars", 0)), 0, MAX_SCARS)
            data = {**data, "used_scars": clamp(as_int(data["used_scars"]), 0, scars)}
        return data

    @property
    def is_wounded(self) -> bool:
        """Whether any wound is marked."""
        return self.wounds > 0


def default_skills() -> dict[str, Skill]:
    """One fresh skill per known skill key."""
    return {key: Skill() for key in SKILL_LABELS}


# =============================================================================
# Character
# =============================================================================


class Character(BaseModel):
    """Whole-character condition plus the per-skill records.

    Attributes:
        id: Identifier used by the persistence collaborator.
        name: Display name.
        type: Character or NPC.
        skills: Skill key to Skill record.
        stress: Stress level, 0 to 4.
        intoxication: Current intoxication stage.
        editing_skills: Whether the sheet is in skill edit mode.
        items: Possessions, classified by ``engine.items``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(default_factory=lambda: uuid4().hex)
    name: str = Field(default="New Character")
    type: ActorType = Field(default=ActorType.CHARACTER)
    skills: dict[str, Skill] = Field(default_factory=default_skills)
    stress: int = Field(default=0, description="Stress level (0-4)")
    intoxication: IntoxicationStage = Field(default=IntoxicationStage.SOBER)
    editing_skills: bool = Field(default=False)
    items: list[Item] = Field(default_factory=list)

    @field_validator("stress", mode="before")
    @classmethod
    def clamp_stress(cls, value: Any) -> int:
        return clamp(as_int(value), 0, MAX_STRESS)

    def skill(self, key: str) -> Skill | None:
        """Look up a skill by key, ``None`` if the character lacks it."""
        return self.skills.get(key)

    @classmethod
    def from_system_data(cls, data: dict[str, Any]) -> Character:
        """Build a character from a host actor record.

        The host layout keeps stress under ``system.stress.value``, the
        intoxication stage as three ``system.drunk`` flags and the edit mode
        as ``system.editingSkills``.

        Args:
            data: Actor record with ``name``, ``type``, ``system`` and ``items``.

        Returns:
            The equivalent Character.
        """
        system = data.get("system") or {}
        drunk = system.get("drunk") or {}
        stress = system.get("stress") or {}
        return cls(
            id=data.get("_id") or data.get("id") or uuid4().hex,
            name=data.get("name", "New Character"),
            type=data.get("type", ActorType.CHARACTER),
            skills={
                key: Skill.model_validate(raw)
                for key, raw in (system.get("skills") or {}).items()
            },
            stress=stress.get("value", 0),
            intoxication=IntoxicationStage.from_flags(
                dizzy=bool(drunk.get("dizzy")),
                sick=bool(drunk.get("sick")),
                drunk=bool(drunk.get("drunk")),
            ),
            editing_skills=bool(system.get("editingSkills", False)),
            items=[Item.from_system_data(raw) for raw in data.get("items") or []],
        )


__all__ = [
    "Skill",
    "Character",
    "default_skills",
    "snap_die_size",
]
