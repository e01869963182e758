"""Character condition tracker: stress, intoxication and bulk skill updates.

Like the skill tracker, every operation takes the current Character and
returns the next one. Operations on a single named skill go through
``apply_to_skill``, which is also what the update session uses.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from saltandpowder.core.constants import MAX_STRESS
from saltandpowder.core.exceptions import UnknownSkillError
from saltandpowder.core.logging import get_logger
from saltandpowder.engine.skills import restore_to_max
from saltandpowder.models.character import Character, Skill
from saltandpowder.models.enums import IntoxicationStage


logger = get_logger(__name__)

SkillOperation = Callable[..., Skill]


# =============================================================================
# Single-skill dispatch
# =============================================================================


def require_skill(character: Character, key: str) -> Skill:
    """Return the named skill.

    Raises:
        UnknownSkillError: If the character has no such skill.
    """
    skill = character.skill(key)
    if skill is None:
        raise UnknownSkillError(
            f"Character {character.name!r} has no skill {key!r}",
            skill=key,
            details={"known_skills": sorted(character.skills)},
        )
    return skill


def apply_to_skill(
    character: Character,
    key: str,
    operation: SkillOperation,
    *args: Any,
) -> Character:
    """Apply a skill transition to the named skill.

    Args:
        character: Current character record.
        key: Skill key, e.g. ``"sea"``.
        operation: A function from ``engine.skills``.
        *args: Extra arguments for the operation (slot state, marked flag).

    Returns:
        The character with that one skill replaced.

    Raises:
        UnknownSkillError: If the character has no such skill.
    """
    skill = require_skill(character, key)
    updated = operation(skill, *args)
    if updated == skill:
        return character
    logger.debug(
        "Skill updated",
        character_id=character.id,
        skill=key,
        operation=getattr(operation, "__name__", repr(operation)),
    )
    return character.model_copy(update={"skills": {**character.skills, key: updated}})


# =============================================================================
# Stress
# =============================================================================


def stress_slots(character: Character) -> tuple[bool, ...]:
    """Marked state of each stress slot."""
    return tuple(character.stress > index for index in range(MAX_STRESS))


def toggle_stress(character: Character, active: bool) -> Character:
    """Relieve stress when an active slot is clicked, otherwise add stress."""
    if active and character.stress > 0:
        stress = character.stress - 1
    elif character.stress < MAX_STRESS:
        stress = character.stress + 1
    else:
        return character
    return character.model_copy(update={"stress": stress})


def toggle_stress_slot(character: Character, index: int) -> Character:
    """Toggle the stress slot at ``index``, reading its state first."""
    return toggle_stress(character, character.stress > index)


# =============================================================================
# Recovery & intoxication
# =============================================================================


def restore_skills(character: Character) -> Character:
    """Restore every unwounded skill to its baseline die."""
    skills = {key: restore_to_max(skill) for key, skill in character.skills.items()}
    if skills == character.skills:
        return character
    return character.model_copy(update={"skills": skills})


def drink(character: Character) -> Character:
    """Take a drink.

    Unwounded skills recover their full die, then the intoxication stage
    moves one step along sober, dizzy, sick, drunk. The step is judged on
    the stage before the drink, so a sick character becomes drunk and no
    further; a drunk character stays drunk.
    """
    before = character.intoxication
    restored = restore_skills(character)
    if before == IntoxicationStage.SICK:
        stage = IntoxicationStage.DRUNK
    elif before == IntoxicationStage.DIZZY:
        stage = IntoxicationStage.SICK
    elif before == IntoxicationStage.SOBER:
        stage = IntoxicationStage.DIZZY
    else:
        stage = before
    logger.info(
        "Drink taken",
        character_id=character.id,
        stage_before=str(before),
        stage_after=str(stage),
    )
    return restored.model_copy(update={"intoxication": stage})


def rest(character: Character) -> Character:
    """Sober up. Stress, wounds, scars and dice are untouched."""
    if character.intoxication == IntoxicationStage.SOBER:
        return character
    logger.info("Rested", character_id=character.id, stage_before=str(character.intoxication))
    return character.model_copy(update={"intoxication": IntoxicationStage.SOBER})


def intoxication_flags(stage: IntoxicationStage) -> dict[str, bool]:
    """Flags a host record stores for a stage; every lower stage is raised too."""
    return {
        "dizzy": stage.rank >= IntoxicationStage.DIZZY.rank,
        "sick": stage.rank >= IntoxicationStage.SICK.rank,
        "drunk": stage.rank >= IntoxicationStage.DRUNK.rank,
    }


# =============================================================================
# Sheet mode
# =============================================================================


def toggle_skill_editing(character: Character) -> Character:
    """Switch the sheet's skill edit mode on or off."""
    return character.model_copy(update={"editing_skills": not character.editing_skills})


__all__ = [
    "SkillOperation",
    "require_skill",
    "apply_to_skill",
    "stress_slots",
    "toggle_stress",
    "toggle_stress_slot",
    "restore_skills",
    "drink",
    "rest",
    "intoxication_flags",
    "toggle_skill_editing",
]
