"""Skill condition tracker: wounds, scars and die size of a single skill.

Every function takes the current Skill and returns the next one. Bounds are
enforced by clamping or by leaving the record unchanged, never by raising.

Wound slot ``i`` (0-based) is marked while ``wounds > i``. Scar slots are
read from two counters: slots below ``used_scars`` are burned, slots below
``scars`` are filled, the rest are empty.
"""

from __future__ import annotations

from saltandpowder.core.constants import (
    DIE_STEP,
    MAX_DIE_SIZE,
    MAX_SCARS,
    MAX_WOUNDS,
    MIN_DIE_SIZE,
)
from saltandpowder.core.exceptions import InvariantViolationError
from saltandpowder.core.logging import get_logger
from saltandpowder.models.character import Skill
from saltandpowder.models.coercion import clamp
from saltandpowder.models.enums import ScarSlot


logger = get_logger(__name__)


# =============================================================================
# Wounds
# =============================================================================


def wound_slots(skill: Skill) -> tuple[bool, ...]:
    """Marked state of each wound slot."""
    return tuple(skill.wounds > index for index in range(MAX_WOUNDS))


def toggle_wound(skill: Skill, marked: bool) -> Skill:
    """Clear a wound when a marked slot is clicked, otherwise add one.

    Args:
        skill: Current skill record.
        marked: Whether the clicked wound slot is currently marked.

    Returns:
        The skill with ``wounds`` moved by one, or unchanged at a bound.
    """
    if marked and skill.wounds > 0:
        wounds = skill.wounds - 1
    elif skill.wounds < MAX_WOUNDS:
        wounds = skill.wounds + 1
    else:
        logger.debug("Wound track full", wounds=skill.wounds)
        return skill
    return skill.model_copy(update={"wounds": wounds})


def toggle_wound_slot(skill: Skill, index: int) -> Skill:
    """Toggle the wound slot at ``index``, reading its marked state first."""
    return toggle_wound(skill, skill.wounds > index)


# =============================================================================
# Scars
# =============================================================================


def scar_slot(skill: Skill, index: int) -> ScarSlot:
    """Logical state of the scar slot at ``index``.

    Example:
        >>> scar_slot(Skill(scars=2, used_scars=1), 0)
        <ScarSlot.BURNED: 'burned'>
    """
    if index < skill.used_scars:
        return ScarSlot.BURNED
    if index < skill.scars:
        return ScarSlot.FILLED
    return ScarSlot.EMPTY


def scar_slots(skill: Skill) -> tuple[ScarSlot, ...]:
    """States of all scar slots, lowest first."""
    return tuple(scar_slot(skill, index) for index in range(MAX_SCARS))


def toggle_scar(skill: Skill, slot: ScarSlot) -> Skill:
    """Apply a click on a scar slot in the given state.

    The branches are checked in a fixed order:

    1. A burned slot while scars remain drops one scar and sets the burned
       count to the remaining scar count.
    2. A filled slot burns it: one scar fewer, one more burned.
    3. Otherwise a new scar is gained while there is room.
    4. Otherwise nothing changes.

    ``used_scars`` is clamped to the resulting scar count afterwards, so
    burning the last unburned scar leaves every remaining scar burned.

    Args:
        skill: Current skill record.
        slot: State of the clicked slot, see ``scar_slot``.

    Returns:
        The next skill record.
    """
    scars, used = skill.scars, skill.used_scars
    if slot == ScarSlot.BURNED and scars > 0:
        scars -= 1
        used = scars
    elif slot == ScarSlot.FILLED:
        scars = max(0, scars - 1)
        used += 1
    elif scars < MAX_SCARS:
        scars += 1
    else:
        logger.debug("Scar track full", scars=scars)
        return skill

    used = clamp(used, 0, scars)
    logger.debug("Scar toggled", slot=str(slot), scars=scars, used_scars=used)
    return skill.model_copy(update={"scars": scars, "used_scars": used})


def toggle_scar_slot(skill: Skill, index: int) -> Skill:
    """Toggle the scar slot at ``index``, reading its state first."""
    return toggle_scar(skill, scar_slot(skill, index))


def check_scar_invariant(skill: Skill) -> None:
    """Verify ``0 <= used_scars <= scars <= MAX_SCARS``.

    Raises:
        InvariantViolationError: If the counters are inconsistent.
    """
    if not 0 <= skill.used_scars <= skill.scars <= MAX_SCARS:
        raise InvariantViolationError(
            "Burned scars exceed scars held",
            scars=skill.scars,
            used_scars=skill.used_scars,
        )


# =============================================================================
# Die size
# =============================================================================


def reduce_die(skill: Skill) -> Skill:
    """Step the die down one size; a d4 stays a d4."""
    if skill.value <= MIN_DIE_SIZE:
        return skill
    return skill.model_copy(update={"value": skill.value - DIE_STEP})


def augment_die(skill: Skill) -> Skill:
    """Step the die up one size; a d10 stays a d10."""
    if skill.value >= MAX_DIE_SIZE:
        return skill
    return skill.model_copy(update={"value": skill.value + DIE_STEP})


def restore_to_max(skill: Skill) -> Skill:
    """Reset the die to its baseline unless the skill is wounded.

    Wounds outlast recovery, so a wounded skill keeps its current die.
    """
    if skill.wounds > 0 or skill.value == skill.max:
        return skill
    return skill.model_copy(update={"value": skill.max})


__all__ = [
    "wound_slots",
    "toggle_wound",
    "toggle_wound_slot",
    "scar_slot",
    "scar_slots",
    "toggle_scar",
    "toggle_scar_slot",
    "check_scar_invariant",
    "reduce_die",
    "augment_die",
    "restore_to_max",
]
