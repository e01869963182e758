"""Condition engine for Salt & Powder.

Submodules:
    skills: Per-skill transitions (wounds, scars, die size, restore).
    condition: Character-wide transitions (stress, drink, rest, edit mode).
    items: Item classifier.
    dice: Roll formulas and d20-based evaluation.
    patch: Minimal patches between character records.
    sheet: Read-only sheet projection and skill label localization.
    session: Async update session in front of the persistence collaborator.

Example:
    >>> from saltandpowder.engine import augment_die, drink
    >>> from saltandpowder.models import Character, Skill
    >>> augment_die(Skill(value=6)).value
    8
    >>> drink(Character()).intoxication
    <IntoxicationStage.DIZZY: 'dizzy'>
"""

from __future__ import annotations

# =============================================================================
# Skill Condition Tracker
# =============================================================================
from saltandpowder.engine.skills import (
    augment_die,
    check_scar_invariant,
    reduce_die,
    restore_to_max,
    scar_slot,
    scar_slots,
    toggle_scar,
    toggle_scar_slot,
    toggle_wound,
    toggle_wound_slot,
    wound_slots,
)

# =============================================================================
# Character Condition Tracker
# =============================================================================
from saltandpowder.engine.condition import (
    apply_to_skill,
    drink,
    intoxication_flags,
    require_skill,
    rest,
    restore_skills,
    stress_slots,
    toggle_skill_editing,
    toggle_stress,
    toggle_stress_slot,
)

# =============================================================================
# Items, Dice, Patches
# =============================================================================
from saltandpowder.engine.dice import (
    SkillRoller,
    SkillRollRequest,
    SkillRollResult,
    can_roll,
    skill_roll,
)
from saltandpowder.engine.items import classify, new_item
from saltandpowder.engine.patch import Patch, apply_patch, diff_character

# =============================================================================
# Sheet & Session
# =============================================================================
from saltandpowder.engine.sheet import (
    DictLocalizer,
    Localizer,
    SheetView,
    SkillView,
    build_sheet,
    skill_label,
)
from saltandpowder.engine.session import CharacterStore, ConditionSession


__all__ = [
    # Skills
    "augment_die",
    "check_scar_invariant",
    "reduce_die",
    "restore_to_max",
    "scar_slot",
    "scar_slots",
    "toggle_scar",
    "toggle_scar_slot",
    "toggle_wound",
    "toggle_wound_slot",
    "wound_slots",
    # Character
    "apply_to_skill",
    "drink",
    "intoxication_flags",
    "require_skill",
    "rest",
    "restore_skills",
    "stress_slots",
    "toggle_skill_editing",
    "toggle_stress",
    "toggle_stress_slot",
    # Items
    "classify",
    "new_item",
    # Dice
    "SkillRoller",
    "SkillRollRequest",
    "SkillRollResult",
    "can_roll",
    "skill_roll",
    # Patches
    "Patch",
    "apply_patch",
    "diff_character",
    # Sheet
    "DictLocalizer",
    "Localizer",
    "SheetView",
    "SkillView",
    "build_sheet",
    "skill_label",
    # Session
    "CharacterStore",
    "ConditionSession",
]
