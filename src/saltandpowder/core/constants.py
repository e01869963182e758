"""Game constants for Salt & Powder.

Track lengths and die sizes are fixed by the rules, so they live here rather
than in configuration.
"""

from __future__ import annotations

# =============================================================================
# Dice
# =============================================================================

DIE_SIZES: tuple[int, ...] = (4, 6, 8, 10)
"""Legal skill die sizes, smallest first."""

MIN_DIE_SIZE = DIE_SIZES[0]
"""A skill die never shrinks below a d4."""

MAX_DIE_SIZE = DIE_SIZES[-1]
"""A skill die never grows past a d10."""

DIE_STEP = 2
"""Faces gained or lost by one augment/reduce step."""

# =============================================================================
# Condition Tracks
# =============================================================================

MAX_WOUNDS = 3
"""Wound slots per skill."""

MAX_SCARS = 3
"""Scar slots per skill."""

MAX_STRESS = 4
"""Stress slots per character."""

# =============================================================================
# Skills & Items
# =============================================================================

SKILL_LABELS: dict[str, str] = {
    "steel": "SAP.Steel",
    "lead": "SAP.Lead",
    "sea": "SAP.Sea",
    "earth": "SAP.Earth",
    "influence": "SAP.Influence",
    "tradition": "SAP.Tradition",
}
"""Skill keys mapped to their localization keys, in sheet order."""

SPELL_LEVELS: tuple[int, ...] = tuple(range(10))
"""Spell levels 0 (cantrips) to 9."""

DEFAULT_ITEM_IMAGE = "icons/svg/item-bag.svg"
"""Image given to items that arrive without one."""


__all__ = [
    "DIE_SIZES",
    "MIN_DIE_SIZE",
    "MAX_DIE_SIZE",
    "DIE_STEP",
    "MAX_WOUNDS",
    "MAX_SCARS",
    "MAX_STRESS",
    "SKILL_LABELS",
    "SPELL_LEVELS",
    "DEFAULT_ITEM_IMAGE",
]
