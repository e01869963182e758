"""Salt & Powder - character condition and dice-degradation engine.

Tracks a character's wounds, scars, stress and intoxication and turns each
skill's condition into the die it rolls. Records are immutable; every
transition returns the next record, and a session forwards the minimal patch
to whatever store the host provides.

Example:
    >>> from saltandpowder import Character, Skill, augment_die, drink
    >>> hero = Character(name="Anne Bonny", skills={"sea": Skill(value=6, max=8)})
    >>> hero = drink(hero)
    >>> hero.skills["sea"].value, hero.intoxication
    (8, <IntoxicationStage.DIZZY: 'dizzy'>)

Modules:
    core: Configuration, logging, constants and exceptions.
    models: Pydantic V2 records (Skill, Character, Item).
    engine: Condition transitions, item classifier, rolls, sheet projection.
    storage: In-memory persistence for characters.
"""

from __future__ import annotations

# Core
from saltandpowder.core.config import Settings, get_settings
from saltandpowder.core.exceptions import SaltAndPowderError
from saltandpowder.core.logging import configure_logging, get_logger

# Records
from saltandpowder.models import (
    ActorType,
    Character,
    IntoxicationStage,
    Item,
    ItemBuckets,
    ItemType,
    ScarSlot,
    Skill,
    UnleveledSpellPolicy,
)

# Engine
from saltandpowder.engine import (
    ConditionSession,
    SkillRoller,
    augment_die,
    build_sheet,
    classify,
    drink,
    reduce_die,
    rest,
    restore_to_max,
    toggle_scar,
    toggle_stress,
    toggle_wound,
)

# Storage
from saltandpowder.storage import InMemoryCharacterStore


__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Core
    "Settings",
    "get_settings",
    "SaltAndPowderError",
    "configure_logging",
    "get_logger",
    # Records
    "ActorType",
    "Character",
    "IntoxicationStage",
    "Item",
    "ItemBuckets",
    "ItemType",
    "ScarSlot",
    "Skill",
    "UnleveledSpellPolicy",
    # Engine
    "ConditionSession",
    "SkillRoller",
    "augment_die",
    "build_sheet",
    "classify",
    "drink",
    "reduce_die",
    "rest",
    "restore_to_max",
    "toggle_scar",
    "toggle_stress",
    "toggle_wound",
    # Storage
    "InMemoryCharacterStore",
]
